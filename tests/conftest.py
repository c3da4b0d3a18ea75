" generic fixtures "
import logging

import pytest

from firedebug.constants import DEBUG_FLAG_KEYS
from firedebug.store import MemoryStore


def pytest_configure():
    "Runs once before all"
    from firedebug.logging_setup import init_logger

    init_logger("/dev/null", force_debug=True)


@pytest.fixture
def test_logger():
    """Provide a silent logger for tests."""
    logger = logging.getLogger("test_firedebug")
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())
    logger.propagate = False
    return logger


@pytest.fixture
def store():
    "An empty in-memory store"
    return MemoryStore()


@pytest.fixture
def stale_store():
    "A store holding every debug flag plus an unrelated preference"
    data = {key: "stale" for key in DEBUG_FLAG_KEYS}
    data["theme"] = "dark"
    return MemoryStore(data)


@pytest.fixture
def outputs():
    "Collects status lines"
    return []
