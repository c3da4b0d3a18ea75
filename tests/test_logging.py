import logging

from firedebug.logging_setup import LogObjects, get_logger, init_logger, is_debug, set_debug


def test_debug_state():
    previous = is_debug()
    try:
        set_debug(False)
        assert is_debug() is False
        set_debug(True)
        assert is_debug() is True
    finally:
        set_debug(previous)


def test_get_logger_level():
    previous = is_debug()
    try:
        set_debug(False)
        assert get_logger("firedebug.test_quiet").level == logging.WARNING
        set_debug(True)
        assert get_logger("firedebug.test_verbose").level == logging.DEBUG
        assert get_logger("firedebug.test_forced", logging.ERROR).level == logging.ERROR
    finally:
        set_debug(previous)


def test_handlers_not_duplicated():
    log = get_logger("firedebug.test_handlers")
    get_logger("firedebug.test_handlers")
    assert len(log.handlers) == len(LogObjects.handlers)
    assert log.propagate is False


def test_file_logging(tmp_path):
    log_file = tmp_path / "firedebug.log"
    init_logger(str(log_file), force_debug=True)
    try:
        get_logger("firedebug.test_file").warning("written to %s", "file")
        for handler in LogObjects.handlers:
            handler.flush()
        assert "[WARNING] firedebug.test_file :: written to file" in log_file.read_text()
    finally:
        init_logger("/dev/null", force_debug=True)


def test_reinit_closes_and_detaches_old_handlers(tmp_path):
    init_logger(str(tmp_path / "first.log"), force_debug=True)
    try:
        log = get_logger("firedebug.test_reinit")
        old_file = next(h for h in LogObjects.handlers if isinstance(h, logging.FileHandler))

        init_logger(str(tmp_path / "second.log"), force_debug=True)

        assert old_file.stream is None
        assert old_file not in log.handlers
        assert not any(h in log.handlers for h in LogObjects.handlers)
        get_logger("firedebug.test_reinit")
        assert log.handlers == LogObjects.handlers
    finally:
        init_logger("/dev/null", force_debug=True)
