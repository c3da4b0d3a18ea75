"""Settings loading and loose value coercion.

Settings come from a TOML file with a single `[firedebug]` table::

    [firedebug]
    enabled = true
    app_id = "com.example.app.dev"
    marker = ".dev"
    store = "~/.local/share/firedebug/defaults.json"
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .constants import CONFIG_ENV, CONFIG_FILE, DEFAULT_STORE_FILE, DEV_MARKER
from .models import FiredebugError

if TYPE_CHECKING:
    import logging

__all__ = ["BOOL_FALSE_STRINGS", "Settings", "coerce_to_bool", "load_settings"]

BOOL_FALSE_STRINGS = frozenset({"false", "no", "off", "0", "disabled"})

ConfigValueType = float | bool | str | list | dict


def coerce_to_bool(value: ConfigValueType | None, default: bool = False) -> bool:
    """Coerce a value to boolean, handling loose typing.

    Args:
        value: The value to coerce
        default: Default value if value is None

    Returns:
        The boolean value

    Behavior:
        - None → default
        - Empty string → False
        - Explicit falsy strings ("false", "no", "off", "0", "disabled") → False
        - Any other non-empty string → True
        - Non-string values → bool(value)
    """
    if value is None:
        return default
    if isinstance(value, str):
        if not value.strip():
            return False
        return value.lower().strip() not in BOOL_FALSE_STRINGS
    return bool(value)


@dataclass
class Settings:
    """Resolved firedebug settings."""

    enabled: bool = True
    app_id: str = ""
    marker: str = DEV_MARKER
    store: Path = field(default_factory=lambda: DEFAULT_STORE_FILE)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        """Build settings from the `[firedebug]` table (unknown keys are ignored)."""
        store = data.get("store")
        return cls(
            enabled=coerce_to_bool(data.get("enabled"), default=True),
            app_id=str(data.get("app_id") or ""),
            marker=str(data.get("marker") or DEV_MARKER),
            store=Path(os.path.expandvars(str(store))).expanduser() if store else DEFAULT_STORE_FILE,
        )


def _config_path(path: str | Path | None) -> tuple[Path, bool]:
    """Return the config file to read and whether it was explicitly requested."""
    if path:
        return Path(os.path.expandvars(str(path))).expanduser(), True
    from_env = os.environ.get(CONFIG_ENV)
    if from_env:
        return Path(os.path.expandvars(from_env)).expanduser(), True
    return CONFIG_FILE, False


def load_settings(path: str | Path | None, log: logging.Logger) -> Settings:
    """Load settings from `path`, `$FIREDEBUG_CONFIG` or the default location.

    A missing default config file is not an error.

    Raises:
        FiredebugError: explicit file not found, or invalid TOML
    """
    fname, explicit = _config_path(path)
    if not fname.exists():
        if explicit:
            log.critical("Config file not found: %s", fname)
            raise FiredebugError(f"Config file not found: {fname}")
        log.debug("No config at %s, using defaults", fname)
        return Settings()

    log.info("Loading %s", fname)
    try:
        with fname.open("rb") as f:
            config = tomllib.load(f)
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        log.critical("Problem reading %s: %s", fname, e)
        raise FiredebugError(f"Problem reading {fname}: {e}") from e

    section = config.get("firedebug", {})
    if not isinstance(section, dict):
        log.critical("[firedebug] must be a table in %s", fname)
        raise FiredebugError(f"[firedebug] must be a table in {fname}")
    return Settings.from_dict(section)
