"""Shared constants for firedebug."""

import os
from pathlib import Path

__all__ = [
    "APP_ID_ENV",
    "AUTHORITATIVE_KEYS",
    "CONFIG_ENV",
    "CONFIG_FILE",
    "DEBUG_FLAG_KEYS",
    "DEFAULT_STORE_FILE",
    "DEV_MARKER",
    "LEGACY_KEYS",
    "STATUS_DISABLED",
    "STATUS_ENABLED",
    "STATUS_SKIPPED",
]

# Keys actually read by the analytics SDK
AUTHORITATIVE_KEYS = (
    "/google/firebase/debug_mode",
    "/google/measurement/debug_mode",
)

# Alternate spellings, only ever cleared
LEGACY_KEYS = (
    "FIRAnalyticsDebugEnabled",
    "FIRDebugEnabled",
    "FirebaseDebugEnabled",
    "FirebaseDebugModeEnabled",
    "GoogleDebugMode",
)

DEBUG_FLAG_KEYS = AUTHORITATIVE_KEYS + LEGACY_KEYS

DEV_MARKER = ".dev"

# Console status lines
STATUS_ENABLED = "Firebase Debug Mode: ENABLED for development flavor"
STATUS_DISABLED = "Firebase Debug Mode: DISABLED for development flavor"
STATUS_SKIPPED = "Firebase Debug Mode: Not applied (not development flavor)"

# Environment overrides
APP_ID_ENV = "FIREDEBUG_APP_ID"
CONFIG_ENV = "FIREDEBUG_CONFIG"

# Config & data paths - XDG with fallback to ~/.config and ~/.local/share
_xdg_config_home = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
_xdg_data_home = Path(os.environ.get("XDG_DATA_HOME") or Path.home() / ".local" / "share")
CONFIG_FILE = _xdg_config_home / "firedebug" / "config.toml"
DEFAULT_STORE_FILE = _xdg_data_home / "firedebug" / "defaults.json"
