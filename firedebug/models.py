"""Common types for firedebug."""

from enum import IntEnum, StrEnum

__all__ = [
    "DebugModeStatus",
    "ExitCode",
    "FiredebugError",
    "PlainTypes",
    "StoreError",
]

PlainTypes = bool | float | str | None | dict[str, "PlainTypes"] | list["PlainTypes"]


class FiredebugError(Exception):
    """Used for errors which already triggered logging."""


class StoreError(FiredebugError):
    """The persistent store could not be read."""


class DebugModeStatus(StrEnum):
    """Outcome of a debug mode configuration."""

    ENABLED = "enabled"
    DISABLED = "disabled"
    SKIPPED = "skipped"


class ExitCode(IntEnum):
    """Standard exit codes for the firedebug client."""

    SUCCESS = 0
    USAGE_ERROR = 1  # Invalid arguments
    CONFIG_ERROR = 2  # Unreadable or missing configuration
    STORE_ERROR = 3  # Store can't be loaded or flushed
