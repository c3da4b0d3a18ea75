"""Terminal colors for log records and the `status` command."""

import logging
import os
import sys
from typing import TextIO

from .models import DebugModeStatus

__all__ = [
    "ABSENT_STYLE",
    "LEVEL_STYLES",
    "PRESENT_STYLE",
    "STATUS_STYLES",
    "colorize",
    "should_colorize",
]

_ESC = "\x1b["
RESET = f"{_ESC}0m"

BOLD = "1"
DIM = "2"
RED = "31"
GREEN = "32"
YELLOW = "33"

LEVEL_STYLES: dict[int, tuple[str, ...]] = {
    logging.WARNING: (YELLOW,),
    logging.ERROR: (RED,),
    logging.CRITICAL: (RED, BOLD),
}

# The outcome of a configuration run stands out from regular logs
STATUS_STYLES: dict[DebugModeStatus, tuple[str, ...]] = {
    DebugModeStatus.ENABLED: (GREEN, BOLD),
    DebugModeStatus.DISABLED: (YELLOW, BOLD),
    DebugModeStatus.SKIPPED: (DIM,),
}

PRESENT_STYLE = (GREEN,)
ABSENT_STYLE = (DIM,)


def should_colorize(stream: TextIO | None = None) -> bool:
    """Tell if `stream` (stderr by default) accepts colors.

    NO_COLOR wins over FORCE_COLOR, otherwise only TTYs get colors.
    """
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    if stream is None:
        stream = sys.stderr
    return hasattr(stream, "isatty") and stream.isatty()


def colorize(text: str, *codes: str) -> str:
    """Wrap `text` in the given ANSI codes."""
    if not codes:
        return text
    return f"{_ESC}{';'.join(codes)}m{text}{RESET}"
