"""Logging setup.

Verbose mode starts from the DEBUG environment variable and can be forced by
`init_logger`. Handlers are shared: every logger returned by `get_logger` writes
to the screen and, optionally, to a log file.
"""

import logging
import os

from .ansi import LEVEL_STYLES, STATUS_STYLES, colorize, should_colorize

__all__ = [
    "LogObjects",
    "StatusFormatter",
    "get_logger",
    "init_logger",
    "is_debug",
    "set_debug",
]

VERBOSE_FORMAT = r"%(name)s - %(message)s // %(filename)s:%(lineno)d"
FILE_FORMAT = r"%(asctime)s [%(levelname)s] %(name)s :: %(message)s :: %(filename)s:%(lineno)d"


class LogObjects:
    """Process-wide logging state."""

    verbose: bool = bool(os.environ.get("DEBUG"))
    handlers: list[logging.Handler] = []


def is_debug() -> bool:
    """Return True when verbose logging is on."""
    return LogObjects.verbose


def set_debug(value: bool) -> None:
    """Switch verbose logging (affects loggers created afterwards)."""
    LogObjects.verbose = value


class StatusFormatter(logging.Formatter):
    """Screen formatter.

    Records carrying a `status` attribute (the debug mode outcome) get the
    color of that outcome, other records are colored by level.
    """

    def __init__(self, verbose: bool = False, use_colors: bool = False) -> None:
        super().__init__(VERBOSE_FORMAT if verbose else r"%(message)s")
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        if not self.use_colors:
            return text
        status = getattr(record, "status", None)
        if status in STATUS_STYLES:
            return colorize(text, *STATUS_STYLES[status])
        return colorize(text, *LEVEL_STYLES.get(record.levelno, ()))


def _drop_handlers() -> None:
    """Detach the current handlers from every known logger and close them."""
    loggers = [logger for logger in logging.Logger.manager.loggerDict.values() if isinstance(logger, logging.Logger)]
    for handler in LogObjects.handlers:
        for logger in loggers:
            logger.removeHandler(handler)
        handler.close()
    LogObjects.handlers.clear()


def init_logger(filename: str | None = None, force_debug: bool = False) -> None:
    """Initialize the logging system.

    Args:
        filename: Optional filename to log to
        force_debug: If True, force verbose mode
    """
    if force_debug:
        set_debug(True)

    _drop_handlers()
    if filename:
        file_handler = logging.FileHandler(filename)
        file_handler.setFormatter(logging.Formatter(fmt=FILE_FORMAT))
        LogObjects.handlers.append(file_handler)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(StatusFormatter(verbose=is_debug(), use_colors=should_colorize(stream_handler.stream)))
    LogObjects.handlers.append(stream_handler)


def get_logger(name: str = "firedebug", level: int | None = None) -> logging.Logger:
    """Return a named logger wired to the shared handlers.

    Args:
        name (str): logger's name
        level (int): logger's level (DEBUG in verbose mode, WARNING otherwise, if not set)
    """
    logger = logging.getLogger(name)
    if level is None:
        logger.setLevel(logging.DEBUG if is_debug() else logging.WARNING)
    else:
        logger.setLevel(level)
    logger.propagate = False
    for handler in LogObjects.handlers:
        if handler not in logger.handlers:
            logger.addHandler(handler)
    return logger
