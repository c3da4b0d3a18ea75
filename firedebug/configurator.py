"""Debug mode toggling for development builds.

Only identifiers containing the development marker are affected. On those,
every known debug flag is cleared first, then the authoritative ones are set
back to `True` when debug mode is wanted. Other flavors are left untouched.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from .constants import AUTHORITATIVE_KEYS, DEBUG_FLAG_KEYS, DEV_MARKER, STATUS_DISABLED, STATUS_ENABLED, STATUS_SKIPPED
from .identifier import is_development
from .logging_setup import get_logger
from .models import DebugModeStatus

if TYPE_CHECKING:
    import logging

    from .store import KeyValueStore

__all__ = ["DebugModeConfigurator", "set_debug_mode_for_development"]

IdentifierSource = str | Callable[[], str | None]

_STATUS_LINES = {
    DebugModeStatus.ENABLED: STATUS_ENABLED,
    DebugModeStatus.DISABLED: STATUS_DISABLED,
    DebugModeStatus.SKIPPED: STATUS_SKIPPED,
}


class DebugModeConfigurator:
    """Applies the debug flags to a store.

    Args:
        store: the persistent preferences store
        identifier: the application identifier, or a callable returning it
        marker: substring identifying development flavors
        log: logger, defaults to the "firedebug" one
        output: receives the human readable status line
    """

    def __init__(
        self,
        store: KeyValueStore,
        identifier: IdentifierSource,
        marker: str = DEV_MARKER,
        log: logging.Logger | None = None,
        output: Callable[[str], object] = print,
    ) -> None:
        self.store = store
        self._identifier = identifier
        self.marker = marker
        self.log = log or get_logger()
        self.output = output

    @property
    def identifier(self) -> str:
        """The current application identifier (empty if unknown)."""
        if callable(self._identifier):
            return self._identifier() or ""
        return self._identifier or ""

    def configure(self, enabled: bool) -> DebugModeStatus:
        """Reset the debug flags, then enable them if `enabled`.

        Nothing is touched unless the identifier is a development one.
        """
        identifier = self.identifier
        if not is_development(identifier, self.marker):
            self.log.debug("%r doesn't contain %r", identifier, self.marker)
            return self._notify(DebugModeStatus.SKIPPED)

        for key in DEBUG_FLAG_KEYS:
            self.store.remove(key)

        if enabled:
            for key in AUTHORITATIVE_KEYS:
                self.store.set(key, True)
            status = DebugModeStatus.ENABLED
        else:
            status = DebugModeStatus.DISABLED

        self._notify(status)
        self.store.flush()
        return status

    def _notify(self, status: DebugModeStatus) -> DebugModeStatus:
        message = _STATUS_LINES[status]
        self.log.info(message, extra={"status": status})
        self.output(message)
        return status


def set_debug_mode_for_development(
    enabled: bool,
    *,
    store: KeyValueStore,
    identifier: IdentifierSource,
    marker: str = DEV_MARKER,
    log: logging.Logger | None = None,
    output: Callable[[str], object] = print,
) -> DebugModeStatus:
    """Configure debug mode in one call, meant for application startup hooks."""
    return DebugModeConfigurator(store, identifier, marker=marker, log=log, output=output).configure(enabled)
