"""Example host application wiring debug mode into its startup hook."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from .configurator import set_debug_mode_for_development
from .logging_setup import get_logger

if TYPE_CHECKING:
    from .models import DebugModeStatus
    from .store import KeyValueStore

__all__ = ["Application"]


class Application:
    """Minimal host with a launch hook and registered plugins.

    Args:
        bundle_identifier: identifier of the running build
        store: the platform preferences store
        plugins: name -> registration callable, invoked in order by `register_plugins`
    """

    def __init__(
        self,
        bundle_identifier: str,
        store: KeyValueStore,
        plugins: dict[str, Callable[[Application], None]] | None = None,
        output: Callable[[str], object] = print,
    ) -> None:
        self.bundle_identifier = bundle_identifier
        self.store = store
        self.plugins = dict(plugins or {})
        self.output = output
        self.log = get_logger("app")
        self.registered: list[str] = []
        self.startup_steps: list[str] = []
        self.debug_mode: DebugModeStatus | None = None

    def launch(self) -> bool:
        """Startup hook, called once by the platform."""
        # Set to True to enable Firebase Analytics debug mode
        self.debug_mode = set_debug_mode_for_development(
            True,
            store=self.store,
            identifier=lambda: self.bundle_identifier,
            log=self.log,
            output=self.output,
        )
        self.startup_steps.append("debug_mode")

        self.register_plugins()
        return True

    def register_plugins(self) -> None:
        """Register every plugin, in declaration order."""
        for name, register in self.plugins.items():
            register(self)
            self.registered.append(name)
            self.log.debug("registered %s", name)
        self.startup_steps.append("plugins")
