"""Command line client for firedebug."""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import TYPE_CHECKING

import shtab

from .ansi import ABSENT_STYLE, PRESENT_STYLE, colorize, should_colorize
from .config import Settings, load_settings
from .configurator import DebugModeConfigurator
from .constants import DEBUG_FLAG_KEYS, DEV_MARKER
from .identifier import is_development, resolve_identifier
from .logging_setup import get_logger, init_logger
from .models import ExitCode, FiredebugError, StoreError
from .store import JsonFileStore

if TYPE_CHECKING:
    import logging

__all__ = ["get_parser", "main", "run_cli"]

TOML_FILE = {
    "bash": "_shtab_firedebug_compgen_TOMLFiles",
    "zsh": "_files -g '(*.toml|*.TOML)'",
    "tcsh": "f:*.toml",
}

PREAMBLE = {
    "bash": """
# $1=COMP_WORDS[1]
_shtab_firedebug_compgen_TOMLFiles() {
  compgen -d -- $1  # recurse into subdirs
  compgen -f -X '!*?.toml' -- $1
  compgen -f -X '!*?.TOML' -- $1
}
""",
    "zsh": "",
    "tcsh": "",
}


def get_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(prog="firedebug", description="Toggle Firebase debug mode flags for development builds")
    shtab.add_argument_to(parser, ["--print-completion"], preamble=PREAMBLE)
    parser.add_argument("--app-id", help="Application identifier (default: $FIREDEBUG_APP_ID or config)")
    parser.add_argument("--store", help="JSON preferences file holding the flags", metavar="filename").complete = shtab.FILE
    parser.add_argument("--config", help="Use a different configuration file", metavar="filename").complete = TOML_FILE
    parser.add_argument("--marker", help=f"Development flavor marker (default: {DEV_MARKER!r})")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    parser.add_argument("--log-file", help="Also log to this file", metavar="filename").complete = shtab.FILE

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("enable", help="Enable debug mode on development builds")
    subparsers.add_parser("disable", help="Disable debug mode on development builds")
    subparsers.add_parser("apply", help="Apply the `enabled` setting from the configuration")
    subparsers.add_parser("status", help="Print the current value of every debug flag")
    return parser


def print_status(store: JsonFileStore, identifier: str, marker: str) -> None:
    """Print every debug flag with its value."""
    use_colors = should_colorize(sys.stdout)
    flavor = "development" if is_development(identifier, marker) else "not development"
    print(f"Application: {identifier or '<unknown>'} ({flavor})")
    print(f"Store: {store.path}")
    for key in DEBUG_FLAG_KEYS:
        if key in store:
            value = repr(store.get(key))
            style = PRESENT_STYLE
        else:
            value = "<absent>"
            style = ABSENT_STYLE
        print(f"  {key:35s} {colorize(value, *style) if use_colors else value}")


async def run_cli(args: argparse.Namespace, log: logging.Logger) -> ExitCode:
    """Run the requested command and return the exit code."""
    try:
        settings = load_settings(args.config, log)
    except FiredebugError:
        return ExitCode.CONFIG_ERROR

    identifier = resolve_identifier(args.app_id, settings=settings)
    marker = args.marker or settings.marker
    store_path = args.store or settings.store

    try:
        store = await JsonFileStore.aopen(store_path, log=log)
    except StoreError:
        return ExitCode.STORE_ERROR
    except OSError as e:
        log.error("Can't read %s: %s", store_path, e)
        return ExitCode.STORE_ERROR

    if args.command == "status":
        print_status(store, identifier, marker)
        return ExitCode.SUCCESS

    enabled = _wanted_state(args.command, settings)
    configurator = DebugModeConfigurator(store, identifier, marker=marker, log=log)
    try:
        configurator.configure(enabled)
    except OSError as e:
        log.error("Can't write %s: %s", store.path, e)
        return ExitCode.STORE_ERROR
    return ExitCode.SUCCESS


def _wanted_state(command: str, settings: Settings) -> bool:
    if command == "enable":
        return True
    if command == "disable":
        return False
    return settings.enabled


def main(argv: list[str] | None = None) -> None:
    """Entry point for the firedebug command."""
    parser = get_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        sys.exit(ExitCode.SUCCESS if e.code == 0 else ExitCode.USAGE_ERROR)

    init_logger(filename=args.log_file, force_debug=args.debug)
    log = get_logger("firedebug")

    try:
        code = asyncio.run(run_cli(args, log))
    except KeyboardInterrupt:
        code = ExitCode.USAGE_ERROR
    sys.exit(code)


if __name__ == "__main__":
    main()
