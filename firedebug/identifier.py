"""Application identifier (environment descriptor) resolution."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import TYPE_CHECKING

from .constants import APP_ID_ENV, DEV_MARKER

if TYPE_CHECKING:
    from .config import Settings

__all__ = ["is_development", "resolve_identifier"]


def resolve_identifier(
    explicit: str | None = None,
    environ: Mapping[str, str] | None = None,
    settings: Settings | None = None,
) -> str:
    """Return the first non-empty identifier among the given sources.

    Order: `explicit`, the `FIREDEBUG_APP_ID` environment variable, the `app_id` setting.
    Defaults to an empty string, which never matches the development marker.
    """
    if explicit:
        return explicit
    if environ is None:
        environ = os.environ
    from_env = environ.get(APP_ID_ENV)
    if from_env:
        return from_env
    if settings is not None and settings.app_id:
        return settings.app_id
    return ""


def is_development(identifier: str, marker: str = DEV_MARKER) -> bool:
    """Tell if `identifier` belongs to a development flavor."""
    return marker in identifier
