"""Project and workspace root discovery by marker file."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from .config import DEFAULT_SETTINGS, ResolverSettings
from .logging import get_logger
from .paths import lexical_absolute

logger = get_logger("roots")


def has_project_config(directory: Path, settings: ResolverSettings | None = None) -> bool:
    markers = (settings or DEFAULT_SETTINGS).project_markers
    return any((directory / marker).exists() for marker in markers)


def get_nearest_config(
    start: str | os.PathLike[str], settings: ResolverSettings | None = None
) -> Optional[str]:
    """Walk upwards from ``start`` (inclusive) to the first directory with a marker.

    Relative starts are made absolute against the working directory first so the
    walk reaches every ancestor.
    """
    current = lexical_absolute(start)
    logger.debug("Searching for project config from %s", current)
    while True:
        if has_project_config(current, settings):
            logger.debug("Found project config in %s", current)
            return str(current)
        parent = current.parent
        if parent == current:
            return None
        current = parent


def get_workspace_root(
    package_root: str | os.PathLike[str], settings: ResolverSettings | None = None
) -> Optional[str]:
    """Return the nearest marked ancestor strictly above ``package_root``."""
    root = lexical_absolute(package_root)
    parent = root.parent
    if parent == root:
        return None
    return get_nearest_config(parent, settings)


__all__ = ["get_nearest_config", "get_workspace_root", "has_project_config"]
