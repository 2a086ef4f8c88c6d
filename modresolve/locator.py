"""Dependency package resolution mirroring the node_modules lookup algorithm."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Sequence

from .config import DEFAULT_SETTINGS, ResolverSettings
from .logging import get_logger
from .paths import canonicalize

logger = get_logger("locator")


def package_path(
    root: str, package_name: str, settings: ResolverSettings | None = None
) -> str:
    """Return ``<root>/<dependency dir>/<package_name>`` without checking that it exists."""
    dependency_dir = (settings or DEFAULT_SETTINGS).dependency_dir
    return f"{root}/{dependency_dir}/{package_name}"


class PackageLocator:
    """Finds where a dependency package is physically installed.

    ``locate`` walks from the start directory towards the filesystem root and
    returns the first ``<dir>/node_modules/<name>`` that exists, so a closer
    installation always shadows a more distant one. ``locate_multi`` tries
    several start directories in priority order.
    """

    def __init__(self, settings: ResolverSettings | None = None) -> None:
        self._settings = settings or DEFAULT_SETTINGS

    @property
    def dependency_dir(self) -> str:
        return self._settings.dependency_dir

    def locate(self, start_dir: str | os.PathLike[str], package_name: str) -> Optional[Path]:
        current = Path(start_dir)
        if not current.is_absolute():
            # Unresolvable relative inputs are walked as given.
            current = canonicalize(current) or current

        while True:
            candidate = current / self.dependency_dir / package_name
            logger.debug("Probing %s", candidate)
            if candidate.exists():
                logger.debug("Resolved package '%s' at %s", package_name, candidate)
                return candidate
            parent = current.parent
            if parent == current:
                break
            current = parent

        logger.debug("Package '%s' not found above %s", package_name, start_dir)
        return None

    def locate_multi(
        self, start_dirs: Sequence[str | os.PathLike[str]], package_name: str
    ) -> Optional[Path]:
        for start_dir in start_dirs:
            found = self.locate(start_dir, package_name)
            if found is not None:
                return found
        return None


def resolve_package_path(start_dir: str | os.PathLike[str], package_name: str) -> Optional[Path]:
    return PackageLocator().locate(start_dir, package_name)


def resolve_package_path_multi(
    start_dirs: Sequence[str | os.PathLike[str]], package_name: str
) -> Optional[Path]:
    return PackageLocator().locate_multi(start_dirs, package_name)


__all__ = [
    "PackageLocator",
    "package_path",
    "resolve_package_path",
    "resolve_package_path_multi",
]
