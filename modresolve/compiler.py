"""Locating the platform-specific compiler binary and querying its version."""

from __future__ import annotations

import os
import platform
import subprocess
from pathlib import Path
from typing import Optional, Sequence

from .config import DEFAULT_SETTINGS, ResolverSettings
from .errors import CompilerNotFoundError, CompilerVersionError, UnsupportedPlatformError
from .logging import get_logger
from .paths import canonicalize

logger = get_logger("compiler")

_ARM64_MACHINES = frozenset({"arm64", "aarch64"})

# (system, is_arm64) -> subfolder; None matches any architecture.
_SUBFOLDERS: Sequence[tuple[str, Optional[bool], str]] = (
    ("darwin", True, "darwinarm64"),
    ("darwin", None, "darwin"),
    ("linux", True, "linuxarm64"),
    ("linux", None, "linux"),
    ("windows", None, "win32"),
)


def platform_subfolder(system: str | None = None, machine: str | None = None) -> str:
    """Return the compiler subfolder for a host; defaults to the running host."""
    system = system if system is not None else platform.system()
    machine = machine if machine is not None else platform.machine()
    system_key = system.lower()
    is_arm64 = machine.lower() in _ARM64_MACHINES
    for table_system, table_arm64, subfolder in _SUBFOLDERS:
        if table_system != system_key:
            continue
        if table_arm64 is None or table_arm64 == is_arm64:
            return subfolder
    logger.error("No compiler build for %s/%s", system, machine)
    raise UnsupportedPlatformError(system, machine)


def compiler_candidate(
    root: str | os.PathLike[str], subfolder: str, settings: ResolverSettings | None = None
) -> Path:
    settings = settings or DEFAULT_SETTINGS
    return (
        Path(root)
        / settings.dependency_dir
        / settings.compiler_package
        / subfolder
        / settings.compiler_executable
    )


def get_compiler(
    root_path: str | os.PathLike[str],
    workspace_root: str | os.PathLike[str] | None = None,
    *,
    settings: ResolverSettings | None = None,
) -> str:
    """Return the canonical compiler path, preferring ``root_path`` over the workspace.

    Raises ``UnsupportedPlatformError`` for unknown hosts and
    ``CompilerNotFoundError`` when neither root has an installed compiler.
    """
    subfolder = platform_subfolder()
    roots = [root_path] if workspace_root is None else [root_path, workspace_root]
    candidates = [compiler_candidate(root, subfolder, settings) for root in roots]
    for candidate in candidates:
        resolved = canonicalize(candidate)
        if resolved is not None:
            logger.debug("Using compiler at %s", resolved)
            return str(resolved)
        logger.debug("No compiler at %s", candidate)
    logger.error("Could not find the compiler under %s", ", ".join(str(root) for root in roots))
    raise CompilerNotFoundError(candidates)


def get_compiler_version(
    compiler_path: str | os.PathLike[str], *, settings: ResolverSettings | None = None
) -> str:
    settings = settings or DEFAULT_SETTINGS
    try:
        completed = subprocess.run(
            [str(compiler_path), settings.version_flag],
            check=False,
            capture_output=True,
        )
    except FileNotFoundError as exc:
        raise CompilerVersionError(compiler_path, "executable not found") from exc
    except OSError as exc:
        raise CompilerVersionError(compiler_path, str(exc)) from exc
    try:
        stdout = completed.stdout.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise CompilerVersionError(compiler_path, "output is not valid UTF-8") from exc
    return stdout.replace("\n", "").replace(settings.version_prefix, "")


__all__ = [
    "compiler_candidate",
    "get_compiler",
    "get_compiler_version",
    "platform_subfolder",
]
