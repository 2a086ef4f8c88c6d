"""Error taxonomy for module and artifact resolution.

Lookups that simply find nothing return ``None``; the classes here cover the
remaining cases. Malformed input is recoverable and raised per file so a single
bad path never aborts a whole build. Environment errors describe an unusable
installation and are expected to end the build with their message.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Sequence


class ResolverError(Exception):
    """Base class for every error raised by modresolve."""


class PathErrorKind(str, Enum):
    MISSING_EXTENSION = "missing_extension"
    MISSING_STEM = "missing_stem"
    MISSING_PARENT = "missing_parent"


class MalformedPathError(ResolverError, ValueError):
    """Raised when a path lacks a component needed to derive a name from it."""

    def __init__(self, path: str | Path, kind: PathErrorKind) -> None:
        self.path = str(path)
        self.kind = kind
        detail = kind.value.replace("_", " ")
        super().__init__(f"Malformed path '{self.path}': {detail}")


class ExoticModuleNameError(ResolverError, ValueError):
    """Raised when a module name is not an uppercase identifier of [A-Za-z0-9_]."""

    def __init__(self, module_name: str) -> None:
        self.module_name = module_name
        super().__init__(
            f"Module name '{module_name}' must start with an ASCII uppercase letter "
            "followed only by ASCII letters, digits or underscores"
        )


class ResolverEnvironmentError(ResolverError, RuntimeError):
    """Unrecoverable configuration problem in the host or the installation."""


class UnsupportedPlatformError(ResolverEnvironmentError):
    def __init__(self, system: str, machine: str) -> None:
        self.system = system
        self.machine = machine
        super().__init__(
            f"Unsupported architecture: no compiler build for system '{system}' "
            f"on machine '{machine}'"
        )


class CompilerNotFoundError(ResolverEnvironmentError):
    def __init__(self, candidates: Sequence[Path]) -> None:
        self.candidates = list(candidates)
        tried = ", ".join(str(path) for path in self.candidates) or "(none)"
        super().__init__(f"Could not find the compiler executable. Looked in: {tried}")


class CompilerVersionError(ResolverEnvironmentError):
    def __init__(self, compiler: str | Path, reason: str) -> None:
        self.compiler = str(compiler)
        super().__init__(f"Failed to read version from '{self.compiler}': {reason}")


__all__ = [
    "CompilerNotFoundError",
    "CompilerVersionError",
    "ExoticModuleNameError",
    "MalformedPathError",
    "PathErrorKind",
    "ResolverEnvironmentError",
    "ResolverError",
    "UnsupportedPlatformError",
]
