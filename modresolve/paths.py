"""Lexical and filesystem path normalisation helpers."""

from __future__ import annotations

import os
from pathlib import Path, PurePath
from typing import Iterable, Iterator, Optional

from .errors import MalformedPathError, PathErrorKind


def lexical_absolute(path: str | os.PathLike[str]) -> Path:
    """Return an absolute form of ``path`` computed without touching the filesystem.

    Relative inputs are joined onto the current working directory. ``.``
    components are dropped and each ``..`` pops one trailing component; popping
    at the root is a no-op. Symlinks are not resolved and the target need not
    exist. ``OSError`` from reading the working directory propagates.
    """
    pure = PurePath(path)
    base = Path(pure.anchor) if pure.is_absolute() else Path(os.getcwd())
    parts = list(base.parts)
    for part in pure.parts[1 if pure.is_absolute() else 0 :]:
        if part == ".":
            continue
        if part == "..":
            if len(parts) > 1:
                parts.pop()
            continue
        parts.append(part)
    return Path(*parts)


def canonicalize(path: str | os.PathLike[str]) -> Optional[Path]:
    """Return the symlink-resolved absolute path, or None when it does not exist."""
    try:
        return Path(path).resolve(strict=True)
    except (OSError, RuntimeError):
        return None


def get_abs_path(path: str | os.PathLike[str]) -> str:
    return str(lexical_absolute(path))


def get_basename(path: str | os.PathLike[str]) -> str:
    """Return the file stem, e.g. ``src/Foo.res`` -> ``Foo``."""
    stem = PurePath(path).stem
    if not stem or stem in (".", ".."):
        raise MalformedPathError(path, PathErrorKind.MISSING_STEM)
    return stem


def get_extension(path: str | os.PathLike[str]) -> str:
    """Return the extension without its leading dot."""
    suffix = PurePath(path).suffix
    if not suffix:
        raise MalformedPathError(path, PathErrorKind.MISSING_EXTENSION)
    return suffix[1:]


def change_extension(path: str | os.PathLike[str], new_extension: str) -> str:
    pure = PurePath(path)
    if not pure.name:
        raise MalformedPathError(path, PathErrorKind.MISSING_STEM)
    extension = new_extension.lstrip(".")
    return str(pure.with_suffix(f".{extension}" if extension else ""))


def get_parent(path: str | os.PathLike[str]) -> PurePath:
    pure = PurePath(path)
    if not pure.name:
        raise MalformedPathError(path, PathErrorKind.MISSING_PARENT)
    return pure.parent


def has_extension_in(path: str | os.PathLike[str], extensions: Iterable[str]) -> bool:
    """Return True when the extension of ``path`` equals one of ``extensions``."""
    suffix = PurePath(path).suffix[1:]
    if not suffix:
        return False
    return any(suffix == extension for extension in extensions)


def create_path(path: str | os.PathLike[str]) -> None:
    Path(path).mkdir(parents=True, exist_ok=True)


def read_file(path: str | os.PathLike[str]) -> str:
    return Path(path).read_text(encoding="utf-8")


def read_lines(path: str | os.PathLike[str]) -> Iterator[str]:
    """Yield the lines of a UTF-8 file without trailing newlines."""
    with Path(path).open("r", encoding="utf-8") as handle:
        for line in handle:
            yield line.rstrip("\r\n")


__all__ = [
    "canonicalize",
    "change_extension",
    "create_path",
    "get_abs_path",
    "get_basename",
    "get_extension",
    "get_parent",
    "has_extension_in",
    "lexical_absolute",
    "read_file",
    "read_lines",
]
