"""Tests for modresolve.paths."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from modresolve import paths
from modresolve.errors import MalformedPathError, PathErrorKind


def test_lexical_absolute_folds_dot_components(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    result = paths.lexical_absolute("a/./b/../c")

    assert result == Path(os.getcwd()) / "a" / "c"


def test_lexical_absolute_keeps_absolute_input() -> None:
    assert paths.lexical_absolute("/usr/./lib/../share") == Path("/usr/share")


def test_lexical_absolute_stops_popping_at_root() -> None:
    assert paths.lexical_absolute("/../../etc") == Path("/etc")


def test_lexical_absolute_does_not_require_existence(tmp_path: Path) -> None:
    target = tmp_path / "not" / "built" / "yet.cmj"

    assert paths.lexical_absolute(target) == target
    assert paths.canonicalize(target) is None


def test_lexical_absolute_propagates_missing_cwd(monkeypatch) -> None:
    def _broken_getcwd() -> str:
        raise FileNotFoundError("cwd removed")

    monkeypatch.setattr(paths.os, "getcwd", _broken_getcwd)

    with pytest.raises(FileNotFoundError):
        paths.lexical_absolute("relative/path")


def test_lexical_absolute_does_not_resolve_symlinks(tmp_path: Path) -> None:
    real = tmp_path / "real"
    real.mkdir()
    link = tmp_path / "link"
    link.symlink_to(real, target_is_directory=True)

    assert paths.lexical_absolute(link) == link
    assert paths.canonicalize(link) == real.resolve()


def test_get_abs_path_returns_string(tmp_path: Path) -> None:
    assert paths.get_abs_path(tmp_path / "x" / "..") == str(tmp_path)


def test_get_basename_and_extension() -> None:
    assert paths.get_basename("src/foo.res") == "foo"
    assert paths.get_extension("src/foo.resi") == "resi"


def test_get_extension_rejects_missing_extension() -> None:
    with pytest.raises(MalformedPathError) as excinfo:
        paths.get_extension("src/Makefile")

    assert excinfo.value.kind is PathErrorKind.MISSING_EXTENSION
    assert "src/Makefile" in str(excinfo.value)


def test_get_basename_rejects_empty_path() -> None:
    with pytest.raises(MalformedPathError) as excinfo:
        paths.get_basename("")

    assert excinfo.value.kind is PathErrorKind.MISSING_STEM


def test_change_extension() -> None:
    assert paths.change_extension("src/Foo.res", "bs.js") == str(Path("src/Foo.bs.js"))
    assert paths.change_extension("src/Foo.res", ".mjs") == str(Path("src/Foo.mjs"))


def test_has_extension_in() -> None:
    assert paths.has_extension_in("src/Foo.res", ["res", "resi"])
    assert not paths.has_extension_in("src/Foo.js", ["res", "resi"])
    assert not paths.has_extension_in("src/Foo", ["res"])


def test_create_path_is_idempotent(tmp_path: Path) -> None:
    target = tmp_path / "lib" / "bs" / "src"

    paths.create_path(target)
    paths.create_path(target)

    assert target.is_dir()


def test_read_helpers(tmp_path: Path) -> None:
    target = tmp_path / "deps.txt"
    target.write_text("first\r\nsecond\n", encoding="utf-8")

    assert list(paths.read_lines(target)) == ["first", "second"]
    assert paths.read_file(target).startswith("first")

    with pytest.raises(FileNotFoundError):
        paths.read_file(tmp_path / "missing.txt")
