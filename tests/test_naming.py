"""Tests for modresolve.naming."""

from __future__ import annotations

import pytest

from modresolve.errors import ExoticModuleNameError
from modresolve.models import Namespace, NamespaceWithEntry, NoNamespace
from modresolve import naming


@pytest.mark.parametrize("base", ["Foo", "foo", "A_b2", ""])
def test_no_namespace_leaves_base_unchanged(base: str) -> None:
    assert naming.add_suffix(base, NoNamespace()) == base


def test_entry_module_is_never_suffixed() -> None:
    namespace = NamespaceWithEntry(namespace="MyPkg", entry="Foo")

    assert naming.add_suffix("Foo", namespace) == "Foo"
    assert naming.add_suffix(naming.add_suffix("Foo", namespace), namespace) == "Foo"


def test_other_namespaces_suffix_with_dash() -> None:
    assert naming.add_suffix("Foo", Namespace("MyPkg")) == "Foo-MyPkg"
    assert naming.add_suffix("Bar", NamespaceWithEntry(namespace="MyPkg", entry="Foo")) == "Bar-@MyPkg"


@pytest.mark.parametrize("value", ["foo", "Foo", "", "fOO", "élan", "1abc"])
def test_capitalize_is_idempotent(value: str) -> None:
    once = naming.capitalize(value)
    assert naming.capitalize(once) == once


def test_capitalize_only_touches_first_character() -> None:
    assert naming.capitalize("fooBar") == "FooBar"
    assert naming.capitalize("") == ""


def test_module_name_with_namespace_capitalizes_after_suffixing() -> None:
    assert naming.module_name_with_namespace("foo", Namespace("MyPkg")) == "Foo-MyPkg"
    assert naming.module_name_with_namespace("foo", NoNamespace()) == "Foo"


def test_asset_basename_preserves_source_casing() -> None:
    namespace = Namespace("MyPkg")

    assert naming.file_path_to_compiler_asset_basename("src/foo.res", namespace) == "foo-MyPkg"
    assert naming.file_path_to_module_name("src/foo.res", namespace) == "Foo-MyPkg"


def test_entry_and_plain_namespace_end_to_end() -> None:
    with_entry = NamespaceWithEntry(namespace="MyPkg", entry="Foo")
    assert naming.file_path_to_module_name("src/Foo.res", with_entry) == "Foo"
    assert naming.file_path_to_compiler_asset_basename("src/Foo.res", with_entry) == "Foo"

    plain = Namespace("MyPkg")
    assert naming.file_path_to_module_name("src/Foo.res", plain) == "Foo-MyPkg"
    assert naming.file_path_to_compiler_asset_basename("src/Foo.res", plain) == "Foo-MyPkg"


def test_entry_compares_against_uncapitalized_stem() -> None:
    namespace = NamespaceWithEntry(namespace="MyPkg", entry="Foo")

    assert naming.file_path_to_compiler_asset_basename("src/foo.res", namespace) == "foo-@MyPkg"


@pytest.mark.parametrize(
    ("module_name", "expected"),
    [
        ("Foo-Bar", "Bar.Foo"),
        ("Foo-@Bar", "Bar.Foo"),
        ("Foo", "Foo"),
        ("Foo-@@Bar", "@Bar.Foo"),
        ("Foo-Bar-Baz", "Bar.Foo"),
    ],
)
def test_format_namespaced_module_name(module_name: str, expected: str) -> None:
    assert naming.format_namespaced_module_name(module_name) == expected


def test_get_namespace_from_module_name_keeps_marker() -> None:
    assert naming.get_namespace_from_module_name("Foo-@Bar") == "@Bar"
    assert naming.get_namespace_from_module_name("Foo-Bar") == "Bar"
    assert naming.get_namespace_from_module_name("Foo") is None


@pytest.mark.parametrize("name", ["Foo", "Foo_bar2", "A"])
def test_non_exotic_names(name: str) -> None:
    assert naming.is_non_exotic_module_name(name)
    assert naming.ensure_non_exotic_module_name(name) == name


@pytest.mark.parametrize("name", ["foo", "Foo-MyPkg", "Foo.Bar", "Föo", "", "_Foo", "FooÄ"])
def test_exotic_names_are_flagged(name: str) -> None:
    assert not naming.is_non_exotic_module_name(name)
    with pytest.raises(ExoticModuleNameError):
        naming.ensure_non_exotic_module_name(name)


def test_contains_ascii_characters() -> None:
    assert naming.contains_ascii_characters("__a")
    assert not naming.contains_ascii_characters("__-")
    assert not naming.contains_ascii_characters("ñ")


def test_source_file_kinds() -> None:
    assert naming.is_interface_file("resi")
    assert naming.is_implementation_file("ml")
    assert naming.is_source_file("rei")
    assert not naming.is_source_file("js")
