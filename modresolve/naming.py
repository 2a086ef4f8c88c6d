"""Module identifiers and namespaced asset basenames.

Two names are derived from every source file and they must not be confused:

* the *module name* is the capitalised stem plus the namespace suffix
  (``foo.res`` in namespace ``MyPkg`` is module ``Foo-MyPkg``);
* the *asset basename* keeps the original casing of the file
  (the same file compiles to ``foo-MyPkg.cmj``).

Nothing in here touches the filesystem.
"""

from __future__ import annotations

import os
from typing import Optional

from .errors import ExoticModuleNameError
from .models import NamespaceWithEntry, NoNamespace, PackageNamespace
from .paths import get_basename

_INTERFACE_EXTENSIONS = frozenset({"resi", "mli", "rei"})
_IMPLEMENTATION_EXTENSIONS = frozenset({"res", "ml", "re"})


def capitalize(value: str) -> str:
    """Uppercase the first character and leave the remainder untouched."""
    if not value:
        return ""
    return value[0].upper() + value[1:]


def add_suffix(base: str, namespace: PackageNamespace) -> str:
    if isinstance(namespace, NoNamespace):
        return base
    if isinstance(namespace, NamespaceWithEntry) and namespace.entry == base:
        return base
    return f"{base}-{namespace.to_suffix()}"


def module_name_with_namespace(module_name: str, namespace: PackageNamespace) -> str:
    return capitalize(add_suffix(module_name, namespace))


def file_path_to_compiler_asset_basename(
    path: str | os.PathLike[str], namespace: PackageNamespace
) -> str:
    """Return the namespaced stem used for compiler artifacts; casing is preserved."""
    return add_suffix(get_basename(path), namespace)


def file_path_to_module_name(path: str | os.PathLike[str], namespace: PackageNamespace) -> str:
    return capitalize(file_path_to_compiler_asset_basename(path, namespace))


def get_namespace_from_module_name(module_name: str) -> Optional[str]:
    """Return the segment after the first ``-``, verbatim (``@`` is kept)."""
    parts = module_name.split("-")
    if len(parts) < 2:
        return None
    return parts[1]


def format_namespaced_module_name(module_name: str) -> str:
    """Render ``Module-Namespace`` (or ``Module-@Namespace``) as ``Namespace.Module``."""
    parts = module_name.split("-")
    if len(parts) < 2:
        return module_name
    namespace = parts[1]
    if namespace.startswith("@"):
        namespace = namespace[1:]
    return f"{namespace}.{parts[0]}"


def is_non_exotic_module_name(module_name: str) -> bool:
    if not module_name:
        return False
    head, tail = module_name[0], module_name[1:]
    if not ("A" <= head <= "Z"):
        return False
    return all(char.isascii() and (char.isalnum() or char == "_") for char in tail)


def ensure_non_exotic_module_name(module_name: str) -> str:
    if not is_non_exotic_module_name(module_name):
        raise ExoticModuleNameError(module_name)
    return module_name


def contains_ascii_characters(value: str) -> bool:
    """Return True when at least one character is an ASCII letter or digit."""
    return any(char.isascii() and char.isalnum() for char in value)


def is_interface_file(extension: str) -> bool:
    return extension in _INTERFACE_EXTENSIONS


def is_implementation_file(extension: str) -> bool:
    return extension in _IMPLEMENTATION_EXTENSIONS


def is_source_file(extension: str) -> bool:
    return is_interface_file(extension) or is_implementation_file(extension)


__all__ = [
    "add_suffix",
    "capitalize",
    "contains_ascii_characters",
    "ensure_non_exotic_module_name",
    "file_path_to_compiler_asset_basename",
    "file_path_to_module_name",
    "format_namespaced_module_name",
    "get_namespace_from_module_name",
    "is_implementation_file",
    "is_interface_file",
    "is_non_exotic_module_name",
    "is_source_file",
    "module_name_with_namespace",
]
