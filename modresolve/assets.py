"""On-disk locations of compiler artifacts."""

from __future__ import annotations

import os
from pathlib import Path, PurePath
from typing import Union

from .models import AssetKind, BuildPackage, NoNamespace, PackageNamespace
from .naming import file_path_to_compiler_asset_basename
from .paths import get_extension, get_parent

AssetKindLike = Union[AssetKind, str]


def ast_kind_for_source(source_file: str | os.PathLike[str]) -> AssetKind:
    """Interface sources (extension ending in ``i``) produce ``iast``, others ``ast``."""
    if get_extension(source_file).endswith("i"):
        return AssetKind.IAST
    return AssetKind.AST


def get_ast_path(source_file: str | os.PathLike[str]) -> Path:
    """Return the syntax tree path next to ``source_file``; never namespaced."""
    kind = ast_kind_for_source(source_file)
    basename = file_path_to_compiler_asset_basename(source_file, NoNamespace())
    return Path(get_parent(source_file)) / f"{basename}{kind.suffix}"


def _asset_kind(kind: AssetKindLike, source_file: str | os.PathLike[str]) -> AssetKind:
    asset_kind = AssetKind.parse(kind)
    if asset_kind.is_syntax_tree:
        return ast_kind_for_source(source_file)
    return asset_kind


def _naming_namespace(kind: AssetKind, namespace: PackageNamespace) -> PackageNamespace:
    # Syntax trees are always named as if the package had no namespace.
    if kind.is_syntax_tree:
        return NoNamespace()
    return namespace


def get_compiler_asset(
    package: BuildPackage,
    namespace: PackageNamespace,
    source_file: str | os.PathLike[str],
    kind: AssetKindLike,
) -> str:
    """Return ``<ocaml build dir>/<basename>.<ext>`` for a flat artifact."""
    asset_kind = _asset_kind(kind, source_file)
    basename = file_path_to_compiler_asset_basename(
        source_file, _naming_namespace(asset_kind, namespace)
    )
    return str(Path(package.get_ocaml_build_path()) / f"{basename}{asset_kind.suffix}")


def get_bs_compiler_asset(
    package: BuildPackage,
    namespace: PackageNamespace,
    source_file: str | os.PathLike[str],
    kind: AssetKindLike,
) -> str:
    """Return ``<build dir>/<source dir>/<basename>.<ext>``, keeping sub-directories."""
    asset_kind = _asset_kind(kind, source_file)
    basename = file_path_to_compiler_asset_basename(
        source_file, _naming_namespace(asset_kind, namespace)
    )
    directory = get_parent(source_file)
    return str(Path(package.get_build_path()) / directory / f"{basename}{asset_kind.suffix}")


def is_interface_ast_file(file: str | os.PathLike[str]) -> bool:
    return str(file).endswith(".iast")


def get_source_file_from_asset(path: str | os.PathLike[str], suffix: str) -> Path:
    """Swap the extension of ``path`` for ``suffix`` (given with its leading dot)."""
    return Path(PurePath(path).with_suffix(suffix if suffix.startswith(".") else f".{suffix}"))


__all__ = [
    "ast_kind_for_source",
    "get_ast_path",
    "get_bs_compiler_asset",
    "get_compiler_asset",
    "get_source_file_from_asset",
    "is_interface_ast_file",
]
