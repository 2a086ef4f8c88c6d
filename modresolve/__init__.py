"""Module identity and artifact location resolution for namespaced builds."""

from __future__ import annotations

from .assets import get_ast_path, get_bs_compiler_asset, get_compiler_asset
from .compiler import get_compiler, get_compiler_version
from .config import ResolverSettings, load_settings
from .errors import (
    CompilerNotFoundError,
    ExoticModuleNameError,
    MalformedPathError,
    ResolverEnvironmentError,
    ResolverError,
    UnsupportedPlatformError,
)
from .hashing import compute_file_hash
from .locator import PackageLocator
from .models import AssetKind, Namespace, NamespaceWithEntry, NoNamespace, PackageLayout
from .naming import file_path_to_module_name, format_namespaced_module_name
from .paths import canonicalize, lexical_absolute
from .roots import get_nearest_config, get_workspace_root

__all__ = [
    "AssetKind",
    "CompilerNotFoundError",
    "ExoticModuleNameError",
    "MalformedPathError",
    "Namespace",
    "NamespaceWithEntry",
    "NoNamespace",
    "PackageLayout",
    "PackageLocator",
    "ResolverEnvironmentError",
    "ResolverError",
    "ResolverSettings",
    "UnsupportedPlatformError",
    "canonicalize",
    "compute_file_hash",
    "file_path_to_module_name",
    "format_namespaced_module_name",
    "get_ast_path",
    "get_bs_compiler_asset",
    "get_compiler",
    "get_compiler_asset",
    "get_compiler_version",
    "get_nearest_config",
    "get_workspace_root",
    "lexical_absolute",
    "load_settings",
]
