"""Core data models shared across modresolve components."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Optional, Protocol, Union

from .errors import MalformedPathError, PathErrorKind


@dataclass(frozen=True)
class NoNamespace:
    """The package does not collapse its modules into a namespace."""

    def to_suffix(self) -> Optional[str]:
        return None


@dataclass(frozen=True)
class Namespace:
    """Every module of the package is suffixed with ``tag``."""

    tag: str

    def to_suffix(self) -> Optional[str]:
        return self.tag


@dataclass(frozen=True)
class NamespaceWithEntry:
    """A namespace whose ``entry`` module keeps its bare name.

    The storage suffix carries a leading ``@`` so entry-bearing namespaces can
    be told apart from plain ones in compiled module names.
    """

    namespace: str
    entry: str

    def to_suffix(self) -> Optional[str]:
        return f"@{self.namespace}"


PackageNamespace = Union[NoNamespace, Namespace, NamespaceWithEntry]


@dataclass(frozen=True)
class AssetKind:
    """Extension of a compiler artifact, converted once from its raw string."""

    extension: str

    AST: ClassVar["AssetKind"]
    IAST: ClassVar["AssetKind"]
    CMI: ClassVar["AssetKind"]
    CMJ: ClassVar["AssetKind"]
    CMT: ClassVar["AssetKind"]
    CMTI: ClassVar["AssetKind"]

    @classmethod
    def parse(cls, raw: Union[str, "AssetKind"]) -> "AssetKind":
        if isinstance(raw, AssetKind):
            return raw
        extension = raw[1:] if raw.startswith(".") else raw
        if not extension:
            raise MalformedPathError(raw, PathErrorKind.MISSING_EXTENSION)
        return cls(extension)

    @property
    def is_syntax_tree(self) -> bool:
        return self.extension in ("ast", "iast")

    @property
    def suffix(self) -> str:
        return f".{self.extension}"

    def __str__(self) -> str:
        return self.extension


AssetKind.AST = AssetKind("ast")
AssetKind.IAST = AssetKind("iast")
AssetKind.CMI = AssetKind("cmi")
AssetKind.CMJ = AssetKind("cmj")
AssetKind.CMT = AssetKind("cmt")
AssetKind.CMTI = AssetKind("cmti")


class BuildPackage(Protocol):
    """The accessors of a package that artifact paths are rooted at."""

    def get_build_path(self) -> str:
        ...

    def get_ocaml_build_path(self) -> str:
        ...


@dataclass(frozen=True)
class PackageLayout:
    """Minimal package rooted at ``path`` using the standard ``lib`` layout."""

    name: str
    path: str

    def get_build_path(self) -> str:
        return str(Path(self.path) / "lib" / "bs")

    def get_ocaml_build_path(self) -> str:
        return str(Path(self.path) / "lib" / "ocaml")


__all__ = [
    "AssetKind",
    "BuildPackage",
    "Namespace",
    "NamespaceWithEntry",
    "NoNamespace",
    "PackageLayout",
    "PackageNamespace",
]
