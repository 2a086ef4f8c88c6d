"""CLI entrypoints for modresolve diagnostics."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .compiler import get_compiler, get_compiler_version
from .config import ConfigError, ResolverSettings, load_settings
from .errors import ResolverEnvironmentError, ResolverError
from .hashing import compute_file_hash
from .locator import PackageLocator
from .logging import configure_logging
from .models import Namespace, NamespaceWithEntry, NoNamespace, PackageNamespace
from .naming import (
    file_path_to_compiler_asset_basename,
    file_path_to_module_name,
    format_namespaced_module_name,
)
from .roots import get_nearest_config, get_workspace_root


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Log every directory probed.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="modresolve",
        description="Inspect module names, dependency locations and compiler paths.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--config",
        default=".",
        help="Settings file or directory holding .modresolve.yml (defaults to cwd).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also append log records to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    locate_parser = subparsers.add_parser(
        "locate",
        help="Find the installed directory of a dependency package.",
    )
    _add_verbose_option(locate_parser, suppress_default=True)
    locate_parser.add_argument("package", help="Package name to resolve.")
    locate_parser.add_argument(
        "--from",
        dest="start_dirs",
        action="append",
        default=None,
        help="Start directory; repeat to try several in order (defaults to cwd).",
    )

    name_parser = subparsers.add_parser(
        "module-name",
        help="Show the module name and asset basename of a source file.",
    )
    _add_verbose_option(name_parser, suppress_default=True)
    name_parser.add_argument("file", help="Source file path.")
    name_parser.add_argument("--namespace", default=None, help="Namespace tag of the package.")
    name_parser.add_argument(
        "--entry",
        default=None,
        help="Entry module of the namespace (requires --namespace).",
    )

    hash_parser = subparsers.add_parser("hash", help="Print the content fingerprint of a file.")
    _add_verbose_option(hash_parser, suppress_default=True)
    hash_parser.add_argument("file", help="File to fingerprint.")

    root_parser = subparsers.add_parser(
        "root",
        help="Find the nearest project root (or workspace root) of a directory.",
    )
    _add_verbose_option(root_parser, suppress_default=True)
    root_parser.add_argument("path", nargs="?", default=".", help="Start directory.")
    root_parser.add_argument(
        "--workspace",
        action="store_true",
        help="Treat PATH as a package root and look for its enclosing workspace.",
    )

    compiler_parser = subparsers.add_parser(
        "compiler",
        help="Locate the compiler executable for this platform.",
    )
    _add_verbose_option(compiler_parser, suppress_default=True)
    compiler_parser.add_argument("root", nargs="?", default=".", help="Project root.")
    compiler_parser.add_argument("--workspace-root", default=None, help="Fallback workspace root.")
    compiler_parser.add_argument(
        "--version",
        action="store_true",
        help="Also run the compiler and print its version.",
    )

    return parser


def _namespace_from_args(args: argparse.Namespace) -> PackageNamespace:
    if args.namespace is None:
        return NoNamespace()
    if args.entry is not None:
        return NamespaceWithEntry(namespace=args.namespace, entry=args.entry)
    return Namespace(args.namespace)


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for modresolve commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        settings = load_settings(Path(args.config))
    except ConfigError as exc:
        parser.exit(2, f"{exc}\n")

    try:
        _dispatch(parser, args, settings)
    except ResolverEnvironmentError as exc:
        parser.exit(2, f"{exc}\n")
    except ResolverError as exc:
        parser.exit(1, f"{exc}\n")


def _dispatch(
    parser: argparse.ArgumentParser, args: argparse.Namespace, settings: ResolverSettings
) -> None:
    if args.command == "locate":
        start_dirs = args.start_dirs or ["."]
        found = PackageLocator(settings).locate_multi(start_dirs, args.package)
        if found is None:
            parser.exit(1, f"Package '{args.package}' not found\n")
        print(found)
    elif args.command == "module-name":
        if args.entry is not None and args.namespace is None:
            parser.exit(1, "--entry requires --namespace\n")
        namespace = _namespace_from_args(args)
        module_name = file_path_to_module_name(args.file, namespace)
        print(f"module: {module_name}")
        print(f"display: {format_namespaced_module_name(module_name)}")
        print(f"asset basename: {file_path_to_compiler_asset_basename(args.file, namespace)}")
    elif args.command == "hash":
        digest = compute_file_hash(args.file)
        if digest is None:
            parser.exit(1, f"Cannot read {args.file}\n")
        print(digest)
    elif args.command == "root":
        if args.workspace:
            found_root = get_workspace_root(args.path, settings)
        else:
            found_root = get_nearest_config(args.path, settings)
        if found_root is None:
            parser.exit(1, f"No project root found above {args.path}\n")
        print(found_root)
    elif args.command == "compiler":
        compiler = get_compiler(args.root, args.workspace_root, settings=settings)
        print(compiler)
        if args.version:
            print(get_compiler_version(compiler, settings=settings))
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


if __name__ == "__main__":
    main(sys.argv[1:])
