"""Settings loading for modresolve (.modresolve.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".modresolve.yml"

DEFAULT_DEPENDENCY_DIR = "node_modules"
DEFAULT_COMPILER_PACKAGE = "rescript"
DEFAULT_COMPILER_EXECUTABLE = "bsc.exe"
DEFAULT_VERSION_FLAG = "-v"
DEFAULT_VERSION_PREFIX = "ReScript "
DEFAULT_PROJECT_MARKERS = ("bsconfig.json", "rescript.json")


class ConfigError(RuntimeError):
    """Raised when the settings file cannot be parsed."""


@dataclass
class ResolverSettings:
    """Directory and executable conventions shared by every lookup."""

    dependency_dir: str = DEFAULT_DEPENDENCY_DIR
    compiler_package: str = DEFAULT_COMPILER_PACKAGE
    compiler_executable: str = DEFAULT_COMPILER_EXECUTABLE
    version_flag: str = DEFAULT_VERSION_FLAG
    version_prefix: str = DEFAULT_VERSION_PREFIX
    project_markers: List[str] = field(default_factory=lambda: list(DEFAULT_PROJECT_MARKERS))
    source: Optional[Path] = None


DEFAULT_SETTINGS = ResolverSettings()


def load_settings(config_path: Path) -> ResolverSettings:
    """Load settings from disk, falling back to defaults when the file is absent."""
    config_file = _resolve_config_path(config_path)
    if not config_file.exists():
        return ResolverSettings()

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    settings = ResolverSettings(source=config_file)
    for key in (
        "dependency_dir",
        "compiler_package",
        "compiler_executable",
        "version_flag",
        "version_prefix",
    ):
        if key not in data:
            continue
        setattr(settings, key, _require_str(data[key], key))

    if "project_markers" in data:
        markers = _require_str_list(data["project_markers"], "project_markers")
        if not markers:
            raise ConfigError("project_markers must name at least one file")
        settings.project_markers = markers

    if not settings.dependency_dir:
        raise ConfigError("dependency_dir must not be empty")
    return settings


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _require_str(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"{key} must be a string, got {type(value).__name__}")
    return value


def _require_str_list(value: Any, key: str) -> List[str]:
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence) and all(isinstance(item, str) for item in value):
        return list(value)
    raise ConfigError(f"{key} must be a list of strings")


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DEFAULT_SETTINGS",
    "ResolverSettings",
    "load_settings",
]
