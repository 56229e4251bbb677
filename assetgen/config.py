"""Configuration loading for assetgen (assets-constant.json)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

import yaml

CONFIG_FILE_NAMES = (
    "assets-constant.json",
    "assets-constant.yml",
    "assets-constant.yaml",
)


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


class AccessLevel(Enum):
    """Access control level applied to the generated extension."""

    PUBLIC = "public"
    INTERNAL = "internal"
    FILEPRIVATE = "fileprivate"
    PRIVATE = "private"

    @property
    def modifier(self) -> str:
        """Return the qualifier text placed before ``extension``."""
        return "" if self is AccessLevel.INTERNAL else f"{self.value} "


def _empty_mapping() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True)
class GenerationConfig:
    """Immutable settings for one generation run."""

    generate_images: bool = True
    generate_colors: bool = True
    image_output_file_name: str = "AppImage+Generated.swift"
    color_output_file_name: str = "AppColor+Generated.swift"
    include_folder_paths: bool = False
    use_namespacing: bool = False
    name_mapping: Mapping[str, str] = field(default_factory=_empty_mapping)
    access_level: AccessLevel = AccessLevel.PUBLIC

    def __post_init__(self) -> None:
        if not isinstance(self.name_mapping, MappingProxyType):
            object.__setattr__(self, "name_mapping", MappingProxyType(dict(self.name_mapping)))

    @property
    def track_folders(self) -> bool:
        """Whether the walker needs to record folder labels."""
        return self.include_folder_paths or self.use_namespacing

    def is_enabled(self, kind_name: str) -> bool:
        if kind_name == "image":
            return self.generate_images
        if kind_name == "color":
            return self.generate_colors
        return True

    def output_file_name_for(self, kind_name: str) -> Optional[str]:
        if kind_name == "image":
            return self.image_output_file_name
        if kind_name == "color":
            return self.color_output_file_name
        return None


def load_config(config_path: Path) -> GenerationConfig:
    """Load configuration from disk, using defaults when no file exists."""
    config_file = _resolve_config_path(config_path)
    if config_file is None or not config_file.exists():
        return GenerationConfig()

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    defaults = GenerationConfig()
    access_level = defaults.access_level
    raw_access = _as_str(data.get("accessLevel"))
    if raw_access is not None:
        try:
            access_level = AccessLevel(raw_access.strip().lower())
        except ValueError as exc:
            raise ConfigError(f"Unknown accessLevel {raw_access!r} in {config_file.name}") from exc

    return GenerationConfig(
        generate_images=_as_bool(data.get("generateImages"), defaults.generate_images),
        generate_colors=_as_bool(data.get("generateColors"), defaults.generate_colors),
        image_output_file_name=_as_str(data.get("imageOutputFileName"))
        or defaults.image_output_file_name,
        color_output_file_name=_as_str(data.get("colorOutputFileName"))
        or defaults.color_output_file_name,
        include_folder_paths=_as_bool(
            data.get("includeFolderPaths"), defaults.include_folder_paths
        ),
        use_namespacing=_as_bool(data.get("useNamespacing"), defaults.use_namespacing),
        name_mapping=_as_str_mapping(data.get("nameMapping")),
        access_level=access_level,
    )


def _resolve_config_path(config_path: Path) -> Optional[Path]:
    config_path = config_path.expanduser()
    if not config_path.is_dir():
        return config_path.resolve()
    for name in CONFIG_FILE_NAMES:
        candidate = config_path / name
        if candidate.exists():
            return candidate.resolve()
    return None


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}

    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return default


def _as_str_mapping(value: Any) -> Dict[str, str]:
    if not isinstance(value, dict):
        return {}
    return {
        str(key): str(mapped)
        for key, mapped in value.items()
        if isinstance(key, str) and isinstance(mapped, str) and mapped
    }


__all__ = [
    "AccessLevel",
    "CONFIG_FILE_NAMES",
    "ConfigError",
    "GenerationConfig",
    "load_config",
]
