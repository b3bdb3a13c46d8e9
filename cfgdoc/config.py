"""Configuration loading for cfgdoc (.cfgdoc.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .constants import (
    DEFAULT_AUXILIARY_DIR,
    DEFAULT_AUXILIARY_DISPLAY_NAME,
    DEFAULT_AUXILIARY_TYPE,
    DEFAULT_BOARD_TYPES,
    DEFAULT_CONFIG_DIR,
    DEFAULT_GROUPED_TYPES,
    DEFAULT_NAMED_TYPES,
    DEPRECATION_MARKER,
)
from .errors import ConfigError

CONFIG_FILENAME = ".cfgdoc.yml"

_UNSUPPORTED_MODES = ("error", "skip")


@dataclass
class SourceConfig:
    """Scan roots, relative to the project root."""

    config_dir: str = DEFAULT_CONFIG_DIR
    auxiliary_dir: str = DEFAULT_AUXILIARY_DIR


@dataclass
class TypeListConfig:
    """Which struct types are documented, and how they are grouped."""

    grouped: List[str] = field(default_factory=lambda: list(DEFAULT_GROUPED_TYPES))
    named: List[str] = field(default_factory=lambda: list(DEFAULT_NAMED_TYPES))
    board: List[str] = field(default_factory=lambda: list(DEFAULT_BOARD_TYPES))


@dataclass
class AuxiliaryConfig:
    """The single type pulled from the auxiliary scan root."""

    type_name: str = DEFAULT_AUXILIARY_TYPE
    display_name: str = DEFAULT_AUXILIARY_DISPLAY_NAME


@dataclass
class RenderConfig:
    """Table rendering settings."""

    deprecation_marker: str = DEPRECATION_MARKER


@dataclass
class ExtractConfig:
    """Struct extraction behaviour."""

    on_unsupported: str = "error"
    strict: bool = False


@dataclass
class CfgDocConfig:
    """Represents the settings defined in .cfgdoc.yml."""

    root: Path
    sources: SourceConfig = field(default_factory=SourceConfig)
    types: TypeListConfig = field(default_factory=TypeListConfig)
    auxiliary: AuxiliaryConfig = field(default_factory=AuxiliaryConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    extract: ExtractConfig = field(default_factory=ExtractConfig)


def load_config(config_path: Path, *, required: bool = False) -> CfgDocConfig:
    """Load configuration from disk.

    ``config_path`` may be a directory (``.cfgdoc.yml`` is looked up inside it)
    or the configuration file itself. A missing file yields the defaults unless
    ``required`` is set.
    """
    config_file = _resolve_config_path(Path(config_path))
    root = config_file.parent.resolve()

    if not config_file.exists():
        if required:
            raise ConfigError(f"Configuration file not found: {config_file}")
        return CfgDocConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    config = CfgDocConfig(root=root)

    sources_data = _as_dict(data.get("sources"))
    if sources_data:
        config.sources.config_dir = (
            _as_str(sources_data.get("config_dir")) or config.sources.config_dir
        )
        config.sources.auxiliary_dir = (
            _as_str(sources_data.get("auxiliary_dir")) or config.sources.auxiliary_dir
        )

    types_data = _as_dict(data.get("types"))
    if types_data:
        if "grouped" in types_data:
            config.types.grouped = _as_str_list(types_data.get("grouped"))
        if "named" in types_data:
            config.types.named = _as_str_list(types_data.get("named"))
        if "board" in types_data:
            config.types.board = _as_str_list(types_data.get("board"))

    auxiliary_data = _as_dict(data.get("auxiliary"))
    if auxiliary_data:
        config.auxiliary.type_name = (
            _as_str(auxiliary_data.get("type")) or config.auxiliary.type_name
        )
        config.auxiliary.display_name = (
            _as_str(auxiliary_data.get("display_name")) or config.auxiliary.type_name
        )

    render_data = _as_dict(data.get("render"))
    if render_data:
        marker = _as_str(render_data.get("deprecation_marker"))
        if marker is not None:
            if not marker:
                raise ConfigError("render.deprecation_marker must not be empty")
            config.render.deprecation_marker = marker

    extract_data = _as_dict(data.get("extract"))
    if extract_data:
        mode = _as_str(extract_data.get("on_unsupported"))
        if mode is not None:
            mode = mode.strip().lower()
            if mode not in _UNSUPPORTED_MODES:
                allowed = ", ".join(_UNSUPPORTED_MODES)
                raise ConfigError(f"extract.on_unsupported must be one of: {allowed}")
            config.extract.on_unsupported = mode
        strict = _as_bool(extract_data.get("strict"))
        if strict is not None:
            config.extract.strict = strict

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


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
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = [
    "AuxiliaryConfig",
    "CONFIG_FILENAME",
    "CfgDocConfig",
    "ConfigError",
    "ExtractConfig",
    "RenderConfig",
    "SourceConfig",
    "TypeListConfig",
    "load_config",
]
