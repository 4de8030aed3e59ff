"""Configuration loading for goreview (.goreview.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".goreview.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class CategoryConfig:
    """Category enablement."""

    enabled: List[str] = field(default_factory=list)


@dataclass
class ReviewConfig:
    """Represents the settings defined in .goreview.yml."""

    root: Path
    target_score: Optional[int] = None
    report: Optional[Path] = None
    exclude_paths: List[str] = field(default_factory=list)
    categories: CategoryConfig = field(default_factory=CategoryConfig)


def load_config(config_path: Path) -> ReviewConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return ReviewConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    report_str = _as_str(data.get("report"))
    categories = CategoryConfig()
    category_data = _as_dict(data.get("categories"))
    if category_data:
        categories.enabled = _as_str_list(category_data.get("enabled"))

    return ReviewConfig(
        root=root,
        target_score=_as_int(data.get("target_score")),
        report=root / report_str if report_str else None,
        exclude_paths=_as_str_list(data.get("exclude_paths")),
        categories=categories,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = ["CONFIG_FILENAME", "CategoryConfig", "ConfigError", "ReviewConfig", "load_config"]
