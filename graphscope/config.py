"""
Graph Configuration

Loads layout, viewport, popup and style settings from YAML. The packaged
graph_defaults.yaml provides every value; a user file overrides individual
keys section by section.
"""

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .graph.abstraction import Size
from .interaction.popup import PopupConfig
from .layout.radial import LayoutConfig
from .viewport.controller import ViewportConfig
from .visualization.style import StyleConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "graph_defaults.yaml"


class ConfigError(ValueError):
    """Raised for unreadable or invalid configuration."""


@dataclass
class EmptyStateConfig:
    """Message shown when a search returns nothing."""
    headline: str = "No results found"
    hint: str = "Try adjusting your search terms or filters"


@dataclass
class ScreenConfig:
    """Initial size of the visible graph area, in pixels."""
    width: float = 1280.0
    height: float = 800.0

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Screen must have positive size, got {self.width}x{self.height}")

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)


@dataclass
class GraphConfig:
    """Complete configuration for a graph session."""
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    viewport: ViewportConfig = field(default_factory=ViewportConfig)
    screen: ScreenConfig = field(default_factory=ScreenConfig)
    popup: PopupConfig = field(default_factory=PopupConfig)
    style: StyleConfig = field(default_factory=StyleConfig)
    empty_state: EmptyStateConfig = field(default_factory=EmptyStateConfig)


_SECTIONS = {
    "layout": LayoutConfig,
    "viewport": ViewportConfig,
    "screen": ScreenConfig,
    "popup": PopupConfig,
    "style": StyleConfig,
    "empty_state": EmptyStateConfig,
}


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Malformed configuration file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration file {path} must contain a mapping")
    return data


def _load_defaults() -> Dict[str, Any]:
    if not DEFAULT_CONFIG_PATH.exists():
        logger.warning(
            f"Default graph config not found at {DEFAULT_CONFIG_PATH}, "
            "using built-in defaults"
        )
        return {}
    return _read_yaml(DEFAULT_CONFIG_PATH)


def _build_section(name: str, values: Dict[str, Any]):
    cls = _SECTIONS[name]
    known = {f.name for f in fields(cls)}
    unknown = set(values) - known
    if unknown:
        raise ConfigError(f"Unknown key(s) in '{name}' section: {', '.join(sorted(unknown))}")

    if name == "style" and "color_buckets" in values:
        values = dict(values)
        values["color_buckets"] = [tuple(bucket) for bucket in values["color_buckets"]]

    try:
        return cls(**values)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid '{name}' section: {e}") from e


def load_config(path: Optional[Union[str, Path]] = None) -> GraphConfig:
    """Load the graph configuration.

    Args:
        path: Optional user YAML file. Its sections are merged key by key over
              the packaged defaults.

    Returns:
        GraphConfig

    Raises:
        ConfigError: If the user file is missing, malformed, or sets an
                     unknown key or an invalid value.
    """
    merged = _load_defaults()

    if path is not None:
        path = Path(path)
        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")
        overrides = _read_yaml(path)
        for section, values in overrides.items():
            if section not in _SECTIONS:
                raise ConfigError(f"Unknown configuration section: {section}")
            if not isinstance(values, dict):
                raise ConfigError(f"Section '{section}' must be a mapping")
            merged.setdefault(section, {})
            merged[section] = {**(merged[section] or {}), **values}
        logger.debug("Loaded graph config overrides from %s", path)

    sections = {}
    for name in _SECTIONS:
        values = merged.get(name) or {}
        if not isinstance(values, dict):
            raise ConfigError(f"Section '{name}' must be a mapping")
        sections[name] = _build_section(name, values)

    return GraphConfig(**sections)
