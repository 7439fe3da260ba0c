"""Styling, render model and SVG snapshot export."""

from .style import StyleConfig, StyleManager
from .scene import (
    NodeGlyph,
    PopupView,
    Scene,
    build_scene,
    export_svg,
    scene_to_svg,
)

__all__ = [
    "StyleConfig",
    "StyleManager",
    "NodeGlyph",
    "PopupView",
    "Scene",
    "build_scene",
    "export_svg",
    "scene_to_svg",
]
