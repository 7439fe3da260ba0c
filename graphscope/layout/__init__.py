"""Layout engine: radial positions and resolved edges."""

from .radial import RadialLayout, LayoutConfig, layout_items
from .edges import Edge, EdgeResolver, EdgeSegment

__all__ = [
    "RadialLayout",
    "LayoutConfig",
    "layout_items",
    "Edge",
    "EdgeResolver",
    "EdgeSegment",
]
