"""
graphscope - Relevance Graph Engine

Layout, viewport, selection and popup placement for an interactive
node-link graph of ranked search results and their relations.
"""

__version__ = "0.1.0"
__author__ = "graphscope Team"

from .graph.abstraction import Item, PositionedItem, Point, ResultSet, Size
from .layout.radial import RadialLayout, LayoutConfig
from .layout.edges import Edge, EdgeResolver
from .viewport.controller import ViewportController, ViewportConfig
from .interaction.popup import PopupPlacer, PopupConfig
from .interaction.selection import SelectionMachine, SelectionPhase
from .config import GraphConfig, load_config
from .session import GraphSession, GraphCallbacks, Suggestions

__all__ = [
    "Item",
    "PositionedItem",
    "Point",
    "ResultSet",
    "Size",
    "RadialLayout",
    "LayoutConfig",
    "Edge",
    "EdgeResolver",
    "ViewportController",
    "ViewportConfig",
    "PopupPlacer",
    "PopupConfig",
    "SelectionMachine",
    "SelectionPhase",
    "GraphConfig",
    "load_config",
    "GraphSession",
    "GraphCallbacks",
    "Suggestions",
]
