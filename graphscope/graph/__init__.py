"""Graph data model: items, result sets and the owned state records."""

from .abstraction import (
    ORIGIN,
    DragState,
    Item,
    Point,
    PositionedItem,
    Rect,
    ResultSet,
    SelectionState,
    Size,
    ViewportState,
)

__all__ = [
    "ORIGIN",
    "DragState",
    "Item",
    "Point",
    "PositionedItem",
    "Rect",
    "ResultSet",
    "SelectionState",
    "Size",
    "ViewportState",
]
