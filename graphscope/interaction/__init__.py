"""Pointer interaction: hit testing, selection and popup placement."""

from .hit_test import hit_test
from .popup import PopupConfig, PopupPlacer, place
from .regions import ExclusionRegions, rect_region
from .selection import SelectionMachine, SelectionPhase

__all__ = [
    "hit_test",
    "PopupConfig",
    "PopupPlacer",
    "place",
    "ExclusionRegions",
    "rect_region",
    "SelectionMachine",
    "SelectionPhase",
]
