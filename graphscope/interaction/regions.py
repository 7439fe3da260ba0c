"""
Outside-Click Detection

The host registers the screen regions that must *not* count as "outside"
(the node canvas hit area, the open popup). A document-level pointer-down is
then classified with a single question: was it outside all of them?

Regions are predicates rather than fixed rectangles so that regions whose
geometry changes (the popup moves on every selection, nodes move with pan and
zoom) are evaluated against current state at the time of the event.
"""

import logging
from typing import Callable, Dict, List, Optional

from ..graph.abstraction import Point, Rect

logger = logging.getLogger(__name__)

RegionTest = Callable[[Point], bool]


def rect_region(rect_provider: Callable[[], Optional[Rect]]) -> RegionTest:
    """Region backed by a rectangle that may change or disappear.

    ``rect_provider`` returns the current rectangle, or None when the region
    is not on screen.
    """
    def contains(point: Point) -> bool:
        rect = rect_provider()
        return rect is not None and rect.contains(point)
    return contains


class ExclusionRegions:
    """Named registry of regions excluded from outside-click detection."""

    def __init__(self):
        self._regions: Dict[str, RegionTest] = {}

    def register(self, name: str, test: RegionTest):
        """Register (or replace) a region by name."""
        self._regions[name] = test

    def unregister(self, name: str):
        self._regions.pop(name, None)

    @property
    def names(self) -> List[str]:
        return list(self._regions)

    def hit(self, point: Point) -> List[str]:
        """Names of the regions containing ``point``."""
        return [name for name, test in self._regions.items() if test(point)]

    def is_outside(self, point: Point) -> bool:
        """True when ``point`` lies outside every registered region."""
        hits = self.hit(point)
        if hits:
            logger.debug("Pointer-down at (%.0f, %.0f) inside %s", point.x, point.y, hits)
        return not hits
