"""
Radial Relevance Layout

Places result items on a circle around the canvas center. Angle comes from
the item's index in the result order, radius from its relevance: the most
relevant items sit closest to the center.

The layout is a pure function of input order and relevance. There is no
iteration, no convergence test and no random state, so running it twice on
the same input yields identical positions and a new search can be laid out
on every keystroke.
"""

import logging
import math
from dataclasses import dataclass
from typing import Iterable, List

from ..graph.abstraction import Item, Point, PositionedItem, Size

logger = logging.getLogger(__name__)


@dataclass
class LayoutConfig:
    """Configuration for the radial layout."""
    # Logical canvas the positions live in
    canvas_width: float = 800.0
    canvas_height: float = 600.0

    # Radius = base_radius + (1 - relevance) * spread
    base_radius: float = 100.0
    spread: float = 150.0

    def __post_init__(self):
        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise ValueError(
                f"Canvas must have positive size, got "
                f"{self.canvas_width}x{self.canvas_height}"
            )
        if self.base_radius < 0 or self.spread < 0:
            raise ValueError("base_radius and spread must be non-negative")

    @property
    def canvas(self) -> Size:
        return Size(self.canvas_width, self.canvas_height)

    @property
    def center(self) -> Point:
        return self.canvas.center


class RadialLayout:
    """Deterministic circular layout ranked by relevance."""

    def __init__(self, config: LayoutConfig = None):
        self.config = config or LayoutConfig()

    def radius_for(self, relevance: float) -> float:
        """Distance from the canvas center for a given relevance."""
        return self.config.base_radius + (1.0 - relevance) * self.config.spread

    def layout(self, items: Iterable[Item]) -> List[PositionedItem]:
        """Assign positions to items in input order.

        Args:
            items: Ordered items (index 0 lands at angle 0, i.e. due east)

        Returns:
            Positioned items in the same order. Empty input gives an empty list.
        """
        items = list(items)
        n = len(items)
        if n == 0:
            logger.debug("Layout requested for empty result set")
            return []

        center = self.config.center
        positioned = []
        for index, item in enumerate(items):
            angle = (index / n) * 2 * math.pi
            radius = self.radius_for(item.relevance)
            position = Point(
                center.x + math.cos(angle) * radius,
                center.y + math.sin(angle) * radius,
            )
            positioned.append(PositionedItem(item=item, position=position))

        logger.debug("Laid out %d items around (%.1f, %.1f)", n, center.x, center.y)
        return positioned


def layout_items(items: Iterable[Item], config: LayoutConfig = None) -> List[PositionedItem]:
    """Convenience wrapper for a one-off layout."""
    return RadialLayout(config).layout(items)
