"""
Popup Placement

Computes where the detail popup of the selected node goes. The popup opens
below-right of the pointer, flips to the other side of the pointer on any
axis where it would overflow the viewport, and is finally clamped so that it
keeps ``margin`` pixels from the viewport edges. When the popup is larger
than the viewport the top/left margin wins.

The far-edge clamp can move the popup up to ``margin`` pixels inward of its
unflipped position, when that position would end inside the margin band.
"""

import logging
from dataclasses import dataclass

from ..graph.abstraction import Point, Rect, Size

logger = logging.getLogger(__name__)


@dataclass
class PopupConfig:
    """Popup geometry (screen pixels)."""
    width: float = 320.0
    height: float = 400.0
    offset: float = 20.0  # distance from the pointer
    margin: float = 8.0  # minimum distance from the viewport edges

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Popup must have positive size, got {self.width}x{self.height}")
        if self.offset < 0 or self.margin < 0:
            raise ValueError("Popup offset and margin must be non-negative")

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)


def _place_axis(pointer: float, extent: float, viewport: float,
                offset: float, margin: float) -> float:
    pos = pointer + offset
    if pos + extent > viewport:
        pos = pointer - extent - offset
    # Keep the far edge inside the margin, then the near edge; near edge wins
    pos = min(pos, viewport - extent - margin)
    return max(margin, pos)


def place(pointer: Point, viewport_size: Size, popup_size: Size,
          offset: float = 20.0, margin: float = 8.0) -> Point:
    """Compute the top-left anchor of the popup.

    Args:
        pointer: Pointer position in screen coordinates
        viewport_size: Visible area in screen pixels
        popup_size: Popup dimensions in screen pixels
        offset: Gap between the pointer and the popup
        margin: Minimum gap between the popup and the viewport edges

    Returns:
        Top-left corner of the popup. Both coordinates are always >= margin.
    """
    x = _place_axis(pointer.x, popup_size.width, viewport_size.width, offset, margin)
    y = _place_axis(pointer.y, popup_size.height, viewport_size.height, offset, margin)
    return Point(x, y)


class PopupPlacer:
    """Placement bound to a viewport size and a popup configuration."""

    def __init__(self, viewport_size: Size, config: PopupConfig = None):
        self.viewport_size = viewport_size
        self.config = config or PopupConfig()

    def place(self, pointer: Point) -> Point:
        anchor = place(
            pointer,
            self.viewport_size,
            self.config.size,
            offset=self.config.offset,
            margin=self.config.margin,
        )
        logger.debug(
            "Popup for pointer (%.0f, %.0f) anchored at (%.0f, %.0f)",
            pointer.x, pointer.y, anchor.x, anchor.y,
        )
        return anchor

    def bounds(self, anchor: Point) -> Rect:
        """Screen rectangle covered by a popup anchored at ``anchor``."""
        return Rect(anchor.x, anchor.y, self.config.width, self.config.height)

    def resize(self, viewport_size: Size):
        self.viewport_size = viewport_size
