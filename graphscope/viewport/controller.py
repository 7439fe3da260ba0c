"""
Viewport Controller

Owns pan/zoom state and the world <-> screen transform:

    screen = origin + pan + zoom * (world - origin)

``origin`` is the transform origin, the fixed point of zooming. With the
default origin (0, 0) this reduces to ``screen = pan + zoom * world``. The
graph session sets it to the viewport center, so zoom is anchored there and
not at the pointer.

All mutations keep ``zoom`` inside [zoom_min, zoom_max]; an out-of-range
value is never observable, not even transiently.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..graph.abstraction import ORIGIN, DragState, Point, ViewportState

logger = logging.getLogger(__name__)


@dataclass
class ViewportConfig:
    """Configuration for pan/zoom behaviour."""
    zoom_min: float = 0.1
    zoom_max: float = 3.0

    # Wheel zoom factors per notch
    wheel_zoom_in: float = 1.1
    wheel_zoom_out: float = 0.9

    # Zoom buttons multiply/divide by this step
    button_zoom_step: float = 1.2

    def __post_init__(self):
        if not 0 < self.zoom_min <= 1.0 <= self.zoom_max:
            raise ValueError(
                f"Zoom range must satisfy 0 < zoom_min <= 1 <= zoom_max, "
                f"got [{self.zoom_min}, {self.zoom_max}]"
            )
        if self.wheel_zoom_in <= 1.0 or not 0 < self.wheel_zoom_out < 1.0:
            raise ValueError("wheel_zoom_in must be > 1 and wheel_zoom_out in (0, 1)")
        if self.button_zoom_step <= 1.0:
            raise ValueError("button_zoom_step must be > 1")


class ViewportController:
    """Pan/zoom state machine with an explicit drag lifecycle."""

    def __init__(self, config: ViewportConfig = None, origin: Point = ORIGIN):
        self.config = config or ViewportConfig()
        self.origin = origin
        self.state = ViewportState()
        self._drag = DragState()

    @property
    def zoom(self) -> float:
        return self.state.zoom

    @property
    def pan(self) -> Point:
        return self.state.pan

    @property
    def is_dragging(self) -> bool:
        return self._drag.active

    @property
    def zoom_percent(self) -> int:
        """Zoom as a whole percentage, for the zoom indicator."""
        return int(round(self.state.zoom * 100))

    # ------------------------------------------------------------------
    # Drag
    # ------------------------------------------------------------------

    def begin_drag(self, pointer: Point):
        """Start a drag at the given screen position. No-op if already dragging."""
        if self._drag.active:
            return
        self._drag = DragState(active=True, origin_pointer=pointer, origin_pan=self.state.pan)

    def update_drag(self, pointer: Point):
        """Move the pan with the pointer. Ignored when no drag is active."""
        if not self._drag.active:
            return
        self.state.pan = self._drag.origin_pan + (pointer - self._drag.origin_pointer)

    def end_drag(self):
        """Finish the current drag. Pan and zoom are left as they are."""
        if self._drag.active:
            logger.debug("Drag ended at pan (%.1f, %.1f)", self.state.pan.x, self.state.pan.y)
        self._drag = DragState()

    # ------------------------------------------------------------------
    # Zoom
    # ------------------------------------------------------------------

    def _set_zoom(self, value: float):
        self.state.zoom = min(self.config.zoom_max, max(self.config.zoom_min, value))

    def zoom_by(self, direction: float):
        """Wheel-style zoom step: positive direction zooms in, negative out."""
        if direction > 0:
            self._set_zoom(self.state.zoom * self.config.wheel_zoom_in)
        elif direction < 0:
            self._set_zoom(self.state.zoom * self.config.wheel_zoom_out)

    def handle_wheel(self, delta_y: float):
        """Translate a wheel delta: scrolling down (positive delta) zooms out."""
        self.zoom_by(-1 if delta_y > 0 else 1)

    def zoom_in(self):
        self._set_zoom(self.state.zoom * self.config.button_zoom_step)

    def zoom_out(self):
        self._set_zoom(self.state.zoom / self.config.button_zoom_step)

    def reset(self):
        """Back to zoom 1 and no pan. Any drag in progress is dropped."""
        self.state = ViewportState()
        self._drag = DragState()

    # ------------------------------------------------------------------
    # Transform
    # ------------------------------------------------------------------

    def to_screen(self, world: Point) -> Point:
        """Map a world (layout) point to screen coordinates."""
        return self.origin + self.state.pan + (world - self.origin).scaled(self.state.zoom)

    def to_world(self, screen: Point) -> Point:
        """Map a screen point back to world (layout) coordinates."""
        return self.origin + (screen - self.origin - self.state.pan).scaled(1.0 / self.state.zoom)

    def screen_length(self, world_length: float) -> float:
        return world_length * self.state.zoom

    def set_origin(self, origin: Optional[Point]):
        """Move the transform origin (e.g. after a viewport resize)."""
        self.origin = origin if origin is not None else ORIGIN
