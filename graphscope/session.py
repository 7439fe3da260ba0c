"""
Graph Session

Ties the engine together for a host UI: holds the current result set, its
layout and edges, the viewport and the selection, and routes host input
events to them.

Event routing for one physical click on a node:

1. ``pointer_down``: the document-level outside-click check runs first. The
   node canvas and the open popup are registered exclusion regions, so a
   press on a node never deselects.
2. ``click``: the node hit is resolved and the selection toggles. The event
   is consumed here and never reaches outside-click handling.

Everything runs synchronously on the caller's thread, one event at a time.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Set, Tuple, Union

from .config import GraphConfig
from .graph.abstraction import Item, Point, PositionedItem, Rect, ResultSet, Size
from .interaction.hit_test import hit_test
from .interaction.popup import PopupPlacer
from .interaction.regions import ExclusionRegions, rect_region
from .interaction.selection import SelectionMachine, SelectionPhase
from .layout.edges import Edge, EdgeResolver, EdgeSegment
from .layout.radial import RadialLayout
from .viewport.controller import ViewportController
from .visualization.style import StyleManager

logger = logging.getLogger(__name__)


@dataclass
class GraphCallbacks:
    """Actions the graph hands back to its host. Any of them may be None."""
    on_preview: Optional[Callable[[Item], None]] = None
    on_add_to_target: Optional[Callable[[Item], None]] = None
    on_suggestion_activated: Optional[Callable[[str], None]] = None
    on_request_fullscreen: Optional[Callable[[], None]] = None


@dataclass
class Suggestions:
    """Decorative suggestion chips shown along the four graph edges."""
    top: List[str] = field(default_factory=list)
    bottom: List[str] = field(default_factory=list)
    left: List[str] = field(default_factory=list)
    right: List[str] = field(default_factory=list)

    def all(self) -> List[str]:
        return self.top + self.bottom + self.left + self.right


class GraphSession:
    """
    Owns the graph state for one rendered graph.

    Provides:
    - Result set replacement (layout, edges, viewport reset, deselect)
    - Pointer, wheel and button input handling
    - Popup actions and host callbacks
    """

    NODES_REGION = "nodes"
    POPUP_REGION = "popup"

    def __init__(self, config: GraphConfig = None, callbacks: GraphCallbacks = None,
                 suggestions: Suggestions = None):
        self.config = config or GraphConfig()
        self.callbacks = callbacks or GraphCallbacks()
        self.suggestions = suggestions or Suggestions()

        self.layout_engine = RadialLayout(self.config.layout)
        self.edge_resolver = EdgeResolver()
        self.style = StyleManager(self.config.style)

        screen = self.config.screen.size
        self.screen_size = screen
        self.viewport = ViewportController(self.config.viewport, origin=screen.center)
        self.placer = PopupPlacer(screen, self.config.popup)
        self.selection = SelectionMachine(self.placer.place)

        self.regions = ExclusionRegions()
        self.regions.register(self.NODES_REGION, lambda p: self.node_at(p) is not None)
        self.regions.register(self.POPUP_REGION, rect_region(lambda: self.popup_bounds))

        self.result_set = ResultSet()
        self.positioned: List[PositionedItem] = []
        self.segments: List[EdgeSegment] = []
        self.last_pointer = Point(0.0, 0.0)

    # ------------------------------------------------------------------
    # Result set
    # ------------------------------------------------------------------

    def set_results(self, results: Union[ResultSet, Iterable[Item]]) -> "GraphSession":
        """Replace the result set wholesale.

        Positions and edges are recomputed from scratch, the viewport returns
        to its defaults and any selection is dropped. Re-delivering the
        result set already shown (same generation) changes nothing.

        Returns:
            Self for chaining
        """
        if not isinstance(results, ResultSet):
            results = ResultSet(results)
        elif results.generation == self.result_set.generation:
            logger.debug("Result set %d re-delivered, keeping view", results.generation)
            return self

        self.result_set = results
        self.positioned = self.layout_engine.layout(results)
        self.segments = self.edge_resolver.segments(self.positioned)
        self.viewport.reset()
        self.selection.replace_result_set()

        logger.info(
            "Result set %d: %d items, %d edges",
            results.generation, len(self.positioned), len(self.segments),
        )
        return self

    @property
    def edges(self) -> Set[Edge]:
        return {segment.edge for segment in self.segments}

    @property
    def is_empty(self) -> bool:
        return not self.positioned

    @property
    def empty_state(self) -> Optional[Tuple[str, str]]:
        """(headline, hint) to show instead of the graph, or None."""
        if not self.is_empty:
            return None
        return (self.config.empty_state.headline, self.config.empty_state.hint)

    def get_positioned(self, item_id: str) -> Optional[PositionedItem]:
        for positioned in self.positioned:
            if positioned.id == item_id:
                return positioned
        return None

    # ------------------------------------------------------------------
    # Selection / popup
    # ------------------------------------------------------------------

    @property
    def selected_item(self) -> Optional[Item]:
        selected_id = self.selection.selected_id
        if selected_id is None:
            return None
        return self.result_set.get(selected_id)

    @property
    def popup_anchor(self) -> Optional[Point]:
        return self.selection.anchor

    @property
    def popup_bounds(self) -> Optional[Rect]:
        anchor = self.selection.anchor
        if anchor is None:
            return None
        return self.placer.bounds(anchor)

    def node_at(self, pointer: Point) -> Optional[str]:
        """Id of the topmost node under a screen position."""
        return hit_test(pointer, self.positioned, self.viewport, self.style)

    # ------------------------------------------------------------------
    # Pointer input
    # ------------------------------------------------------------------

    def pointer_down(self, pointer: Point):
        """Document-level pointer-down.

        Deselects when outside every exclusion region, then starts a pan drag
        unless the press landed on the popup.
        """
        self.last_pointer = pointer
        if self.regions.is_outside(pointer):
            self.selection.pointer_down_outside()

        popup = self.popup_bounds
        if popup is not None and popup.contains(pointer):
            return
        self.viewport.begin_drag(pointer)

    def pointer_move(self, pointer: Point):
        """Track the pointer and pan while dragging."""
        self.last_pointer = pointer
        self.viewport.update_drag(pointer)

    def pointer_up(self):
        self.viewport.end_drag()

    # Leaving the surface mid-drag must not leave a stuck drag
    pointer_leave = pointer_up

    def click(self, pointer: Point) -> Optional[str]:
        """Click on the graph surface.

        Toggles selection when a node is hit. The popup anchor is computed
        from the last-known pointer position, which is ``pointer`` here.

        Returns:
            The id of the clicked node, or None when the click hit background
            or the popup
        """
        self.last_pointer = pointer
        popup = self.popup_bounds
        if popup is not None and popup.contains(pointer):
            return None
        node_id = self.node_at(pointer)
        if node_id is None:
            return None
        self.selection.click_node(node_id, self.last_pointer)
        return node_id

    def wheel(self, delta_y: float):
        self.viewport.handle_wheel(delta_y)

    # ------------------------------------------------------------------
    # Controls
    # ------------------------------------------------------------------

    def zoom_in(self):
        self.viewport.zoom_in()

    def zoom_out(self):
        self.viewport.zoom_out()

    def reset_view(self):
        self.viewport.reset()

    def resize(self, size: Size):
        """The visible area changed size."""
        self.screen_size = size
        self.placer.resize(size)
        self.viewport.set_origin(size.center)
        logger.debug("Viewport resized to %.0fx%.0f", size.width, size.height)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def close_popup(self):
        self.selection.close()

    def preview_selected(self) -> bool:
        """Invoke ``on_preview`` for the selected item. False if none selected."""
        return self._invoke_item_callback(self.callbacks.on_preview, "preview")

    def add_selected(self) -> bool:
        """Invoke ``on_add_to_target`` for the selected item. False if none selected."""
        return self._invoke_item_callback(self.callbacks.on_add_to_target, "add")

    def activate_suggestion(self, text: str) -> bool:
        callback = self.callbacks.on_suggestion_activated
        if callback is None:
            logger.debug("Suggestion %r activated without a handler", text)
            return False
        callback(text)
        return True

    def request_fullscreen(self) -> bool:
        callback = self.callbacks.on_request_fullscreen
        if callback is None:
            logger.debug("Fullscreen requested without a handler")
            return False
        callback()
        return True

    def _invoke_item_callback(self, callback, action: str) -> bool:
        item = self.selected_item
        if item is None:
            logger.debug("Popup action %s with nothing selected", action)
            return False
        if callback is None:
            logger.debug("Popup action %s has no handler", action)
            return False
        callback(item)
        return True

    @property
    def phase(self) -> SelectionPhase:
        return self.selection.phase
