"""
Node Selection

Two-state machine: ``DESELECTED`` or ``SELECTED(id)``. There is no hover
state and no multi-select. The popup anchor is captured once, when a node
becomes selected, and does not follow the pointer afterwards.
"""

import logging
from enum import Enum
from typing import Callable, Optional

from ..graph.abstraction import Point, SelectionState

logger = logging.getLogger(__name__)


class SelectionPhase(Enum):
    """States of the selection machine."""
    DESELECTED = "deselected"
    SELECTED = "selected"


class SelectionMachine:
    """Owns the selection state and its transitions."""

    def __init__(self, place_popup: Callable[[Point], Point]):
        """
        Args:
            place_popup: Maps a pointer position to a popup anchor,
                         normally ``PopupPlacer.place``
        """
        self._place_popup = place_popup
        self.state = SelectionState()

    @property
    def phase(self) -> SelectionPhase:
        if self.state.selected_id is None:
            return SelectionPhase.DESELECTED
        return SelectionPhase.SELECTED

    @property
    def selected_id(self) -> Optional[str]:
        return self.state.selected_id

    @property
    def anchor(self) -> Optional[Point]:
        """Popup anchor, or None when nothing is selected."""
        if self.state.selected_id is None:
            return None
        return self.state.anchor

    def click_node(self, node_id: str, pointer: Point) -> SelectionPhase:
        """Handle a click on a node.

        Clicking the selected node again deselects it; clicking any other
        node selects that one and anchors the popup at ``pointer``.
        """
        if self.state.selected_id == node_id:
            logger.debug("Node %s clicked again, deselecting", node_id)
            self.state = SelectionState()
        else:
            anchor = self._place_popup(pointer)
            self.state = SelectionState(selected_id=node_id, anchor=anchor)
            logger.debug("Selected node %s", node_id)
        return self.phase

    def pointer_down_outside(self):
        """A pointer-down landed outside every node and the popup."""
        self._clear("outside click")

    def replace_result_set(self):
        """A new result set arrived; ids from the old one are stale."""
        self._clear("result set replaced")

    def close(self):
        """The popup's close button was used."""
        self._clear("popup closed")

    def _clear(self, reason: str):
        if self.state.selected_id is not None:
            logger.debug("Deselecting %s: %s", self.state.selected_id, reason)
        self.state = SelectionState()
