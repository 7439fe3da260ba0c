"""
Graph Abstraction Layer

Value types shared by the layout, viewport and interaction layers. Items come
from an external search collaborator; everything positional is derived from
them and replaced wholesale whenever a new result set arrives.
"""

import itertools
import logging
import math
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Point:
    """A 2D point (logical units in world space, pixels in screen space)."""
    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def scaled(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True)
class Size:
    """Width/height pair."""
    width: float
    height: float

    @property
    def center(self) -> Point:
        return Point(self.width / 2, self.height / 2)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle anchored at its top-left corner."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def contains(self, point: Point) -> bool:
        """Check if a point lies inside the rectangle (edges inclusive)."""
        return (self.x <= point.x <= self.right and
                self.y <= point.y <= self.bottom)


@dataclass(frozen=True)
class Item:
    """A rankable content unit supplied by the search collaborator.

    Only ``id``, ``relevance`` and ``connections`` drive the geometry; the
    descriptive fields are carried through for the detail popup.
    """
    id: str
    title: str
    relevance: float
    connections: FrozenSet[str] = frozenset()

    # Popup details
    source: str = ""  # e.g. podcast name
    duration: str = ""
    tags: Tuple[str, ...] = ()
    description: str = ""

    def __post_init__(self):
        # Frozen dataclass: normalize through object.__setattr__
        if not isinstance(self.connections, frozenset):
            object.__setattr__(self, "connections", frozenset(self.connections))
        if not isinstance(self.tags, tuple):
            object.__setattr__(self, "tags", tuple(self.tags))

        relevance = float(self.relevance)
        if math.isnan(relevance):
            logger.warning("Item %s has NaN relevance, treating as 0.0", self.id)
            relevance = 0.0
        elif relevance < 0.0 or relevance > 1.0:
            clamped = min(1.0, max(0.0, relevance))
            logger.warning(
                "Item %s relevance %.3f outside [0, 1], clamped to %.3f",
                self.id, relevance, clamped,
            )
            relevance = clamped
        object.__setattr__(self, "relevance", relevance)

    @classmethod
    def from_dict(cls, data: dict) -> "Item":
        """Build an item from a mapping as delivered by a search backend.

        Accepts ``relevanceScore`` as an alias of ``relevance`` and
        ``podcast`` as an alias of ``source``. A single string is accepted
        for ``connections`` or ``tags`` and treated as a one-element list.

        Raises:
            ValueError: If ``id`` is missing, relevance is not a number or
                ``connections``/``tags`` are not lists.
        """
        if "id" not in data:
            raise ValueError(f"Item is missing an 'id': {data!r}")
        item_id = str(data["id"])

        relevance = data.get("relevance", data.get("relevanceScore", 0.0))
        try:
            relevance = float(relevance)
        except (TypeError, ValueError):
            raise ValueError(f"Item {item_id} has non-numeric relevance {relevance!r}") from None

        return cls(
            id=item_id,
            title=str(data.get("title", "")),
            relevance=relevance,
            connections=frozenset(str(c) for c in _as_list(data, "connections", item_id)),
            source=str(data.get("source", data.get("podcast", ""))),
            duration=str(data.get("duration", "")),
            tags=tuple(str(t) for t in _as_list(data, "tags", item_id)),
            description=str(data.get("description", "")),
        )


def _as_list(data: dict, key: str, item_id: str) -> list:
    value = data.get(key)
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, (list, tuple, set, frozenset)):
        raise ValueError(f"Item {item_id}: '{key}' must be a list, got {type(value).__name__}")
    return list(value)


@dataclass(frozen=True)
class PositionedItem:
    """An item with its derived position in the logical canvas."""
    item: Item
    position: Point

    @property
    def id(self) -> str:
        return self.item.id

    @property
    def relevance(self) -> float:
        return self.item.relevance

    @property
    def connections(self) -> FrozenSet[str]:
        return self.item.connections


_generations = itertools.count(1)


class ResultSet:
    """An ordered, immutable result set with a generation identity.

    Each instance receives a fresh ``generation`` so consumers can tell a new
    search apart from a re-delivery of the same one.
    """

    def __init__(self, items: Iterable[Item] = ()):
        seen = set()
        ordered: List[Item] = []
        for item in items:
            if item.id in seen:
                logger.warning("Duplicate item id %s in result set, keeping first", item.id)
                continue
            seen.add(item.id)
            ordered.append(item)

        self._items: Tuple[Item, ...] = tuple(ordered)
        self.generation: int = next(_generations)

    @property
    def items(self) -> Tuple[Item, ...]:
        return self._items

    def get(self, item_id: str) -> Optional[Item]:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def __contains__(self, item_id: object) -> bool:
        return any(item.id == item_id for item in self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"ResultSet(generation={self.generation}, items={len(self._items)})"


@dataclass
class ViewportState:
    """Pan/zoom state, owned by the viewport controller."""
    zoom: float = 1.0
    pan: Point = ORIGIN


@dataclass
class DragState:
    """Ephemeral drag bookkeeping for one pointer-down/up cycle."""
    active: bool = False
    origin_pointer: Point = ORIGIN
    origin_pan: Point = ORIGIN


@dataclass
class SelectionState:
    """Selected node and the popup anchor captured when it was selected."""
    selected_id: Optional[str] = None
    anchor: Point = field(default=ORIGIN)

    @property
    def is_selected(self) -> bool:
        return self.selected_id is not None
