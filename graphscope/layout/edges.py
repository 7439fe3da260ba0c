"""
Edge Resolution

Turns the connection ids declared on items into drawable, undirected edges.
Connections may point at items outside the current (filtered) result set and
may be declared from both ends; neither is an error.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Set, Tuple

from ..graph.abstraction import Point, PositionedItem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Edge:
    """Undirected edge between two item ids.

    Endpoints are stored sorted, so ``Edge.between("b", "a") ==
    Edge.between("a", "b")`` and both hash the same.
    """
    a: str
    b: str

    @classmethod
    def between(cls, first: str, second: str) -> "Edge":
        if second < first:
            first, second = second, first
        return cls(first, second)

    @property
    def ids(self) -> Tuple[str, str]:
        return (self.a, self.b)


@dataclass(frozen=True)
class EdgeSegment:
    """A resolved edge with endpoint coordinates in world space."""
    edge: Edge
    start: Point
    end: Point


class EdgeResolver:
    """Resolves declared connections against the current item set."""

    def resolve(self, items: Iterable[PositionedItem]) -> Set[Edge]:
        """Resolve connections into a deduplicated set of undirected edges.

        Dangling targets and self-connections are dropped silently.
        """
        return set(self._resolve_ordered(list(items)))

    def segments(self, items: Iterable[PositionedItem]) -> List[EdgeSegment]:
        """Resolve edges and attach endpoint positions.

        Order follows the first declaration in item order, so repeated calls
        on the same input draw segments in the same order.
        """
        items = list(items)
        positions: Dict[str, Point] = {p.id: p.position for p in items}
        return [
            EdgeSegment(edge=edge, start=positions[edge.a], end=positions[edge.b])
            for edge in self._resolve_ordered(items)
        ]

    def _resolve_ordered(self, items: List[PositionedItem]) -> List[Edge]:
        present = {p.id for p in items}
        seen: Set[Edge] = set()
        ordered: List[Edge] = []
        dangling = 0

        for positioned in items:
            for target in sorted(positioned.connections):
                if target not in present:
                    dangling += 1
                    continue
                if target == positioned.id:
                    continue
                edge = Edge.between(positioned.id, target)
                if edge in seen:
                    continue
                seen.add(edge)
                ordered.append(edge)

        if dangling:
            logger.debug("Dropped %d dangling connection(s)", dangling)
        return ordered
