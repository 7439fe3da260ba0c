"""Tests for edge resolution."""

import pytest

from graphscope.graph.abstraction import Item, Point, PositionedItem
from graphscope.layout.edges import Edge, EdgeResolver
from graphscope.layout.radial import layout_items


def _positioned(item_id: str, connections=(), x: float = 0.0, y: float = 0.0) -> PositionedItem:
    item = Item(id=item_id, title=item_id.upper(), relevance=0.5, connections=frozenset(connections))
    return PositionedItem(item=item, position=Point(x, y))


class TestEdge:
    """Tests for the undirected edge value."""

    def test_endpoint_order_does_not_matter(self):
        assert Edge.between("b", "a") == Edge.between("a", "b")
        assert hash(Edge.between("b", "a")) == hash(Edge.between("a", "b"))

    def test_ids_sorted(self):
        assert Edge.between("z", "a").ids == ("a", "z")


class TestEdgeResolver:
    """Tests for resolving declared connections."""

    def test_mutual_declaration_gives_one_edge(self):
        """A lists B and B lists A: exactly one edge."""
        items = [_positioned("a", ["b"]), _positioned("b", ["a"])]
        assert EdgeResolver().resolve(items) == {Edge.between("a", "b")}

    def test_one_sided_declaration(self):
        """A connection declared on one end is enough."""
        items = [_positioned("a", ["b"]), _positioned("b")]
        assert EdgeResolver().resolve(items) == {Edge.between("a", "b")}

    def test_dangling_connection_dropped(self):
        """Targets outside the result set are silently ignored."""
        items = [_positioned("a", ["b", "missing"]), _positioned("b")]
        edges = EdgeResolver().resolve(items)
        assert edges == {Edge.between("a", "b")}

    def test_self_connection_dropped(self):
        items = [_positioned("a", ["a"])]
        assert EdgeResolver().resolve(items) == set()

    def test_no_items(self):
        assert EdgeResolver().resolve([]) == set()

    def test_segment_fixture_edges(self, segment_items):
        """The five-segment fixture has five distinct relations."""
        edges = EdgeResolver().resolve(layout_items(segment_items))
        assert edges == {
            Edge.between("1", "2"),
            Edge.between("1", "4"),
            Edge.between("2", "3"),
            Edge.between("3", "5"),
            Edge.between("4", "5"),
        }


class TestSegments:
    """Tests for drawable segments."""

    def test_segments_carry_positions(self):
        items = [_positioned("a", ["b"], x=1, y=2), _positioned("b", ["a"], x=3, y=4)]
        [segment] = EdgeResolver().segments(items)
        assert segment.edge == Edge.between("a", "b")
        assert segment.start == Point(1, 2)
        assert segment.end == Point(3, 4)

    def test_segments_follow_edge_orientation(self):
        """start is always the position of edge.a."""
        items = [_positioned("b", ["a"], x=3, y=4), _positioned("a", x=1, y=2)]
        [segment] = EdgeResolver().segments(items)
        assert segment.edge.a == "a"
        assert segment.start == Point(1, 2)

    def test_segment_order_is_stable(self, segment_items):
        positioned = layout_items(segment_items)
        first = [s.edge for s in EdgeResolver().segments(positioned)]
        second = [s.edge for s in EdgeResolver().segments(positioned)]
        assert first == second
        assert len(first) == len(set(first))
