"""Tests for the graph data model."""

import math

import pytest

from graphscope.graph.abstraction import Item, Point, Rect, ResultSet, Size


class TestItem:
    """Tests for item normalization."""

    def test_connections_normalized_to_frozenset(self):
        item = Item(id="a", title="A", relevance=0.5, connections=["b", "c", "b"])
        assert item.connections == frozenset({"b", "c"})

    def test_relevance_clamped(self):
        assert Item(id="a", title="A", relevance=1.7).relevance == 1.0
        assert Item(id="a", title="A", relevance=-0.2).relevance == 0.0

    def test_nan_relevance_becomes_zero(self):
        assert Item(id="a", title="A", relevance=math.nan).relevance == 0.0

    def test_from_dict_aliases(self):
        item = Item.from_dict({
            "id": 7,
            "title": "Seven",
            "relevanceScore": 0.4,
            "podcast": "Show",
            "connections": [1, 2],
            "tags": ["x"],
        })
        assert item.id == "7"
        assert item.relevance == 0.4
        assert item.source == "Show"
        assert item.connections == frozenset({"1", "2"})
        assert item.tags == ("x",)

    def test_from_dict_requires_id(self):
        with pytest.raises(ValueError):
            Item.from_dict({"title": "No id"})

    @pytest.mark.parametrize("relevance", [None, "high", [0.5]])
    def test_from_dict_non_numeric_relevance(self, relevance):
        with pytest.raises(ValueError, match="relevance"):
            Item.from_dict({"id": "a", "relevance": relevance})

    def test_from_dict_numeric_string_relevance(self):
        assert Item.from_dict({"id": "a", "relevance": "0.25"}).relevance == 0.25

    def test_from_dict_single_string_is_one_entry(self):
        item = Item.from_dict({"id": "a", "connections": "12", "tags": "AI"})
        assert item.connections == frozenset({"12"})
        assert item.tags == ("AI",)

    def test_from_dict_null_lists_are_empty(self):
        item = Item.from_dict({"id": "a", "connections": None, "tags": None})
        assert item.connections == frozenset()
        assert item.tags == ()

    def test_from_dict_rejects_scalar_connections(self):
        with pytest.raises(ValueError, match="connections"):
            Item.from_dict({"id": "a", "connections": 12})


class TestResultSet:
    """Tests for result set identity and ordering."""

    def test_preserves_order(self, segment_items):
        results = ResultSet(segment_items)
        assert [item.id for item in results] == ["1", "2", "3", "4", "5"]
        assert len(results) == 5

    def test_duplicate_ids_keep_first(self):
        results = ResultSet([
            Item(id="a", title="first", relevance=0.5),
            Item(id="a", title="second", relevance=0.9),
        ])
        assert len(results) == 1
        assert results.get("a").title == "first"

    def test_each_result_set_has_new_generation(self, segment_items):
        first = ResultSet(segment_items)
        second = ResultSet(segment_items)
        assert second.generation > first.generation

    def test_lookup(self, segment_results):
        assert "3" in segment_results
        assert "missing" not in segment_results
        assert segment_results.get("missing") is None


class TestGeometry:
    """Tests for the small geometry helpers."""

    def test_point_arithmetic(self):
        assert Point(1, 2) + Point(3, 4) == Point(4, 6)
        assert Point(3, 4) - Point(1, 2) == Point(2, 2)
        assert Point(1, 2).scaled(2) == Point(2, 4)
        assert Point(0, 0).distance_to(Point(3, 4)) == 5.0

    def test_size_center(self):
        assert Size(800, 600).center == Point(400, 300)

    def test_rect_contains_edges(self):
        rect = Rect(10, 10, 5, 5)
        assert rect.contains(Point(10, 10))
        assert rect.contains(Point(15, 15))
        assert not rect.contains(Point(9.9, 12))
