"""Tests for popup placement."""

import pytest

from graphscope.graph.abstraction import Point, Size
from graphscope.interaction.popup import PopupConfig, PopupPlacer, place

VIEWPORT = Size(1280, 800)
POPUP = Size(320, 400)


class TestPlace:
    """Tests for the placement function."""

    def test_default_below_right_of_pointer(self):
        assert place(Point(100, 100), VIEWPORT, POPUP) == Point(120, 120)

    def test_flips_left_near_right_edge(self):
        anchor = place(Point(1100, 100), VIEWPORT, POPUP)
        assert anchor == Point(1100 - 320 - 20, 120)

    def test_flips_up_near_bottom_edge(self):
        anchor = place(Point(100, 700), VIEWPORT, POPUP)
        assert anchor == Point(120, 700 - 400 - 20)

    def test_bottom_right_corner_flips_both(self):
        """Pointer 5px from the bottom-right corner flips on both axes."""
        pointer = Point(VIEWPORT.width - 5, VIEWPORT.height - 5)
        anchor = place(pointer, VIEWPORT, POPUP)
        assert anchor == Point(pointer.x - 340, pointer.y - 420)
        assert anchor.x >= 8
        assert anchor.y >= 8

    def test_flip_clamped_to_margin(self):
        """A flip that would go negative stops at the margin."""
        small = Size(400, 450)
        anchor = place(Point(150, 200), small, POPUP)
        assert anchor == Point(8, 8)

    @pytest.mark.parametrize("x", [933, 935, 940])
    def test_margin_band_shifts_inward_by_at_most_margin(self, x):
        """An unflipped popup ending in the margin band moves back inside it."""
        anchor = place(Point(x, 100), VIEWPORT, POPUP)
        unflipped = x + 20
        assert anchor.x == VIEWPORT.width - 320 - 8
        assert 0 < unflipped - anchor.x <= 8

    def test_popup_larger_than_viewport(self):
        """Oversized popups pin to the top-left margin, never negative."""
        anchor = place(Point(50, 50), Size(200, 200), POPUP)
        assert anchor == Point(8, 8)

    def test_custom_offset_and_margin(self):
        anchor = place(Point(0, 0), VIEWPORT, POPUP, offset=5, margin=12)
        assert anchor == Point(12, 12)

    def test_deterministic(self):
        pointer = Point(777, 555)
        assert place(pointer, VIEWPORT, POPUP) == place(pointer, VIEWPORT, POPUP)

    @pytest.mark.parametrize("x", [0, 1, 7, 8, 300, 639, 640, 941, 950, 1000, 1271, 1275, 1280])
    @pytest.mark.parametrize("y", [0, 8, 200, 379, 380, 400, 500, 771, 792, 800])
    def test_popup_contained_in_margins(self, x, y):
        """Whenever the popup fits, it stays inside the margin band."""
        anchor = place(Point(x, y), VIEWPORT, POPUP)
        assert 8 <= anchor.x
        assert anchor.x + POPUP.width <= VIEWPORT.width - 8
        assert 8 <= anchor.y
        assert anchor.y + POPUP.height <= VIEWPORT.height - 8

    @pytest.mark.parametrize("pointer", [Point(1280, 400), Point(640, 800), Point(1280, 800)])
    def test_pointer_on_viewport_edge(self, pointer):
        """A pointer exactly on the edge never pushes the popup off-screen."""
        anchor = place(pointer, VIEWPORT, POPUP)
        assert anchor.x + POPUP.width <= VIEWPORT.width
        assert anchor.y + POPUP.height <= VIEWPORT.height


class TestPopupPlacer:
    """Tests for the bound placer."""

    def test_uses_config(self):
        placer = PopupPlacer(Size(1000, 1000), PopupConfig(width=100, height=50, offset=10, margin=4))
        assert placer.place(Point(20, 30)) == Point(30, 40)

    def test_bounds(self):
        placer = PopupPlacer(VIEWPORT)
        bounds = placer.bounds(Point(10, 20))
        assert (bounds.x, bounds.y, bounds.width, bounds.height) == (10, 20, 320, 400)
        assert bounds.contains(Point(330, 420))
        assert not bounds.contains(Point(331, 420))

    def test_resize(self):
        placer = PopupPlacer(VIEWPORT)
        placer.resize(Size(500, 500))
        anchor = placer.place(Point(300, 300))
        assert anchor.x + 320 <= 500
        assert anchor.y + 400 <= 500

    def test_rejects_empty_popup(self):
        with pytest.raises(ValueError):
            PopupConfig(width=0)
