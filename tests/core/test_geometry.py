"""
Unit Tests for FreeRect Model

Tests for the axis-aligned rectangle used for free space and footprints.
"""

import pytest

from photoprint_toolkit.core.models import FreeRect


class TestFreeRect:
    """Tests for FreeRect dataclass."""

    # ─────────────────────────────────────────────────────────────────────────
    # Constructor Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_init_when_valid_then_exposes_edges(self):
        """Edges and area derive from x, y, w, h."""
        rect = FreeRect(10, 20, 100, 50)
        assert rect.right == 110
        assert rect.bottom == 70
        assert rect.area == 5000

    def test_init_when_zero_size_then_allowed(self):
        """Zero width or height is a valid (empty) rectangle."""
        rect = FreeRect(0, 0, 0, 10)
        assert rect.area == 0

    def test_init_when_negative_width_then_raises_error(self):
        with pytest.raises(ValueError, match="w must be >= 0"):
            FreeRect(0, 0, -1, 10)

    def test_init_when_negative_height_then_raises_error(self):
        with pytest.raises(ValueError, match="h must be >= 0"):
            FreeRect(0, 0, 10, -0.5)

    def test_init_when_frozen_then_cannot_assign(self):
        rect = FreeRect(0, 0, 10, 10)
        with pytest.raises(AttributeError):
            rect.x = 5

    # ─────────────────────────────────────────────────────────────────────────
    # Query Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_fits_when_exact_size_then_true(self):
        assert FreeRect(0, 0, 100, 50).fits(100, 50)

    def test_fits_when_too_wide_then_false(self):
        assert not FreeRect(0, 0, 100, 50).fits(100.01, 10)

    def test_overlaps_when_sharing_edge_then_false(self):
        """Touching rectangles do not overlap."""
        a = FreeRect(0, 0, 10, 10)
        b = FreeRect(10, 0, 10, 10)
        assert not a.overlaps(b)
        assert not b.overlaps(a)

    def test_overlaps_when_interiors_intersect_then_true(self):
        a = FreeRect(0, 0, 10, 10)
        b = FreeRect(5, 5, 10, 10)
        assert a.overlaps(b)

    def test_contains_when_inside_then_true(self):
        outer = FreeRect(0, 0, 100, 100)
        assert outer.contains(FreeRect(10, 10, 90, 90))
        assert not outer.contains(FreeRect(10, 10, 91, 10))

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_to_dict_when_called_then_short_keys(self):
        rect = FreeRect(1.5, 2.5, 30.0, 40.0)
        assert rect.to_dict() == {"x": 1.5, "y": 2.5, "w": 30.0, "h": 40.0}
