"""
Unit Tests for PhotoItem Model
"""

from pathlib import Path

import pytest

from photoprint_toolkit.core.models import PhotoItem


class TestPhotoItem:
    """Tests for PhotoItem dataclass."""

    def test_init_when_valid_then_creates_photo(self):
        photo = PhotoItem("p1", "beach.jpg", 4000, 3000)
        assert photo.area_px == 12_000_000
        assert photo.aspect_ratio == pytest.approx(0.75)
        assert photo.target_diagonal_in is None

    def test_init_when_empty_id_then_raises_error(self):
        with pytest.raises(ValueError, match="photo_id"):
            PhotoItem("", "beach.jpg", 10, 10)

    def test_init_when_zero_width_then_raises_error(self):
        with pytest.raises(ValueError, match="width_px must be positive"):
            PhotoItem("p1", "beach.jpg", 0, 10)

    def test_init_when_negative_height_then_raises_error(self):
        with pytest.raises(ValueError, match="height_px must be positive"):
            PhotoItem("p1", "beach.jpg", 10, -3)

    def test_effective_diagonal_when_no_override_then_uses_default(self):
        photo = PhotoItem("p1", "a.jpg", 10, 10)
        assert photo.effective_diagonal(5.0) == 5.0

    def test_effective_diagonal_when_override_then_uses_override(self):
        photo = PhotoItem("p1", "a.jpg", 10, 10, target_diagonal_in=8.0)
        assert photo.effective_diagonal(5.0) == 8.0

    def test_effective_diagonal_when_zero_override_then_keeps_zero(self):
        """An explicit 0 is an override, not 'unset'."""
        photo = PhotoItem("p1", "a.jpg", 10, 10, target_diagonal_in=0.0)
        assert photo.effective_diagonal(5.0) == 0.0

    def test_with_diagonal_when_none_then_clears_override(self):
        photo = PhotoItem("p1", "a.jpg", 10, 10, target_diagonal_in=8.0)
        cleared = photo.with_diagonal(None)
        assert cleared.target_diagonal_in is None
        assert photo.target_diagonal_in == 8.0

    def test_to_dict_when_optional_fields_set_then_included(self):
        photo = PhotoItem("p1", "a.jpg", 10, 20, target_diagonal_in=4.0, source_path=Path("/tmp/a.jpg"))
        d = photo.to_dict()
        assert d["target_diagonal_in"] == 4.0
        assert d["source_path"] == "/tmp/a.jpg"

    def test_to_dict_when_optional_fields_unset_then_omitted(self):
        d = PhotoItem("p1", "a.jpg", 10, 20).to_dict()
        assert "target_diagonal_in" not in d
        assert "source_path" not in d
