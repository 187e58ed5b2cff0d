"""
Unit tests for layout models.
"""

import pytest

from photoprint_toolkit.core.models import FreeRect, PhotoItem
from photoprint_toolkit.layout import LayoutResult, PagePlan, PhotoPlacement, ResolvedPhoto


@pytest.fixture
def placement():
    photo = PhotoItem("p1", "beach.jpg", 4000, 3000)
    resolved = ResolvedPhoto(photo, print_width=384.0, print_height=288.0)
    return PhotoPlacement(resolved, x=9.6, y=9.6, width=288.0, height=384.0, is_rotated=True)


class TestPhotoPlacement:

    def test_edges_when_placed_then_offset_by_footprint(self, placement):
        assert placement.right == pytest.approx(297.6)
        assert placement.bottom == pytest.approx(393.6)
        assert placement.as_rect() == FreeRect(9.6, 9.6, 288.0, 384.0)

    def test_to_dict_when_serialized_then_pixels_and_inches(self, placement):
        d = placement.to_dict(96)
        assert d["photo_id"] == "p1"
        assert d["width_px"] == 288.0
        assert d["width_in"] == pytest.approx(3.0)
        assert d["height_in"] == pytest.approx(4.0)
        assert d["is_rotated"] is True


class TestLayoutResult:

    def test_counts_when_pages_then_summed(self, placement):
        page = PagePlan(index=0, placements=(placement,))
        result = LayoutResult(pages=(page, PagePlan(index=1, placements=(placement,))))
        assert result.page_count == 2
        assert result.total_placements == 2
        assert page.area_used == pytest.approx(288.0 * 384.0)

    def test_page_of_when_missing_then_none(self, placement):
        result = LayoutResult(pages=(PagePlan(index=0, placements=(placement,)),))
        assert result.page_of("p1") == 0
        assert result.page_of("nope") is None

    def test_to_dict_when_dropped_then_listed(self, placement):
        dropped = PhotoItem("p2", "huge.jpg", 100, 100, target_diagonal_in=40.0)
        result = LayoutResult(
            pages=(PagePlan(index=0, placements=(placement,)),),
            dropped=(dropped,),
            warnings=["Photo huge.jpg is too large to fit on a page"],
        )

        d = result.to_dict(96)

        assert d["page_count"] == 1
        assert d["pages"][0]["placements"][0]["name"] == "beach.jpg"
        assert d["dropped"][0]["photo_id"] == "p2"
        assert d["warnings"] == ["Photo huge.jpg is too large to fit on a page"]
