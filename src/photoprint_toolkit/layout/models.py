"""
Module: layout.models

Purpose:
    Data models for page packing.
    Immutable dataclasses representing resolved photos, placements,
    pages and the final layout.

Key Classes:
    - ResolvedPhoto: Photo with its print size for one layout pass
    - PhotoPlacement: Photo positioned on a page
    - PagePlan: Complete page layout
    - LayoutResult: Final layout output

Dependencies:
    - dataclasses (std)
    - core.models: PhotoItem, FreeRect

Used By:
    - layout.sizing: Creates ResolvedPhotos
    - layout.packer: Creates PlacedPhotos and PagePlans
    - output: Renders LayoutResult
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from photoprint_toolkit.core.models import FreeRect, PhotoItem


@dataclass(frozen=True)
class ResolvedPhoto:
    """
    A photo with its print size for the current layout pass.

    Computed fresh on every pass, never cached.

    Attributes:
        photo: Source PhotoItem
        print_width: Unrotated print width in layout units
        print_height: Unrotated print height in layout units
    """

    photo: PhotoItem
    print_width: float
    print_height: float

    @property
    def is_printable(self) -> bool:
        """True if both print dimensions are positive."""
        return self.print_width > 0 and self.print_height > 0

    @property
    def is_square(self) -> bool:
        """True if rotating would not change the footprint."""
        return self.print_width == self.print_height


@dataclass(frozen=True)
class PhotoPlacement:
    """
    A photo positioned on a page.

    width/height are the footprint after the orientation choice, so a
    rotated placement has them swapped relative to the resolved size.

    Attributes:
        resolved: The ResolvedPhoto that was placed
        x: Left edge in layout units (from page left)
        y: Top edge in layout units (from page top)
        width: Footprint width
        height: Footprint height
        is_rotated: Whether the photo is turned 90 degrees

    Example:
        >>> placement = PhotoPlacement(resolved, x=10.0, y=10.0, width=340.0, height=340.0)
        >>> placement.right
        350.0
    """

    resolved: ResolvedPhoto
    x: float
    y: float
    width: float
    height: float
    is_rotated: bool = False

    @property
    def photo(self) -> PhotoItem:
        """The source PhotoItem."""
        return self.resolved.photo

    @property
    def right(self) -> float:
        """Right edge (x + width)."""
        return self.x + self.width

    @property
    def bottom(self) -> float:
        """Bottom edge (y + height)."""
        return self.y + self.height

    def as_rect(self) -> FreeRect:
        """Footprint as a FreeRect."""
        return FreeRect(self.x, self.y, self.width, self.height)

    def to_dict(self, dpi: int) -> dict:
        """
        Serialize for the layout manifest.

        Args:
            dpi: Layout units per inch, for the inch values

        Returns:
            Dict with pixel and inch geometry
        """
        return {
            "photo_id": self.photo.photo_id,
            "name": self.photo.name,
            "x_px": self.x,
            "y_px": self.y,
            "width_px": self.width,
            "height_px": self.height,
            "x_in": self.x / dpi,
            "y_in": self.y / dpi,
            "width_in": self.width / dpi,
            "height_in": self.height / dpi,
            "is_rotated": self.is_rotated,
        }


@dataclass(frozen=True)
class PagePlan:
    """
    Complete layout plan for a single page.

    Attributes:
        index: Page number (0-indexed)
        placements: Tuple of PhotoPlacements in placement order

    Example:
        >>> page = PagePlan(index=0, placements=(p1, p2))
        >>> page.placement_count
        2
    """

    index: int
    placements: tuple[PhotoPlacement, ...]

    @property
    def placement_count(self) -> int:
        """Number of photos on this page."""
        return len(self.placements)

    @property
    def is_empty(self) -> bool:
        """Check if page has no placements."""
        return len(self.placements) == 0

    @property
    def area_used(self) -> float:
        """Sum of placement footprints in square layout units."""
        return sum(p.width * p.height for p in self.placements)


@dataclass(frozen=True)
class LayoutResult:
    """
    Final layout output with diagnostics.

    Attributes:
        pages: Tuple of non-empty PagePlans in creation order
        dropped: Photos too large for an empty page
        skipped: Photos with a non-positive print size (not an error)
        warnings: List of warning messages

    Example:
        >>> result = LayoutResult(pages=(page1, page2))
        >>> result.page_count
        2
    """

    pages: tuple[PagePlan, ...]
    dropped: tuple[PhotoItem, ...] = ()
    skipped: tuple[PhotoItem, ...] = ()
    warnings: list[str] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        """Number of pages in layout."""
        return len(self.pages)

    @property
    def total_placements(self) -> int:
        """Total number of photos placed across all pages."""
        return sum(p.placement_count for p in self.pages)

    @property
    def dropped_count(self) -> int:
        """Number of photos that could not be placed."""
        return len(self.dropped)

    def placements(self) -> list[PhotoPlacement]:
        """All placements, page by page."""
        return [placement for page in self.pages for placement in page.placements]

    def page_of(self, photo_id: str) -> Optional[int]:
        """Index of the page holding photo_id, or None if not placed."""
        for page in self.pages:
            for placement in page.placements:
                if placement.photo.photo_id == photo_id:
                    return page.index
        return None

    def to_dict(self, dpi: int) -> dict:
        """Serialize pages, drops and warnings for the manifest."""
        return {
            "page_count": self.page_count,
            "total_placements": self.total_placements,
            "pages": [
                {
                    "index": page.index,
                    "placements": [p.to_dict(dpi) for p in page.placements],
                }
                for page in self.pages
            ],
            "dropped": [photo.to_dict() for photo in self.dropped],
            "skipped": [photo.to_dict() for photo in self.skipped],
            "warnings": list(self.warnings),
        }
