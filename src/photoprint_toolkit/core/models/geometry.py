"""
Module: geometry

Purpose:
    Provides the FreeRect dataclass - an axis-aligned rectangle in page
    layout units (pixels at the layout DPI). Used for the unoccupied
    regions of a page and for the footprint of placed photos.

Key Functions:
    - FreeRect.fits(width, height): Check if a box fits inside
    - FreeRect.overlaps(other): Check for interior overlap
    - FreeRect.contains(other): Check full containment
    - FreeRect.to_dict(): Serialize for JSON

Dependencies:
    - dataclasses (std)

Used By:
    - layout.free_space: Free-rectangle pool, split and merge
    - layout.search: Best-fit scoring
    - layout.models: PhotoPlacement.as_rect()
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FreeRect:
    """
    Axis-aligned rectangle in layout units.

    The origin is the page's top-left corner; y grows downwards.
    The region is [x, x + w) x [y, y + h).

    Attributes:
        x: Left edge
        y: Top edge
        w: Width
        h: Height

    Invariants:
        - w >= 0
        - h >= 0

    Example:
        >>> rect = FreeRect(10, 10, 100, 50)
        >>> rect.right, rect.bottom
        (110, 60)
        >>> rect.fits(100, 50)
        True
    """

    x: float
    y: float
    w: float
    h: float

    def __post_init__(self) -> None:
        """Validate size on construction."""
        if self.w < 0:
            raise ValueError(f"w must be >= 0: {self.w}")
        if self.h < 0:
            raise ValueError(f"h must be >= 0: {self.h}")

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def right(self) -> float:
        """Right edge (x + w)."""
        return self.x + self.w

    @property
    def bottom(self) -> float:
        """Bottom edge (y + h)."""
        return self.y + self.h

    @property
    def area(self) -> float:
        """Area in square layout units."""
        return self.w * self.h

    # ─────────────────────────────────────────────────────────────────────────
    # Query Methods
    # ─────────────────────────────────────────────────────────────────────────

    def fits(self, width: float, height: float) -> bool:
        """
        Check if a width x height box fits inside this rectangle.

        Args:
            width: Box width
            height: Box height

        Returns:
            True if width <= w and height <= h
        """
        return width <= self.w and height <= self.h

    def overlaps(self, other: FreeRect) -> bool:
        """
        Check if the interiors of two rectangles intersect.

        Rectangles that only share an edge do NOT overlap.

        Args:
            other: Another FreeRect

        Returns:
            True if the rectangles share interior area
        """
        return not (
            self.right <= other.x
            or other.right <= self.x
            or self.bottom <= other.y
            or other.bottom <= self.y
        )

    def contains(self, other: FreeRect) -> bool:
        """Check if other lies entirely inside this rectangle."""
        return (
            self.x <= other.x
            and self.y <= other.y
            and other.right <= self.right
            and other.bottom <= self.bottom
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON storage."""
        return {"x": self.x, "y": self.y, "w": self.w, "h": self.h}
