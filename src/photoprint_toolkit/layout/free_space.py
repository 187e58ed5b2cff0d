"""
Module: layout.free_space

Purpose:
    Per-page bookkeeping of unoccupied area as a list of free rectangles.
    Placing a photo carves its footprint (plus the trailing gap) out of
    one free rectangle with a single guillotine cut, then adjacent free
    rectangles that share a full edge are merged back together.

Key Functions:
    - split_free_rect(): Guillotine cut of one rectangle around a photo
    - merge_free_rects(): Coalesce edge-sharing rectangles to a fixed point

Key Classes:
    - FreeSpacePool: Owned, index-addressable free-rectangle list of a page

Algorithm:
    Photos are anchored at the top-left of the chosen rectangle and the
    gap is reserved on the right and bottom sides only. When both a right
    and a bottom leftover exist, the cut direction keeps the larger piece
    whole:
    - wide rectangle (w > h): full-height strip on the right,
      short strip below the photo
    - tall or square rectangle: full-width strip below,
      short strip to the right of the photo

Dependencies:
    - core.models: FreeRect

Used By:
    - layout.packer: One pool per page
    - layout.search: Reads pool rectangles
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Sequence

from photoprint_toolkit.core.models import FreeRect

logger = logging.getLogger(__name__)


def split_free_rect(
    rect: FreeRect,
    width: float,
    height: float,
    gap: float = 0.0,
) -> List[FreeRect]:
    """
    Carve a width x height photo out of the top-left corner of rect.

    Args:
        rect: Free rectangle the photo is placed into
        width: Photo footprint width (after orientation choice)
        height: Photo footprint height
        gap: Spacing reserved to the right of and below the photo

    Returns:
        0, 1 or 2 new free rectangles covering what is left

    Example:
        >>> split_free_rect(FreeRect(0, 0, 100, 50), 30, 50)
        [FreeRect(x=30, y=0, w=70, h=50)]
    """
    required_width = width + gap
    required_height = height + gap
    leftover_w = rect.w - required_width
    leftover_h = rect.h - required_height

    if leftover_w > 0 and leftover_h > 0:
        if rect.w > rect.h:
            # Wide: vertical cut
            return [
                FreeRect(rect.x + required_width, rect.y, leftover_w, rect.h),
                FreeRect(rect.x, rect.y + required_height, required_width, leftover_h),
            ]
        # Tall or square: horizontal cut
        return [
            FreeRect(rect.x, rect.y + required_height, rect.w, leftover_h),
            FreeRect(rect.x + required_width, rect.y, leftover_w, height),
        ]
    if leftover_w > 0:
        return [FreeRect(rect.x + required_width, rect.y, leftover_w, rect.h)]
    if leftover_h > 0:
        return [FreeRect(rect.x, rect.y + required_height, rect.w, leftover_h)]
    return []


def _try_merge(a: FreeRect, b: FreeRect) -> Optional[FreeRect]:
    """Union of a and b if they share one full edge exactly, else None."""
    if a.x == b.x and a.w == b.w:
        if a.bottom == b.y:
            return FreeRect(a.x, a.y, a.w, a.h + b.h)
        if b.bottom == a.y:
            return FreeRect(a.x, b.y, a.w, a.h + b.h)
    if a.y == b.y and a.h == b.h:
        if a.right == b.x:
            return FreeRect(a.x, a.y, a.w + b.w, a.h)
        if b.right == a.x:
            return FreeRect(b.x, a.y, a.w + b.w, a.h)
    return None


def merge_free_rects(rects: Iterable[FreeRect]) -> List[FreeRect]:
    """
    Coalesce free rectangles that share a full edge.

    Each pass walks the list in order; a rectangle absorbs every later
    rectangle it can merge with (growing as it goes). Passes repeat
    until one makes no merge.

    Args:
        rects: Free rectangles of one page

    Returns:
        New list; the input is not modified

    Example:
        >>> merge_free_rects([FreeRect(0, 0, 10, 5), FreeRect(0, 5, 10, 5)])
        [FreeRect(x=0, y=0, w=10, h=10)]
    """
    current = list(rects)
    merged_any = True
    while merged_any:
        merged_any = False
        next_rects: List[FreeRect] = []
        absorbed: set[int] = set()

        for i in range(len(current)):
            if i in absorbed:
                continue
            grown = current[i]
            for j in range(i + 1, len(current)):
                if j in absorbed:
                    continue
                union = _try_merge(grown, current[j])
                if union is not None:
                    grown = union
                    absorbed.add(j)
                    merged_any = True
            next_rects.append(grown)

        current = next_rects
    return current


class FreeSpacePool:
    """
    The free rectangles of one page.

    Each page exclusively owns its pool; rectangles are addressed by
    their position in the list, which is what PlacementSearch reports.

    Attributes:
        rects: Current free rectangles (read-only view)

    Example:
        >>> pool = FreeSpacePool.for_page(FreeRect(10, 10, 800, 1000))
        >>> _ = pool.place(0, 300, 300)
        >>> len(pool)
        2
    """

    def __init__(self, rects: Sequence[FreeRect] = ()):
        self._rects: List[FreeRect] = list(rects)

    @classmethod
    def for_page(cls, usable_area: FreeRect) -> FreeSpacePool:
        """New pool holding a single full usable-area rectangle."""
        return cls([usable_area])

    @property
    def rects(self) -> tuple[FreeRect, ...]:
        return tuple(self._rects)

    def __len__(self) -> int:
        return len(self._rects)

    def __iter__(self) -> Iterator[FreeRect]:
        return iter(self._rects)

    def __getitem__(self, index: int) -> FreeRect:
        return self._rects[index]

    @property
    def free_area(self) -> float:
        """Total free area in square layout units."""
        return sum(r.area for r in self._rects)

    def place(self, index: int, width: float, height: float, gap: float = 0.0) -> FreeRect:
        """
        Consume the rectangle at index for a photo, then merge.

        The rectangle is replaced in place by its 0-2 split pieces, so
        the indexes of the other rectangles keep their order.

        Args:
            index: Position of the chosen free rectangle
            width: Photo footprint width
            height: Photo footprint height
            gap: Trailing spacing

        Returns:
            The consumed rectangle (the photo sits at its top-left)

        Raises:
            IndexError: If index does not address a rectangle
        """
        if not 0 <= index < len(self._rects):
            raise IndexError(
                f"free rectangle index {index} out of range ({len(self._rects)} rectangles)"
            )
        rect = self._rects[index]
        pieces = split_free_rect(rect, width, height, gap)
        self._rects[index:index + 1] = pieces
        self._rects = merge_free_rects(self._rects)
        logger.debug(
            f"Split {rect} into {len(pieces)} piece(s); "
            f"{len(self._rects)} free rectangle(s) after merge"
        )
        return rect
