"""
Module: layout.search

Purpose:
    Best-fit query over the free rectangles of every page.
    Scores each (page, rectangle, orientation) that fits with the
    Best Short Side Fit heuristic and returns the lowest score.

Key Functions:
    - orientations_for(): Unrotated and (for non-square photos) rotated
    - score_fit(): BSSF score of one orientation in one rectangle
    - find_best_fit(): Pure search over page pools

Algorithm:
    score = min(rect.w - width, rect.h - height)
    The smallest leftover along the tighter side wins, which keeps
    thin unusable slivers rare. Ties keep the first candidate found:
    lowest page index, then lowest rectangle index, then unrotated
    before rotated.

Dependencies:
    - layout.free_space: FreeSpacePool
    - layout.models: ResolvedPhoto

Used By:
    - layout.packer: Placement and new-page retry
"""

from __future__ import annotations

from typing import Iterable, List, NamedTuple, Optional, Sequence

from photoprint_toolkit.core.models import FreeRect

from .free_space import FreeSpacePool
from .models import ResolvedPhoto


class Orientation(NamedTuple):
    """A footprint to try: width x height, rotated or not."""
    width: float
    height: float
    is_rotated: bool


class PlacementCandidate(NamedTuple):
    """
    Chosen slot for one photo.

    Attributes:
        page_index: Index into the pool list
        rect_index: Index into that page's free rectangles
        width: Footprint width after orientation choice
        height: Footprint height after orientation choice
        is_rotated: Whether the rotated orientation won
        score: BSSF score (lower is better)
    """
    page_index: int
    rect_index: int
    width: float
    height: float
    is_rotated: bool
    score: float


def orientations_for(resolved: ResolvedPhoto) -> List[Orientation]:
    """
    Orientations to try for a photo.

    A square photo has a single distinct orientation.

    Args:
        resolved: Photo with print size

    Returns:
        [unrotated] or [unrotated, rotated]
    """
    orientations = [Orientation(resolved.print_width, resolved.print_height, False)]
    if not resolved.is_square:
        orientations.append(Orientation(resolved.print_height, resolved.print_width, True))
    return orientations


def score_fit(rect: FreeRect, orientation: Orientation) -> Optional[float]:
    """BSSF score, or None if the orientation does not fit in rect."""
    if not rect.fits(orientation.width, orientation.height):
        return None
    return min(rect.w - orientation.width, rect.h - orientation.height)


def find_best_fit(
    orientations: Sequence[Orientation],
    pools: Sequence[FreeSpacePool],
    page_indices: Optional[Iterable[int]] = None,
) -> Optional[PlacementCandidate]:
    """
    Find the best-scoring slot for a photo.

    Args:
        orientations: Candidates from orientations_for()
        pools: Free-space pool per page, in page order
        page_indices: Restrict the search to these pages (default: all)

    Returns:
        Best PlacementCandidate, or None if nothing fits

    Example:
        >>> pools = [FreeSpacePool.for_page(FreeRect(0, 0, 100, 100))]
        >>> find_best_fit([Orientation(60, 40, False)], pools).score
        40
    """
    if page_indices is None:
        page_indices = range(len(pools))

    best: Optional[PlacementCandidate] = None
    for page_index in page_indices:
        for rect_index, rect in enumerate(pools[page_index]):
            for orientation in orientations:
                score = score_fit(rect, orientation)
                if score is None:
                    continue
                if best is None or score < best.score:
                    best = PlacementCandidate(
                        page_index=page_index,
                        rect_index=rect_index,
                        width=orientation.width,
                        height=orientation.height,
                        is_rotated=orientation.is_rotated,
                        score=score,
                    )
    return best
