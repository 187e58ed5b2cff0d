"""
Module: layout.packer

Purpose:
    Arrange photos onto pages with free-rectangle packing.
    Each photo goes into the best-fitting free rectangle on any existing
    page (rotated 90 degrees if that fits better); a new page is opened
    only when nothing fits.

Key Functions:
    - pack_photos(): Main entry point (sizes photos, then paginates)
    - paginate(): Place already-resolved photos onto pages

Algorithm:
    For each photo, in the order given:
    1. Skip it if its print size is not positive
    2. Search every page's free rectangles (layout.search)
    3. Hit: record the placement, split the rectangle, merge the pool
    4. Miss: open a new page and retry on that page only;
       if it still does not fit, drop the photo with a warning
    Pages left empty are removed and the rest re-indexed.

    Callers that want large photos placed first must sort before
    calling (intake sorts by descending pixel area).

Dependencies:
    - layout.config: LayoutConfig
    - layout.free_space: FreeSpacePool
    - layout.search: find_best_fit
    - layout.sizing: resolve_photos

Used By:
    - controller: Print pipeline
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

from photoprint_toolkit.core.models import FreeRect, PhotoItem

from .config import LayoutConfig
from .free_space import FreeSpacePool
from .models import LayoutResult, PagePlan, PhotoPlacement, ResolvedPhoto
from .search import PlacementCandidate, find_best_fit, orientations_for
from .sizing import resolve_photos

logger = logging.getLogger(__name__)


class _PageAllocator:
    """
    Pages under construction: placements plus a free-space pool each.

    Pools are working state and are discarded with the allocator;
    only the placements reach the LayoutResult.
    """

    def __init__(self, config: LayoutConfig):
        self._usable_area = FreeRect(
            config.margin_px,
            config.margin_px,
            config.usable_width_px,
            config.usable_height_px,
        )
        self.pools: List[FreeSpacePool] = []
        self.placements: List[List[PhotoPlacement]] = []

    def add_page(self) -> int:
        """Open a page with one full usable-area free rectangle."""
        self.pools.append(FreeSpacePool.for_page(self._usable_area))
        self.placements.append([])
        page_index = len(self.pools) - 1
        logger.debug(f"Opened page {page_index}")
        return page_index

    def build_pages(self) -> tuple[PagePlan, ...]:
        """Non-empty pages in creation order, re-indexed from 0."""
        non_empty = [p for p in self.placements if p]
        return tuple(
            PagePlan(index=i, placements=tuple(placements))
            for i, placements in enumerate(non_empty)
        )


def pack_photos(
    photos: Iterable[PhotoItem],
    config: LayoutConfig,
) -> LayoutResult:
    """
    Resolve print sizes and pack photos onto pages.

    Pure function of (photos, config): no state is kept between calls,
    and identical input gives an identical LayoutResult.

    Args:
        photos: Photos in placement order
        config: Layout configuration

    Returns:
        LayoutResult with pages, dropped and skipped photos

    Example:
        >>> result = pack_photos([PhotoItem("p1", "a.jpg", 3000, 3000)], LayoutConfig())
        >>> result.page_count, result.pages[0].placements[0].is_rotated
        (1, False)
    """
    return paginate(resolve_photos(photos, config), config)


def paginate(
    resolved_photos: Sequence[ResolvedPhoto],
    config: LayoutConfig,
) -> LayoutResult:
    """
    Place resolved photos onto pages.

    Rules:
    1. Photos with a non-positive print size are skipped silently.
    2. A photo goes to the best BSSF slot over all open pages.
    3. If no open page fits it, a new page is opened and tried alone.
    4. A photo that does not fit an empty page is dropped and reported.
    5. If the margins leave no usable area, every photo is dropped.

    Args:
        resolved_photos: Photos with print sizes, in placement order
        config: Layout configuration (provides margin and gap)

    Returns:
        LayoutResult with page plans
    """
    if not resolved_photos:
        return LayoutResult(pages=())

    if config.is_degenerate:
        message = (
            f"Margin {config.margin_in}in leaves no usable area on a "
            f"{config.page_width_in}x{config.page_height_in}in page; "
            f"{len(resolved_photos)} photo(s) not placed"
        )
        logger.warning(message)
        return LayoutResult(
            pages=(),
            dropped=tuple(r.photo for r in resolved_photos),
            warnings=[message],
        )

    allocator = _PageAllocator(config)
    gap = config.gap_px
    dropped: List[PhotoItem] = []
    skipped: List[PhotoItem] = []
    warnings: List[str] = []

    for resolved in resolved_photos:
        if not resolved.is_printable:
            logger.debug(f"Skipping {resolved.photo.name}: print size is zero")
            skipped.append(resolved.photo)
            continue

        orientations = orientations_for(resolved)
        candidate = find_best_fit(orientations, allocator.pools)

        if candidate is None:
            new_page = allocator.add_page()
            candidate = find_best_fit(orientations, allocator.pools, page_indices=[new_page])

        if candidate is None:
            message = (
                f"Photo {resolved.photo.name} is too large to fit on a page "
                f"({resolved.print_width / config.dpi:.2f}x"
                f"{resolved.print_height / config.dpi:.2f}in)"
            )
            logger.warning(message)
            warnings.append(message)
            dropped.append(resolved.photo)
            continue

        _place(allocator, resolved, candidate, gap)

    pages = allocator.build_pages()
    result = LayoutResult(
        pages=pages,
        dropped=tuple(dropped),
        skipped=tuple(skipped),
        warnings=warnings,
    )
    logger.info(
        f"Packed {result.total_placements} of {len(resolved_photos)} photos "
        f"onto {result.page_count} pages ({len(dropped)} dropped)"
    )
    return result


def _place(
    allocator: _PageAllocator,
    resolved: ResolvedPhoto,
    candidate: PlacementCandidate,
    gap: float,
) -> PhotoPlacement:
    """Record a placement and carve it out of the page's free space."""
    pool = allocator.pools[candidate.page_index]
    rect = pool.place(candidate.rect_index, candidate.width, candidate.height, gap)
    placement = PhotoPlacement(
        resolved=resolved,
        x=rect.x,
        y=rect.y,
        width=candidate.width,
        height=candidate.height,
        is_rotated=candidate.is_rotated,
    )
    allocator.placements[candidate.page_index].append(placement)
    logger.debug(
        f"Placed {resolved.photo.name} on page {candidate.page_index} at "
        f"({rect.x:.1f}, {rect.y:.1f}) {candidate.width:.1f}x{candidate.height:.1f}"
        f"{' rotated' if candidate.is_rotated else ''}"
    )
    return placement

