"""
Module: layout.sizing

Purpose:
    Derive print width/height from a target diagonal and the photo's
    original aspect ratio. The diagonal is the hypotenuse of the right
    triangle whose legs are the print width and height, so
    width² + height² == diagonal² and width/height keeps the original
    aspect ratio.

Key Functions:
    - resolve_print_size(): Pure diagonal -> (width, height) arithmetic
    - resolve_photo(): One PhotoItem -> ResolvedPhoto in layout units
    - resolve_photos(): Order-preserving batch version

Dependencies:
    - math (std)
    - layout.config: LayoutConfig
    - layout.models: ResolvedPhoto

Used By:
    - layout.packer: First step of every layout pass
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, List, Tuple

from photoprint_toolkit.core.models import PhotoItem

from .config import LayoutConfig
from .models import ResolvedPhoto

logger = logging.getLogger(__name__)


def resolve_print_size(
    width_px: float,
    height_px: float,
    diagonal: float,
) -> Tuple[float, float]:
    """
    Compute print width and height for a target diagonal.

    The result is in the same unit as `diagonal`.

    Args:
        width_px: Original width (any positive unit)
        height_px: Original height (same unit as width_px)
        diagonal: Target diagonal length

    Returns:
        (width, height), or (0.0, 0.0) when diagonal <= 0

    Example:
        >>> w, h = resolve_print_size(3000, 3000, 5.0)
        >>> round(w, 4), round(h, 4)
        (3.5355, 3.5355)
    """
    return _size_for_aspect(height_px / width_px, diagonal)


def _size_for_aspect(aspect_ratio: float, diagonal: float) -> Tuple[float, float]:
    """(width, height) with the given height/width ratio and diagonal."""
    if diagonal <= 0:
        return 0.0, 0.0

    # hypot(1, ar) == sqrt(1 + ar²) without overflow for extreme ratios
    width = diagonal / math.hypot(1.0, aspect_ratio)
    height = aspect_ratio * width
    return width, height


def resolve_photo(photo: PhotoItem, config: LayoutConfig) -> ResolvedPhoto:
    """
    Resolve one photo's print size in layout units.

    Uses the photo's own diagonal when set, otherwise the config default.
    Sizes are computed in inches then scaled by config.dpi.

    Args:
        photo: Source photo
        config: Layout configuration

    Returns:
        ResolvedPhoto (print size 0 x 0 for a non-positive diagonal)
    """
    diagonal_in = photo.effective_diagonal(config.default_diagonal_in)
    width_in, height_in = _size_for_aspect(photo.aspect_ratio, diagonal_in)
    return ResolvedPhoto(
        photo=photo,
        print_width=config.to_px(width_in),
        print_height=config.to_px(height_in),
    )


def resolve_photos(
    photos: Iterable[PhotoItem],
    config: LayoutConfig,
) -> List[ResolvedPhoto]:
    """Resolve print sizes for every photo, keeping input order."""
    resolved = [resolve_photo(photo, config) for photo in photos]
    logger.debug(f"Resolved print sizes for {len(resolved)} photos")
    return resolved
