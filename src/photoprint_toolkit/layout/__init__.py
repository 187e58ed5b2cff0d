"""
Module: layout

Purpose:
    Print sizing and page packing.
    Converts photos with target diagonals into positioned page layouts.

Key Functions:
    - pack_photos(): Main entry point for layout
    - paginate(): Arrange resolved photos onto pages
    - resolve_print_size(): Diagonal -> width/height arithmetic

Key Classes:
    - LayoutConfig: Paper, margin, gap and DPI settings
    - PhotoPlacement: Positioned photo
    - PagePlan: Single page layout plan
    - LayoutResult: Pages plus dropped photos and warnings

Used By:
    - controller: Print pipeline
    - output: PDF, preview and manifest writers
"""

from .config import LayoutConfig, PAPER_SIZES_IN
from .models import ResolvedPhoto, PhotoPlacement, PagePlan, LayoutResult
from .sizing import resolve_print_size, resolve_photo, resolve_photos
from .free_space import FreeSpacePool, split_free_rect, merge_free_rects
from .search import Orientation, PlacementCandidate, orientations_for, find_best_fit
from .packer import pack_photos, paginate

__all__ = [
    # Config
    "LayoutConfig",
    "PAPER_SIZES_IN",
    # Models
    "ResolvedPhoto",
    "PhotoPlacement",
    "PagePlan",
    "LayoutResult",
    # Sizing
    "resolve_print_size",
    "resolve_photo",
    "resolve_photos",
    # Free space
    "FreeSpacePool",
    "split_free_rect",
    "merge_free_rects",
    # Search
    "Orientation",
    "PlacementCandidate",
    "orientations_for",
    "find_best_fit",
    # Packing
    "pack_photos",
    "paginate",
]
