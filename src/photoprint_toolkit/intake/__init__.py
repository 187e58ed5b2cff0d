"""
Module: intake

Purpose:
    Photo discovery and dimension probing.
    Expands files, directories and zip archives into PhotoItems.

Used By:
    - controller: Print pipeline
"""

from .loader import (
    IntakeError,
    ImageLoadError,
    IntakeResult,
    SkippedFile,
    gather_image_files,
    extract_zip_images,
    probe_image,
    load_photos,
    apply_diagonal_overrides,
)

__all__ = [
    "IntakeError",
    "ImageLoadError",
    "IntakeResult",
    "SkippedFile",
    "gather_image_files",
    "extract_zip_images",
    "probe_image",
    "load_photos",
    "apply_diagonal_overrides",
]
