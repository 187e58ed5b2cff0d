"""
Module: controller

Purpose:
    Orchestrate the complete print pipeline.
    Load -> Override sizes -> Pack -> Render PDF -> Previews -> Manifest

Key Functions:
    - build_print_sheets(): Main entry point for building print sheets

Key Classes:
    - BuildResult: Complete build result
    - BuildError: Exception for build failures

Dependencies:
    - intake: Photo loading
    - layout: Sizing and packing
    - output: PDF, preview and manifest writers

Used By:
    - cli: Command line entry point
"""

from __future__ import annotations

import logging
import tempfile
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .config import PrintConfig
from .intake import IntakeError, load_photos, apply_diagonal_overrides
from .layout import LayoutResult, pack_photos
from .output import build_manifest, render_to_pdf, write_manifest, write_previews

logger = logging.getLogger(__name__)

PDF_FILENAME = "photos.pdf"
MANIFEST_FILENAME = "layout.json"
PREVIEW_DIRNAME = "previews"


class BuildError(Exception):
    """Error during build pipeline."""
    pass


@dataclass(frozen=True)
class BuildResult:
    """
    Complete build result (immutable).

    Attributes:
        pdf_path: Generated PDF (None if disabled)
        preview_paths: Generated PNG previews in page order
        manifest_path: Generated layout.json (None if disabled)
        layout: Packed layout
        warnings: Warnings from intake and packing
        metadata: Manifest dictionary

    Example:
        >>> result = build_print_sheets(config)
        >>> print(f"Generated {result.page_count} pages")
        >>> print(f"Build timestamp: {result.metadata['generated_at']}")
    """
    pdf_path: Optional[Path]
    preview_paths: tuple[Path, ...]
    manifest_path: Optional[Path]
    layout: LayoutResult
    warnings: tuple[str, ...]
    metadata: dict

    @property
    def page_count(self) -> int:
        return self.layout.page_count


def build_print_sheets(config: PrintConfig) -> BuildResult:
    """
    Build print sheets from start to finish.

    Pipeline:
    1. Load photos from files, directories and zip archives
    2. Apply per-photo size overrides
    3. Pack photos onto pages
    4. Render PDF (optional)
    5. Render previews (optional)
    6. Write manifest (optional)

    Archive members are extracted to config.work_dir, or to a temporary
    directory that is removed when the build returns.

    Args:
        config: Build configuration

    Returns:
        BuildResult with paths, layout and metadata

    Raises:
        BuildError: If inputs are missing, no photo can be loaded or an
            output cannot be written

    Example:
        >>> config = PrintConfig(inputs=[Path("holiday.zip")], output_dir=Path("prints"))
        >>> result = build_print_sheets(config)
        >>> print(f"Generated {result.page_count} pages")
    """
    if config.work_dir is not None:
        return _build(config, Path(config.work_dir))
    with tempfile.TemporaryDirectory(prefix="photoprint-") as tmp:
        return _build(config, Path(tmp))


def _build(config: PrintConfig, work_dir: Path) -> BuildResult:
    warnings: List[str] = []
    start_time = time.perf_counter()
    layout_config = config.to_layout_config()

    logger.info(f"Starting build from {len(config.inputs)} inputs")

    # 1. Load photos
    try:
        intake = load_photos(
            config.inputs,
            work_dir=work_dir,
            max_file_size=config.max_file_size,
        )
    except IntakeError as e:
        raise BuildError(f"Failed to load photos: {e}") from e

    warnings.extend(f"Skipped {s.path.name}: {s.reason}" for s in intake.skipped)

    if not intake.photos:
        raise BuildError("No usable photos found in inputs")

    # 2. Size overrides
    photos = intake.photos
    if config.size_overrides:
        photos = apply_diagonal_overrides(photos, config.size_overrides)

    # 3. Pack
    layout = pack_photos(photos, layout_config)
    warnings.extend(layout.warnings)

    output_dir = Path(config.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    logger.info(f"Output directory: {output_dir}")

    # 4. PDF
    pdf_path = None
    if config.write_pdf:
        try:
            pdf_path = render_to_pdf(
                layout,
                output_dir / PDF_FILENAME,
                layout_config,
                draw_outlines=config.draw_outlines,
            )
        except OSError as e:
            raise BuildError(f"Failed to render PDF: {e}") from e

    # 5. Previews
    preview_paths: List[Path] = []
    if config.write_previews:
        try:
            preview_paths = write_previews(
                layout,
                output_dir / PREVIEW_DIRNAME,
                layout_config,
                scale=config.preview_scale,
            )
        except OSError as e:
            raise BuildError(f"Failed to render previews: {e}") from e

    # 6. Manifest
    metadata = build_manifest(layout, layout_config, skipped_files=intake.skipped)
    manifest_path = None
    if config.write_manifest:
        try:
            manifest_path = write_manifest(output_dir / MANIFEST_FILENAME, metadata)
        except OSError as e:
            raise BuildError(f"Failed to write manifest: {e}") from e

    elapsed = time.perf_counter() - start_time
    logger.info(
        f"Build completed in {elapsed:.2f}s: {layout.total_placements} photos on "
        f"{layout.page_count} pages, {layout.dropped_count} dropped"
    )

    return BuildResult(
        pdf_path=pdf_path,
        preview_paths=tuple(preview_paths),
        manifest_path=manifest_path,
        layout=layout,
        warnings=tuple(warnings),
        metadata=metadata,
    )
