"""
Module: config

Purpose:
    Configuration dataclass for the print pipeline. Immutable
    configuration with validation on construction.

Key Classes:
    - PrintConfig: Inputs, outputs and layout settings for one build

Dependencies:
    - dataclasses (std)
    - pathlib (std)
    - layout.config: LayoutConfig defaults and validation

Used By:
    - controller: Print pipeline
    - cli: Command line entry point
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from photoprint_toolkit.intake.loader import DEFAULT_MAX_FILE_SIZE
from photoprint_toolkit.layout.config import (
    DEFAULT_DIAGONAL_IN,
    DEFAULT_DPI,
    DEFAULT_GAP_IN,
    DEFAULT_MARGIN_IN,
    DEFAULT_PAGE_HEIGHT_IN,
    DEFAULT_PAGE_WIDTH_IN,
    LayoutConfig,
)
from photoprint_toolkit.output.preview import DEFAULT_PREVIEW_SCALE


@dataclass(frozen=True)
class PrintConfig:
    """
    Configuration for building print sheets (immutable).

    Attributes:
        inputs: Image files, directories or zip archives
        output_dir: Directory for the PDF, previews and manifest
        page_width_in: Paper width in inches
        page_height_in: Paper height in inches
        dpi: Layout units per inch
        margin_in: Margin on every side, in inches
        gap_in: Spacing between photos, in inches
        default_diagonal_in: Print diagonal for photos without an override
        size_overrides: Photo name or id -> diagonal in inches
        max_file_size: Per-file limit in bytes
        work_dir: Where archive members are extracted (temporary if None)
        write_pdf: Render photos.pdf
        write_previews: Render PNG page previews
        write_manifest: Write layout.json
        preview_scale: Preview pixels per layout unit
        draw_outlines: Draw margin and photo outlines in the PDF

    Example:
        >>> config = PrintConfig(
        ...     inputs=[Path("holiday")],
        ...     output_dir=Path("prints"),
        ...     default_diagonal_in=4.0,
        ... )
    """

    # Required
    inputs: List[Path]
    output_dir: Path

    # Layout
    page_width_in: float = DEFAULT_PAGE_WIDTH_IN
    page_height_in: float = DEFAULT_PAGE_HEIGHT_IN
    dpi: int = DEFAULT_DPI
    margin_in: float = DEFAULT_MARGIN_IN
    gap_in: float = DEFAULT_GAP_IN
    default_diagonal_in: float = DEFAULT_DIAGONAL_IN
    size_overrides: Dict[str, Optional[float]] = field(default_factory=dict)

    # Intake
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    work_dir: Optional[Path] = None

    # Output
    write_pdf: bool = True
    write_previews: bool = False
    write_manifest: bool = True
    preview_scale: float = DEFAULT_PREVIEW_SCALE
    draw_outlines: bool = False

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not self.inputs:
            raise ValueError("inputs must not be empty")
        if self.max_file_size <= 0:
            raise ValueError(f"max_file_size must be positive: {self.max_file_size}")
        if self.preview_scale <= 0:
            raise ValueError(f"preview_scale must be positive: {self.preview_scale}")
        # LayoutConfig validates the page geometry
        self.to_layout_config()

    def to_layout_config(self) -> LayoutConfig:
        """Layout settings for the packing engine."""
        return LayoutConfig(
            page_width_in=self.page_width_in,
            page_height_in=self.page_height_in,
            dpi=self.dpi,
            margin_in=self.margin_in,
            gap_in=self.gap_in,
            default_diagonal_in=self.default_diagonal_in,
        )
