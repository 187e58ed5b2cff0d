"""
Module: output.renderer

Purpose:
    Render LayoutResult to a printable PDF using ReportLab.
    Each PagePlan becomes one PDF page with photos placed at their
    layout positions; rotated placements are drawn turned 90 degrees.

Key Functions:
    - render_to_pdf(): Main rendering function
    - load_print_image(): Decode, rotate and crop one photo for printing

Dependencies:
    - reportlab: PDF generation
    - PIL: Image handling
    - layout.models: LayoutResult, PagePlan, PhotoPlacement

Used By:
    - controller: Pipeline orchestration
"""

from __future__ import annotations

import io
import logging
from pathlib import Path

from PIL import Image, ImageOps
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from photoprint_toolkit.layout.config import LayoutConfig
from photoprint_toolkit.layout.models import LayoutResult, PagePlan, PhotoPlacement

logger = logging.getLogger(__name__)

# Constants
POINTS_PER_INCH = 72.0
PRINT_DPI = 300  # Embedded image resolution
OUTLINE_GRAY = 0.75
PLACEHOLDER_FONT_SIZE = 7


def render_to_pdf(
    layout: LayoutResult,
    output_path: Path,
    config: LayoutConfig,
    *,
    draw_outlines: bool = False,
) -> Path:
    """
    Render layout result to PDF file.

    Converts each PagePlan to a PDF page of the configured paper size,
    placing photos at their specified positions. Photos without a
    source file are drawn as labelled placeholder boxes.

    Args:
        layout: Layout result from the packer
        output_path: Path to write PDF
        config: Layout configuration (paper size and DPI)
        draw_outlines: Draw the margin box and photo outlines

    Returns:
        output_path

    Raises:
        OSError: If the PDF or a photo cannot be read or written

    Example:
        >>> render_to_pdf(layout, Path("output/photos.pdf"), LayoutConfig())
    """
    if layout.page_count == 0:
        logger.warning("Empty layout, creating empty PDF")

    output_path.parent.mkdir(parents=True, exist_ok=True)

    page_width_pt = config.page_width_in * POINTS_PER_INCH
    page_height_pt = config.page_height_in * POINTS_PER_INCH

    c = canvas.Canvas(str(output_path), pagesize=(page_width_pt, page_height_pt))
    c.setTitle("Photo Print Layout")

    for page in layout.pages:
        _render_page(c, page, config, page_height_pt, draw_outlines)
        c.showPage()

    if layout.page_count == 0:
        c.showPage()

    c.save()

    logger.info(f"Rendered {layout.page_count} pages to {output_path}")
    return output_path


def _render_page(
    c: canvas.Canvas,
    page: PagePlan,
    config: LayoutConfig,
    page_height_pt: float,
    draw_outlines: bool,
) -> None:
    """
    Render a single page to the canvas.

    Args:
        c: ReportLab canvas
        page: Page plan with placements
        config: Layout configuration
        page_height_pt: Page height in points
        draw_outlines: Draw margin and placement outlines
    """
    for placement in page.placements:
        x_pt = _px_to_pt(placement.x, config.dpi)
        y_pt = _transform_y(page_height_pt, placement.y, placement.height, config.dpi)
        width_pt = _px_to_pt(placement.width, config.dpi)
        height_pt = _px_to_pt(placement.height, config.dpi)

        if placement.photo.source_path is None:
            _draw_placeholder(c, placement.photo.name, x_pt, y_pt, width_pt, height_pt)
        else:
            img = load_print_image(placement, config.dpi)
            c.drawImage(_pil_to_reader(img), x_pt, y_pt, width=width_pt, height=height_pt)

        if draw_outlines:
            _draw_outline(c, x_pt, y_pt, width_pt, height_pt)

    if draw_outlines:
        margin_pt = config.margin_in * POINTS_PER_INCH
        _draw_outline(
            c,
            margin_pt,
            margin_pt,
            _px_to_pt(config.usable_width_px, config.dpi),
            _px_to_pt(config.usable_height_px, config.dpi),
        )


def load_print_image(placement: PhotoPlacement, dpi: int, print_dpi: float = PRINT_DPI) -> Image.Image:
    """
    Prepare a photo for its placement box.

    Applies EXIF orientation, turns the photo 90 degrees clockwise when
    the placement is rotated, then scales and center-crops it to fill
    the box at print_dpi.

    Args:
        placement: Placed photo with a source_path
        dpi: Layout units per inch
        print_dpi: Output pixels per inch

    Returns:
        RGB PIL Image sized for the placement

    Raises:
        OSError: If the image cannot be opened
    """
    target = (
        max(1, round(placement.width / dpi * print_dpi)),
        max(1, round(placement.height / dpi * print_dpi)),
    )
    with Image.open(placement.photo.source_path) as src:
        img = ImageOps.exif_transpose(src)
        if img.mode != "RGB":
            img = img.convert("RGB")
        if placement.is_rotated:
            img = img.transpose(Image.Transpose.ROTATE_270)
        return ImageOps.fit(img, target, method=Image.Resampling.LANCZOS)


def _draw_placeholder(
    c: canvas.Canvas,
    label: str,
    x_pt: float,
    y_pt: float,
    width_pt: float,
    height_pt: float,
) -> None:
    """Draw a light box with the photo name centered in it."""
    c.saveState()
    c.setFillColorRGB(0.92, 0.92, 0.92)
    c.setStrokeColorRGB(OUTLINE_GRAY, OUTLINE_GRAY, OUTLINE_GRAY)
    c.rect(x_pt, y_pt, width_pt, height_pt, stroke=1, fill=1)
    c.setFillColorRGB(0.3, 0.3, 0.3)
    c.setFont("Helvetica", PLACEHOLDER_FONT_SIZE)
    c.drawCentredString(x_pt + width_pt / 2, y_pt + height_pt / 2, label)
    c.restoreState()


def _draw_outline(
    c: canvas.Canvas,
    x_pt: float,
    y_pt: float,
    width_pt: float,
    height_pt: float,
) -> None:
    c.saveState()
    c.setLineWidth(0.5)
    c.setStrokeColorRGB(OUTLINE_GRAY, OUTLINE_GRAY, OUTLINE_GRAY)
    c.rect(x_pt, y_pt, width_pt, height_pt, stroke=1, fill=0)
    c.restoreState()


def _pil_to_reader(img: Image.Image) -> ImageReader:
    """
    Convert PIL image to ReportLab ImageReader.

    Args:
        img: PIL Image object

    Returns:
        ImageReader for use with ReportLab
    """
    buf = io.BytesIO()
    img.save(buf, format="JPEG", quality=92)
    buf.seek(0)
    return ImageReader(buf)


def _px_to_pt(px: float, dpi: int) -> float:
    """
    Convert layout units to PDF points.

    PDF points are 1/72 inch.

    Args:
        px: Layout units
        dpi: Layout units per inch

    Returns:
        Value in PDF points
    """
    return px * POINTS_PER_INCH / dpi


def _transform_y(
    page_height_pt: float,
    y_px_top: float,
    height_px: float,
    dpi: int,
) -> float:
    """
    Convert top-down layout Y coordinate to bottom-up PDF Y.

    Args:
        page_height_pt: Page height in points
        y_px_top: Y position from top in layout units
        height_px: Height of element in layout units
        dpi: Layout units per inch

    Returns:
        Y position of the element's bottom edge, from page bottom in points
    """
    y_pt_from_top = _px_to_pt(y_px_top, dpi)
    height_pt = _px_to_pt(height_px, dpi)
    return page_height_pt - y_pt_from_top - height_pt
