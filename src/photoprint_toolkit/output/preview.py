"""
Module: output.preview

Purpose:
    Render pages to PNG preview images with Pillow, at a reduced scale
    of the layout resolution. Shows the margin guide and every placement
    (the photo itself when its file is available, a grey box otherwise).

Key Functions:
    - clamp_scale(): Keep preview scale in [0.1, 1.0]
    - render_page_preview(): One PagePlan -> PIL Image
    - write_previews(): Every page -> page_001.png, page_002.png, ...

Dependencies:
    - PIL: Drawing and compositing
    - output.renderer: load_print_image

Used By:
    - controller: Optional preview output
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from PIL import Image, ImageDraw

from photoprint_toolkit.layout.config import LayoutConfig
from photoprint_toolkit.layout.models import LayoutResult, PagePlan

from .renderer import load_print_image

logger = logging.getLogger(__name__)

MIN_PREVIEW_SCALE = 0.1
MAX_PREVIEW_SCALE = 1.0
DEFAULT_PREVIEW_SCALE = 0.5

PAGE_COLOR = "white"
MARGIN_COLOR = (200, 220, 255)
BOX_FILL = (225, 225, 225)
BOX_OUTLINE = (150, 150, 150)


def clamp_scale(scale: float) -> float:
    """Clamp a preview scale to [MIN_PREVIEW_SCALE, MAX_PREVIEW_SCALE]."""
    return max(MIN_PREVIEW_SCALE, min(scale, MAX_PREVIEW_SCALE))


def render_page_preview(
    page: PagePlan,
    config: LayoutConfig,
    *,
    scale: float = DEFAULT_PREVIEW_SCALE,
    show_photos: bool = True,
) -> Image.Image:
    """
    Draw one page as an RGB image.

    Args:
        page: Page to draw
        config: Layout configuration
        scale: Preview pixels per layout unit (clamped)
        show_photos: Paste photo content when source files exist

    Returns:
        PIL Image of size page_px * scale
    """
    scale = clamp_scale(scale)
    size = (
        max(1, round(config.page_width_px * scale)),
        max(1, round(config.page_height_px * scale)),
    )
    img = Image.new("RGB", size, PAGE_COLOR)
    draw = ImageDraw.Draw(img)

    margin = config.margin_px * scale
    draw.rectangle(
        [margin, margin, size[0] - margin, size[1] - margin],
        outline=MARGIN_COLOR,
    )

    for placement in page.placements:
        box = (
            round(placement.x * scale),
            round(placement.y * scale),
            round(placement.right * scale),
            round(placement.bottom * scale),
        )
        if show_photos and placement.photo.source_path is not None:
            photo = load_print_image(placement, config.dpi, print_dpi=config.dpi * scale)
            img.paste(photo, box[:2])
        else:
            draw.rectangle(box, fill=BOX_FILL, outline=BOX_OUTLINE)

    return img


def write_previews(
    layout: LayoutResult,
    output_dir: Path,
    config: LayoutConfig,
    *,
    scale: float = DEFAULT_PREVIEW_SCALE,
    show_photos: bool = True,
) -> List[Path]:
    """
    Write a PNG preview for every page.

    Args:
        layout: Layout to preview
        output_dir: Directory for page_NNN.png files (created if missing)
        config: Layout configuration
        scale: Preview scale (clamped)
        show_photos: Paste photo content when source files exist

    Returns:
        Written paths in page order
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    paths: List[Path] = []
    for page in layout.pages:
        path = output_dir / f"page_{page.index + 1:03d}.png"
        render_page_preview(page, config, scale=scale, show_photos=show_photos).save(path)
        paths.append(path)
    logger.info(f"Wrote {len(paths)} preview images to {output_dir}")
    return paths
