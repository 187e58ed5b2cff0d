"""
Unit tests for PDF rendering.

Uses pypdf to inspect generated PDFs.
"""

from pathlib import Path

import pytest
from PIL import Image
from pypdf import PdfReader

from photoprint_toolkit.core.models import PhotoItem
from photoprint_toolkit.layout import LayoutConfig, LayoutResult, PhotoPlacement, ResolvedPhoto, pack_photos
from photoprint_toolkit.output import load_print_image, render_to_pdf
from photoprint_toolkit.output.renderer import _transform_y

LETTER_PT = (612.0, 792.0)
TOLERANCE_PT = 0.5


def _is_red(pixel) -> bool:
    r, g, b = pixel
    return r > 200 and g < 50 and b < 50


def _is_blue(pixel) -> bool:
    r, g, b = pixel
    return r < 50 and g < 50 and b > 200


def _photo_for(path: Path, photo_id: str = "p1") -> PhotoItem:
    with Image.open(path) as img:
        width, height = img.size
    return PhotoItem(photo_id, path.name, width, height, source_path=path)


@pytest.fixture
def split_image(tmp_path: Path) -> Path:
    """200x100 image: left half red, right half blue."""
    img = Image.new("RGB", (200, 100), color="blue")
    img.paste((255, 0, 0), (0, 0, 100, 100))
    path = tmp_path / "split.png"
    img.save(path)
    return path


class TestRenderToPdf:

    def test_when_two_pages_then_pdf_has_two_letter_pages(self, tmp_path, letter_config, make_photo):
        photos = [make_photo(photo_id=f"p{i}") for i in range(7)]
        layout = pack_photos(photos, letter_config)

        pdf = render_to_pdf(layout, tmp_path / "out" / "photos.pdf", letter_config)

        reader = PdfReader(pdf)
        assert len(reader.pages) == 2
        box = reader.pages[0].mediabox
        assert float(box.width) == pytest.approx(LETTER_PT[0], abs=TOLERANCE_PT)
        assert float(box.height) == pytest.approx(LETTER_PT[1], abs=TOLERANCE_PT)

    def test_when_photos_have_files_then_images_embedded(self, tmp_path, letter_config, make_image):
        colors = ["red", "green", "blue"]
        photos = [
            _photo_for(make_image(f"img{i}.png", size=(300, 200), color=color), f"p{i}")
            for i, color in enumerate(colors)
        ]
        layout = pack_photos(photos, letter_config)

        pdf = render_to_pdf(layout, tmp_path / "photos.pdf", letter_config, draw_outlines=True)

        reader = PdfReader(pdf)
        assert len(reader.pages) == 1
        assert len(reader.pages[0].images) == 3

    def test_when_a4_config_then_a4_page_size(self, tmp_path, make_photo):
        config = LayoutConfig.for_paper("a4")
        layout = pack_photos([make_photo()], config)

        reader = PdfReader(render_to_pdf(layout, tmp_path / "a4.pdf", config))

        box = reader.pages[0].mediabox
        assert float(box.width) == pytest.approx(8.27 * 72, abs=TOLERANCE_PT)
        assert float(box.height) == pytest.approx(11.69 * 72, abs=TOLERANCE_PT)

    def test_when_empty_layout_then_single_blank_page(self, tmp_path, letter_config):
        pdf = render_to_pdf(LayoutResult(pages=()), tmp_path / "empty.pdf", letter_config)
        assert len(PdfReader(pdf).pages) == 1

    def test_transform_y_when_top_of_page_then_measured_from_bottom(self):
        # 1in from the top, 2in tall, on an 11in page at 96 dpi
        assert _transform_y(792.0, 96, 192, 96) == pytest.approx(792 - 72 - 144)


class TestLoadPrintImage:

    def _placement(self, path: Path, width: float, height: float, rotated: bool) -> PhotoPlacement:
        photo = _photo_for(path)
        if rotated:
            resolved = ResolvedPhoto(photo, height, width)
        else:
            resolved = ResolvedPhoto(photo, width, height)
        return PhotoPlacement(resolved, x=0, y=0, width=width, height=height, is_rotated=rotated)

    def test_when_print_dpi_then_sized_for_box(self, split_image):
        placement = self._placement(split_image, 96, 48, rotated=False)
        img = load_print_image(placement, dpi=96, print_dpi=300)
        assert img.size == (300, 150)
        assert img.mode == "RGB"

    def test_when_rotated_then_turned_clockwise(self, split_image):
        placement = self._placement(split_image, 100, 200, rotated=True)

        img = load_print_image(placement, dpi=100, print_dpi=100)

        assert img.size == (100, 200)
        # Left half of the source ends up on top
        assert _is_red(img.getpixel((50, 20)))
        assert _is_blue(img.getpixel((50, 180)))

    def test_when_aspect_differs_then_center_cropped(self, split_image):
        """A square box keeps the middle of a 2:1 image."""
        placement = self._placement(split_image, 100, 100, rotated=False)

        img = load_print_image(placement, dpi=100, print_dpi=100)

        assert img.size == (100, 100)
        assert _is_red(img.getpixel((10, 50)))
        assert _is_blue(img.getpixel((90, 50)))
