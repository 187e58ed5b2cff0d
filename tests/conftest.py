import pytest
import sys
from pathlib import Path
from PIL import Image

# Add src to sys.path so we can import photoprint_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from photoprint_toolkit.core.models import PhotoItem
from photoprint_toolkit.layout import LayoutConfig


# Common test fixtures
@pytest.fixture
def letter_config():
    """US Letter at 96 dpi, 0.1in margin, no gap."""
    return LayoutConfig()


@pytest.fixture
def make_photo():
    """Factory for PhotoItems without a source file."""
    def _create(
        width: int = 3000,
        height: int = 3000,
        diagonal=None,
        photo_id: str = "p1",
        name: str = "",
    ) -> PhotoItem:
        return PhotoItem(
            photo_id=photo_id,
            name=name or f"{photo_id}.jpg",
            width_px=width,
            height_px=height,
            target_diagonal_in=diagonal,
        )
    return _create


@pytest.fixture
def make_image(tmp_path: Path):
    """Factory that writes a solid-colour image file and returns its path."""
    def _create(
        name: str = "photo.png",
        size=(200, 100),
        color="steelblue",
        directory: Path = None,
        **save_kwargs,
    ) -> Path:
        directory = directory or tmp_path
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        Image.new("RGB", size, color=color).save(path, **save_kwargs)
        return path
    return _create


@pytest.fixture
def sample_image(make_image):
    """Create a simple test image."""
    return make_image("sample.png", size=(200, 100))
