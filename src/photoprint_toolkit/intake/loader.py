"""
Module: intake.loader

Purpose:
    Turn user-supplied files, directories and zip archives into
    PhotoItems ready for layout. Probes pixel dimensions with Pillow
    (honouring EXIF rotation), enforces a per-file size limit and sorts
    photos largest-first so big photos are packed before small ones.

Key Functions:
    - gather_image_files(): Expand inputs into image and zip paths
    - extract_zip_images(): Pull image entries out of one archive
    - probe_image(): Read (width, height) of one image
    - load_photos(): Full intake, returns IntakeResult
    - apply_diagonal_overrides(): Set per-photo print diagonals by name

Key Classes:
    - IntakeResult: Loaded photos plus skipped files
    - SkippedFile: A file that was not loaded, with the reason
    - IntakeError: Input path problems
    - ImageLoadError: A single image could not be decoded

Dependencies:
    - PIL: Dimension probing
    - zipfile, shutil (std)
    - core.models: PhotoItem

Used By:
    - controller: Print pipeline
"""

from __future__ import annotations

import logging
import shutil
import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Tuple, Union

from PIL import Image

from photoprint_toolkit.core.models import PhotoItem

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = frozenset({
    ".jpg", ".jpeg", ".png", ".gif", ".webp", ".bmp", ".tif", ".tiff",
})
HEIC_EXTENSIONS = frozenset({".heic", ".heif"})
ZIP_EXTENSION = ".zip"
DEFAULT_MAX_FILE_SIZE = 20 * 1024 * 1024  # 20 MiB

# EXIF orientations that swap width and height
_EXIF_ORIENTATION_TAG = 0x0112
_TRANSPOSED_ORIENTATIONS = {5, 6, 7, 8}


class IntakeError(Exception):
    """Input path missing or unusable."""
    pass


class ImageLoadError(Exception):
    """Image file could not be decoded."""
    pass


@dataclass(frozen=True)
class SkippedFile:
    """A file left out of the intake and why."""
    path: Path
    reason: str


@dataclass(frozen=True)
class IntakeResult:
    """
    Result of loading photos.

    Attributes:
        photos: PhotoItems sorted by descending pixel area
        skipped: Files that were not loaded
    """
    photos: tuple[PhotoItem, ...]
    skipped: tuple[SkippedFile, ...] = field(default_factory=tuple)

    @property
    def photo_count(self) -> int:
        return len(self.photos)


def _is_image_path(path: Path) -> bool:
    return path.suffix.lower() in IMAGE_EXTENSIONS or path.suffix.lower() in HEIC_EXTENSIONS


def _is_zip_path(path: Path) -> bool:
    return path.suffix.lower() == ZIP_EXTENSION


def gather_image_files(inputs: Iterable[Union[str, Path]]) -> List[Path]:
    """
    Expand input files and directories into candidate paths.

    Directories are searched recursively; their files are sorted by
    path. Files given explicitly keep their order. Only image and zip
    extensions are kept.

    Args:
        inputs: Files or directories

    Returns:
        Image and zip archive paths

    Raises:
        IntakeError: If an input path does not exist
    """
    paths: List[Path] = []
    for entry in inputs:
        path = Path(entry).expanduser()
        if not path.exists():
            raise IntakeError(f"Input not found: {path}")
        if path.is_dir():
            found = sorted(
                p for p in path.rglob("*")
                if p.is_file() and (_is_image_path(p) or _is_zip_path(p))
            )
            logger.debug(f"Found {len(found)} candidate files in {path}")
            paths.extend(found)
            continue
        if _is_image_path(path) or _is_zip_path(path):
            paths.append(path)
        else:
            logger.warning(f"Ignoring {path.name}: not an image or zip archive")
    return paths


def extract_zip_images(
    zip_path: Path,
    dest_dir: Path,
    max_file_size: int = DEFAULT_MAX_FILE_SIZE,
) -> Tuple[List[Path], List[SkippedFile]]:
    """
    Extract image entries from a zip archive.

    Directory structure inside the archive is flattened; name clashes
    get a numeric suffix. Non-image entries are ignored. Members whose
    uncompressed size is over max_file_size are skipped without being
    written. A corrupt archive is logged and yields no files.

    Args:
        zip_path: Archive to read
        dest_dir: Directory to extract into (created if missing)
        max_file_size: Per-member limit in bytes

    Returns:
        (extracted paths in archive order, skipped oversize members)
    """
    extracted: List[Path] = []
    skipped: List[SkippedFile] = []
    try:
        with zipfile.ZipFile(zip_path) as zf:
            dest_dir.mkdir(parents=True, exist_ok=True)
            for info in zf.infolist():
                if info.is_dir():
                    continue
                name = Path(info.filename).name
                if not name or name.startswith(".") or not _is_image_path(Path(name)):
                    continue
                if info.file_size > max_file_size:
                    reason = f"file size {info.file_size} exceeds limit {max_file_size}"
                    logger.warning(f"Skipping {info.filename} in {zip_path.name}: {reason}")
                    skipped.append(SkippedFile(path=zip_path / info.filename, reason=reason))
                    continue
                target = _unique_path(dest_dir / name)
                with zf.open(info) as src, open(target, "wb") as dst:
                    shutil.copyfileobj(src, dst)
                extracted.append(target)
    except zipfile.BadZipFile as e:
        logger.error(f"Failed to read zip archive {zip_path.name}: {e}")
        return [], []

    logger.info(f"Extracted {len(extracted)} images from {zip_path.name}")
    return extracted, skipped


def _unique_path(path: Path) -> Path:
    """path, or path with ' (n)' before the suffix if it already exists."""
    if not path.exists():
        return path
    n = 1
    while True:
        candidate = path.with_name(f"{path.stem} ({n}){path.suffix}")
        if not candidate.exists():
            return candidate
        n += 1


def probe_image(path: Path) -> Tuple[int, int]:
    """
    Read the displayed pixel size of an image.

    EXIF orientations 5-8 (rotated 90/270 degrees) swap the stored
    width and height so the result matches how the photo is viewed.

    Args:
        path: Image file

    Returns:
        (width, height) in pixels

    Raises:
        ImageLoadError: If Pillow cannot identify or fully decode the file
    """
    try:
        with Image.open(path) as img:
            width, height = img.size
            orientation = img.getexif().get(_EXIF_ORIENTATION_TAG)
            # Decode the pixel data so truncated files fail here, not at render
            img.load()
    except (OSError, Image.DecompressionBombError) as e:
        raise ImageLoadError(f"Failed to load image {path.name}: {e}") from e

    if orientation in _TRANSPOSED_ORIENTATIONS:
        width, height = height, width
    return width, height


def load_photos(
    inputs: Iterable[Union[str, Path]],
    *,
    work_dir: Path,
    max_file_size: int = DEFAULT_MAX_FILE_SIZE,
    default_diagonal: Optional[float] = None,
) -> IntakeResult:
    """
    Load photos from files, directories and zip archives.

    Pipeline:
    1. Gather candidate files
    2. Extract images from zip archives into work_dir
    3. Skip oversize files, HEIC/HEIF files and undecodable images
    4. Probe dimensions and build PhotoItems
    5. Sort by descending pixel area (stable)

    Args:
        inputs: Files or directories
        work_dir: Scratch directory for extracted archive members
        max_file_size: Per-file limit in bytes
        default_diagonal: Per-photo target diagonal to set on every
            photo (None leaves the layout default in charge)

    Returns:
        IntakeResult with photos and skipped files

    Raises:
        IntakeError: If an input path does not exist

    Example:
        >>> result = load_photos([Path("holiday.zip")], work_dir=Path("/tmp/work"))
        >>> result.photos[0].name
        'IMG_0001.jpg'
    """
    candidates = gather_image_files(inputs)

    photos: List[PhotoItem] = []
    skipped: List[SkippedFile] = []

    files: List[Path] = []
    for path in candidates:
        if _is_zip_path(path):
            members, oversize = extract_zip_images(path, work_dir / path.stem, max_file_size)
            files.extend(members)
            skipped.extend(oversize)
        else:
            files.append(path)

    def _skip(path: Path, reason: str) -> None:
        logger.warning(f"Skipping {path.name}: {reason}")
        skipped.append(SkippedFile(path=path, reason=reason))

    for path in files:
        if path.suffix.lower() in HEIC_EXTENSIONS:
            _skip(path, "HEIC/HEIF decoding is not supported; convert to JPEG first")
            continue

        size = path.stat().st_size
        if size > max_file_size:
            _skip(path, f"file size {size} exceeds limit {max_file_size}")
            continue

        try:
            width, height = probe_image(path)
        except ImageLoadError as e:
            _skip(path, str(e))
            continue

        photos.append(PhotoItem(
            photo_id=f"{len(photos)}-{path.name}",
            name=path.name,
            width_px=width,
            height_px=height,
            target_diagonal_in=default_diagonal,
            source_path=path,
        ))

    # Largest first; sorted() is stable so equal areas keep input order
    photos = sorted(photos, key=lambda p: p.area_px, reverse=True)

    logger.info(f"Loaded {len(photos)} photos ({len(skipped)} files skipped)")
    return IntakeResult(photos=tuple(photos), skipped=tuple(skipped))


def apply_diagonal_overrides(
    photos: Iterable[PhotoItem],
    overrides: Mapping[str, Optional[float]],
) -> List[PhotoItem]:
    """
    Set per-photo print diagonals.

    Keys match a photo's name or photo_id. A value of None clears the
    override so the photo follows the global default again.

    Args:
        photos: Photos in order
        overrides: Name or id -> diagonal in inches (or None)

    Returns:
        New list of photos, same order
    """
    updated: List[PhotoItem] = []
    used: set[str] = set()
    for photo in photos:
        key = photo.photo_id if photo.photo_id in overrides else photo.name
        if key in overrides:
            updated.append(photo.with_diagonal(overrides[key]))
            used.add(key)
        else:
            updated.append(photo)

    for key in overrides:
        if key not in used:
            logger.warning(f"No photo named {key!r} for size override")
    return updated
