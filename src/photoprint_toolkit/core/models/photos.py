"""
Module: photos

Purpose:
    Provides the PhotoItem dataclass - one source photograph as supplied
    to the layout engine: identity, original pixel dimensions and an
    optional per-photo target print diagonal.

Key Functions:
    - PhotoItem.effective_diagonal(default): Resolve override vs default
    - PhotoItem.with_diagonal(value): Copy with a new override
    - PhotoItem.to_dict(): Serialize for manifests

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - intake.loader: Builds PhotoItems from image files
    - layout.sizing: Print size resolution
    - output.renderer: Image lookup by source_path
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class PhotoItem:
    """
    A source photograph (immutable).

    The layout engine only reads PhotoItems; it never mutates them.

    Attributes:
        photo_id: Unique identifier within one layout request
        name: Display name (usually the file name)
        width_px: Original width in pixels
        height_px: Original height in pixels
        target_diagonal_in: Per-photo print diagonal in inches,
            or None to use the global default
        source_path: Decoded image file on disk, if any

    Invariants:
        - width_px > 0
        - height_px > 0

    Example:
        >>> photo = PhotoItem("p1", "beach.jpg", 4000, 3000)
        >>> photo.effective_diagonal(5.0)
        5.0
        >>> photo.with_diagonal(7.0).effective_diagonal(5.0)
        7.0
    """

    photo_id: str
    name: str
    width_px: int
    height_px: int
    target_diagonal_in: Optional[float] = None
    source_path: Optional[Path] = None

    def __post_init__(self) -> None:
        """Validate dimensions on construction."""
        if not self.photo_id:
            raise ValueError("photo_id must not be empty")
        if self.width_px <= 0:
            raise ValueError(f"width_px must be positive: {self.width_px}")
        if self.height_px <= 0:
            raise ValueError(f"height_px must be positive: {self.height_px}")

    @property
    def area_px(self) -> int:
        """Original pixel area (used for largest-first ordering)."""
        return self.width_px * self.height_px

    @property
    def aspect_ratio(self) -> float:
        """Height divided by width."""
        return self.height_px / self.width_px

    def effective_diagonal(self, default: float) -> float:
        """
        Get the print diagonal to use for this photo.

        Args:
            default: Global target diagonal in inches

        Returns:
            The per-photo override when set, otherwise default
        """
        if self.target_diagonal_in is None:
            return default
        return self.target_diagonal_in

    def with_diagonal(self, value: Optional[float]) -> PhotoItem:
        """Return a copy with target_diagonal_in replaced (None clears it)."""
        return replace(self, target_diagonal_in=value)

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON storage."""
        d = {
            "photo_id": self.photo_id,
            "name": self.name,
            "width_px": self.width_px,
            "height_px": self.height_px,
        }
        if self.target_diagonal_in is not None:
            d["target_diagonal_in"] = self.target_diagonal_in
        if self.source_path is not None:
            d["source_path"] = self.source_path.as_posix()
        return d
