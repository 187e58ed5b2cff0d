"""
Module: layout.config

Purpose:
    Configuration for the page packing engine.
    Defines paper size, rendering resolution, margin, gap and the
    default print diagonal. All lengths are in inches; the engine works
    in pixels at `dpi`, exposed through the *_px properties.

Key Classes:
    - LayoutConfig: Immutable layout configuration

Dependencies:
    - dataclasses (std)

Used By:
    - layout.sizing: Diagonal to pixel conversion
    - layout.packer: Page allocation
    - output.renderer: PDF page size
"""

from __future__ import annotations

from dataclasses import dataclass


# US Letter at the on-screen rendering resolution
DEFAULT_PAGE_WIDTH_IN = 8.5
DEFAULT_PAGE_HEIGHT_IN = 11.0
DEFAULT_DPI = 96
DEFAULT_MARGIN_IN = 0.1
DEFAULT_GAP_IN = 0.0
DEFAULT_DIAGONAL_IN = 5.0

# Named paper sizes (width, height) in inches, portrait
PAPER_SIZES_IN: dict[str, tuple[float, float]] = {
    "letter": (8.5, 11.0),
    "legal": (8.5, 14.0),
    "a4": (8.27, 11.69),
    "a5": (5.83, 8.27),
    "4x6": (4.0, 6.0),
    "5x7": (5.0, 7.0),
}


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for page packing (immutable).

    A margin that leaves no usable area is allowed: the packer treats
    it as a degenerate configuration and drops every photo instead of
    failing.

    Attributes:
        page_width_in: Paper width in inches
        page_height_in: Paper height in inches
        dpi: Layout units per inch
        margin_in: Margin on every side, in inches
        gap_in: Spacing between photos, in inches
        default_diagonal_in: Print diagonal for photos without an override

    Example:
        >>> config = LayoutConfig()
        >>> round(config.usable_width_px, 1)
        796.8
        >>> round(config.margin_px, 1)
        9.6
    """

    page_width_in: float = DEFAULT_PAGE_WIDTH_IN
    page_height_in: float = DEFAULT_PAGE_HEIGHT_IN
    dpi: int = DEFAULT_DPI
    margin_in: float = DEFAULT_MARGIN_IN
    gap_in: float = DEFAULT_GAP_IN
    default_diagonal_in: float = DEFAULT_DIAGONAL_IN

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.page_width_in <= 0:
            raise ValueError(f"page_width_in must be positive: {self.page_width_in}")
        if self.page_height_in <= 0:
            raise ValueError(f"page_height_in must be positive: {self.page_height_in}")
        if self.dpi <= 0:
            raise ValueError(f"dpi must be positive: {self.dpi}")
        if self.margin_in < 0:
            raise ValueError(f"margin_in must be non-negative: {self.margin_in}")
        if self.gap_in < 0:
            raise ValueError(f"gap_in must be non-negative: {self.gap_in}")

    @classmethod
    def for_paper(cls, paper: str, **overrides) -> LayoutConfig:
        """
        Build a config for a named paper size.

        Args:
            paper: Key of PAPER_SIZES_IN (case-insensitive)
            **overrides: Any other LayoutConfig field

        Returns:
            LayoutConfig with the paper's width and height

        Raises:
            ValueError: If the paper name is unknown
        """
        key = paper.strip().lower()
        if key not in PAPER_SIZES_IN:
            known = ", ".join(sorted(PAPER_SIZES_IN))
            raise ValueError(f"Unknown paper size {paper!r} (known: {known})")
        width, height = PAPER_SIZES_IN[key]
        return cls(page_width_in=width, page_height_in=height, **overrides)

    def to_px(self, inches: float) -> float:
        """Convert inches to layout units."""
        return inches * self.dpi

    @property
    def page_width_px(self) -> float:
        """Page width in layout units."""
        return self.to_px(self.page_width_in)

    @property
    def page_height_px(self) -> float:
        """Page height in layout units."""
        return self.to_px(self.page_height_in)

    @property
    def margin_px(self) -> float:
        """Margin in layout units."""
        return self.to_px(self.margin_in)

    @property
    def gap_px(self) -> float:
        """Inter-photo gap in layout units."""
        return self.to_px(self.gap_in)

    @property
    def usable_width_px(self) -> float:
        """Width inside the margins, in layout units."""
        return (self.page_width_in - 2 * self.margin_in) * self.dpi

    @property
    def usable_height_px(self) -> float:
        """Height inside the margins, in layout units."""
        return (self.page_height_in - 2 * self.margin_in) * self.dpi

    @property
    def is_degenerate(self) -> bool:
        """True when the margins leave no usable area."""
        return self.usable_width_px <= 0 or self.usable_height_px <= 0
