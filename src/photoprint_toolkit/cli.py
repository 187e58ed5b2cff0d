"""
Module: cli

Purpose:
    Command line entry point: pack photos onto print sheets and write
    the PDF, previews and manifest.

Key Functions:
    - main(): Parse arguments, run build_print_sheets(), print a summary
    - build_parser(): argparse definition

Dependencies:
    - argparse (std)
    - controller: build_print_sheets

Used By:
    - photoprint console script
    - python -m photoprint_toolkit
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Dict, Optional, Sequence, Tuple

from . import __version__
from .config import PrintConfig
from .controller import BuildError, BuildResult, build_print_sheets
from .layout.config import DEFAULT_DIAGONAL_IN, DEFAULT_DPI, DEFAULT_GAP_IN, DEFAULT_MARGIN_IN, PAPER_SIZES_IN
from .output.preview import DEFAULT_PREVIEW_SCALE

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _page_size(value: str) -> Tuple[float, float]:
    """Parse 'WxH' in inches."""
    try:
        width, height = (float(part) for part in value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT in inches, got {value!r}")
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f"page size must be positive, got {value!r}")
    return width, height


def _size_override(value: str) -> Tuple[str, Optional[float]]:
    """Parse 'NAME=INCHES' (or 'NAME=default' to clear)."""
    name, sep, inches = value.rpartition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=INCHES, got {value!r}")
    if inches.strip().lower() == "default":
        return name, None
    try:
        return name, float(inches)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid diagonal {inches!r} for {name}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="photoprint",
        description="Pack photos onto printable pages at a chosen diagonal size",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s holiday/ -o prints
  %(prog)s photos.zip -o prints --diagonal 4 --gap 0.1 --preview
  %(prog)s a.jpg b.jpg -o prints --paper a4 --size a.jpg=7
        """,
    )
    parser.add_argument(
        "inputs",
        nargs="+",
        type=Path,
        help="Image files, directories or zip archives",
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        required=True,
        help="Output directory",
    )
    parser.add_argument(
        "--diagonal",
        type=float,
        default=DEFAULT_DIAGONAL_IN,
        help=f"Default print diagonal in inches (default: {DEFAULT_DIAGONAL_IN})",
    )
    parser.add_argument(
        "--margin",
        type=float,
        default=DEFAULT_MARGIN_IN,
        help=f"Page margin in inches (default: {DEFAULT_MARGIN_IN})",
    )
    parser.add_argument(
        "--gap",
        type=float,
        default=DEFAULT_GAP_IN,
        help=f"Gap between photos in inches (default: {DEFAULT_GAP_IN})",
    )
    paper = parser.add_mutually_exclusive_group()
    paper.add_argument(
        "--paper",
        choices=sorted(PAPER_SIZES_IN),
        default="letter",
        help="Named paper size (default: letter)",
    )
    paper.add_argument(
        "--page-size",
        type=_page_size,
        metavar="WxH",
        help="Custom paper size in inches, e.g. 8.5x11",
    )
    parser.add_argument(
        "--dpi",
        type=int,
        default=DEFAULT_DPI,
        help=f"Layout resolution (default: {DEFAULT_DPI})",
    )
    parser.add_argument(
        "--size",
        type=_size_override,
        action="append",
        default=[],
        metavar="NAME=IN",
        help="Per-photo diagonal override (repeatable; NAME=default clears)",
    )
    parser.add_argument(
        "--no-pdf",
        action="store_true",
        help="Skip PDF rendering",
    )
    parser.add_argument(
        "--no-manifest",
        action="store_true",
        help="Skip layout.json",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Write PNG previews of every page",
    )
    parser.add_argument(
        "--preview-scale",
        type=float,
        default=DEFAULT_PREVIEW_SCALE,
        help=f"Preview scale, 0.1 to 1.0 (default: {DEFAULT_PREVIEW_SCALE})",
    )
    parser.add_argument(
        "--outlines",
        action="store_true",
        help="Draw margin and photo outlines in the PDF",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Debug logging",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def config_from_args(args: argparse.Namespace) -> PrintConfig:
    """
    Build a PrintConfig from parsed arguments.

    Raises:
        ValueError: If the values fail PrintConfig validation
    """
    if args.page_size is not None:
        page_width, page_height = args.page_size
    else:
        page_width, page_height = PAPER_SIZES_IN[args.paper]

    overrides: Dict[str, Optional[float]] = dict(args.size)

    return PrintConfig(
        inputs=list(args.inputs),
        output_dir=args.output,
        page_width_in=page_width,
        page_height_in=page_height,
        dpi=args.dpi,
        margin_in=args.margin,
        gap_in=args.gap,
        default_diagonal_in=args.diagonal,
        size_overrides=overrides,
        write_pdf=not args.no_pdf,
        write_previews=args.preview,
        write_manifest=not args.no_manifest,
        preview_scale=args.preview_scale,
        draw_outlines=args.outlines,
    )


def _print_summary(result: BuildResult) -> None:
    layout = result.layout
    print(f"Placed {layout.total_placements} photos on {layout.page_count} pages")
    if layout.dropped:
        names = ", ".join(photo.name for photo in layout.dropped)
        print(f"Dropped {layout.dropped_count} photos: {names}")
    if result.pdf_path:
        print(f"PDF: {result.pdf_path}")
    if result.preview_paths:
        print(f"Previews: {result.preview_paths[0].parent} ({len(result.preview_paths)} files)")
    if result.manifest_path:
        print(f"Manifest: {result.manifest_path}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the command line interface.

    Args:
        argv: Arguments (defaults to sys.argv[1:])

    Returns:
        Exit status: 0 on success, 1 on build failure
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
    )

    try:
        config = config_from_args(args)
    except ValueError as e:
        parser.error(str(e))

    try:
        result = build_print_sheets(config)
    except BuildError as e:
        logger.error(f"Build failed: {e}")
        return 1

    _print_summary(result)
    return 0
