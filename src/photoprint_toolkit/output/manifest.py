"""
Module: output.manifest

Purpose:
    Describe a finished layout as JSON: the settings it was computed
    with, every placement (pixels and inches) and the photos or files
    that were left out.

Key Functions:
    - build_manifest(): LayoutResult -> JSON-ready dict
    - write_manifest(): Write the dict to disk

Dependencies:
    - json (std)
    - layout.models: LayoutResult

Used By:
    - controller: Print pipeline
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable

from photoprint_toolkit.intake.loader import SkippedFile
from photoprint_toolkit.layout.config import LayoutConfig
from photoprint_toolkit.layout.models import LayoutResult

logger = logging.getLogger(__name__)


def build_manifest(
    layout: LayoutResult,
    config: LayoutConfig,
    *,
    skipped_files: Iterable[SkippedFile] = (),
) -> dict:
    """
    Build the manifest dictionary for a layout.

    Args:
        layout: Layout result
        config: Configuration the layout was computed with
        skipped_files: Files rejected during intake

    Returns:
        Dictionary ready for JSON serialization

    Example:
        >>> manifest = build_manifest(layout, LayoutConfig())
        >>> manifest["layout"]["page_count"]
        2
    """
    from photoprint_toolkit import __version__

    return {
        "generated_at": datetime.now().isoformat(),
        "toolkit_version": __version__,
        "config": {
            "page_width_in": config.page_width_in,
            "page_height_in": config.page_height_in,
            "dpi": config.dpi,
            "margin_in": config.margin_in,
            "gap_in": config.gap_in,
            "default_diagonal_in": config.default_diagonal_in,
        },
        "layout": layout.to_dict(config.dpi),
        "skipped_files": [
            {"path": s.path.as_posix(), "reason": s.reason} for s in skipped_files
        ],
    }


def write_manifest(path: Path, manifest: dict) -> Path:
    """
    Write a manifest dictionary as indented JSON.

    Args:
        path: Output file
        manifest: From build_manifest()

    Returns:
        path

    Raises:
        OSError: If the file cannot be written
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    logger.debug(f"Wrote manifest to {path}")
    return path
