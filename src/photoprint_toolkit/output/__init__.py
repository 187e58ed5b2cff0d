"""
Module: output

Purpose:
    Print-document, preview and manifest generation.
    Converts LayoutResult to a PDF with ReportLab, PNG previews with
    Pillow and a JSON manifest.

Key Functions:
    - render_to_pdf(): Render layout to PDF
    - write_previews(): Render page previews to PNG
    - build_manifest() / write_manifest(): JSON description of a layout

Used By:
    - controller: Pipeline orchestration
"""

from .renderer import render_to_pdf, load_print_image
from .preview import render_page_preview, write_previews
from .manifest import build_manifest, write_manifest

__all__ = [
    "render_to_pdf",
    "load_print_image",
    "render_page_preview",
    "write_previews",
    "build_manifest",
    "write_manifest",
]
