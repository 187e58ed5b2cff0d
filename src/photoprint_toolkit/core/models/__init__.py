"""
Core Models Package

Immutable, validated data models shared by intake, layout and output.

All models in this package are frozen dataclasses. This ensures:
1. No accidental mutation while a layout pass is running
2. Repeated layout passes over the same photos give identical results
3. Can be used as dict keys or in sets
"""

from .geometry import FreeRect
from .photos import PhotoItem

__all__ = [
    "FreeRect",
    "PhotoItem",
]
