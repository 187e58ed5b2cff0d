"""
Photo Print Toolkit Core Package

Shared data models used by every stage of the pipeline
(intake -> layout -> output).

1. **Immutable Data Models**
   - Frozen dataclasses, new instances created for any change
   - A photo's per-photo diagonal is changed with `with_diagonal()`

2. **One Linear Unit**
   - Original sizes are pixels of the source image
   - Geometry is in layout units: pixels at the layout DPI
"""

from .models import FreeRect, PhotoItem

__all__ = [
    "FreeRect",
    "PhotoItem",
]
