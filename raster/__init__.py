"""
Raster input for the shape engine.

Types, pixel grids and decoding:

**Types** (types.py)
    Point, Color and BBox value types.

**Grid** (grid.py)
    The PixelGrid contract, its numpy-backed RgbaGrid implementation, and the
    solid-pixel policy.

**Decoding** (decoding.py)
    Pillow-based image loading.
"""

from .decoding import image_to_grid, open_image
from .grid import (
    PixelGrid,
    RgbaGrid,
    is_solid_rgba,
    rgba_to_color,
    solid_color_at,
)
from .types import BLACK, BBox, Color, Point, Points, Rgba

__all__ = [
    # Types
    "BBox",
    "Color",
    "Point",
    "Points",
    "Rgba",
    "BLACK",
    # Grid
    "PixelGrid",
    "RgbaGrid",
    "is_solid_rgba",
    "rgba_to_color",
    "solid_color_at",
    # Decoding
    "image_to_grid",
    "open_image",
]
