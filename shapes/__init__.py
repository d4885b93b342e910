"""
Shape decomposition of rasters.

This module converts pixel grids into per-color shape layouts:
1. Extract connected components of same-colored solid pixels
2. Simplify each component to a Pixel, a Box or a Complex shape
3. Group the shapes by color

Main entry points: grid_to_shapes_layout(), image_to_shapes_layout()
"""

from .layout import (
    ColorStats,
    components_to_shapes_layout,
    grid_to_shapes_layout,
    image_to_shapes_layout,
    shapes_layout_stats,
)
from .rectangles import (
    coords_to_complex_geometry,
    coords_to_exact_geometry,
    decompose,
    find_band_rectangles,
    find_tallest_band,
)
from .simplify import coords_to_shape
from .types import (
    Box,
    Complex,
    ComplexGeometry,
    InnerGeometry,
    Pixel,
    Shape,
    ShapesLayout,
    bbox_to_shape,
)

__all__ = [
    # Main entry points
    "grid_to_shapes_layout",
    "image_to_shapes_layout",
    "components_to_shapes_layout",
    "shapes_layout_stats",
    "ColorStats",
    # Simplification
    "coords_to_shape",
    # Rectangles
    "decompose",
    "find_tallest_band",
    "find_band_rectangles",
    "coords_to_exact_geometry",
    "coords_to_complex_geometry",
    # Types
    "Pixel",
    "Box",
    "Complex",
    "ComplexGeometry",
    "InnerGeometry",
    "Shape",
    "ShapesLayout",
    "bbox_to_shape",
]
