"""
Layout aggregation: every shape of an image, grouped by color.

Pipeline:
1. grid_to_components: Extract same-colored 4-connected components
2. coords_to_shape: Simplify each component (decomposing irregular ones)
3. Group the shapes by color, in discovery order
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from decomposition.objects import Component, grid_to_components
from raster.decoding import open_image
from raster.grid import PixelGrid
from raster.types import Color

from .simplify import coords_to_shape
from .types import Box, Complex, Pixel, ShapesLayout

logger = logging.getLogger(__name__)


def components_to_shapes_layout(components: Iterable[Component]) -> ShapesLayout:
    """Simplify each component and file its shape under its color."""
    layout: ShapesLayout = {}
    for component in components:
        layout.setdefault(component.color, []).append(coords_to_shape(component.points))
    return layout


def grid_to_shapes_layout(grid: PixelGrid) -> ShapesLayout:
    """
    Decompose a pixel grid into shapes grouped by color.

    Within a color, shapes are ordered by the row-major position of their
    first pixel.
    """
    components = grid_to_components(grid)
    logger.debug(f"Found {len(components)} components in {grid.width}x{grid.height} grid")

    layout = components_to_shapes_layout(components)
    logger.info(f"{len(components)} shapes over {len(layout)} colors")
    return layout


def image_to_shapes_layout(path: str | Path) -> ShapesLayout:
    """
    Decode the image at `path` and decompose it.

    Decoding errors are not caught.
    """
    return grid_to_shapes_layout(open_image(path))


@dataclass(frozen=True, slots=True)
class ColorStats:
    """
    Summary of the shapes of one color.

    Attributes:
        color: The color summarized.
        shapes: Number of shapes (connected components).
        pixels: Shapes made of a single pixel.
        boxes: Shapes that are a full rectangle.
        complexes: Irregular shapes.
        rectangles: Rectangles needed to draw every shape of the color.
        points: Single points needed on top of the rectangles.
        area: Total number of pixels of the color.
    """

    color: Color
    shapes: int
    pixels: int
    boxes: int
    complexes: int
    rectangles: int
    points: int
    area: int

    @property
    def primitives(self) -> int:
        return self.rectangles + self.points


def shapes_layout_stats(layout: ShapesLayout) -> list[ColorStats]:
    """Per-color counts, in the layout's color order."""
    stats = []
    for color, shapes in layout.items():
        pixels = boxes = complexes = rectangles = points = 0
        for shape in shapes:
            match shape:
                case Pixel():
                    pixels += 1
                    points += 1
                case Box():
                    boxes += 1
                    rectangles += 1
                case Complex(geometry):
                    complexes += 1
                    rectangles += len(geometry.inner_bboxes)
                    points += len(geometry.inner_points)
        stats.append(
            ColorStats(
                color=color,
                shapes=len(shapes),
                pixels=pixels,
                boxes=boxes,
                complexes=complexes,
                rectangles=rectangles,
                points=points,
                area=sum(len(shape) for shape in shapes),
            )
        )
    return stats
