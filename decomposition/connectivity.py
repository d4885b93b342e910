"""
Adjacency mapping construction.

The adjacency mapping links every solid pixel to its 4-connected neighbors
(left, right, up, down) of the exact same color, and records that color.
Pixels that are not solid never appear, neither as keys nor as neighbors,
so the relation is symmetric by construction.

Two sources are supported:
- a decoded pixel grid, where solidity and color come from the RGBA values
- a bare coordinate set, where presence in the set means solid and every
  present cell shares one color. The rectangle decomposer re-labels its
  remainders this way.

Keys are inserted in row-major scan order, which pins the discovery order
of components downstream.
"""

from collections.abc import Mapping
from typing import NamedTuple

from constants import TOWER_DELTAS
from raster.grid import PixelGrid, solid_color_at
from raster.types import BLACK, BBox, Color, Point, Points


class Adjacency(NamedTuple):
    """Color of a solid pixel and its same-colored 4-connected neighbors."""

    color: Color
    neighbors: tuple[Point, ...]


type AdjacencyMap = dict[Point, Adjacency]


def link_same_color(colors: Mapping[Point, Color]) -> AdjacencyMap:
    """
    Link each solid pixel to the neighbors sharing its exact color.

    Args:
        colors: Color of every solid pixel, in scan order.
    """
    adjacency: AdjacencyMap = {}

    for point, color in colors.items():
        neighbors = []
        for dx, dy in TOWER_DELTAS:
            neighbor = point.neighbor(dx, dy)
            if neighbor is not None and colors.get(neighbor) == color:
                neighbors.append(neighbor)
        adjacency[point] = Adjacency(color, tuple(neighbors))

    return adjacency


def grid_to_solid_colors(grid: PixelGrid) -> dict[Point, Color]:
    """Single row-major scan collecting the color of every solid pixel."""
    colors: dict[Point, Color] = {}
    for y in range(grid.height):
        for x in range(grid.width):
            point = Point(x, y)
            color = solid_color_at(grid, point)
            if color is not None:
                colors[point] = color
    return colors


def grid_to_adjacency(grid: PixelGrid) -> AdjacencyMap:
    """Adjacency mapping of all the solid pixels of a grid."""
    return link_same_color(grid_to_solid_colors(grid))


def coords_to_adjacency(coords: Points, color: Color = BLACK) -> AdjacencyMap:
    """
    Adjacency mapping of a coordinate set, scanned over its bounding box only.

    Every present cell is solid and carries `color`.
    """
    if not coords:
        return {}

    box = BBox.from_points(coords)
    colors = {point: color for point in box if point in coords}
    return link_same_color(colors)
