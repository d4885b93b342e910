"""
Object extraction via connected components.

Objects are maximal sets of solid pixels that are linked, directly or
through other pixels, by the adjacency mapping. Since the mapping only
links pixels of identical color, every component is single-colored.
"""

from dataclasses import dataclass

from raster.grid import PixelGrid
from raster.types import Color, Point, Points
from utils.graph import nodes_to_connected_components

from .connectivity import AdjacencyMap, coords_to_adjacency, grid_to_adjacency


@dataclass(frozen=True, slots=True)
class Component:
    """
    A maximal 4-connected set of same-colored solid pixels.

    Attributes:
        color: Color shared by every pixel of the component.
        points: The pixels of the component.
        anchor: First pixel of the component in scan order.
    """

    color: Color
    points: frozenset[Point]
    anchor: Point

    def __len__(self) -> int:
        return len(self.points)


def extract_connected_components(adjacency: AdjacencyMap) -> tuple[Component, ...]:
    """
    Partition the keys of an adjacency mapping into connected components.

    Components are returned in the order their first pixel appears in the
    mapping, i.e. row-major scan order for the builders of this package.
    """
    if not adjacency:
        return tuple()

    def node_to_neighbours(point: Point) -> tuple[Point, ...]:
        return adjacency[point].neighbors

    components: list[Component] = []
    keys = iter(adjacency)
    for points in nodes_to_connected_components(adjacency, node_to_neighbours):
        # The first unvisited key in scan order started this component
        anchor = next(key for key in keys if key in points)
        components.append(Component(adjacency[anchor].color, points, anchor))

    return tuple(components)


def grid_to_components(grid: PixelGrid) -> tuple[Component, ...]:
    """Connected components of the solid pixels of a grid."""
    return extract_connected_components(grid_to_adjacency(grid))


def coords_to_connected_components(coords: Points) -> tuple[frozenset[Point], ...]:
    """Partition coordinates into 4-connected components, in scan order."""
    return tuple(
        component.points
        for component in extract_connected_components(coords_to_adjacency(coords))
    )
