"""
Decomposition of a raster into its connected objects.

**Connectivity** (connectivity.py)
    Builds the adjacency mapping: each solid pixel linked to its same-colored
    4-connected neighbors. Works on pixel grids and on bare coordinate sets.
    - grid_to_adjacency(grid) -> AdjacencyMap
    - coords_to_adjacency(coords) -> AdjacencyMap

**Objects** (objects.py)
    Connected component extraction over an adjacency mapping.
    - extract_connected_components(adjacency) -> components

The shape-level processing (simplification, rectangle decomposition,
grouping by color) lives in shapes/.
"""

from .connectivity import (
    Adjacency,
    AdjacencyMap,
    coords_to_adjacency,
    grid_to_adjacency,
    grid_to_solid_colors,
    link_same_color,
)
from .objects import (
    Component,
    coords_to_connected_components,
    extract_connected_components,
    grid_to_components,
)

__all__ = [
    # Connectivity
    "Adjacency",
    "AdjacencyMap",
    "link_same_color",
    "grid_to_solid_colors",
    "grid_to_adjacency",
    "coords_to_adjacency",
    # Objects
    "Component",
    "extract_connected_components",
    "grid_to_components",
    "coords_to_connected_components",
]
