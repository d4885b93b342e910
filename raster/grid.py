"""
Pixel grids and the foreground policies applied to them.

The engine only needs three things from an image: its width, its height and the
RGBA value at a position. `PixelGrid` states that contract, `RgbaGrid` is the
numpy-backed implementation produced by the decoder.

Policies:
    - Solid pixel: fully opaque and not pure white.
    - Same color: exact RGB equality (alpha is always opaque for solid pixels).
"""

from collections.abc import Sequence
from typing import Optional, Protocol, runtime_checkable

import numpy as np
from numpy.typing import NDArray

from constants import OPAQUE_ALPHA, WHITE_RGB
from .types import Color, Point, Rgba


@runtime_checkable
class PixelGrid(Protocol):
    """Read-only access to a decoded raster."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def rgba(self, x: int, y: int) -> Rgba: ...


class RgbaGrid:
    """
    Pixel grid backed by a (height, width, 4) uint8 array.

    The array is copied and frozen on construction so the grid can be shared
    freely between runs.
    """

    def __init__(self, pixels: NDArray[np.uint8]) -> None:
        pixels = np.array(pixels, dtype=np.uint8)
        if pixels.ndim != 3 or pixels.shape[2] != 4:
            raise ValueError(
                f"Expected a (height, width, 4) RGBA array, got shape {pixels.shape}"
            )
        pixels.setflags(write=False)
        self._pixels = pixels

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Rgba]]) -> "RgbaGrid":
        """Build a grid from nested rows: rows[y][x] -> (r, g, b, a)."""
        if not rows or not rows[0]:
            return cls(np.zeros((0, 0, 4), dtype=np.uint8))
        return cls(np.array(rows, dtype=np.uint8))

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    @property
    def pixels(self) -> NDArray[np.uint8]:
        return self._pixels

    def rgba(self, x: int, y: int) -> Rgba:
        # numpy would wrap negative indices to the opposite edge
        if x < 0 or y < 0:
            raise ValueError(f"Negative pixel position: ({x}, {y})")
        r, g, b, a = self._pixels[y, x]
        return (int(r), int(g), int(b), int(a))

    def __repr__(self) -> str:
        return f"RgbaGrid(width={self.width}, height={self.height})"


def is_solid_rgba(rgba: Rgba) -> bool:
    """Foreground test: fully opaque and not pure white."""
    r, g, b, a = rgba
    return a == OPAQUE_ALPHA and (r, g, b) != WHITE_RGB


def rgba_to_color(rgba: Rgba) -> Color:
    r, g, b, _ = rgba
    return Color(r, g, b)


def solid_color_at(grid: PixelGrid, point: Point) -> Optional[Color]:
    """
    Color of the pixel at `point` if it is solid, None otherwise.

    Positions outside the grid are never solid.
    """
    if not (0 <= point.x < grid.width and 0 <= point.y < grid.height):
        return None

    rgba = grid.rgba(point.x, point.y)
    if not is_solid_rgba(rgba):
        return None
    return rgba_to_color(rgba)


__all__ = [
    "PixelGrid",
    "RgbaGrid",
    "is_solid_rgba",
    "rgba_to_color",
    "solid_color_at",
]
