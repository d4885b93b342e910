"""
Type definitions for raster shape processing.

This module contains the geometry value types shared by every stage of the
pipeline: points, colors and axis-aligned bounding boxes.

Coordinate Convention:
    All coordinates use (x, y) order, where:
    - x: increases rightward (0 to width-1)
    - y: increases downward (0 to height-1)
    Coordinates are unsigned: moving past the top or left edge yields no point.

Color Convention:
    Colors are exact (r, g, b) triples. Alpha only matters for deciding whether a
    pixel is solid and is dropped afterwards.
"""

from collections.abc import Iterable, Iterator, Set
from dataclasses import dataclass
from typing import NamedTuple, Optional


# =============================================================================
# Coordinate Types
# =============================================================================


class Point(NamedTuple):
    """Pixel position in (x, y) format."""

    x: int
    y: int

    def neighbor(self, dx: int, dy: int) -> Optional["Point"]:
        """
        Translate the point by (dx, dy).

        Returns None when the result would be negative on either axis.
        Image bounds are not checked here, that is the caller's job.
        """
        x, y = self.x + dx, self.y + dy
        if x < 0 or y < 0:
            return None
        return Point(x, y)


type Points = Set[Point]
"""Set of points, typically representing a shape or region."""


# =============================================================================
# Color Types
# =============================================================================


class Color(NamedTuple):
    """Opaque RGB color."""

    r: int
    g: int
    b: int

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


BLACK = Color(0, 0, 0)

type Rgba = tuple[int, int, int, int]
"""Raw pixel value as decoded: (red, green, blue, alpha)."""


# =============================================================================
# Bounding Boxes
# =============================================================================


@dataclass(frozen=True, slots=True)
class BBox:
    """
    Axis-aligned box given by its inclusive corners.

    A box whose corners coincide covers a single cell and is called degenerate.
    """

    min: Point
    max: Point

    def __post_init__(self):
        if self.min.x < 0 or self.min.y < 0:
            raise ValueError(f"Negative box corner: min={self.min}")
        if self.min.x > self.max.x or self.min.y > self.max.y:
            raise ValueError(f"Invalid box corners: min={self.min}, max={self.max}")

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> "BBox":
        """
        Smallest box enclosing all the points.

        An empty input gives the degenerate box at the origin.
        """
        points = list(points)
        if not points:
            return cls(Point(0, 0), Point(0, 0))

        xs = [point.x for point in points]
        ys = [point.y for point in points]
        return cls(Point(min(xs), min(ys)), Point(max(xs), max(ys)))

    @property
    def width(self) -> int:
        return self.max.x - self.min.x + 1

    @property
    def height(self) -> int:
        return self.max.y - self.min.y + 1

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def is_degenerate(self) -> bool:
        return self.min == self.max

    def contains(self, point: Point) -> bool:
        return (
            self.min.x <= point.x <= self.max.x
            and self.min.y <= point.y <= self.max.y
        )

    def __iter__(self) -> Iterator[Point]:
        """Iterate over the covered cells in row-major order."""
        return (
            Point(x, y)
            for y in range(self.min.y, self.max.y + 1)
            for x in range(self.min.x, self.max.x + 1)
        )

    def is_filled_by(self, points: Set[Point]) -> bool:
        """True when every cell of the box belongs to `points`."""
        # A set smaller than the area cannot fill it
        if len(points) < self.area:
            return False
        return all(cell in points for cell in self)

    def __str__(self) -> str:
        return f"({self.min.x},{self.min.y})-({self.max.x},{self.max.y})"


__all__ = [
    # Coordinates
    "Point",
    "Points",
    # Colors
    "Color",
    "BLACK",
    "Rgba",
    # Boxes
    "BBox",
]
