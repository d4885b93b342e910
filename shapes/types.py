"""
Type definitions for decomposed shapes.

A shape is the most compact description of one connected component:

- `Pixel`: the component is a single pixel.
- `Box`: the component exactly fills its bounding box.
- `Complex`: anything else, carried with a decomposition of its pixels into
  non-overlapping rectangles and leftover points (its inner geometry).
"""

from dataclasses import dataclass

from raster.types import BBox, Color, Point


@dataclass(frozen=True, slots=True)
class InnerGeometry:
    """
    Rectangles and isolated points that together cover a region exactly.

    Attributes:
        bboxes: Non-overlapping, non-degenerate rectangles.
        points: Cells not covered by any rectangle.
    """

    bboxes: tuple[BBox, ...] = ()
    points: tuple[Point, ...] = ()

    def to_points(self) -> frozenset[Point]:
        """All the cells covered by the rectangles and points."""
        cells = set(self.points)
        for bbox in self.bboxes:
            cells.update(bbox)
        return frozenset(cells)

    def __len__(self) -> int:
        """Number of primitives (rectangles plus points)."""
        return len(self.bboxes) + len(self.points)


@dataclass(frozen=True, slots=True)
class ComplexGeometry:
    """
    An irregular region: its pixels, its outer bounding box and its inner geometry.

    Invariant: `inner.to_points() == points`.
    """

    points: frozenset[Point]
    bbox: BBox
    inner: InnerGeometry

    @property
    def inner_bboxes(self) -> tuple[BBox, ...]:
        return self.inner.bboxes

    @property
    def inner_points(self) -> tuple[Point, ...]:
        return self.inner.points

    def try_get_as_bbox(self) -> BBox | None:
        """The outer bounding box if the points fill it entirely."""
        if self.bbox.is_filled_by(self.points):
            return self.bbox
        return None

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True, slots=True)
class Pixel:
    point: Point

    def to_points(self) -> frozenset[Point]:
        return frozenset({self.point})

    def __len__(self) -> int:
        return 1


@dataclass(frozen=True, slots=True)
class Box:
    bbox: BBox

    def __post_init__(self):
        if self.bbox.is_degenerate:
            raise ValueError(f"A single-cell box must be a Pixel: {self.bbox}")

    def to_points(self) -> frozenset[Point]:
        return frozenset(self.bbox)

    def __len__(self) -> int:
        return self.bbox.area


@dataclass(frozen=True, slots=True)
class Complex:
    geometry: ComplexGeometry

    def to_points(self) -> frozenset[Point]:
        return self.geometry.points

    def __len__(self) -> int:
        return len(self.geometry)


type Shape = Pixel | Box | Complex

type ShapesLayout = dict[Color, list[Shape]]
"""Shapes grouped by color, each list in scan order of discovery."""


def bbox_to_shape(bbox: BBox) -> Pixel | Box:
    """Box shape, normalized to a Pixel when it covers a single cell."""
    if bbox.is_degenerate:
        return Pixel(bbox.min)
    return Box(bbox)


__all__ = [
    "InnerGeometry",
    "ComplexGeometry",
    "Pixel",
    "Box",
    "Complex",
    "Shape",
    "ShapesLayout",
    "bbox_to_shape",
]
