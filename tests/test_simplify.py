"""
Tests for shape simplification.
"""

import random

import pytest

from decomposition import coords_to_connected_components
from raster.types import BBox, Point
from shapes.simplify import coords_to_shape
from shapes.types import Box, Complex, Pixel, bbox_to_shape


class TestCoordsToShape:
    def test_single_point_is_pixel(self):
        assert coords_to_shape({Point(4, 2)}) == Pixel(Point(4, 2))

    def test_full_box(self):
        coords = {Point(x, y) for x in (1, 2, 3) for y in (10, 11)}
        assert coords_to_shape(coords) == Box(BBox(Point(1, 10), Point(3, 11)))

    def test_vertical_line_is_box(self):
        coords = {Point(2, 0), Point(2, 1)}
        assert coords_to_shape(coords) == Box(BBox(Point(2, 0), Point(2, 1)))

    def test_l_shape_is_complex(self):
        coords = {Point(0, 2), Point(0, 3), Point(1, 3), Point(2, 3)}
        shape = coords_to_shape(coords)
        assert isinstance(shape, Complex)
        assert shape.geometry.bbox == BBox(Point(0, 2), Point(2, 3))
        assert shape.geometry.points == frozenset(coords)

    def test_box_with_hole_is_complex(self):
        coords = {Point(x, y) for x in range(3) for y in range(3)} - {Point(1, 1)}
        shape = coords_to_shape(coords)
        assert isinstance(shape, Complex)
        assert shape.geometry.inner.to_points() == frozenset(coords)

    def test_empty_is_rejected(self):
        with pytest.raises(ValueError):
            coords_to_shape(set())


class TestNormalization:
    def test_degenerate_box_becomes_pixel(self):
        assert bbox_to_shape(BBox(Point(3, 3), Point(3, 3))) == Pixel(Point(3, 3))

    def test_degenerate_box_cannot_be_stored(self):
        with pytest.raises(ValueError):
            Box(BBox(Point(3, 3), Point(3, 3)))

    def test_random_components(self):
        rng = random.Random(42)
        for _ in range(50):
            cells = {
                Point(x, y) for x in range(9) for y in range(9) if rng.random() < 0.6
            }
            for component in coords_to_connected_components(cells):
                shape = coords_to_shape(component)
                assert shape.to_points() == component
                assert len(shape) == len(component)

                match shape:
                    case Pixel():
                        assert len(component) == 1
                    case Box(bbox):
                        assert not bbox.is_degenerate
                        assert bbox.area == len(component)
                    case Complex(geometry):
                        assert len(component) > 1
                        assert geometry.try_get_as_bbox() is None
                        assert geometry.inner.to_points() == component

                # Classification is idempotent
                assert coords_to_shape(shape.to_points()) == shape
