"""
Tests for the rectangle decomposition of irregular regions.
"""

import random

import pytest

from decomposition import coords_to_connected_components
from raster.types import BBox, Point
from shapes.rectangles import (
    coords_to_complex_geometry,
    coords_to_exact_geometry,
    decompose,
    find_band_rectangles,
    find_tallest_band,
)
from shapes.types import InnerGeometry


def box(x0: int, y0: int, x1: int, y1: int) -> BBox:
    return BBox(Point(x0, y0), Point(x1, y1))


def coords_from_rows(rows: dict[int, tuple[int, int]]) -> frozenset[Point]:
    """Region given as {y: (x_min, x_max)}."""
    return frozenset(
        Point(x, y) for y, (x0, x1) in rows.items() for x in range(x0, x1 + 1)
    )


# Filled disk with outer bounding box (2,1)-(8,7)
DISK = coords_from_rows(
    {1: (4, 6), 2: (3, 7), 3: (2, 8), 4: (2, 8), 5: (2, 8), 6: (3, 7), 7: (4, 6)}
)

# Vertical bar crossed by a horizontal one
CROSS = frozenset(
    {Point(2, y) for y in range(5)} | {Point(x, 2) for x in range(5)}
)


def assert_exact_cover(coords, inner: InnerGeometry):
    cells: list[Point] = list(inner.points)
    for bbox in inner.bboxes:
        assert not bbox.is_degenerate
        cells.extend(bbox)
    # No cell counted twice means no overlap
    assert len(cells) == len(set(cells))
    assert set(cells) == set(coords)


class TestFindTallestBand:
    def test_empty(self):
        assert find_tallest_band(set(), box(0, 0, 3, 3)) is None

    def test_run_reaching_bottom(self):
        coords = {Point(0, 3), Point(0, 4), Point(0, 5)}
        assert find_tallest_band(coords, box(0, 0, 0, 5)) == (3, 5)

    def test_run_interrupted_in_column(self):
        coords = {Point(0, 0), Point(0, 2), Point(0, 3), Point(0, 4), Point(0, 6)}
        assert find_tallest_band(coords, box(0, 0, 0, 6)) == (2, 4)

    def test_first_column_wins_ties(self):
        coords = {Point(0, 0), Point(0, 1), Point(1, 1), Point(1, 2)}
        assert find_tallest_band(coords, box(0, 0, 1, 2)) == (0, 1)

    def test_first_run_in_column_wins_ties(self):
        coords = {Point(0, 0), Point(0, 1), Point(0, 3), Point(0, 4)}
        assert find_tallest_band(coords, box(0, 0, 0, 4)) == (0, 1)

    def test_later_strictly_taller_run_wins(self):
        coords = {Point(0, 0), Point(0, 1), Point(1, 0), Point(1, 1), Point(1, 2)}
        assert find_tallest_band(coords, box(0, 0, 1, 2)) == (0, 2)

    def test_disk(self):
        assert find_tallest_band(DISK, box(2, 1, 8, 7)) == (1, 7)


class TestFindBandRectangles:
    def test_single_run(self):
        assert find_band_rectangles(DISK, box(2, 1, 8, 7), (1, 7)) == [box(4, 1, 6, 7)]

    def test_separated_runs(self):
        coords = {Point(x, y) for x in (0, 1, 3) for y in (0, 1)} | {Point(2, 0)}
        assert find_band_rectangles(coords, box(0, 0, 3, 1), (0, 1)) == [
            box(0, 0, 1, 1),
            box(3, 0, 3, 1),
        ]

    def test_run_reaching_right_edge(self):
        coords = {Point(1, 0), Point(2, 0)}
        assert find_band_rectangles(coords, box(0, 0, 2, 0), (0, 0)) == [box(1, 0, 2, 0)]


class TestCoordsToExactGeometry:
    def test_single_point(self):
        assert coords_to_exact_geometry({Point(3, 4)}) == Point(3, 4)

    def test_full_box(self):
        coords = {Point(x, y) for x in (1, 2, 3) for y in (10, 11)}
        assert coords_to_exact_geometry(coords) == box(1, 10, 3, 11)

    def test_l_shape(self):
        coords = {Point(0, 2), Point(0, 3), Point(1, 3), Point(2, 3)}
        assert coords_to_exact_geometry(coords) is None

    def test_empty(self):
        assert coords_to_exact_geometry(set()) is None


class TestDecompose:
    def test_empty(self):
        assert decompose(set()) == InnerGeometry()

    def test_disk(self):
        inner = decompose(DISK, box(2, 1, 8, 7))
        assert inner.points == ()
        assert len(inner.bboxes) == 5
        assert set(inner.bboxes) == {
            box(4, 1, 6, 7),
            box(2, 3, 2, 5),
            box(3, 2, 3, 6),
            box(7, 2, 7, 6),
            box(8, 3, 8, 5),
        }
        # The tallest band is peeled off first
        assert inner.bboxes[0] == box(4, 1, 6, 7)

    def test_split_remainder_is_merged(self):
        inner = decompose(CROSS)
        assert set(inner.bboxes) == {box(2, 0, 2, 4), box(0, 2, 1, 2), box(3, 2, 4, 2)}
        assert inner.points == ()

    def test_l_shape(self):
        coords = {Point(0, 2), Point(0, 3), Point(1, 3), Point(2, 3)}
        inner = decompose(coords)
        assert inner.bboxes == (box(0, 2, 0, 3), box(1, 3, 2, 3))
        assert inner.points == ()

    def test_isolated_remainders_become_points(self):
        # Removing the middle column leaves two single cells
        coords = {Point(0, 0), Point(1, 0), Point(1, 1), Point(2, 1)}
        inner = decompose(coords)
        assert_exact_cover(coords, inner)
        assert set(inner.bboxes) == {box(1, 0, 1, 1)}
        assert set(inner.points) == {Point(0, 0), Point(2, 1)}

    def test_pieces_are_finished_in_scan_order(self):
        # Column x=2 is the tallest band, it leaves an L on its left and a box on its right
        l_piece = {Point(0, 0), Point(1, 0), Point(0, 1)}
        box_piece = {Point(x, y) for x in (3, 4) for y in (2, 3)}
        coords = l_piece | box_piece | {Point(2, y) for y in range(5)}
        inner = decompose(coords)
        assert inner.bboxes == (box(2, 0, 2, 4), box(0, 0, 0, 1), box(3, 2, 4, 3))
        assert inner.points == (Point(1, 0),)

    def test_staircase(self):
        coords = {Point(i, i) for i in range(6)} | {Point(i + 1, i) for i in range(5)}
        inner = decompose(coords)
        assert_exact_cover(coords, inner)

    def test_deep_serpentine_does_not_overflow(self):
        # Long horizontal corridors joined at alternating ends
        coords = set()
        width, height = 40, 120
        for y in range(0, height, 2):
            coords.update(Point(x, y) for x in range(width))
            joint_x = width - 1 if (y // 2) % 2 == 0 else 0
            if y + 1 < height:
                coords.add(Point(joint_x, y + 1))
        inner = decompose(coords)
        assert_exact_cover(coords, inner)

    def test_random_regions_are_covered_exactly(self):
        rng = random.Random(1234)
        for _ in range(60):
            cells = {
                Point(x, y)
                for x in range(10)
                for y in range(8)
                if rng.random() < 0.65
            }
            for component in coords_to_connected_components(cells):
                assert_exact_cover(component, decompose(component))

    def test_region_outside_scanned_box(self):
        with pytest.raises(ValueError):
            decompose({Point(5, 5), Point(5, 6)}, box(0, 0, 1, 1))


class TestComplexGeometry:
    def test_two_phase_build(self):
        geometry = coords_to_complex_geometry(DISK)
        assert geometry.bbox == box(2, 1, 8, 7)
        assert geometry.points == DISK
        assert len(geometry) == len(DISK)
        assert geometry.inner.to_points() == DISK
        assert geometry.try_get_as_bbox() is None

    def test_try_get_as_bbox(self):
        coords = {Point(x, y) for x in range(3) for y in range(2)}
        geometry = coords_to_complex_geometry(coords)
        assert geometry.try_get_as_bbox() == box(0, 0, 2, 1)
