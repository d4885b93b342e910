"""
Rectangles are the compact building blocks of an irregular region.
An irregular set of pixels is reduced to non-overlapping rectangles plus the
leftover points no rectangle could absorb.

The decomposition is greedy, one step at a time:
    * Find the tallest vertical run of the region (first one found wins ties)
    * Extract every maximal-width rectangle spanning that run's rows
    * Remove them; what remains may be split into several pieces,
      each piece is re-labeled and decomposed the same way

It is not an optimal cover, but it is deterministic and peels large
rectangles off rounded shapes before falling back to small pieces.

Rectangles degenerate to a single cell are reported as points.

Naming conventions:
    'cxxxx' -> 'current_xxxx' / 'xxxxx_current'
    'nxxxx' -> 'new_xxxxx' / 'xxxxx_new' or 'next_xxxx' / 'xxxxx_next'
"""

import logging
from typing import Optional

from decomposition.objects import coords_to_connected_components
from raster.types import BBox, Point, Points

from .types import ComplexGeometry, InnerGeometry

logger = logging.getLogger(__name__)

type HeightBand = tuple[int, int]  # (min_y, max_y), inclusive


def coords_to_exact_geometry(coords: Points) -> Optional[Point | BBox]:
    """
    The point or box that `coords` is exactly made of, if any.

    Returns the point for a single-cell set, the bounding box when the set
    fills it, None for an irregular (or empty) set.
    """
    if not coords:
        return None
    if len(coords) == 1:
        return next(iter(coords))

    bbox = BBox.from_points(coords)
    if bbox.area == len(coords):
        return bbox
    return None


def find_tallest_band(coords: Points, bbox: BBox) -> Optional[HeightBand]:
    """
    Rows of the tallest contiguous vertical run of `coords` inside `bbox`.

    Columns are scanned left to right, each from top to bottom. A run only
    replaces the best one when strictly longer, so the earliest run of the
    maximal height wins.
    """
    best_length = 0
    band: Optional[HeightBand] = None

    for x in range(bbox.min.x, bbox.max.x + 1):
        length = 0
        for y in range(bbox.min.y, bbox.max.y + 1):
            if Point(x, y) in coords:
                length += 1
                continue
            # The run ended on the previous row
            if length > best_length:
                best_length, band = length, (y - length, y - 1)
            length = 0

        # Run reaching the bottom of the column
        if length > best_length:
            best_length, band = length, (bbox.max.y - length + 1, bbox.max.y)

    return band


def find_band_rectangles(coords: Points, bbox: BBox, band: HeightBand) -> list[BBox]:
    """
    Maximal-width rectangles of `coords` spanning exactly the rows of `band`.

    A column matches when all its cells within the band are present.
    Each run of consecutive matching columns gives one rectangle.
    """
    min_y, max_y = band
    rectangles: list[BBox] = []
    start: Optional[int] = None

    def column_matches(x: int) -> bool:
        return all(Point(x, y) in coords for y in range(min_y, max_y + 1))

    for x in range(bbox.min.x, bbox.max.x + 1):
        if column_matches(x):
            if start is None:
                start = x
            continue
        if start is not None:
            rectangles.append(BBox(Point(start, min_y), Point(x - 1, max_y)))
            start = None

    if start is not None:
        rectangles.append(BBox(Point(start, min_y), Point(bbox.max.x, max_y)))

    return rectangles


def _peel_band(
    coords: frozenset[Point], bbox: BBox, bboxes: list[BBox], points: list[Point]
) -> Optional[frozenset[Point]]:
    """
    Extract the rectangles of the tallest band of `coords` inside `bbox`.

    Rectangles are appended to `bboxes`, single cells to `points`.
    Returns the cells left over, or None when no cell lies inside `bbox`.
    """
    band = find_tallest_band(coords, bbox)
    if band is None:
        return None

    covered: set[Point] = set()
    for rect in find_band_rectangles(coords, bbox, band):
        if rect.is_degenerate:
            points.append(rect.min)
        else:
            bboxes.append(rect)
        covered.update(rect)

    remaining = coords - covered
    logger.debug(
        f"Band {band} of {bbox}: {len(covered)} cells extracted, {len(remaining)} remaining"
    )
    return remaining


def decompose(coords: Points, bbox: Optional[BBox] = None) -> InnerGeometry:
    """
    Decompose a set of pixels into non-overlapping rectangles and points.

    The union of the returned rectangles and points is exactly `coords`.
    Remainder pieces are processed from an explicit stack, each one fully
    before its next sibling, so primitives come out in depth-first order.

    :param coords: The pixels to decompose.
    :param bbox: Region scanned for the first step, defaults to the bounding box of `coords`.
    :return: The inner geometry of `coords`.
    """
    if not coords:
        return InnerGeometry()

    coords = frozenset(coords)
    bboxes: list[BBox] = []
    points: list[Point] = []

    remaining = _peel_band(
        coords, bbox if bbox is not None else BBox.from_points(coords), bboxes, points
    )
    # Nothing of the region lies inside the scanned box
    if remaining is None:
        remaining = frozenset()

    # Removing a band may split a piece, re-label what remains
    pending = list(reversed(coords_to_connected_components(remaining)))

    while pending:
        cpiece = pending.pop()

        exact = coords_to_exact_geometry(cpiece)
        if isinstance(exact, Point):
            points.append(exact)
            continue
        if isinstance(exact, BBox):
            bboxes.append(exact)
            continue

        nremaining = _peel_band(cpiece, BBox.from_points(cpiece), bboxes, points)
        if nremaining:
            pending.extend(reversed(coords_to_connected_components(nremaining)))

    inner = InnerGeometry(tuple(bboxes), tuple(points))

    if inner.to_points() != coords:
        raise ValueError(
            "The region is not exactly covered by its rectangles, something went wrong."
        )

    return inner


def coords_to_complex_geometry(coords: Points) -> ComplexGeometry:
    """Build the outer bounding box first, then the inner geometry inside it."""
    bbox = BBox.from_points(coords)
    return ComplexGeometry(frozenset(coords), bbox, decompose(coords, bbox))
