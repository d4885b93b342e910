"""
Shape simplification.

Turns the pixels of one component into the most compact shape:
a Pixel, a Box, or as a last resort a Complex shape with its inner geometry.
"""

from raster.types import BBox, Point, Points

from .rectangles import coords_to_complex_geometry, coords_to_exact_geometry
from .types import Complex, Pixel, Shape, bbox_to_shape


def coords_to_shape(coords: Points) -> Shape:
    """
    Classify a component's pixels as a Pixel, a Box or a Complex shape.

    The cheap exact tests come first. Only an irregular set pays for the
    rectangle decomposition, after which both reductions are tried again
    on the built geometry.

    Raises:
        ValueError: `coords` is empty, no shape describes it.
    """
    if not coords:
        raise ValueError("Cannot build a shape from an empty set of pixels")

    exact = coords_to_exact_geometry(coords)
    if isinstance(exact, Point):
        return Pixel(exact)
    if isinstance(exact, BBox):
        return bbox_to_shape(exact)

    geometry = coords_to_complex_geometry(coords)

    if not geometry.inner_bboxes and len(geometry.inner_points) == 1:
        return Pixel(geometry.inner_points[0])

    bbox = geometry.try_get_as_bbox()
    if bbox is not None:
        return bbox_to_shape(bbox)

    return Complex(geometry)
