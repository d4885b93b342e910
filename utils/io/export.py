"""
Serialization of shape layouts.

- JSON: a plain dictionary mirroring the shape variants
- SVG: one <path> per color, made of the axis-aligned rectangles of its shapes
"""

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from constants import SVG_XMLNS
from raster.types import BBox, Point
from shapes.types import Box, Complex, Pixel, Shape, ShapesLayout


def _point_to_json(point: Point) -> list[int]:
    return [point.x, point.y]


def _bbox_to_json(bbox: BBox) -> dict[str, list[int]]:
    return {"min": _point_to_json(bbox.min), "max": _point_to_json(bbox.max)}


def shape_to_json(shape: Shape) -> dict[str, Any]:
    match shape:
        case Pixel(point):
            return {"type": "pixel", "point": _point_to_json(point)}
        case Box(bbox):
            return {"type": "box", **_bbox_to_json(bbox)}
        case Complex(geometry):
            return {
                "type": "complex",
                "bbox": _bbox_to_json(geometry.bbox),
                "boxes": [_bbox_to_json(bbox) for bbox in geometry.inner_bboxes],
                "points": [_point_to_json(point) for point in geometry.inner_points],
            }


def shapes_layout_to_json(
    layout: ShapesLayout, width: int | None = None, height: int | None = None
) -> dict[str, Any]:
    """JSON-serializable view of a layout, colors written as #rrggbb."""
    data: dict[str, Any] = {}
    if width is not None and height is not None:
        data["width"], data["height"] = width, height
    data["colors"] = [
        {"color": color.hex, "shapes": [shape_to_json(shape) for shape in shapes]}
        for color, shapes in layout.items()
    ]
    return data


def shape_to_bboxes(shape: Shape) -> Iterator[BBox]:
    """Rectangles drawing the shape, points included as single-cell boxes."""
    match shape:
        case Pixel(point):
            yield BBox(point, point)
        case Box(bbox):
            yield bbox
        case Complex(geometry):
            yield from geometry.inner_bboxes
            for point in geometry.inner_points:
                yield BBox(point, point)


def _bbox_to_subpath(bbox: BBox) -> str:
    return f"M{bbox.min.x} {bbox.min.y}h{bbox.width}v{bbox.height}h-{bbox.width}z"


def shapes_layout_to_svg(layout: ShapesLayout, width: int, height: int) -> str:
    """SVG document drawing every shape, one path element per color."""
    svg_content = [
        f'<svg xmlns="{SVG_XMLNS}" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}" shape-rendering="crispEdges">'
    ]

    for color, shapes in layout.items():
        path_data = "".join(
            _bbox_to_subpath(bbox) for shape in shapes for bbox in shape_to_bboxes(shape)
        )
        svg_content.append(f'<path fill="{color.hex}" d="{path_data}"/>')

    svg_content.append("</svg>")
    return "\n".join(svg_content)


def write_json(layout: ShapesLayout, path: str | Path, width: int, height: int) -> None:
    with open(path, "w") as file:
        json.dump(shapes_layout_to_json(layout, width, height), file, indent=2)


def write_svg(layout: ShapesLayout, path: str | Path, width: int, height: int) -> None:
    with open(path, "w") as file:
        file.write(shapes_layout_to_svg(layout, width, height))
