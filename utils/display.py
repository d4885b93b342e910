from collections.abc import Sequence
from typing import TextIO

from constants import BACKGROUND_RGB, DEFAULT_CELL_WIDTH, POINT_MARKER
from raster.types import Color
from shapes.layout import ColorStats
from shapes.types import Box, Complex, Pixel, Shape, ShapesLayout
from utils.io.tui import RESET, bg_color, contrasting_fg

type Cell = tuple[Color, str] | None
type Canvas = list[list[Cell]]


def blank_canvas(width: int, height: int) -> Canvas:
    return [[None for _ in range(width)] for _ in range(height)]


def paint_shape(canvas: Canvas, shape: Shape, color: Color, mark_points: bool = False):
    """
    Paint the cells of a shape on the canvas.
    Leftover points of a complex shape get a marker if `mark_points` is set.
    """
    for point in shape.to_points():
        canvas[point.y][point.x] = (color, "")

    if mark_points and isinstance(shape, Complex):
        for point in shape.geometry.inner_points:
            canvas[point.y][point.x] = (color, POINT_MARKER)


def shapes_layout_to_canvas(layout: ShapesLayout, width: int, height: int) -> Canvas:
    canvas = blank_canvas(width, height)
    for color, shapes in layout.items():
        for shape in shapes:
            paint_shape(canvas, shape, color)
    return canvas


def canvas_to_lines(canvas: Canvas, cell_width: int = DEFAULT_CELL_WIDTH) -> list[str]:
    background = bg_color(*BACKGROUND_RGB)
    lines = []
    for row in canvas:
        line = ""
        for cell in row:
            if cell is None:
                line += f"{background}{' ' * cell_width}"
            else:
                color, marker = cell
                text = marker.center(cell_width) if marker else " " * cell_width
                line += f"{bg_color(*color)}{contrasting_fg(*color)}{text}"
        lines.append(line + RESET)
    return lines


def display_shapes_layout(layout: ShapesLayout, width: int, height: int, file: TextIO | None = None):
    """Print the image as rebuilt from its shapes, to stdout unless `file` is given."""
    for line in canvas_to_lines(shapes_layout_to_canvas(layout, width, height)):
        print(line, file=file)


def display_shape(shape: Shape, color: Color, width: int, height: int):
    """Print a single shape, marking the leftover points of a complex one."""
    canvas = blank_canvas(width, height)
    paint_shape(canvas, shape, color, mark_points=True)
    for line in canvas_to_lines(canvas):
        print(line)


def describe_shape(shape: Shape) -> str:
    match shape:
        case Complex(geometry):
            return (
                f"Complex {geometry.bbox}: {len(geometry.inner_bboxes)} rectangles, "
                f"{len(geometry.inner_points)} points, {len(geometry)} pixels"
            )
        case Pixel(point):
            return f"Pixel ({point.x},{point.y})"
        case Box(bbox):
            return f"Box {bbox} {bbox.width}x{bbox.height}"


def stats_to_lines(stats: Sequence[ColorStats], swatch: bool = True) -> list[str]:
    """Table of per-color counts, with a color swatch in front of each row if `swatch` is set."""
    lines = [
        f"{'color':<9} {'shapes':>6} {'pixel':>6} {'box':>6} {'complex':>7} {'rects':>6} {'points':>6} {'area':>7}"
    ]
    for s in stats:
        prefix = f"{bg_color(*s.color)}  {RESET}" if swatch else "  "
        lines.append(
            f"{prefix}{s.color.hex:<7}"
            f" {s.shapes:>6} {s.pixels:>6} {s.boxes:>6} {s.complexes:>7}"
            f" {s.rectangles:>6} {s.points:>6} {s.area:>7}"
        )
    return lines
