"""
TUI for exploring the shapes layout of an image.

Usage:
    uv run python -m utils.io.layout_explorer path/to/image.png
"""

import sys
from pathlib import Path

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, ScrollableContainer
from textual.screen import Screen
from textual.widgets import DataTable, Footer, Header, Label, Static

from constants import BACKGROUND_RGB, POINT_MARKER
from raster.decoding import open_image
from raster.types import Color
from shapes.layout import grid_to_shapes_layout, shapes_layout_stats
from shapes.types import Complex, Shape, ShapesLayout
from utils.display import describe_shape


def shape_to_rich_text(
    shape: Shape, color: Color, width: int, height: int, cell_width: int = 2
) -> Text:
    """Render one shape on an empty canvas, leftover points marked."""
    cells = shape.to_points()
    markers = set(shape.geometry.inner_points) if isinstance(shape, Complex) else set()
    background = "on rgb({},{},{})".format(*BACKGROUND_RGB)
    fill = f"on rgb({color.r},{color.g},{color.b})"

    text = Text()
    for y in range(height):
        for x in range(width):
            if (x, y) in markers:
                text.append(POINT_MARKER.center(cell_width), style=f"bold {fill}")
            elif (x, y) in cells:
                text.append(" " * cell_width, style=fill)
            else:
                text.append(" " * cell_width, style=background)
        text.append("\n")
    return text


def layout_to_rows(layout: ShapesLayout) -> list[tuple[Color, int, Shape]]:
    """Flatten a layout to (color, index within color, shape) rows."""
    return [
        (color, index, shape)
        for color, shapes in layout.items()
        for index, shape in enumerate(shapes)
    ]


class LayoutScreen(Screen):
    """Main screen: shapes on the left, preview of the highlighted one on the right."""

    BINDINGS = [
        Binding("q", "quit", "Quit"),
    ]

    CSS = """
    LayoutScreen {
        background: $surface;
    }

    #shape-table {
        width: 60%;
        height: 100%;
    }

    #preview {
        width: 40%;
        height: 100%;
        padding: 0 1;
    }

    .preview-title {
        text-style: bold;
        padding: 1 0;
        color: $secondary;
    }

    DataTable > .datatable--header {
        text-style: bold;
        background: $primary;
    }
    """

    def __init__(self, layout: ShapesLayout, width: int, height: int, **kwargs) -> None:
        super().__init__(**kwargs)
        self.shapes_layout = layout
        self.grid_width = width
        self.grid_height = height
        self.rows = layout_to_rows(layout)

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal():
            yield DataTable(id="shape-table")
            with ScrollableContainer(id="preview"):
                yield Label("", id="preview-title", classes="preview-title")
                yield Static("", id="preview-shape")
        yield Footer()

    def on_mount(self) -> None:
        """Populate the shape table."""
        table = self.query_one(DataTable)
        table.cursor_type = "row"
        table.add_columns("Color", "#", "Kind", "Pixels", "Rects", "Points")

        for i, (color, index, shape) in enumerate(self.rows):
            rects, points = _primitive_counts(shape)
            table.add_row(
                Text(color.hex, style=f"on rgb({color.r},{color.g},{color.b})"),
                str(index),
                type(shape).__name__,
                str(len(shape)),
                str(rects),
                str(points),
                key=str(i),
            )

        for stats in shapes_layout_stats(self.shapes_layout):
            self.log(f"{stats.color.hex}: {stats.shapes} shapes, {stats.primitives} primitives")

    def on_data_table_row_highlighted(self, event: DataTable.RowHighlighted) -> None:
        """Show the highlighted shape."""
        if event.row_key is None or event.row_key.value is None:
            return
        color, index, shape = self.rows[int(event.row_key.value)]
        self.query_one("#preview-title", Label).update(
            f"{color.hex} #{index}: {describe_shape(shape)}"
        )
        self.query_one("#preview-shape", Static).update(
            shape_to_rich_text(shape, color, self.grid_width, self.grid_height)
        )


def _primitive_counts(shape: Shape) -> tuple[int, int]:
    """Rectangles and points needed to draw the shape."""
    if isinstance(shape, Complex):
        return len(shape.geometry.inner_bboxes), len(shape.geometry.inner_points)
    if len(shape) == 1:
        return 0, 1
    return 1, 0


class LayoutExplorerApp(App):
    """TUI application for exploring the shapes of an image."""

    TITLE = "Shapes Layout Explorer"

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("d", "toggle_dark", "Toggle Dark Mode"),
    ]

    def __init__(self, image_path: str | Path, **kwargs) -> None:
        super().__init__(**kwargs)
        self.image_path = Path(image_path)
        self.raster = open_image(self.image_path)
        self.shapes_layout = grid_to_shapes_layout(self.raster)
        self.sub_title = f"{self.image_path.name} ({self.raster.width}x{self.raster.height})"

    def on_mount(self) -> None:
        """Push the main screen."""
        self.push_screen(LayoutScreen(self.shapes_layout, self.raster.width, self.raster.height))

    def action_toggle_dark(self) -> None:
        """Toggle dark mode."""
        self.theme = "textual-light" if self.theme == "textual-dark" else "textual-dark"


def main(image_path: str | Path | None = None):
    """Run the layout explorer."""
    if image_path is None:
        if len(sys.argv) != 2:
            print("Usage: python -m utils.io.layout_explorer IMAGE")
            sys.exit(2)
        image_path = sys.argv[1]
    app = LayoutExplorerApp(image_path)
    app.run()


if __name__ == "__main__":
    main()
