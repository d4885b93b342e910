"""
Vectorize a raster image into per-color shapes.

Each 4-connected group of same-colored solid pixels becomes a Pixel, a Box,
or a Complex shape decomposed into rectangles and leftover points.

Output formats:
- text: one line per shape
- stats: per-color counts of shapes and primitives
- json: the full layout as JSON
- svg: the layout redrawn as an SVG document

Usage:
    uv run python vectorize.py image.png --format svg --output image.svg
"""

import argparse
import json
import logging
import sys
from collections.abc import Sequence

from raster.decoding import open_image
from shapes.layout import grid_to_shapes_layout, shapes_layout_stats
from utils.display import describe_shape, display_shapes_layout, stats_to_lines
from utils.io.export import shapes_layout_to_json, shapes_layout_to_svg

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Decompose an image into per-color shapes")
    parser.add_argument("image", help="Path to the image to decompose")
    parser.add_argument(
        "--format",
        choices=["text", "stats", "json", "svg"],
        default="text",
        help="Output format",
    )
    parser.add_argument("--output", help="Write the output to this file instead of stdout")
    parser.add_argument(
        "--render", action="store_true", help="Print the rebuilt image in the terminal"
    )
    parser.add_argument(
        "--explore", action="store_true", help="Browse the shapes in an interactive TUI"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
        format="%(levelname)s | %(message)s",
    )
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.explore:
        from utils.io.layout_explorer import LayoutExplorerApp

        LayoutExplorerApp(args.image).run()
        return 0

    logger.info(f"Decomposing {args.image}")
    grid = open_image(args.image)
    layout = grid_to_shapes_layout(grid)

    # stdout only carries the payload
    if args.render:
        display_shapes_layout(layout, grid.width, grid.height, file=sys.stderr)

    match args.format:
        case "stats":
            # No color swatches in files
            output = "\n".join(stats_to_lines(shapes_layout_stats(layout), swatch=not args.output))
        case "json":
            output = json.dumps(shapes_layout_to_json(layout, grid.width, grid.height), indent=2)
        case "svg":
            output = shapes_layout_to_svg(layout, grid.width, grid.height)
        case _:
            output = "\n".join(
                f"{color.hex} {describe_shape(shape)}"
                for color, shapes in layout.items()
                for shape in shapes
            )

    if args.output:
        with open(args.output, "w") as file:
            file.write(output)
        logger.info(f"Wrote {args.format} output to {args.output}")
    else:
        print(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
