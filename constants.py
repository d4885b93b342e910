"""
Global constants used throughout the project
"""
from typing import Final

# Solid pixel policy: fully opaque and not pure white
OPAQUE_ALPHA: Final[int] = 255
WHITE_RGB: Final[tuple[int, int, int]] = (255, 255, 255)

# 4-connectivity, in the order neighbors are recorded: left, right, up, down
TOWER_DELTAS: Final[tuple[tuple[int, int], ...]] = ((-1, 0), (1, 0), (0, -1), (0, 1))

# Terminal rendering
DEFAULT_CELL_WIDTH: Final[int] = 2
BACKGROUND_RGB: Final[tuple[int, int, int]] = (85, 85, 85)  # Grey (#555555) for empty cells

# Leftover points are marked inside a shape preview
POINT_MARKER: Final[str] = "·"

# Export
SVG_XMLNS: Final[str] = "http://www.w3.org/2000/svg"
