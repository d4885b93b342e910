"""
Image decoding.

Thin wrapper around Pillow: any failure to open or decode the file is left to
propagate unchanged to the caller.
"""

import logging
from pathlib import Path

import numpy as np
from PIL import Image

from .grid import RgbaGrid

logger = logging.getLogger(__name__)


def image_to_grid(image: Image.Image) -> RgbaGrid:
    """Convert an already opened Pillow image to an RGBA grid."""
    return RgbaGrid(np.array(image.convert("RGBA")))


def open_image(path: str | Path) -> RgbaGrid:
    """
    Decode the image at `path` into an RGBA grid.

    Raises:
        FileNotFoundError: the path does not exist.
        PIL.UnidentifiedImageError: the file is not a supported image.
        OSError: the image data is truncated or corrupt.
    """
    with Image.open(path) as image:
        grid = image_to_grid(image)
    logger.debug(f"Decoded {path}: {grid.width}x{grid.height}")
    return grid
