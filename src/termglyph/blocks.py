from collections.abc import Iterator

import numpy as np

from termglyph.errors import DimensionMismatchError
from termglyph.grid import GridLayout


def block_origins(layout: GridLayout) -> Iterator[tuple[int, int, int, int]]:
    """Yield (x, y, width, height) for every cell, row by row."""
    y = 0
    for block_height in layout.row_heights:
        x = 0
        for block_width in layout.column_widths:
            yield x, y, block_width, block_height
            x += block_width
        y += block_height


def extract_blocks(pixels: np.ndarray, layout: GridLayout) -> list[np.ndarray]:
    """Cut a (H, W) or (H, W, C) pixel array into one copy per grid cell, row-major."""
    width, height = layout.image_size
    if pixels.shape[:2] != (height, width):
        raise DimensionMismatchError(
            f"Pixel buffer is {pixels.shape[1]}x{pixels.shape[0]}, layout expects {width}x{height}"
        )
    return [pixels[y : y + h, x : x + w].copy() for x, y, w, h in block_origins(layout)]
