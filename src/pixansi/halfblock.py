from typing import TextIO

import numpy as np

from pixansi.colour import background, foreground, reset
from pixansi.pixels import dimensions, in_bounds, is_opaque

UPPER_HALF = "▀"
LOWER_HALF = "▄"

Cell = tuple[int, int, int] | None


def cell_at(grid: np.ndarray, x: int, y: int) -> Cell:
    """Opaque RGB at (x, y), or None when out of bounds or not fully opaque."""
    width, height = dimensions(grid)
    if not in_bounds(x, y, width, height):
        return None
    pixel = grid[y, x]
    if not is_opaque(pixel):
        return None
    return int(pixel[0]), int(pixel[1]), int(pixel[2])


def encode_pair(top: Cell, bottom: Cell) -> str:
    if top is not None:
        if bottom is not None:
            return foreground(*top) + background(*bottom) + UPPER_HALF + reset()
        return foreground(*top) + UPPER_HALF + reset()
    if bottom is not None:
        # No background is set, so the terminal default shows through the top half
        return foreground(*bottom) + LOWER_HALF + reset()
    return " "


def encode_row(grid: np.ndarray, y: int, out: TextIO | None = None) -> str | None:
    """Encode output row ``y`` from source rows 2y (top) and 2y + 1 (bottom)."""
    width, _ = dimensions(grid)
    cells = (encode_pair(cell_at(grid, x, 2 * y), cell_at(grid, x, 2 * y + 1)) for x in range(width))
    if out is None:
        return "".join(cells)
    for cell in cells:
        out.write(cell)
    return None
