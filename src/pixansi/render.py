import io
import logging
from typing import TextIO

import numpy as np

from pixansi import halfblock, runs
from pixansi.config import RenderConfig
from pixansi.pixels import dimensions

log = logging.getLogger(__name__)


def row_count(height: int, config: RenderConfig) -> int:
    """Number of output lines; high-res mode folds two source rows into one."""
    return height // 2 if config.high_res else height


def render_to(grid: np.ndarray, config: RenderConfig, out: TextIO) -> None:
    width, height = dimensions(grid)
    rows = row_count(height, config)
    log.debug("Rendering %dx%d grid as %d rows (high_res=%s)", width, height, rows, config.high_res)
    for y in range(rows):
        if config.high_res:
            halfblock.encode_row(grid, y, out)
        else:
            runs.encode_row(grid[y], config, out)
        out.write("\n")


def render(grid: np.ndarray, config: RenderConfig | None = None) -> str:
    """Render a (height, width, 4) RGBA grid to ANSI-coloured text."""
    if config is None:
        config = RenderConfig()
    buffer = io.StringIO()
    render_to(grid, config, buffer)
    return buffer.getvalue()
