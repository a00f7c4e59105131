import numpy as np
import pytest
from PIL import Image

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)
CLEAR = (0, 0, 0, 0)


def make_grid(rows) -> np.ndarray:
    """Build a (height, width, 4) uint8 grid from nested lists of RGBA tuples."""
    return np.array(rows, dtype=np.uint8).reshape(len(rows), len(rows[0]) if rows else 0, 4)


@pytest.fixture
def png_path(tmp_path):
    """A 3x2 RGBA PNG: opaque red/green/blue on top, transparent row underneath."""
    img = Image.new("RGBA", (3, 2), CLEAR)
    img.putpixel((0, 0), RED)
    img.putpixel((1, 0), GREEN)
    img.putpixel((2, 0), BLUE)
    path = tmp_path / "sample.png"
    img.save(path)
    return path
