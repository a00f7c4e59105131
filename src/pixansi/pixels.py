import logging
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

log = logging.getLogger(__name__)

OPAQUE = 255

# Greyscale modes holding 16-bit sample values; convert("RGBA") would clip them at 255
WIDE_GREY_MODES = ("I", "I;16", "I;16L", "I;16B", "I;16N", "F")


class ImageDecodeError(ValueError):
    pass


def _scale_wide_grey(image: Image.Image) -> np.ndarray:
    """Scale 16-bit greyscale samples down to 8 bits and add full alpha."""
    values = np.asarray(image, dtype=np.float64) / 257
    grey = np.clip(np.rint(values), 0, 255).astype(np.uint8)
    grid = np.empty(grey.shape + (4,), dtype=np.uint8)
    grid[..., :3] = grey[..., np.newaxis]
    grid[..., 3] = OPAQUE
    return grid


def from_image(image: Image.Image) -> np.ndarray:
    """Convert a Pillow image of any mode to a (height, width, 4) uint8 RGBA grid."""
    if image.mode in WIDE_GREY_MODES:
        return _scale_wide_grey(image)
    return np.asarray(image.convert("RGBA"), dtype=np.uint8)


def load_pixels(path: str | Path) -> np.ndarray:
    path = Path(path)
    try:
        with Image.open(path) as image:
            log.debug("Decoding %s (%s, %dx%d)", path, image.mode, image.width, image.height)
            return from_image(image)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise ImageDecodeError(f"Could not decode image {path}: {e}") from e


def dimensions(grid: np.ndarray) -> tuple[int, int]:
    """Return (width, height) of a pixel grid."""
    return grid.shape[1], grid.shape[0]


def in_bounds(x: int, y: int, width: int, height: int) -> bool:
    return 0 <= x < width and 0 <= y < height


def is_opaque(pixel) -> bool:
    # Anything short of full alpha counts as fully transparent; there is no blending
    return int(pixel[3]) == OPAQUE
