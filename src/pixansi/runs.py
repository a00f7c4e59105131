from collections.abc import Iterator, Sequence
from typing import NamedTuple, TextIO

from pixansi.colour import foreground, reset
from pixansi.config import RenderConfig
from pixansi.pixels import is_opaque


class Run(NamedTuple):
    colour: tuple[int, int, int, int]
    length: int


def find_runs(row: Sequence) -> Iterator[Run]:
    """Split a row into maximal runs of pixels with identical RGBA.

    Pixels are compared on all four channels, so transparent pixels only merge
    when their RGB values match as well.
    """
    if len(row) == 0:
        return
    current = tuple(int(c) for c in row[0])
    length = 0
    for pixel in row:
        pixel = tuple(int(c) for c in pixel)
        if pixel == current:
            length += 1
        else:
            yield Run(current, length)
            current = pixel
            length = 1
    if length > 0:
        yield Run(current, length)


def encode_run(run: Run, config: RenderConfig) -> str:
    if run.length == 0:
        return ""
    if not is_opaque(run.colour):
        return config.blank * run.length
    r, g, b, _ = run.colour
    return foreground(r, g, b) + config.glyph * run.length + reset()


def encode_row(row: Sequence, config: RenderConfig, out: TextIO | None = None) -> str | None:
    """Encode one image row in standard mode.

    Writes each run to ``out`` when given, otherwise returns the row text.
    """
    if out is None:
        return "".join(encode_run(run, config) for run in find_runs(row))
    for run in find_runs(row):
        out.write(encode_run(run, config))
    return None
