import argparse
import logging
import sys
from pathlib import Path

from pixansi.config import DEFAULT_GLYPH, RenderConfig
from pixansi.pixels import ImageDecodeError, load_pixels
from pixansi.render import render

OUTPUT_NAME = "output.ansi"
LOGGER_NAME = "pixansi"

log = logging.getLogger(__name__)


def _glyph(value: str) -> str:
    if not value:
        raise argparse.ArgumentTypeError("pixel text must not be empty")
    return value


def write_output(text: str, output_dir: str | Path) -> Path:
    """Write rendered text to ``output_dir``/output.ansi, byte-identical to the console copy."""
    path = Path(output_dir) / OUTPUT_NAME
    log.debug("Writing %d characters to %s", len(text), path)
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write(text)
    return path


def write_console(text: str) -> None:
    """Write rendered text to stdout as UTF-8 bytes, bypassing newline translation."""
    sys.stdout.flush()
    sys.stdout.buffer.write(text.encode("utf-8"))
    sys.stdout.buffer.flush()


def configure_logging(verbose: bool = False) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    # One handler, bound to whatever sys.stderr is right now
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
    logger.addHandler(handler)
    return logger


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Preview an image in the terminal with truecolor ANSI text")
    parser.add_argument("-i", "--input-image", required=True, help="Path to input image")
    parser.add_argument(
        "-o", "--output-path", default="./", help=f"Directory that receives {OUTPUT_NAME} (default: ./)"
    )
    parser.add_argument(
        "--high-res",
        action="store_true",
        default=False,
        help="Pack two pixel rows into each line with half-block characters (ignores --pixel-ascii)",
    )
    parser.add_argument(
        "-p",
        "--pixel-ascii",
        type=_glyph,
        default=DEFAULT_GLYPH,
        help=f"Text drawn for each opaque pixel (default: {DEFAULT_GLYPH})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug output to stderr")
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    try:
        grid = load_pixels(args.input_image)
    except ImageDecodeError as e:
        print(e, file=sys.stderr)
        sys.exit(1)

    config = RenderConfig(glyph=args.pixel_ascii, high_res=args.high_res)
    text = render(grid, config)
    write_console(text)

    try:
        write_output(text, args.output_path)
    except OSError as e:
        print(f"Could not write {OUTPUT_NAME}: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
