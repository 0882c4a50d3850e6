import argparse
import logging
import sys
import time
from pathlib import Path

from termglyph.charsets import DEFAULT_RANGE, parse_range
from termglyph.converter import image_to_ascii, load_image
from termglyph.errors import TermglyphError
from termglyph.glyphs import GlyphRasterizer, build_brightness_table
from termglyph.sampler import BrightnessEngine
from termglyph.terminal import get_terminal_width

logger = logging.getLogger(__name__)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render an image as character art sized to the terminal")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument(
        "-r",
        "--range",
        default=DEFAULT_RANGE,
        help=f"Unicode code point range to draw glyphs from, as START-END (default: {DEFAULT_RANGE})",
    )
    parser.add_argument(
        "-s", "--scale", type=float, default=1.0, help="Fraction of the terminal width to use (default: 1.0)"
    )
    parser.add_argument(
        "-w", "--width", type=int, default=None, help="Terminal width in columns (default: query the terminal)"
    )
    parser.add_argument("-f", "--font", default=None, help="TrueType/OpenType font to measure glyphs with")
    parser.add_argument("-c", "--colour", action="store_true", default=False, help="Enable truecolor ANSI output")
    parser.add_argument("-i", "--invert", action="store_true", default=False, help="Invert brightness")
    parser.add_argument(
        "-x", "--stretch", action="store_true", default=False, help="Stretch brightness to the full 0-255 range"
    )
    parser.add_argument("-d", "--debug", action="store_true", default=False, help="Log debug output to stderr")
    return parser


def run(args: argparse.Namespace) -> str:
    start, end = parse_range(args.range)
    width = args.width if args.width is not None else get_terminal_width()

    started = time.perf_counter()
    image = load_image(Path(args.image))
    logger.debug(
        "Loaded %s (%dx%d, %s) in %.3fs",
        args.image,
        image.width,
        image.height,
        image.mode,
        time.perf_counter() - started,
    )

    started = time.perf_counter()
    rasterizer = GlyphRasterizer(args.font)
    table = build_brightness_table(start, end, rasterizer)
    logger.debug(
        "Measured %d glyphs with font %s in %.3fs", len(table), rasterizer.font_name, time.perf_counter() - started
    )

    started = time.perf_counter()
    engine = BrightnessEngine(table, invert=args.invert, stretch=args.stretch)
    text = image_to_ascii(image, engine, terminal_width=width, scale=args.scale, colour=args.colour)
    logger.debug("Rendered in %.3fs", time.perf_counter() - started)
    return text


def main(argv: list[str] | None = None) -> None:
    args = _parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        text = run(args)
    except TermglyphError as e:
        print(e, file=sys.stderr)
        sys.exit(1)
    print(text)
