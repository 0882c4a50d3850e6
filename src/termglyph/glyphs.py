import logging
import sys
import unicodedata
from collections.abc import Callable
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from termglyph.errors import DecodeError, InputValidationError
from termglyph.model import BrightnessTable

logger = logging.getLogger(__name__)

# Pixel size glyphs are rasterized at when measuring brightness
REFERENCE_SIZE = 24


class GlyphRasterizer:
    """Renders single characters to ink bitmaps using a Pillow font."""

    def __init__(self, font_path: str | Path | None = None, pixel_size: int = REFERENCE_SIZE):
        self.pixel_size = pixel_size
        if font_path is None:
            self.font = ImageFont.load_default(size=pixel_size)
            self.font_name = "default"
            return

        font_path = Path(font_path)
        if not font_path.exists():
            raise InputValidationError(f"Font file not found: {font_path}")
        try:
            self.font = ImageFont.truetype(str(font_path), pixel_size)
        except OSError as e:
            raise DecodeError(f"Couldn't load font {font_path}: {e}") from e
        self.font_name = font_path.name

    def __call__(self, char: str) -> np.ndarray:
        """Rasterize a character cropped to its ink bounding box.

        Returns a uint8 array of shape (h, w); glyphs with an empty bounding
        box (most whitespace) give an array with no samples.
        """
        left, top, right, bottom = self.font.getbbox(char)
        if right <= left or bottom <= top:
            return np.zeros((0, 0), dtype=np.uint8)
        img = Image.new("L", (int(right - left), int(bottom - top)), 0)
        draw = ImageDraw.Draw(img)
        draw.text((-left, -top), char, fill=255, font=self.font)
        return np.asarray(img, dtype=np.uint8)


def _printable_char(codepoint: int) -> str | None:
    """Return the character for a code point, or None for invalid or control code points."""
    if codepoint > sys.maxunicode:
        return None
    char = chr(codepoint)
    if unicodedata.category(char) in ("Cc", "Cs"):
        return None
    return char


def build_brightness_table(
    start: int,
    end: int,
    rasterize: Callable[[str], np.ndarray],
) -> BrightnessTable:
    """Measure the mean ink brightness of every visible glyph in [start, end]."""
    if start < 0 or start > end:
        raise InputValidationError(f"Invalid code point range {start}-{end}")

    entries: list[tuple[str, int]] = []
    for codepoint in range(start, end + 1):
        char = _printable_char(codepoint)
        if char is None:
            continue
        bitmap = rasterize(char)
        if bitmap.size == 0:
            logger.debug("Skipping U+%04X: glyph has no pixels", codepoint)
            continue
        entries.append((char, int(bitmap.mean())))

    if not entries:
        logger.warning("No visible glyphs in range %d-%d; output will be blank", start, end)
    return BrightnessTable(entries=tuple(entries))
