import logging

import numpy as np
from PIL import Image

from termglyph.blocks import extract_blocks
from termglyph.engine import CellGrid
from termglyph.grid import GridLayout
from termglyph.model import BLANK, BrightnessTable
from termglyph.sampling import block_brightness, block_colour, invert, stretch_contrast

logger = logging.getLogger(__name__)


class BrightnessEngine:
    """Rendering engine that picks, per block, the glyph closest in average brightness."""

    def __init__(self, table: BrightnessTable, invert: bool = False, stretch: bool = False):
        self.table = table
        self.invert = invert
        self.stretch = stretch

    def luma(self, image: Image.Image) -> np.ndarray:
        """Greyscale samples of the image with invert and stretch applied."""
        gray = np.asarray(image.convert("L"))
        if self.invert:
            gray = invert(gray)
        if self.stretch:
            gray = stretch_contrast(gray)
        return gray

    def render(self, image: Image.Image, layout: GridLayout, colour: bool = False) -> CellGrid:
        chars = []
        for block in extract_blocks(self.luma(image), layout):
            char = self.table.find_nearest(block_brightness(block))
            chars.append(BLANK if char is None else char)

        colours = None
        if colour:
            rgb = np.asarray(image.convert("RGB"))
            colours = np.array([block_colour(block) for block in extract_blocks(rgb, layout)], dtype=np.uint8)

        logger.debug("Rendered %d cells (%d distinct glyphs)", len(chars), len(set(chars)))
        return CellGrid(chars=chars, columns=layout.chars_width, colours=colours)
