import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from termglyph.engine import CellGrid
from termglyph.errors import DecodeError, InputValidationError
from termglyph.grid import CHAR_ASPECT, calculate_layout
from termglyph.sampler import BrightnessEngine

logger = logging.getLogger(__name__)

RESET = "\033[0m"


def load_image(path: str | Path) -> Image.Image:
    path = Path(path)
    if not path.exists():
        raise InputValidationError(f"File not found: {path}")
    try:
        image = Image.open(path)
        image.load()
    except (UnidentifiedImageError, OSError) as e:
        raise DecodeError(f"Couldn't load image {path}: {e}") from e
    return image


def format_units(grid: CellGrid) -> list[str]:
    """One printable unit per cell; each wrapped in a truecolor escape when colours are present."""
    if grid.colours is None:
        return list(grid.chars)
    units = []
    for char, (r, g, b) in zip(grid.chars, grid.colours):
        units.append(f"\033[38;2;{r};{g};{b}m{char}{RESET}")
    return units


def join_rows(units: list[str], columns: int) -> str:
    """Concatenate units, starting a new line after every full row of columns."""
    parts = []
    for i, unit in enumerate(units):
        if i > 0 and i % columns == 0:
            parts.append("\n")
        parts.append(unit)
    return "".join(parts)


def image_to_ascii(
    image: Image.Image | str | Path,
    engine: BrightnessEngine,
    terminal_width: int,
    scale: float = 1.0,
    colour: bool = False,
    char_aspect: float = CHAR_ASPECT,
) -> str:
    if not isinstance(image, Image.Image):
        image = load_image(image)

    layout = calculate_layout(image.width, image.height, scale, terminal_width, char_aspect)
    logger.debug(
        "Image %dx%d -> %dx%d characters (columns %s, rows %s)",
        image.width,
        image.height,
        layout.chars_width,
        layout.chars_height,
        layout.column_widths,
        layout.row_heights,
    )

    grid = engine.render(image, layout, colour=colour)
    return join_rows(format_units(grid), grid.columns)
