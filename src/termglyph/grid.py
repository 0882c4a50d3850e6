import math
from dataclasses import dataclass

from termglyph.errors import InvalidDimensionsError

# Smallest block height (in pixels) worth giving its own character
MIN_BLOCK_SIZE = 10
# Terminal cells are roughly twice as tall as they are wide
CHAR_ASPECT = 2.0


@dataclass(frozen=True)
class GridLayout:
    column_widths: tuple[int, ...]
    row_heights: tuple[int, ...]

    @property
    def chars_width(self) -> int:
        return len(self.column_widths)

    @property
    def chars_height(self) -> int:
        return len(self.row_heights)

    @property
    def image_size(self) -> tuple[int, int]:
        """(width, height) of the image this layout tiles."""
        return sum(self.column_widths), sum(self.row_heights)


def split_evenly(total: int, parts: int) -> list[int]:
    """Split total pixels into parts, handing the remainder to the leading parts."""
    base, extra = divmod(total, parts)
    return [base + 1 if i < extra else base for i in range(parts)]


def max_chars_width(width: int, height: int, char_aspect: float = CHAR_ASPECT) -> int:
    """Most columns the image supports while keeping blocks at least MIN_BLOCK_SIZE tall."""
    min_block_width = MIN_BLOCK_SIZE / char_aspect
    min_block_height = MIN_BLOCK_SIZE
    return min(int(width / min_block_width), int(height / min_block_height))


def calculate_layout(
    width: int,
    height: int,
    scale: float,
    terminal_width: int,
    char_aspect: float = CHAR_ASPECT,
) -> GridLayout:
    """Work out how many pixels of the image go into each character column and row.

    The column count follows the terminal width (times scale), capped so that
    blocks never shrink below the minimum block size. The row count is then
    derived from the image aspect ratio, corrected for tall terminal cells.
    """
    if width < 1 or height < 1:
        raise InvalidDimensionsError(f"Image dimensions must be positive, got {width}x{height}")
    if terminal_width < 1:
        raise InvalidDimensionsError(f"Terminal width must be positive, got {terminal_width}")
    if not scale > 0:
        raise InvalidDimensionsError(f"Scale must be positive, got {scale}")
    if not char_aspect > 0:
        raise InvalidDimensionsError(f"Character aspect must be positive, got {char_aspect}")

    scale = min(scale, 1.0)
    cap = max_chars_width(width, height, char_aspect)
    requested = math.floor(terminal_width * scale + 0.5)
    chars_width = max(1, min(requested, terminal_width, cap))
    chars_height = math.ceil((height * chars_width / width) / char_aspect)

    if chars_width > width or chars_height > height:
        raise InvalidDimensionsError(
            f"Cannot fit a {chars_width}x{chars_height} grid into a {width}x{height} image"
        )

    return GridLayout(
        column_widths=tuple(split_evenly(width, chars_width)),
        row_heights=tuple(split_evenly(height, chars_height)),
    )
