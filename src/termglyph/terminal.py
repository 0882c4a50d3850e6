import os

from termglyph.errors import TerminalUnavailableError


def get_terminal_width() -> int:
    """Return the number of columns of the terminal attached to stdout."""
    try:
        size = os.get_terminal_size()
    except OSError as e:
        raise TerminalUnavailableError("Could not determine terminal width; pass --width") from e
    if size.columns < 1:
        raise TerminalUnavailableError("Terminal reports zero columns; pass --width")
    return size.columns
