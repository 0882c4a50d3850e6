import sys

from termglyph.errors import InputValidationError

# Printable ASCII, space through tilde
DEFAULT_RANGE = "32-126"


def parse_range(text: str) -> tuple[int, int]:
    """Parse an inclusive code point range written as "start-end"."""
    start_text, sep, end_text = text.strip().partition("-")
    if not sep:
        raise InputValidationError(f"Character range must look like START-END, got {text!r}")
    try:
        start, end = int(start_text), int(end_text)
    except ValueError:
        raise InputValidationError(f"Character range bounds must be integers, got {text!r}") from None
    if start > end:
        raise InputValidationError(f"Character range start {start} is after end {end}")
    if end > sys.maxunicode:
        raise InputValidationError(f"Character range end {end} is beyond U+{sys.maxunicode:X}")
    return start, end
