import math
from dataclasses import dataclass, field

# Substituted for a block when the table has nothing to offer
BLANK = " "


@dataclass(frozen=True)
class BrightnessTable:
    """Glyphs paired with their rendered brightness (0-255), in code point order."""

    entries: tuple[tuple[str, int], ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def characters(self) -> str:
        return "".join(char for char, _ in self.entries)

    def find_nearest(self, brightness: float) -> str | None:
        """Return the glyph closest in brightness, or None if the table is empty.

        Ties go to the earliest entry, i.e. the lowest code point.
        """
        best_char = None
        best_dist = math.inf
        for char, char_brightness in self.entries:
            dist = abs(char_brightness - brightness)
            if dist < best_dist:
                best_dist = dist
                best_char = char
        return best_char
