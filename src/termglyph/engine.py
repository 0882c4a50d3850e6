from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass
class CellGrid:
    chars: list[str]  # one character per cell, row-major
    columns: int
    colours: np.ndarray | None = None  # (cells, 3) uint8, or None
