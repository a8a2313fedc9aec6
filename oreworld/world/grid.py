"""GridStore — the fixed-size terrain grid.

Cell codes live in a single flat ``uint8`` array indexed row-major
(``y * width + x``).  Two-dimensional access goes through
:meth:`GridStore.as_array`, which returns a reshaped *view* so writes
through it land in the same storage.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from oreworld.world.cell import VALID_CODES, CellCode


@dataclass
class GridStore:
    """A 2D grid of cell codes backed by a flat array.

    Attributes:
        width: Number of columns in the grid.
        height: Number of rows in the grid.
        cells: Flat array of ``width * height`` cell codes.
    """

    width: int
    height: int
    cells: NDArray[np.uint8] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Initialise every cell to EMPTY."""
        if self.width <= 0 or self.height <= 0:
            msg = f"grid size must be positive, got {self.width}x{self.height}"
            raise ValueError(msg)
        self.cells = np.zeros(self.width * self.height, dtype=np.uint8)

    def in_bounds(self, x: int, y: int) -> bool:
        """Return True if ``(x, y)`` lies inside the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def index(self, x: int, y: int) -> int:
        """Return the flat index of ``(x, y)``.

        Raises:
            IndexError: If coordinates are out of bounds.
        """
        if not self.in_bounds(x, y):
            msg = f"({x}, {y}) out of bounds for {self.width}x{self.height}"
            raise IndexError(msg)
        return y * self.width + x

    def get(self, x: int, y: int) -> CellCode:
        """Return the cell code at ``(x, y)``.

        Raises:
            IndexError: If coordinates are out of bounds.
        """
        return CellCode(int(self.cells[self.index(x, y)]))

    def set(self, x: int, y: int, code: int) -> None:
        """Store ``code`` at ``(x, y)``, replacing whatever was there.

        Raises:
            IndexError: If coordinates are out of bounds.
            ValueError: If ``code`` is not a known cell code.
        """
        if int(code) not in VALID_CODES:
            msg = f"invalid cell code: {code!r}"
            raise ValueError(msg)
        self.cells[self.index(x, y)] = int(code)

    def is_empty(self, x: int, y: int) -> bool:
        """Return True if ``(x, y)`` is inside the grid and EMPTY."""
        if not self.in_bounds(x, y):
            return False
        return self.cells[y * self.width + x] == CellCode.EMPTY

    def as_array(self) -> NDArray[np.uint8]:
        """Return a ``(height, width)`` view of the cell storage."""
        return self.cells.reshape(self.height, self.width)

    def fill(self, code: int = CellCode.EMPTY) -> None:
        """Set every cell to ``code``."""
        if int(code) not in VALID_CODES:
            msg = f"invalid cell code: {code!r}"
            raise ValueError(msg)
        self.cells.fill(int(code))

    def clear_area(self, cx: int, cy: int, radius: int) -> None:
        """Reset the square of cells around ``(cx, cy)`` to EMPTY.

        Cells outside the grid are skipped.

        Args:
            cx: Centre column.
            cy: Centre row.
            radius: How many cells outward to clear.
        """
        x0, x1 = max(0, cx - radius), min(self.width, cx + radius + 1)
        y0, y1 = max(0, cy - radius), min(self.height, cy + radius + 1)
        if x0 >= x1 or y0 >= y1:
            return
        self.as_array()[y0:y1, x0:x1] = CellCode.EMPTY

    def counts(self) -> dict[CellCode, int]:
        """Return how many cells hold each code."""
        tally = np.bincount(self.cells, minlength=len(CellCode))
        return {code: int(tally[code]) for code in CellCode}
