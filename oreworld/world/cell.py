"""Cell codes — the terrain type stored at each grid position.

The grid itself stores plain integers so that it can live in a flat
NumPy array; ``CellCode`` gives those integers names.
"""

from __future__ import annotations

from enum import IntEnum


class CellCode(IntEnum):
    """Terrain/resource type occupying one grid position."""

    EMPTY = 0
    IRON = 1
    GOLD = 2
    WATER = 3
    ROCK = 4

    @classmethod
    def parse(cls, value: int | str | CellCode) -> CellCode:
        """Resolve a code from its integer value or (case-insensitive) name.

        Raises:
            ValueError: If ``value`` names no known cell code.
        """
        if isinstance(value, str):
            try:
                return cls[value.upper()]
            except KeyError:
                msg = f"unknown cell code name: {value!r}"
                raise ValueError(msg) from None
        return cls(value)


VALID_CODES = frozenset(int(code) for code in CellCode)
