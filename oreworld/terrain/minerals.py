"""Mineral definitions — the parameters that drive terrain generation.

A mineral pairs a rarity threshold with the cell code it stamps and the
comparator used to test noise samples against that threshold.  Minerals
are consumed once, during generation; they never exist at runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np
from numpy.typing import NDArray

from oreworld.world.cell import CellCode

# Per-mineral noise-space offsets (x, y scale factors applied to rarity)
_OFFSET_X_SCALE = 10000.000001
_OFFSET_Y_SCALE = 1000.000001

DEFAULT_BAND = 3.0


class Comparator(Enum):
    """How a noise sample is tested against a mineral's rarity."""

    AT_MOST = "at_most"
    AT_LEAST = "at_least"
    BAND = "band"

    @classmethod
    def parse(cls, value: str | Comparator) -> Comparator:
        """Resolve a comparator from its value (``"at_most"``) or symbol.

        Raises:
            ValueError: If ``value`` names no known comparator.
        """
        if isinstance(value, Comparator):
            return value
        aliases = {"<=": cls.AT_MOST, ">=": cls.AT_LEAST}
        key = value.strip().lower()
        if key in aliases:
            return aliases[key]
        try:
            return cls(key)
        except ValueError:
            msg = f"unknown comparator: {value!r}"
            raise ValueError(msg) from None


@dataclass(frozen=True)
class Mineral:
    """A generation parameter for one resource type.

    Attributes:
        name: Human-readable label used in logs.
        rarity: Threshold the scaled noise sample is compared against.
        code: Cell code written where the comparison passes.
        comparator: Which comparison to apply.
        band: Half-width of the empty outline for ``Comparator.BAND``.
    """

    name: str
    rarity: float
    code: CellCode
    comparator: Comparator = Comparator.AT_MOST
    band: float = DEFAULT_BAND

    def noise_offset(self) -> tuple[float, float]:
        """Return the noise-space offset that decorrelates this mineral."""
        return (
            _OFFSET_X_SCALE * (self.rarity - 100 * 100),
            _OFFSET_Y_SCALE * (100 * self.rarity - 100),
        )

    def classify(self, samples: NDArray[np.float64]) -> NDArray[np.int16]:
        """Map noise samples to the code to write, or ``-1`` to leave as is.

        Args:
            samples: Scaled noise values, one per grid cell.

        Returns:
            Array of the same shape holding a cell code or ``-1``.
        """
        out = np.full(samples.shape, -1, dtype=np.int16)
        if self.comparator is Comparator.AT_MOST:
            out[samples <= self.rarity] = self.code
        elif self.comparator is Comparator.AT_LEAST:
            out[samples >= self.rarity] = self.code
        else:
            outline = np.abs(samples - self.rarity) < self.band
            out[samples >= self.rarity] = self.code
            out[outline] = CellCode.EMPTY
        return out


# Layered preset: applied in this order, later minerals win.
LAYERED_PRESET: tuple[Mineral, ...] = (
    Mineral("water", 140, CellCode.WATER),
    Mineral("rock", 186, CellCode.ROCK),
    Mineral("iron", 50, CellCode.IRON),
    Mineral("gold", 25, CellCode.GOLD),
)

# Tint preset: deposits above the threshold with an empty outline.
TINT_PRESET: tuple[Mineral, ...] = (
    Mineral("iron", 166, CellCode.IRON, Comparator.BAND),
    Mineral("gold", 151, CellCode.GOLD, Comparator.BAND),
    Mineral("water", 171, CellCode.WATER, Comparator.BAND),
    Mineral("rock", 186, CellCode.ROCK, Comparator.BAND),
)

PRESETS: dict[str, tuple[Mineral, ...]] = {
    "layered": LAYERED_PRESET,
    "tint": TINT_PRESET,
}

# Noise-space distance between neighbouring cells used with each preset
PRESET_NOISE_SCALES: dict[str, float] = {
    "layered": 0.035,
    "tint": 0.02,
}
