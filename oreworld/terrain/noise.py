"""Coherent value noise compatible with the p5.js ``noise()`` function.

A lattice of 4096 random values is sampled with cosine interpolation
and summed over several octaves.  Each octave doubles the frequency and
multiplies the amplitude by ``falloff`` (the first octave has amplitude
0.5).  With ``octaves=2, falloff=1.1`` samples fall in ``[0, 1.05]``.

Sampling is vectorised: pass whole coordinate arrays and get an array
of the broadcast shape back.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

if TYPE_CHECKING:
    from numpy.random import Generator

_YWRAP_BITS = 4
_YWRAP = 1 << _YWRAP_BITS
_LATTICE_MASK = 4095  # lattice holds _LATTICE_MASK + 1 values


def _scaled_cosine(t: NDArray[np.float64]) -> NDArray[np.float64]:
    return 0.5 * (1.0 - np.cos(t * np.pi))


@dataclass
class ValueNoise:
    """Multi-octave 2D value noise over a fixed random lattice.

    Attributes:
        lattice: ``4096`` random values in ``[0, 1)``.
        octaves: Number of octaves summed per sample.
        falloff: Amplitude multiplier applied between octaves.
    """

    lattice: NDArray[np.float64]
    octaves: int = 4
    falloff: float = 0.5

    @classmethod
    def from_rng(
        cls,
        rng: Generator,
        *,
        octaves: int = 4,
        falloff: float = 0.5,
    ) -> ValueNoise:
        """Build a noise function whose lattice is drawn from ``rng``.

        Args:
            rng: Seeded random generator.
            octaves: Number of octaves summed per sample.
            falloff: Amplitude multiplier applied between octaves.
        """
        if octaves < 1:
            msg = f"octaves must be >= 1, got {octaves}"
            raise ValueError(msg)
        return cls(
            lattice=rng.random(_LATTICE_MASK + 1),
            octaves=octaves,
            falloff=falloff,
        )

    def sample(self, x: ArrayLike, y: ArrayLike) -> NDArray[np.float64]:
        """Sample the noise at ``(x, y)``.

        Negative coordinates are mirrored into the positive quadrant.

        Args:
            x: Horizontal coordinate(s).
            y: Vertical coordinate(s); broadcast against ``x``.

        Returns:
            Noise values with the broadcast shape of ``x`` and ``y``.
        """
        xs, ys = np.broadcast_arrays(
            np.abs(np.asarray(x, dtype=np.float64)),
            np.abs(np.asarray(y, dtype=np.float64)),
        )
        xi = np.floor(xs).astype(np.int64)
        yi = np.floor(ys).astype(np.int64)
        xf = xs - xi
        yf = ys - yi

        lattice = self.lattice
        result = np.zeros(xs.shape, dtype=np.float64)
        amplitude = 0.5
        for _ in range(self.octaves):
            offset = xi + (yi << _YWRAP_BITS)
            rxf = _scaled_cosine(xf)
            ryf = _scaled_cosine(yf)

            n1 = lattice[offset & _LATTICE_MASK]
            n1 = n1 + rxf * (lattice[(offset + 1) & _LATTICE_MASK] - n1)
            n2 = lattice[(offset + _YWRAP) & _LATTICE_MASK]
            n2 = n2 + rxf * (lattice[(offset + _YWRAP + 1) & _LATTICE_MASK] - n2)
            n1 = n1 + ryf * (n2 - n1)

            result += n1 * amplitude
            amplitude *= self.falloff

            # Next octave: double the frequency, carrying overflow
            xi = xi << 1
            yi = yi << 1
            xf = xf * 2.0
            yf = yf * 2.0
            x_carry = xf >= 1.0
            y_carry = yf >= 1.0
            xi = xi + x_carry
            yi = yi + y_carry
            xf = np.where(x_carry, xf - 1.0, xf)
            yf = np.where(y_carry, yf - 1.0, yf)

        return result

    def __call__(self, x: float, y: float) -> float:
        """Sample a single point and return it as a float."""
        return float(self.sample(x, y))
