"""Canvas — an RGBA pixel buffer scaled by a pixel-density factor.

One logical pixel covers a ``density x density`` block of physical
pixels.  The buffer is row-major with shape
``(height * density, width * density, 4)``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

RGBA = tuple[int, int, int, int]


@dataclass
class Canvas:
    """A density-scaled RGBA pixel buffer.

    Attributes:
        width: Logical width in drawing units.
        height: Logical height in drawing units.
        density: Physical pixels per logical pixel along each axis.
        pixels: The ``uint8`` RGBA buffer.
    """

    width: int
    height: int
    density: int = 1
    pixels: NDArray[np.uint8] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Allocate a transparent-black buffer."""
        if self.density < 1:
            msg = f"pixel density must be >= 1, got {self.density}"
            raise ValueError(msg)
        self.pixels = np.zeros(
            (self.height * self.density, self.width * self.density, 4),
            dtype=np.uint8,
        )

    @property
    def size(self) -> tuple[int, int]:
        """Physical ``(width, height)`` of the buffer in pixels."""
        return self.width * self.density, self.height * self.density

    def clear(self, colour: RGBA) -> None:
        """Fill the whole buffer with ``colour``."""
        self.pixels[:, :] = colour

    def set_pixel(self, colour: RGBA, x: int, y: int, light: int = 255) -> None:
        """Write ``colour`` into the block for logical pixel ``(x, y)``.

        Every channel, alpha included, is scaled by ``light / 255``.
        Pixels outside the canvas are dropped.
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            return
        d = self.density
        scaled = [int(c * light / 255) for c in colour]
        self.pixels[y * d : (y + 1) * d, x * d : (x + 1) * d] = scaled

    def pixel(self, x: int, y: int) -> RGBA:
        """Return the colour at physical pixel ``(x, y)``."""
        r, g, b, a = (int(c) for c in self.pixels[y, x])
        return r, g, b, a

    def to_bytes(self) -> bytes:
        """Return the buffer as raw RGBA bytes."""
        return self.pixels.tobytes()
