"""Renderer — blit the terrain grid into a canvas.

Each cell code maps to a fixed RGBA colour; every cell becomes a solid
``density x density`` block.  No blending.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from oreworld.world.cell import CellCode

if TYPE_CHECKING:
    from oreworld.render.canvas import RGBA, Canvas
    from oreworld.world.grid import GridStore

# Colour palette
BACKGROUND: RGBA = (20, 16, 28, 255)
UNIT_CORE: RGBA = (255, 255, 255, 255)
UNIT_ARMS: RGBA = (35, 206, 235, 255)

PALETTE: dict[CellCode, RGBA] = {
    CellCode.EMPTY: (0, 0, 0, 255),
    CellCode.IRON: (220, 210, 180, 255),
    CellCode.GOLD: (220, 180, 30, 255),
    CellCode.WATER: (30, 50, 210, 255),
    CellCode.ROCK: (98, 40, 30, 255),
}


class Renderer:
    """Maps grid cell codes to colours and draws them into a canvas."""

    def __init__(self, palette: dict[CellCode, RGBA] | None = None) -> None:
        self.palette = dict(PALETTE if palette is None else palette)
        self._lut = np.array(
            [self.palette[code] for code in CellCode],
            dtype=np.float64,
        )

    def colour_of(self, code: int) -> RGBA:
        """Return the colour used for ``code``."""
        return self.palette[CellCode(code)]

    def draw_grid(self, grid: GridStore, canvas: Canvas, light: int = 255) -> None:
        """Draw every grid cell into ``canvas``.

        Args:
            grid: Terrain to draw.
            canvas: Target buffer; must match the grid's logical size.
            light: Brightness applied to all channels (255 = unchanged).

        Raises:
            ValueError: If the grid and canvas sizes differ.
        """
        if (grid.width, grid.height) != (canvas.width, canvas.height):
            msg = (
                f"grid {grid.width}x{grid.height} does not match "
                f"canvas {canvas.width}x{canvas.height}"
            )
            raise ValueError(msg)

        colours = (self._lut[grid.as_array()] * (light / 255)).astype(np.uint8)
        d = canvas.density
        if d > 1:
            colours = np.repeat(np.repeat(colours, d, axis=0), d, axis=1)
        canvas.pixels[:, :] = colours
