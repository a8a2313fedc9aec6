"""TerrainGenerator — stamp mineral deposits into the grid from noise.

For every mineral a fresh noise lattice is drawn, sampled at a fixed
spatial scale across the whole grid (offset per mineral so patterns
don't line up), and compared against the mineral's rarity.  Passing
cells are overwritten with the mineral's code.

Minerals are applied in order and each one overwrites whatever earlier
minerals wrote: layering is last-write-wins.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
import structlog
from numpy.typing import NDArray

from oreworld.terrain.noise import ValueNoise

if TYPE_CHECKING:
    from numpy.random import Generator

    from oreworld.terrain.minerals import Mineral
    from oreworld.world.grid import GridStore

logger = structlog.get_logger()


@dataclass
class TerrainGenerator:
    """Noise-driven mineral placement.

    Attributes:
        noise_scale: Noise-space distance between neighbouring cells.
        noise_level: Multiplier mapping raw noise into rarity units.
        octaves: Octaves summed per noise sample.
        falloff: Amplitude falloff between octaves.
        seed_by_rarity: If True, each mineral's lattice is seeded from
            its rarity instead of the shared generator, so a mineral's
            pattern is fixed regardless of application order.
    """

    noise_scale: float = 0.035
    noise_level: float = 255.0
    octaves: int = 2
    falloff: float = 1.1
    seed_by_rarity: bool = False

    def _noise_for(self, mineral: Mineral, rng: Generator) -> ValueNoise:
        source = rng
        if self.seed_by_rarity:
            source = np.random.default_rng(int(mineral.rarity))
        return ValueNoise.from_rng(source, octaves=self.octaves, falloff=self.falloff)

    def sample(
        self,
        mineral: Mineral,
        width: int,
        height: int,
        rng: Generator,
    ) -> NDArray[np.float64]:
        """Return scaled noise samples for every cell, shape ``(height, width)``.

        Args:
            mineral: The mineral whose offset and lattice to use.
            width: Grid columns.
            height: Grid rows.
            rng: Seeded random generator.
        """
        noise = self._noise_for(mineral, rng)
        ox, oy = mineral.noise_offset()
        nx = self.noise_scale * np.arange(width, dtype=np.float64) + ox
        ny = self.noise_scale * np.arange(height, dtype=np.float64) + oy
        return self.noise_level * noise.sample(nx[np.newaxis, :], ny[:, np.newaxis])

    def stamp(self, grid: GridStore, mineral: Mineral, rng: Generator) -> int:
        """Write ``mineral`` into ``grid`` wherever its comparison passes.

        Args:
            grid: The grid to modify in-place.
            mineral: Which mineral to place.
            rng: Seeded random generator.

        Returns:
            Number of cells written.
        """
        samples = self.sample(mineral, grid.width, grid.height, rng)
        codes = mineral.classify(samples)
        hit = codes >= 0
        cells = grid.as_array()
        cells[hit] = codes[hit]
        written = int(np.count_nonzero(hit))
        logger.info(
            "mineral_stamped",
            mineral=mineral.name,
            rarity=mineral.rarity,
            comparator=mineral.comparator.value,
            cells=written,
        )
        return written

    def generate(
        self,
        grid: GridStore,
        minerals: Iterable[Mineral],
        rng: Generator,
    ) -> None:
        """Apply each mineral in order; later minerals overwrite earlier ones.

        Args:
            grid: The grid to populate.
            minerals: Minerals in application order.
            rng: Seeded random generator.
        """
        for mineral in minerals:
            self.stamp(grid, mineral, rng)
        logger.info(
            "terrain_generated",
            width=grid.width,
            height=grid.height,
            counts={code.name.lower(): n for code, n in grid.counts().items()},
        )
