"""GameEngine — world state and the per-frame loop.

Owns the grid, the units, the canvas and the RNG.  Terrain is generated
once at construction; after that every frame runs:

1. Update units (random walk or queued keyboard commands)
2. Clear the canvas to the background colour
3. Redraw the full terrain grid
4. Draw every unit on top
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

import numpy as np
import structlog
from numpy.random import Generator

from oreworld.game.config import GameConfig
from oreworld.render.canvas import Canvas
from oreworld.render.renderer import Renderer
from oreworld.terrain.generator import TerrainGenerator
from oreworld.units.unit import Direction, Unit
from oreworld.world.grid import GridStore

logger = structlog.get_logger()


@dataclass
class GameEngine:
    """Drives the game forward frame by frame.

    Attributes:
        config: Loaded game configuration.
        grid: The terrain grid.
        canvas: The pixel buffer each frame is drawn into.
        renderer: Maps cell codes to colours.
        units: All units in the world.
        rng: Master seeded random generator.
        frame: Number of frames stepped so far.
    """

    config: GameConfig
    grid: GridStore = field(init=False)
    canvas: Canvas = field(init=False)
    renderer: Renderer = field(init=False, repr=False)
    units: list[Unit] = field(init=False, default_factory=list)
    rng: Generator = field(init=False, repr=False)
    frame: int = 0

    def __post_init__(self) -> None:
        """Build grid and canvas, generate terrain, spawn units."""
        cfg = self.config
        self.rng = np.random.default_rng(cfg.seed)
        self.grid = GridStore(width=cfg.width, height=cfg.height)
        self.canvas = Canvas(
            width=cfg.width,
            height=cfg.height,
            density=cfg.pixel_density,
        )
        self.renderer = Renderer()

        generator = TerrainGenerator(
            noise_scale=cfg.noise_scale,
            noise_level=cfg.noise_level,
            octaves=cfg.noise_octaves,
            falloff=cfg.noise_falloff,
            seed_by_rarity=cfg.seed_by_rarity,
        )
        generator.generate(self.grid, cfg.mineral_table(), self.rng)

        for spec in cfg.units:
            self.add_unit(spec.to_unit())

    def add_unit(self, unit: Unit) -> None:
        """Register a unit and clear the terrain around its spawn point.

        Args:
            unit: The unit to add.
        """
        self.grid.clear_area(unit.x, unit.y, self.config.spawn_clearance)
        self.units.append(unit)
        logger.info(
            "unit_spawned",
            race=unit.race,
            type=unit.type,
            position=unit.position,
            controller=unit.controller.value,
        )

    def step(self, commands: Iterable[Direction] = ()) -> None:
        """Advance every unit by one frame.

        Args:
            commands: Keyboard directions received this frame; applied to
                every keyboard-controlled unit.
        """
        commands = tuple(commands)
        for unit in self.units:
            unit.update(self.grid, self.rng, commands)
        self.frame += 1

    def render(self) -> Canvas:
        """Draw the current state into the canvas and return it."""
        self.canvas.clear(self.config.background)
        self.renderer.draw_grid(self.grid, self.canvas)
        for unit in self.units:
            unit.draw(self.canvas)
        return self.canvas

    def run(self, frames: int) -> None:
        """Step and render a fixed number of frames without a display.

        Args:
            frames: Number of frames to advance.
        """
        for _ in range(frames):
            self.step()
            self.render()
