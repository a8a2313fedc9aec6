"""Unit -- a position on the grid with a race and a type.

Units move one cell at a time in the four cardinal directions.  A move
only succeeds when the target cell is EMPTY; anything else (terrain or
the edge of the grid) blocks it and the unit stays where it is.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

import structlog

from oreworld.render.renderer import UNIT_ARMS, UNIT_CORE

if TYPE_CHECKING:
    from numpy.random import Generator

    from oreworld.render.canvas import Canvas
    from oreworld.world.grid import GridStore

logger = structlog.get_logger()

# Plus-shaped marker: (dx, dy) arms around the core pixel
_MARKER_ARMS = ((0, 1), (1, 0), (0, -1), (-1, 0))


class Direction(Enum):
    """Cardinal movement directions in screen coordinates (y grows down)."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class Controller(Enum):
    """What drives a unit's movement each frame."""

    IDLE = "idle"
    WANDER = "wander"
    KEYBOARD = "keyboard"

    @classmethod
    def parse(cls, value: str | Controller) -> Controller:
        """Resolve a controller from its name.

        Raises:
            ValueError: If ``value`` names no known controller.
        """
        if isinstance(value, Controller):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError:
            msg = f"unknown controller: {value!r}"
            raise ValueError(msg) from None


_DIRECTIONS = tuple(Direction)


@dataclass
class Unit:
    """A single unit.

    Attributes:
        x: Current column.
        y: Current row.
        race: Race label (e.g. ``"Human"``).
        type: Role label (e.g. ``"Warrior"``).
        controller: What drives this unit's movement.
    """

    x: int
    y: int
    race: str
    type: str
    controller: Controller = Controller.IDLE

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y

    def move(self, direction: Direction, grid: GridStore) -> bool:
        """Step one cell in ``direction`` if that cell is empty.

        Args:
            direction: Where to step.
            grid: Terrain to check against.

        Returns:
            True if the unit moved, False if the step was blocked.
        """
        nx, ny = self.x + direction.dx, self.y + direction.dy
        if not grid.is_empty(nx, ny):
            logger.debug(
                "move_blocked",
                race=self.race,
                type=self.type,
                position=self.position,
                direction=direction.name,
            )
            return False
        self.x, self.y = nx, ny
        return True

    def wander(self, grid: GridStore, rng: Generator) -> bool:
        """Attempt one step in a uniformly random direction."""
        direction = _DIRECTIONS[int(rng.integers(len(_DIRECTIONS)))]
        return self.move(direction, grid)

    def update(
        self,
        grid: GridStore,
        rng: Generator,
        commands: Iterable[Direction] = (),
    ) -> None:
        """Advance this unit by one frame.

        Wandering units take one random step; keyboard units apply each
        queued command in order; idle units stay put.

        Args:
            grid: Terrain to move over.
            rng: Seeded random generator.
            commands: Directions requested by the player this frame.
        """
        if self.controller is Controller.WANDER:
            self.wander(grid, rng)
        elif self.controller is Controller.KEYBOARD:
            for direction in commands:
                self.move(direction, grid)

    def draw(self, canvas: Canvas) -> None:
        """Draw a plus-shaped marker centred on the unit."""
        for dx, dy in _MARKER_ARMS:
            canvas.set_pixel(UNIT_ARMS, self.x + dx, self.y + dy)
        canvas.set_pixel(UNIT_CORE, self.x, self.y)
