"""Pygame window for the Oreworld prototype.

Hosts the engine's pixel buffer in a window, turns arrow-key presses
into movement commands, and steps plus redraws the game once per
display refresh.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pygame
import structlog

from oreworld.units.unit import Direction

if TYPE_CHECKING:
    from oreworld.game.engine import GameEngine

logger = structlog.get_logger()

_ARROW_KEYS: dict[int, Direction] = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


class PygameClient:
    """Displays a GameEngine in a Pygame window.

    Attributes:
        engine: The game engine to run and display.
        screen: The Pygame display surface.
    """

    def __init__(self, engine: GameEngine) -> None:
        """Open a window sized to the engine's canvas.

        Args:
            engine: The game engine to display.
        """
        self.engine = engine
        pygame.init()
        self.screen = pygame.display.set_mode(engine.canvas.size)
        pygame.display.set_caption("Oreworld")
        self.clock = pygame.time.Clock()
        self.running = True
        self.paused = False
        self._commands: list[Direction] = []

    def run(self, fps: int = 60) -> None:
        """Main loop: handle events, step, render, present.

        Args:
            fps: Target frames per second.
        """
        logger.info("client_started", size=self.engine.canvas.size, fps=fps)
        while self.running:
            self.clock.tick(fps)
            self._handle_events()
            if not self.paused:
                self.engine.step(self._commands)
            self._commands.clear()
            self._present()

        logger.info("client_stopped", frames=self.engine.frame)
        pygame.quit()

    def _handle_events(self) -> None:
        """Process Pygame input events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_SPACE:
                    self.paused = not self.paused
                elif event.key in _ARROW_KEYS:
                    self._commands.append(_ARROW_KEYS[event.key])

    def _present(self) -> None:
        """Render one frame and copy it to the window."""
        canvas = self.engine.render()
        surface = pygame.image.frombuffer(canvas.to_bytes(), canvas.size, "RGBA")
        self.screen.blit(surface, (0, 0))
        pygame.display.flip()
