"""Smoke tests for the UI module (no display required)."""

from __future__ import annotations

import pygame

from oreworld.ui.pygame_client import _ARROW_KEYS, PygameClient
from oreworld.units.unit import Direction


def test_pygame_client_importable() -> None:
    """PygameClient class is importable without initialising pygame."""
    assert PygameClient is not None


def test_arrow_keys_map_to_directions() -> None:
    assert _ARROW_KEYS[pygame.K_UP] is Direction.UP
    assert _ARROW_KEYS[pygame.K_DOWN] is Direction.DOWN
    assert _ARROW_KEYS[pygame.K_LEFT] is Direction.LEFT
    assert _ARROW_KEYS[pygame.K_RIGHT] is Direction.RIGHT


def test_main_module_importable() -> None:
    """The __main__ module is importable and exposes main()."""
    from oreworld.__main__ import main

    assert callable(main)
