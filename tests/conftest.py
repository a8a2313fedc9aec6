"""Shared fixtures for the Oreworld test suite."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.random import Generator

from oreworld.game.config import GameConfig, UnitSpec
from oreworld.units.unit import Controller
from oreworld.world.grid import GridStore


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def small_grid() -> GridStore:
    """A small, empty 8x8 grid for fast tests."""
    return GridStore(width=8, height=8)


@pytest.fixture
def small_config() -> GameConfig:
    """A 64x48 config with one keyboard unit and one wandering unit."""
    return GameConfig(
        seed=7,
        width=64,
        height=48,
        units=[
            UnitSpec(x=32, y=24, controller=Controller.KEYBOARD),
            UnitSpec(
                x=10,
                y=10,
                race="Ant",
                type="Worker",
                controller=Controller.WANDER,
            ),
        ],
    )
