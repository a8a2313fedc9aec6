"""Tests for oreworld.game — engine and config loading."""

from pathlib import Path

import numpy as np
import pytest

from oreworld.game.config import GameConfig, MineralSpec, UnitSpec
from oreworld.game.engine import GameEngine
from oreworld.render.renderer import UNIT_CORE
from oreworld.terrain.minerals import Comparator
from oreworld.units.unit import Controller, Direction
from oreworld.world.cell import VALID_CODES, CellCode

_REPO_CONFIG = Path(__file__).resolve().parent.parent / "config" / "default.yaml"


class TestGameConfig:
    """Tests for YAML config loading."""

    def test_defaults(self) -> None:
        cfg = GameConfig()
        assert cfg.seed == 42
        assert (cfg.width, cfg.height) == (640, 480)
        assert cfg.noise_scale == 0.035
        assert [m.name for m in cfg.minerals] == ["water", "rock", "iron", "gold"]
        assert len(cfg.units) == 1
        assert cfg.units[0].controller is Controller.KEYBOARD
        assert (cfg.units[0].x, cfg.units[0].y) == (320, 240)

    def test_from_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "test.yaml"
        yaml_file.write_text(
            "seed: 99\n"
            "width: 16\n"
            "height: 12\n"
            "pixel_density: 2\n"
            "noise:\n"
            "  scale: 0.05\n"
            "  octaves: 3\n"
            "minerals:\n"
            "  - {name: ore, rarity: 90, code: iron, comparator: '>='}\n"
            "units:\n"
            "  - {x: 3, y: 4, race: Ant, type: Worker, controller: wander}\n",
        )
        cfg = GameConfig.from_yaml(yaml_file)
        assert cfg.seed == 99
        assert (cfg.width, cfg.height, cfg.pixel_density) == (16, 12, 2)
        assert cfg.noise_scale == 0.05
        assert cfg.noise_octaves == 3
        assert cfg.noise_falloff == 1.1
        assert cfg.minerals == [
            MineralSpec("ore", 90.0, CellCode.IRON, Comparator.AT_LEAST),
        ]
        assert cfg.units == [UnitSpec(3, 4, "Ant", "Worker", Controller.WANDER)]

    def test_from_yaml_preset(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "tint.yaml"
        yaml_file.write_text("preset: tint\n")
        cfg = GameConfig.from_yaml(yaml_file)
        assert cfg.noise_scale == 0.02
        assert all(m.comparator is Comparator.BAND for m in cfg.minerals)
        assert [m.rarity for m in cfg.minerals] == [166, 151, 171, 186]

    def test_empty_yaml_uses_defaults(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")
        assert GameConfig.from_yaml(yaml_file) == GameConfig()

    def test_unknown_comparator(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "bad.yaml"
        yaml_file.write_text(
            "minerals:\n  - {rarity: 90, code: gold, comparator: between}\n",
        )
        with pytest.raises(ValueError):
            GameConfig.from_yaml(yaml_file)

    def test_unknown_preset(self) -> None:
        with pytest.raises(ValueError):
            GameConfig().use_preset("marble")

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            GameConfig.from_yaml(tmp_path / "nope.yaml")

    def test_repo_default_config(self) -> None:
        cfg = GameConfig.from_yaml(_REPO_CONFIG)
        assert (cfg.width, cfg.height) == (640, 480)
        assert [m.rarity for m in cfg.minerals] == [140, 186, 50, 25]
        keyboard = [u for u in cfg.units if u.controller is Controller.KEYBOARD]
        assert len(keyboard) == 1


class TestGameEngine:
    """Tests for the frame loop."""

    def test_engine_initialises(self, small_config: GameConfig) -> None:
        engine = GameEngine(config=small_config)
        assert engine.frame == 0
        assert engine.grid.width == small_config.width
        assert engine.canvas.size == (64, 48)
        assert len(engine.units) == 2

    def test_terrain_generated(self, small_config: GameConfig) -> None:
        engine = GameEngine(config=small_config)
        codes = set(np.unique(engine.grid.cells).tolist())
        assert codes <= VALID_CODES
        assert codes - {CellCode.EMPTY}

    def test_units_spawn_on_cleared_ground(self, small_config: GameConfig) -> None:
        engine = GameEngine(config=small_config)
        for unit in engine.units:
            for dy in (-1, 0, 1):
                for dx in (-1, 0, 1):
                    assert engine.grid.is_empty(unit.x + dx, unit.y + dy)

    def test_step_advances_frame(self, small_config: GameConfig) -> None:
        engine = GameEngine(config=small_config)
        engine.step()
        assert engine.frame == 1

    def test_keyboard_unit_follows_commands(self, small_config: GameConfig) -> None:
        engine = GameEngine(config=small_config)
        player = engine.units[0]
        engine.step([Direction.RIGHT])
        assert player.position == (33, 24)
        engine.step([Direction.DOWN])
        assert player.position == (33, 25)

    def test_render_draws_units_over_terrain(
        self,
        small_config: GameConfig,
    ) -> None:
        engine = GameEngine(config=small_config)
        canvas = engine.render()
        for unit in engine.units:
            assert canvas.pixel(unit.x, unit.y) == UNIT_CORE

    def test_render_scaled_by_density(self, small_config: GameConfig) -> None:
        small_config.pixel_density = 2
        engine = GameEngine(config=small_config)
        canvas = engine.render()
        assert canvas.pixels.shape == (96, 128, 4)
        player = engine.units[0]
        assert canvas.pixel(player.x * 2 + 1, player.y * 2 + 1) == UNIT_CORE

    def test_units_stay_on_empty_cells(self, small_config: GameConfig) -> None:
        engine = GameEngine(config=small_config)
        engine.run(frames=50)
        assert engine.frame == 50
        for unit in engine.units:
            assert engine.grid.is_empty(unit.x, unit.y)

    def test_determinism(self, small_config: GameConfig) -> None:
        """Same seed must produce identical state after N frames."""
        engine_a = GameEngine(config=small_config)
        engine_a.run(frames=20)
        engine_b = GameEngine(config=small_config)
        engine_b.run(frames=20)

        assert np.array_equal(engine_a.grid.cells, engine_b.grid.cells)
        assert np.array_equal(engine_a.canvas.pixels, engine_b.canvas.pixels)
        for unit_a, unit_b in zip(engine_a.units, engine_b.units, strict=True):
            assert unit_a.position == unit_b.position
