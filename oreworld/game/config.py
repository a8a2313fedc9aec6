"""Config — load game parameters from YAML files.

Canvas size, noise parameters, the mineral table and the starting units
all live in YAML and are parsed into typed dataclasses here.  Any key
left out of the file falls back to the dataclass default.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from oreworld.terrain.minerals import (
    DEFAULT_BAND,
    LAYERED_PRESET,
    PRESET_NOISE_SCALES,
    PRESETS,
    Comparator,
    Mineral,
)
from oreworld.units.unit import Controller, Unit
from oreworld.world.cell import CellCode


@dataclass
class MineralSpec:
    """One mineral entry from the config file."""

    name: str
    rarity: float
    code: CellCode
    comparator: Comparator = Comparator.AT_MOST
    band: float = DEFAULT_BAND

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MineralSpec:
        """Parse a mapping like ``{name, rarity, code, comparator}``.

        Raises:
            ValueError: If the code or comparator is unknown.
            KeyError: If ``rarity`` or ``code`` is missing.
        """
        code = CellCode.parse(data["code"])
        return cls(
            name=str(data.get("name", code.name.lower())),
            rarity=float(data["rarity"]),
            code=code,
            comparator=Comparator.parse(data.get("comparator", "at_most")),
            band=float(data.get("band", DEFAULT_BAND)),
        )

    def to_mineral(self) -> Mineral:
        return Mineral(
            name=self.name,
            rarity=self.rarity,
            code=self.code,
            comparator=self.comparator,
            band=self.band,
        )


@dataclass
class UnitSpec:
    """One starting unit from the config file."""

    x: int
    y: int
    race: str = "Human"
    type: str = "Warrior"
    controller: Controller = Controller.IDLE

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UnitSpec:
        """Parse a mapping like ``{x, y, race, type, controller}``.

        Raises:
            ValueError: If the controller is unknown.
            KeyError: If ``x`` or ``y`` is missing.
        """
        return cls(
            x=int(data["x"]),
            y=int(data["y"]),
            race=str(data.get("race", cls.race)),
            type=str(data.get("type", cls.type)),
            controller=Controller.parse(data.get("controller", "idle")),
        )

    def to_unit(self) -> Unit:
        return Unit(
            x=self.x,
            y=self.y,
            race=self.race,
            type=self.type,
            controller=self.controller,
        )


def _default_minerals() -> list[MineralSpec]:
    return [
        MineralSpec(m.name, m.rarity, m.code, m.comparator, m.band)
        for m in LAYERED_PRESET
    ]


def _default_units() -> list[UnitSpec]:
    return [UnitSpec(x=320, y=240, controller=Controller.KEYBOARD)]


@dataclass
class GameConfig:
    """Top-level game configuration.

    Attributes:
        seed: RNG seed for reproducible terrain and wandering.
        width: Canvas width in logical pixels (one grid cell each).
        height: Canvas height in logical pixels.
        pixel_density: Physical pixels per logical pixel.
        fps: Target display refresh rate.
        noise_scale: Noise-space distance between neighbouring cells.
        noise_level: Multiplier from raw noise to rarity units.
        noise_octaves: Octaves summed per noise sample.
        noise_falloff: Amplitude falloff between octaves.
        seed_by_rarity: Seed each mineral's noise from its rarity.
        background: Frame clear colour (RGBA).
        spawn_clearance: Radius of terrain cleared around each unit.
        minerals: Mineral table in application order.
        units: Units created at start-up.
    """

    seed: int = 42
    width: int = 640
    height: int = 480
    pixel_density: int = 1
    fps: int = 60

    noise_scale: float = 0.035
    noise_level: float = 255.0
    noise_octaves: int = 2
    noise_falloff: float = 1.1
    seed_by_rarity: bool = False

    background: tuple[int, int, int, int] = (20, 16, 28, 255)
    spawn_clearance: int = 2

    minerals: list[MineralSpec] = field(default_factory=_default_minerals)
    units: list[UnitSpec] = field(default_factory=_default_units)

    def mineral_table(self) -> list[Mineral]:
        """Return the configured minerals in application order."""
        return [spec.to_mineral() for spec in self.minerals]

    def use_preset(self, name: str) -> None:
        """Replace the mineral table and noise scale with a named preset.

        Raises:
            ValueError: If no preset has that name.
        """
        try:
            preset = PRESETS[name]
        except KeyError:
            msg = f"unknown mineral preset: {name!r} (choose from {sorted(PRESETS)})"
            raise ValueError(msg) from None
        self.minerals = [
            MineralSpec(m.name, m.rarity, m.code, m.comparator, m.band) for m in preset
        ]
        self.noise_scale = PRESET_NOISE_SCALES[name]

    @classmethod
    def from_yaml(cls, path: str | Path) -> GameConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated GameConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
            ValueError: If a mineral or unit entry is invalid.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        noise = data.get("noise") or {}
        cfg = cls(
            seed=data.get("seed", cls.seed),
            width=data.get("width", cls.width),
            height=data.get("height", cls.height),
            pixel_density=data.get("pixel_density", cls.pixel_density),
            fps=data.get("fps", cls.fps),
            noise_scale=noise.get("scale", cls.noise_scale),
            noise_level=noise.get("level", cls.noise_level),
            noise_octaves=noise.get("octaves", cls.noise_octaves),
            noise_falloff=noise.get("falloff", cls.noise_falloff),
            seed_by_rarity=noise.get("seed_by_rarity", cls.seed_by_rarity),
            background=tuple(data.get("background", cls.background)),
            spawn_clearance=data.get("spawn_clearance", cls.spawn_clearance),
        )
        if "preset" in data:
            cfg.use_preset(data["preset"])
            if "scale" in noise:
                cfg.noise_scale = noise["scale"]
        if "minerals" in data:
            cfg.minerals = [MineralSpec.from_dict(m) for m in data["minerals"]]
        if "units" in data:
            cfg.units = [UnitSpec.from_dict(u) for u in data["units"]]
        return cfg
