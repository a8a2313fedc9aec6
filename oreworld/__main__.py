"""Entry point for ``python -m oreworld``.

Loads the default YAML config, generates the terrain, and opens a Pygame
window where the configured units wander or follow the arrow keys.
"""

from __future__ import annotations

import argparse
import pathlib

from oreworld.game.config import GameConfig
from oreworld.game.engine import GameEngine
from oreworld.logs import configure_logging
from oreworld.terrain.minerals import PRESETS
from oreworld.ui.pygame_client import PygameClient

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)


def main() -> None:
    """Parse CLI args, create engine, launch the window."""
    parser = argparse.ArgumentParser(
        prog="oreworld",
        description="Oreworld - procedural mineral sandbox prototype",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=_DEFAULT_CONFIG,
        help="Path to YAML config file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--density",
        type=int,
        default=None,
        help="Pixel density override (physical pixels per logical pixel)",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=None,
        help="Target frames per second override",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="RNG seed override",
    )
    parser.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        default=None,
        help="Replace the configured minerals with a named preset",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Log level (default: INFO)",
    )
    args = parser.parse_args()

    configure_logging(args.log_level)

    config = GameConfig.from_yaml(args.config)
    if args.density is not None:
        config.pixel_density = args.density
    if args.fps is not None:
        config.fps = args.fps
    if args.seed is not None:
        config.seed = args.seed
    if args.preset is not None:
        config.use_preset(args.preset)

    engine = GameEngine(config=config)
    client = PygameClient(engine=engine)
    client.run(fps=config.fps)


if __name__ == "__main__":
    main()
