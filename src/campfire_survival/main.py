"""Main entry point for the Campfire Survival game."""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace

from .config import PROFILES, Config
from .renderer import PygameRenderer
from .simulation import World

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="campfire-survival",
        description="Gather wood and stone, build campfires and stay alive.",
    )
    parser.add_argument(
        "--profile",
        choices=PROFILES,
        default="classic",
        help="Tuning profile (decay rates, speed, respawn thresholds).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="World seed for a reproducible layout (default: random).",
    )
    parser.add_argument(
        "--assets",
        default=None,
        help="Directory with player.png, tree.png, rock.png, berry.png, water.png, campfire.png.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Run the survival game."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Load configuration
    config = Config.profile(args.profile)
    config.world = replace(config.world, seed=args.seed)
    config.renderer = replace(config.renderer, assets_dir=args.assets)

    # Create world
    world = World(config.world, config.player)
    world.initialize()

    # Create renderer
    renderer = PygameRenderer(config.renderer, profile_name=config.name)

    print("Starting Campfire Survival...")
    print(f"  Seed: {world.seed}")
    print(f"  Profile: {config.name}")
    print(f"  World size: {config.world.width}x{config.world.height}")
    print()
    print("Controls:")
    print("  - WASD or arrow keys to move")
    print("  - Hold X to chop trees, hold Z to mine rocks")
    print("  - C to craft a campfire (2 wood, 1 stone)")
    print("  - Stand in water to drink, near a campfire to heal; walk over berries to eat")
    print("  - SPACE pause, R restart, ESC quit")
    print()

    # Main loop
    running = True
    while running:
        # Handle input
        running = renderer.handle_events()

        if renderer.restart_requested:
            renderer.restart_requested = False
            renderer.actions.clear()
            world.reset()
            logger.info("Restarted with seed %d", world.seed)

        dt = renderer.tick()

        # Update simulation if running
        if renderer.should_step():
            world.step(renderer.actions, dt)

        # Render
        renderer.render(world)

    # Cleanup
    renderer.cleanup()
    print(f"Game ended after {world.stats.time_survived:.0f}s survived.")
    print(
        f"  Trees felled: {world.stats.trees_felled}, rocks mined: {world.stats.rocks_mined}, "
        f"berries eaten: {world.stats.berries_eaten}, campfires built: {world.stats.campfires_built}"
    )


if __name__ == "__main__":
    main()
