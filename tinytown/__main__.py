"""Entry point for tinytown package."""

import argparse
import logging
import random

from tinytown.config import SCENARIOS, get_config
from tinytown.errors import ConfigError

logger = logging.getLogger("tinytown")


def run_headless(config, frames: int, snapshot_every: int) -> None:
    """Run the simulation without a window.

    Every person is sent to a random point, then the update step runs for
    a fixed number of frames at the configured frame rate.
    """
    from tinytown.core.events import log_event
    from tinytown.core.vec2 import Vec2
    from tinytown.scenarios import build_scenario
    from tinytown.snapshot import format_state
    from tinytown.systems import move_to, update

    rng = random.Random(config.seed)
    state = build_scenario(config, rng)
    state.event_bus.subscribe_all(log_event)

    for person in state.people:
        move_to(state, person, Vec2(rng.uniform(0, state.width), rng.uniform(0, state.height)))

    dt = (1000.0 / config.fps) / config.time_unit_ms
    for _ in range(frames):
        update(state, dt)
        if snapshot_every and state.frame % snapshot_every == 0:
            logger.info(format_state(state))

    moving = sum(1 for p in state.people if p.is_moving)
    print(format_state(state))
    print(f"{frames} frames, {moving} people still moving")


def main() -> None:
    """Main entry point for the tinytown application."""
    parser = argparse.ArgumentParser(
        description="tinytown - click people, send them places",
        prog="tinytown",
    )
    parser.add_argument(
        "--scenario",
        choices=SCENARIOS,
        default=None,
        help="Starting layout (default: people)",
    )
    parser.add_argument("--people", type=int, default=None, help="Number of people (default: 8)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for placement")
    parser.add_argument("--width", type=int, default=None, help="Canvas width (default: 600)")
    parser.add_argument("--height", type=int, default=None, help="Canvas height (default: 600)")
    parser.add_argument("--scale", type=float, default=None, help="Window scale factor (default: 1.0)")
    parser.add_argument("--fps", type=int, default=None, help="Target frame rate (default: 60)")
    parser.add_argument(
        "--no-grid",
        action="store_true",
        help="Hide the reference grid",
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run without a window (people wander to random points)",
    )
    parser.add_argument(
        "--frames",
        type=int,
        default=300,
        help="Frames to simulate in headless mode (default: 300)",
    )
    parser.add_argument(
        "--snapshot-every",
        type=int,
        default=0,
        help="Log a state snapshot every N frames in headless mode",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: INFO)",
    )

    args = parser.parse_args()

    try:
        config = get_config().with_overrides(
            scenario=args.scenario,
            people_count=args.people,
            seed=args.seed,
            canvas_width=args.width,
            canvas_height=args.height,
            window_scale=args.scale,
            fps=args.fps,
            show_grid=False if args.no_grid else None,
            log_level=args.log_level,
        )
        config.ensure_valid()
    except ConfigError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )

    if args.headless:
        run_headless(config, args.frames, args.snapshot_every)
    else:
        from tinytown.scenarios import build_scenario
        from tinytown.visualizer import Visualizer

        Visualizer(config, build_scenario).run()


if __name__ == "__main__":
    main()
