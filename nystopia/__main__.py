"""Entry point for ``python -m nystopia``.

Loads the YAML config, applies command-line overrides, builds a
simulation engine and either opens a Pygame window to watch the bots
forage or, with ``--headless``, runs a fixed number of ticks and logs a
summary.
"""

from __future__ import annotations

import argparse
import logging
import pathlib

from nystopia.simulation.config import SimulationConfig
from nystopia.simulation.engine import SimulationEngine

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)


def build_parser() -> argparse.ArgumentParser:
    """Return the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="nystopia",
        description="Nystopia - foraging bots on a regrowing food grid",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        help=(
            "Path to YAML config file (default: config/default.yaml, or "
            "built-in defaults when that file is not installed)"
        ),
    )
    parser.add_argument("-b", "--bots", type=int, help="Number of bots to create")
    parser.add_argument(
        "-t",
        "--tick-delay",
        type=int,
        metavar="MSEC",
        help="Tick delay in msec (inverse of speed)",
    )
    parser.add_argument(
        "-s",
        "--sight",
        type=int,
        metavar="SQUARES",
        help="How many squares away a bot can see food",
    )
    parser.add_argument(
        "-r",
        "--regrow-time",
        type=int,
        metavar="TICKS",
        help="Food regrowth time in ticks",
    )
    parser.add_argument(
        "-f",
        "--food-prob",
        type=float,
        metavar="PERCENT",
        help="Chance that a tile grows food, in percent",
    )
    parser.add_argument("--seed", type=int, help="RNG seed for a repeatable run")
    parser.add_argument(
        "--cell-size",
        type=int,
        default=14,
        help="Pixel size per grid cell (default: 14)",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=30,
        help="Target frames per second (default: 30)",
    )
    parser.add_argument(
        "--headless",
        type=int,
        metavar="TICKS",
        help="Run TICKS ticks without a window and log a summary",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO)",
    )
    return parser


def load_config(path: pathlib.Path | None) -> SimulationConfig:
    """Load ``path``, or the bundled default config when no path is given.

    Raises:
        FileNotFoundError: If an explicitly given ``path`` does not exist.
    """
    if path is not None:
        return SimulationConfig.from_yaml(path)
    if _DEFAULT_CONFIG.is_file():
        return SimulationConfig.from_yaml(_DEFAULT_CONFIG)
    logger.warning("%s not found, using built-in defaults", _DEFAULT_CONFIG)
    return SimulationConfig()


def main(argv: list[str] | None = None) -> None:
    """Parse CLI args, create engine, launch renderer."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config).with_overrides(
        bots=args.bots,
        tick_delay_ms=args.tick_delay,
        sight=args.sight,
        regrow_time=args.regrow_time,
        food_prob=args.food_prob,
        seed=args.seed,
    )
    engine = SimulationEngine(config=config)

    if args.headless is not None:
        engine.run(args.headless)
        counts = ", ".join(
            f"{state.name.lower()}={n}" for state, n in engine.state_counts().items()
        )
        logger.info("finished %d ticks: %s", engine.tick, counts)
        return

    from nystopia.ui.pygame_client import PygameRenderer

    renderer = PygameRenderer(
        engine=engine,
        cell_size=args.cell_size,
        ticks_per_second=config.ticks_per_second,
    )
    renderer.run(fps=args.fps)


if __name__ == "__main__":
    main()
