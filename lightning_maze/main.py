import argparse
import logging
import sys
import time

from lightning_maze.core.config import ALGORITHMS, MazeConfig
from lightning_maze.core.errors import ConfigurationError


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def parse_start(text: str):
    try:
        col, row = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected COL,ROW, got {text!r}") from None
    return (col, row)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Lightning Maze: steppable maze flood engine")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    def add_maze_args(p):
        defaults = MazeConfig()
        p.add_argument("--width", type=int, default=defaults.width, help="Maze Width")
        p.add_argument("--height", type=int, default=defaults.height, help="Maze Height")
        p.add_argument("--dead-ends", type=float, default=defaults.dead_end_factor,
                       help="Dead-end removal probability (0.0 - 1.0)")
        p.add_argument("--loops", type=float, default=defaults.loop_factor,
                       help="Loop-opening probability per interior wall (0.0 - 1.0)")
        p.add_argument("--seed", type=int, default=None, help="Random Seed")
        p.add_argument("--start", type=parse_start, default=defaults.start, help="Start cell as COL,ROW")
        p.add_argument("--algo", type=str, default=defaults.algo, choices=ALGORITHMS,
                       help="Spanning tree algorithm")

    run_parser = subparsers.add_parser("run", help="Generate a maze, flood it and light the path")
    add_maze_args(run_parser)

    stats_parser = subparsers.add_parser("stats", help="Generate a maze and print its statistics")
    add_maze_args(stats_parser)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("lightning_maze")

    if args.command is None:
        parser.print_help()
        return 0

    config = MazeConfig(
        width=args.width,
        height=args.height,
        dead_end_factor=args.dead_ends,
        loop_factor=args.loops,
        seed=args.seed,
        start=args.start,
        algo=args.algo,
    )

    from lightning_maze.engine import Maze
    try:
        t0 = time.time()
        maze = Maze.from_config(config)
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2
    logger.info(f"Generated {maze.width}x{maze.height} maze in {time.time() - t0:.4f}s")

    if args.command == "stats":
        logger.info(f"Stats: {maze.stats()}")
        return 0

    # run
    steps = 0
    peak = 0
    while True:
        size = maze.step()
        steps += 1
        peak = max(peak, size)
        logger.debug(f"Step {steps}: frontier {size}")
        if size == 0:
            break

    path = maze.compute_path()
    logger.info(f"Flood exhausted after {steps} steps (peak frontier {peak})")
    logger.info(f"Path length: {len(path)} from {path[0]} to {path[-1]}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
