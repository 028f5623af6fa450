import sys
import os
import time
import argparse

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from lightning_maze.algo.flood import FloodEngine
from lightning_maze.algo.generator import MazeGenerator
from lightning_maze.algo.pathfinder import PathFinder
from lightning_maze.core.config import ALGORITHMS


def run_benchmark():
    parser = argparse.ArgumentParser(description="Flood Benchmark")
    parser.add_argument("--width", type=int, default=500, help="Maze Width")
    parser.add_argument("--height", type=int, default=500, help="Maze Height")
    parser.add_argument("--dead-ends", type=float, default=0.4, help="Dead-end removal probability")
    parser.add_argument("--loops", type=float, default=0.1, help="Loop-opening probability")
    parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    args = parser.parse_args()

    print(f"=== MAZE FLOOD BENCHMARK ===")
    print(f"Size: {args.width}x{args.height} | Dead ends: {args.dead_ends} | Loops: {args.loops}")
    print("-" * 50)

    print(f"\n{'ALGORITHM':<10} | {'GEN (s)':<10} | {'FLOOD (s)':<10} | {'STEPS':<8} | {'PATH LEN':<10}")
    print("-" * 60)

    for algo in ALGORITHMS:
        t0 = time.time()
        gen = MazeGenerator(args.width, args.height, args.dead_ends, args.loops, seed=args.seed, algo=algo)
        grid = gen.generate()
        t_gen = time.time() - t0

        t0 = time.time()
        flood = FloodEngine(grid)
        steps = sum(1 for _ in flood.run())
        finder = PathFinder(flood)
        finder.find()
        t_flood = time.time() - t0

        print(f"{algo:<10} | {t_gen:<10.4f} | {t_flood:<10.4f} | {steps:<8} | {finder.length:<10}")


if __name__ == "__main__":
    run_benchmark()
