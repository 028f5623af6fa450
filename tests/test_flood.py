import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from lightning_maze.algo.flood import FloodEngine, FloodState
from lightning_maze.algo.generator import MazeGenerator
from lightning_maze.core.errors import ConfigurationError
from lightning_maze.core.walls import WallGrid


class TestFloodEngine(unittest.TestCase):
    def create_open_grid(self, w, h):
        grid = WallGrid(w, h)
        for y in range(h):
            for x in range(w):
                grid.carve_path(x, y, WallGrid.EAST)
                grid.carve_path(x, y, WallGrid.SOUTH)
        return grid

    def test_initial_state(self):
        flood = FloodEngine(self.create_open_grid(3, 3), start=(1, 1))
        self.assertEqual(flood.state, FloodState.IDLE)
        self.assertEqual(flood.frontier, ((1, 1),))
        self.assertEqual(flood.distance((1, 1)), 0)
        self.assertIsNone(flood.distance((0, 0)))
        self.assertEqual(flood.visited_count, 1)

    def test_neighbor_order(self):
        flood = FloodEngine(self.create_open_grid(3, 3), start=(1, 1))
        self.assertEqual(flood.step(), 4)
        self.assertEqual(flood.state, FloodState.PROPAGATING)
        # Up, right, down, left
        self.assertEqual(flood.frontier, ((1, 0), (2, 1), (1, 2), (0, 1)))

    def test_first_discoverer_wins(self):
        flood = FloodEngine(self.create_open_grid(2, 2), start=(0, 0))
        self.assertEqual(flood.step(), 2)  # (1,0), (0,1)
        self.assertEqual(flood.step(), 1)  # (1,1)
        self.assertEqual(flood.frontier, ((1, 1),))
        # (1,0) is earlier in the frontier, so it claims (1,1)
        self.assertEqual(flood.parent((1, 1)), (1, 0))
        self.assertEqual(flood.distance((1, 1)), 2)

    def test_walls_block_propagation(self):
        grid = WallGrid(3, 1)
        grid.carve_path(0, 0, WallGrid.EAST)
        flood = FloodEngine(grid)
        self.assertEqual(flood.step(), 1)
        self.assertEqual(flood.step(), 0)
        self.assertTrue(flood.is_exhausted)
        self.assertIsNone(flood.distance((2, 0)))

    def test_exhausted_step_is_noop(self):
        flood = FloodEngine(WallGrid(1, 1))
        self.assertEqual(flood.step(), 0)
        self.assertEqual(flood.state, FloodState.EXHAUSTED)
        self.assertEqual(flood.step(), 0)
        self.assertEqual(flood.layer, 1)
        self.assertEqual(flood.last_frontier, ((0, 0),))

    def test_frontiers_cover_every_cell_once(self):
        for seed in range(10):
            w, h = 9, 6
            grid = MazeGenerator(w, h, 0.3, 0.2, seed=seed).generate()
            flood = FloodEngine(grid, start=(4, 3))

            seen = list(flood.frontier)
            steps = 0
            while not flood.is_exhausted:
                flood.step()
                steps += 1
                seen.extend(flood.frontier)

            self.assertEqual(len(seen), w * h)
            self.assertEqual(len(set(seen)), w * h)
            self.assertLessEqual(steps, w * h)
            self.assertEqual(flood.visited_count, w * h)

    def test_parent_tree(self):
        grid = MazeGenerator(7, 7, 0.5, 0.5, seed=11).generate()
        flood = FloodEngine(grid)
        for _ in flood.run():
            pass

        self.assertIsNone(flood.parent(flood.start))
        for y in range(7):
            for x in range(7):
                if (x, y) == flood.start:
                    continue
                p = flood.parent((x, y))
                self.assertIsNotNone(p)
                self.assertEqual(flood.distance(p) + 1, flood.distance((x, y)))

    def test_run_yields_sizes(self):
        grid = WallGrid(4, 1)
        for x in range(3):
            grid.carve_path(x, 0, WallGrid.EAST)
        self.assertEqual(list(FloodEngine(grid).run()), [1, 1, 1, 0])

    def test_reset(self):
        grid = MazeGenerator(8, 8, 0.2, 0.1, seed=4).generate()
        flood = FloodEngine(grid)
        first = []
        while flood.step():
            first.append(flood.frontier)

        flood.reset()
        self.assertEqual(flood.state, FloodState.IDLE)
        self.assertEqual(flood.visited_count, 1)

        second = []
        while flood.step():
            second.append(flood.frontier)
        self.assertEqual(first, second)

    def test_frontier_snapshot_survives_step(self):
        flood = FloodEngine(self.create_open_grid(3, 3))
        flood.step()
        snapshot = flood.frontier
        flood.step()
        self.assertEqual(snapshot, ((1, 0), (0, 1)))

    def test_invalid_start(self):
        with self.assertRaises(ConfigurationError):
            FloodEngine(WallGrid(3, 3), start=(3, 0))
        with self.assertRaises(ConfigurationError):
            FloodEngine(WallGrid(3, 3), start=(0, -1))


if __name__ == '__main__':
    unittest.main()
