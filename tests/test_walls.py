import unittest
import sys
import os

# Add project root to path so we can import lightning_maze
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from lightning_maze.core.errors import InvariantViolation
from lightning_maze.core.walls import WallGrid


class TestWallGrid(unittest.TestCase):
    def test_initialization(self):
        w, h = 10, 7
        grid = WallGrid(w, h)
        self.assertEqual(len(grid.v_walls), (w + 1) * h)
        self.assertEqual(len(grid.h_walls), w * (h + 1))
        # All walls present
        self.assertTrue(all(v == WallGrid.BLOCK for v in grid.v_walls))
        self.assertTrue(all(v == WallGrid.BLOCK for v in grid.h_walls))
        self.assertEqual(grid.open_edge_count(), 0)

    def test_coordinates(self):
        grid = WallGrid(5, 5)
        self.assertEqual(grid.get_index(2, 2), 12)  # 2 * 5 + 2

        with self.assertRaises(IndexError):
            grid.get_index(-1, 0)
        with self.assertRaises(IndexError):
            grid.get_index(0, 5)

    def test_carve_path(self):
        grid = WallGrid(2, 2)
        # Carve from (0,0) EAST to (1,0): one shared segment opens for both cells
        self.assertTrue(grid.carve_path(0, 0, WallGrid.EAST))

        self.assertFalse(grid.has_wall(0, 0, WallGrid.EAST))
        self.assertFalse(grid.has_wall(1, 0, WallGrid.WEST))
        self.assertEqual(grid.v_walls[0 * 3 + 1], WallGrid.OPEN)

        # Others remain
        self.assertTrue(grid.has_wall(0, 0, WallGrid.NORTH))
        self.assertTrue(grid.has_wall(1, 0, WallGrid.EAST))
        self.assertEqual(grid.open_edge_count(), 1)

        # Carving the same wall again is a no-op
        self.assertFalse(grid.carve_path(1, 0, WallGrid.WEST))

    def test_carve_south_uses_horizontal_buffer(self):
        grid = WallGrid(3, 2)
        grid.carve_path(1, 0, WallGrid.SOUTH)
        self.assertEqual(grid.h_walls[1 * 3 + 1], WallGrid.OPEN)
        self.assertFalse(grid.has_wall(1, 1, WallGrid.NORTH))

    def test_boundary_cannot_be_carved(self):
        grid = WallGrid(3, 3)
        self.assertFalse(grid.carve_path(0, 0, WallGrid.NORTH))
        self.assertFalse(grid.carve_path(2, 2, WallGrid.EAST))
        self.assertTrue(grid.has_wall(0, 0, WallGrid.NORTH))
        self.assertEqual(grid.open_edge_count(), 0)

    def test_visited_flags(self):
        grid = WallGrid(3, 3)
        self.assertFalse(grid.is_visited(1, 1))
        grid.set_visited(1, 1)
        self.assertTrue(grid.is_visited(1, 1))

    def test_neighbors(self):
        grid = WallGrid(3, 3)
        # Center cell has 4 neighbors in N, E, S, W order
        neighbors = list(grid.get_neighbors(1, 1))
        self.assertEqual([d for _, _, d in neighbors],
                         [WallGrid.NORTH, WallGrid.EAST, WallGrid.SOUTH, WallGrid.WEST])

        corner_neighbors = list(grid.get_neighbors(0, 0))
        self.assertEqual(len(corner_neighbors), 2)
        self.assertIn((1, 0, WallGrid.EAST), corner_neighbors)
        self.assertIn((0, 1, WallGrid.SOUTH), corner_neighbors)

    def test_open_neighbors(self):
        grid = WallGrid(3, 3)
        self.assertEqual(list(grid.get_open_neighbors(1, 1)), [])
        grid.carve_path(1, 1, WallGrid.WEST)
        self.assertEqual(list(grid.get_open_neighbors(1, 1)), [(0, 1, WallGrid.WEST)])

    def test_freeze(self):
        grid = WallGrid(2, 2)
        grid.carve_path(0, 0, WallGrid.SOUTH)
        grid.freeze()

        self.assertTrue(grid.frozen)
        self.assertIsInstance(grid.v_walls, bytes)
        self.assertIsInstance(grid.h_walls, bytes)
        self.assertFalse(grid.has_wall(0, 1, WallGrid.NORTH))

        with self.assertRaises(InvariantViolation):
            grid.carve_path(0, 0, WallGrid.EAST)


if __name__ == '__main__':
    unittest.main()
