import random
from collections import deque
from typing import Dict, Tuple

from lightning_maze.core.walls import WallGrid


class MazePostProcessor:
    """
    Connectivity-preserving perturbations applied after the spanning tree.
    Both passes only ever open walls.
    """

    @staticmethod
    def remove_dead_ends(grid: WallGrid, factor: float, rng: random.Random) -> int:
        """
        Gives each dead end (exactly one open side) an extra opening with
        probability 'factor'.
        factor: 0.0 = keep every dead end (perfect maze stays perfect)
                1.0 = remove every dead end that has an interior wall to open
        """
        dead_ends = []
        for y in range(grid.height):
            for x in range(grid.width):
                if grid.wall_count(x, y) == 3:
                    dead_ends.append((x, y))

        rng.shuffle(dead_ends)

        removed_count = 0
        for x, y in dead_ends:
            # An earlier opening may already have fixed this one
            if grid.wall_count(x, y) != 3:
                continue
            if rng.random() >= factor:
                continue

            closed_neighbors = [d for _, _, d in grid.get_neighbors(x, y) if grid.has_wall(x, y, d)]
            if closed_neighbors:
                grid.carve_path(x, y, rng.choice(closed_neighbors))
                removed_count += 1

        return removed_count

    @staticmethod
    def open_loops(grid: WallGrid, factor: float, rng: random.Random) -> int:
        """
        Opens each closed interior wall with probability 'factor' (braiding).
        Vertical walls are visited first, then horizontal, both row-major.
        """
        opened = 0
        w, h = grid.width, grid.height

        for y in range(h):
            for x in range(1, w):
                if grid.has_wall(x, y, WallGrid.WEST) and rng.random() < factor:
                    grid.carve_path(x, y, WallGrid.WEST)
                    opened += 1

        for y in range(1, h):
            for x in range(w):
                if grid.has_wall(x, y, WallGrid.NORTH) and rng.random() < factor:
                    grid.carve_path(x, y, WallGrid.NORTH)
                    opened += 1

        return opened

    @staticmethod
    def is_connected(grid: WallGrid, start: Tuple[int, int] = (0, 0)) -> bool:
        seen = {start}
        queue = deque([start])
        while queue:
            cx, cy = queue.popleft()
            for nx, ny, _ in grid.get_open_neighbors(cx, cy):
                if (nx, ny) not in seen:
                    seen.add((nx, ny))
                    queue.append((nx, ny))
        return len(seen) == grid.width * grid.height

    @staticmethod
    def calculate_stats(grid: WallGrid) -> Dict[str, float]:
        dead_ends = 0
        intersections = 0  # 0 or 1 walls
        corridors = 0      # 2 walls

        for y in range(grid.height):
            for x in range(grid.width):
                walls = grid.wall_count(x, y)
                if walls == 3: dead_ends += 1
                elif walls == 2: corridors += 1
                elif walls <= 1: intersections += 1

        total = grid.width * grid.height
        open_edges = grid.open_edge_count()
        return {
            "dead_ends": dead_ends,
            "corridors": corridors,
            "intersections": intersections,
            "open_edges": open_edges,
            # Edges beyond a spanning tree; 0 for a perfect maze
            "loops": open_edges - (total - 1),
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }
