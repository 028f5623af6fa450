from typing import Optional, Tuple

from lightning_maze.algo.flood import Cell, FloodEngine
from lightning_maze.core.errors import EngineStateError, InvariantViolation
from lightning_maze.core.walls import WallGrid


class PathFinder:
    """
    Shortest path from the flood's start to the farthest cell it reached.

    The target is the first cell of the last non-empty frontier: every cell
    there holds the maximum distance, and frontier order breaks ties.
    """

    def __init__(self, flood: FloodEngine):
        self.flood = flood
        self.path: Tuple[Cell, ...] = ()
        self.target: Optional[Cell] = None
        self.target_distance: Optional[int] = None

    @property
    def length(self) -> int:
        return len(self.path)

    def find(self) -> Tuple[Cell, ...]:
        flood = self.flood
        if not flood.is_exhausted:
            raise EngineStateError(f"Path requested while flood is {flood.state.value}")

        target = flood.last_frontier[0]
        target_distance = flood.distance(target)
        if target_distance is None:
            raise InvariantViolation(f"Target {target} has no recorded distance")

        self.path = self.reconstruct_path(flood.start, target)
        if len(self.path) != target_distance + 1:
            raise InvariantViolation(
                f"Path length {len(self.path)} does not match distance {target_distance} of {target}")

        self.target = target
        self.target_distance = target_distance
        return self.path

    def reconstruct_path(self, start: Cell, end: Cell) -> Tuple[Cell, ...]:
        grid = self.flood.grid
        parents = self.flood.parents
        max_len = grid.width * grid.height

        reverse_path = []
        curr = end
        while curr != start:
            reverse_path.append(curr)
            if len(reverse_path) > max_len:
                raise InvariantViolation(f"Parent chain from {end} does not terminate")

            p_dir = parents[grid.get_index(*curr)]
            if p_dir == 0:
                raise InvariantViolation(f"Cell {curr} on backtrace has no parent and is not start")

            curr = (curr[0] + WallGrid.DX[p_dir], curr[1] + WallGrid.DY[p_dir])

        reverse_path.append(start)
        reverse_path.reverse()
        return tuple(reverse_path)
