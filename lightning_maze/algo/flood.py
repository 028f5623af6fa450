import enum
import logging
from array import array
from typing import Iterator, List, Optional, Tuple

from lightning_maze.core.config import validate_start
from lightning_maze.core.errors import InvariantViolation
from lightning_maze.core.walls import WallGrid

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


class FloodState(enum.Enum):
    IDLE = "idle"
    PROPAGATING = "propagating"
    EXHAUSTED = "exhausted"


class FloodEngine:
    """
    Breadth-first wave over a WallGrid, advanced one layer per step().

    Neighbours are examined north, east, south, west; when two frontier cells
    reach the same neighbour in one layer the earlier one (in frontier order)
    becomes its parent. The frontier sequence and parent record are therefore
    a pure function of the grid and the start cell.
    """

    def __init__(self, grid: WallGrid, start: Cell = (0, 0)):
        validate_start(start, grid.width, grid.height)
        self.grid = grid
        self.start: Cell = (start[0], start[1])
        self.reset()

    def reset(self):
        """Back to IDLE with only the start cell visited."""
        n = self.grid.width * self.grid.height
        # Dense distance record, -1 = unreached
        self.distances = array('i', [-1] * n)
        # Dense parent record: direction bit pointing back to the parent, 0 = none
        self.parents = array('B', [0] * n)

        self.distances[self.grid.get_index(*self.start)] = 0
        self.visited_count = 1
        self.layer = 0
        self.state = FloodState.IDLE
        self._frontier: List[Cell] = [self.start]
        self.last_frontier: Tuple[Cell, ...] = (self.start,)

    @property
    def is_exhausted(self) -> bool:
        return self.state is FloodState.EXHAUSTED

    @property
    def frontier(self) -> Tuple[Cell, ...]:
        """Snapshot of the current frontier; later steps do not change it."""
        return tuple(self._frontier)

    @property
    def frontier_size(self) -> int:
        return len(self._frontier)

    def step(self) -> int:
        """
        Advances exactly one layer and returns the new frontier size.
        Returns 0 without doing any work once exhausted.
        """
        if self.state is FloodState.EXHAUSTED:
            return 0
        self.state = FloodState.PROPAGATING

        grid = self.grid
        width = grid.width
        distances = self.distances
        next_distance = self.layer + 1
        next_frontier: List[Cell] = []

        for cx, cy in self._frontier:
            for nx, ny, direction in grid.get_open_neighbors(cx, cy):
                idx = ny * width + nx
                if distances[idx] != -1:
                    continue
                distances[idx] = next_distance
                self.parents[idx] = WallGrid.OPPOSITE[direction]
                next_frontier.append((nx, ny))

        self.visited_count += len(next_frontier)
        if self.visited_count > width * grid.height:
            raise InvariantViolation(
                f"Visited {self.visited_count} cells in a {width}x{grid.height} grid")

        self.layer = next_distance
        self._frontier = next_frontier

        if next_frontier:
            self.last_frontier = tuple(next_frontier)
        else:
            self.state = FloodState.EXHAUSTED
            logger.debug(f"Flood from {self.start} exhausted after {self.layer} steps, "
                         f"{self.visited_count} cells visited")

        return len(next_frontier)

    def run(self) -> Iterator[int]:
        """Steps to exhaustion, yielding each new frontier size."""
        while not self.is_exhausted:
            yield self.step()

    def distance(self, cell: Cell) -> Optional[int]:
        d = self.distances[self.grid.get_index(*cell)]
        return None if d == -1 else d

    def parent(self, cell: Cell) -> Optional[Cell]:
        p_dir = self.parents[self.grid.get_index(*cell)]
        if p_dir == 0:
            return None
        return (cell[0] + WallGrid.DX[p_dir], cell[1] + WallGrid.DY[p_dir])
