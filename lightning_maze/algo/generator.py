import logging
import random

from lightning_maze.algo.prim import PrimsAlgorithm
from lightning_maze.core.complexity import MazePostProcessor
from lightning_maze.core.config import validate_algo, validate_dimensions, validate_factor
from lightning_maze.core.errors import InvariantViolation
from lightning_maze.core.walls import WallGrid

logger = logging.getLogger(__name__)

SPANNING_TREES = {
    "prim": PrimsAlgorithm,
}


class MazeGenerator:
    """
    Builds a frozen WallGrid: random spanning tree, then the dead-end pass
    (dead_end_factor) and the loop-opening pass (loop_factor).

    All inputs are validated before any grid is allocated. Pass either an
    explicit 'rng' (anything with the random.Random interface) or a 'seed'.
    """

    def __init__(self, width: int, height: int, dead_end_factor: float = 0.0,
                 loop_factor: float = 0.0, seed: int = None,
                 rng: random.Random = None, algo: str = "prim"):
        validate_dimensions(width, height)
        validate_factor("dead_end_factor", dead_end_factor)
        validate_factor("loop_factor", loop_factor)
        validate_algo(algo)

        self.width = width
        self.height = height
        self.dead_end_factor = dead_end_factor
        self.loop_factor = loop_factor
        self.seed = seed
        self.rng = rng if rng is not None else random.Random(seed)
        self.algo = algo

        self.dead_ends_removed = 0
        self.loops_opened = 0

    def generate(self) -> WallGrid:
        grid = WallGrid(self.width, self.height)

        SPANNING_TREES[self.algo](grid, rng=self.rng, seed=self.seed).run_all()

        tree_edges = grid.open_edge_count()
        if tree_edges != self.width * self.height - 1:
            raise InvariantViolation(
                f"Spanning tree has {tree_edges} edges, expected {self.width * self.height - 1}")

        self.dead_ends_removed = MazePostProcessor.remove_dead_ends(grid, self.dead_end_factor, self.rng)
        self.loops_opened = MazePostProcessor.open_loops(grid, self.loop_factor, self.rng)

        if not MazePostProcessor.is_connected(grid):
            raise InvariantViolation(f"Generated {self.width}x{self.height} maze is not fully connected")

        grid.freeze()
        logger.debug(f"Generated {self.width}x{self.height} maze ({self.algo}): "
                     f"{self.dead_ends_removed} dead ends removed, {self.loops_opened} loops opened")
        return grid
