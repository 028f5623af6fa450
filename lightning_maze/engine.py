import logging
import random
from typing import Dict, Optional, Tuple

import numpy as np

from lightning_maze.algo.flood import Cell, FloodEngine, FloodState
from lightning_maze.algo.generator import MazeGenerator
from lightning_maze.algo.pathfinder import PathFinder
from lightning_maze.core.complexity import MazePostProcessor
from lightning_maze.core.config import MazeConfig, validate_start

logger = logging.getLogger(__name__)


class Maze:
    """
    Caller-owned handle: generated walls, a steppable flood and the lit path.

    Lifetimes of returned buffers:
    - vertical_walls / horizontal_walls: immutable bytes, valid for the handle's life.
    - frontier: tuple snapshot of the current layer; call again after step().
    - compute_path(): computed once after exhaustion, then memoized.
    """

    def __init__(self, width: int, height: int, dead_end_factor: float = 0.0,
                 loop_factor: float = 0.0, seed: int = None,
                 rng: random.Random = None, start: Cell = (0, 0), algo: str = "prim"):
        generator = MazeGenerator(width, height, dead_end_factor, loop_factor,
                                  seed=seed, rng=rng, algo=algo)
        # Reject a bad start before spending time on generation
        validate_start(start, width, height)

        self.seed = seed
        self.grid = generator.generate()
        self.flood = FloodEngine(self.grid, start)
        self._pathfinder: Optional[PathFinder] = None

    @classmethod
    def from_config(cls, config: MazeConfig, rng: random.Random = None) -> "Maze":
        return cls(config.width, config.height, config.dead_end_factor, config.loop_factor,
                   seed=config.seed, rng=rng, start=config.start, algo=config.algo)

    # --- Dimensions & walls ---

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def start(self) -> Cell:
        return self.flood.start

    @property
    def vertical_walls(self) -> bytes:
        """(width + 1) * height entries, 1 = wall. Row-major, west side first."""
        return self.grid.v_walls

    @property
    def horizontal_walls(self) -> bytes:
        """width * (height + 1) entries, 1 = wall. Row-major, top boundary first."""
        return self.grid.h_walls

    # --- Propagation ---

    @property
    def state(self) -> FloodState:
        return self.flood.state

    @property
    def is_exhausted(self) -> bool:
        return self.flood.is_exhausted

    def step(self) -> int:
        """Advances the wave one layer. Returns the new frontier size; 0 means exhausted."""
        return self.flood.step()

    @property
    def frontier_size(self) -> int:
        return self.flood.frontier_size

    @property
    def frontier(self) -> Tuple[Cell, ...]:
        return self.flood.frontier

    def restart(self):
        """Floods the same maze again from the start cell."""
        self.flood.reset()
        self._pathfinder = None

    # --- Path ---

    def compute_path(self) -> Tuple[Cell, ...]:
        """Start-to-farthest path. Raises EngineStateError until the flood is exhausted."""
        if self._pathfinder is None:
            finder = PathFinder(self.flood)
            finder.find()
            self._pathfinder = finder
            logger.debug(f"Lit path to {finder.target}: {finder.length} cells")
        return self._pathfinder.path

    light_path = compute_path

    @property
    def path_length(self) -> int:
        return len(self.compute_path())

    @property
    def target(self) -> Cell:
        self.compute_path()
        return self._pathfinder.target

    # --- Array views ---

    def frontier_array(self) -> np.ndarray:
        """Current frontier as an (n, 2) int32 array of (col, row)."""
        return np.array(self.flood.frontier, dtype=np.int32).reshape(-1, 2)

    def distance_grid(self) -> np.ndarray:
        """(height, width) C-int copy of the distance record, -1 where unreached."""
        return np.frombuffer(self.flood.distances, dtype=np.intc).reshape(self.height, self.width).copy()

    def wall_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        """Read-only uint8 views: vertical (height, width+1), horizontal (height+1, width)."""
        v = np.frombuffer(self.grid.v_walls, dtype=np.uint8).reshape(self.height, self.width + 1)
        h = np.frombuffer(self.grid.h_walls, dtype=np.uint8).reshape(self.height + 1, self.width)
        return v, h

    def stats(self) -> Dict[str, float]:
        return MazePostProcessor.calculate_stats(self.grid)
