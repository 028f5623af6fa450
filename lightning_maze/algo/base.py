import random
from abc import ABC, abstractmethod
from typing import Iterator, Tuple

from lightning_maze.core.walls import WallGrid


class Generator(ABC):
    """Spanning-tree carver. Opens exactly width*height - 1 walls of 'grid'."""

    def __init__(self, grid: WallGrid, rng: random.Random = None, seed: int = None,
                 origin: Tuple[int, int] = (0, 0)):
        self.grid = grid
        self.seed = seed
        self.rng = rng if rng is not None else random.Random(seed)
        self.origin = origin
        self.step_count = 0

    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The actual grid modifications happen in-place on self.grid.
        """
        pass

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass
