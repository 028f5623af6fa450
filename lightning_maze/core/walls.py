from array import array
from typing import Iterator, Tuple, Union

from lightning_maze.core.errors import InvariantViolation

WallBuffer = Union[array, bytes]


class WallGrid:
    # Direction bits (also used as parent pointers by the flood engine)
    NORTH = 0b0001
    EAST  = 0b0010
    SOUTH = 0b0100
    WEST  = 0b1000

    # Fixed examination order: up, right, down, left
    DIRECTIONS = (NORTH, EAST, SOUTH, WEST)

    DX = {NORTH: 0, SOUTH: 0, EAST: 1, WEST: -1}
    DY = {NORTH: -1, SOUTH: 1, EAST: 0, WEST: 0}
    OPPOSITE = {NORTH: SOUTH, SOUTH: NORTH, EAST: WEST, WEST: EAST}

    # Wall cell values
    OPEN = 0
    BLOCK = 1

    __slots__ = ('width', 'height', 'v_walls', 'h_walls', 'visited')

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        # v_walls[row * (width + 1) + col] is the west wall of (col, row)
        self.v_walls: WallBuffer = array('B', [self.BLOCK] * ((width + 1) * height))
        # h_walls[row * width + col] is the north wall of (col, row)
        self.h_walls: WallBuffer = array('B', [self.BLOCK] * (width * (height + 1)))
        # Scratch marks for the spanning-tree carvers, dropped on freeze
        self.visited = array('B', [0] * (width * height))

    @property
    def frozen(self) -> bool:
        return isinstance(self.v_walls, bytes)

    def freeze(self):
        """Converts both wall buffers to immutable bytes. Idempotent."""
        if not self.frozen:
            self.v_walls = self.v_walls.tobytes()
            self.h_walls = self.h_walls.tobytes()
            self.visited = None

    def get_index(self, x: int, y: int) -> int:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _wall_slot(self, x: int, y: int, dir_bit: int) -> Tuple[WallBuffer, int]:
        """Maps a cell side to (buffer, index) of the shared wall segment."""
        if dir_bit == self.NORTH:
            return self.h_walls, y * self.width + x
        if dir_bit == self.SOUTH:
            return self.h_walls, (y + 1) * self.width + x
        if dir_bit == self.WEST:
            return self.v_walls, y * (self.width + 1) + x
        if dir_bit == self.EAST:
            return self.v_walls, y * (self.width + 1) + x + 1
        raise ValueError(f"Unknown direction bit {dir_bit}")

    def carve_path(self, x1: int, y1: int, dir_bit: int) -> bool:
        """
        Removes the wall between (x1, y1) and its neighbour in 'dir_bit'.
        Boundary walls are never carved. Returns True if a wall was opened.
        """
        if self.frozen:
            raise InvariantViolation("Cannot carve a frozen WallGrid")

        x2 = x1 + self.DX[dir_bit]
        y2 = y1 + self.DY[dir_bit]
        if not (self.in_bounds(x1, y1) and self.in_bounds(x2, y2)):
            return False  # Cannot carve into void

        buf, idx = self._wall_slot(x1, y1, dir_bit)
        if buf[idx] == self.OPEN:
            return False
        buf[idx] = self.OPEN
        return True

    def has_wall(self, x: int, y: int, dir_bit: int) -> bool:
        buf, idx = self._wall_slot(x, y, dir_bit)
        return buf[idx] != self.OPEN

    def wall_count(self, x: int, y: int) -> int:
        return sum(1 for d in self.DIRECTIONS if self.has_wall(x, y, d))

    def set_visited(self, x: int, y: int, visited: bool = True):
        self.visited[y * self.width + x] = 1 if visited else 0

    def is_visited(self, x: int, y: int) -> bool:
        return self.visited[y * self.width + x] != 0

    def get_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (nx, ny, direction_to_neighbor) for all valid grid neighbors
        in north, east, south, west order. Does NOT check walls.
        """
        if y > 0:
            yield (x, y - 1, self.NORTH)
        if x < self.width - 1:
            yield (x + 1, y, self.EAST)
        if y < self.height - 1:
            yield (x, y + 1, self.SOUTH)
        if x > 0:
            yield (x - 1, y, self.WEST)

    def get_open_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (nx, ny, direction_to_neighbor) for neighbors NOT blocked by a wall.
        """
        for nx, ny, dir_bit in self.get_neighbors(x, y):
            if not self.has_wall(x, y, dir_bit):
                yield (nx, ny, dir_bit)

    def open_edge_count(self) -> int:
        """Number of open wall segments (boundary walls are always closed)."""
        return self.v_walls.count(self.OPEN) + self.h_walls.count(self.OPEN)
