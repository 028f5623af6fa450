from typing import Iterator, List, Set, Tuple

from lightning_maze.algo.base import Generator


class PrimsAlgorithm(Generator):
    """Randomized frontier growth: repeatedly attach a random frontier cell to the tree."""

    def run(self) -> Iterator[str]:
        rng = self.rng
        grid = self.grid

        start_x, start_y = self.origin
        grid.set_visited(start_x, start_y)

        # Set for O(1) membership, list for random choice
        frontier_set: Set[Tuple[int, int]] = set()
        frontier_list: List[Tuple[int, int]] = []

        for nx, ny, _ in grid.get_neighbors(start_x, start_y):
            frontier_set.add((nx, ny))
            frontier_list.append((nx, ny))

        while frontier_list:
            # Pick random cell, swap remove for O(1)
            idx = rng.randrange(len(frontier_list))
            cx, cy = frontier_list[idx]
            frontier_list[idx] = frontier_list[-1]
            frontier_list.pop()
            frontier_set.discard((cx, cy))

            if grid.is_visited(cx, cy):
                continue

            # Carve from the frontier cell back into the tree
            possible = [d for nx, ny, d in grid.get_neighbors(cx, cy) if grid.is_visited(nx, ny)]
            grid.carve_path(cx, cy, rng.choice(possible))
            grid.set_visited(cx, cy)
            self.step_count += 1

            for nx, ny, _ in grid.get_neighbors(cx, cy):
                if not grid.is_visited(nx, ny) and (nx, ny) not in frontier_set:
                    frontier_set.add((nx, ny))
                    frontier_list.append((nx, ny))

            if self.step_count % 100 == 0:
                yield f"Frontier: {len(frontier_list)}"

        yield "Done"
