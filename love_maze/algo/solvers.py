from array import array
from typing import List, Tuple
from love_maze.core.grid import Grid

class BFS:
    """Shortest route through open walls, used for card statistics."""

    def __init__(self, grid: Grid):
        self.grid = grid
        self.path: List[Tuple[int, int]] = []
        self.visited_count = 0

    def run(self, start: Tuple[int, int], end: Tuple[int, int]) -> List[Tuple[int, int]]:
        # Dense parent array, 0 = unvisited, otherwise index + 1 of the parent
        parents = array('l', [0] * len(self.grid))
        start_idx = self.grid.index(*start)
        end_idx = self.grid.index(*end)
        if start_idx is None or end_idx is None:
            raise ValueError(f"Route endpoints must lie inside the grid: {start} -> {end}")

        queue = [start_idx]
        head = 0
        parents[start_idx] = start_idx + 1
        self.visited_count = 1

        while head < len(queue):
            idx = queue[head]
            head += 1
            if idx == end_idx:
                break
            for ncol, nrow in self.grid.open_neighbors(*self.grid.coords(idx)):
                nidx = ncol + nrow * self.grid.cols
                if not parents[nidx]:
                    parents[nidx] = idx + 1
                    self.visited_count += 1
                    queue.append(nidx)

        self.path = []
        if not parents[end_idx]:
            return self.path

        idx = end_idx
        while idx != start_idx:
            self.path.append(self.grid.coords(idx))
            idx = parents[idx] - 1
        self.path.append(start)
        self.path.reverse()
        return self.path
