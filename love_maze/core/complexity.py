from typing import Dict, List, Tuple
from love_maze.core.grid import Grid
from love_maze.algo.solvers import BFS

class MazeAnalyzer:
    @staticmethod
    def popcount_walls(val: int) -> int:
        c = 0
        if val & Grid.TOP: c += 1
        if val & Grid.RIGHT: c += 1
        if val & Grid.BOTTOM: c += 1
        if val & Grid.LEFT: c += 1
        return c

    @staticmethod
    def open_interior_walls(grid: Grid) -> int:
        """Number of open walls between two in-grid cells, each counted once."""
        count = 0
        for row in range(grid.rows):
            for col in range(grid.cols):
                if col < grid.cols - 1 and not grid.has_wall(col, row, Grid.RIGHT):
                    count += 1
                if row < grid.rows - 1 and not grid.has_wall(col, row, Grid.BOTTOM):
                    count += 1
        return count

    @staticmethod
    def open_border_walls(grid: Grid) -> List[Tuple[int, int, int]]:
        """(col, row, side) for every open wall facing outside the grid."""
        found = []
        for idx in grid.border_indices():
            col, row = grid.coords(idx)
            for side in Grid.SIDES:
                if grid.in_bounds(col + Grid.DX[side], row + Grid.DY[side]):
                    continue
                if not grid.has_wall(col, row, side):
                    found.append((col, row, side))
        return found

    @staticmethod
    def calculate_stats(grid: Grid) -> Dict[str, float]:
        dead_ends = 0
        junctions = 0  # 0 or 1 walls
        corridors = 0  # 2 walls

        for i in range(len(grid)):
            walls = MazeAnalyzer.popcount_walls(grid.cells[i])
            if walls == 3: dead_ends += 1
            elif walls == 2: corridors += 1
            elif walls <= 1: junctions += 1

        total = grid.cols * grid.rows
        return {
            "dead_ends": dead_ends,
            "corridors": corridors,
            "junctions": junctions,
            "dead_end_percent": (dead_ends / total) * 100,
            "open_walls": MazeAnalyzer.open_interior_walls(grid),
        }

    @staticmethod
    def path_to_exit(maze) -> List[Tuple[int, int]]:
        """Cells from the start cell to the exit cell, empty until the maze is done."""
        exit_record = maze.exit()
        if exit_record is None or maze.start_cell is None:
            return []
        return BFS(maze.grid).run(maze.start_cell, (exit_record.col, exit_record.row))
