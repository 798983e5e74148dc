import logging
from enum import Enum
from typing import List, Optional
from love_maze.core.grid import Grid
from love_maze.core.rng import RandomSource
from love_maze.algo.base import Generator
from love_maze.algo.exit import ExitPlacer, ExitRecord

logger = logging.getLogger(__name__)

class GenState(Enum):
    NOT_STARTED = "not_started"
    CARVING = "carving"
    BACKTRACKING = "backtracking"
    DONE = "done"

class RecursiveBacktracker(Generator):
    """
    Randomized depth-first backtracker, one unit of work per step().

    RNG draw order: start row, start col, then one draw per neighbor choice
    in the order the steps happen, then one draw for the exit cell.
    """

    # (dx, dy) offsets of the pre-opened start room, in processing order
    START_BLOCK = [
        (0, 0), (1, 0), (0, 1), (-1, 0), (0, -1), (1, 1), (-1, 1), (1, -1), (-1, -1)
    ]

    def __init__(self, grid: Grid, rng: RandomSource):
        super().__init__(grid, rng)
        self.state = GenState.NOT_STARTED
        self.current: Optional[int] = None
        self.stack: List[int] = []
        self.start: Optional[int] = None
        self.room: List[int] = []
        self.exit: Optional[ExitRecord] = None
        self.carved = 0

    @property
    def done(self) -> bool:
        return self.state is GenState.DONE

    def step(self) -> GenState:
        if self.state is GenState.DONE:
            return self.state

        self.step_count += 1
        if self.state is GenState.NOT_STARTED:
            self._open_start_room()
            self.state = GenState.CARVING
            return self.state

        col, row = self.grid.coords(self.current)
        neighbors = self.grid.unvisited_neighbors(col, row)

        if neighbors:
            ncol, nrow, side = neighbors[self.rng.index(len(neighbors))]
            self.stack.append(self.current)
            self.grid.carve(col, row, side)
            self.grid.set_visited(ncol, nrow)
            self.current = self.grid.index(ncol, nrow)
            self.carved += 1
            self.state = GenState.CARVING
        elif self.stack:
            self.current = self.stack.pop()
            self.state = GenState.BACKTRACKING
        else:
            self.current = None
            self.exit = ExitPlacer(self.grid, self.rng).place()
            self.state = GenState.DONE
            logger.debug(f"Generation finished after {self.step_count} steps ({self.carved} corridors carved)")

        return self.state

    def _open_start_room(self):
        cols, rows = self.grid.cols, self.grid.rows
        start_row = self.rng.range(rows / 4, rows / 4 + rows / 2)
        start_col = self.rng.range(cols / 4, cols / 4 + cols / 2)
        self.start = self.grid.index(start_col, start_row)

        for dx, dy in self.START_BLOCK:
            idx = self.grid.index(start_col + dx, start_row + dy)
            if idx is None:
                continue
            col, row = self.grid.coords(idx)
            self.grid.set_visited(col, row)
            self.grid.set_start(col, row)
            self.room.append(idx)

        # Open the walls shared by two room cells; the room perimeter stays closed
        members = set(self.room)
        for idx in self.room:
            col, row = self.grid.coords(idx)
            for side in (Grid.RIGHT, Grid.BOTTOM):
                nidx = self.grid.index(col + Grid.DX[side], row + Grid.DY[side])
                if nidx in members:
                    self.grid.carve(col, row, side)

        # Extend from the last room cell; the rest wait on the stack so every
        # room cell gets a turn even when the room splits the unvisited area.
        self.current = self.room[-1]
        self.stack = self.room[:-1]
        logger.debug(f"Start room at ({start_col}, {start_row}), {len(self.room)} cells")
