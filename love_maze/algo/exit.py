import logging
from dataclasses import dataclass
from typing import Optional
from love_maze.core.grid import Grid
from love_maze.core.rng import RandomSource

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class ExitRecord:
    index: int
    col: int
    row: int
    side: int
    # Cell just outside the grid on the carved side, where the exit icon goes
    anchor_col: int
    anchor_row: int

    @property
    def side_name(self) -> str:
        return Grid.SIDE_NAMES[self.side]

class ExitPlacer:
    def __init__(self, grid: Grid, rng: RandomSource):
        self.grid = grid
        self.rng = rng

    def place(self) -> Optional[ExitRecord]:
        """
        Opens one border wall chosen with a single draw.
        Corners resolve by fixed priority: left, right, top, bottom.
        """
        border = self.grid.border_indices()
        if not border:
            logger.debug("No border cells, maze finished without an exit")
            return None

        idx = border[self.rng.index(len(border))]
        col, row = self.grid.coords(idx)

        if col == 0:
            side = Grid.LEFT
        elif col == self.grid.cols - 1:
            side = Grid.RIGHT
        elif row == 0:
            side = Grid.TOP
        else:
            side = Grid.BOTTOM

        self.grid.open_border(col, row, side)
        record = ExitRecord(idx, col, row, side, col + Grid.DX[side], row + Grid.DY[side])
        logger.debug(f"Exit cut at ({col}, {row}) on the {record.side_name} side")
        return record
