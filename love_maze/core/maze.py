import logging
from typing import Optional, Tuple, Union
from love_maze.core.grid import CellView, Grid
from love_maze.core.rng import RandomSource
from love_maze.core.navigator import ActiveCellNavigator, Direction
from love_maze.algo.dfs import GenState, RecursiveBacktracker
from love_maze.algo.exit import ExitRecord

logger = logging.getLogger(__name__)

class Maze:
    """
    Card maze: grid, generator and marker behind one pull-based API.

    The caller owns scheduling: step() once per animation frame until
    is_done(), then forward key presses to try_move(). The whole maze is
    reproducible from (seed, cols, rows, padding_cells).
    """

    DEFAULT_CANVAS = 900

    def __init__(self, cols: int, rows: int, padding_cells: int = 0, seed: str = "",
                 width: float = DEFAULT_CANVAS, height: float = DEFAULT_CANVAS):
        if padding_cells < 0:
            raise ValueError(f"padding_cells must be >= 0, got {padding_cells}")
        self.grid = Grid(cols, rows)
        self.padding_cells = padding_cells
        self.seed = seed
        self.width = width
        self.height = height
        self.generator = RecursiveBacktracker(self.grid, RandomSource(seed))
        self.navigator: Optional[ActiveCellNavigator] = None

    @property
    def cols(self) -> int:
        return self.grid.cols

    @property
    def rows(self) -> int:
        return self.grid.rows

    @property
    def cell_width(self) -> float:
        return self.width / (self.cols + self.padding_cells)

    @property
    def cell_height(self) -> float:
        return self.height / (self.rows + self.padding_cells)

    @property
    def margin(self) -> Tuple[float, float]:
        """Canvas offset of cell (0, 0); half the padding on each side."""
        return (self.cell_width * self.padding_cells / 2,
                self.cell_height * self.padding_cells / 2)

    @property
    def state(self) -> GenState:
        return self.generator.state

    @property
    def start_cell(self) -> Optional[Tuple[int, int]]:
        if self.generator.start is None:
            return None
        return self.grid.coords(self.generator.start)

    def step(self) -> GenState:
        state = self.generator.step()
        if self.navigator is None and self.generator.start is not None:
            self.navigator = ActiveCellNavigator(self.grid, self.generator, self.cell_width, self.cell_height)
        return state

    def run_all(self) -> int:
        """Steps until done, returns the number of steps taken."""
        steps = 0
        while not self.is_done():
            self.step()
            steps += 1
        return steps

    def is_done(self) -> bool:
        return self.generator.done

    def exit(self) -> Optional[ExitRecord]:
        return self.generator.exit

    def cell_at(self, col: int, row: int) -> Optional[CellView]:
        return self.grid.cell_at(col, row)

    def try_move(self, direction: Union[Direction, str]) -> bool:
        direction = Direction.parse(direction)
        if self.navigator is None:
            return True
        moved = self.navigator.try_move(direction)
        if not moved:
            logger.debug(f"Move {direction.value} refused at {self.navigator.occupied_cell()}")
        return moved

    def active_center(self) -> Optional[Tuple[float, float]]:
        if self.navigator is None:
            return None
        return self.navigator.center

    def reached_exit(self) -> bool:
        return self.navigator is not None and self.navigator.reached_exit()

def create_maze(cols: int, rows: int, padding_cells: int, seed: str,
                width: float = Maze.DEFAULT_CANVAS, height: float = Maze.DEFAULT_CANVAS) -> Maze:
    return Maze(cols, rows, padding_cells, seed, width, height)
