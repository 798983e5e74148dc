import math
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union
from love_maze.core.grid import Grid

class Direction(Enum):
    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"

    @property
    def wall(self) -> int:
        return _WALLS[self]

    @classmethod
    def parse(cls, value: Union["Direction", str]) -> "Direction":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown direction: {value!r}") from None

_WALLS = {
    Direction.UP: Grid.TOP,
    Direction.RIGHT: Grid.RIGHT,
    Direction.DOWN: Grid.BOTTOM,
    Direction.LEFT: Grid.LEFT,
}

@dataclass
class Marker:
    left: float
    top: float
    right: float
    bottom: float

    @property
    def center(self) -> Tuple[float, float]:
        return (self.left + self.right) / 2, (self.top + self.bottom) / 2

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    def shift(self, dx: float, dy: float):
        self.left += dx
        self.right += dx
        self.top += dy
        self.bottom += dy

class ActiveCellNavigator:
    """
    Half-cell marker steered through the finished maze.

    Moves go in half-cell steps, so the marker has four resting spots per
    cell. Leaving a cell needs an open wall; moving inside a cell does not
    care about walls. Coordinates are relative to the top-left of cell (0, 0).

    'status' is the generator (anything with start, done and exit).
    """

    # Relative tolerance for the float comparisons against cell boundaries
    EPSILON = 1e-9

    def __init__(self, grid: Grid, status, cell_width: float, cell_height: float):
        if status.start is None:
            raise ValueError("Navigator needs a start cell; step the generator first")
        self.grid = grid
        self.status = status
        self.cell_width = cell_width
        self.cell_height = cell_height

        col, row = grid.coords(status.start)
        cx = (col + 0.5) * cell_width
        cy = (row + 0.5) * cell_height
        qw = cell_width / 4
        qh = cell_height / 4
        self.marker = Marker(cx - qw, cy - qh, cx + qw, cy + qh)

    @property
    def center(self) -> Tuple[float, float]:
        return self.marker.center

    def occupied_cell(self) -> Tuple[int, int]:
        """(col, row) under the marker's center; may lie outside the grid."""
        cx, cy = self.marker.center
        col = math.floor(cx / self.cell_width + self.EPSILON)
        row = math.floor(cy / self.cell_height + self.EPSILON)
        return col, row

    def try_move(self, direction: Union[Direction, str]) -> bool:
        direction = Direction.parse(direction)

        # Input before the maze is finished is accepted without moving
        if not self.status.done:
            return True

        col, row = self.occupied_cell()
        half_w = self.cell_width / 2
        half_h = self.cell_height / 2
        dx = {Direction.LEFT: -half_w, Direction.RIGHT: half_w}.get(direction, 0.0)
        dy = {Direction.UP: -half_h, Direction.DOWN: half_h}.get(direction, 0.0)

        if not self.grid.in_bounds(col, row):
            return self._move_outside(direction, dx, dy)

        if not self.grid.has_wall(col, row, direction.wall) or self._stays_inside(col, row, direction):
            self.marker.shift(dx, dy)
            return True
        return False

    def _stays_inside(self, col: int, row: int, direction: Direction) -> bool:
        m = self.marker
        tol_w = self.EPSILON * self.cell_width
        tol_h = self.EPSILON * self.cell_height
        if direction is Direction.RIGHT:
            return m.right + self.cell_width / 2 <= (col + 1) * self.cell_width + tol_w
        if direction is Direction.LEFT:
            return m.left - self.cell_width / 2 >= col * self.cell_width - tol_w
        if direction is Direction.DOWN:
            return m.bottom + self.cell_height / 2 <= (row + 1) * self.cell_height + tol_h
        return m.top - self.cell_height / 2 >= row * self.cell_height - tol_h

    def _move_outside(self, direction: Direction, dx: float, dy: float) -> bool:
        # Beyond the exit only the way back in is open
        exit_record = self.status.exit
        if exit_record is None or direction.wall != Grid.OPPOSITE[exit_record.side]:
            return False
        self.marker.shift(dx, dy)
        return True

    def reached_exit(self) -> bool:
        exit_record = self.status.exit
        if exit_record is None:
            return False
        return self.occupied_cell() == (exit_record.anchor_col, exit_record.anchor_row)
