from array import array
from typing import Iterator, List, NamedTuple, Optional, Tuple

class CellView(NamedTuple):
    col: int
    row: int
    top: bool
    right: bool
    bottom: bool
    left: bool
    visited: bool
    is_start: bool

class Grid:
    # Bitmask Constants
    TOP    = 0b00000001
    RIGHT  = 0b00000010
    BOTTOM = 0b00000100
    LEFT   = 0b00001000

    # Flags
    VISITED = 0b00010000
    START   = 0b00100000

    # All walls present by default (T|R|B|L) = 15
    ALL_WALLS = TOP | RIGHT | BOTTOM | LEFT

    # Direction Helpers
    DX = {TOP: 0, BOTTOM: 0, RIGHT: 1, LEFT: -1}
    DY = {TOP: -1, BOTTOM: 1, RIGHT: 0, LEFT: 0}
    OPPOSITE = {TOP: BOTTOM, BOTTOM: TOP, RIGHT: LEFT, LEFT: RIGHT}
    SIDE_NAMES = {TOP: "top", RIGHT: "right", BOTTOM: "bottom", LEFT: "left"}

    # Neighbor scan order
    SIDES = (TOP, RIGHT, BOTTOM, LEFT)

    __slots__ = ('cols', 'rows', 'cells')

    def __init__(self, cols: int, rows: int):
        if cols < 1 or rows < 1:
            raise ValueError(f"Grid needs at least one column and row, got {cols}x{rows}")
        self.cols = cols
        self.rows = rows
        # 1 byte per cell, all walls up, nothing visited
        self.cells = array('B', [self.ALL_WALLS] * (cols * rows))

    def __len__(self) -> int:
        return len(self.cells)

    def index(self, col: int, row: int) -> Optional[int]:
        if 0 <= col < self.cols and 0 <= row < self.rows:
            return col + row * self.cols
        return None

    def coords(self, idx: int) -> Tuple[int, int]:
        return idx % self.cols, idx // self.cols

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self.cols and 0 <= row < self.rows

    def carve(self, col: int, row: int, side: int) -> bool:
        """
        Removes the wall between (col, row) and its neighbor on 'side'.
        The neighbor loses the OPPOSITE wall in the same call, so the two
        cells always agree. Returns False if there is no neighbor.
        """
        ncol = col + self.DX[side]
        nrow = row + self.DY[side]
        if not (self.in_bounds(col, row) and self.in_bounds(ncol, nrow)):
            return False

        self.cells[col + row * self.cols] &= ~side
        self.cells[ncol + nrow * self.cols] &= ~self.OPPOSITE[side]
        return True

    def open_border(self, col: int, row: int, side: int):
        """Clears a wall that faces outside the grid."""
        if self.in_bounds(col + self.DX[side], row + self.DY[side]):
            raise ValueError(f"{self.SIDE_NAMES[side]} wall of ({col}, {row}) is not on the border")
        self.cells[col + row * self.cols] &= ~side

    def has_wall(self, col: int, row: int, side: int) -> bool:
        return (self.cells[col + row * self.cols] & side) != 0

    def set_visited(self, col: int, row: int, visited: bool = True):
        idx = col + row * self.cols
        if visited:
            self.cells[idx] |= self.VISITED
        else:
            self.cells[idx] &= ~self.VISITED

    def is_visited(self, col: int, row: int) -> bool:
        return (self.cells[col + row * self.cols] & self.VISITED) != 0

    def set_start(self, col: int, row: int):
        self.cells[col + row * self.cols] |= self.START

    def is_start(self, col: int, row: int) -> bool:
        return (self.cells[col + row * self.cols] & self.START) != 0

    def neighbors(self, col: int, row: int) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (ncol, nrow, side_to_neighbor) for all in-grid neighbors,
        in TOP, RIGHT, BOTTOM, LEFT order. Does NOT check walls.
        """
        if row > 0:
            yield (col, row - 1, self.TOP)
        if col < self.cols - 1:
            yield (col + 1, row, self.RIGHT)
        if row < self.rows - 1:
            yield (col, row + 1, self.BOTTOM)
        if col > 0:
            yield (col - 1, row, self.LEFT)

    def unvisited_neighbors(self, col: int, row: int) -> List[Tuple[int, int, int]]:
        return [(ncol, nrow, side) for ncol, nrow, side in self.neighbors(col, row)
                if not self.is_visited(ncol, nrow)]

    def open_neighbors(self, col: int, row: int) -> Iterator[Tuple[int, int]]:
        """Yields (ncol, nrow) for neighbors NOT blocked by a wall."""
        for ncol, nrow, side in self.neighbors(col, row):
            if not self.has_wall(col, row, side):
                yield (ncol, nrow)

    def is_border(self, col: int, row: int) -> bool:
        return col == 0 or col == self.cols - 1 or row == 0 or row == self.rows - 1

    def border_indices(self) -> List[int]:
        return [idx for idx in range(len(self.cells)) if self.is_border(*self.coords(idx))]

    def cell_at(self, col: int, row: int) -> Optional[CellView]:
        idx = self.index(col, row)
        if idx is None:
            return None
        val = self.cells[idx]
        return CellView(
            col, row,
            bool(val & self.TOP),
            bool(val & self.RIGHT),
            bool(val & self.BOTTOM),
            bool(val & self.LEFT),
            bool(val & self.VISITED),
            bool(val & self.START),
        )
