from love_maze.core.grid import Grid

def render_ascii(grid: Grid, marker=None) -> str:
    """
    Text picture of the grid, three characters per cell:
    '.' for start-room cells, '#' for unvisited cells, '@' for the marker cell.
    """
    lines = []
    for row in range(grid.rows):
        top = "+"
        mid = ""
        for col in range(grid.cols):
            top += ("---" if grid.has_wall(col, row, Grid.TOP) else "   ") + "+"
            mid += "|" if grid.has_wall(col, row, Grid.LEFT) else " "
            if marker == (col, row):
                body = " @ "
            elif not grid.is_visited(col, row):
                body = "###"
            elif grid.is_start(col, row):
                body = " . "
            else:
                body = "   "
            mid += body
        mid += "|" if grid.has_wall(grid.cols - 1, row, Grid.RIGHT) else " "
        lines.append(top)
        lines.append(mid)

    bottom = "+"
    for col in range(grid.cols):
        bottom += ("---" if grid.has_wall(col, grid.rows - 1, Grid.BOTTOM) else "   ") + "+"
    lines.append(bottom)
    return "\n".join(lines)
