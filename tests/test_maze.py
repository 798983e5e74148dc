import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from love_maze.core.grid import Grid
from love_maze.core.maze import Maze, create_maze
from love_maze.core.navigator import Direction
from love_maze.core.complexity import MazeAnalyzer

def direction_between(a, b):
    dx, dy = b[0] - a[0], b[1] - a[1]
    return {(1, 0): Direction.RIGHT, (-1, 0): Direction.LEFT,
            (0, 1): Direction.DOWN, (0, -1): Direction.UP}[(dx, dy)]

class TestMaze(unittest.TestCase):
    def test_invalid_dimensions(self):
        for cols, rows in [(0, 3), (3, 0), (-2, 4)]:
            with self.assertRaises(ValueError):
                create_maze(cols, rows, 0, "A-B")
        with self.assertRaises(ValueError):
            create_maze(3, 3, -1, "A-B")

    def test_before_first_step(self):
        maze = create_maze(5, 5, 0, "A-B")
        self.assertFalse(maze.is_done())
        self.assertIsNone(maze.exit())
        self.assertIsNone(maze.active_center())
        self.assertIsNone(maze.start_cell)
        for direction in Direction:
            self.assertTrue(maze.try_move(direction))

    def test_scenario_three_by_three(self):
        maze = create_maze(3, 3, 0, "A-B")
        calls = 0
        while not maze.is_done():
            maze.step()
            calls += 1
        self.assertLessEqual(calls, 2 * 3 * 3 + 1)

        for row in range(3):
            for col in range(3):
                self.assertTrue(maze.cell_at(col, row).visited)

        opened = MazeAnalyzer.open_border_walls(maze.grid)
        self.assertEqual(len(opened), 1)

        record = maze.exit()
        self.assertIsNotNone(record)
        col, row, side = opened[0]
        self.assertEqual((record.col, record.row, record.side), (col, row, side))

        cell = maze.cell_at(col, row)
        open_sides = {"top": not cell.top, "right": not cell.right,
                      "bottom": not cell.bottom, "left": not cell.left}
        self.assertTrue(open_sides[record.side_name])

    def test_pass_through_until_done(self):
        maze = create_maze(6, 4, 2, "A-B")
        while not maze.is_done():
            center = maze.active_center()
            for direction in Direction:
                self.assertTrue(maze.try_move(direction))
                self.assertEqual(maze.active_center(), center)
            maze.step()

    def test_marker_starts_on_start_cell(self):
        maze = create_maze(10, 10, 0, "A-B", width=400, height=400)
        maze.step()
        col, row = maze.start_cell
        self.assertEqual(maze.active_center(), ((col + 0.5) * 40, (row + 0.5) * 40))

    def test_bounded_navigation(self):
        maze = create_maze(10, 10, 0, "A-B", width=400, height=400)
        maze.run_all()
        self.assertEqual(maze.cell_width, 40)
        self.assertEqual(maze.navigator.marker.width, 20)

        col, row = maze.start_cell
        x, y = maze.active_center()
        moved = maze.try_move(Direction.RIGHT)
        if maze.cell_at(col, row).right:
            self.assertFalse(moved)
            self.assertEqual(maze.active_center(), (x, y))
        else:
            self.assertTrue(moved)
            self.assertEqual(maze.active_center(), (x + 20, y))

    def test_deterministic_navigation(self):
        moves = [Direction.UP, Direction.RIGHT, Direction.RIGHT, Direction.DOWN,
                 Direction.LEFT, Direction.DOWN, Direction.DOWN, Direction.LEFT] * 25

        def play():
            maze = create_maze(8, 8, 4, "romeo-juliet")
            maze.run_all()
            return [(maze.try_move(m), maze.active_center()) for m in moves], maze.grid.cells.tobytes()

        self.assertEqual(play(), play())

    def test_walk_to_exit(self):
        for seed in ("A-B", "romeo-juliet", "alice-bob"):
            maze = create_maze(7, 5, 4, seed)
            maze.run_all()
            path = MazeAnalyzer.path_to_exit(maze)
            self.assertEqual(path[0], maze.start_cell)

            for a, b in zip(path, path[1:]):
                direction = direction_between(a, b)
                self.assertTrue(maze.try_move(direction))
                self.assertTrue(maze.try_move(direction))

            exit_dir = {Grid.TOP: Direction.UP, Grid.RIGHT: Direction.RIGHT,
                        Grid.BOTTOM: Direction.DOWN, Grid.LEFT: Direction.LEFT}[maze.exit().side]
            for _ in range(2):
                if maze.reached_exit():
                    break
                self.assertTrue(maze.try_move(exit_dir))
            self.assertTrue(maze.reached_exit(), f"Marker did not leave the '{seed}' maze")

    def test_geometry(self):
        maze = Maze(10, 10, 4, "romeo-juliet")
        self.assertAlmostEqual(maze.cell_width, 900 / 14)
        self.assertAlmostEqual(maze.margin[0], 2 * 900 / 14)
        self.assertIsNone(maze.cell_at(10, 0))

    def test_run_all_step_bound(self):
        for cols, rows in [(1, 1), (4, 9), (13, 6)]:
            maze = create_maze(cols, rows, 0, "bound")
            self.assertLessEqual(maze.run_all(), 2 * cols * rows + 1)
            self.assertTrue(maze.is_done())

    def test_create_and_finish(self):
        maze = create_maze(3, 3, 0, "A-B")
        self.assertGreater(maze.run_all(), 0)
        self.assertTrue(maze.is_done())
        self.assertIsNotNone(maze.exit())
        with self.assertRaises(ValueError):
            create_maze(0, 3, 0, "A-B")

    def test_try_move_accepts_names(self):
        maze = create_maze(4, 4, 0, "a-b")
        self.assertTrue(maze.try_move("LEFT"))
        with self.assertRaises(ValueError):
            maze.try_move("north")

        maze.run_all()
        by_name = create_maze(4, 4, 0, "a-b")
        by_name.run_all()
        for name in ["up", "RIGHT", "down", "left", "left"]:
            self.assertEqual(by_name.try_move(name), maze.try_move(Direction.parse(name)))
            self.assertEqual(by_name.active_center(), maze.active_center())
        with self.assertRaises(ValueError):
            maze.try_move("north")

if __name__ == '__main__':
    unittest.main()
