import sys
import os
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from love_maze.core.maze import Maze
from love_maze.core.complexity import MazeAnalyzer

def benchmark_size(cols: int, rows: int, seed: str = "romeo-juliet"):
    print(f"\n--- Benchmarking {cols}x{rows} ({cols*rows:,} cells) ---")

    maze = Maze(cols, rows, 4, seed)

    gen_start = time.time()
    steps = maze.run_all()
    gen_time = time.time() - gen_start

    print(f"Generation Time: {gen_time:.4f}s over {steps:,} steps (bound {2*cols*rows + 1:,})")
    print(f"Per Step: {gen_time / steps * 1e6:.2f} us (one animation tick)")
    print(f"Stats: {MazeAnalyzer.calculate_stats(maze.grid)}")
    print(f"Path to exit: {len(MazeAnalyzer.path_to_exit(maze))} cells")

def run_suite():
    sizes = [
        (10, 10),      # The card default
        (50, 50),
        (200, 200),
        (1000, 1000),
    ]

    for cols, rows in sizes:
        benchmark_size(cols, rows)

if __name__ == "__main__":
    run_suite()
