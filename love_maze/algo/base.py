from abc import ABC, abstractmethod
from typing import Iterator
from love_maze.core.grid import Grid
from love_maze.core.rng import RandomSource

class Generator(ABC):
    """
    Tick-driven generator: the caller owns the loop and calls step() once
    per frame. All grid modifications happen in-place on self.grid.
    """
    def __init__(self, grid: Grid, rng: RandomSource):
        self.grid = grid
        self.rng = rng
        self.step_count = 0

    @property
    @abstractmethod
    def done(self) -> bool:
        pass

    @abstractmethod
    def step(self):
        """Advance by exactly one unit of work. No-op once done."""
        pass

    def run(self) -> Iterator:
        """Yields the result of every step until done."""
        while not self.done:
            yield self.step()

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass
