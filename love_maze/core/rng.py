import math
import random

class RandomSource:
    """
    Seeded stream of floats in [0, 1).
    String seeds are hashed deterministically, so the same participant names
    always reproduce the same maze.
    The stream is CPython's Mersenne Twister, so it repeats across Python
    runs but not against other seedrandom implementations.
    """
    __slots__ = ('seed', 'draws', '_rng')

    def __init__(self, seed: str):
        self.seed = seed
        self.draws = 0
        self._rng = random.Random(seed)

    def random(self) -> float:
        self.draws += 1
        return self._rng.random()

    def range(self, low: float, high: float) -> int:
        """Integer in [floor(low), floor(high)], both bounds inclusive."""
        lo = math.floor(low)
        hi = math.floor(high)
        return lo + math.floor(self.random() * (hi - lo + 1))

    def index(self, n: int) -> int:
        """Pick one of n items."""
        if n < 1:
            raise ValueError(f"Cannot pick from {n} items")
        return math.floor(self.random() * n)
