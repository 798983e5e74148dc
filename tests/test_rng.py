import unittest
import sys
import os
import random

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from love_maze.core.rng import RandomSource

class TestRandomSource(unittest.TestCase):
    def test_same_seed_same_stream(self):
        a = RandomSource("romeo-juliet")
        b = RandomSource("romeo-juliet")
        self.assertEqual([a.random() for _ in range(200)], [b.random() for _ in range(200)])

    def test_different_seed_different_stream(self):
        a = RandomSource("romeo-juliet")
        b = RandomSource("juliet-romeo")
        self.assertNotEqual([a.random() for _ in range(20)], [b.random() for _ in range(20)])

    def test_unit_interval(self):
        rng = RandomSource("A-B")
        for _ in range(1000):
            v = rng.random()
            self.assertGreaterEqual(v, 0.0)
            self.assertLess(v, 1.0)

    def test_range_inclusive(self):
        rng = RandomSource("A-B")
        # 10 columns: 10/4 .. 10/4 + 10/2 -> 2..7
        seen = {rng.range(2.5, 7.5) for _ in range(600)}
        self.assertEqual(seen, {2, 3, 4, 5, 6, 7})

    def test_range_single_value(self):
        rng = RandomSource("A-B")
        # 1 column: 0.25 .. 0.75 -> always 0
        for _ in range(50):
            self.assertEqual(rng.range(0.25, 0.75), 0)

    def test_index(self):
        rng = RandomSource("A-B")
        for _ in range(200):
            self.assertIn(rng.index(4), range(4))
        with self.assertRaises(ValueError):
            rng.index(0)

    def test_draw_counter(self):
        rng = RandomSource("A-B")
        rng.random()
        rng.range(0, 3)
        rng.index(3)
        self.assertEqual(rng.draws, 3)

    def test_stream_is_python_random(self):
        source = RandomSource("romeo-juliet")
        reference = random.Random("romeo-juliet")
        self.assertEqual([source.random() for _ in range(5)],
                         [reference.random() for _ in range(5)])

if __name__ == '__main__':
    unittest.main()
