import unittest
import sys
import os
import shutil

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pygame
from love_maze.core.maze import create_maze
from love_maze.viz.recorder import VideoRecorder

class TestVideoRecorder(unittest.TestCase):
    def setUp(self):
        os.makedirs("test_out", exist_ok=True)
        self.surface = pygame.Surface((40, 30))

    def tearDown(self):
        shutil.rmtree("test_out", ignore_errors=True)

    def test_file_named_after_card(self):
        maze = create_maze(3, 4, 0, "Romeo-Juliet")
        recorder = VideoRecorder.for_maze(maze, "test_out/cards", fps=12, tail_seconds=1.0)
        self.assertTrue(os.path.isdir("test_out/cards"))
        name = os.path.basename(recorder.output_file)
        self.assertTrue(name.startswith("card_romeo-juliet_3x4_"))
        self.assertTrue(name.endswith(".mp4"))
        self.assertEqual(recorder.fps, 12)
        self.assertEqual(recorder.tail_frames, 12)

    def test_stops_after_tail(self):
        recorder = VideoRecorder("test_out/tail.mp4", fps=10, tail_seconds=0.3)
        for _ in range(4):
            recorder.capture_frame(self.surface, False)
        self.assertFalse(recorder.finished)

        for _ in range(6):
            recorder.capture_frame(self.surface, True)
        self.assertTrue(recorder.finished)
        self.assertEqual(recorder.frame_count, 4 + 3)
        self.assertIsNone(recorder.writer)

        recorder.stop()
        self.assertEqual(recorder.frame_count, 7)

    def test_stop_without_frames(self):
        recorder = VideoRecorder("test_out/empty.mp4")
        recorder.stop()
        self.assertTrue(recorder.finished)
        self.assertFalse(os.path.exists("test_out/empty.mp4"))

if __name__ == '__main__':
    unittest.main()
