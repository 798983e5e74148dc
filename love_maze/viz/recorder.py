import os
import re
import logging
import pygame
import cv2
import numpy as np
from datetime import datetime

logger = logging.getLogger(__name__)

class VideoRecorder:
    """
    Records the card while the maze is carved, then a short tail showing
    the finished maze, and closes the file on its own.
    """

    def __init__(self, output_file: str, fps: int = 30, tail_seconds: float = 2.0):
        self.output_file = output_file
        self.fps = fps
        self.tail_frames = max(0, round(tail_seconds * fps))
        self.writer = None
        self.frame_count = 0
        self.tail_count = 0
        self.finished = False

    @classmethod
    def for_maze(cls, maze, directory: str = "recordings", fps: int = 30,
                 tail_seconds: float = 2.0) -> "VideoRecorder":
        """Names the file after the seed and size, e.g. card_romeo-juliet_10x10_<ts>.mp4"""
        os.makedirs(directory, exist_ok=True)
        slug = re.sub(r"[^a-z0-9-]+", "_", maze.seed.lower()).strip("_") or "maze"
        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        fname = f"card_{slug}_{maze.cols}x{maze.rows}_{ts}.mp4"
        return cls(os.path.join(directory, fname), fps, tail_seconds)

    def capture_frame(self, surface: pygame.Surface, maze_done: bool):
        if self.finished:
            return

        if maze_done:
            if self.tail_count >= self.tail_frames:
                self.stop()
                return
            self.tail_count += 1

        # Writer opens on the first frame, once the surface size is known
        if self.writer is None:
            fourcc = cv2.VideoWriter_fourcc(*'mp4v')
            self.writer = cv2.VideoWriter(self.output_file, fourcc, self.fps, surface.get_size())
            logger.info(f"Recording started: {self.output_file}")

        # (width, height, 3) RGB -> (height, width, 3) BGR
        frame = np.transpose(pygame.surfarray.array3d(surface), (1, 0, 2))
        self.writer.write(cv2.cvtColor(frame, cv2.COLOR_RGB2BGR))
        self.frame_count += 1

    def stop(self):
        self.finished = True
        if self.writer:
            self.writer.release()
            logger.info(f"Video saved: {self.output_file} ({self.frame_count} frames)")
            self.writer = None
