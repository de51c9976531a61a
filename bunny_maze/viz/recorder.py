import logging
import os
import pygame
import cv2
import numpy as np
from datetime import datetime

logger = logging.getLogger("bunny_maze.recorder")


def default_output_file(maze_size: int, directory: str = "recordings") -> str:
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    fname = f"bunny_{maze_size}x{maze_size}_{ts}.mp4"
    if directory:
        os.makedirs(directory, exist_ok=True)
        return os.path.join(directory, fname)
    return fname


class SessionRecorder:
    """
    Writes every rendered frame of the game window to an mp4 file.
    The writer is opened lazily on the first frame, when the size is known.
    """

    def __init__(self, active=False, output_file=None, fps=30):
        self.active = active
        self.output_file = output_file
        self.fps = fps
        self.writer = None
        self.frame_size = None
        self.frame_count = 0

    def capture_frame(self, surface: pygame.Surface):
        if not self.active:
            return

        size = surface.get_size()
        if self.writer is None:
            self.frame_size = size
            fourcc = cv2.VideoWriter_fourcc(*'mp4v')
            self.writer = cv2.VideoWriter(self.output_file, fourcc, self.fps, self.frame_size)
            logger.info(f"Recording started: {self.output_file}")
        elif size != self.frame_size:
            # Window was resized; the codec needs a constant frame size
            surface = pygame.transform.smoothscale(surface, self.frame_size)

        frame = surface_to_bgr(surface)
        self.writer.write(frame)
        self.frame_count += 1

    def stop(self):
        if self.writer:
            self.writer.release()
            logger.info(f"Video saved: {self.output_file} ({self.frame_count} frames)")
            self.writer = None


def surface_to_bgr(surface: pygame.Surface) -> np.ndarray:
    # surfarray is (width, height, 3) RGB, OpenCV wants (height, width, 3) BGR
    view = pygame.surfarray.array3d(surface)
    frame = np.ascontiguousarray(np.transpose(view, (1, 0, 2)))
    return cv2.cvtColor(frame, cv2.COLOR_RGB2BGR)
