import os
from dataclasses import dataclass


@dataclass
class GameConfig:
    # Board size range offered by the size keys
    min_size: int = 5
    max_size: int = 15
    default_size: int = 8

    # Playback timing (seconds)
    step_interval: float = 0.5
    hold: float = 2.0

    # Win counter file
    store_path: str = os.path.join(os.path.expanduser("~"), ".bunny_maze.json")

    def clamp_size(self, size: int) -> int:
        return max(self.min_size, min(self.max_size, int(size)))
