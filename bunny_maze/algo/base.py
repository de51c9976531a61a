from abc import ABC, abstractmethod
from typing import Iterator, List
from bunny_maze.core.grid import Cell, Maze


class Generator(ABC):
    def __init__(self, maze: Maze, seed: int = None):
        self.maze = maze
        self.seed = seed
        self.step_count = 0
        # Cells kept clear of obstacles, filled in by run()
        self.path: List[Cell] = []

    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The actual maze modifications happen in-place on self.maze.
        """
        pass

    def run_all(self) -> Maze:
        """Helper to run the generator to completion. Returns the frozen maze."""
        for _ in self.run():
            pass
        return self.maze.freeze()
