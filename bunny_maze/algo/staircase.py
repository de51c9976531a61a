import logging
import random
from typing import Iterator, List, Tuple
from bunny_maze.core.grid import Cell, Maze
from bunny_maze.algo.base import Generator

logger = logging.getLogger("bunny_maze.generator")

OBSTACLE_PROBABILITY = 0.5


class StaircaseGenerator(Generator):
    """
    Lays a random monotone staircase from the start to the goal, then
    scatters obstacles over every other cell with a fair coin.

    The staircase only moves right or down, so it always has exactly
    2 * (size - 1) + 1 cells and the maze is always solvable along it.
    """

    def run(self) -> Iterator[str]:
        rng = random.Random(self.seed)
        size = self.maze.size
        last = size - 1

        # Start at (0,0)
        x, y = 0, 0
        self.path = [(x, y)]

        while (x, y) != (last, last):
            if rng.random() < 0.5 and x < last:
                x += 1
            elif y < last:
                y += 1
            else:
                x += 1
            self.path.append((x, y))
            self.step_count += 1

        yield f"Path: {len(self.path)} cells"

        clear = set(self.path)
        placed = 0
        for row in range(size):
            for col in range(size):
                if (col, row) in clear:
                    continue
                if rng.random() < OBSTACLE_PROBABILITY:
                    self.maze.set_obstacle(col, row)
                    placed += 1
            if row % 4 == 3:
                yield f"Obstacles... Row: {row + 1}/{size}"

        logger.debug(f"Generated {size}x{size} maze: {placed} obstacles, path {len(self.path)} cells")
        yield "Done"


def generate_maze(size: int, seed: int = None) -> Tuple[Maze, List[Cell]]:
    """
    Builds a fresh frozen maze of the given size.
    Returns (maze, guaranteed_path).
    """
    generator = StaircaseGenerator(Maze(size), seed=seed)
    maze = generator.run_all()
    return maze, list(generator.path)
