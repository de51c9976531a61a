import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Tuple
from bunny_maze.core.grid import Cell, Maze
from bunny_maze.core.moves import Direction

logger = logging.getLogger("bunny_maze.runner")


class Outcome(Enum):
    REACHED_GOAL = "reached_goal"
    HIT_OBSTACLE = "hit_obstacle"
    INCOMPLETE = "incomplete"


@dataclass(frozen=True)
class RunResult:
    position: Cell
    outcome: Outcome
    path: Tuple[Cell, ...]
    # Set only for HIT_OBSTACLE: the cell the bunny tried to enter
    blocked: Optional[Cell] = None
    moves_used: int = 0

    @property
    def won(self) -> bool:
        return self.outcome is Outcome.REACHED_GOAL


def iter_steps(maze: Maze, moves: Iterable[Direction]) -> Iterator[Tuple[Cell, Optional[Cell]]]:
    """
    Walks the moves from the start cell.
    Yields (position, blocked) after every consumed move; blocked is the
    obstacle cell that stopped the walk, in which case it is the last item.
    """
    x, y = maze.start
    for move in moves:
        try:
            move = Direction.parse(move)
        except ValueError:
            logger.debug(f"Skipping unknown move token {move!r}")
            yield (x, y), None
            continue

        dx, dy = move.delta
        cx, cy = maze.clamp(x + dx, y + dy)

        if maze.is_obstacle(cx, cy):
            yield (x, y), (cx, cy)
            return

        x, y = cx, cy
        yield (x, y), None


def run_moves(maze: Maze, moves: Iterable[Direction]) -> RunResult:
    path: List[Cell] = [maze.start]
    position = maze.start
    used = 0

    for position, blocked in iter_steps(maze, moves):
        used += 1
        if blocked is not None:
            return RunResult(position, Outcome.HIT_OBSTACLE, tuple(path), blocked=blocked, moves_used=used)
        # Clamped moves at the edge still count as a visit of the same cell
        path.append(position)

    outcome = Outcome.REACHED_GOAL if position == maze.goal else Outcome.INCOMPLETE
    return RunResult(position, outcome, tuple(path), moves_used=used)


class StepRunner:
    """
    Executes queued moves against one maze and books wins on the counter.
    """

    def __init__(self, maze: Maze, win_counter=None):
        self.maze = maze
        self.win_counter = win_counter
        self.result: Optional[RunResult] = None

    def run(self, moves: Iterable[Direction]) -> RunResult:
        self.result = run_moves(self.maze, moves)
        logger.info(
            f"Run finished: {self.result.outcome.value} at {self.result.position} "
            f"after {self.result.moves_used} moves"
        )
        if self.result.won and self.win_counter is not None:
            self.win_counter.increment()
        return self.result
