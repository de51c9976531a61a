import logging
from typing import List, Optional, Union
from bunny_maze.config import GameConfig
from bunny_maze.core.grid import Cell, Maze
from bunny_maze.core.moves import Direction, MoveQueue
from bunny_maze.core.score import WinCounter
from bunny_maze.algo.staircase import generate_maze
from bunny_maze.algo.runner import Outcome, RunResult, StepRunner
from bunny_maze.viz.timeline import Playback, build_timeline

logger = logging.getLogger("bunny_maze.game")

MESSAGES = {
    Outcome.REACHED_GOAL: "Bunny reached the goal!",
    Outcome.HIT_OBSTACLE: "Bunny hit an obstacle!",
    Outcome.INCOMPLETE: "Bunny did not reach the goal.",
}


class GameSession:
    """
    State of one game window: the current maze, the queued moves, the
    running playback and the win counter. Knows nothing about pygame;
    the renderer reads these fields every frame and calls the actions.
    """

    def __init__(self, config: GameConfig = None, win_counter: WinCounter = None, seed: int = None):
        self.config = config or GameConfig()
        self.win_counter = win_counter if win_counter is not None else WinCounter()
        self.seed = seed
        self.round = 0

        self.maze_size = self.config.clamp_size(self.config.default_size)
        self.maze: Maze = None
        self.guaranteed_path: List[Cell] = []
        self.queue = MoveQueue()

        self.bunny: Cell = (0, 0)
        self.next_cell: Optional[Cell] = None
        self.last_result: Optional[RunResult] = None
        self.playback: Optional[Playback] = None
        self.message = ""
        self.show_victory = False
        self.dark_mode = True

        self.generate()

    @property
    def wins(self) -> int:
        return self.win_counter.value

    @property
    def busy(self) -> bool:
        return self.playback is not None

    def _cancel_playback(self):
        if self.playback is not None:
            self.playback.cancel()
            self.playback = None
        self.bunny = (0, 0)
        self.next_cell = None

    def generate(self):
        self._cancel_playback()
        # A fixed seed still gives a different maze every round
        seed = None if self.seed is None else self.seed + self.round
        self.round += 1
        self.maze, self.guaranteed_path = generate_maze(self.maze_size, seed=seed)
        logger.debug(f"Round {self.round}: {self.maze}")

    def set_size(self, size: int):
        size = self.config.clamp_size(size)
        if size == self.maze_size and self.maze is not None:
            return
        self.maze_size = size
        self.generate()

    def push(self, move: Union[Direction, str]):
        if self.show_victory:
            return
        self.queue.append(move)

    def clear(self):
        self.queue.clear()

    def run(self, now: float) -> Optional[RunResult]:
        if self.busy or self.show_victory:
            return None

        runner = StepRunner(self.maze, win_counter=self.win_counter)
        result = runner.run(self.queue)
        self.last_result = result
        self.message = MESSAGES[result.outcome]
        self.queue.clear()

        timeline = build_timeline(result.path, self.config.step_interval, self.config.hold)
        self.playback = Playback(timeline, started_at=now)
        self.tick(now)
        return result

    def tick(self, now: float):
        if self.playback is None:
            return

        if self.playback.finished(now):
            self.playback = None
            self.bunny = (0, 0)
            self.next_cell = None
            if self.last_result is not None and self.last_result.won:
                self.show_victory = True
            return

        position = self.playback.position(now)
        if position is not None:
            self.bunny = position
        self.next_cell = self.playback.next_cell(now)

    def trail(self, now: float) -> List[Cell]:
        if self.playback is None:
            return []
        return self.playback.visited(now)

    def dismiss_victory(self):
        if not self.show_victory:
            return
        self.show_victory = False
        self.queue.clear()
        self.generate()

    def toggle_dark_mode(self):
        self.dark_mode = not self.dark_mode
