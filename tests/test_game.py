import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from bunny_maze.config import GameConfig
from bunny_maze.core.grid import Maze
from bunny_maze.core.moves import Direction, path_to_moves
from bunny_maze.core.score import WinCounter
from bunny_maze.algo.runner import Outcome
from bunny_maze.game import GameSession, MESSAGES

class TestGameSession(unittest.TestCase):
    def create_session(self, **kwargs):
        config = GameConfig(step_interval=0.5, hold=2.0)
        return GameSession(config, win_counter=WinCounter(), seed=42, **kwargs)

    def test_initial_state(self):
        session = self.create_session()
        self.assertEqual(session.maze_size, 8)
        self.assertEqual(session.maze.size, 8)
        self.assertEqual(session.bunny, (0, 0))
        self.assertFalse(session.queue)
        self.assertFalse(session.show_victory)

    def test_size_is_clamped(self):
        session = self.create_session()
        session.set_size(50)
        self.assertEqual(session.maze_size, 15)
        self.assertEqual(session.maze.size, 15)
        session.set_size(1)
        self.assertEqual(session.maze_size, 5)

    def test_generate_gives_new_round(self):
        session = self.create_session()
        first = session.maze
        session.generate()
        self.assertIsNot(session.maze, first)
        self.assertEqual(session.round, 2)

    def test_winning_run(self):
        session = self.create_session()
        for move in path_to_moves(session.guaranteed_path):
            session.push(move)

        result = session.run(now=0.0)
        self.assertEqual(result.outcome, Outcome.REACHED_GOAL)
        self.assertEqual(session.message, MESSAGES[Outcome.REACHED_GOAL])
        self.assertEqual(session.wins, 1)
        self.assertFalse(session.queue, "Queue is cleared after a run")

        # Bunny follows the path while the playback runs
        self.assertEqual(session.bunny, (0, 0))
        session.tick(0.6)
        self.assertEqual(session.bunny, session.guaranteed_path[1])
        self.assertEqual(session.next_cell, session.guaranteed_path[2])
        self.assertTrue(session.busy)

        # A second run is ignored until the playback is over
        self.assertIsNone(session.run(now=0.7))

        end = len(result.path) * 0.5 + 2.0
        session.tick(end)
        self.assertFalse(session.busy)
        self.assertEqual(session.bunny, (0, 0))
        self.assertTrue(session.show_victory)

        # Moves are not taken while the victory screen is up
        session.push(Direction.RIGHT)
        self.assertFalse(session.queue)

        old_maze = session.maze
        session.dismiss_victory()
        self.assertFalse(session.show_victory)
        self.assertIsNot(session.maze, old_maze)
        self.assertEqual(session.wins, 1)

    def test_failed_run(self):
        session = self.create_session()
        session.maze = Maze.from_rows([
            [False] * 5,
            [False, False, False, False, True],
            [False] * 5,
            [False] * 5,
            [False] * 5,
        ]).freeze()
        for move in "RRRRD":
            session.push(move)

        result = session.run(now=0.0)
        self.assertEqual(result.outcome, Outcome.HIT_OBSTACLE)
        self.assertEqual(session.message, "Bunny hit an obstacle!")
        self.assertEqual(session.wins, 0)

        session.tick(100.0)
        self.assertFalse(session.show_victory)
        self.assertEqual(session.bunny, (0, 0))

    def test_incomplete_run(self):
        session = self.create_session()
        result = session.run(now=0.0)
        self.assertEqual(result.outcome, Outcome.INCOMPLETE)
        self.assertEqual(session.message, "Bunny did not reach the goal.")

    def test_regenerate_cancels_playback(self):
        session = self.create_session()
        session.push("R")
        session.run(now=0.0)
        playback = session.playback
        self.assertTrue(session.busy)

        session.set_size(10)
        self.assertTrue(playback.cancelled)
        self.assertFalse(session.busy)
        self.assertEqual(session.bunny, (0, 0))
        self.assertIsNone(session.next_cell)

    def test_clear(self):
        session = self.create_session()
        session.push("R")
        session.push(Direction.DOWN)
        session.clear()
        self.assertEqual(len(session.queue), 0)

    def test_toggle_dark_mode(self):
        session = self.create_session()
        self.assertTrue(session.dark_mode)
        session.toggle_dark_mode()
        self.assertFalse(session.dark_mode)

if __name__ == '__main__':
    unittest.main()
