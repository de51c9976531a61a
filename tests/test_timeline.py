import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from bunny_maze.viz.timeline import Playback, build_timeline

PATH = [(0, 0), (1, 0), (1, 1)]

class TestTimeline(unittest.TestCase):
    def test_frames(self):
        timeline = build_timeline(PATH, step_interval=0.5, hold=2.0)
        self.assertEqual(timeline.frames, ((0.0, (0, 0)), (0.5, (1, 0)), (1.0, (1, 1))))
        self.assertEqual(timeline.duration, 3.5)

    def test_negative_timing(self):
        with self.assertRaises(ValueError):
            build_timeline(PATH, step_interval=-1)

    def test_playback_positions(self):
        playback = Playback(build_timeline(PATH), started_at=10.0)

        self.assertEqual(playback.position(10.0), (0, 0))
        self.assertEqual(playback.next_cell(10.0), (1, 0))

        self.assertEqual(playback.position(10.6), (1, 0))
        self.assertEqual(playback.next_cell(10.6), (1, 1))
        self.assertEqual(playback.visited(10.6), [(0, 0), (1, 0)])

        # Last frame has no successor
        self.assertEqual(playback.position(11.2), (1, 1))
        self.assertIsNone(playback.next_cell(11.2))

        self.assertFalse(playback.finished(13.4))
        self.assertTrue(playback.finished(13.5))

    def test_clock_before_start(self):
        playback = Playback(build_timeline(PATH), started_at=10.0)
        self.assertEqual(playback.position(9.0), (0, 0))

    def test_cancel(self):
        timeline = build_timeline(PATH)
        playback = Playback(timeline, started_at=0.0)
        playback.cancel()

        self.assertTrue(playback.finished(0.1))
        self.assertIsNone(playback.position(0.1))
        self.assertIsNone(playback.next_cell(0.1))
        self.assertEqual(playback.visited(0.1), [])
        # The schedule itself is untouched
        self.assertEqual(len(timeline.frames), 3)

if __name__ == '__main__':
    unittest.main()
