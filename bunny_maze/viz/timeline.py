from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
from bunny_maze.core.grid import Cell


@dataclass(frozen=True)
class Timeline:
    """
    Playback schedule for a traversed path.
    frames: (timestamp, cell) pairs, seconds relative to the playback start.
    duration: when the playback is over (last frame + hold).
    """
    frames: Tuple[Tuple[float, Cell], ...]
    duration: float

    def frame_index(self, elapsed: float) -> int:
        # Index of the last frame whose timestamp has passed, -1 before the first
        idx = -1
        for i, (ts, _) in enumerate(self.frames):
            if ts > elapsed:
                break
            idx = i
        return idx


def build_timeline(path: Sequence[Cell], step_interval: float = 0.5, hold: float = 2.0) -> Timeline:
    if step_interval < 0 or hold < 0:
        raise ValueError("step_interval and hold must not be negative")
    frames = tuple((i * step_interval, cell) for i, cell in enumerate(path))
    return Timeline(frames, len(path) * step_interval + hold)


class Playback:
    """
    Consumes a Timeline against a clock. Cancelling only stops consumption;
    the timeline itself is never modified.
    """

    def __init__(self, timeline: Timeline, started_at: float):
        self.timeline = timeline
        self.started_at = started_at
        self.cancelled = False

    def cancel(self):
        self.cancelled = True

    def elapsed(self, now: float) -> float:
        return max(0.0, now - self.started_at)

    def finished(self, now: float) -> bool:
        return self.cancelled or self.elapsed(now) >= self.timeline.duration

    def position(self, now: float) -> Optional[Cell]:
        if self.cancelled or not self.timeline.frames:
            return None
        idx = self.timeline.frame_index(self.elapsed(now))
        return self.timeline.frames[max(idx, 0)][1]

    def next_cell(self, now: float) -> Optional[Cell]:
        if self.cancelled:
            return None
        idx = self.timeline.frame_index(self.elapsed(now))
        if 0 <= idx < len(self.timeline.frames) - 1:
            return self.timeline.frames[idx + 1][1]
        return None

    def visited(self, now: float) -> List[Cell]:
        """Cells already shown, in order."""
        if self.cancelled:
            return []
        idx = self.timeline.frame_index(self.elapsed(now))
        return [cell for _, cell in self.timeline.frames[:idx + 1]]
