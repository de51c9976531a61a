import logging
from bunny_maze.io.store import KeyValueStore, MemoryStore

logger = logging.getLogger("bunny_maze.score")

WINS_KEY = "total_wins"


class WinCounter:
    """
    Cumulative win count. Read once from the store, written back on every win.
    """

    def __init__(self, store: KeyValueStore = None, key: str = WINS_KEY):
        self.store = store if store is not None else MemoryStore()
        self.key = key
        self.value = self.store.get_int(key, 0)

    def increment(self) -> int:
        self.value += 1
        self.store.set_int(self.key, self.value)
        logger.info(f"Win recorded, total wins: {self.value}")
        return self.value

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"WinCounter({self.key}={self.value})"
