from enum import Enum
from typing import Iterable, Iterator, List, Tuple, Union


class Direction(Enum):
    UP = 'U'
    DOWN = 'D'
    LEFT = 'L'
    RIGHT = 'R'

    @property
    def delta(self) -> Tuple[int, int]:
        return DELTAS[self]

    @property
    def arrow(self) -> str:
        return ARROWS[self]

    @classmethod
    def parse(cls, token: Union["Direction", str]) -> "Direction":
        """
        Accepts a Direction, a letter (U/D/L/R) or a name (up, down, ...).
        """
        if isinstance(token, Direction):
            return token
        if isinstance(token, str):
            key = token.strip().upper()
            for direction in cls:
                if key == direction.value or key == direction.name:
                    return direction
        raise ValueError(f"Unknown move token: {token!r}")


# y grows downwards, row 0 is the top of the board
DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

ARROWS = {
    Direction.UP: '^',
    Direction.DOWN: 'v',
    Direction.LEFT: '<',
    Direction.RIGHT: '>',
}


class MoveQueue:
    """
    Ordered list of queued moves. Only append and clear-all are supported.
    """
    __slots__ = ('_moves',)

    def __init__(self, moves: Iterable[Union[Direction, str]] = ()):
        self._moves: List[Direction] = []
        for move in moves:
            self.append(move)

    @classmethod
    def from_string(cls, text: str) -> "MoveQueue":
        # "RRDD", "R R D D" and "R,R,D,D" are all accepted
        return cls(ch for ch in text if not ch.isspace() and ch != ',')

    def append(self, move: Union[Direction, str]):
        self._moves.append(Direction.parse(move))

    def clear(self):
        self._moves.clear()

    def snapshot(self) -> Tuple[Direction, ...]:
        return tuple(self._moves)

    def __iter__(self) -> Iterator[Direction]:
        return iter(tuple(self._moves))

    def __len__(self) -> int:
        return len(self._moves)

    def __bool__(self) -> bool:
        return bool(self._moves)

    def __str__(self) -> str:
        return ''.join(m.value for m in self._moves)

    def __repr__(self) -> str:
        return f"MoveQueue({str(self)!r})"


def path_to_moves(path: Iterable[Tuple[int, int]]) -> List[Direction]:
    """Re-expresses a path of adjacent cells as the moves that walk it."""
    moves = []
    prev = None
    by_delta = {delta: d for d, delta in DELTAS.items()}
    for cell in path:
        if prev is not None:
            delta = (cell[0] - prev[0], cell[1] - prev[1])
            if delta not in by_delta:
                raise ValueError(f"Cells {prev} and {cell} are not adjacent")
            moves.append(by_delta[delta])
        prev = cell
    return moves
