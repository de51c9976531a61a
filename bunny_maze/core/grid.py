from array import array
from typing import Iterator, List, Sequence, Tuple

Cell = Tuple[int, int]


class Maze:
    # Flags
    OBSTACLE = 0b00000001

    __slots__ = ('size', 'cells', 'frozen')

    def __init__(self, size: int):
        if size < 1:
            raise ValueError(f"Maze size must be at least 1, got {size}")
        self.size = size
        self.frozen = False
        # 'B' (unsigned char) -> 1 byte per cell, all passable
        self.cells = array('B', [0] * (size * size))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[bool]]) -> "Maze":
        """
        Builds a maze from rows of booleans (rows[y][x], True = obstacle).
        Mostly useful for hand-made layouts in tests.
        """
        size = len(rows)
        maze = cls(size)
        for y, row in enumerate(rows):
            if len(row) != size:
                raise ValueError(f"Row {y} has {len(row)} cells, expected {size}")
            for x, blocked in enumerate(row):
                if blocked:
                    maze.set_obstacle(x, y)
        return maze

    @property
    def start(self) -> Cell:
        return (0, 0)

    @property
    def goal(self) -> Cell:
        return (self.size - 1, self.size - 1)

    def get_index(self, x: int, y: int) -> int:
        if 0 <= x < self.size and 0 <= y < self.size:
            return y * self.size + x
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def clamp(self, x: int, y: int) -> Cell:
        # Each axis independently, walls at the edge are no-ops
        last = self.size - 1
        return (max(0, min(last, x)), max(0, min(last, y)))

    def set_obstacle(self, x: int, y: int, blocked: bool = True):
        if self.frozen:
            raise RuntimeError("Maze is frozen")
        idx = self.get_index(x, y)
        if blocked:
            self.cells[idx] |= self.OBSTACLE
        else:
            self.cells[idx] &= ~self.OBSTACLE

    def is_obstacle(self, x: int, y: int) -> bool:
        return (self.cells[self.get_index(x, y)] & self.OBSTACLE) != 0

    def is_passable(self, x: int, y: int) -> bool:
        return not self.is_obstacle(x, y)

    def freeze(self) -> "Maze":
        """Marks the maze read-only. Returns self for chaining."""
        self.frozen = True
        return self

    def obstacle_count(self) -> int:
        return sum(1 for v in self.cells if v & self.OBSTACLE)

    def rows(self) -> List[List[bool]]:
        """rows[y][x], True = obstacle."""
        return [
            [bool(self.cells[y * self.size + x] & self.OBSTACLE) for x in range(self.size)]
            for y in range(self.size)
        ]

    def get_open_neighbors(self, x: int, y: int) -> Iterator[Cell]:
        """
        Yields in-bounds 4-neighbours that are not obstacles.
        """
        for nx, ny in ((x, y - 1), (x, y + 1), (x + 1, y), (x - 1, y)):
            if self.in_bounds(nx, ny) and not (self.cells[ny * self.size + nx] & self.OBSTACLE):
                yield (nx, ny)

    def render_ascii(self, path: Sequence[Cell] = ()) -> str:
        # '#' obstacle, '.' open, '*' on path, 'S' start, 'G' goal
        marked = set(path)
        lines = []
        for y in range(self.size):
            line = []
            for x in range(self.size):
                if (x, y) == self.start:
                    line.append('S')
                elif (x, y) == self.goal:
                    line.append('G')
                elif self.is_obstacle(x, y):
                    line.append('#')
                elif (x, y) in marked:
                    line.append('*')
                else:
                    line.append('.')
            lines.append(''.join(line))
        return '\n'.join(lines)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Maze):
            return NotImplemented
        return self.size == other.size and self.cells.tobytes() == other.cells.tobytes()

    def __repr__(self) -> str:
        return f"Maze(size={self.size}, obstacles={self.obstacle_count()})"
