from collections import deque
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

Coord = Tuple[int, int]

UP, RIGHT, DOWN, LEFT = 0, 1, 2, 3
DIRECTIONS = (UP, RIGHT, DOWN, LEFT)
DX = (0, 1, 0, -1)
DY = (-1, 0, 1, 0)


def opposite(d: int) -> int:
    return (d + 2) % 4


@dataclass
class Cell:
    visited: bool = False
    walls: List[bool] = field(default_factory=lambda: [True, True, True, True])


class Grid:
    """
    Rectangular maze of cells addressed as (x, y), x the column and y the row.
    Walls between neighbours are stored on both cells and only ever change in pairs.
    """
    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise ValueError(f'grid dimensions must be positive, got {width}x{height}')
        self.width = width
        self.height = height
        self.cells = [[Cell() for _ in range(width)] for _ in range(height)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            raise IndexError(f'cell ({x}, {y}) outside {self.width}x{self.height} grid')
        return self.cells[y][x]

    def neighbor(self, x: int, y: int, d: int) -> Coord:
        return x + DX[d], y + DY[d]

    def is_open(self, x: int, y: int, d: int) -> bool:
        return not self.cells[y][x].walls[d]

    def open_wall(self, x: int, y: int, d: int) -> None:
        nx, ny = self.neighbor(x, y, d)
        if not self.in_bounds(nx, ny):
            raise IndexError(f'no neighbour of ({x}, {y}) in direction {d}')
        self.cells[y][x].walls[d] = False
        self.cells[ny][nx].walls[opposite(d)] = False

    def open_count(self, x: int, y: int) -> int:
        return sum(1 for w in self.cells[y][x].walls if not w)

    def dead_ends(self) -> List[Coord]:
        return [(x, y) for y in range(self.height) for x in range(self.width) if self.open_count(x, y) == 1]

    def open_edges(self) -> int:
        # interior edges only, each counted once via its Right/Down side
        n = 0
        for y in range(self.height):
            for x in range(self.width):
                if x + 1 < self.width and self.is_open(x, y, RIGHT):
                    n += 1
                if y + 1 < self.height and self.is_open(x, y, DOWN):
                    n += 1
        return n

    def is_connected(self) -> bool:
        seen = {(0, 0)}
        q = deque([(0, 0)])
        while q:
            x, y = q.popleft()
            for d in DIRECTIONS:
                nx, ny = self.neighbor(x, y, d)
                if self.in_bounds(nx, ny) and self.is_open(x, y, d) and (nx, ny) not in seen:
                    seen.add((nx, ny))
                    q.append((nx, ny))
        return len(seen) == self.width * self.height

    def entrance_column(self) -> int:
        return self.width // 2

    def add_entrance_exit(self) -> None:
        ex = self.entrance_column()
        self.cells[0][ex].walls[UP] = False
        self.cells[self.height - 1][ex].walls[DOWN] = False

    def has_entrance_exit(self) -> bool:
        ex = self.entrance_column()
        return self.is_open(ex, 0, UP) and self.is_open(ex, self.height - 1, DOWN)

    def to_dict(self) -> Dict:
        return {
            'width': self.width,
            'height': self.height,
            'walls': [[list(c.walls) for c in row] for row in self.cells],
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'Grid':
        grid = cls(int(data['width']), int(data['height']))
        for y, row in enumerate(data['walls']):
            for x, walls in enumerate(row):
                grid.cells[y][x].walls = [bool(w) for w in walls]
        return grid
