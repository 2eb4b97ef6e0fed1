import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from .grid import Grid, DIRECTIONS, opposite
from .relaxer import DeadEndRelaxer
from .room_validator import RoomValidator

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]

MAX_ATTEMPTS = 50


@dataclass
class CommonMazeConfig:
    width: int
    height: int
    entrance_exit: bool = True
    remove_dead_ends: bool = False
    seed: Optional[int] = None
    max_attempts: int = MAX_ATTEMPTS


class CommonMazeGenerator:
    def __init__(self, cfg: CommonMazeConfig, rng: Optional[np.random.Generator] = None,
                 validator: Optional[RoomValidator] = None, relaxer: Optional[DeadEndRelaxer] = None):
        self.cfg = cfg
        self.rng = rng if rng is not None else np.random.default_rng(cfg.seed)
        self.validator = validator or RoomValidator()
        self.relaxer = relaxer or DeadEndRelaxer(self.validator)
        self.attempts = 0

    def _unvisited_neighbors(self, grid: Grid, x: int, y: int) -> List[Tuple[int, int, int]]:
        res = []
        for d in DIRECTIONS:
            nx, ny = grid.neighbor(x, y, d)
            if grid.in_bounds(nx, ny) and not grid.cell(nx, ny).visited:
                res.append((nx, ny, d))
        return res

    def _carve(self, grid: Grid) -> None:
        # Iterative depth-first backtracker starting at (0, 0)
        current: Coord = (0, 0)
        grid.cells[0][0].visited = True
        stack: List[Coord] = [current]
        while stack:
            x, y = current
            neighbors = self._unvisited_neighbors(grid, x, y)
            if neighbors:
                nx, ny, d = neighbors[int(self.rng.integers(0, len(neighbors)))]
                grid.cells[y][x].walls[d] = False
                grid.cells[ny][nx].walls[opposite(d)] = False
                grid.cell(nx, ny).visited = True
                stack.append(current)
                current = (nx, ny)
            else:
                current = stack.pop()

    def _build(self) -> Grid:
        grid = Grid(self.cfg.width, self.cfg.height)
        self._carve(grid)
        # dead ends go before the entrance/exit so the relaxer never sees the border openings
        if self.cfg.remove_dead_ends:
            self.relaxer.relax(grid)
        if self.cfg.entrance_exit:
            grid.add_entrance_exit()
        return grid

    def generate(self) -> Grid:
        self.attempts = 0
        while True:
            grid = self._build()
            self.attempts += 1
            if not self.cfg.remove_dead_ends or not self.validator.has_open_room(grid):
                break
            if self.attempts >= self.cfg.max_attempts:
                logger.warning('open 2x2 room remains after %d attempts on %dx%d grid; keeping last maze',
                               self.attempts, self.cfg.width, self.cfg.height)
                break
            logger.debug('attempt %d produced an open 2x2 room, regenerating', self.attempts)
        return grid


def generate(width: int, height: int, add_entrance_exit: bool = True, remove_dead_ends: bool = False,
             seed: Optional[int] = None, rng: Optional[np.random.Generator] = None) -> Grid:
    cfg = CommonMazeConfig(width=width, height=height, entrance_exit=add_entrance_exit,
                           remove_dead_ends=remove_dead_ends, seed=seed)
    return CommonMazeGenerator(cfg, rng=rng).generate()
