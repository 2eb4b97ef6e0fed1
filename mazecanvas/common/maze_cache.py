from typing import Optional, Tuple

import numpy as np

from .grid import Grid
from .maze_generator import CommonMazeConfig, CommonMazeGenerator

MIN_SIZE = 2
MAX_SIZE = 50


def clamp_dimension(value) -> int:
    try:
        v = int(value)
    except (TypeError, ValueError):
        raise ValueError(f'maze dimension must be an integer, got {value!r}')
    return max(MIN_SIZE, min(MAX_SIZE, v))


class MazeCache:
    """
    Keeps the last generated maze so display-only changes (mode, entrance/exit visibility)
    redraw the same grid. A new maze is made when forced or when size or dead-end removal change.
    """
    def __init__(self, seed: Optional[int] = None):
        self.rng = np.random.default_rng(seed)
        self.maze: Optional[Grid] = None
        self.key: Optional[Tuple[int, int, bool]] = None
        self.generated = 0
        self.attempts = 0

    def get(self, width, height, remove_dead_ends: bool = False, force_new: bool = False) -> Grid:
        key = (clamp_dimension(width), clamp_dimension(height), bool(remove_dead_ends))
        if force_new or self.maze is None or key != self.key:
            w, h, rde = key
            cfg = CommonMazeConfig(width=w, height=h, entrance_exit=True, remove_dead_ends=rde)
            core = CommonMazeGenerator(cfg, rng=self.rng)
            self.maze = core.generate()
            self.attempts = core.attempts
            self.key = key
            self.generated += 1
        return self.maze
