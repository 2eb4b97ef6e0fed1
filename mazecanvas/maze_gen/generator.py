from dataclasses import dataclass
from typing import Dict, Optional

from PIL import Image

from mazecanvas.common.grid import Grid
from mazecanvas.common.maze_cache import MazeCache
from mazecanvas.eval_core.metrics import MazeMetrics
from .render import MazeRenderer, fit_cell_size


@dataclass
class MazeConfig:
    width: int
    height: int
    seed: Optional[int] = None
    remove_dead_ends: bool = False
    cell_px: Optional[int] = None  # None fits the maze into max_canvas_px
    max_canvas_px: int = 480
    border_mode: bool = True  # wall lines; False draws path lines
    entrance_exit: bool = True  # display toggle only, the grid always carries the openings


def image_name(width: int, height: int, border_mode: bool, entrance_exit: bool, index: Optional[int] = None) -> str:
    mode = 'borderMode' if border_mode else 'pathMode'
    ee = 'withEntranceExit' if entrance_exit else 'withoutEntranceExit'
    idx = '' if index is None else f'_{index}'
    return f'maze_{width}x{height}{idx}_{mode}_{ee}.png'


class MazeGenerator:
    def __init__(self, cfg: MazeConfig, cache: Optional[MazeCache] = None):
        self.cfg = cfg
        self.cache = cache or MazeCache(seed=cfg.seed)
        cell_px = cfg.cell_px or fit_cell_size(cfg.width, cfg.height, cfg.max_canvas_px)
        self.renderer = MazeRenderer(cell_px)

    def generate(self) -> Grid:
        # Cached: repeated calls with the same config redraw the same maze
        return self.cache.get(self.cfg.width, self.cfg.height, self.cfg.remove_dead_ends)

    def regenerate(self) -> Grid:
        return self.cache.get(self.cfg.width, self.cfg.height, self.cfg.remove_dead_ends, force_new=True)

    def describe(self, grid: Grid) -> Dict:
        return {
            'width': grid.width,
            'height': grid.height,
            'seed': self.cfg.seed,
            'remove_dead_ends': self.cfg.remove_dead_ends,
            'entrance_exit': grid.has_entrance_exit(),
            'attempts': self.cache.attempts,
            'stats': MazeMetrics().score(grid),
            'grid': grid.to_dict(),
        }

    def render_image(self, grid: Grid, border_mode: Optional[bool] = None,
                     entrance_exit: Optional[bool] = None) -> Image.Image:
        if border_mode is None:
            border_mode = self.cfg.border_mode
        if entrance_exit is None:
            entrance_exit = self.cfg.entrance_exit
        return self.renderer.render(grid, border_mode=border_mode, entrance_exit=entrance_exit)


if __name__ == '__main__':
    cfg = MazeConfig(width=10, height=10, seed=42, remove_dead_ends=True)
    gen = MazeGenerator(cfg)
    maze = gen.generate()
    gen.render_image(maze).save(image_name(10, 10, cfg.border_mode, cfg.entrance_exit))
