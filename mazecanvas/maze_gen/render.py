from dataclasses import dataclass
from typing import List, Tuple

from PIL import Image, ImageDraw

from mazecanvas.common.grid import Grid, DIRECTIONS, DOWN, LEFT, RIGHT, UP

Color = Tuple[int, int, int]

WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)
GRID_COLOR: Color = (217, 217, 217)  # rgba(0,0,0,0.15) over white
PATH_COLOR = '#0074D9'
ENTRANCE_COLOR = '#2ECC40'
EXIT_COLOR = '#FF4136'

WALL_WIDTH = 2
BORDER_WIDTH = 4
PATH_WIDTH = 3
MARKER_WIDTH = 4


@dataclass(frozen=True)
class Segment:
    x0: float
    y0: float
    x1: float
    y1: float
    width: int
    color: object


def fit_cell_size(width: int, height: int, max_canvas_px: int = 480) -> int:
    return max(1, int(min(max_canvas_px / width, max_canvas_px / height)))


class MazeRenderer:
    def __init__(self, cell_px: int = 24):
        self.cell_px = cell_px

    def _wall_segments(self, grid: Grid, entrance_exit: bool) -> List[Segment]:
        s = self.cell_px
        w, h = grid.width, grid.height
        ex = grid.entrance_column()
        segs: List[Segment] = []
        for y in range(h):
            for x in range(w):
                cell = grid.cell(x, y)
                px, py = x * s, y * s
                # Endpoints run clockwise around the cell
                edges = {
                    UP: (px, py, px + s, py, y == 0),
                    RIGHT: (px + s, py, px + s, py + s, x == w - 1),
                    DOWN: (px + s, py + s, px, py + s, y == h - 1),
                    LEFT: (px, py + s, px, py, x == 0),
                }
                for d in DIRECTIONS:
                    if cell.walls[d]:
                        x0, y0, x1, y1, border = edges[d]
                        segs.append(Segment(x0, y0, x1, y1, BORDER_WIDTH if border else WALL_WIDTH, BLACK))
                # Hidden entrance/exit: close the border on screen without touching the grid
                if x == ex and not entrance_exit:
                    if y == 0 and not cell.walls[UP]:
                        segs.append(Segment(px, py, px + s, py, BORDER_WIDTH, BLACK))
                    if y == h - 1 and not cell.walls[DOWN]:
                        segs.append(Segment(px + s, py + s, px, py + s, BORDER_WIDTH, BLACK))
        return segs

    def _path_segments(self, grid: Grid, entrance_exit: bool) -> List[Segment]:
        s = self.cell_px
        half = s / 2
        segs: List[Segment] = []
        for y in range(grid.height):
            for x in range(grid.width):
                for d in DIRECTIONS:
                    if not grid.is_open(x, y, d):
                        continue
                    nx, ny = grid.neighbor(x, y, d)
                    if grid.in_bounds(nx, ny):
                        segs.append(Segment(x * s + half, y * s + half, nx * s + half, ny * s + half,
                                            PATH_WIDTH, PATH_COLOR))
        if entrance_exit:
            cx = grid.entrance_column() * s + half
            bottom = grid.height * s
            segs.append(Segment(cx, 0, cx, half, MARKER_WIDTH, ENTRANCE_COLOR))
            segs.append(Segment(cx, bottom, cx, bottom - half, MARKER_WIDTH, EXIT_COLOR))
        return segs

    def segments(self, grid: Grid, border_mode: bool = True, entrance_exit: bool = True) -> List[Segment]:
        if border_mode:
            return self._wall_segments(grid, entrance_exit)
        return self._path_segments(grid, entrance_exit)

    def _draw_grid(self, draw: ImageDraw.ImageDraw, grid: Grid) -> None:
        s = self.cell_px
        W, H = grid.width * s, grid.height * s
        for x in range(grid.width + 1):
            draw.line([(x * s, 0), (x * s, H)], fill=GRID_COLOR, width=1)
        for y in range(grid.height + 1):
            draw.line([(0, y * s), (W, y * s)], fill=GRID_COLOR, width=1)

    def render(self, grid: Grid, border_mode: bool = True, entrance_exit: bool = True) -> Image.Image:
        s = self.cell_px
        img = Image.new('RGB', (grid.width * s, grid.height * s), WHITE)
        draw = ImageDraw.Draw(img)
        self._draw_grid(draw, grid)
        for seg in self.segments(grid, border_mode, entrance_exit):
            draw.line([(seg.x0, seg.y0), (seg.x1, seg.y1)], fill=seg.color, width=seg.width)
        return img


def render(grid: Grid, border_mode: bool = True, entrance_exit: bool = True, cell_px: int = 24) -> Image.Image:
    return MazeRenderer(cell_px).render(grid, border_mode, entrance_exit)
