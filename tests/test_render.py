from mazecanvas.common.grid import Grid, DIRECTIONS, UP, RIGHT, DOWN, LEFT
from mazecanvas.maze_gen.render import (
    MazeRenderer, Segment, fit_cell_size, render,
    BORDER_WIDTH, WALL_WIDTH, PATH_COLOR, PATH_WIDTH, ENTRANCE_COLOR, EXIT_COLOR, WHITE,
)


def _closed_walls(grid):
    res = []
    for y in range(grid.height):
        for x in range(grid.width):
            for d in DIRECTIONS:
                if grid.cells[y][x].walls[d]:
                    nx, ny = grid.neighbor(x, y, d)
                    res.append((x, y, d, not grid.in_bounds(nx, ny)))
    return res


def test_wall_segments_match_closed_walls(u_grid):
    r = MazeRenderer(cell_px=10)
    segs = r.segments(u_grid, border_mode=True, entrance_exit=True)
    closed = _closed_walls(u_grid)
    assert len(segs) == len(closed)
    assert sorted(s.width for s in segs) == sorted(BORDER_WIDTH if b else WALL_WIDTH for *_, b in closed)
    # the single interior closed wall is shared by (0,0) Right and (1,0) Left
    interior = [s for s in segs if s.width == WALL_WIDTH]
    assert len(interior) == 2
    for s in interior:
        assert s.x0 == s.x1 == 10
        assert {s.y0, s.y1} == {0, 10}


def test_wall_segment_geometry():
    g = Grid(2, 2)
    r = MazeRenderer(cell_px=10)
    segs = r.segments(g, border_mode=True, entrance_exit=True)
    assert len(segs) == 16
    assert Segment(0, 0, 10, 0, BORDER_WIDTH, (0, 0, 0)) in segs
    assert Segment(20, 10, 20, 20, BORDER_WIDTH, (0, 0, 0)) in segs
    assert Segment(10, 10, 0, 10, WALL_WIDTH, (0, 0, 0)) in segs


def test_hidden_entrance_draws_solid_border(u_grid):
    u_grid.add_entrance_exit()
    r = MazeRenderer(cell_px=10)
    shown = r.segments(u_grid, border_mode=True, entrance_exit=True)
    hidden = r.segments(u_grid, border_mode=True, entrance_exit=False)
    extra = set(hidden) - set(shown)
    assert extra == {
        Segment(10, 0, 20, 0, BORDER_WIDTH, (0, 0, 0)),
        Segment(20, 20, 10, 20, BORDER_WIDTH, (0, 0, 0)),
    }
    # display only
    assert u_grid.has_entrance_exit()


def test_path_segments(u_grid):
    u_grid.add_entrance_exit()
    r = MazeRenderer(cell_px=10)
    segs = r.segments(u_grid, border_mode=False, entrance_exit=True)
    paths = [s for s in segs if s.color == PATH_COLOR]
    # three open edges, each drawn from both ends
    assert len(paths) == 6
    assert all(s.width == PATH_WIDTH for s in paths)
    assert Segment(5, 5, 5, 15, PATH_WIDTH, PATH_COLOR) in paths
    markers = [s for s in segs if s.color in (ENTRANCE_COLOR, EXIT_COLOR)]
    assert markers == [
        Segment(15, 0, 15, 5, 4, ENTRANCE_COLOR),
        Segment(15, 20, 15, 15, 4, EXIT_COLOR),
    ]


def test_path_mode_without_markers(u_grid):
    r = MazeRenderer(cell_px=10)
    segs = r.segments(u_grid, border_mode=False, entrance_exit=False)
    assert all(s.color == PATH_COLOR for s in segs)


def test_image_size_and_pixels(u_grid):
    img = render(u_grid, border_mode=True, entrance_exit=True, cell_px=24)
    assert img.size == (48, 48)
    assert img.getpixel((6, 6)) == WHITE
    img = render(u_grid, border_mode=False, entrance_exit=True, cell_px=24)
    # midpoint of the (0,0)-(0,1) path line
    assert img.getpixel((12, 24)) == (0x00, 0x74, 0xD9)


def test_render_does_not_mutate(u_grid):
    before = u_grid.to_dict()
    render(u_grid, border_mode=True, entrance_exit=False)
    render(u_grid, border_mode=False, entrance_exit=True)
    assert u_grid.to_dict() == before


def test_fit_cell_size():
    assert fit_cell_size(10, 10) == 48
    assert fit_cell_size(50, 20) == 9
    assert fit_cell_size(10, 10, max_canvas_px=5) == 1
