from mazecanvas.common.grid import Grid, UP, RIGHT, DOWN, LEFT
from mazecanvas.common.room_validator import RoomValidator, has_open_room, would_create_room, find_open_rooms


def test_tree_has_no_room(u_grid):
    assert not has_open_room(u_grid)
    assert find_open_rooms(u_grid) == []


def test_fully_open_block_is_room(u_grid):
    u_grid.open_wall(0, 0, RIGHT)
    assert has_open_room(u_grid)
    assert find_open_rooms(u_grid) == [(0, 0)]


def test_three_open_walls_is_not_room(u_grid):
    # U shape has three of the four internal walls open
    assert not has_open_room(u_grid)


def test_would_create_room_predicts_closing_wall(u_grid):
    assert would_create_room(u_grid, 0, 0, RIGHT)
    assert would_create_room(u_grid, 1, 0, LEFT)


def test_would_create_room_ignores_border(u_grid):
    assert not would_create_room(u_grid, 0, 0, UP)
    assert not would_create_room(u_grid, 1, 0, RIGHT)


def test_would_create_room_checks_both_blocks():
    # 3x2: open everything around the wall (1,0)-(1,1) on the right-hand block only
    g = Grid(3, 2)
    g.open_wall(1, 0, RIGHT)
    g.open_wall(2, 0, DOWN)
    g.open_wall(1, 1, RIGHT)
    assert would_create_room(g, 1, 0, DOWN)
    assert would_create_room(g, 1, 1, UP)
    # the left-hand block has nothing open yet
    assert not would_create_room(g, 0, 0, DOWN)


def test_local_check_agrees_with_global():
    g = Grid(3, 3)
    g.open_wall(1, 1, UP)
    g.open_wall(1, 0, RIGHT)
    g.open_wall(2, 0, DOWN)
    v = RoomValidator()
    for x, y, d in [(1, 1, RIGHT), (2, 1, LEFT)]:
        assert v.would_create_room(g, x, y, d)
    for x, y, d in [(1, 1, DOWN), (1, 1, LEFT), (0, 0, RIGHT)]:
        assert not v.would_create_room(g, x, y, d)
        before = v.has_open_room(g)
        g.open_wall(x, y, d)
        assert v.has_open_room(g) == before
