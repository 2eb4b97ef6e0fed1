"""Shared fixtures: hand-carved grids and seeded random generators."""

import numpy as np
import pytest

from mazecanvas.common.grid import Grid, DOWN, RIGHT, DIRECTIONS, opposite


def assert_symmetric(grid: Grid):
    for y in range(grid.height):
        for x in range(grid.width):
            for d in DIRECTIONS:
                nx, ny = grid.neighbor(x, y, d)
                if grid.in_bounds(nx, ny):
                    assert grid.cells[y][x].walls[d] == grid.cells[ny][nx].walls[opposite(d)], (x, y, d)


def boundary_openings(grid: Grid):
    """Return (x, y, d) for every open wall that faces outside the grid."""
    res = []
    for y in range(grid.height):
        for x in range(grid.width):
            for d in DIRECTIONS:
                nx, ny = grid.neighbor(x, y, d)
                if not grid.in_bounds(nx, ny) and grid.is_open(x, y, d):
                    res.append((x, y, d))
    return res


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def u_grid():
    """2x2 spanning tree shaped like a U: (0,0)-(0,1)-(1,1)-(1,0)."""
    g = Grid(2, 2)
    g.open_wall(0, 0, DOWN)
    g.open_wall(0, 1, RIGHT)
    g.open_wall(1, 1, 0)
    return g


@pytest.fixture
def comb_grid():
    """4x3 comb: a corridor along the top row with a tooth hanging down from every column."""
    g = Grid(4, 3)
    for x in range(3):
        g.open_wall(x, 0, RIGHT)
    for x in range(4):
        g.open_wall(x, 0, DOWN)
        g.open_wall(x, 1, DOWN)
    return g
