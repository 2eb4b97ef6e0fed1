from typing import List, Tuple

from .grid import Grid, DOWN, LEFT, RIGHT, UP

Coord = Tuple[int, int]


def _joined(grid: Grid, a: Coord, b: Coord) -> bool:
    # a and b are 4-adjacent; open only if both sides of the shared wall are open
    (ax, ay), (bx, by) = a, b
    if ax == bx:
        da, db = (DOWN, UP) if ay < by else (UP, DOWN)
    else:
        da, db = (RIGHT, LEFT) if ax < bx else (LEFT, RIGHT)
    return grid.is_open(ax, ay, da) and grid.is_open(bx, by, db)


class RoomValidator:
    """
    Detects fully open 2x2 rooms. A room is the block {(x,y),(x+1,y),(x,y+1),(x+1,y+1)}
    with all four internal partition walls open.
    """
    def _block_open(self, grid: Grid, x: int, y: int) -> bool:
        tl, tr, bl, br = (x, y), (x+1, y), (x, y+1), (x+1, y+1)
        return (_joined(grid, tl, tr) and _joined(grid, tr, br)
                and _joined(grid, bl, br) and _joined(grid, tl, bl))

    def find_open_rooms(self, grid: Grid) -> List[Coord]:
        return [(x, y) for y in range(grid.height - 1) for x in range(grid.width - 1)
                if self._block_open(grid, x, y)]

    def has_open_room(self, grid: Grid) -> bool:
        for y in range(grid.height - 1):
            for x in range(grid.width - 1):
                if self._block_open(grid, x, y):
                    return True
        return False

    def would_create_room(self, grid: Grid, x: int, y: int, d: int) -> bool:
        nx, ny = grid.neighbor(x, y, d)
        # Each block is listed as a cycle starting at (x,y) -> (nx,ny); its first edge is the candidate
        if d in (UP, DOWN):
            blocks = [
                [(x, y), (nx, ny), (nx+1, ny), (x+1, y)],
                [(x, y), (nx, ny), (nx-1, ny), (x-1, y)],
            ]
        else:
            blocks = [
                [(x, y), (nx, ny), (nx, ny+1), (x, y+1)],
                [(x, y), (nx, ny), (nx, ny-1), (x, y-1)],
            ]
        for block in blocks:
            if not all(grid.in_bounds(cx, cy) for cx, cy in block):
                continue
            already = sum(1 for i in range(1, 4) if _joined(grid, block[i], block[(i+1) % 4]))
            if already == 3:
                return True
        return False


_default = RoomValidator()


def has_open_room(grid: Grid) -> bool:
    return _default.has_open_room(grid)


def would_create_room(grid: Grid, x: int, y: int, d: int) -> bool:
    return _default.would_create_room(grid, x, y, d)


def find_open_rooms(grid: Grid) -> List[Coord]:
    return _default.find_open_rooms(grid)
