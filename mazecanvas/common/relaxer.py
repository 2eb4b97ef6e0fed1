import logging
from typing import Optional

from .grid import Grid, DIRECTIONS
from .room_validator import RoomValidator

logger = logging.getLogger(__name__)


class DeadEndRelaxer:
    """
    Opens walls at dead ends, pass after pass, until a pass opens nothing.

    Dead ends are snapshotted at the start of each pass and each one gets at most one new
    opening per pass: the first of Up, Right, Down, Left that is closed, not on the border,
    and would not complete an open 2x2 room. Dead ends with no such wall are left alone.
    """
    def __init__(self, validator: Optional[RoomValidator] = None):
        self.validator = validator or RoomValidator()
        self.passes = 0
        self.opened = 0

    def run_pass(self, grid: Grid) -> bool:
        changed = False
        self.passes += 1
        # a cell stays in the list even if an earlier opening in this pass joined it to a second passage
        for x, y in grid.dead_ends():
            for d in DIRECTIONS:
                if grid.is_open(x, y, d):
                    continue
                nx, ny = grid.neighbor(x, y, d)
                if not grid.in_bounds(nx, ny):
                    continue
                if self.validator.would_create_room(grid, x, y, d):
                    continue
                grid.open_wall(x, y, d)
                self.opened += 1
                changed = True
                break
        return changed

    def relax(self, grid: Grid) -> None:
        self.passes = 0
        self.opened = 0
        while self.run_pass(grid):
            pass
        logger.debug('relaxed %dx%d grid: %d walls opened in %d passes, %d dead ends left',
                     grid.width, grid.height, self.opened, self.passes, len(grid.dead_ends()))


def relax(grid: Grid) -> None:
    DeadEndRelaxer().relax(grid)
