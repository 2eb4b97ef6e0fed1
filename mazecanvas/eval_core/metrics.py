from mazecanvas.common.grid import Grid
from mazecanvas.common.room_validator import RoomValidator


class MazeMetrics:
    def __init__(self, validator: RoomValidator = None):
        self.validator = validator or RoomValidator()

    def score(self, grid: Grid) -> dict:
        cells = grid.width * grid.height
        edges = grid.open_edges()
        return {
            'cells': cells,
            'open_edges': edges,
            'dead_ends': len(grid.dead_ends()),
            'open_rooms': len(self.validator.find_open_rooms(grid)),
            'connected': grid.is_connected(),
            # edges beyond a spanning tree
            'loops': edges - (cells - 1),
        }
