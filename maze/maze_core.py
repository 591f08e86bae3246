"""
Core maze functions - tile grid, cell geometry and reachability
"""

import math
import numpy as np
from numba import njit

from utils.constants import WALL, OPEN


class MazeLayoutError(ValueError):
    """Raised when a maze layout does not connect spawn and goal"""


@njit(cache=True)
def flood_fill(cells, start_x, start_y):
    """
    Mark every open cell reachable from (start_x, start_y) with 4-neighbour moves.

    Args:
        cells: 2D uint8 array (rows, cols), 1=wall, 0=open
        start_x, start_y: start cell

    Returns:
        seen: 2D uint8 array (rows, cols), 1=reachable
    """
    rows, cols = cells.shape
    seen = np.zeros((rows, cols), dtype=np.uint8)
    if start_x < 0 or start_y < 0 or start_x >= cols or start_y >= rows:
        return seen
    if cells[start_y, start_x] != 0:
        return seen

    # Each cell is pushed at most once
    stack_x = np.empty(rows * cols, dtype=np.int64)
    stack_y = np.empty(rows * cols, dtype=np.int64)
    stack_x[0] = start_x
    stack_y[0] = start_y
    top = 1
    seen[start_y, start_x] = 1

    while top > 0:
        top -= 1
        x = stack_x[top]
        y = stack_y[top]
        for k in range(4):
            nx = x
            ny = y
            if k == 0:
                ny = y - 1
            elif k == 1:
                nx = x + 1
            elif k == 2:
                ny = y + 1
            else:
                nx = x - 1
            if nx < 0 or ny < 0 or nx >= cols or ny >= rows:
                continue
            if cells[ny, nx] == 0 and seen[ny, nx] == 0:
                seen[ny, nx] = 1
                stack_x[top] = nx
                stack_y[top] = ny
                top += 1

    return seen


class MazeGrid:
    """
    Maze grid with tile representation
    Each cell is either WALL (1) or OPEN (0)
    """
    def __init__(self, cols, rows):
        self.cols = cols
        self.rows = rows
        self.cells = np.full((rows, cols), OPEN, dtype=np.uint8)

    def in_bounds(self, x, y):
        """Check if coordinates are within grid bounds"""
        return 0 <= x < self.cols and 0 <= y < self.rows

    def is_wall(self, x, y):
        """Out-of-bounds cells count as walls"""
        if not self.in_bounds(x, y):
            return True
        return self.cells[y, x] == WALL

    def set_wall(self, x, y):
        self.cells[y, x] = WALL

    def set_open(self, x, y):
        self.cells[y, x] = OPEN

    def fill_walls(self, x1, y1, x2, y2):
        """Wall off the inclusive cell rectangle (x1, y1)-(x2, y2)"""
        self.cells[y1:y2 + 1, x1:x2 + 1] = WALL

    def enclose(self):
        """Turn every border cell into a wall"""
        self.cells[0, :] = WALL
        self.cells[-1, :] = WALL
        self.cells[:, 0] = WALL
        self.cells[:, -1] = WALL

    def freeze(self):
        """Make the grid read-only"""
        self.cells.setflags(write=False)

    @property
    def frozen(self):
        return not self.cells.flags.writeable

    def wall_count(self):
        return int(np.count_nonzero(self.cells == WALL))

    # ========== CELL GEOMETRY ==========

    def cell_rect(self, x, y, cell_size):
        """Pixel rectangle (x, y, w, h) of a cell"""
        return x * cell_size, y * cell_size, cell_size, cell_size

    def cell_at(self, px, py, cell_size):
        """Cell containing a pixel position"""
        return int(math.floor(px / cell_size)), int(math.floor(py / cell_size))

    def cells_in_rect(self, rect_x, rect_y, rect_w, rect_h, cell_size):
        """All in-bounds cells covered by a pixel rectangle"""
        return cells_in_rect(rect_x, rect_y, rect_w, rect_h, cell_size, self.cols, self.rows)

    # ========== REACHABILITY ==========

    def reachable_from(self, start):
        """2D uint8 mask of cells reachable from start"""
        return flood_fill(self.cells, start[0], start[1])

    def connects(self, start, goal_cells):
        """Check if any goal cell is reachable from start"""
        seen = self.reachable_from(start)
        return any(seen[y, x] for x, y in goal_cells if self.in_bounds(x, y))

    def __repr__(self):
        return f"MazeGrid({self.cols}x{self.rows}, walls={self.wall_count()})"


def cell_size_for(width, cols):
    """Cell size in pixels: grid resolution follows the playfield width"""
    return max(1, int(width // cols))


def cells_in_rect(rect_x, rect_y, rect_w, rect_h, cell_size, cols, rows):
    """All cells of a cols x rows grid covered by a pixel rectangle"""
    x1 = max(0, int(math.floor(rect_x / cell_size)))
    y1 = max(0, int(math.floor(rect_y / cell_size)))
    x2 = min(cols - 1, int(math.ceil((rect_x + rect_w) / cell_size)) - 1)
    y2 = min(rows - 1, int(math.ceil((rect_y + rect_h) / cell_size)) - 1)
    return [(x, y) for y in range(y1, y2 + 1) for x in range(x1, x2 + 1)]
