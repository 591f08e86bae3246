"""
Maze construction for the maze level
A fixed comb layout: interleaved barriers with single-cell gaps
"""

from utils.constants import (
    MAZE_COLS, MAZE_ROWS, MAZE_SPAWN_CELL,
    MAZE_BARRIER_COUNT, MAZE_BARRIER_STEP,
    MAZE_BARRIER_END_COL, MAZE_BARRIER_END_ROW
)
from maze.maze_core import MazeGrid, MazeLayoutError


def barrier_segments(cols, rows):
    """
    Wall segments of the comb layout, clipped to the grid interior

    Barrier k (1-based) is a horizontal bar on row 3k-1 running from column 3k
    to the right, plus a vertical bar down column 3k. Each gets one opening at
    (3k, 3k).

    Returns:
        (segments, openings): segments are inclusive (x1, y1, x2, y2) tuples,
        openings are (x, y) cells
    """
    segments = []
    openings = []
    end_col = min(MAZE_BARRIER_END_COL, cols - 2)
    end_row = min(MAZE_BARRIER_END_ROW, rows - 2)

    for k in range(1, MAZE_BARRIER_COUNT + 1):
        start = MAZE_BARRIER_STEP * k
        top = start - 1
        if start > end_col or top > end_row:
            break
        segments.append((start, top, end_col, top))
        segments.append((start, top, start, end_row))
        openings.append((start, start))

    return segments, openings


def build_maze(cols=MAZE_COLS, rows=MAZE_ROWS, goal_cells=None):
    """
    Build the maze level grid

    Args:
        cols, rows: Grid dimensions
        goal_cells: Cells that must be reachable from the spawn cell.
            Defaults to the cell diagonally next to the bottom-right corner.

    Returns:
        A frozen MazeGrid

    Raises:
        MazeLayoutError: if the spawn cell cannot reach the goal region
    """
    grid = MazeGrid(cols, rows)
    grid.enclose()

    segments, openings = barrier_segments(cols, rows)
    for x1, y1, x2, y2 in segments:
        grid.fill_walls(x1, y1, x2, y2)
    for x, y in openings:
        grid.set_open(x, y)

    corner = (cols - 2, rows - 2)
    grid.set_open(*corner)

    if goal_cells is None:
        goal_cells = [corner]
    if not grid.connects(MAZE_SPAWN_CELL, goal_cells):
        raise MazeLayoutError(f"maze {cols}x{rows} does not connect {MAZE_SPAWN_CELL} to the goal")

    grid.freeze()
    return grid
