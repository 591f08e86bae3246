"""
Collision detection and handling
"""

import math

from utils.constants import HAZARD_HIT_FACTOR
from utils.helpers import circle_rect_overlap, circles_collide, nearest_point_on_rect, sign


def hazard_hits_player(player, hazard):
    """
    Check if a star touches the player

    The star's hit circle is smaller than its sprite. The test is strict:
    at exactly the threshold distance nothing happens.
    """
    return circles_collide(player.x, player.y, player.radius,
                           hazard.x, hazard.y, hazard.size * HAZARD_HIT_FACTOR)


def first_hazard_hit(player, hazards):
    """Return the first hazard touching the player, or None"""
    for hazard in hazards:
        if hazard_hits_player(player, hazard):
            return hazard
    return None


def player_touches_button(player, button):
    """Check if the player circle overlaps the button rectangle"""
    return circle_rect_overlap(player.x, player.y, player.radius, *button.rect)


def wall_cells_near(player, grid, cell_size):
    """
    Wall cells in a small window around the player

    The window covers the cells under the player's bounding box padded by one
    cell, so the work per tick does not depend on the maze size.

    Returns:
        List of (x, y) wall cells in row-major order
    """
    r = player.radius
    min_x = max(0, math.floor((player.x - r) / cell_size) - 1)
    max_x = min(grid.cols - 1, math.floor((player.x + r) / cell_size) + 1)
    min_y = max(0, math.floor((player.y - r) / cell_size) - 1)
    max_y = min(grid.rows - 1, math.floor((player.y + r) / cell_size) + 1)

    cells = []
    for y in range(min_y, max_y + 1):
        for x in range(min_x, max_x + 1):
            if grid.is_wall(x, y):
                cells.append((x, y))
    return cells


def push_out_of_cell(player, rect_x, rect_y, rect_w, rect_h):
    """
    Push the player out of one wall rectangle

    Works on the vector from the nearest point of the rectangle to the player
    centre and moves along one axis only, which lets the player slide along
    walls. The push is at least 1 pixel.

    Returns:
        True if the player was moved
    """
    if not circle_rect_overlap(player.x, player.y, player.radius, rect_x, rect_y, rect_w, rect_h):
        return False

    nx, ny = nearest_point_on_rect(player.x, player.y, rect_x, rect_y, rect_w, rect_h)
    dx = player.x - nx
    dy = player.y - ny

    if dx == 0 and dy == 0:
        # Centre inside the cell: push away from the cell centre, up if centred
        dx = player.x - (rect_x + rect_w / 2)
        dy = player.y - (rect_y + rect_h / 2)
        if dx == 0 and dy == 0:
            dy = -1.0

    push = max(1.0, player.radius - min(abs(dx), abs(dy)))
    if abs(dx) > abs(dy):
        player.x += sign(dx) * push
    else:
        player.y += sign(dy) * push
    return True


def resolve_wall_collisions(player, grid, cell_size):
    """
    Separate the player from every nearby wall cell

    Cells are resolved one after another in grid scan order.

    Returns:
        Number of pushes applied
    """
    pushes = 0
    for x, y in wall_cells_near(player, grid, cell_size):
        if push_out_of_cell(player, *grid.cell_rect(x, y, cell_size)):
            pushes += 1
    return pushes
