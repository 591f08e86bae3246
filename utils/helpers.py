"""
Helper utility functions for Press the Button
"""

import math


def clamp(value, min_value, max_value):
    """Clamp a value between min and max"""
    return max(min_value, min(value, max_value))


def sign(value):
    """Sign of a number as -1, 0 or 1"""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def distance(x1, y1, x2, y2):
    """Calculate Euclidean distance between two points"""
    return math.hypot(x2 - x1, y2 - y1)


def normalize(x, y, fallback=(1.0, 0.0)):
    """
    Normalize a vector to unit length

    A zero-length vector has no direction, so the fallback unit vector is
    returned instead.
    """
    length = math.hypot(x, y)
    if length == 0:
        return fallback
    return x / length, y / length


def nearest_point_on_rect(px, py, rect_x, rect_y, rect_w, rect_h):
    """Closest point of a rectangle to (px, py)"""
    return (clamp(px, rect_x, rect_x + rect_w),
            clamp(py, rect_y, rect_y + rect_h))


def circle_rect_overlap(cx, cy, radius, rect_x, rect_y, rect_w, rect_h):
    """Check if a circle touches or overlaps a rectangle"""
    nx, ny = nearest_point_on_rect(cx, cy, rect_x, rect_y, rect_w, rect_h)
    dx = cx - nx
    dy = cy - ny
    return dx * dx + dy * dy <= radius * radius


def circles_collide(x1, y1, r1, x2, y2, r2):
    """Check if two circles collide"""
    return distance(x1, y1, x2, y2) < (r1 + r2)


def pulse(time, frequency=1.0):
    """Generate a pulsing value (0-1) over time"""
    return (math.sin(time * frequency * math.pi * 2) + 1) / 2
