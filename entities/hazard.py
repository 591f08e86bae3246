"""
Hazard entities for the dodge level
Stars that drift across the playfield and bounce off its edges
"""

from utils.constants import (
    HAZARD_COUNT, HAZARD_SIZE, HAZARD_SPEED_MIN, HAZARD_SPEED_RANGE,
    HAZARD_SPAWN_MARGIN, HAZARD_SPAWN_SPAN_TRIM
)


class Hazard:
    """
    A bouncing star with a square collision size
    """
    def __init__(self, x, y, vx, vy, size=HAZARD_SIZE):
        """
        Args:
            x, y: Centre position in pixels
            vx, vy: Velocity in pixels per nominal frame
            size: Side of the square sprite
        """
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.size = size

    @property
    def half_size(self):
        return self.size / 2

    def update(self, dt, width, height):
        """
        Advance by velocity * dt and bounce off the playfield edges

        An axis is flipped only while the star is past the edge and still
        heading outwards, so a star that overshoots turns back once instead of
        flipping every frame. The position itself is not corrected.
        """
        self.x += self.vx * dt
        self.y += self.vy * dt

        half = self.half_size
        if (self.x < half and self.vx < 0) or (self.x > width - half and self.vx > 0):
            self.vx = -self.vx
        if (self.y < half and self.vy < 0) or (self.y > height - half and self.vy > 0):
            self.vy = -self.vy

    def speed_squared(self):
        return self.vx * self.vx + self.vy * self.vy

    def __repr__(self):
        return f"Hazard(pos=({self.x:.1f},{self.y:.1f}), vel=({self.vx:.2f},{self.vy:.2f}))"


def _random_axis_speed(rng):
    magnitude = rng.random() * HAZARD_SPEED_RANGE + HAZARD_SPEED_MIN
    return magnitude if rng.random() < 0.5 else -magnitude


def spawn_hazards(width, height, rng, count=HAZARD_COUNT):
    """
    Create a fresh set of hazards at random positions and velocities

    Args:
        width, height: Playfield size
        rng: random.Random instance
        count: Number of hazards

    Returns:
        List of Hazard
    """
    left, top = HAZARD_SPAWN_MARGIN
    trim_w, trim_h = HAZARD_SPAWN_SPAN_TRIM
    span_w = max(0, width - trim_w)
    span_h = max(0, height - trim_h)

    hazards = []
    for _ in range(count):
        x = left + rng.random() * span_w
        y = top + rng.random() * span_h
        vx = _random_axis_speed(rng)
        vy = _random_axis_speed(rng)
        hazards.append(Hazard(x, y, vx, vy))
    return hazards
