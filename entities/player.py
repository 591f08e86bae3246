"""
Player entity: a circle steered by the held directions
"""

from utils.constants import PLAYER_RADIUS, PLAYER_SPEED, PLAYER_SPRITE_SIZE
from utils.helpers import clamp


class Player:
    """
    Player entity with position and collision circle
    """
    def __init__(self, x, y, radius=PLAYER_RADIUS, speed=PLAYER_SPEED):
        self.x = float(x)
        self.y = float(y)
        self.radius = radius
        self.speed = speed

        # Sprite size (drawing only)
        self.width = PLAYER_SPRITE_SIZE
        self.height = PLAYER_SPRITE_SIZE

    def move(self, dx, dy, distance):
        """
        Move player along (dx, dy) where each component is -1, 0 or 1

        Diagonals are not normalized, matching the keyboard feel of the game.
        """
        self.x += dx * distance
        self.y += dy * distance

    def clamp_to(self, width, height):
        """Keep the whole circle inside the playfield"""
        self.x = clamp(self.x, self.radius, width - self.radius)
        self.y = clamp(self.y, self.radius, height - self.radius)

    def reset_position(self, x, y):
        """Reset player to a spawn point"""
        self.x = float(x)
        self.y = float(y)

    def __repr__(self):
        return f"Player(pos=({self.x:.1f},{self.y:.1f}), r={self.radius})"
