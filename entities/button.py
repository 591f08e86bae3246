"""
The button: the goal object of every level
"""

from utils.constants import BUTTON_WIDTH, BUTTON_HEIGHT, FLEE_MARGIN
from utils.helpers import clamp


class Button:
    """
    Goal rectangle with a pressed flag
    Position is the top-left corner
    """
    def __init__(self, x, y, width=BUTTON_WIDTH, height=BUTTON_HEIGHT):
        self.x = float(x)
        self.y = float(y)
        self.width = width
        self.height = height
        self.pressed = False

    @property
    def center(self):
        return self.x + self.width / 2, self.y + self.height / 2

    @property
    def rect(self):
        return self.x, self.y, self.width, self.height

    def press(self):
        """
        Press the button
        Returns True only the first time
        """
        if self.pressed:
            return False
        self.pressed = True
        return True

    def displace(self, dx, dy):
        self.x += dx
        self.y += dy

    def clamp_to(self, width, height, margin=FLEE_MARGIN):
        """Keep the whole button inside the playfield with a margin"""
        self.x = clamp(self.x, margin, width - self.width - margin)
        self.y = clamp(self.y, margin, height - self.height - margin)

    def reset(self, x, y):
        """Move to a spawn point and release"""
        self.x = float(x)
        self.y = float(y)
        self.pressed = False

    def __repr__(self):
        return f"Button(pos=({self.x:.1f},{self.y:.1f}), pressed={self.pressed})"
