"""
Keyboard state - the set of held directional keys
"""

from dataclasses import dataclass
from typing import FrozenSet

import pygame

from game.game_state import Direction


# WASD and arrow keys
KEY_BINDINGS = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}


@dataclass(frozen=True)
class Controls:
    """Immutable view of the held directions for one tick"""
    held: FrozenSet[Direction] = frozenset()

    def is_held(self, direction):
        return direction in self.held

    @classmethod
    def of(cls, *directions):
        return cls(frozenset(directions))


class InputState:
    """
    Tracks held keys between frames
    Updated from key events, read once per tick through snapshot()
    """
    def __init__(self, bindings=None):
        self.bindings = dict(KEY_BINDINGS if bindings is None else bindings)
        self.held_keys = set()

    def press(self, key):
        """
        Register a key press
        Returns True if the key is a movement key
        """
        if key not in self.bindings:
            return False
        self.held_keys.add(key)
        return True

    def release(self, key):
        self.held_keys.discard(key)

    def clear(self):
        """Forget every held key (e.g. when the window loses focus)"""
        self.held_keys.clear()

    def is_held(self, direction):
        return any(self.bindings[key] == direction for key in self.held_keys)

    def snapshot(self):
        return Controls(frozenset(self.bindings[key] for key in self.held_keys))

    def __repr__(self):
        names = sorted(d.name for d in self.snapshot().held)
        return f"InputState(held={names})"
