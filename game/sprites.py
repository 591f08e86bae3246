"""
Procedural sprite generation
Draws every sprite with pygame primitives, no image files needed
"""

import pygame

from utils.colors import (
    COLOR_INK, COLOR_PLAYER, COLOR_PLAYER_HIGHLIGHT, COLOR_STAR,
    COLOR_BUTTON, COLOR_BUTTON_PRESSED
)
from utils.constants import PLAYER_SPRITE_SIZE, HAZARD_SIZE, BUTTON_WIDTH, BUTTON_HEIGHT

# Five-point star outline on a 28x28 canvas
STAR_POINTS = [
    (14, 1), (17.6, 9.2), (26.6, 10.2), (19.8, 15.9), (21.8, 24.7),
    (14, 20.1), (6.2, 24.7), (8.2, 15.9), (1.4, 10.2), (10.4, 9.2),
]


class SpriteManager:
    """
    Resolves sprite names to cached surfaces
    """
    SPRITE_NAMES = ('player', 'star', 'button', 'button_pressed')

    def __init__(self):
        self._cache = {}
        self._font = None

    def get(self, name):
        """
        Get or generate a sprite

        Args:
            name: 'player', 'star', 'button' or 'button_pressed'

        Returns:
            pygame.Surface, or None for an unknown name or a failed draw
        """
        if name not in self._cache:
            try:
                self._cache[name] = self._generate(name)
            except pygame.error as e:
                print(f"Sprite '{name}' unavailable: {e}")
                self._cache[name] = None
        return self._cache[name]

    def preload(self):
        for name in self.SPRITE_NAMES:
            self.get(name)

    def _generate(self, name):
        if name == 'player':
            return self._generate_player()
        if name == 'star':
            return self._generate_star()
        if name == 'button':
            return self._generate_button(COLOR_BUTTON, "Press")
        if name == 'button_pressed':
            return self._generate_button(COLOR_BUTTON_PRESSED, "Pressed!")
        return None

    def _generate_player(self):
        size = PLAYER_SPRITE_SIZE
        surface = pygame.Surface((size, size), pygame.SRCALPHA)
        center = (size // 2, size // 2)
        pygame.draw.circle(surface, COLOR_PLAYER, center, 13)
        # Soft highlight towards the top
        pygame.draw.circle(surface, COLOR_PLAYER_HIGHLIGHT, (size // 2, size // 2 - 3), 8)
        pygame.draw.circle(surface, COLOR_INK, center, 13, 2)
        return surface

    def _generate_star(self):
        surface = pygame.Surface((HAZARD_SIZE, HAZARD_SIZE), pygame.SRCALPHA)
        pygame.draw.polygon(surface, COLOR_STAR, STAR_POINTS)
        pygame.draw.polygon(surface, COLOR_INK, STAR_POINTS, 1)
        return surface

    def _generate_button(self, fill, label):
        w, h = BUTTON_WIDTH, BUTTON_HEIGHT
        surface = pygame.Surface((w, h), pygame.SRCALPHA)
        rect = pygame.Rect(2, 2, w - 4, h - 4)
        pygame.draw.rect(surface, fill, rect, border_radius=10)
        pygame.draw.rect(surface, COLOR_INK, rect, 2, border_radius=10)

        text = self._get_font().render(label, True, COLOR_INK)
        surface.blit(text, text.get_rect(center=(w // 2, h // 2)))
        return surface

    def _get_font(self):
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.Font(None, 24)
        return self._font
