"""
UI Manager - HUD panel under the playfield
"""

import pygame

from utils.colors import COLOR_PANEL_BG, COLOR_INK, COLOR_TEXT_DIM, COLOR_ACCENT

HINT_TEXT = "WASD / Arrows: move   R: reset level   M: sound   Esc: quit"


class UIManager:
    """
    Draws the level label, status line and control hints
    """
    def __init__(self):
        self.font_small = None
        self.font_medium = None
        self._init_fonts()

    def _init_fonts(self):
        """Initialize fonts"""
        pygame.font.init()
        self.font_small = pygame.font.Font(None, 18)
        self.font_medium = pygame.font.Font(None, 26)

    def draw_hud(self, screen, snapshot, panel_y, screen_w, panel_h):
        """
        Draw HUD (Heads-Up Display)

        Args:
            screen: Pygame screen
            snapshot: GameSnapshot
            panel_y: Y position of panel
            screen_w: Screen width
            panel_h: Panel height
        """
        pygame.draw.rect(screen, COLOR_PANEL_BG, (0, panel_y, screen_w, panel_h))
        pygame.draw.line(screen, COLOR_INK, (0, panel_y), (screen_w, panel_y), 2)

        # Level label (left)
        label = self.font_medium.render(f"Level {int(snapshot.level)}", True, COLOR_ACCENT)
        screen.blit(label, (12, panel_y + 6))

        # Status (after the label)
        status = self.font_medium.render(snapshot.status, True, COLOR_INK)
        screen.blit(status, (120, panel_y + 6))

        # Sound state (right)
        sound = self.font_small.render(f"Sound: {'On' if snapshot.sound_on else 'Off'}", True, COLOR_TEXT_DIM)
        screen.blit(sound, (screen_w - sound.get_width() - 12, panel_y + 8))

        # Hints (bottom)
        hints = self.font_small.render(HINT_TEXT, True, COLOR_TEXT_DIM)
        screen.blit(hints, (12, panel_y + panel_h - hints.get_height() - 4))
