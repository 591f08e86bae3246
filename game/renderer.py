"""
Playfield renderer - draws a GameSnapshot with pygame
"""

import math

import pygame

from game.game_state import GameState, LevelId
from game.sprites import SpriteManager
from utils.colors import (
    COLOR_BG, COLOR_GRID, COLOR_SQUIGGLE, COLOR_INK, COLOR_PLAYER, COLOR_STAR,
    COLOR_BUTTON, COLOR_BUTTON_PRESSED, COLOR_MAZE_WALL, COLOR_MAZE_WALL_EDGE
)
from utils.helpers import pulse

GRID_STEP = 16


class Renderer:
    """
    Draws the playfield; never touches simulation state
    """
    def __init__(self, sprites=None):
        self.sprites = sprites or SpriteManager()

    def draw(self, surface, snapshot):
        """
        Draw one frame

        Args:
            surface: Target pygame surface (playfield at its top-left)
            snapshot: GameSnapshot
        """
        self._draw_background(surface, snapshot)
        self._draw_squiggles(surface, snapshot)

        for hazard in snapshot.hazards:
            self._draw_hazard(surface, hazard)

        if snapshot.maze is not None:
            self._draw_maze(surface, snapshot.maze)

        self._draw_button(surface, snapshot)
        self._draw_player(surface, snapshot.player)

    def _draw_background(self, surface, snapshot):
        surface.fill(COLOR_BG, (0, 0, snapshot.width, snapshot.height))
        for x in range(0, snapshot.width, GRID_STEP):
            pygame.draw.line(surface, COLOR_GRID, (x, 0), (x, snapshot.height))
        for y in range(0, snapshot.height, GRID_STEP):
            pygame.draw.line(surface, COLOR_GRID, (0, y), (snapshot.width, y))

    def _draw_squiggles(self, surface, snapshot):
        """Faint wavy aroma lines drifting with time"""
        t = snapshot.elapsed
        for i in range(5):
            base_y = 60 + i * 80
            points = []
            for x in range(40, snapshot.width - 40, 20):
                points.append((x, base_y + math.sin((t * 0.12 + x) * 0.03) * 16))
            if len(points) > 1:
                pygame.draw.lines(surface, COLOR_SQUIGGLE, False, points, 2)

    def _draw_hazard(self, surface, hazard):
        half = hazard.size / 2
        sprite = self.sprites.get('star')
        if sprite is not None:
            surface.blit(sprite, (hazard.x - half, hazard.y - half))
        else:
            pygame.draw.circle(surface, COLOR_STAR, (int(hazard.x), int(hazard.y)), int(half))

    def _draw_maze(self, surface, maze):
        s = maze.cell_size
        for y in range(maze.rows):
            for x in range(maze.cols):
                if maze.cells[y, x]:
                    rect = pygame.Rect(x * s, y * s, s, s)
                    pygame.draw.rect(surface, COLOR_MAZE_WALL, rect)
                    pygame.draw.rect(surface, COLOR_MAZE_WALL_EDGE, rect.inflate(-1, -1), 1)

    def _draw_button(self, surface, snapshot):
        button = snapshot.button
        rect = pygame.Rect(int(button.x), int(button.y), button.width, button.height)

        # Breathing outline while the button is on the run
        if snapshot.state == GameState.PLAYING and snapshot.level == LevelId.FLEE:
            grow = int(2 + 4 * pulse(snapshot.elapsed / 60.0))
            pygame.draw.rect(surface, COLOR_BUTTON, rect.inflate(grow * 2, grow * 2), 2, border_radius=12)

        sprite = self.sprites.get('button_pressed' if button.pressed else 'button')
        if sprite is not None:
            surface.blit(sprite, rect.topleft)
        else:
            color = COLOR_BUTTON_PRESSED if button.pressed else COLOR_BUTTON
            pygame.draw.rect(surface, color, rect, border_radius=10)
            pygame.draw.rect(surface, COLOR_INK, rect, 2, border_radius=10)

    def _draw_player(self, surface, player):
        sprite = self.sprites.get('player')
        if sprite is not None:
            surface.blit(sprite, (player.x - player.width / 2, player.y - player.height / 2))
        else:
            pygame.draw.circle(surface, COLOR_PLAYER, (int(player.x), int(player.y)), int(player.radius))
