"""
Press the Button
Three levels: dodge the stars, walk the maze, corner the runaway button
"""

import argparse
import sys

import pygame

from game.audio import SoundPlayer
from game.game_flow import GameFlow
from game.game_state import LevelId, TickEvent
from game.input_state import InputState
from game.level_manager import create_session
from game.renderer import Renderer
from game.sprites import SpriteManager
from game.ui_manager import UIManager
from utils.colors import COLOR_BG
from utils.constants import FPS, FRAME_MS, PANEL_H, PLAYFIELD_WIDTH, PLAYFIELD_HEIGHT
from config import GAME_TITLE, GAME_VERSION


class PressTheButtonGame:
    """
    Main game class
    """
    def __init__(self, seed=None, sound=False, fps=FPS, start_level=LevelId.DODGE):
        pygame.init()

        self.screen_w = PLAYFIELD_WIDTH
        self.screen_h = PLAYFIELD_HEIGHT + PANEL_H
        self.screen = pygame.display.set_mode((self.screen_w, self.screen_h), pygame.SCALED | pygame.RESIZABLE)
        pygame.display.set_caption(f"{GAME_TITLE} v{GAME_VERSION}")

        # Simulation
        self.session = create_session(PLAYFIELD_WIDTH, PLAYFIELD_HEIGHT, seed=seed, level=start_level)
        self.sound = SoundPlayer(enabled=sound)
        self.game_flow = GameFlow(self.session, self.sound)

        # Input and presentation
        self.input_state = InputState()
        self.sprites = SpriteManager()
        self.sprites.preload()
        self.renderer = Renderer(self.sprites)
        self.ui_manager = UIManager()

        self.clock = pygame.time.Clock()
        self.fps = fps
        self.running = True

    def handle_events(self):
        """Handle input events"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return

            if event.type == pygame.KEYDOWN:
                self._handle_keydown(event.key)

            elif event.type == pygame.KEYUP:
                self.input_state.release(event.key)

            elif event.type == pygame.WINDOWFOCUSLOST:
                self.input_state.clear()

    def _handle_keydown(self, key):
        if self.input_state.press(key):
            return

        if key == pygame.K_ESCAPE:
            self.running = False
        elif key == pygame.K_r:
            self.game_flow.restart_level()
        elif key == pygame.K_m:
            on = self.game_flow.toggle_sound()
            print(f"Sound: {'On' if on else 'Off'}")

    def update(self, dt):
        """Update game state"""
        event = self.game_flow.update(self.input_state.snapshot(), dt)
        if event == TickEvent.ADVANCE:
            print(f"Level {int(self.session.level)}: {self.session.status}")
        elif event == TickEvent.WON:
            print(f"{self.session.status} ({self.session.elapsed / FPS:.1f}s on the last level)")

    def render(self):
        """Render current game state"""
        self.screen.fill(COLOR_BG)
        snapshot = self.game_flow.snapshot()
        self.renderer.draw(self.screen, snapshot)
        self.ui_manager.draw_hud(self.screen, snapshot, PLAYFIELD_HEIGHT, self.screen_w, PANEL_H)
        pygame.display.flip()

    def run(self):
        """Main game loop"""
        print(f"{GAME_TITLE} v{GAME_VERSION}")
        while self.running:
            dt_ms = self.clock.tick(self.fps)
            dt = dt_ms / FRAME_MS

            self.handle_events()
            self.update(dt)
            self.render()

        pygame.quit()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=f"{GAME_TITLE}: dodge, solve, chase")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for star placement (default: random)",
    )
    parser.add_argument(
        "--sound",
        action="store_true",
        help="Start with sound on (toggle in game with M)",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=FPS,
        help=f"Frame rate cap (default: {FPS})",
    )
    parser.add_argument(
        "--level",
        type=int,
        default=int(LevelId.DODGE),
        choices=[int(level) for level in LevelId],
        help="Level to start on (default: 1)",
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Entry point"""
    args = parse_args(argv)
    game = PressTheButtonGame(seed=args.seed, sound=args.sound, fps=args.fps,
                              start_level=LevelId(args.level))
    game.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
