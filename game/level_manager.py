"""
Level Manager - game session state and per-level setup
"""

import random
from dataclasses import dataclass, field
from typing import List, Optional

from utils.constants import (
    PLAYFIELD_WIDTH, PLAYFIELD_HEIGHT, PLAYER_SPAWN,
    BUTTON_WIDTH, BUTTON_HEIGHT, BUTTON_SPAWN_OFFSET, BUTTON_FLEE_SPAWN_OFFSET,
    MAZE_COLS, MAZE_ROWS, MAZE_SPAWN_CELL, STATUS_MESSAGES
)
from entities.player import Player
from entities.hazard import Hazard, spawn_hazards
from entities.button import Button
from maze.generator import build_maze
from maze.maze_core import MazeGrid, cell_size_for, cells_in_rect
from game.game_state import LevelId, GameState, PendingTransition


@dataclass
class DodgeLevel:
    """Level 1: bouncing stars"""
    hazards: List[Hazard] = field(default_factory=list)


@dataclass
class MazeLevel:
    """Level 2: tile maze"""
    grid: MazeGrid
    cell_size: int


@dataclass
class FleeLevel:
    """Level 3: the button runs away"""


class GameSession:
    """
    All mutable game state: one active level and its entities
    """
    def __init__(self, width=PLAYFIELD_WIDTH, height=PLAYFIELD_HEIGHT, seed=None):
        """
        Args:
            width, height: Playfield size in pixels
            seed: Optional seed for hazard randomization
        """
        self.width = width
        self.height = height
        self.rng = random.Random(seed)

        self.level = LevelId.DODGE
        self.player = Player(*PLAYER_SPAWN)
        self.button = Button(0, 0)
        self.level_data = DodgeLevel()

        # Level state
        self.elapsed = 0.0
        self.pending: Optional[PendingTransition] = None
        self.won = False
        self.status = ""

    @property
    def state(self):
        if self.won:
            return GameState.WON
        if self.pending is not None:
            return GameState.LEVEL_COMPLETE
        return GameState.PLAYING

    def __repr__(self):
        return f"GameSession(level={self.level.name}, state={self.state.name}, t={self.elapsed:.1f})"


def button_spawn(width, height, level):
    """Top-left corner of the button at the start of a level"""
    off_x, off_y = BUTTON_FLEE_SPAWN_OFFSET if level == LevelId.FLEE else BUTTON_SPAWN_OFFSET
    return width - off_x, height - off_y


def maze_goal_cells(width, height, cell_size):
    """Maze cells under the maze level's button"""
    bx, by = button_spawn(width, height, LevelId.MAZE)
    return cells_in_rect(bx, by, BUTTON_WIDTH, BUTTON_HEIGHT, cell_size, MAZE_COLS, MAZE_ROWS)


def start_level(session, level):
    """
    (Re)initialize a level from scratch

    Every level-scoped entity is discarded and rebuilt: hazards get new random
    positions, the maze is rebuilt from its fixed layout.
    """
    level = LevelId(level)
    session.level = level
    session.elapsed = 0.0
    session.pending = None
    session.won = False
    session.status = STATUS_MESSAGES[level]

    session.player.reset_position(*PLAYER_SPAWN)
    session.button.reset(*button_spawn(session.width, session.height, level))

    if level == LevelId.DODGE:
        session.level_data = DodgeLevel(spawn_hazards(session.width, session.height, session.rng))

    elif level == LevelId.MAZE:
        cell_size = cell_size_for(session.width, MAZE_COLS)
        grid = build_maze(MAZE_COLS, MAZE_ROWS,
                          goal_cells=maze_goal_cells(session.width, session.height, cell_size))
        session.level_data = MazeLevel(grid, cell_size)

        sx, sy = MAZE_SPAWN_CELL
        session.player.reset_position(sx * cell_size + cell_size / 2,
                                      sy * cell_size + cell_size / 2)

    else:
        session.level_data = FleeLevel()

    return session


def create_session(width=PLAYFIELD_WIDTH, height=PLAYFIELD_HEIGHT, seed=None, level=LevelId.DODGE):
    """Create a session and start its first level"""
    session = GameSession(width, height, seed)
    return start_level(session, level)
