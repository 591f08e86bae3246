"""
Immutable per-frame view of the game for rendering
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from game.game_state import LevelId, GameState
from game.level_manager import DodgeLevel, MazeLevel


@dataclass(frozen=True)
class PlayerView:
    x: float
    y: float
    radius: float
    width: int
    height: int


@dataclass(frozen=True)
class HazardView:
    x: float
    y: float
    size: float


@dataclass(frozen=True, eq=False)
class MazeView:
    cells: np.ndarray  # read-only (rows, cols), 1=wall
    cols: int
    rows: int
    cell_size: int


@dataclass(frozen=True)
class ButtonView:
    x: float
    y: float
    width: int
    height: int
    pressed: bool


@dataclass(frozen=True)
class GameSnapshot:
    level: LevelId
    state: GameState
    status: str
    width: int
    height: int
    player: PlayerView
    button: ButtonView
    hazards: Tuple[HazardView, ...] = ()
    maze: Optional[MazeView] = None
    elapsed: float = 0.0
    sound_on: bool = False


def build_snapshot(session, sound_on=False):
    """Copy the render-relevant parts of a session"""
    player = session.player
    button = session.button
    data = session.level_data

    hazards = ()
    maze = None
    if isinstance(data, DodgeLevel):
        hazards = tuple(HazardView(h.x, h.y, h.size) for h in data.hazards)
    elif isinstance(data, MazeLevel):
        cells = data.grid.cells
        if cells.flags.writeable:
            cells = cells.copy()
            cells.setflags(write=False)
        maze = MazeView(cells, data.grid.cols, data.grid.rows, data.cell_size)

    return GameSnapshot(
        level=session.level,
        state=session.state,
        status=session.status,
        width=session.width,
        height=session.height,
        player=PlayerView(player.x, player.y, player.radius, player.width, player.height),
        button=ButtonView(button.x, button.y, button.width, button.height, button.pressed),
        hazards=hazards,
        maze=maze,
        elapsed=session.elapsed,
        sound_on=sound_on,
    )
