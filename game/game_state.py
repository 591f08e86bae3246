"""
Game states, levels and the events a simulation tick can produce
"""

from dataclasses import dataclass
from enum import Enum, IntEnum, auto

from utils.constants import LEVEL_DODGE, LEVEL_MAZE, LEVEL_FLEE, LEVEL_COUNT


class LevelId(IntEnum):
    """The three levels, in play order"""
    DODGE = LEVEL_DODGE
    MAZE = LEVEL_MAZE
    FLEE = LEVEL_FLEE

    def next(self):
        """Following level, or None after the last one"""
        if self.value >= LEVEL_COUNT:
            return None
        return LevelId(self.value + 1)


class Direction(Enum):
    """Movement directions read from the keyboard"""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


class GameState(Enum):
    """Game states"""
    PLAYING = auto()
    LEVEL_COMPLETE = auto()  # button pressed, waiting to advance
    WON = auto()             # terminal


class TickEvent(Enum):
    """Outcome of one simulation tick"""
    RESET = auto()           # player touched a hazard
    LEVEL_COMPLETE = auto()  # button pressed, advance is pending
    ADVANCE = auto()         # pending delay ran out
    WON = auto()             # final button pressed


@dataclass
class PendingTransition:
    """Level change that fires once remaining_ms reaches zero"""
    target: LevelId
    remaining_ms: float
