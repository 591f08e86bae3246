import os

# Headless pygame for the boundary tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from game.game_flow import GameFlow
from game.game_state import LevelId
from game.level_manager import create_session


@pytest.fixture
def dodge_session():
    return create_session(seed=7)


@pytest.fixture
def maze_session():
    return create_session(seed=7, level=LevelId.MAZE)


@pytest.fixture
def flee_session():
    return create_session(seed=7, level=LevelId.FLEE)


class RecordingSound:
    """Stands in for SoundPlayer and remembers every cue"""
    def __init__(self):
        self.enabled = True
        self.cues = []

    def play(self, cue):
        self.cues.append(cue)
        return True

    def toggle(self):
        self.enabled = not self.enabled
        return self.enabled


@pytest.fixture
def recording_sound():
    return RecordingSound()


@pytest.fixture
def flow(dodge_session, recording_sound):
    return GameFlow(dodge_session, recording_sound)
