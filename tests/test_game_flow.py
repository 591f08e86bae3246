import dataclasses

import numpy as np
import pytest

from entities.hazard import Hazard
from game.audio import AudioCue
from game.game_flow import GameFlow
from game.game_state import LevelId, GameState, TickEvent
from game.input_state import Controls, Direction
from game.level_manager import create_session, DodgeLevel, MazeLevel
from game.simulation import tick

NO_INPUT = Controls()


def run_until_event(flow, controls, limit):
    for _ in range(limit):
        event = flow.update(controls, 1.0)
        if event is not None:
            return event
    return None


def teleport_onto_button(session):
    session.player.reset_position(*session.button.center)


def test_starts_on_level_one(flow):
    assert flow.level == LevelId.DODGE
    assert flow.state == GameState.PLAYING
    assert isinstance(flow.session.level_data, DodgeLevel)
    assert flow.session.status.startswith("Dodge")


def test_walk_onto_button_then_advance_to_maze(flow, recording_sound):
    session = flow.session
    session.level_data.hazards = []
    session.button.x, session.button.y = 820, 470

    run_until_event(flow, Controls.of(Direction.DOWN), 140)
    assert session.player.y == 480

    assert run_until_event(flow, Controls.of(Direction.RIGHT), 300) == TickEvent.LEVEL_COMPLETE
    assert session.button.pressed
    assert recording_sound.cues == [AudioCue.LEVEL_COMPLETE]

    assert run_until_event(flow, NO_INPUT, 40) == TickEvent.ADVANCE
    assert flow.level == LevelId.MAZE
    assert isinstance(session.level_data, MazeLevel)
    assert not session.button.pressed
    assert session.pending is None
    assert session.elapsed == 0


def test_full_run_reaches_terminal_win(flow, recording_sound):
    session = flow.session
    session.level_data.hazards = []
    levels = [flow.level]

    for _ in range(2):
        teleport_onto_button(session)
        assert flow.update(NO_INPUT, 1.0) == TickEvent.LEVEL_COMPLETE
        assert run_until_event(flow, NO_INPUT, 40) == TickEvent.ADVANCE
        levels.append(flow.level)

    teleport_onto_button(session)
    assert flow.update(NO_INPUT, 1.0) == TickEvent.WON
    assert levels == [LevelId.DODGE, LevelId.MAZE, LevelId.FLEE]
    assert flow.state == GameState.WON
    assert recording_sound.cues == [AudioCue.LEVEL_COMPLETE, AudioCue.LEVEL_COMPLETE, AudioCue.WIN]

    # Nothing leaves the won state on its own
    assert run_until_event(flow, Controls.of(Direction.LEFT), 100) is None
    assert flow.state == GameState.WON


def test_hazard_touch_restarts_with_new_hazards(flow, recording_sound):
    session = flow.session
    before = [(h.x, h.y, h.vx, h.vy) for h in session.level_data.hazards]
    session.player.reset_position(300, 300)
    session.level_data.hazards.append(Hazard(300, 300, 0.0, 0.0))

    assert flow.update(NO_INPUT, 1.0) == TickEvent.RESET
    assert flow.level == LevelId.DODGE
    assert (session.player.x, session.player.y) == (60, 60)
    after = [(h.x, h.y, h.vx, h.vy) for h in session.level_data.hazards]
    assert len(after) == 8
    assert after != before
    assert recording_sound.cues == [AudioCue.HAZARD_COLLISION]


def test_restart_rerandomizes_hazards(flow):
    before = flow.session.level_data
    flow.restart_level()
    assert flow.session.level_data is not before
    assert [(h.x, h.y) for h in flow.session.level_data.hazards] != [(h.x, h.y) for h in before.hazards]


def test_restart_maze_keeps_layout(maze_session, recording_sound):
    flow = GameFlow(maze_session, recording_sound)
    old_grid = maze_session.level_data.grid
    maze_session.player.reset_position(200, 100)

    flow.restart_level()
    assert maze_session.level_data.grid is not old_grid
    assert np.array_equal(maze_session.level_data.grid.cells, old_grid.cells)
    assert (maze_session.player.x, maze_session.player.y) == (45, 45)
    assert recording_sound.cues == [AudioCue.RESTART]


def test_restart_after_win_replays_last_level(flee_session):
    flow = GameFlow(flee_session)
    teleport_onto_button(flee_session)
    assert flow.update(NO_INPUT, 1.0) == TickEvent.WON

    flow.restart_level()
    assert flow.level == LevelId.FLEE
    assert flow.state == GameState.PLAYING
    assert not flee_session.button.pressed
    assert flee_session.elapsed == 0


def test_restart_during_pending_cancels_advance(flow):
    session = flow.session
    session.level_data.hazards = []
    teleport_onto_button(session)
    flow.update(NO_INPUT, 1.0)
    assert session.pending is not None

    flow.restart_level()
    assert session.pending is None
    assert flow.level == LevelId.DODGE


def test_elapsed_counts_frames_and_clamps_delta():
    session = create_session(seed=1)
    session.level_data.hazards = []
    tick(session, NO_INPUT, 1.0)
    tick(session, NO_INPUT, 0.5)
    assert session.elapsed == pytest.approx(1.5)
    tick(session, NO_INPUT, 100.0)
    assert session.elapsed == pytest.approx(4.5)
    tick(session, NO_INPUT, -2.0)
    assert session.elapsed == pytest.approx(4.5)


def test_large_delta_does_not_tunnel_player():
    session = create_session(seed=1)
    session.level_data.hazards = []
    tick(session, Controls.of(Direction.RIGHT), 1000.0)
    assert session.player.x == pytest.approx(60 + 3.0 * 3)


def test_opposite_keys_cancel(flow):
    flow.session.level_data.hazards = []
    flow.update(Controls.of(Direction.LEFT, Direction.RIGHT, Direction.UP), 1.0)
    assert flow.session.player.x == 60
    assert flow.session.player.y == 57


def test_player_clamped_to_playfield(flow):
    flow.session.level_data.hazards = []
    for _ in range(40):
        flow.update(Controls.of(Direction.UP, Direction.LEFT), 1.0)
    assert (flow.session.player.x, flow.session.player.y) == (12, 12)


def test_toggle_sound(dodge_session, recording_sound):
    assert GameFlow(dodge_session).toggle_sound() is False
    flow = GameFlow(dodge_session, recording_sound)
    assert flow.sound_on
    assert flow.toggle_sound() is False
    assert not flow.snapshot().sound_on


def test_same_seed_same_hazards():
    a = create_session(seed=99).level_data.hazards
    b = create_session(seed=99).level_data.hazards
    assert [(h.x, h.y, h.vx, h.vy) for h in a] == [(h.x, h.y, h.vx, h.vy) for h in b]


def test_snapshot_is_immutable_copy(flow):
    snapshot = flow.snapshot()
    assert snapshot.level == LevelId.DODGE
    assert len(snapshot.hazards) == 8
    assert snapshot.maze is None
    with pytest.raises(dataclasses.FrozenInstanceError):
        snapshot.player.x = 5

    flow.session.level_data.hazards = []
    flow.update(Controls.of(Direction.RIGHT), 1.0)
    assert snapshot.player.x == 60
    assert len(snapshot.hazards) == 8


def test_maze_snapshot(maze_session):
    snapshot = GameFlow(maze_session).snapshot()
    assert snapshot.hazards == ()
    assert snapshot.maze.cell_size == 30
    assert (snapshot.maze.cols, snapshot.maze.rows) == (30, 18)
    assert not snapshot.maze.cells.flags.writeable
