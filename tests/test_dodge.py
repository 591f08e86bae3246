import random

from entities.hazard import Hazard, spawn_hazards
from game.collision import hazard_hits_player
from game.game_state import TickEvent, GameState
from game.input_state import Controls
from game.simulation import tick
from utils.constants import HAZARD_COUNT, HAZARD_SPEED_MIN, HAZARD_SPEED_RANGE, HAZARD_HIT_FACTOR

NO_INPUT = Controls()


def test_spawn_hazards_ranges():
    hazards = spawn_hazards(900, 540, random.Random(1))
    assert len(hazards) == HAZARD_COUNT
    for h in hazards:
        assert 180 <= h.x < 180 + 640
        assert 120 <= h.y < 120 + 360
        for v in (h.vx, h.vy):
            assert HAZARD_SPEED_MIN <= abs(v) < HAZARD_SPEED_MIN + HAZARD_SPEED_RANGE


def test_hazards_stay_on_playfield_and_keep_speed():
    hazards = spawn_hazards(900, 540, random.Random(42))
    speeds = [h.speed_squared() for h in hazards]
    for _ in range(3000):
        for h in hazards:
            h.update(1.0, 900, 540)
            assert 0 <= h.x <= 900
            assert 0 <= h.y <= 540
    assert [h.speed_squared() for h in hazards] == speeds


def test_overshoot_turns_back_once():
    h = Hazard(13, 100, -2.0, 0.0)
    h.update(1.0, 900, 540)
    assert h.x == 11
    assert h.vx == 2.0
    h.update(1.0, 900, 540)
    assert h.x == 13
    assert h.vx == 2.0


def test_bounce_on_far_edges():
    h = Hazard(890, 530, 2.0, 2.0)
    h.update(1.0, 900, 540)
    assert h.vx == -2.0
    assert h.vy == -2.0


def test_exact_overlap_hits(dodge_session):
    player = dodge_session.player
    assert hazard_hits_player(player, Hazard(player.x, player.y, 0.0, 0.0))


def test_threshold_distance_does_not_hit(dodge_session):
    player = dodge_session.player
    player.reset_position(0, 100)
    probe = Hazard(0, 100, 0.0, 0.0)
    threshold = player.radius + probe.size * HAZARD_HIT_FACTOR
    assert not hazard_hits_player(player, Hazard(threshold, 100, 0.0, 0.0))
    assert hazard_hits_player(player, Hazard(threshold - 0.01, 100, 0.0, 0.0))


def test_touching_hazard_resets(dodge_session):
    player = dodge_session.player
    dodge_session.level_data.hazards = [Hazard(player.x, player.y, 0.0, 0.0)]
    assert tick(dodge_session, NO_INPUT, 1.0) == TickEvent.RESET


def test_button_press_arms_pending_advance(dodge_session):
    dodge_session.level_data.hazards = []
    cx, cy = dodge_session.button.center
    dodge_session.player.reset_position(cx, cy)

    assert tick(dodge_session, NO_INPUT, 1.0) == TickEvent.LEVEL_COMPLETE
    assert dodge_session.button.pressed
    assert dodge_session.state == GameState.LEVEL_COMPLETE
    assert dodge_session.pending.target == 2
    # Pressed only once
    assert tick(dodge_session, NO_INPUT, 1.0) is None


def test_hazards_ignored_while_advance_pending(dodge_session):
    dodge_session.level_data.hazards = []
    cx, cy = dodge_session.button.center
    dodge_session.player.reset_position(cx, cy)
    tick(dodge_session, NO_INPUT, 1.0)

    dodge_session.level_data.hazards = [Hazard(cx, cy, 0.0, 0.0)]
    assert tick(dodge_session, NO_INPUT, 1.0) is None


def test_advance_fires_after_delay(dodge_session):
    dodge_session.level_data.hazards = []
    cx, cy = dodge_session.button.center
    dodge_session.player.reset_position(cx, cy)
    tick(dodge_session, NO_INPUT, 1.0)

    ticks = 0
    event = None
    while event is None and ticks < 100:
        event = tick(dodge_session, NO_INPUT, 1.0)
        ticks += 1
    assert event == TickEvent.ADVANCE
    # 600 ms at 60 fps
    assert 35 <= ticks <= 37
