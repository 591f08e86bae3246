"""
Per-frame simulation step for every level
"""

from utils.constants import (
    FRAME_MS, MAX_FRAME_DELTA, ADVANCE_DELAY_MS, MAZE_SPEED_MULTIPLIER,
    FLEE_RADIUS, FLEE_SPEED, STATUS_LEVEL_COMPLETE, STATUS_WIN
)
from utils.helpers import clamp, distance, normalize
from game.collision import first_hazard_hit, player_touches_button, resolve_wall_collisions
from game.game_state import Direction, TickEvent, PendingTransition
from game.level_manager import DodgeLevel, MazeLevel, FleeLevel


def input_axis(controls):
    """Held directions as (dx, dy), opposite keys cancel out"""
    dx = int(controls.is_held(Direction.RIGHT)) - int(controls.is_held(Direction.LEFT))
    dy = int(controls.is_held(Direction.DOWN)) - int(controls.is_held(Direction.UP))
    return dx, dy


def move_player(session, controls, dt, speed_multiplier=1.0):
    """Input-driven displacement, then keep the player on the playfield"""
    player = session.player
    dx, dy = input_axis(controls)
    if dx or dy:
        player.move(dx, dy, player.speed * speed_multiplier * dt)
    player.clamp_to(session.width, session.height)


def flee_button(button, player, width, height, dt):
    """
    Move the button away from a nearby player

    Inside the flee radius the button moves straight away from the player.
    The step shrinks linearly from the full flee speed (player on the centre)
    to zero (player on the radius). Outside the radius it stays put.

    Returns:
        True if the button moved
    """
    bx, by = button.center
    d = distance(player.x, player.y, bx, by)
    if d >= FLEE_RADIUS:
        return False

    falloff = (FLEE_RADIUS - d) / FLEE_RADIUS
    fx, fy = normalize(bx - player.x, by - player.y)
    step = FLEE_SPEED * falloff * dt
    button.displace(fx * step, fy * step)
    button.clamp_to(width, height)
    return True


def _check_button(session):
    """Arm the advance to the next level when the button gets pressed"""
    if not player_touches_button(session.player, session.button):
        return None
    if not session.button.press():
        return None
    session.pending = PendingTransition(session.level.next(), ADVANCE_DELAY_MS)
    session.status = STATUS_LEVEL_COMPLETE
    return TickEvent.LEVEL_COMPLETE


def step_dodge(session, level, controls, dt):
    move_player(session, controls, dt)

    for hazard in level.hazards:
        hazard.update(dt, session.width, session.height)

    if session.pending is not None:
        return None
    if first_hazard_hit(session.player, level.hazards) is not None:
        return TickEvent.RESET
    return _check_button(session)


def step_maze(session, level, controls, dt):
    move_player(session, controls, dt, MAZE_SPEED_MULTIPLIER)
    resolve_wall_collisions(session.player, level.grid, level.cell_size)

    if session.pending is not None:
        return None
    return _check_button(session)


def step_flee(session, level, controls, dt):
    move_player(session, controls, dt)
    flee_button(session.button, session.player, session.width, session.height, dt)

    if not player_touches_button(session.player, session.button):
        return None
    session.button.press()
    session.won = True
    session.status = STATUS_WIN
    return TickEvent.WON


LEVEL_STEPS = {
    DodgeLevel: step_dodge,
    MazeLevel: step_maze,
    FleeLevel: step_flee,
}


def tick(session, controls, dt):
    """
    Advance the active level by one frame

    Args:
        session: GameSession, mutated in place
        controls: Input snapshot with is_held(direction)
        dt: Time delta in nominal frames, clamped to MAX_FRAME_DELTA

    Returns:
        TickEvent or None
    """
    if session.won:
        return None

    dt = clamp(dt, 0.0, MAX_FRAME_DELTA)
    session.elapsed += dt

    # Count down a transition armed on an earlier tick
    pending = session.pending

    step = LEVEL_STEPS[type(session.level_data)]
    event = step(session, session.level_data, controls, dt)
    if event is not None or pending is None:
        return event

    pending.remaining_ms -= dt * FRAME_MS
    if pending.remaining_ms <= 0:
        return TickEvent.ADVANCE
    return None
