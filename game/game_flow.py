"""
Game flow - the level state machine

Runs the simulation tick and applies the transition it reports:
    DODGE --hazard--> DODGE (restart)
    DODGE --button--> MAZE
    MAZE  --button--> FLEE
    FLEE  --button--> WON (terminal)
"""

from game.audio import AudioCue
from game.game_state import LevelId, TickEvent
from game.level_manager import start_level
from game.simulation import tick
from game.snapshot import build_snapshot


EVENT_CUES = {
    TickEvent.RESET: AudioCue.HAZARD_COLLISION,
    TickEvent.LEVEL_COMPLETE: AudioCue.LEVEL_COMPLETE,
    TickEvent.WON: AudioCue.WIN,
}


class GameFlow:
    """
    High-level game flow controller
    Works on a GameSession and an optional SoundPlayer
    """
    def __init__(self, session, sound=None):
        self.session = session
        self.sound = sound

    @property
    def level(self):
        return self.session.level

    @property
    def state(self):
        return self.session.state

    def update(self, controls, dt):
        """
        Run one tick and apply its transition

        Args:
            controls: Input snapshot for this frame
            dt: Delta time in nominal frames

        Returns:
            The TickEvent of this frame or None
        """
        event = tick(self.session, controls, dt)
        if event is None:
            return None

        if event == TickEvent.RESET:
            start_level(self.session, LevelId.DODGE)
        elif event == TickEvent.ADVANCE:
            start_level(self.session, self.session.pending.target)

        self._cue(EVENT_CUES.get(event))
        return event

    def restart_level(self):
        """Restart the current level from scratch, also after winning"""
        start_level(self.session, self.session.level)
        self._cue(AudioCue.RESTART)

    def toggle_sound(self):
        """Returns the new sound state (False without a sound player)"""
        if self.sound is None:
            return False
        return self.sound.toggle()

    @property
    def sound_on(self):
        return self.sound is not None and self.sound.enabled

    def snapshot(self):
        return build_snapshot(self.session, self.sound_on)

    def _cue(self, cue):
        if cue is not None and self.sound is not None:
            self.sound.play(cue)

    def __repr__(self):
        return f"GameFlow(level={self.level.name}, state={self.state.name})"
