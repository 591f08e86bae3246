"""
Sound cues - short synthesized beeps played through pygame.mixer
"""

from enum import Enum

import numpy as np
import pygame

from utils.constants import AUDIO_SAMPLE_RATE, CUE_TONES


class AudioCue(Enum):
    HAZARD_COLLISION = 'hazard_collision'
    LEVEL_COMPLETE = 'level_complete'
    WIN = 'win'
    UI_TOGGLE = 'ui_toggle'
    RESTART = 'restart'


def synthesize_tone(frequency, duration_ms, volume, sample_rate=AUDIO_SAMPLE_RATE):
    """
    Sine beep as signed 16-bit mono samples

    A short linear fade-out avoids a click at the end.
    """
    count = max(1, int(sample_rate * duration_ms / 1000))
    t = np.arange(count) / sample_rate
    wave = np.sin(2 * np.pi * frequency * t) * volume

    fade = min(count, max(1, sample_rate // 200))
    wave[-fade:] *= np.linspace(1.0, 0.0, fade)

    return (wave * 32767).astype(np.int16)


class SoundPlayer:
    """
    Fire-and-forget cue player

    Sound starts muted. If the mixer cannot be used, the failure is reported
    once and sound stays unavailable; play() never raises.
    """
    def __init__(self, enabled=False):
        self.enabled = enabled
        self.available = True
        self._cache = {}

    def toggle(self):
        """Mute/unmute, beeping when sound turns on"""
        self.enabled = not self.enabled
        if self.enabled:
            self.play(AudioCue.UI_TOGGLE)
        return self.enabled

    def play(self, cue):
        """
        Play a cue

        Returns:
            True if the cue was handed to the mixer
        """
        if not self.enabled or not self.available:
            return False

        try:
            sound = self._get_sound(AudioCue(cue))
            sound.play()
            return True
        except (pygame.error, ValueError) as e:
            print(f"Audio disabled: {e}")
            self.available = False
            return False

    def _get_sound(self, cue):
        if cue not in self._cache:
            frequency, channels = self._ensure_mixer()
            tone = synthesize_tone(*CUE_TONES[cue.value], sample_rate=frequency)
            if channels > 1:
                tone = np.repeat(tone[:, np.newaxis], channels, axis=1)
            self._cache[cue] = pygame.sndarray.make_sound(np.ascontiguousarray(tone))
        return self._cache[cue]

    def _ensure_mixer(self):
        """Initialize the mixer on first use; returns (frequency, channels)"""
        if not pygame.mixer.get_init():
            pygame.mixer.init(frequency=AUDIO_SAMPLE_RATE, size=-16, channels=1)
        frequency, _, channels = pygame.mixer.get_init()
        return frequency, channels

    def __repr__(self):
        return f"SoundPlayer(enabled={self.enabled}, available={self.available})"
