"""
Round start audio for Duck Shoot.

Plays a short procedurally generated fanfare whenever a round starts.
Audio is strictly best-effort: if the mixer cannot be initialized or a
sound fails to play, the failure is logged and the game carries on
silently.
"""

from typing import Dict, Optional

import numpy as np
import pygame

from duckshoot.events import EventBus, RoundStarted
from duckshoot.logging import get_logger
from models import AudioConfig

log = get_logger('audio')

SAMPLE_RATE = 22050


class RoundAudio:
    """Listens for round starts and plays the start fanfare.

    Attributes:
        audio_enabled: False when disabled by config or after a mixer failure
        sounds: Generated sounds by name
        plays: Number of sounds successfully started

    Examples:
        >>> bus = EventBus()
        >>> audio = RoundAudio(bus, AudioConfig(enabled=False))
        >>> bus.publish(RoundStarted(round_number=1, duck_count=3))
        >>> audio.plays
        0
    """

    def __init__(self, bus: EventBus, config: Optional[AudioConfig] = None):
        self._config = config or AudioConfig()
        self.audio_enabled = self._config.enabled
        self.sounds: Dict[str, Optional[pygame.mixer.Sound]] = {}
        self.plays = 0

        if self.audio_enabled:
            self._init_audio()

        bus.subscribe(RoundStarted, self._on_round_started)

    def _init_audio(self) -> None:
        """Initialize the mixer and generate the fanfare."""
        try:
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2, buffer=512)
            self.sounds['round_start'] = self._generate_round_start_sound()
            for sound in self.sounds.values():
                if sound is not None:
                    sound.set_volume(self._config.volume)
        except Exception as e:
            log.warning("Audio initialization failed, continuing without sound: %s", e)
            self.audio_enabled = False
            self.sounds = {}

    def _generate_round_start_sound(self) -> Optional[pygame.mixer.Sound]:
        """Generate a rising four-note fanfare (G4-C5-E5-G5).

        Returns:
            pygame.mixer.Sound or None if generation fails
        """
        try:
            frequencies = [392.00, 523.25, 659.25, 783.99]
            note_duration = 0.12
            samples_per_note = int(SAMPLE_RATE * note_duration)
            wave = np.zeros(samples_per_note * len(frequencies))

            t = np.linspace(0, note_duration, samples_per_note, False)
            envelope = np.ones(samples_per_note)
            fade_samples = int(samples_per_note * 0.15)
            envelope[:fade_samples] = np.linspace(0, 1, fade_samples)
            envelope[-fade_samples:] = np.linspace(1, 0, fade_samples)

            for i, freq in enumerate(frequencies):
                start = i * samples_per_note
                wave[start:start + samples_per_note] = np.sin(2.0 * np.pi * freq * t) * envelope

            # Scale to 16-bit integer range
            wave = (wave * 32767 * 0.3).astype(np.int16)
            stereo_wave = np.column_stack((wave, wave))

            return pygame.sndarray.make_sound(stereo_wave)
        except Exception as e:
            log.warning("Could not generate round start sound: %s", e)
            return None

    def _on_round_started(self, event: RoundStarted) -> None:
        self.play_round_start()

    def play_round_start(self) -> bool:
        """Play the fanfare.

        Safe to call even if audio is disabled or generation failed.

        Returns:
            True if playback started
        """
        sound = self.sounds.get('round_start')
        if not self.audio_enabled or sound is None:
            return False
        try:
            sound.play()
        except Exception as e:
            log.warning("Could not play round start sound: %s", e)
            return False
        self.plays += 1
        return True
