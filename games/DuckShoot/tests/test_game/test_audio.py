"""
Unit tests for round start audio.

Actual playback is hard to test, so these mainly check that the mixer
is used when enabled, that failures degrade to silence, and that the
fanfare is triggered by RoundStarted.
"""

from unittest.mock import MagicMock, patch

import pytest

from duckshoot.events import RoundStarted, RoundWon
from games.DuckShoot.game.audio import RoundAudio
from models import AudioConfig


@pytest.fixture
def mock_mixer():
    """Mock the mixer and sound creation so no audio device is needed."""
    sound = MagicMock()
    with patch('pygame.mixer.init') as mock_init, \
         patch('pygame.sndarray.make_sound', return_value=sound) as mock_make:
        yield {'init': mock_init, 'make_sound': mock_make, 'sound': sound}


class TestRoundAudio:

    def test_disabled_audio_never_touches_mixer(self, bus):
        with patch('pygame.mixer.init') as mock_init:
            audio = RoundAudio(bus, AudioConfig(enabled=False))

        mock_init.assert_not_called()
        assert audio.audio_enabled is False
        assert audio.sounds == {}

    def test_enabled_audio_generates_fanfare(self, bus, mock_mixer):
        audio = RoundAudio(bus, AudioConfig(volume=0.5))

        mock_mixer['init'].assert_called_once()
        assert audio.audio_enabled is True
        assert audio.sounds['round_start'] is mock_mixer['sound']
        mock_mixer['sound'].set_volume.assert_called_once_with(0.5)

    def test_fanfare_is_stereo_16_bit(self, bus, mock_mixer):
        RoundAudio(bus)

        wave = mock_mixer['make_sound'].call_args[0][0]
        assert wave.ndim == 2
        assert wave.shape[1] == 2
        assert wave.dtype.name == 'int16'

    def test_plays_on_round_start(self, bus, mock_mixer):
        audio = RoundAudio(bus)

        bus.publish(RoundStarted(round_number=1, duck_count=3))
        bus.publish(RoundWon(round_number=1))

        mock_mixer['sound'].play.assert_called_once()
        assert audio.plays == 1

    def test_mixer_failure_is_not_fatal(self, bus):
        with patch('pygame.mixer.init', side_effect=RuntimeError("no audio device")):
            audio = RoundAudio(bus)

        assert audio.audio_enabled is False
        assert audio.sounds == {}

        bus.publish(RoundStarted(round_number=1, duck_count=3))
        assert audio.plays == 0

    def test_mixer_failure_logged(self, bus, capsys):
        from duckshoot.logging import configure_logging
        configure_logging(level='WARNING')

        with patch('pygame.mixer.init', side_effect=RuntimeError("no audio device")):
            RoundAudio(bus)

        assert "[audio] WARN: Audio initialization failed" in capsys.readouterr().out

    def test_playback_failure_is_not_fatal(self, bus, mock_mixer):
        audio = RoundAudio(bus)
        mock_mixer['sound'].play.side_effect = RuntimeError("channel lost")

        assert audio.play_round_start() is False
        assert audio.plays == 0
