from unittest.mock import MagicMock, patch

import pygame

from client.sound import BRICK_TRACKS, ToneBank, Track, tone_samples
from shared.settings import Settings


def test_tone_samples_length_and_channels():
    mono = tone_samples(440.0, 0.1, sample_rate=22050)
    assert len(mono) == 2205
    assert mono[0] == 0
    stereo = tone_samples(440.0, 0.1, sample_rate=22050, channels=2)
    assert len(stereo) == 4410
    assert stereo[2] == stereo[3]


def test_track_table():
    assert Track.BALL_OUT.duration == 0.257
    assert Track.PADDLE.frequency == 587.3
    assert len(BRICK_TRACKS) == 6


def test_init_without_audio_device_disables_sound():
    with patch("pygame.mixer.get_init", return_value=None), \
         patch("pygame.mixer.init", side_effect=pygame.error("no device")):
        bank = ToneBank(Settings())
        bank.init()
    # nothing loaded, every call is a no-op
    bank.play_paddle_sound()
    bank.play_brick_sound(3)
    bank.release()


def test_play_respects_sound_setting():
    settings = Settings(sound=False)
    bank = ToneBank(settings)
    tone = MagicMock()
    bank._sounds[Track.PADDLE] = tone

    bank.play_paddle_sound()
    tone.stop.assert_called_once()
    tone.play.assert_not_called()

    settings.sound = True
    bank.play_paddle_sound()
    tone.play.assert_called_once()


def test_brick_row_is_clamped():
    bank = ToneBank(Settings())
    tones = {t: MagicMock() for t in BRICK_TRACKS}
    bank._sounds.update(tones)
    bank.play_brick_sound(9)
    tones[Track.BRICK_5].play.assert_called_once()
    bank.play_brick_sound(0)
    tones[Track.BRICK_0].play.assert_called_once()
