from unittest.mock import MagicMock

import pytest

from breakout.events import SilentSound, Sound, SoundRequested, dispatch_sound


@pytest.mark.parametrize("sound, method", [
    (Sound.PADDLE, "play_paddle_sound"),
    (Sound.TOP_BORDER, "play_top_border_sound"),
    (Sound.SIDE_BORDER, "play_side_border_sound"),
])
def test_dispatch_sound(sound, method):
    service = MagicMock()
    dispatch_sound(service, SoundRequested(sound))
    getattr(service, method).assert_called_once_with()
    assert len(service.method_calls) == 1


def test_silent_sound_accepts_everything():
    silent = SilentSound()
    for s in Sound:
        dispatch_sound(silent, SoundRequested(s))
    silent.play_brick_sound(3)
    silent.play_ball_out_sound()
    silent.play_button_sound()
