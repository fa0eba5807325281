"""Tone-bank sound service backed by pygame.mixer.

Every event the world emits maps to one short sine tone, built once in
init() and released in release().
"""

import array
import logging
import math
from enum import Enum
from typing import Dict, Optional

import pygame

from shared.settings import Settings

logger = logging.getLogger(__name__)

SAMPLE_RATE = 22050
VOLUME = 0.5


class Track(Enum):
    # (frequency Hz, duration s)
    BUTTON = (600.0, 0.1)
    BRICK_0 = (466.2, 0.1)
    BRICK_1 = (392.0, 0.1)
    BRICK_2 = (311.1, 0.1)
    BRICK_3 = (277.2, 0.1)
    BRICK_4 = (233.1, 0.1)
    BRICK_5 = (185.0, 0.1)
    TOP_BORDER = (1760.0, 0.1)
    SIDE_BORDER = (1046.5, 0.1)
    PADDLE = (587.3, 0.1)
    BALL_OUT = (490.0, 0.257)

    @property
    def frequency(self) -> float:
        return self.value[0]

    @property
    def duration(self) -> float:
        return self.value[1]


BRICK_TRACKS = (Track.BRICK_0, Track.BRICK_1, Track.BRICK_2, Track.BRICK_3, Track.BRICK_4, Track.BRICK_5)


def tone_samples(frequency: float, duration: float, sample_rate: int = SAMPLE_RATE,
                 channels: int = 1, volume: float = VOLUME) -> array.array:
    """Signed 16-bit sine, interleaved for `channels`."""
    n = int(sample_rate * duration)
    amp = int(32767 * volume)
    out = array.array("h")
    for i in range(n):
        v = int(math.sin(2 * math.pi * i * frequency / sample_rate) * amp)
        out.extend([v] * channels)
    return out


class ToneBank:
    def __init__(self, settings: Settings):
        self.settings = settings
        self._sounds: Dict[Track, pygame.mixer.Sound] = {}
        self._ready = False

    # ---------------- Lifecycle ----------------
    def init(self):
        if self._ready:
            return
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)
            freq, size, channels = pygame.mixer.get_init()
            if abs(size) != 16:
                raise pygame.error(f"unsupported sample size {size}")
        except pygame.error as e:
            logger.warning("Audio disabled: %s", e)
            return

        for track in Track:
            samples = tone_samples(track.frequency, track.duration, freq, channels)
            self._sounds[track] = pygame.mixer.Sound(buffer=samples.tobytes())
        self._ready = True
        logger.debug("Tone bank ready (%d Hz, %d ch)", freq, channels)

    def release(self):
        for s in self._sounds.values():
            s.stop()
        self._sounds.clear()
        self._ready = False

    # ---------------- Playback ----------------
    def play(self, track: Track):
        s: Optional[pygame.mixer.Sound] = self._sounds.get(track)
        if s is None:
            return
        # restart instead of overlapping the same tone
        s.stop()
        if self.settings.sound:
            s.play()

    def play_button_sound(self):
        self.play(Track.BUTTON)

    def play_brick_sound(self, row: int):
        self.play(BRICK_TRACKS[min(max(row, 0), len(BRICK_TRACKS) - 1)])

    def play_paddle_sound(self):
        self.play(Track.PADDLE)

    def play_top_border_sound(self):
        self.play(Track.TOP_BORDER)

    def play_side_border_sound(self):
        self.play(Track.SIDE_BORDER)

    def play_ball_out_sound(self):
        self.play(Track.BALL_OUT)
