# breakout/events.py
"""Messages emitted by the ball during a tick and drained by the world."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Protocol, Union

from breakout.entities import Brick


class Sound(Enum):
    PADDLE = auto()
    TOP_BORDER = auto()
    SIDE_BORDER = auto()


@dataclass(frozen=True)
class BrickDestroyed:
    brick: Brick
    row: int
    slot: int   # position in the wall when the hit was detected


@dataclass(frozen=True)
class BallLost:
    pass


@dataclass(frozen=True)
class SoundRequested:
    sound: Sound


Event = Union[BrickDestroyed, BallLost, SoundRequested]


class SoundService(Protocol):
    def play_paddle_sound(self) -> None: ...
    def play_top_border_sound(self) -> None: ...
    def play_side_border_sound(self) -> None: ...
    def play_ball_out_sound(self) -> None: ...
    def play_brick_sound(self, row: int) -> None: ...
    def play_button_sound(self) -> None: ...


class SilentSound:
    """Default sound service for headless worlds."""

    def play_paddle_sound(self): pass
    def play_top_border_sound(self): pass
    def play_side_border_sound(self): pass
    def play_ball_out_sound(self): pass
    def play_brick_sound(self, row): pass
    def play_button_sound(self): pass


def dispatch_sound(service: SoundService, event: SoundRequested):
    s = event.sound
    if s is Sound.PADDLE:
        service.play_paddle_sound()
    elif s is Sound.TOP_BORDER:
        service.play_top_border_sound()
    elif s is Sound.SIDE_BORDER:
        service.play_side_border_sound()
