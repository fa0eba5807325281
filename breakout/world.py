# breakout/world.py
import logging
from enum import Enum, auto
from typing import Dict, Optional, Tuple

from pygame.math import Vector2 as Vec2

from breakout.ball import Arena, Ball
from breakout.entities import Block, Blocks, Border, Bounds
from breakout.events import (
    BallLost, BrickDestroyed, SilentSound, SoundRequested, SoundService, dispatch_sound,
)
from breakout.paddle import Paddle
from breakout.wall import Wall
from shared.constants import GRAY, GREEN, RED
from shared.game_config import CFG, GameConfig
from shared.settings import Settings

logger = logging.getLogger(__name__)


# ---------------- State machine ----------------
class State(Enum):
    READY = auto()
    PAUSED = auto()
    RESUMED = auto()
    ENDING = auto()
    ENDED = auto()


class Transition(Enum):
    RESUME = auto()
    PAUSE = auto()
    FINISH = auto()
    END = auto()
    NEW_GAME = auto()


TRANSITIONS: Dict[Tuple[State, Transition], State] = {
    (State.READY, Transition.RESUME): State.RESUMED,
    (State.RESUMED, Transition.PAUSE): State.PAUSED,
    (State.PAUSED, Transition.RESUME): State.RESUMED,
    (State.RESUMED, Transition.FINISH): State.ENDING,
    (State.ENDING, Transition.END): State.ENDED,
    (State.ENDED, Transition.NEW_GAME): State.READY,
    (State.PAUSED, Transition.NEW_GAME): State.READY,
}


# ---------------- World ----------------
class World:
    """
    Owns every entity and the game state.

    Per tick the ball reports what it hit as events; the world applies them
    (score, lives, wall, rounds) and forwards sound requests to the sound
    service. Renderers read the entities after update() and consume
    `board_changed` once.
    """

    def __init__(self, cfg: GameConfig = CFG, settings: Optional[Settings] = None,
                 sound: Optional[SoundService] = None):
        self.cfg = cfg
        self.settings = settings or Settings()
        self.sound: SoundService = sound or SilentSound()

        self.state = State.READY
        self.state_time = 0.0
        self.round = 0
        self.game_over = False
        self.board_changed = False

        c = cfg
        b = c.block_size
        paddle_width = c.paddle_width * self.settings.difficulty.paddle_width_ratio
        self.paddle_start = Vec2((c.field_width - paddle_width) / 2, b + c.paddle_height)
        self.ball_start = Vec2(b, c.field_height - 3 * b - c.padding_wall - c.brick_rows * c.brick_height)

        self.border = self._create_border()
        self.blocks = self._create_blocks()
        self.wall = Wall(cfg)
        self.wall.build()

        self.paddle = Paddle(
            self.paddle_start.x, self.paddle_start.y, paddle_width, c.paddle_height, RED,
            c.paddle_sections,
            left_limit=self.blocks.left.width,
            right_limit=c.field_width - self.blocks.right.width,
        )
        self.ball = Ball(
            self.ball_start.x, self.ball_start.y, c.ball_size, RED, c.ball_lives,
            base_acceleration=c.ball_acceleration * self.settings.difficulty.ball_speed_ratio,
            cfg=c,
        )

    # ---------------- Layout ----------------
    def _create_border(self) -> Border:
        c = self.cfg
        b = c.block_size
        w, h = c.field_width, c.field_height
        return Border(
            left=Block(Bounds(0, 1.5 * b, b, h - 2.5 * b), GRAY),
            top=Block(Bounds(b, h - 2 * b, w - 2 * b, b), GRAY),
            right=Block(Bounds(w - b, 1.5 * b, b, h - 2.5 * b), GRAY),
        )

    def _create_blocks(self) -> Blocks:
        c = self.cfg
        b = c.block_size
        return Blocks(
            left=Block(Bounds(0, b, b, b / 2), GREEN),
            right=Block(Bounds(c.field_width - b, b, b, b / 2), RED),
        )

    @property
    def arena(self) -> Arena:
        return Arena(self.border, self.blocks, self.wall, self.paddle)

    # ---------------- Transitions ----------------
    def _apply(self, transition: Transition) -> bool:
        target = TRANSITIONS.get((self.state, transition))
        if target is None:
            logger.debug("Ignored %s while %s", transition.name, self.state.name)
            return False
        logger.debug("%s: %s -> %s", transition.name, self.state.name, target.name)
        self.state = target
        return True

    def resume(self):
        if self._apply(Transition.RESUME):
            self.state_time = 0.0

    def pause(self):
        self._apply(Transition.PAUSE)

    def toggle_pause(self):
        """Back button: pause while playing, resume while paused."""
        if self.state is State.RESUMED:
            self.pause()
        elif self.state is State.PAUSED:
            self.resume()

    def ending(self):
        self._apply(Transition.FINISH)

    def end(self):
        """Called by the front end once the end menu is ready."""
        self._apply(Transition.END)

    def new_game(self):
        if not self._apply(Transition.NEW_GAME):
            return
        self.wall.build()
        self.paddle.reset(self.paddle_start.x, self.paddle_start.y)
        self.ball.reset(self.ball_start.x, self.ball_start.y, self.cfg.ball_lives)
        self.ball.reset_hits()
        self.state_time = 0.0
        self.game_over = False
        self.round = 0
        self.board_changed = True
        logger.info("New game")

    # ---------------- Queries ----------------
    def is_ready(self) -> bool:
        return self.state is State.READY

    def is_paused(self) -> bool:
        return self.state is State.PAUSED

    def is_resumed(self) -> bool:
        return self.state is State.RESUMED

    def is_ending(self) -> bool:
        return self.state is State.ENDING

    def is_end(self) -> bool:
        return self.state is State.ENDED

    def is_game_over(self) -> bool:
        return self.game_over

    def is_board_changed(self) -> bool:
        return self.board_changed

    def reset_board_changed(self):
        self.board_changed = False

    # ---------------- Input ----------------
    def move_paddle(self, amount: float):
        if self.is_resumed():
            self.paddle.move(amount)

    # ---------------- Update ----------------
    def update(self, delta: float):
        if self.is_resumed():
            for event in self.ball.update(delta, self.arena):
                self._handle(event)
        elif self.is_ready():
            self.state_time += delta
            if self.state_time >= self.cfg.ready_wait:
                self.resume()

    def _handle(self, event):
        if isinstance(event, SoundRequested):
            dispatch_sound(self.sound, event)
        elif not self.is_resumed():
            # round already over this tick
            return
        elif isinstance(event, BrickDestroyed):
            slot = event.slot
            if self.wall.get(slot) is not event.brick:
                slot = self.wall.index_of(event.brick)
            self.remove_brick(event.row, slot)
        elif isinstance(event, BallLost):
            self.new_ball()

    def remove_brick(self, row: int, slot: int):
        if not self.is_resumed():
            return
        brick = self.wall.get(slot)
        if brick is None:
            logger.debug("No brick at slot %d (wall size %d)", slot, len(self.wall))
            return

        self.sound.play_brick_sound(row)

        if not self.ball.speed_brick_hit and brick.speed_brick:
            self.ball.speed(self.cfg.speed_brick_ratio)
            self.ball.speed_brick_hit = True

        self.paddle.points += brick.points
        self.wall.remove_at(slot)

        if len(self.wall) == 0:
            self.round += 1
            if self.round < self.cfg.max_round:
                logger.info("Round %d cleared, building a new wall", self.round)
                self.wall.build()
            else:
                logger.info("All rounds cleared, score %d", self.paddle.points)
                self.ending()

        self.board_changed = True

    def new_ball(self):
        if not self.is_resumed():
            return
        self.sound.play_ball_out_sound()

        lives = self.ball.lives
        if lives > 0:
            self.ball.reset(self.ball_start.x, self.ball_start.y, lives - 1)
            logger.info("Ball lost, %d left", lives - 1)
        else:
            self.game_over = True
            logger.info("Game over, score %d", self.paddle.points)
            self.ending()

        self.board_changed = True
