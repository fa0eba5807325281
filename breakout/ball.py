# breakout/ball.py
import math
from typing import Callable, List, NamedTuple, Set

from breakout.entities import Blocks, Body, Border, Bounds, Color
from breakout.events import BallLost, BrickDestroyed, Event, Sound, SoundRequested
from breakout.paddle import Paddle
from breakout.wall import Wall
from shared.game_config import CFG, GameConfig


class Arena(NamedTuple):
    """Read-only view of everything the ball can hit."""
    border: Border
    blocks: Blocks
    wall: Wall
    paddle: Paddle


class Ball:
    """
    Kinematic integrator + axis-separated collision resolver.

    Each tick moves the full x step and resolves x collisions, then the full
    y step and y collisions. Fast balls can tunnel through thin bricks.
    """

    def __init__(self, x: float, y: float, size: float, color: Color, lives: int,
                 base_acceleration: float, cfg: GameConfig = CFG):
        self.cfg = cfg
        self.body = Body.at(x, y, size, size, color)
        self.base_acceleration = float(base_acceleration)
        self.lives: int = int(lives)
        self.state_time: float = 0.0

        self.ratio: float = 1.0
        self.speed_brick_hit: bool = False
        self.hit_counter: int = 0
        self.hit_count_angle: int = 0

        self._events: List[Event] = []
        self._hit_this_tick: Set[int] = set()
        self.set_acceleration(self.base_acceleration)

    # ---------------- Accessors ----------------
    @property
    def bounds(self) -> Bounds:
        return self.body.bounds

    @property
    def velocity(self):
        return self.body.velocity

    @property
    def direction(self):
        return self.body.direction

    @property
    def acceleration(self):
        return self.body.acceleration

    @property
    def center(self) -> float:
        return self.body.bounds.center_x

    # ---------------- Lifecycle ----------------
    def set_acceleration(self, value: float):
        """Base speed on both axes, heading right and down at 45 degrees."""
        self.body.acceleration.update(value, value)
        self.body.direction.update(1, -1)
        self.ratio = 1.0

    def reset(self, x: float, y: float, lives: int):
        """Respawn for a new life. Hit counters are kept."""
        self.body.set_position(x, y)
        self.state_time = 0.0
        self.set_acceleration(self.base_acceleration)
        self.speed_brick_hit = False
        self.lives = int(lives)

    def reset_hits(self):
        self.hit_counter = 0
        self.hit_count_angle = 0

    def speed(self, ratio: float):
        if ratio != 0:
            self.body.acceleration *= ratio

    # ---------------- Tick ----------------
    def update(self, delta: float, arena: Arena) -> List[Event]:
        self._events = []
        self._hit_this_tick = set()
        self.state_time += delta

        d = self.body.direction
        a = self.body.acceleration
        v = self.body.velocity
        if self.ratio < 1:
            # shallow: vertical speed dominates
            v.x = d.x * a.y * delta * self.ratio
            v.y = d.y * a.y * delta
        else:
            v.x = d.x * a.x * delta
            v.y = d.y * a.x * delta / self.ratio

        self._resolve(arena)

        if self.bounds.y + self.bounds.height < 0:
            self._events.append(BallLost())
        return self._events

    def _resolve(self, arena: Arena):
        b = self.bounds

        b.x += self.velocity.x
        for block in (arena.border.left, arena.border.right, arena.blocks.left, arena.blocks.right):
            if self.check_collision_x(block.bounds):
                self._emit(SoundRequested(Sound.SIDE_BORDER))
        self._check_wall(arena.wall, self.check_collision_x)
        self.check_paddle_x(arena.paddle)

        b.y += self.velocity.y
        if self.check_collision_y(arena.border.top.bounds):
            self._emit(SoundRequested(Sound.TOP_BORDER))
        self._check_wall(arena.wall, self.check_collision_y)
        self.check_paddle_y(arena.paddle)

    def _check_wall(self, wall: Wall, check: Callable[[Bounds], bool]):
        for slot, brick in enumerate(wall):
            if id(brick) in self._hit_this_tick:
                continue
            if check(brick.bounds):
                self._hit_this_tick.add(id(brick))
                self._emit(BrickDestroyed(brick=brick, row=brick.row, slot=slot))
                break

    def _emit(self, event: Event):
        self._events.append(event)

    # ---------------- Generic axis resolution ----------------
    def check_collision_x(self, rect: Bounds) -> bool:
        b = self.bounds
        if not b.overlaps(rect):
            return False
        if self.velocity.x < 0:
            b.x = rect.x + rect.width
        elif self.velocity.x > 0:
            b.x = rect.x - b.width
        self.direction.x *= -1
        return True

    def check_collision_y(self, rect: Bounds) -> bool:
        b = self.bounds
        if not b.overlaps(rect):
            return False
        if self.velocity.y < 0:
            b.y = rect.y + rect.height
        elif self.velocity.y > 0:
            b.y = rect.y - b.height
        self.direction.y *= -1
        return True

    # ---------------- Paddle ----------------
    def check_paddle_x(self, paddle: Paddle) -> bool:
        """Side hit: reflect when closing in, get carried when moving the same way."""
        b = self.bounds
        p = paddle.bounds
        if not b.overlaps(p):
            return False

        paddle_velocity_ratio = abs(paddle.velocity.x) + 1
        if self.velocity.x < 0:
            if paddle.velocity.x >= 0:
                b.x = p.x + p.width
                self.direction.x *= -1
            else:
                b.x = p.x - b.width
        elif self.velocity.x > 0:
            if paddle.velocity.x <= 0:
                b.x = p.x - b.width
                self.direction.x *= -1
            else:
                b.x = p.x + p.width

        self.speed(paddle_velocity_ratio)
        self._emit(SoundRequested(Sound.PADDLE))
        return True

    def check_paddle_y(self, paddle: Paddle) -> bool:
        """Top hit: the struck section picks the bounce angle."""
        b = self.bounds
        p = paddle.bounds
        if not b.overlaps(p):
            return False

        self._count_hit()
        center_angle, inner_angle, outer_angle = self.cfg.section_angles
        sw = paddle.section_width
        c = self.center

        if c > p.x + 4 * sw:
            angle = outer_angle
            if self.velocity.x < 0:
                self.direction.x *= -1
        elif c > p.x + 3 * sw:
            angle = inner_angle
            if self.velocity.x < 0:
                self.direction.x *= -1
        elif c > p.x + 2 * sw:
            angle = center_angle
        elif c > p.x + sw:
            angle = inner_angle
            if self.velocity.x > 0:
                self.direction.x *= -1
        else:
            angle = outer_angle
            if self.velocity.x > 0:
                self.direction.x *= -1

        self.ratio = math.tan(math.radians(angle + self.hit_count_angle))

        if self.velocity.y < 0:
            b.y = p.y + p.height
        elif self.velocity.y > 0:
            b.y = p.y - b.height
        self.direction.y *= -1
        self._emit(SoundRequested(Sound.PADDLE))
        return True

    def _count_hit(self):
        self.hit_counter += 1
        m = self.hit_counter % self.cfg.hit_count_max
        if m in self.cfg.hit_angle_counts:
            self.hit_count_angle += self.cfg.hit_angle_increment
        elif m == 0:
            self.hit_count_angle = 0
            self.speed(self.cfg.hit_speed_ratio)
