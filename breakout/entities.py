# breakout/entities.py
from dataclasses import dataclass, field
from typing import Iterator, Tuple

from pygame.math import Vector2 as Vec2

Color = Tuple[int, int, int]


# ---------------- Geometry ----------------
@dataclass
class Bounds:
    """Axis-aligned float rectangle, origin at the bottom-left corner (y-up)."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y + self.height

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    def overlaps(self, other: "Bounds") -> bool:
        # touching edges do not count
        return (self.x < other.x + other.width and self.x + self.width > other.x
                and self.y < other.y + other.height and self.y + self.height > other.y)

    def contains(self, x: float, y: float) -> bool:
        return self.x <= x <= self.x + self.width and self.y <= y <= self.y + self.height


# ---------------- Kinematic body ----------------
@dataclass
class Body:
    """
    Shared geometry + kinematics embedded by Ball and Paddle.
    `bounds` is the source of truth; `position` always mirrors its corner.
    """
    bounds: Bounds
    color: Color
    velocity: Vec2 = field(default_factory=Vec2)
    direction: Vec2 = field(default_factory=lambda: Vec2(1, 1))
    acceleration: Vec2 = field(default_factory=Vec2)

    @classmethod
    def at(cls, x: float, y: float, width: float, height: float, color: Color) -> "Body":
        return cls(Bounds(float(x), float(y), float(width), float(height)), color)

    @property
    def position(self) -> Vec2:
        return Vec2(self.bounds.x, self.bounds.y)

    def set_position(self, x: float, y: float):
        self.bounds.x = float(x)
        self.bounds.y = float(y)

    @property
    def width(self) -> float:
        return self.bounds.width

    @property
    def height(self) -> float:
        return self.bounds.height


# ---------------- Static geometry ----------------
@dataclass
class Block:
    bounds: Bounds
    color: Color

    @property
    def width(self) -> float:
        return self.bounds.width


@dataclass
class Brick:
    bounds: Bounds
    color: Color
    row: int
    points: int
    speed_brick: bool = False


@dataclass
class Border:
    left: Block
    top: Block
    right: Block

    def __iter__(self) -> Iterator[Block]:
        return iter((self.left, self.top, self.right))


@dataclass
class Blocks:
    """Corner stoppers at the bottom of the side borders."""
    left: Block
    right: Block

    def __iter__(self) -> Iterator[Block]:
        return iter((self.left, self.right))
