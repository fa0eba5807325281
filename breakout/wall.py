# breakout/wall.py
from typing import Iterator, List, Optional

from breakout.entities import Bounds, Brick
from shared.constants import BRICK_COLORS
from shared.game_config import CFG, GameConfig


def row_color(row: int):
    if 0 <= row < len(BRICK_COLORS):
        return BRICK_COLORS[row]
    return BRICK_COLORS[-1]


class Wall:
    """
    Ordered bricks of the current round, row-major.
    Row 0 is the top row, farthest from the ball spawn and worth the most.
    """

    def __init__(self, cfg: GameConfig = CFG):
        self.cfg = cfg
        self.bricks: List[Brick] = []

    def build(self):
        """Refill with a full wall; geometry never depends on the previous round."""
        c = self.cfg
        self.bricks.clear()
        base_y = c.field_height - 2 * c.block_size - c.padding_wall
        for i in range(c.brick_rows):
            for j in range(c.row_brick_count):
                self.bricks.append(Brick(
                    bounds=Bounds(
                        float(c.block_size + j * c.brick_width),
                        float(base_y - (i + 1) * c.brick_height),
                        float(c.brick_width),
                        float(c.brick_height),
                    ),
                    color=row_color(i),
                    row=i,
                    points=c.points_for_row(i),
                    speed_brick=i < c.speed_brick_rows,
                ))

    @property
    def full_size(self) -> int:
        return self.cfg.brick_rows * self.cfg.row_brick_count

    def remove_at(self, slot: int) -> Optional[Brick]:
        if not 0 <= slot < len(self.bricks):
            return None
        return self.bricks.pop(slot)

    def index_of(self, brick: Brick) -> int:
        # identity, two bricks never compare equal by value anyway
        for i, b in enumerate(self.bricks):
            if b is brick:
                return i
        return -1

    def get(self, slot: int) -> Optional[Brick]:
        if 0 <= slot < len(self.bricks):
            return self.bricks[slot]
        return None

    def __len__(self) -> int:
        return len(self.bricks)

    def __iter__(self) -> Iterator[Brick]:
        return iter(self.bricks)
