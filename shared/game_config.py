# shared/game_config.py
from dataclasses import dataclass
from typing import Tuple

from shared.constants import FIELD_W, FIELD_H


@dataclass(frozen=True)
class GameConfig:
    field_width: float = FIELD_W
    field_height: float = FIELD_H

    block_size: int = 12
    padding_wall: int = 18

    brick_rows: int = 6
    row_brick_count: int = 18
    brick_width: int = 12
    brick_height: int = 4
    brick_points: Tuple[int, ...] = (7, 7, 4, 4, 1, 1)
    speed_brick_rows: int = 3
    speed_brick_ratio: float = 2.0

    paddle_width: float = 24.0   # scaled by difficulty
    paddle_height: int = 3
    paddle_sections: int = 5

    ball_size: int = 3
    ball_lives: int = 5
    ball_acceleration: float = 50.0   # units/sec before difficulty scaling

    # bounce shaping
    section_angles: Tuple[int, int, int] = (15, 30, 45)   # center, inner, outer
    hit_angle_increment: int = 5
    hit_angle_counts: Tuple[int, ...] = (3, 7, 11)
    hit_count_max: int = 12
    hit_speed_ratio: float = 1.1

    max_round: int = 2
    ready_wait: float = 3.0   # seconds

    def points_for_row(self, row: int) -> int:
        if 0 <= row < len(self.brick_points):
            return self.brick_points[row]
        return self.brick_points[-1]


CFG = GameConfig()
