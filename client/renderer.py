# client/renderer.py
import math

import pygame

from breakout.entities import Bounds
from breakout.world import World
from shared.constants import BLACK, WHITE, SCALE


class WorldRenderer:
    """
    Draws the world onto a window surface scaled by SCALE.
    Border, corner blocks and wall are cached and only rebuilt on board change.
    """

    def __init__(self, world: World, size):
        self.world = world
        self.size = size
        self.font = pygame.font.SysFont(None, 26)
        self._static = pygame.Surface(size)
        self.reset_world()

    def to_screen(self, b: Bounds) -> pygame.Rect:
        # flip y: the world origin is bottom-left
        h = self.world.cfg.field_height
        return pygame.Rect(
            int(b.x * SCALE),
            int((h - b.y - b.height) * SCALE),
            max(1, math.ceil(b.width * SCALE)),
            max(1, math.ceil(b.height * SCALE)),
        )

    def reset_world(self):
        s = self._static
        s.fill(BLACK)
        for block in self.world.border:
            pygame.draw.rect(s, block.color, self.to_screen(block.bounds))
        for block in self.world.blocks:
            pygame.draw.rect(s, block.color, self.to_screen(block.bounds))
        for brick in self.world.wall:
            pygame.draw.rect(s, brick.color, self.to_screen(brick.bounds))

    def draw(self, surface: pygame.Surface):
        surface.blit(self._static, (0, 0))

        w = self.world
        pygame.draw.rect(surface, w.paddle.body.color, self.to_screen(w.paddle.bounds))
        pygame.draw.rect(surface, w.ball.body.color, self.to_screen(w.ball.bounds))

        self._draw_hud(surface)

    def _draw_hud(self, surface: pygame.Surface):
        w = self.world
        top = self.to_screen(w.border.top.bounds)
        y = top.bottom + 6
        score = self.font.render(f"{w.paddle.points:03d}", True, WHITE)
        surface.blit(score, (top.left + 6, y))

        balls = self.font.render(f"BALLS {w.ball.lives}", True, WHITE)
        surface.blit(balls, balls.get_rect(midtop=(top.centerx, y)))

        rnd = self.font.render(f"R{min(w.round + 1, w.cfg.max_round)}", True, WHITE)
        surface.blit(rnd, rnd.get_rect(topright=(top.right - 6, y)))
