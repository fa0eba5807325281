# breakout/paddle.py
from breakout.entities import Body, Color


class Paddle:
    """Player bat. Moves horizontally between the two corner blocks."""

    def __init__(self, x: float, y: float, width: float, height: float, color: Color,
                 sections: int, left_limit: float, right_limit: float):
        self.body = Body.at(x, y, width, height, color)
        self.sections = int(sections)
        self.left_limit = float(left_limit)
        self.right_limit = float(right_limit)
        self.points: int = 0

    @property
    def bounds(self):
        return self.body.bounds

    @property
    def velocity(self):
        return self.body.velocity

    @property
    def section_width(self) -> float:
        return self.body.width / self.sections

    def reset(self, x: float, y: float):
        self.body.set_position(x, y)
        self.body.velocity.x = 0.0
        self.points = 0

    def move(self, amount: float):
        """Shift by `amount` along x; the amount is kept as the paddle velocity."""
        self.body.velocity.x = float(amount)
        b = self.body.bounds
        b.x += self.body.velocity.x
        self._clamp()

    def _clamp(self):
        b = self.body.bounds
        if b.x + b.width > self.right_limit:
            b.x = self.right_limit - b.width
        elif b.x < self.left_limit:
            b.x = self.left_limit
