# shared/constants.py

APP_TITLE = "Breakout"

# logical playfield (y-up), window is an integer scale of it
FIELD_W, FIELD_H = 240, 400
SCALE = 2
WIDTH, HEIGHT = FIELD_W * SCALE, FIELD_H * SCALE
FPS = 60

WHITE = (245, 245, 245)
BLACK = (20, 20, 20)
GRAY = (142, 142, 142)
DARK = (30, 30, 30)
GREEN = (66, 158, 130)
RED = (200, 72, 72)

BRICK_COLORS = (
    (200, 72, 72),
    (198, 108, 58),
    (180, 122, 48),
    (162, 162, 42),
    (72, 160, 72),
    (66, 72, 200),
)
