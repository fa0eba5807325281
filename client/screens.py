import pygame
from shared.constants import WIDTH, HEIGHT, WHITE, GRAY, DARK, SCALE
from client.ui import menu_buttons
from client.renderer import WorldRenderer
from breakout.world import World

# keyboard paddle speed, logical units per second
PADDLE_KEY_SPEED = 180.0


class Screen:
    name = "base"
    def __init__(self, app): self.app = app
    def on_enter(self, **kwargs): pass
    def on_exit(self): pass
    def handle_event(self, event): pass
    def update(self, dt): pass
    def draw(self, surface): pass


# -------------------- Main menu --------------------
class MenuScreen(Screen):
    name = "menu"
    def __init__(self, app):
        super().__init__(app)
        self.title_font = pygame.font.SysFont(None, 72)
        self.small_font = pygame.font.SysFont(None, 30)
        self.buttons = []
        self._layout()

    def _layout(self):
        s = self.app.settings
        labels = [
            "Start",
            f"Difficulty: {s.difficulty.label}",
            f"Sound: {'On' if s.sound else 'Off'}",
            "Exit",
        ]
        self.start_btn, self.difficulty_btn, self.sound_btn, self.exit_btn = menu_buttons(
            labels, self.small_font, WIDTH // 2, HEIGHT // 2 + 60)
        self.buttons = [self.start_btn, self.difficulty_btn, self.sound_btn, self.exit_btn]

    def on_enter(self, **kwargs):
        self._layout()

    def handle_event(self, event):
        if self.start_btn.is_clicked(event):
            self.app.sound.play_button_sound()
            self.app.change_screen("game")
        elif self.difficulty_btn.is_clicked(event):
            self.app.sound.play_button_sound()
            self.app.settings.difficulty = self.app.settings.difficulty.next()
            self.app.save_settings()
            self._layout()
        elif self.sound_btn.is_clicked(event):
            self.app.settings.sound = not self.app.settings.sound
            self.app.save_settings()
            self.app.sound.play_button_sound()
            self._layout()
        elif self.exit_btn.is_clicked(event):
            self.app.sound.play_button_sound()
            self.app.running = False

    def draw(self, surface):
        surface.fill(DARK)
        title = self.title_font.render("BREAKOUT", True, WHITE)
        surface.blit(title, title.get_rect(center=(WIDTH // 2, HEIGHT // 3)))
        for b in self.buttons:
            b.draw(surface)


# -------------------- Game --------------------
class GameScreen(Screen):
    """
    Input collaborator of the world: keyboard / drag moves the paddle,
    P or Backspace toggles pause, clicks are checked against the open menu.
    """
    name = "game"
    def __init__(self, app):
        super().__init__(app)
        self.title_font = pygame.font.SysFont(None, 54)
        self.small_font = pygame.font.SysFont(None, 30)
        self.world = None
        self.renderer = None
        self.menu = []
        self.message = ""
        self._drag = 0.0

    def on_enter(self, **kwargs):
        # difficulty is fixed for the lifetime of a world
        self.world = World(settings=self.app.settings, sound=self.app.sound)
        self._drag = 0.0
        self.renderer = WorldRenderer(self.world, (WIDTH, HEIGHT))
        self._pause_menu()

    def on_exit(self):
        self.world = None
        self.renderer = None

    # ---------------- Menus ----------------
    def _pause_menu(self):
        self.message = ""
        self.menu = menu_buttons(["Resume", "New game", "Exit"], self.small_font, WIDTH // 2, HEIGHT // 2)

    def _end_menu(self):
        self.message = "GAME OVER" if self.world.is_game_over() else "YOU WIN"
        self.menu = menu_buttons(["New game", "Exit"], self.small_font, WIDTH // 2, HEIGHT // 2 + 40)

    # ---------------- Input ----------------
    def handle_event(self, event):
        w = self.world
        if event.type == pygame.KEYDOWN and event.key in (pygame.K_p, pygame.K_BACKSPACE):
            self.app.sound.play_button_sound()
            w.toggle_pause()
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE and w.is_ready():
            w.resume()
        elif event.type == pygame.MOUSEMOTION and event.buttons[0]:
            self._drag += event.rel[0] / SCALE
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.check(event.pos)

    def check(self, pos):
        """Screen a click against the menu that is currently shown."""
        w = self.world
        if w.is_ready():
            w.resume()
            return
        if not (w.is_paused() or w.is_end()):
            return

        hit = next((i for i, b in enumerate(self.menu) if b.contains(pos)), None)
        if hit is None:
            return
        self.app.sound.play_button_sound()

        labels = [b.text for b in self.menu]
        action = labels[hit]
        if action == "Resume":
            w.resume()
        elif action == "New game":
            w.new_game()
            self._pause_menu()
        elif action == "Exit":
            self.app.change_screen("menu")

    # ---------------- Frame ----------------
    def update(self, dt):
        w = self.world
        # one move per frame so the paddle velocity is this frame's motion
        keys = pygame.key.get_pressed()
        step = (keys[pygame.K_RIGHT] - keys[pygame.K_LEFT]) * PADDLE_KEY_SPEED * dt
        w.move_paddle(self._drag + step)
        self._drag = 0.0

        if not (w.is_resumed() or w.is_ready()):
            return
        w.update(dt)

        if w.is_board_changed():
            self.renderer.reset_world()
            w.reset_board_changed()
            if w.is_ending():
                self._end_menu()
                w.end()

    def draw(self, surface):
        self.renderer.draw(surface)

        if self.world.is_ready():
            hint = self.small_font.render("Tap or press Space", True, GRAY)
            surface.blit(hint, hint.get_rect(center=(WIDTH // 2, HEIGHT // 2)))

        if self.world.is_paused() or self.world.is_end():
            overlay = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
            overlay.fill((0, 0, 0, 200))
            surface.blit(overlay, (0, 0))
            if self.message:
                msg = self.title_font.render(self.message, True, WHITE)
                surface.blit(msg, msg.get_rect(center=(WIDTH // 2, HEIGHT // 2 - 60)))
            for b in self.menu:
                b.draw(surface)
