# client/main.py
import logging
import os
import sys
from pathlib import Path

import pygame

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from shared.constants import APP_TITLE, WIDTH, HEIGHT, FPS
from shared.settings import load_settings, save_settings
from client.sound import ToneBank
from client.screens import MenuScreen, GameScreen

logger = logging.getLogger(__name__)


class App:
    def __init__(self, settings_path=None):
        pygame.init()
        pygame.display.set_caption(APP_TITLE)
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        self.clock = pygame.time.Clock()

        # Run with custom settings as:
        #   BREAKOUT_SETTINGS=~/.breakout.yaml python client/main.py
        path = settings_path or os.getenv("BREAKOUT_SETTINGS")
        self.settings_path = Path(path).expanduser() if path else None
        self.settings = load_settings(self.settings_path)
        logger.info("Difficulty %s, sound %s", self.settings.difficulty.name, self.settings.sound)

        self.sound = ToneBank(self.settings)
        self.sound.init()

        self.screens = {
            "menu": MenuScreen(self),
            "game": GameScreen(self),
        }

        self.current = None
        self.running = True
        self.change_screen("menu")

    def save_settings(self):
        """Persist menu changes when a settings file is configured."""
        if self.settings_path is not None:
            save_settings(self.settings_path, self.settings)

    def change_screen(self, name, **kwargs):
        if self.current:
            self.current.on_exit()
        self.current = self.screens[name]
        self.current.on_enter(**kwargs)

    def handle_global_keys(self, event):
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.running = False

    def run(self):
        try:
            while self.running:
                dt = self.clock.tick(FPS) / 1000.0

                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    self.handle_global_keys(event)
                    self.current.handle_event(event)

                self.current.update(dt)
                self.current.draw(self.screen)
                pygame.display.flip()
        finally:
            self.sound.release()
            pygame.quit()


def main():
    logging.basicConfig(
        level=os.getenv("BREAKOUT_LOG", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    App().run()


if __name__ == "__main__":
    main()
