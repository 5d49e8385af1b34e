"""
game_modes.py: Top-level mode machine: Menu -> Playing -> Dead -> Playing ...
"""

import random
from typing import Optional

from .data_models import GameConfig, GameMode, Key
from .logger import get_logger
from .rendering import Renderer, draw_death_screen, draw_menu, draw_session
from .session import GameSession

log = get_logger("modes")


class GameModeController:
    """
    Dispatches each external tick to the current mode.
    A quit request only raises the `quitting` flag; the backend ends its loop.
    """

    def __init__(self, config: GameConfig, rng: Optional[random.Random] = None):
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.mode = GameMode.MENU
        self.session = GameSession(config, self.rng)
        self.quitting = False

    def _set_mode(self, mode: GameMode):
        if mode != self.mode:
            log.info(f"{self.mode.name} -> {mode.name}")
        self.mode = mode

    def restart(self):
        """Throws the old session away and starts a fresh one."""
        self.session = GameSession(self.config, self.rng)
        self._set_mode(GameMode.PLAYING)

    def quit(self):
        log.info(f"quit requested in {self.mode.name}")
        self.quitting = True

    def tick(self, elapsed_ms: float, key: Optional[Key], renderer: Renderer):
        if self.quitting:
            return
        if self.mode == GameMode.MENU:
            self._menu(key, renderer)
        elif self.mode == GameMode.PLAYING:
            self._play(elapsed_ms, key, renderer)
        else:
            self._dead(key, renderer)

    def _handle_menu_key(self, key: Optional[Key]):
        if key == Key.RESTART:
            self.restart()
        elif key == Key.QUIT:
            self.quit()

    def _menu(self, key: Optional[Key], renderer: Renderer):
        draw_menu(renderer)
        self._handle_menu_key(key)

    def _dead(self, key: Optional[Key], renderer: Renderer):
        draw_death_screen(renderer, self.session.score)
        self._handle_menu_key(key)

    def _play(self, elapsed_ms: float, key: Optional[Key], renderer: Renderer):
        if key == Key.QUIT:
            self.quit()
            return
        alive = self.session.advance(elapsed_ms, key == Key.FLAP)
        draw_session(renderer, self.session)
        if not alive:
            log.info(f"player died with score {self.session.score}")
            self._set_mode(GameMode.DEAD)
