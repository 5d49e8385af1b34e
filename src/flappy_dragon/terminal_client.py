#!/usr/bin/env python3
"""
terminal_client.py

Character-grid backend built on pygame: owns the window, the clock and the
keyboard, and draws the cells the core asks for.
"""

import random
from typing import Dict, Iterable, Optional, Sequence, Tuple

import pygame

from .constants import BACKGROUND_COLOR, CELL_SIZE, RENDER_FPS, TEXT_COLOR
from .data_models import Color, GameConfig, Key
from .game_modes import GameModeController
from .logger import get_logger

log = get_logger("client")

WINDOW_TITLE = "Flappy Dragon"


def translate_input(events: Iterable[pygame.event.Event], pressed: Sequence[bool]) -> Optional[Key]:
    """
    Collapses one frame of pygame input into at most one logical key.
    Quit beats restart, restart beats flap. Flap is read from the held-key
    state so that holding space keeps asserting it.
    """
    key = None
    for event in events:
        if event.type == pygame.QUIT:
            return Key.QUIT
        if event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_q, pygame.K_ESCAPE):
                return Key.QUIT
            if event.key == pygame.K_p:
                key = Key.RESTART
    if key is None and pressed[pygame.K_SPACE]:
        key = Key.FLAP
    return key


class GridRenderer:
    """A fixed grid of character cells drawn onto a pygame surface."""

    def __init__(self, surface: pygame.Surface, width: int, height: int, cell_size: int = CELL_SIZE):
        self.surface = surface
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.font = pygame.font.SysFont("monospace", cell_size, bold=True)
        self._glyph_cache: Dict[Tuple[str, Color], pygame.Surface] = {}

    def _glyph(self, glyph: str, fg: Color) -> pygame.Surface:
        cached = self._glyph_cache.get((glyph, fg))
        if cached is None:
            cached = self.font.render(glyph, True, fg)
            self._glyph_cache[(glyph, fg)] = cached
        return cached

    def clear(self, bg: Color = BACKGROUND_COLOR):
        self.surface.fill(bg)

    def draw_cell(self, x: int, y: int, fg: Color, bg: Color, glyph: str):
        if not (0 <= x < self.width and 0 <= y < self.height):
            return
        size = self.cell_size
        rect = pygame.Rect(x * size, y * size, size, size)
        self.surface.fill(bg, rect)
        image = self._glyph(glyph, fg)
        self.surface.blit(image, image.get_rect(center=rect.center))

    def print_text(self, x: int, y: int, text: str):
        for offset, glyph in enumerate(text):
            self.draw_cell(x + offset, y, TEXT_COLOR, BACKGROUND_COLOR, glyph)

    def print_centered(self, y: int, text: str):
        self.print_text((self.width - len(text)) // 2, y, text)


class DragonClient:
    def __init__(self, controller: GameModeController, fps: int = RENDER_FPS):
        self.controller = controller
        self.fps = fps
        config = controller.config

        pygame.init()
        self.screen = pygame.display.set_mode(
            (config.screen_width * CELL_SIZE, config.screen_height * CELL_SIZE))
        pygame.display.set_caption(WINDOW_TITLE)
        self.renderer = GridRenderer(self.screen, config.screen_width, config.screen_height)
        self.clock = pygame.time.Clock()

    def run(self):
        """The main client execution loop; returns once the controller asks to quit."""
        log.info(f"starting at {self.fps} fps")
        try:
            while not self.controller.quitting:
                elapsed_ms = float(self.clock.tick(self.fps))
                key = translate_input(pygame.event.get(), pygame.key.get_pressed())
                self.controller.tick(elapsed_ms, key, self.renderer)
                pygame.display.flip()
        finally:
            log.info("shutting down")
            pygame.quit()


def run_client(config: GameConfig, seed: Optional[int] = None, fps: int = RENDER_FPS):
    controller = GameModeController(config, random.Random(seed))
    DragonClient(controller, fps=fps).run()
