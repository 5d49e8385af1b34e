"""
rendering.py: What the core asks the character-grid backend to draw.
"""

from typing import Protocol

from .constants import (
    BACKGROUND_COLOR, OBSTACLE_COLOR, OBJECTIVE_COLOR, OBSTACLE_GLYPH, OBJECTIVE_GLYPHS,
)
from .data_models import Color, Objective, Obstacle
from .player import PlayerBody
from .session import GameSession

PLAYER_SCREEN_X = 0
TELEMETRY_WIDTH = 20


class Renderer(Protocol):
    """The drawing surface supplied by the backend, one cell per glyph."""

    width: int
    height: int

    def clear(self, bg: Color = BACKGROUND_COLOR) -> None: ...

    def draw_cell(self, x: int, y: int, fg: Color, bg: Color, glyph: str) -> None: ...

    def print_text(self, x: int, y: int, text: str) -> None: ...

    def print_centered(self, y: int, text: str) -> None: ...


def draw_player(renderer: Renderer, player: PlayerBody):
    renderer.draw_cell(PLAYER_SCREEN_X, player.y, player.color, BACKGROUND_COLOR, player.glyph)


def draw_obstacle(renderer: Renderer, obstacle: Obstacle, player_x: int, screen_height: int):
    """Draws the barrier column above and below the gap; the gap rows match hit_test."""
    screen_x = obstacle.x - player_x
    if not 0 <= screen_x < renderer.width:
        return

    # Top half of obstacle
    for y in range(0, obstacle.gap_top):
        renderer.draw_cell(screen_x, y, OBSTACLE_COLOR, BACKGROUND_COLOR, OBSTACLE_GLYPH)

    # Bottom half of obstacle
    for y in range(obstacle.gap_bottom + 1, screen_height):
        renderer.draw_cell(screen_x, y, OBSTACLE_COLOR, BACKGROUND_COLOR, OBSTACLE_GLYPH)


def draw_objective(renderer: Renderer, objective: Objective, player_x: int):
    screen_x = objective.x - player_x
    for row, line in enumerate(OBJECTIVE_GLYPHS):
        for col, glyph in enumerate(line):
            x = screen_x + col
            if 0 <= x < renderer.width:
                renderer.draw_cell(x, objective.y + row, OBJECTIVE_COLOR, BACKGROUND_COLOR, glyph)


def draw_hud(renderer: Renderer, session: GameSession):
    renderer.print_text(0, 0, "Press SPACE to flap")
    renderer.print_text(0, 1, f"Score: {session.score}")

    column = max(renderer.width - TELEMETRY_WIDTH, 0)
    for row, (name, value) in enumerate(session.player.to_debug_state().items()):
        renderer.print_text(column, row, f"{name}={value}")


def draw_session(renderer: Renderer, session: GameSession):
    """Draws one playing frame: background, scene, then HUD on top."""
    renderer.clear(BACKGROUND_COLOR)
    player_x = session.player.x
    draw_obstacle(renderer, session.obstacle, player_x, session.config.screen_height)
    if session.objective is not None:
        draw_objective(renderer, session.objective, player_x)
    draw_player(renderer, session.player)
    draw_hud(renderer, session)


def draw_menu(renderer: Renderer):
    renderer.clear(BACKGROUND_COLOR)
    renderer.print_centered(5, "Welcome to Flappy Dragon")
    renderer.print_centered(8, "(P) Play Game")
    renderer.print_centered(9, "(Q) Quit Game")


def draw_death_screen(renderer: Renderer, score: int):
    renderer.clear(BACKGROUND_COLOR)
    renderer.print_centered(5, "You are DEAD")
    renderer.print_centered(6, f"score: {score}")
    renderer.print_centered(8, "(P) Play Again")
    renderer.print_centered(9, "(Q) Quit Game")
