"""
data_models.py: Data structures and immutable tuning for the game state.
"""

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FRAME_DURATION,
    FALLING_GRAVITY, TERMINAL_FALLING_VELOCITY, FALLING_GLYPH,
    MAX_FLAPPING_VELOCITY, FLAP_INIT_ACCELERATION, FLAP_MAX_ACCELERATION,
    FLAP_DURATION, FLAPPING_GLYPHS,
    DIVING_GLYPH, DIVING_HOLD_LENGTH, DIVING_GRAVITY, TERMINAL_DIVING_VELOCITY,
    GAP_BAND, MIN_GAP, BASE_GAP_SIZE, OBJECTIVE_WIDTH, OBJECTIVE_HEIGHT,
    SCORE_FLASH_COLORS, PLAYER_COLOR, PLAYER_START_X, PLAYER_START_Y,
)

Color = Tuple[int, int, int]


class ConfigError(ValueError):
    """Raised when a GameConfig cannot drive a consistent simulation."""


class LocomotionState(Enum):
    FALLING = "falling"
    FLAPPING = "flapping"
    DIVING = "diving"


class GameMode(Enum):
    MENU = "menu"
    PLAYING = "playing"
    DEAD = "dead"


class Key(Enum):
    """Logical keys the core reacts to; the backend maps physical keys onto these."""
    FLAP = "flap"
    RESTART = "restart"
    QUIT = "quit"


@dataclass(frozen=True)
class GameConfig:
    """Tuning for one game revision. Built once per session and never mutated."""
    screen_width: int = SCREEN_WIDTH
    screen_height: int = SCREEN_HEIGHT
    frame_duration: float = FRAME_DURATION
    player_start: Tuple[int, int] = (PLAYER_START_X, PLAYER_START_Y)

    falling_gravity: float = FALLING_GRAVITY
    terminal_falling_velocity: float = TERMINAL_FALLING_VELOCITY
    falling_glyph: str = FALLING_GLYPH

    max_flapping_velocity: float = MAX_FLAPPING_VELOCITY
    flap_init_acceleration: float = FLAP_INIT_ACCELERATION
    flap_max_acceleration: float = FLAP_MAX_ACCELERATION
    flap_duration: int = FLAP_DURATION
    flapping_glyphs: Tuple[str, ...] = FLAPPING_GLYPHS

    diving_enabled: bool = True
    diving_glyph: str = DIVING_GLYPH
    diving_hold_length: int = DIVING_HOLD_LENGTH
    diving_gravity: float = DIVING_GRAVITY
    terminal_diving_velocity: float = TERMINAL_DIVING_VELOCITY

    gap_band: Tuple[int, int] = GAP_BAND
    min_gap: int = MIN_GAP
    base_gap_size: int = BASE_GAP_SIZE

    objectives_enabled: bool = True
    score_flash_colors: Tuple[Color, ...] = SCORE_FLASH_COLORS

    def __post_init__(self):
        animation_length = len(self.flapping_glyphs)
        if animation_length == 0:
            raise ConfigError("flapping_glyphs must not be empty")
        if self.flap_duration <= 0 or self.flap_duration % animation_length:
            raise ConfigError(
                f"flap_duration ({self.flap_duration}) must be a positive multiple "
                f"of the flapping animation length ({animation_length})")
        if self.frame_duration <= 0:
            raise ConfigError("frame_duration must be positive")
        if self.falling_gravity <= 0 or self.diving_gravity <= 0:
            raise ConfigError("gravity must pull downwards")
        if self.terminal_falling_velocity <= 0 or self.terminal_diving_velocity <= 0:
            raise ConfigError("terminal velocities must be positive")
        if self.max_flapping_velocity >= 0:
            raise ConfigError("max_flapping_velocity must be negative (upwards)")
        if self.diving_hold_length < 1:
            raise ConfigError("diving_hold_length must be at least 1")
        if self.min_gap < 2:
            raise ConfigError("min_gap must be at least 2")
        low, high = self.gap_band
        if not 0 <= low < high <= self.screen_height:
            raise ConfigError(f"gap_band {self.gap_band} does not fit the screen")
        if self.screen_height < OBJECTIVE_HEIGHT + 2:
            raise ConfigError("screen_height is too small to place objectives")
        if self.screen_width < 4 * OBJECTIVE_WIDTH:
            raise ConfigError("screen_width is too small to place objectives")
        if not self.score_flash_colors:
            raise ConfigError("score_flash_colors must hold at least the resting colour")

    @property
    def animation_step(self) -> int:
        """Physics steps spent on each flapping glyph."""
        return self.flap_duration // len(self.flapping_glyphs)

    @property
    def flash_length(self) -> int:
        return len(self.score_flash_colors)

    @classmethod
    def preset(cls, name: str) -> "GameConfig":
        try:
            return PRESETS[name]
        except KeyError:
            raise ConfigError(
                f"unknown preset {name!r}; choose one of {', '.join(sorted(PRESETS))}") from None


# The three revisions of the game: plain flapping, flapping + diving, and the full dragon.
PRESETS: Dict[str, GameConfig] = {
    "flappy": GameConfig(
        falling_gravity=0.5, diving_enabled=False, objectives_enabled=False,
        score_flash_colors=(PLAYER_COLOR,)),
    "diving": GameConfig(
        falling_gravity=0.5, objectives_enabled=False, score_flash_colors=(PLAYER_COLOR,)),
    "dragon": GameConfig(),
}


@dataclass
class Obstacle:
    """A single-column barrier with a passable gap."""
    x: int
    gap_center_y: int
    gap_half_size: int

    @classmethod
    def create(cls, world_x: int, score: int, config: GameConfig,
               rng: random.Random) -> "Obstacle":
        """Places a new barrier; the gap narrows as the score rises, down to min_gap."""
        low, high = config.gap_band
        return cls(
            x=world_x,
            gap_center_y=rng.randrange(low, high),
            gap_half_size=max(config.min_gap, config.base_gap_size - score) // 2,
        )

    @property
    def gap_top(self) -> int:
        return self.gap_center_y - self.gap_half_size

    @property
    def gap_bottom(self) -> int:
        return self.gap_center_y + self.gap_half_size

    def hit_test(self, x: int, y: int) -> bool:
        # Only the exact column counts; a step that skips over it is safe.
        if x != self.x:
            return False
        return y < self.gap_top or y > self.gap_bottom


@dataclass
class Objective:
    """A 3-wide, 2-tall collectible anchored at its top-left cell."""
    x: int
    y: int
    width: int = field(default=OBJECTIVE_WIDTH, repr=False)
    height: int = field(default=OBJECTIVE_HEIGHT, repr=False)

    @classmethod
    def create(cls, world_x: int, config: GameConfig, rng: random.Random) -> "Objective":
        return cls(x=world_x, y=rng.randrange(2, config.screen_height - 1))

    def hit_test(self, x: int, y: int) -> bool:
        return self.x <= x < self.x + self.width and self.y <= y < self.y + self.height
