"""
Flappy Dragon: a side-scrolling reflex game on a character grid.
"""

from .data_models import (
    ConfigError, GameConfig, GameMode, Key, LocomotionState, Objective, Obstacle, PRESETS,
)
from .game_modes import GameModeController
from .player import PlayerBody
from .session import GameSession

__version__ = "0.3.0"

__all__ = [
    "ConfigError", "GameConfig", "GameMode", "GameModeController", "GameSession", "Key",
    "LocomotionState", "Objective", "Obstacle", "PlayerBody", "PRESETS",
]
