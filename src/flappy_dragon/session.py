"""
session.py: One run of the game, from spawn to death.
"""

import random
from typing import Optional

from .data_models import GameConfig, LocomotionState, Objective, Obstacle
from .logger import get_logger
from .player import PlayerBody

log = get_logger("session")


class GameSession:
    """
    Owns the player, the live obstacle and objective, and the score.
    External ticks feed elapsed time; physics advances at a fixed cadence.
    """

    def __init__(self, config: GameConfig, rng: Optional[random.Random] = None):
        self.config = config
        self.rng = rng if rng is not None else random.Random()

        self.player = PlayerBody(config)
        self.score = 0
        self.frame_accumulator = 0.0
        self.holding_dive_input = False
        self.alive = True
        self.steps = 0

        self.obstacle = Obstacle.create(config.screen_width, self.score, config, self.rng)
        self.objective: Optional[Objective] = None
        if config.objectives_enabled:
            self.objective = self._spawn_objective()

    def _spawn_obstacle(self) -> Obstacle:
        """Generates a new barrier one screen ahead of the player."""
        world_x = self.player.x + self.config.screen_width
        return Obstacle.create(world_x, self.score, self.config, self.rng)

    def _spawn_objective(self) -> Objective:
        width = self.config.screen_width
        world_x = self.player.x + self.rng.randint(width // 4, width - 3)
        return Objective.create(world_x, self.config, self.rng)

    def _scored(self, reason: str):
        self.score += 1
        self.player.reset_score_flash()
        log.debug(f"score {self.score} ({reason}) at x={self.player.x}")

    def advance(self, elapsed_ms: float, dive_input_asserted: bool) -> bool:
        """
        The per-tick simulation step. Runs at most one physics step per call,
        however far behind the accumulator is. Returns whether the player is alive.
        """
        if not self.alive:
            return False

        player = self.player
        self.frame_accumulator += elapsed_ms
        if dive_input_asserted:
            self.holding_dive_input = True

        # 1. Fixed step
        stepped = self.frame_accumulator > self.config.frame_duration
        if stepped:
            player.step_physics()
            player.advance_flap_animation()
            if self.holding_dive_input:
                player.dive_counter += 1
            player.advance_score_flash()
            self.steps += 1

        # 2. Input drives the locomotion state on every tick
        if self.holding_dive_input:
            if self.config.diving_enabled and player.dive_counter >= self.config.diving_hold_length:
                player.set_locomotion_state(LocomotionState.DIVING)
            else:
                player.set_locomotion_state(LocomotionState.FLAPPING)

        # 3. Passing, collecting and dying
        self._resolve()

        # 4. Release handling, only on fixed-step ticks. The latch covers one step.
        if stepped:
            self.frame_accumulator = 0.0
            if self.holding_dive_input:
                self.holding_dive_input = False
            elif player.state != LocomotionState.FLAPPING:
                # A running flap expires through its own counter.
                player.set_locomotion_state(LocomotionState.FALLING)

        return self.alive

    def _resolve(self):
        player = self.player

        if player.x > self.obstacle.x:
            self._scored("obstacle passed")
            self.obstacle = self._spawn_obstacle()

        if self.objective is not None:
            if self.objective.hit_test(player.x, player.y):
                self._scored("objective collected")
                self.objective = self._spawn_objective()
            elif player.x > self.objective.x:
                self.objective = self._spawn_objective()

        if player.y >= self.config.screen_height or self.obstacle.hit_test(player.x, player.y):
            self.alive = False
            log.debug(f"died at x={player.x} y={player.y} with score {self.score}")
