"""
physics_core.py: The shared, deterministic acceleration laws and integration.
"""

from typing import Tuple

from .data_models import GameConfig


class PhysicsCore:
    """
    Deterministic kinematics driven by a GameConfig.
    One call of each law corresponds to one fixed physics step.
    """

    def __init__(self, config: GameConfig):
        self.config = config

    @staticmethod
    def apply_gravity(velocity: float, gravity: float, terminal_velocity: float) -> float:
        """Accelerates downwards without ever passing the terminal velocity."""
        if velocity < terminal_velocity:
            return min(velocity + gravity, terminal_velocity)
        return terminal_velocity

    def flap_acceleration(self, flap_frame: int) -> float:
        """Upward thrust, ramped linearly from the initial to the maximum acceleration."""
        cfg = self.config
        ramp = (cfg.flap_max_acceleration - cfg.flap_init_acceleration) / cfg.flap_duration
        return cfg.flap_init_acceleration + ramp * flap_frame

    def fall(self, velocity: float) -> float:
        cfg = self.config
        return self.apply_gravity(velocity, cfg.falling_gravity, cfg.terminal_falling_velocity)

    def dive(self, velocity: float) -> float:
        cfg = self.config
        return self.apply_gravity(velocity, cfg.diving_gravity, cfg.terminal_diving_velocity)

    def flap(self, velocity: float, flap_frame: int) -> float:
        """Gravity keeps pulling during a flap; thrust is added until the rise is capped."""
        cfg = self.config
        if velocity < cfg.terminal_falling_velocity:
            velocity = min(velocity + cfg.falling_gravity, cfg.terminal_falling_velocity)
        if velocity > cfg.max_flapping_velocity:
            velocity += self.flap_acceleration(flap_frame)
        # Never rise faster than the cap, including on the step that crosses it.
        return max(velocity, cfg.max_flapping_velocity)

    @staticmethod
    def integrate(x: int, y: int, velocity: float) -> Tuple[int, int]:
        """Moves one column forward and truncates the velocity onto the grid."""
        y += int(velocity)
        return x + 1, max(y, 0)
