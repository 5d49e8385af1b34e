"""
player.py: The dragon's body: position, velocity, locomotion state and animation counters.
"""

from typing import Dict, Optional

from .data_models import Color, GameConfig, LocomotionState
from .physics_core import PhysicsCore


class PlayerBody(PhysicsCore):
    """
    Player state advanced one fixed physics step at a time.
    Inherits the acceleration laws from PhysicsCore.
    """

    def __init__(self, config: GameConfig, x: Optional[int] = None, y: Optional[int] = None):
        super().__init__(config)
        start_x, start_y = config.player_start
        self.x = start_x if x is None else x
        self.y = start_y if y is None else y
        self.velocity = 0.0
        self.state = LocomotionState.FALLING
        self.flap_frame = 0
        self.dive_counter = 0
        # Starts at the resting colour so nothing flashes before the first score.
        self.score_flash_frame = config.flash_length - 1

    def set_locomotion_state(self, new_state: LocomotionState):
        """The only place the locomotion state changes; resets the counters of the entered state."""
        if new_state == self.state:
            return

        if new_state == LocomotionState.FLAPPING:
            self.dive_counter = 0
        elif new_state == LocomotionState.FALLING:
            self.dive_counter = 0
            self.flap_frame = 0
        elif new_state == LocomotionState.DIVING:
            self.flap_frame = 0
        self.state = new_state

    def step_physics(self):
        """Applies the law of the current state, then moves one column and integrates y."""
        if self.state == LocomotionState.FALLING:
            self.velocity = self.fall(self.velocity)
        elif self.state == LocomotionState.DIVING:
            self.velocity = self.dive(self.velocity)
        else:
            self.velocity = self.flap(self.velocity, self.flap_frame)

        self.x, self.y = self.integrate(self.x, self.y, self.velocity)

    def advance_flap_animation(self):
        """A flap is a fixed-length burst: it expires to Falling after flap_duration steps."""
        if self.state != LocomotionState.FLAPPING:
            return
        self.flap_frame += 1
        if self.flap_frame == self.config.flap_duration:
            self.set_locomotion_state(LocomotionState.FALLING)

    def advance_score_flash(self):
        if self.score_flash_frame < self.config.flash_length - 1:
            self.score_flash_frame += 1

    def reset_score_flash(self):
        self.score_flash_frame = 0

    @property
    def glyph(self) -> str:
        cfg = self.config
        if self.state == LocomotionState.FLAPPING:
            return cfg.flapping_glyphs[self.flap_frame // cfg.animation_step]
        if self.state == LocomotionState.DIVING:
            return cfg.diving_glyph
        return cfg.falling_glyph

    @property
    def color(self) -> Color:
        return self.config.score_flash_colors[self.score_flash_frame]

    def to_debug_state(self) -> Dict:
        """Telemetry shown in the HUD."""
        return {
            "x": self.x,
            "y": self.y,
            "vel": round(self.velocity, 2),
            "fidx": self.flap_frame,
            "dive": self.dive_counter,
            "state": self.state.name,
        }

    def __repr__(self):
        return (f"PlayerBody(x={self.x}, y={self.y}, velocity={self.velocity:.2f}, "
                f"state={self.state.name}, flap_frame={self.flap_frame}, "
                f"dive_counter={self.dive_counter})")
