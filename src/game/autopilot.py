"""
Autopilot
=========

A tiny rule-based pilot that plays from the normalized state vector.
Used by the headless runner and the benchmark to keep the simulation busy
with realistic input (moving, firing, killing and missing aliens).
"""

import numpy as np
import sys
sys.path.append('..')
from config import Config

from .state import InputState


class Autopilot:
    """Chase the lowest alien and fire when lined up underneath it."""

    def __init__(self, config: Config):
        self.config = config
        self._travel = config.SCREEN_WIDTH - config.PLAYER_WIDTH
        # Stop steering once this close, so the ship does not jitter
        self._deadzone = config.PLAYER_SPEED

    def target_x(self, state: np.ndarray) -> float:
        """Center x of the lowest tracked alien, or the screen center if none."""
        cfg = self.config
        # First alien slot starts at index 3; a non-zero health marks it occupied
        if state[6] > 0:
            return state[3] * cfg.SCREEN_WIDTH + cfg.ALIEN_WIDTH / 2
        return cfg.SCREEN_WIDTH / 2

    def act(self, state: np.ndarray) -> InputState:
        ship_center = state[0] * self._travel + self.config.PLAYER_WIDTH / 2
        error = self.target_x(state) - ship_center
        has_target = state[6] > 0

        return InputState(
            move_left=error < -self._deadzone,
            move_right=error > self._deadzone,
            fire=bool(has_target and abs(error) < self.config.ALIEN_WIDTH / 2),
        )
