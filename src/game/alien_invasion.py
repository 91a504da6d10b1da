"""
Alien Invasion Game
===================

The host-facing game object. Owns the configuration, a private random
generator and the session state, and drives the per-tick update.

Key Features:
- Deterministic when seeded (every random draw goes through one generator)
- Start / playing / game-over phases with restart
- Value-comparable render snapshots and fire-and-forget audio cues
- Normalized state vector for bots and benchmarks
"""

import random
from typing import Optional, Tuple, Dict, Any

import numpy as np

from .base_game import BaseGame
from .session import tick
from .snapshot import Snapshot
from .state import SessionState, InputState, TickEvents, GamePhase
import sys
sys.path.append('..')
from config import Config
from src.utils.logger import get_logger, log_session_summary

logger = get_logger(__name__)


class AlienInvasion(BaseGame):
    """Alien Invasion: a player ship defends Earth from descending aliens."""

    def __init__(self, config: Optional[Config] = None, seed: Optional[int] = None):
        """
        Initialize the game on its start screen.

        Args:
            config: Game configuration (defaults to Config())
            seed: Random seed; falls back to config.SEED, then to OS entropy
        """
        self.config = config or Config()
        self.rng = random.Random(seed if seed is not None else self.config.SEED)
        self.state = SessionState.new(self.config)

        self.width = self.config.SCREEN_WIDTH
        self.height = self.config.SCREEN_HEIGHT

        self._state_size = self.config.STATE_SIZE
        self._state_array = np.zeros(self._state_size, dtype=np.float32)
        self._max_health = max(spec.health for spec in self.config.ALIEN_TYPES)
        self._max_tier = max(1, max(spec.tier for spec in self.config.ALIEN_TYPES))

        self.last_events = TickEvents()

    @property
    def state_size(self) -> int:
        return self._state_size

    @property
    def phase(self) -> GamePhase:
        return self.state.phase

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def wave(self) -> int:
        return self.state.wave

    @property
    def game_over(self) -> bool:
        return self.state.phase is GamePhase.GAME_OVER

    def reset(self) -> Snapshot:
        """Return to the idle start screen with a fresh session."""
        self.state = SessionState.new(self.config)
        self.last_events = TickEvents()
        return self.snapshot()

    def step(self, inputs: Optional[InputState] = None) -> Tuple[Snapshot, TickEvents]:
        """Run one tick and return the new frame plus what happened."""
        was_playing = self.state.phase is GamePhase.PLAYING
        _, events = tick(self.state, inputs or InputState(), self.config, self.rng)
        self.last_events = events

        if was_playing and self.game_over:
            log_session_summary(
                score=self.state.score,
                wave=self.state.wave,
                ticks=self.state.ticks,
                kills=self.state.total_kills,
                escapes=self.state.total_escapes,
            )
        return self.snapshot(), events

    def start(self) -> Tuple[Snapshot, TickEvents]:
        """Raise the one-shot start signal for a single tick."""
        return self.step(InputState(start=True))

    def restart(self) -> Tuple[Snapshot, TickEvents]:
        """Raise the one-shot restart signal for a single tick."""
        return self.step(InputState(restart=True))

    def snapshot(self) -> Snapshot:
        return Snapshot.from_state(self.state)

    def get_state(self) -> np.ndarray:
        """
        Normalized state vector.

        Layout:
            [0]   ship x within its travel range
            [1]   shoot cooldown ratio
            [2]   wave (scaled, capped at 1)
            [...] lowest aliens first: x, y, tier, health (zero padded)
            [...] newest bullets first: x, y (zero padded)
        """
        cfg = self.config
        player = self.state.player
        self._state_array.fill(0.0)

        travel = self.width - player.width
        self._state_array[0] = player.x / travel if travel > 0 else 0.0
        if player.cooldown_period > 0:
            self._state_array[1] = player.cooldown / player.cooldown_period
        self._state_array[2] = min(self.state.wave / 10.0, 1.0)
        idx = 3

        lowest = sorted(self.state.aliens, key=lambda a: a.y, reverse=True)
        for i in range(cfg.STATE_MAX_ALIENS):
            if i < len(lowest):
                alien = lowest[i]
                self._state_array[idx] = alien.x / self.width
                self._state_array[idx + 1] = alien.y / self.height
                self._state_array[idx + 2] = alien.tier / self._max_tier
                self._state_array[idx + 3] = alien.health / self._max_health
            idx += 4

        newest = self.state.bullets[::-1]
        for i in range(cfg.STATE_MAX_BULLETS):
            if i < len(newest):
                bullet = newest[i]
                self._state_array[idx] = bullet.x / self.width
                self._state_array[idx + 1] = bullet.y / self.height
            idx += 2

        np.clip(self._state_array, 0.0, 1.0, out=self._state_array)
        return self._state_array.copy()

    @property
    def info(self) -> Dict[str, Any]:
        return {
            'score': self.state.score,
            'wave': self.state.wave,
            'phase': self.state.phase.name,
            'kills': self.state.total_kills,
            'escapes': self.state.total_escapes,
            'ticks': self.state.ticks,
            'aliens': len(self.state.aliens),
        }

    def seed(self, seed: int) -> None:
        self.rng.seed(seed)
