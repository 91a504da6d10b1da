"""
Render Snapshots
================

Read-only, value-comparable views of a session handed to the renderer after
each tick. The renderer never sees the live entities.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from .entities import MovementPattern
from .state import SessionState, GamePhase


@dataclass(frozen=True)
class PlayerView:
    x: float
    y: float
    width: int
    height: int
    cooldown: int


@dataclass(frozen=True)
class BulletView:
    x: float
    y: float
    width: int
    height: int


@dataclass(frozen=True)
class AlienView:
    x: float
    y: float
    width: int
    height: int
    tier: int
    pattern: MovementPattern
    phase: float
    health: int

    @property
    def scale(self) -> float:
        """Pulse factor used by the renderer (1 +/- 5%)."""
        return 1 + math.sin(self.phase) * 0.05


@dataclass(frozen=True)
class ParticleView:
    x: float
    y: float
    radius: float
    color: Tuple[int, int, int]


@dataclass(frozen=True)
class Snapshot:
    """Everything the renderer needs for one frame."""
    player: PlayerView
    bullets: Tuple[BulletView, ...]
    aliens: Tuple[AlienView, ...]
    particles: Tuple[ParticleView, ...]
    score: int
    wave: int
    phase: GamePhase
    background_offset: int

    @classmethod
    def from_state(cls, state: SessionState) -> 'Snapshot':
        p = state.player
        return cls(
            player=PlayerView(p.x, p.y, p.width, p.height, p.cooldown),
            bullets=tuple(BulletView(b.x, b.y, b.width, b.height) for b in state.bullets),
            aliens=tuple(
                AlienView(a.x, a.y, a.width, a.height, a.tier, a.pattern, a.phase, a.health)
                for a in state.aliens
            ),
            particles=tuple(ParticleView(pt.x, pt.y, pt.radius, pt.color) for pt in state.particles),
            score=state.score,
            wave=state.wave,
            phase=state.phase,
            background_offset=state.background_offset,
        )
