"""
Collision Resolver
==================

Bullet vs. alien hit detection using axis-aligned bounding boxes.

Every bullet is consumed by the first alien it touches. An alien loses one
health per hit; the hit that takes it to zero destroys it, scores it, and
stops any further bullets being tested against it that tick.
"""

import random
import sys
sys.path.append('..')
from config import Config

from .entities import Alien
from .effects import create_explosion
from .progression import maybe_advance_wave
from .state import SessionState, TickEvents, AudioCue
from src.utils.logger import get_logger

logger = get_logger(__name__)


def aabb_overlap(a, b) -> bool:
    """
    Strict AABB overlap test between two boxes.

    Boxes that merely touch along an edge do not overlap. The test is
    symmetric: aabb_overlap(a, b) == aabb_overlap(b, a).
    """
    return (
        a.left < b.right and
        a.right > b.left and
        a.top < b.bottom and
        a.bottom > b.top
    )


def kill_reward(wave: int, config: Config) -> int:
    """Points for destroying an alien at the given wave."""
    if config.WAVE_SCALED_REWARD:
        return config.POINTS_PER_KILL * wave
    return config.POINTS_PER_KILL


def _hit_alien(state: SessionState, alien: Alien) -> bool:
    """
    Test live bullets against one alien, consuming each bullet that hits.

    Bullets are scanned in reverse index order so deleting the current one
    never shifts a bullet that has not been visited yet.

    Returns:
        True if the alien was destroyed
    """
    bullets = state.bullets
    for b in range(len(bullets) - 1, -1, -1):
        if aabb_overlap(bullets[b], alien):
            del bullets[b]
            alien.health -= 1
            if alien.health <= 0:
                return True
    return False


def _destroy_alien(state: SessionState, alien: Alien, config: Config,
                   rng: random.Random, events: TickEvents) -> None:
    points = kill_reward(state.wave, config)
    state.score += points
    state.total_kills += 1
    events.kills += 1
    events.points += points

    cx, cy = alien.center
    state.particles.extend(create_explosion(cx, cy, config, rng))
    events.cues.append(AudioCue.EXPLOSION)
    logger.debug(f"Alien tier {alien.tier} destroyed (+{points}, score={state.score})")

    maybe_advance_wave(state, config, rng, events)


def resolve_collisions(state: SessionState, config: Config, rng: random.Random,
                       events: TickEvents) -> int:
    """
    Resolve every bullet/alien hit for this tick.

    Aliens are scanned in reverse index order and removed in place the
    moment they die, so the wave roll sees the true number of aliens left.

    Returns:
        Number of aliens destroyed
    """
    kills = 0
    aliens = state.aliens
    for a in range(len(aliens) - 1, -1, -1):
        alien = aliens[a]
        if _hit_alien(state, alien):
            del aliens[a]
            _destroy_alien(state, alien, config, rng, events)
            kills += 1
    return kills
