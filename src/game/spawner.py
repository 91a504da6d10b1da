"""
Alien Spawner
=============

Each tick there is a small chance a new alien appears just above the top
edge. The chance grows linearly with the wave number, which is the game's
only difficulty knob besides the wave-scaled kill reward.
"""

import random
from typing import Optional
import sys
sys.path.append('..')
from config import Config

from .entities import Alien
from .state import SessionState


def spawn_chance(wave: int, config: Config) -> float:
    """Probability of spawning an alien this tick, clamped to [0, 1]."""
    chance = config.SPAWN_BASE_CHANCE + wave * config.SPAWN_WAVE_INCREMENT
    return max(0.0, min(1.0, chance))


def maybe_spawn_alien(state: SessionState, config: Config,
                      rng: random.Random) -> Optional[Alien]:
    """
    Roll for a spawn and, on success, append one alien to the session.

    The alien is placed so it fits horizontally on screen, with its bottom
    edge on the top of the screen, and its type is drawn uniformly from the
    configured type table.

    Returns:
        The new alien, or None if nothing spawned this tick
    """
    if rng.random() >= spawn_chance(state.wave, config):
        return None

    spec = rng.choice(config.ALIEN_TYPES)
    x = rng.random() * (config.SCREEN_WIDTH - config.ALIEN_WIDTH)
    alien = Alien.from_type(spec, x, -config.ALIEN_HEIGHT,
                            config.ALIEN_WIDTH, config.ALIEN_HEIGHT)
    state.aliens.append(alien)
    return alien
