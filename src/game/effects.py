"""
Explosion Effects
=================

Purely cosmetic particle bursts spawned when an alien is destroyed.
Particles never affect gameplay; they only drift and fade out.
"""

import colorsys
import random
from typing import List, Tuple
import sys
sys.path.append('..')
from config import Config

from .entities import Particle


def warm_color(hue: float) -> Tuple[int, int, int]:
    """Convert a hue in degrees to a fully saturated, mid-lightness RGB tuple."""
    r, g, b = colorsys.hls_to_rgb((hue % 360) / 360.0, 0.5, 1.0)
    return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)))


def create_explosion(cx: float, cy: float, config: Config,
                     rng: random.Random) -> List[Particle]:
    """
    Create a burst of particles centred on (cx, cy).

    Args:
        cx: Center X position
        cy: Center Y position
        config: Supplies count, radius, speed, lifetime and hue ranges
        rng: Random source

    Returns:
        The new particles (caller appends them to the session)
    """
    min_radius, max_radius = config.PARTICLE_RADIUS_RANGE
    min_life, max_life = config.PARTICLE_LIFE_RANGE
    min_hue, max_hue = config.PARTICLE_HUE_RANGE
    max_speed = config.PARTICLE_MAX_SPEED

    particles = []
    for _ in range(config.EXPLOSION_PARTICLES):
        hue = rng.uniform(min_hue, max_hue)
        particles.append(Particle(
            x=cx,
            y=cy,
            vx=rng.uniform(-max_speed, max_speed),
            vy=rng.uniform(-max_speed, max_speed),
            radius=rng.uniform(min_radius, max_radius),
            life=rng.uniform(min_life, max_life),
            color=warm_color(hue),
            hue=hue,
        ))
    return particles
