"""
Per-Tick Update
===============

tick() advances a session by exactly one frame. Order while playing:

    1. Player movement and (cooldown-gated) firing
    2. Alien spawn roll
    3. Cooldown countdown and background scroll
    4. Bullet motion and expiry
    5. Alien motion, escapes and the game-over check
    6. Bullet/alien collisions, scoring, explosions and wave roll
    7. Particle motion and expiry

Outside the PLAYING phase only the start/restart signals are processed.
"""

import random
from typing import Tuple
import sys
sys.path.append('..')
from config import Config

from .state import SessionState, InputState, TickEvents, GamePhase
from .motion import (
    move_player, try_fire, tick_cooldown, scroll_background,
    update_bullets, update_aliens, update_particles,
)
from .spawner import maybe_spawn_alien
from .collisions import resolve_collisions
from .progression import handle_phase_inputs


def tick(state: SessionState, inputs: InputState, config: Config,
         rng: random.Random) -> Tuple[SessionState, TickEvents]:
    """
    Advance the session by one tick.

    Args:
        state: Session to update (mutated in place and returned)
        inputs: Input flags sampled by the host for this tick
        config: Game constants
        rng: Random source for spawning, explosions and wave rolls

    Returns:
        Tuple of (state, events) where events lists the audio cues and
        counters produced during this tick
    """
    events = TickEvents()

    if state.phase is not GamePhase.PLAYING:
        handle_phase_inputs(state, inputs, config, events)
        return state, events

    move_player(state.player, inputs, config.SCREEN_WIDTH)
    try_fire(state, inputs, config, events)
    if maybe_spawn_alien(state, config, rng) is not None:
        events.spawned += 1

    tick_cooldown(state.player)
    scroll_background(state, config.SCREEN_HEIGHT)

    state.bullets = update_bullets(state.bullets)
    update_aliens(state, config, events)
    resolve_collisions(state, config, rng, events)
    state.particles = update_particles(state.particles)

    state.ticks += 1
    return state, events
