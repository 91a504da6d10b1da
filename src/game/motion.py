"""
Motion & Lifecycle
==================

Per-tick movement for every entity, plus expiry of anything that has left
the playfield or burnt out.

Removal always builds a new retained list rather than deleting from a list
while iterating it forward, so no neighbor is skipped or visited twice.
"""

import math
from typing import List
import sys
sys.path.append('..')
from config import Config

from .entities import Player, Bullet, Alien, Particle, MovementPattern
from .state import SessionState, InputState, TickEvents, AudioCue
from .progression import check_game_over
from src.utils.logger import get_logger

logger = get_logger(__name__)


def player_direction(inputs: InputState) -> int:
    """
    Horizontal direction requested by the input flags.

    Holding left and right together cancels out (returns 0).
    """
    return int(inputs.move_right) - int(inputs.move_left)


def move_player(player: Player, inputs: InputState, screen_width: int) -> None:
    """Move the ship and clamp it to [0, screen_width - width]."""
    player.x += player_direction(inputs) * player.speed
    player.x = max(0, min(player.x, screen_width - player.width))


def try_fire(state: SessionState, inputs: InputState, config: Config,
             events: TickEvents) -> bool:
    """Fire a bullet if the trigger is held and the cooldown has run out."""
    player = state.player
    if not inputs.fire or player.cooldown > 0:
        return False

    state.bullets.append(Bullet.fired_from(player, config))
    player.cooldown = player.cooldown_period
    events.shots += 1
    events.cues.append(AudioCue.SHOOT)
    return True


def tick_cooldown(player: Player) -> None:
    if player.cooldown > 0:
        player.cooldown -= 1


def scroll_background(state: SessionState, screen_height: int) -> None:
    """Advance the background by one pixel, wrapping at the screen height."""
    state.background_offset += 1
    if state.background_offset >= screen_height:
        state.background_offset = 0


def update_bullets(bullets: List[Bullet]) -> List[Bullet]:
    """Move bullets upward; drop those whose tail has cleared the top edge."""
    for bullet in bullets:
        bullet.y -= bullet.speed
    return [b for b in bullets if b.y >= -b.height]


def update_alien(alien: Alien, config: Config) -> None:
    """Advance one alien along its movement pattern."""
    if alien.pattern is MovementPattern.ZIGZAG:
        alien.phase += config.ZIGZAG_PHASE_STEP
        alien.x += math.sin(alien.phase) * config.ZIGZAG_AMPLITUDE
    alien.y += alien.speed


def update_aliens(state: SessionState, config: Config, events: TickEvents) -> None:
    """
    Move every alien and handle escapes.

    An alien below the bottom edge is removed and costs a flat penalty.
    Dropping below the score floor ends the game.
    """
    survivors = []
    for alien in state.aliens:
        update_alien(alien, config)
        if alien.y > config.SCREEN_HEIGHT:
            state.score -= config.ESCAPE_PENALTY
            state.total_escapes += 1
            events.escapes += 1
            events.points -= config.ESCAPE_PENALTY
            logger.debug(f"Alien escaped at x={alien.x:.0f} (score={state.score})")
            check_game_over(state, config, events)
        else:
            survivors.append(alien)
    state.aliens = survivors


def update_particles(particles: List[Particle]) -> List[Particle]:
    """Drift particles by their velocity and burn one tick of life."""
    for particle in particles:
        particle.x += particle.vx
        particle.y += particle.vy
        particle.life -= 1
    return [p for p in particles if p.life > 0]
