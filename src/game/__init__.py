"""
Game Module
===========

The simulation core. Pure Python, no rendering or audio.

Classes:
    AlienInvasion - The host-facing game object
    BaseGame      - Abstract base class for games
    Autopilot     - Rule-based pilot for headless runs

Functions:
    tick(state, inputs, config, rng) - Advance a session by one tick

Game Registry:
    Use get_game(name) to get a game class by name
    Use list_games() to get all available games
"""

from typing import Dict, List, Type, Optional, Any
from .alien_invasion import AlienInvasion
from .autopilot import Autopilot
from .base_game import BaseGame
from .session import tick
from .snapshot import Snapshot
from .state import GamePhase, InputState, AudioCue, TickEvents, SessionState


# =============================================================================
# GAME REGISTRY
# =============================================================================
# Maps game names to their classes and metadata.

GAME_REGISTRY: Dict[str, Dict[str, Any]] = {
    'alien_invasion': {
        'class': AlienInvasion,
        'name': 'Alien Invasion: Earth Defense',
        'description': 'Shoot the descending aliens before they reach Earth',
        'controls': ['LEFT', 'RIGHT', 'FIRE'],
    },
}


def get_game(name: str) -> Optional[Type[BaseGame]]:
    """
    Get a game class by name.

    Args:
        name: Game identifier (e.g., 'alien_invasion')

    Returns:
        The game class, or None if not found
    """
    entry = GAME_REGISTRY.get(name.lower())
    if entry:
        return entry['class']
    return None


def list_games() -> List[str]:
    """Get a list of all available game names."""
    return list(GAME_REGISTRY.keys())


__all__ = [
    # Classes
    'AlienInvasion',
    'Autopilot',
    'BaseGame',
    'Snapshot',
    'SessionState',
    'InputState',
    'TickEvents',
    'GamePhase',
    'AudioCue',
    # Functions
    'tick',
    # Registry functions
    'GAME_REGISTRY',
    'get_game',
    'list_games',
]
