"""
Session State
=============

The explicit state threaded through every tick, plus the small value types
that cross the boundary between the core and its host:

    GamePhase    - START / PLAYING / GAME_OVER
    InputState   - the host's input flags sampled once per tick
    AudioCue     - sound events emitted by the core
    TickEvents   - everything that happened during one tick
    SessionState - score, wave, phase and all entity collections
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List
import sys
sys.path.append('..')
from config import Config

from .entities import Player, Bullet, Alien, Particle


class GamePhase(Enum):
    """Top-level game state machine."""
    START = auto()
    PLAYING = auto()
    GAME_OVER = auto()


class AudioCue(Enum):
    """Fire-and-forget sound events for the host's audio system."""
    SHOOT = 'shoot'
    EXPLOSION = 'explosion'
    MUSIC_START = 'music-start'
    MUSIC_STOP = 'music-stop'


@dataclass
class InputState:
    """
    Input flags for one tick.

    move_left/move_right/fire are held flags. start/restart are one-shot
    signals the host raises for a single tick.
    """
    move_left: bool = False
    move_right: bool = False
    fire: bool = False
    start: bool = False
    restart: bool = False


@dataclass
class TickEvents:
    """What happened during a single tick."""
    cues: List[AudioCue] = field(default_factory=list)
    shots: int = 0
    spawned: int = 0
    kills: int = 0
    escapes: int = 0
    points: int = 0  # Net score change this tick
    wave_advanced: bool = False
    phase_changed: bool = False


@dataclass
class SessionState:
    """All mutable game state for one session."""
    player: Player
    bullets: List[Bullet] = field(default_factory=list)
    aliens: List[Alien] = field(default_factory=list)
    particles: List[Particle] = field(default_factory=list)
    score: int = 0
    wave: int = 1
    phase: GamePhase = GamePhase.START
    background_offset: int = 0
    ticks: int = 0
    total_kills: int = 0
    total_escapes: int = 0

    @classmethod
    def new(cls, config: Config, phase: GamePhase = GamePhase.START) -> 'SessionState':
        """Create a freshly-reset session in the given phase."""
        return cls(player=Player.spawn(config), phase=phase)

    def reset(self, config: Config) -> None:
        """Return every session field to its initial value (phase is left to the caller)."""
        self.player = Player.spawn(config)
        self.bullets = []
        self.aliens = []
        self.particles = []
        self.score = 0
        self.wave = 1
        self.background_offset = 0
        self.ticks = 0
        self.total_kills = 0
        self.total_escapes = 0
