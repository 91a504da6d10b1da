"""
Game Entities
=============

Plain data records for everything that lives on the playfield:

    Player   - the defending ship
    Bullet   - a laser bolt travelling upward
    Alien    - a descending invader (straight or zigzag)
    Particle - one spark of an explosion

Entities carry no per-tick behavior; the motion, collision and effects
modules own all updates. Every box-shaped entity exposes its axis-aligned
edges (left/right/top/bottom) for collision tests.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple
import sys
sys.path.append('..')
from config import Config, AlienTypeSpec


class MovementPattern(Enum):
    """How an alien travels down the screen."""
    STRAIGHT = 'straight'
    ZIGZAG = 'zigzag'


class BoxMixin:
    """Axis-aligned box helpers for entities with x, y, width and height."""

    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)


@dataclass
class Player(BoxMixin):
    """The player's ship."""
    x: float
    y: float
    width: int
    height: int
    speed: int
    cooldown_period: int
    cooldown: int = 0

    @classmethod
    def spawn(cls, config: Config) -> 'Player':
        """Create a ship centred horizontally near the bottom of the screen."""
        return cls(
            x=(config.SCREEN_WIDTH - config.PLAYER_WIDTH) / 2,
            y=config.SCREEN_HEIGHT - config.PLAYER_Y_OFFSET,
            width=config.PLAYER_WIDTH,
            height=config.PLAYER_HEIGHT,
            speed=config.PLAYER_SPEED,
            cooldown_period=config.SHOOT_COOLDOWN,
        )


@dataclass
class Bullet(BoxMixin):
    """A player bullet. Speed is a positive number of pixels moved upward per tick."""
    x: float
    y: float
    width: int
    height: int
    speed: int

    @classmethod
    def fired_from(cls, player: Player, config: Config) -> 'Bullet':
        """Create a bullet at the nose of the ship."""
        return cls(
            x=player.x + player.width / 2 - config.BULLET_WIDTH / 2,
            y=player.y,
            width=config.BULLET_WIDTH,
            height=config.BULLET_HEIGHT,
            speed=config.BULLET_SPEED,
        )


@dataclass
class Alien(BoxMixin):
    """A descending alien."""
    x: float
    y: float
    width: int
    height: int
    speed: float
    health: int
    pattern: MovementPattern
    tier: int
    phase: float = 0.0  # Zigzag angle accumulator, also drives the pulse animation

    @classmethod
    def from_type(cls, spec: AlienTypeSpec, x: float, y: float,
                  width: int, height: int) -> 'Alien':
        """Instantiate an alien from a row of the type table."""
        return cls(
            x=x,
            y=y,
            width=width,
            height=height,
            speed=spec.speed,
            health=spec.health,
            pattern=MovementPattern(spec.pattern),
            tier=spec.tier,
        )

    @property
    def alive(self) -> bool:
        return self.health > 0


@dataclass
class Particle:
    """A single explosion spark."""
    x: float
    y: float
    vx: float
    vy: float
    radius: float
    life: float  # Remaining ticks
    color: Tuple[int, int, int]
    hue: float = 0.0
