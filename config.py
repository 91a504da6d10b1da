"""
Configuration file for Alien Invasion: Earth Defense
====================================================

All gameplay constants, ruleset presets, logging and host options are
centralized here. Modify these values to experiment with different tunings.

Usage:
    from config import Config
    cfg = Config()
    print(cfg.SPAWN_BASE_CHANCE)

    # The classic single-type rules (flat scoring, fixed spawn rate)
    simple = Config.simple()
"""

from dataclasses import dataclass, field
from typing import List, Tuple, Optional


@dataclass
class AlienTypeSpec:
    """One row of the alien type table."""
    speed: float
    health: int
    pattern: str  # 'straight' or 'zigzag'
    tier: int     # Visual variant used by the renderer


@dataclass
class Config:
    """
    Central configuration for the entire project.

    Sections:
    1. Screen Settings
    2. Player & Bullets
    3. Aliens & Spawner
    4. Scoring & Progression
    5. Particles
    6. State Vector
    7. Host (window, audio, logging)
    """

    # =========================================================================
    # RULESET
    # =========================================================================

    # Options: 'advanced' (default, wave-scaled), 'simple' (see Config.simple())
    RULESET: str = 'advanced'

    # =========================================================================
    # SCREEN SETTINGS
    # =========================================================================

    SCREEN_WIDTH: int = 800
    SCREEN_HEIGHT: int = 600
    FPS: int = 60

    # =========================================================================
    # PLAYER & BULLETS
    # =========================================================================

    PLAYER_WIDTH: int = 40
    PLAYER_HEIGHT: int = 40
    PLAYER_SPEED: int = 6
    PLAYER_Y_OFFSET: int = 60  # Distance of the ship's top edge from the bottom
    SHOOT_COOLDOWN: int = 20  # Ticks between consecutive shots

    BULLET_WIDTH: int = 4
    BULLET_HEIGHT: int = 16
    BULLET_SPEED: int = 8

    # =========================================================================
    # ALIENS & SPAWNER
    # =========================================================================

    ALIEN_WIDTH: int = 40
    ALIEN_HEIGHT: int = 40

    # Fast zigzagging alien and slow tanky alien
    ALIEN_TYPES: List[AlienTypeSpec] = field(default_factory=lambda: [
        AlienTypeSpec(speed=4, health=1, pattern='zigzag', tier=0),
        AlienTypeSpec(speed=2, health=3, pattern='straight', tier=1),
    ])

    ZIGZAG_PHASE_STEP: float = 0.1  # Radians per tick
    ZIGZAG_AMPLITUDE: float = 3.0   # Pixels of sideways drift per tick at peak

    # spawn chance = base + wave * increment (clamped to [0, 1])
    SPAWN_BASE_CHANCE: float = 0.01
    SPAWN_WAVE_INCREMENT: float = 0.005

    # =========================================================================
    # SCORING & PROGRESSION
    # =========================================================================

    POINTS_PER_KILL: int = 20
    WAVE_SCALED_REWARD: bool = True  # Kill reward multiplied by current wave
    ESCAPE_PENALTY: int = 20  # Flat, never wave-scaled
    SCORE_FLOOR: int = -100  # Game over once score drops below this
    WAVE_ADVANCE_CHANCE: float = 0.1  # Rolled when the last alien on screen dies

    # =========================================================================
    # PARTICLES
    # =========================================================================

    EXPLOSION_PARTICLES: int = 20
    PARTICLE_RADIUS_RANGE: Tuple[float, float] = (1.0, 4.0)
    PARTICLE_MAX_SPEED: float = 2.0  # Each axis drawn from [-max, max)
    PARTICLE_LIFE_RANGE: Tuple[float, float] = (30.0, 50.0)
    PARTICLE_HUE_RANGE: Tuple[float, float] = (20.0, 80.0)  # Orange-red hues

    # =========================================================================
    # STATE VECTOR
    # =========================================================================

    STATE_MAX_ALIENS: int = 8
    STATE_MAX_BULLETS: int = 4

    @property
    def STATE_SIZE(self) -> int:
        """Length of the numeric state vector exported by the game."""
        player_info = 3  # x, cooldown ratio, wave
        alien_info = self.STATE_MAX_ALIENS * 4  # x, y, tier, health
        bullet_info = self.STATE_MAX_BULLETS * 2  # x, y
        return player_info + alien_info + bullet_info

    # =========================================================================
    # HOST SETTINGS
    # =========================================================================

    WINDOW_TITLE: str = 'Alien Invasion: Earth Defense'
    ASSETS_DIR: str = 'assets'
    AUDIO_ENABLED: bool = True
    MUSIC_VOLUME: float = 0.5
    SFX_VOLUME: float = 0.8

    # Colors (RGB tuples)
    COLOR_BACKGROUND: Tuple[int, int, int] = (5, 5, 20)
    COLOR_TEXT: Tuple[int, int, int] = (255, 255, 255)
    COLOR_GAME_OVER: Tuple[int, int, int] = (255, 0, 0)
    COLOR_SHIP: Tuple[int, int, int] = (0, 255, 100)
    COLOR_BULLET: Tuple[int, int, int] = (100, 255, 200)
    COLOR_ALIEN_TIERS: List[Tuple[int, int, int]] = field(default_factory=lambda: [
        (255, 60, 100),   # Fast zigzagger
        (100, 200, 255),  # Slow tank
    ])

    # Logging
    LOG_DIR: str = 'logs'
    LOG_LEVEL: str = 'INFO'
    LOG_TO_FILE: bool = False

    # Random seed for reproducibility (None for random)
    SEED: Optional[int] = None

    def __post_init__(self):
        """Validation and derived calculations."""
        assert self.RULESET in ('advanced', 'simple'), "Ruleset must be 'advanced' or 'simple'"
        assert self.SCREEN_WIDTH > self.PLAYER_WIDTH, "Screen must be wider than the ship"
        assert self.SCREEN_WIDTH > self.ALIEN_WIDTH, "Screen must be wider than an alien"
        assert self.PLAYER_SPEED > 0, "Player speed must be positive"
        assert self.SHOOT_COOLDOWN >= 0, "Shoot cooldown cannot be negative"
        assert self.BULLET_SPEED > 0, "Bullet speed must be positive"
        assert len(self.ALIEN_TYPES) > 0, "Alien type table cannot be empty"
        for spec in self.ALIEN_TYPES:
            assert spec.pattern in ('straight', 'zigzag'), f"Unknown alien pattern: {spec.pattern}"
            assert spec.health > 0, "Alien health must be positive"
        assert self.SPAWN_BASE_CHANCE >= 0, "Spawn base chance cannot be negative"
        assert self.SPAWN_WAVE_INCREMENT >= 0, "Spawn wave increment cannot be negative"
        assert 0 <= self.WAVE_ADVANCE_CHANCE <= 1, "Wave advance chance must be in [0, 1]"
        assert self.ESCAPE_PENALTY >= 0, "Escape penalty cannot be negative"
        assert self.EXPLOSION_PARTICLES >= 0, "Particle count cannot be negative"

    @classmethod
    def simple(cls, **overrides) -> 'Config':
        """
        Build the simple-variant preset.

        One implicit alien type, fixed spawn chance, flat kill reward,
        smaller escape penalty and a higher score floor. Waves never advance.
        """
        values = dict(
            RULESET='simple',
            ALIEN_TYPES=[AlienTypeSpec(speed=2, health=1, pattern='straight', tier=0)],
            SPAWN_BASE_CHANCE=0.02,
            SPAWN_WAVE_INCREMENT=0.0,
            POINTS_PER_KILL=10,
            WAVE_SCALED_REWARD=False,
            ESCAPE_PENALTY=10,
            SCORE_FLOOR=-50,
            WAVE_ADVANCE_CHANCE=0.0,
        )
        values.update(overrides)
        return cls(**values)

    @classmethod
    def for_ruleset(cls, name: str) -> 'Config':
        """Build the config for a named ruleset ('advanced' or 'simple')."""
        if name == 'simple':
            return cls.simple()
        return cls(RULESET=name)


# Global config instance for easy importing
config = Config()


if __name__ == "__main__":
    # Print configuration summary
    cfg = Config()
    print("=" * 60)
    print("Alien Invasion - Configuration Summary")
    print("=" * 60)
    print(f"\nScreen: {cfg.SCREEN_WIDTH}x{cfg.SCREEN_HEIGHT} @ {cfg.FPS} FPS")
    print(f"Ruleset: {cfg.RULESET}")
    print(f"Alien types: {len(cfg.ALIEN_TYPES)}")
    print(f"Spawn chance: {cfg.SPAWN_BASE_CHANCE} + wave * {cfg.SPAWN_WAVE_INCREMENT}")
    print(f"Escape penalty: {cfg.ESCAPE_PENALTY} (floor {cfg.SCORE_FLOOR})")
    print(f"State vector size: {cfg.STATE_SIZE}")
    print("=" * 60)
