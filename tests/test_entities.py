"""
Tests for the entity records.

These tests verify:
    - Factory placement of the ship, bullets and aliens
    - Bounding box edges
    - Fresh session defaults
"""

import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.game.entities import Player, Bullet, Alien, MovementPattern
from src.game.state import SessionState, GamePhase


class TestPlayer:
    """Test ship placement."""

    def test_spawns_centered_near_bottom(self, config):
        player = Player.spawn(config)
        assert player.x == (config.SCREEN_WIDTH - config.PLAYER_WIDTH) / 2
        assert player.y == config.SCREEN_HEIGHT - config.PLAYER_Y_OFFSET
        assert player.cooldown == 0
        assert player.cooldown_period == config.SHOOT_COOLDOWN

    def test_box_edges(self, config):
        player = Player.spawn(config)
        assert player.left == player.x
        assert player.right == player.x + config.PLAYER_WIDTH
        assert player.top == player.y
        assert player.bottom == player.y + config.PLAYER_HEIGHT


class TestBullet:
    """Test bullet placement."""

    def test_fired_from_ship_nose(self, config):
        player = Player.spawn(config)
        bullet = Bullet.fired_from(player, config)
        assert bullet.center[0] == pytest.approx(player.center[0])
        assert bullet.y == player.y
        assert bullet.width == config.BULLET_WIDTH
        assert bullet.height == config.BULLET_HEIGHT
        assert bullet.speed == config.BULLET_SPEED


class TestAlien:
    """Test alien construction from the type table."""

    def test_from_zigzag_type(self, config):
        spec = config.ALIEN_TYPES[0]
        alien = Alien.from_type(spec, 10, -40, 40, 40)
        assert alien.pattern is MovementPattern.ZIGZAG
        assert alien.speed == spec.speed
        assert alien.health == spec.health
        assert alien.tier == spec.tier
        assert alien.phase == 0.0
        assert alien.alive

    def test_from_straight_type(self, config):
        alien = Alien.from_type(config.ALIEN_TYPES[1], 0, 0, 40, 40)
        assert alien.pattern is MovementPattern.STRAIGHT
        assert alien.health == 3

    def test_center(self, config):
        alien = Alien.from_type(config.ALIEN_TYPES[0], 100, 200, 40, 40)
        assert alien.center == (120, 220)

    def test_dead_at_zero_health(self, config):
        alien = Alien.from_type(config.ALIEN_TYPES[0], 0, 0, 40, 40)
        alien.health = 0
        assert not alien.alive


class TestSessionState:
    """Test fresh and reset sessions."""

    def test_new_session_defaults(self, config):
        state = SessionState.new(config)
        assert state.phase is GamePhase.START
        assert state.score == 0
        assert state.wave == 1
        assert state.bullets == []
        assert state.aliens == []
        assert state.particles == []
        assert state.background_offset == 0

    def test_reset_clears_everything(self, config):
        state = SessionState.new(config, phase=GamePhase.PLAYING)
        state.score = -80
        state.wave = 4
        state.background_offset = 123
        state.player.x = 0
        state.player.cooldown = 7
        state.bullets.append(Bullet.fired_from(state.player, config))
        state.aliens.append(Alien.from_type(config.ALIEN_TYPES[0], 0, 0, 40, 40))

        state.reset(config)

        assert state == SessionState.new(config, phase=GamePhase.PLAYING)
