"""
Tests for the pygame frontend.

Tests cover:
- Keyboard events to InputState
- Drawing every phase onto an off-screen surface
- Audio that degrades to silence
"""

import pytest
import os
import sys

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pygame
pygame.init()

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import Config
from src.frontend import KeyboardControls, Renderer, SoundBoard
from src.game.entities import Alien, Bullet
from src.game.effects import create_explosion
from src.game.snapshot import Snapshot
from src.game.state import SessionState, AudioCue, GamePhase


def key_down(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def key_up(key):
    return pygame.event.Event(pygame.KEYUP, key=key)


class TestKeyboardControls:
    """Tests for event handling and sampling."""

    def test_held_movement(self):
        controls = KeyboardControls()
        controls.handle_event(key_down(pygame.K_LEFT), GamePhase.PLAYING)
        inputs = controls.sample(GamePhase.PLAYING)
        assert inputs.move_left and not inputs.move_right

        # Still held on the next tick
        assert controls.sample(GamePhase.PLAYING).move_left

        controls.handle_event(key_up(pygame.K_LEFT), GamePhase.PLAYING)
        assert not controls.sample(GamePhase.PLAYING).move_left

    def test_both_directions_reported(self):
        controls = KeyboardControls()
        controls.handle_event(key_down(pygame.K_LEFT), GamePhase.PLAYING)
        controls.handle_event(key_down(pygame.K_RIGHT), GamePhase.PLAYING)
        inputs = controls.sample(GamePhase.PLAYING)
        assert inputs.move_left and inputs.move_right

    def test_space_fires_while_playing(self):
        controls = KeyboardControls()
        controls.handle_event(key_down(pygame.K_SPACE), GamePhase.PLAYING)
        inputs = controls.sample(GamePhase.PLAYING)
        assert inputs.fire
        assert not inputs.start and not inputs.restart

    def test_space_starts_once(self):
        controls = KeyboardControls()
        controls.handle_event(key_down(pygame.K_SPACE), GamePhase.START)
        first = controls.sample(GamePhase.START)
        second = controls.sample(GamePhase.START)
        assert first.start and not first.restart
        assert not second.start

    def test_space_restarts_after_game_over(self):
        controls = KeyboardControls()
        controls.handle_event(key_down(pygame.K_RIGHT), GamePhase.PLAYING)
        controls.handle_event(key_down(pygame.K_SPACE), GamePhase.GAME_OVER)
        inputs = controls.sample(GamePhase.GAME_OVER)
        assert inputs.restart and not inputs.start
        # Held flags do not leak into the new session
        assert not controls.sample(GamePhase.PLAYING).move_right

    def test_movement_ignored_on_start_screen(self):
        controls = KeyboardControls()
        controls.handle_event(key_down(pygame.K_LEFT), GamePhase.START)
        assert not controls.sample(GamePhase.START).move_left


class TestRenderer:
    """Tests for drawing snapshots."""

    @pytest.fixture
    def surface(self, config):
        return pygame.Surface((config.SCREEN_WIDTH, config.SCREEN_HEIGHT))

    @pytest.fixture
    def busy_state(self, config, rng):
        state = SessionState.new(config, phase=GamePhase.PLAYING)
        for spec in config.ALIEN_TYPES:
            state.aliens.append(Alien.from_type(spec, 100 + 200 * spec.tier, 100, 40, 40))
        state.bullets.append(Bullet(x=400, y=300, width=4, height=16, speed=8))
        state.particles.extend(create_explosion(600, 200, config, rng))
        state.score = 120
        state.wave = 3
        return state

    def test_draws_every_phase(self, config, surface, busy_state):
        renderer = Renderer(config, surface)
        for phase in GamePhase:
            busy_state.phase = phase
            renderer.draw(Snapshot.from_state(busy_state), time_ms=750)

    def test_bullet_is_drawn(self, config, surface, busy_state):
        renderer = Renderer(config, surface)
        renderer.draw(Snapshot.from_state(busy_state))
        assert tuple(surface.get_at((401, 308)))[:3] == config.COLOR_BULLET

    def test_unknown_tier_falls_back(self, config, surface):
        state = SessionState.new(config, phase=GamePhase.PLAYING)
        alien = Alien.from_type(config.ALIEN_TYPES[0], 200, 200, 40, 40)
        alien.tier = 5
        state.aliens.append(alien)
        Renderer(config, surface).draw(Snapshot.from_state(state))

    def test_starfield_is_seeded(self, config, surface):
        assert Renderer(config, surface, seed=4).stars == Renderer(config, surface, seed=4).stars


class TestSoundBoard:
    """Tests for audio playback."""

    def test_disabled_is_silent(self, config):
        sound = SoundBoard(config, enabled=False)
        sound.play_all(list(AudioCue))
        sound.close()
        assert sound.sounds == {}

    def test_missing_assets_do_not_raise(self, config, tmp_path):
        config.ASSETS_DIR = str(tmp_path)
        sound = SoundBoard(config, enabled=True)
        sound.play_all(list(AudioCue))
        assert sound.sounds == {}
        assert not sound.music_loaded
        sound.close()
