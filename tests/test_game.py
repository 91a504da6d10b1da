"""
Tests for the AlienInvasion game object.

These tests verify:
    - Initialization on the start screen
    - Start / restart through the facade
    - Snapshots and audio cues
    - State vector representation
    - Seeded determinism
"""

import pytest
import numpy as np
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import Config
from src.game import AlienInvasion, Autopilot, get_game, list_games
from src.game.entities import Alien
from src.game.snapshot import Snapshot
from src.game.state import InputState, AudioCue, GamePhase


@pytest.fixture
def game(quiet_config):
    """A seeded game with no spontaneous spawns."""
    return AlienInvasion(quiet_config, seed=7)


def force_game_over(game):
    """Push escaping aliens through until the score floor is crossed."""
    cfg = game.config
    while not game.game_over:
        game.state.aliens.append(
            Alien.from_type(cfg.ALIEN_TYPES[1], 0, cfg.SCREEN_HEIGHT, cfg.ALIEN_WIDTH, cfg.ALIEN_HEIGHT)
        )
        game.step(InputState())


class TestInitialization:
    """Test game creation."""

    def test_starts_on_start_screen(self, game):
        assert game.phase is GamePhase.START
        assert game.score == 0
        assert game.wave == 1

    def test_idle_steps_do_nothing(self, game):
        for _ in range(10):
            game.step(InputState(move_right=True, fire=True))
        assert game.phase is GamePhase.START
        assert game.state.ticks == 0
        assert game.state.bullets == []

    def test_registry(self):
        assert 'alien_invasion' in list_games()
        assert get_game('alien_invasion') is AlienInvasion
        assert get_game('galaga') is None


class TestStartAndRestart:
    """Test the phase helpers."""

    def test_start_plays_music(self, game):
        snapshot, events = game.start()
        assert snapshot.phase is GamePhase.PLAYING
        assert events.cues == [AudioCue.MUSIC_START]

    def test_restart_matches_fresh_start(self, game, quiet_config):
        fresh, _ = AlienInvasion(quiet_config, seed=1).start()

        game.start()
        for _ in range(30):
            game.step(InputState(move_left=True, fire=True))
        force_game_over(game)
        assert game.game_over
        assert game.score < quiet_config.SCORE_FLOOR

        snapshot, events = game.restart()

        assert snapshot == fresh
        assert snapshot.score == 0
        assert snapshot.wave == 1
        assert snapshot.bullets == ()
        assert snapshot.aliens == ()
        assert snapshot.particles == ()
        assert AudioCue.MUSIC_START in events.cues

    def test_reset_returns_to_start_screen(self, game):
        game.start()
        game.step(InputState(fire=True))
        snapshot = game.reset()
        assert snapshot.phase is GamePhase.START
        assert snapshot.bullets == ()


class TestSnapshots:
    """Test render snapshots."""

    def test_snapshot_reflects_state(self, game):
        game.start()
        snapshot, events = game.step(InputState(fire=True))
        assert isinstance(snapshot, Snapshot)
        assert len(snapshot.bullets) == 1
        assert AudioCue.SHOOT in events.cues
        assert snapshot.player.cooldown == game.config.SHOOT_COOLDOWN - 1
        assert snapshot.background_offset == 1

    def test_snapshot_is_detached(self, game):
        game.start()
        before = game.snapshot()
        game.step(InputState(move_right=True))
        assert before.player.x != game.snapshot().player.x

    def test_alien_view_pulse(self, game):
        cfg = game.config
        game.start()
        game.state.aliens.append(Alien.from_type(cfg.ALIEN_TYPES[0], 100, 100, 40, 40))
        snapshot, _ = game.step(InputState())
        view = snapshot.aliens[0]
        assert view.tier == cfg.ALIEN_TYPES[0].tier
        assert 0.95 <= view.scale <= 1.05
        assert view.scale != 1.0


class TestStateVector:
    """Test the normalized state vector."""

    def test_shape_and_dtype(self, game):
        state = game.get_state()
        assert state.shape == (game.state_size,)
        assert state.dtype == np.float32

    def test_normalized(self):
        cfg = Config(SPAWN_BASE_CHANCE=0.2)
        game = AlienInvasion(cfg, seed=3)
        game.start()
        for _ in range(300):
            game.step(InputState(fire=True, move_left=True))
            state = game.get_state()
            assert np.all(state >= 0.0)
            assert np.all(state <= 1.0)

    def test_ship_starts_centered(self, game):
        assert game.get_state()[0] == pytest.approx(0.5)

    def test_lowest_alien_first(self, game):
        cfg = game.config
        game.start()
        game.state.aliens.append(Alien.from_type(cfg.ALIEN_TYPES[1], 0, 100, 40, 40))
        game.state.aliens.append(Alien.from_type(cfg.ALIEN_TYPES[1], 400, 300, 40, 40))
        state = game.get_state()
        assert state[3] == pytest.approx(400 / cfg.SCREEN_WIDTH)
        assert state[4] == pytest.approx(300 / cfg.SCREEN_HEIGHT)
        assert state[6] == pytest.approx(1.0)

    def test_empty_slots_are_zero(self, game):
        state = game.get_state()
        assert np.all(state[3:] == 0.0)


class TestDeterminism:
    """The same seed and inputs must replay the same game."""

    def test_same_seed_same_game(self, config):
        games = [AlienInvasion(config, seed=2024) for _ in range(2)]
        pilot = Autopilot(config)
        for g in games:
            g.start()
        for _ in range(1500):
            inputs = pilot.act(games[0].get_state())
            a, _ = games[0].step(inputs)
            b, _ = games[1].step(inputs)
            assert a == b

    def test_reseed_replays(self):
        cfg = Config(SPAWN_BASE_CHANCE=0.5)
        game = AlienInvasion(cfg)
        runs = []
        for _ in range(2):
            game.seed(99)
            game.reset()
            game.start()
            for _ in range(50):
                game.step(InputState())
            runs.append(game.snapshot())
        assert runs[0] == runs[1]

    def test_info(self, game):
        game.start()
        info = game.info
        assert info['phase'] == 'PLAYING'
        assert set(info) >= {'score', 'wave', 'kills', 'escapes', 'ticks'}


class TestAutopilot:
    """Test the rule-based pilot."""

    def test_steers_toward_alien(self, game):
        cfg = game.config
        game.start()
        game.state.aliens.append(Alien.from_type(cfg.ALIEN_TYPES[1], 0, 100, 40, 40))
        inputs = Autopilot(cfg).act(game.get_state())
        assert inputs.move_left and not inputs.move_right
        assert not inputs.fire

    def test_fires_when_lined_up(self, game):
        cfg = game.config
        game.start()
        player = game.state.player
        x = player.x + player.width / 2 - cfg.ALIEN_WIDTH / 2
        game.state.aliens.append(Alien.from_type(cfg.ALIEN_TYPES[1], x, 100, 40, 40))
        inputs = Autopilot(cfg).act(game.get_state())
        assert inputs.fire
        assert not inputs.move_left and not inputs.move_right

    @pytest.mark.slow
    def test_scores_kills(self):
        cfg = Config(SPAWN_BASE_CHANCE=0.03)
        game = AlienInvasion(cfg, seed=9)
        pilot = Autopilot(cfg)
        game.start()
        for _ in range(3000):
            if game.game_over:
                break
            game.step(pilot.act(game.get_state()))
        assert game.state.total_kills > 0
