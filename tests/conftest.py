"""
Pytest configuration for the test suite.

This file is automatically loaded by pytest and applies configuration
to all tests in the tests/ directory.
"""

import os
import random
import sys

import pytest

# Headless pygame for the frontend tests
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import Config
from src.game.state import SessionState, GamePhase


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def config():
    """Default (advanced ruleset) configuration."""
    return Config()


@pytest.fixture
def quiet_config():
    """Configuration where aliens never spawn on their own."""
    return Config(SPAWN_BASE_CHANCE=0.0, SPAWN_WAVE_INCREMENT=0.0)


@pytest.fixture
def rng():
    """Seeded random generator for reproducible tests."""
    return random.Random(1234)


@pytest.fixture
def playing_state(quiet_config):
    """A fresh session already in the PLAYING phase."""
    return SessionState.new(quiet_config, phase=GamePhase.PLAYING)
