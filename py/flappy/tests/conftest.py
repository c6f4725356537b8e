"""
Shared fixtures for the Flappy Bird tests.
"""

import os

# Run pygame without a window.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from flappy.config import GameConfig


@pytest.fixture
def config() -> GameConfig:
    return GameConfig()


@pytest.fixture
def floating_config() -> GameConfig:
    """A config without gravity, so the bird stays where a test puts it."""
    return GameConfig(gravity=0.0)
