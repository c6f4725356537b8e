"""
Flappy Bird
A single-screen arcade game built on Pygame.
"""

from flappy.config import ConfigError, GameConfig, load_config
from flappy.game import Game
from flappy.session import GameState, Session

__all__ = ["ConfigError", "Game", "GameConfig", "GameState", "Session", "load_config"]
__version__ = "0.1.0"
