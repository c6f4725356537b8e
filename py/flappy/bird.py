"""The player-controlled bird."""

import pygame

from flappy.config import GameConfig
from flappy.physics import Body


class Bird(Body):
    """Represents the bird character in the game."""

    def __init__(self, config: GameConfig):
        super().__init__(
            config.bird_x - config.bird_width / 2,
            config.start_y - config.bird_height / 2,
            config.bird_width,
            config.bird_height,
        )
        self.gravity = config.gravity
        self.jump_strength = config.flap_velocity
        self.world_bounds = pygame.Rect(0, 0, config.width, config.height)

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    def enable_gravity(self):
        """Start falling; called when play begins."""
        self.allow_gravity = True
        self.gravity_y = self.gravity

    def flap(self):
        """Make the bird jump, replacing whatever vertical speed it had."""
        self.velocity_y = self.jump_strength

    def freeze(self):
        """Stop all motion after a crash."""
        self.set_velocity(0.0, 0.0)
        self.allow_gravity = False
