"""
One play attempt, from the start prompt to the crash.

The session owns the bird, the pipes, the spawn timer and the difficulty, and
moves between three states:

    IDLE --flap--> RUNNING --collision--> OVER

A finished session is never reset in place; the controller builds a new one.
"""

import random
from enum import Enum
from typing import Callable, Optional

import pygame

from flappy.bird import Bird
from flappy.config import GameConfig
from flappy.difficulty import Difficulty
from flappy.events import Event
from flappy.physics import Scheduler, overlaps
from flappy.pipes import PipeField, PipeSpawner


class GameState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    OVER = "over"


def _ignore(message: str) -> None:
    pass


class Session:
    """Game state and the transitions between IDLE, RUNNING and OVER."""

    def __init__(self, config: GameConfig, rng: Optional[random.Random] = None,
                 best_score: int = 0, log: Callable[[str], None] = _ignore):
        self.config = config
        self.log = log
        self.state = GameState.IDLE
        self.score = 0
        self.best_score = best_score

        self.scheduler = Scheduler()
        self.difficulty = Difficulty(config)
        self.bird = Bird(config)
        self.pipes = PipeField(config)
        self.spawner = PipeSpawner(config, self.pipes, self.difficulty, self.scheduler, rng)
        self.ground = pygame.Rect(0, config.ground_top, config.width, config.ground_height)

    @property
    def started(self) -> bool:
        return self.state is not GameState.IDLE

    @property
    def over(self) -> bool:
        return self.state is GameState.OVER

    @property
    def running(self) -> bool:
        return self.state is GameState.RUNNING

    @property
    def speed(self) -> float:
        return self.difficulty.speed

    @property
    def spawn_interval_ms(self) -> int:
        return self.difficulty.spawn_interval_ms

    def handle(self, event: Event):
        """Apply an input event. Restart and quit belong to the controller."""
        if event is Event.FLAP:
            self.flap()

    def flap(self):
        """Start play if needed, then make the bird jump."""
        if self.over:
            return
        if not self.started:
            self.start()
        self.bird.flap()

    def start(self):
        """Begin play: gravity on, spawn timer running."""
        if self.started:
            return
        self.state = GameState.RUNNING
        self.bird.enable_gravity()
        self.spawner.start()
        self.log("Session started")

    def update(self, dt: float):
        """Advance one frame of ``dt`` seconds."""
        self.scheduler.advance(dt * 1000)
        self.bird.step(dt)
        self.pipes.step(dt)
        if not self.running:
            return

        if self.check_collisions():
            return

        scored = self.pipes.advance(self.bird.center_x)
        if scored:
            self.add_score(scored)

    def check_collisions(self) -> bool:
        """End the session if the bird touches the ground or a pipe."""
        bird_rect = self.bird.get_rect()
        if bird_rect.colliderect(self.ground):
            self.bird.y = self.ground.top - self.bird.height
            self.game_over()
            return True
        if overlaps(bird_rect, self.pipes.rects()):
            self.game_over()
            return True
        return False

    def add_score(self, points: int = 1):
        """Add points one at a time, stepping difficulty on each multiple."""
        if not self.running:
            return
        for _ in range(points):
            self.score += 1
            if self.score > self.best_score:
                self.best_score = self.score
            if self.difficulty.on_score(self.score):
                self.pipes.set_speed(self.difficulty.speed)
                self.spawner.set_interval(self.difficulty.spawn_interval_ms)
                self.log(
                    f"Difficulty up at {self.score}: speed={self.difficulty.speed:g} "
                    f"interval={self.difficulty.spawn_interval_ms}ms"
                )

    def game_over(self):
        """Stop the spawner, freeze pipes and bird."""
        if not self.running:
            return
        self.state = GameState.OVER
        self.spawner.cancel()
        self.pipes.freeze()
        self.bird.freeze()
        self.log(f"Game over with score {self.score} (best {self.best_score})")

    def close(self):
        """Cancel every timer; the session is dead after this."""
        self.spawner.cancel()
        self.scheduler.clear()
