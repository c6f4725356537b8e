"""
Pipes: the obstacle pairs, the field that holds them, and their spawner.
"""

import math
import random
from enum import Enum
from typing import List, Optional, Tuple

import pygame

from flappy.config import GameConfig
from flappy.difficulty import Difficulty
from flappy.physics import Body, Scheduler, TimerEvent


class PipeKind(Enum):
    TOP = "top"
    BOTTOM = "bottom"


class Pipe(Body):
    """Represents a single pipe obstacle."""

    def __init__(self, x: float, y: float, width: int, height: int, kind: PipeKind,
                 speed: float = 0.0):
        super().__init__(x, y, width, height)
        self.kind = kind
        self.scorable = kind is PipeKind.BOTTOM
        self.scored = False
        self.velocity_x = -speed

    @property
    def off_screen(self) -> bool:
        return self.right < 0

    def passed(self, x: float) -> bool:
        """True once the trailing edge is left of ``x``."""
        return self.right < x


class PipeField:
    """The live pipes of a session."""

    def __init__(self, config: GameConfig):
        self.config = config
        self.pipes: List[Pipe] = []

    def __len__(self) -> int:
        return len(self.pipes)

    def __iter__(self):
        return iter(self.pipes)

    def spawn_pair(self, gap_y: float, speed: float) -> Tuple[Pipe, Pipe]:
        """Add a top/bottom pair around ``gap_y`` at the right edge of the field."""
        half_gap = self.config.pipe_gap / 2
        width = self.config.pipe_width
        height = self.config.pipe_height
        x = self.config.width

        top = Pipe(x, gap_y - half_gap - height, width, height, PipeKind.TOP, speed)
        bottom = Pipe(x, gap_y + half_gap, width, height, PipeKind.BOTTOM, speed)
        self.pipes.extend((top, bottom))
        return top, bottom

    def step(self, dt: float):
        """Move every pipe by its velocity."""
        for pipe in self.pipes:
            pipe.step(dt)

    def advance(self, bird_x: float) -> int:
        """Retire off-screen pipes and mark passed ones; return points scored."""
        scored = 0
        live: List[Pipe] = []
        for pipe in self.pipes:
            if pipe.off_screen:
                continue
            if pipe.scorable and not pipe.scored and pipe.passed(bird_x):
                pipe.scored = True
                scored += 1
            live.append(pipe)
        self.pipes = live
        return scored

    def set_speed(self, speed: float):
        """Move every live pipe left at ``speed``."""
        for pipe in self.pipes:
            pipe.velocity_x = -speed

    def freeze(self):
        """Stop every pipe where it is."""
        self.set_speed(0.0)

    def rects(self) -> List[pygame.Rect]:
        """Get the collision rectangles of all live pipes."""
        return [pipe.get_rect() for pipe in self.pipes]


class PipeSpawner:
    """Adds a pipe pair to the field every spawn interval."""

    def __init__(self, config: GameConfig, field: PipeField, difficulty: Difficulty,
                 scheduler: Scheduler, rng: Optional[random.Random] = None):
        self.config = config
        self.field = field
        self.difficulty = difficulty
        self.scheduler = scheduler
        self.rng = rng or random.Random()
        self.timer: Optional[TimerEvent] = None
        self.enabled = False

    def start(self):
        """Start the repeating spawn timer at the current interval."""
        if self.timer is not None:
            return
        self.enabled = True
        self.timer = self.scheduler.add_event(self.difficulty.spawn_interval_ms, self.spawn)

    def set_interval(self, interval_ms: int):
        """Change the spawn period; applies from the next firing."""
        if self.timer is not None:
            self.timer.delay = interval_ms

    def cancel(self):
        """Stop spawning for good."""
        self.enabled = False
        if self.timer is not None:
            self.timer.remove()

    def random_gap_y(self) -> int:
        """Pick a gap center inside the margins."""
        low, high = self.config.gap_range
        return self.rng.randint(math.ceil(low), math.floor(high))

    def spawn(self) -> Optional[Tuple[Pipe, Pipe]]:
        """Add one pipe pair, unless the spawner has been cancelled."""
        if not self.enabled:
            return None
        return self.field.spawn_pair(self.random_gap_y(), self.difficulty.speed)
