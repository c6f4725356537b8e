"""
Difficulty curve.

Every ``score_step`` points the pipes get faster and spawn more often, until
the spawn interval reaches its floor.
"""

from typing import Tuple

from flappy.config import GameConfig


def difficulty_for(score: int, config: GameConfig) -> Tuple[float, int]:
    """Return ``(speed, spawn_interval_ms)`` after reaching ``score``."""
    steps = max(score, 0) // config.score_step
    speed = config.base_speed + config.speed_step * steps
    interval = max(config.min_spawn_ms, config.spawn_ms - config.spawn_step_ms * steps)
    return speed, interval


class Difficulty:
    """Current pipe speed and spawn interval for one session."""

    def __init__(self, config: GameConfig):
        self.config = config
        self.speed = config.base_speed
        self.spawn_interval_ms = config.spawn_ms

    def on_score(self, score: int) -> bool:
        """Step up once if ``score`` is a positive multiple of the cadence.

        Call exactly once per point scored. Returns True when the difficulty
        changed.
        """
        if score <= 0 or score % self.config.score_step:
            return False
        self.speed += self.config.speed_step
        self.spawn_interval_ms = max(
            self.config.min_spawn_ms,
            self.spawn_interval_ms - self.config.spawn_step_ms,
        )
        return True
