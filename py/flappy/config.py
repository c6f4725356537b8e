"""
Game configuration.

All tunables live in one frozen dataclass. Defaults reproduce the classic
feel; a YAML file (``--config`` or ``FLAPPY_CONFIG``) may override any field.
"""

import math
import os
from dataclasses import dataclass, fields, replace as dc_replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

CONFIG_ENV_VAR = "FLAPPY_CONFIG"


class ConfigError(ValueError):
    """Raised when a configuration file or override is invalid."""


@dataclass(frozen=True)
class GameConfig:
    """Field dimensions, physics constants and difficulty curve."""

    width: int = 800
    height: int = 600
    fps: int = 60

    # Physics (pixels, seconds)
    gravity: float = 1100.0
    flap_velocity: float = -320.0

    # Bird
    bird_x: float = 140.0
    bird_y: Optional[float] = None
    bird_width: int = 34
    bird_height: int = 24

    # Pipes
    pipe_gap: int = 170
    pipe_width: int = 64
    pipe_height: int = 600
    margin_top: int = 40
    margin_bottom: int = 120
    ground_height: int = 64

    # Difficulty
    base_speed: float = 200.0
    speed_step: float = 15.0
    spawn_ms: int = 1400
    spawn_step_ms: int = 60
    min_spawn_ms: int = 950
    score_step: int = 5

    def __post_init__(self) -> None:
        self.validate()

    @property
    def start_y(self) -> float:
        """Resting height of the bird before play starts."""
        if self.bird_y is None:
            return self.height * 0.45
        return self.bird_y

    @property
    def ground_top(self) -> int:
        return self.height - self.ground_height

    @property
    def gap_range(self):
        """Inclusive (min, max) range for a pipe pair's gap center."""
        half_gap = self.pipe_gap / 2
        return (self.margin_top + half_gap, self.height - self.margin_bottom - half_gap)

    def validate(self) -> None:
        """Check that the values describe a playable field."""
        for name in ("width", "height", "fps", "bird_width", "bird_height",
                     "pipe_gap", "pipe_width", "pipe_height", "spawn_ms",
                     "min_spawn_ms", "score_step"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive, got {getattr(self, name)!r}")
        for name in ("margin_top", "margin_bottom", "ground_height",
                     "speed_step", "spawn_step_ms", "gravity"):
            if getattr(self, name) < 0:
                raise ConfigError(f"{name} must not be negative, got {getattr(self, name)!r}")
        if self.base_speed <= 0:
            raise ConfigError(f"base_speed must be positive, got {self.base_speed!r}")
        if self.flap_velocity >= 0:
            raise ConfigError("flap_velocity must be negative (upward)")
        if self.min_spawn_ms > self.spawn_ms:
            raise ConfigError("min_spawn_ms must not exceed spawn_ms")
        low, high = self.gap_range
        if math.ceil(low) > math.floor(high):
            raise ConfigError(
                f"pipe_gap {self.pipe_gap} does not fit between the margins of a "
                f"{self.height}px field"
            )
        if self.ground_top <= 0:
            raise ConfigError("ground_height must be smaller than height")
        if self.margin_bottom < self.ground_height:
            raise ConfigError(
                f"margin_bottom {self.margin_bottom} must be at least ground_height "
                f"{self.ground_height} so the gap never sits in the ground"
            )
        # The lowest gap needs a top pipe reaching y=0, the highest a bottom pipe reaching the ground.
        if self.pipe_height < self.height - self.margin_bottom - self.pipe_gap:
            raise ConfigError(
                f"pipe_height {self.pipe_height} is too short to reach the top of a "
                f"{self.height}px field"
            )
        if self.margin_top + self.pipe_gap + self.pipe_height < self.ground_top:
            raise ConfigError(
                f"pipe_height {self.pipe_height} is too short to reach the ground at "
                f"y={self.ground_top}"
            )
        if not 0 < self.bird_x < self.width:
            raise ConfigError(f"bird_x must lie inside the field, got {self.bird_x!r}")

    def replace(self, **changes: Any) -> "GameConfig":
        """Return a validated copy with the given fields changed."""
        return from_mapping(changes, base=self)


def _defaults() -> Dict[str, Any]:
    return {f.name: f.default for f in fields(GameConfig)}


def from_mapping(data: Dict[str, Any], base: Optional[GameConfig] = None) -> GameConfig:
    """Build a config from a plain mapping, rejecting unknown keys."""
    base = base or GameConfig()
    defaults = _defaults()

    unknown = sorted(set(data) - set(defaults))
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

    changes: Dict[str, Any] = {}
    for key, value in data.items():
        if key == "bird_y" and value is None:
            changes[key] = None
            continue
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(f"{key} must be a number, got {value!r}")
        elif isinstance(defaults[key], int) and not isinstance(value, int):
            raise ConfigError(f"{key} must be an integer, got {value!r}")
        changes[key] = value

    return dc_replace(base, **changes)


def load_config(path: Optional[Union[str, Path]] = None) -> GameConfig:
    """Load a config from ``path`` or ``$FLAPPY_CONFIG``; defaults if neither."""
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return GameConfig()

    config_path = Path(path).expanduser()
    try:
        with config_path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {config_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

    if data is None:
        return GameConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a mapping of settings")
    return from_mapping(data)
