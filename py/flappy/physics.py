"""
Arcade physics primitives.

pygame supplies rectangles and collision tests but no bodies or timers, so
this module adds the small amount the game needs on top of it: bodies with
velocity and optional gravity, and a repeating, cancellable timer driven by
the frame loop.
"""

from typing import Callable, Iterable, List, Optional

import pygame


class Body:
    """An axis-aligned box moved by velocity and, optionally, gravity."""

    def __init__(self, x: float, y: float, width: int, height: int):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.velocity_x = 0.0
        self.velocity_y = 0.0
        self.gravity_y = 0.0
        self.allow_gravity = False
        self.world_bounds: Optional[pygame.Rect] = None

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def set_velocity(self, x: float = 0.0, y: float = 0.0):
        """Set both velocity components."""
        self.velocity_x = x
        self.velocity_y = y

    def step(self, dt: float):
        """Integrate one frame of ``dt`` seconds."""
        if self.allow_gravity:
            self.velocity_y += self.gravity_y * dt
        self.x += self.velocity_x * dt
        self.y += self.velocity_y * dt
        if self.world_bounds is not None:
            self._clamp_to_bounds()

    def _clamp_to_bounds(self):
        bounds = self.world_bounds
        if self.y < bounds.top:
            self.y = bounds.top
            self.velocity_y = max(self.velocity_y, 0.0)
        elif self.bottom > bounds.bottom:
            self.y = bounds.bottom - self.height
            self.velocity_y = min(self.velocity_y, 0.0)
        if self.x < bounds.left:
            self.x = bounds.left
        elif self.right > bounds.right:
            self.x = bounds.right - self.width

    def get_rect(self) -> pygame.Rect:
        """Get the body's collision rectangle."""
        return pygame.Rect(round(self.x), round(self.y), self.width, self.height)


def overlaps(rect: pygame.Rect, others: Iterable[pygame.Rect]) -> bool:
    """Return True if ``rect`` touches any rectangle in ``others``."""
    return rect.collidelist(list(others)) != -1


class TimerEvent:
    """A repeating callback fired every ``delay`` milliseconds of game time.

    ``delay`` may be changed while the timer runs; the new value applies
    from the next firing on. Once removed, the timer never fires again.
    """

    def __init__(self, delay: int, callback: Callable[[], None]):
        if delay <= 0:
            raise ValueError(f"Timer delay must be positive, got {delay!r}")
        self.delay = delay
        self.callback = callback
        self.elapsed = 0.0
        self.removed = False

    def remove(self):
        """Cancel the timer."""
        self.removed = True

    def advance(self, ms: float) -> int:
        """Advance the timer by ``ms`` and return how many times it fired."""
        fired = 0
        self.elapsed += ms
        while not self.removed and self.elapsed >= self.delay:
            self.elapsed -= self.delay
            self.callback()
            fired += 1
        return fired


class Scheduler:
    """Drives timer events from the frame loop."""

    def __init__(self):
        self.events: List[TimerEvent] = []

    def add_event(self, delay: int, callback: Callable[[], None]) -> TimerEvent:
        """Schedule ``callback`` every ``delay`` milliseconds."""
        event = TimerEvent(delay, callback)
        self.events.append(event)
        return event

    def advance(self, ms: float):
        """Advance every timer by ``ms`` and forget removed ones."""
        for event in list(self.events):
            event.advance(ms)
        self.events = [event for event in self.events if not event.removed]

    def clear(self):
        """Remove every timer."""
        for event in self.events:
            event.remove()
        self.events = []
