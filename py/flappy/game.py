"""
Top-level controller.

Holds the current session and the best score for the life of the process.
Restarting throws the old session away and builds a fresh one.
"""

import random
from typing import Optional

from rich.console import Console

from flappy.config import GameConfig
from flappy.events import Event
from flappy.session import Session

console = Console()


class Game:
    """Dispatches input to the current session and owns restarts."""

    def __init__(self, config: Optional[GameConfig] = None, seed: Optional[int] = None,
                 verbose: bool = False):
        self.config = config or GameConfig()
        self.verbose = verbose
        self.rng = random.Random(seed)
        self.sessions_played = 0
        self.session = self._new_session(best_score=0)

    @property
    def best_score(self) -> int:
        return self.session.best_score

    def _log(self, message: str):
        if self.verbose:
            console.log(message)

    def _new_session(self, best_score: int) -> Session:
        # Each session gets its own generator so nothing mutable is shared.
        rng = random.Random(self.rng.getrandbits(32))
        return Session(self.config, rng=rng, best_score=best_score, log=self._log)

    def handle(self, event: Event) -> bool:
        """Dispatch one event. Returns False when the game should quit."""
        if event is Event.QUIT:
            return False
        if event is Event.RESTART:
            self.restart()
        else:
            self.session.handle(event)
        return True

    def restart(self):
        """Replace a finished session with a fresh one at base difficulty."""
        if not self.session.over:
            return
        best = self.session.best_score
        self.session.close()
        self.sessions_played += 1
        self.session = self._new_session(best_score=best)
        self._log(f"Restarted (best {best})")

    def tick(self, dt: float):
        """Advance the current session by one frame."""
        self.session.update(dt)
