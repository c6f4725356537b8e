"""
Input events.

pygame events are translated into a small set of game events so the session
logic never looks at keys or mouse buttons directly.
"""

from enum import Enum, auto
from typing import Optional

import pygame

FLAP_KEYS = (pygame.K_SPACE,)
RESTART_KEYS = (pygame.K_r,)
QUIT_KEYS = (pygame.K_ESCAPE,)


class Event(Enum):
    FLAP = auto()
    RESTART = auto()
    QUIT = auto()


def translate(event: pygame.event.Event,
              restart_button: Optional[pygame.Rect] = None) -> Optional[Event]:
    """Map a pygame event to a game event, or None if it means nothing here.

    ``restart_button`` is the restart control's rectangle while it is shown.
    """
    if event.type == pygame.QUIT:
        return Event.QUIT
    if event.type == pygame.KEYDOWN:
        if event.key in FLAP_KEYS:
            return Event.FLAP
        if event.key in RESTART_KEYS:
            return Event.RESTART
        if event.key in QUIT_KEYS:
            return Event.QUIT
        return None
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        if restart_button is not None and restart_button.collidepoint(event.pos):
            return Event.RESTART
        return Event.FLAP
    return None
