"""
Drawing.

The text shown on screen is worked out by ``build_hud`` without touching
pygame, so it can be checked in tests; ``Renderer`` turns it into pixels.
"""

from dataclasses import dataclass
from typing import Optional

import pygame

from flappy.pipes import PipeKind
from flappy.session import GameState, Session

SKY = (135, 206, 235)
GROUND = (222, 184, 135)
GROUND_EDGE = (120, 180, 60)
PIPE = (0, 200, 0)
PIPE_EDGE = (0, 120, 0)
BIRD = (255, 255, 0)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
BEST = (255, 255, 0)
RESTART = (0, 255, 0)
PANEL = (0, 0, 0, 170)

START_PROMPT = "Press SPACE or Click to Start"
GAME_OVER_MESSAGE = "Game Over! Press R or Click Restart"
RESTART_LABEL = "Restart"


@dataclass(frozen=True)
class HudState:
    score_text: str
    best_text: str
    info_text: str
    over_text: str
    restart_visible: bool


def build_hud(session: Session) -> HudState:
    """Work out the text overlays for the current state of ``session``."""
    return HudState(
        score_text=f"Score: {session.score}",
        best_text=f"Best: {session.best_score}",
        info_text=START_PROMPT if session.state is GameState.IDLE else "",
        over_text=GAME_OVER_MESSAGE if session.over else "",
        restart_visible=session.over,
    )


class Renderer:
    """Draws a session onto a pygame surface."""

    def __init__(self, surface: pygame.Surface):
        pygame.font.init()
        self.surface = surface
        self.font_score = pygame.font.Font(None, 36)
        self.font_best = pygame.font.Font(None, 30)
        self.font_info = pygame.font.Font(None, 34)
        self.font_over = pygame.font.Font(None, 42)

        width, height = surface.get_size()
        label = self.font_score.render(RESTART_LABEL, True, RESTART)
        self.restart_rect = label.get_rect(center=(width // 2, height // 2 + 120)).inflate(20, 10)

    def restart_button(self, session: Session) -> Optional[pygame.Rect]:
        """The clickable restart area, or None while it is hidden."""
        return self.restart_rect if build_hud(session).restart_visible else None

    def draw(self, session: Session):
        self.surface.fill(SKY)
        for pipe in session.pipes:
            rect = pipe.get_rect()
            pygame.draw.rect(self.surface, PIPE, rect)
            pygame.draw.rect(self.surface, PIPE_EDGE, rect, 3)
            # Lip on the end facing the gap
            lip_y = rect.bottom - 24 if pipe.kind is PipeKind.TOP else rect.top
            pygame.draw.rect(self.surface, PIPE_EDGE, (rect.x - 4, lip_y, rect.width + 8, 24), 3)

        pygame.draw.rect(self.surface, GROUND, session.ground)
        pygame.draw.line(self.surface, GROUND_EDGE, session.ground.topleft, session.ground.topright, 6)

        self._draw_bird(session)
        self._draw_hud(build_hud(session))

    def _draw_bird(self, session: Session):
        rect = session.bird.get_rect()
        pygame.draw.ellipse(self.surface, BIRD, rect)
        pygame.draw.ellipse(self.surface, BLACK, rect, 2)
        # Draw a simple eye
        pygame.draw.circle(self.surface, BLACK, (rect.right - 9, rect.top + 8), 3)

    def _draw_hud(self, hud: HudState):
        width, height = self.surface.get_size()

        self._blit(self.font_score.render(hud.score_text, True, WHITE), topleft=(16, 16))
        self._blit(self.font_best.render(hud.best_text, True, BEST), topleft=(16, 48))

        if hud.info_text:
            text = self.font_info.render(hud.info_text, True, WHITE)
            self._panel(text.get_rect(center=(width // 2, height // 2)).inflate(24, 16))
            self._blit(text, center=(width // 2, height // 2))

        if hud.over_text:
            text = self.font_over.render(hud.over_text, True, WHITE)
            self._blit(text, center=(width // 2, height // 2 + 60))

        if hud.restart_visible:
            self._panel(self.restart_rect)
            label = self.font_score.render(RESTART_LABEL, True, RESTART)
            self._blit(label, center=self.restart_rect.center)

    def _panel(self, rect: pygame.Rect):
        panel = pygame.Surface(rect.size, pygame.SRCALPHA)
        panel.fill(PANEL)
        self.surface.blit(panel, rect.topleft)

    def _blit(self, text: pygame.Surface, **position):
        self.surface.blit(text, text.get_rect(**position))
