"""
Window and frame loop.
"""

from typing import Optional

import pygame

from flappy.config import GameConfig
from flappy.events import translate
from flappy.game import Game
from flappy.renderer import Renderer


def run(config: GameConfig, seed: Optional[int] = None, verbose: bool = False,
        max_frames: Optional[int] = None) -> Game:
    """Open the window and play until the player quits.

    ``max_frames`` stops the loop after that many frames, which is handy for
    smoke runs with ``SDL_VIDEODRIVER=dummy``.
    """
    pygame.init()
    try:
        screen = pygame.display.set_mode((config.width, config.height))
        pygame.display.set_caption("Flappy Bird")
        clock = pygame.time.Clock()
        renderer = Renderer(screen)
        game = Game(config, seed=seed, verbose=verbose)

        frames = 0
        running = True
        while running:
            for event in pygame.event.get():
                game_event = translate(event, renderer.restart_button(game.session))
                if game_event is not None and not game.handle(game_event):
                    running = False
                    break

            dt = clock.tick(config.fps) / 1000.0
            # Clamp long frames (window drag, breakpoint).
            game.tick(min(dt, 0.05))

            renderer.draw(game.session)
            pygame.display.flip()

            frames += 1
            if max_frames is not None and frames >= max_frames:
                running = False
        return game
    finally:
        pygame.quit()
