#!/usr/bin/env python3
"""
Flappy Bird

Guide the bird through the gaps between the pipes. Every pipe passed is a
point; every five points the pipes get faster and closer together.

Usage:
    flappy [--config settings.yaml] [--fps 60] [--seed 42]

Or as a module:
    python -m flappy
"""

import sys
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel

from flappy.app import run
from flappy.config import CONFIG_ENV_VAR, ConfigError, load_config

console = Console()

CONTROLS = (
    "[bold]SPACE[/bold] / [bold]Click[/bold]  Start and flap\n"
    "[bold]R[/bold] / [bold]Restart button[/bold]  Play again after a crash\n"
    "[bold]ESC[/bold]  Quit"
)


@click.command()
@click.option('--config', 'config_path', type=click.Path(dir_okay=False),
              envvar=CONFIG_ENV_VAR, default=None,
              help=f'YAML file overriding game settings (or set {CONFIG_ENV_VAR})')
@click.option('--fps', type=click.IntRange(min=1), default=None,
              help='Frames per second (default: from config, 60)')
@click.option('--seed', type=int, default=None,
              help='Seed for pipe placement, for repeatable runs')
@click.option('--max-frames', type=click.IntRange(min=1), default=None,
              help='Stop after this many frames')
@click.option('--verbose', '-v', is_flag=True, help='Log game state changes')
def main(config_path: Optional[str], fps: Optional[int], seed: Optional[int],
         max_frames: Optional[int], verbose: bool) -> None:
    """Play Flappy Bird."""
    try:
        config = load_config(config_path)
        if fps is not None:
            config = config.replace(fps=fps)

        console.print(Panel(CONTROLS, title="🐦 Flappy Bird", expand=False))

        game = run(config, seed=seed, verbose=verbose, max_frames=max_frames)
        console.print(
            f"[green]Thanks for playing![/green] Best score: [bold]{game.best_score}[/bold] "
            f"over {game.sessions_played + 1} game(s)"
        )

    except ConfigError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        sys.exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Game cancelled by user.[/yellow]")
        sys.exit(1)
    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
