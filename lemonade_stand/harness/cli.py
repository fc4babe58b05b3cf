#!/usr/bin/env python3
# Copyright (c) 2025 LemonadeBench Contributors
# BSD-3-Clause License

"""
CLI entry point for the Lemonade Stand game.

Usage:
    # Classic 7-day game
    lemonade-stand

    # Reproducible weather and prices
    lemonade-stand --seed 42

    # Custom rules from a YAML file, shortened season
    lemonade-stand --config lemonade.yaml --days 3

    # Write an example config to edit
    lemonade-stand init-config lemonade.yaml
"""

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

load_dotenv()

app = typer.Typer(
    name="lemonade-stand",
    help="Lemonade Stand - run a lemonade stand for a summer week",
    add_completion=False,
)
console = Console()


@app.callback(invoke_without_command=True)
def play(
    ctx: typer.Context,
    seed: Optional[int] = typer.Option(
        None,
        "--seed", "-s",
        envvar="LEMONADE_STAND_SEED",
        help="Random seed for reproducible weather, prices and customers"
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        envvar="LEMONADE_STAND_CONFIG",
        help="YAML game configuration (see 'init-config')"
    ),
    days: Optional[int] = typer.Option(
        None,
        "--days", "-d",
        help="Number of days to play (overrides the config)"
    ),
):
    """
    Play a game of Lemonade Stand.

    Examples:
        lemonade-stand
        lemonade-stand --seed 42 --days 3
    """
    if ctx.invoked_subcommand is not None:
        return

    from dataclasses import replace

    from ..game import Game
    from ..models import GameConfig
    from .config import load_config
    from .prompts import ask_non_negative_int
    from .reports import ConsoleReporter

    try:
        if config_file is not None:
            if not config_file.exists():
                console.print(f"[red]Config file not found: {escape(str(config_file))}[/red]")
                raise typer.Exit(1)
            config = load_config(config_file)
        else:
            config = GameConfig()
        if days is not None:
            config = replace(config, total_days=days)
    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    game = Game(
        ask=lambda prompt: ask_non_negative_int(prompt, console=console),
        config=config,
        seed=seed,
        callbacks=[ConsoleReporter(console)],
    )

    try:
        game.run()
    except (KeyboardInterrupt, EOFError):
        console.print(f"\n[yellow]Game abandoned on day {game.day}.[/yellow]")
        raise typer.Exit(1)


@app.command("init-config")
def init_config(
    path: Path = typer.Argument(
        Path("lemonade.yaml"),
        help="Where to write the example configuration"
    ),
    force: bool = typer.Option(
        False,
        "--force", "-f",
        help="Overwrite an existing file"
    ),
):
    """
    Write an example YAML configuration holding the default rules.
    """
    from .config import create_example_config

    if path.exists() and not force:
        console.print(f"[red]{escape(str(path))} already exists (use --force to overwrite)[/red]")
        raise typer.Exit(1)

    create_example_config(path)
    console.print(f"[green]✓ Wrote example config to {escape(str(path))}[/green]")


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
