"""Typer CLI application."""

import asyncio
import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from zscreen.config import load_preferences
from zscreen.core.color import TEXT_COLORS, theme_for_text_color
from zscreen.errors import ZScreenError
from zscreen.io.reader import load_transcript
from zscreen.render import JsonRenderer, TerminalRenderer, TextRenderer, render_screen
from zscreen.replay import replay as replay_transcript
from zscreen.saves.history import SaveNameHistory
from zscreen.session import GameSession


class OutputFormat(str, Enum):
    ansi = "ansi"
    text = "text"
    json = "json"


def setup_logging(verbose: bool) -> None:
    """Route library logging through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="zscreen",
        help="Screen model for text-adventure interpreters.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    @app.command()
    def replay(
        transcript: Annotated[Path, typer.Argument(help="JSON-lines transcript of engine requests")],
        inputs: Annotated[Optional[list[str]], typer.Option("--input", "-i", help="Player input, in order (repeatable)")] = None,
        version: Annotated[int, typer.Option("--version", "-V", help="Story file version (3 shows the status line)")] = 5,
        format: Annotated[OutputFormat, typer.Option("--format", "-f", help="Output format")] = OutputFormat.ansi,
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
    ) -> None:
        """Replay a transcript and print the final screen."""
        setup_logging(verbose)
        prefs = load_preferences()

        try:
            requests = load_transcript(transcript)
            session = asyncio.run(
                replay_transcript(requests, inputs or [], GameSession(version=version, prefs=prefs))
            )
        except (ZScreenError, OSError) as e:
            console.print(f"[red]Replay failed: {e}[/]")
            raise typer.Exit(1)

        if format == OutputFormat.json:
            renderer = JsonRenderer()
        elif format == OutputFormat.text:
            renderer = TextRenderer()
        else:
            renderer = TerminalRenderer(theme_for_text_color(prefs.text_color_index))
        print(render_screen(session, renderer))

    @app.command()
    def saves(
        clear: Annotated[bool, typer.Option("--clear", help="Forget all save names")] = False,
    ) -> None:
        """List recently used save names."""
        history = SaveNameHistory(load_preferences())

        if clear:
            history.clear()
            console.print("[green]Save history cleared[/]")
            return

        if not history.names:
            console.print("[dim]No saves yet[/]")
            return

        console.print("[bold cyan]Recent saves[/]")
        for i, name in enumerate(history.names, 1):
            console.print(f"  {i:2d}. {name}.sav")
        if history.prefs.skip_overwrite_confirm:
            console.print("[dim]Overwrite confirmation is turned off[/]")

    @app.command()
    def color(
        index: Annotated[Optional[int], typer.Argument(help="Text colour to select")] = None,
    ) -> None:
        """Show or set the default text colour."""
        prefs = load_preferences()

        if index is None:
            for i, (name, value) in enumerate(TEXT_COLORS):
                marker = "*" if i == prefs.text_color_index else " "
                console.print(f" {marker} {i}. [{value}]{name}[/]")
            return

        if not 0 <= index < len(TEXT_COLORS):
            console.print(f"[red]Colour index must be 0-{len(TEXT_COLORS) - 1}[/]")
            raise typer.Exit(1)

        prefs.text_color_index = index
        try:
            prefs.save()
        except OSError as e:
            console.print(f"[red]Could not save preferences: {e}[/]")
            raise typer.Exit(1)
        console.print(f"[green]Text colour set to {TEXT_COLORS[index][0]}[/]")

    return app
