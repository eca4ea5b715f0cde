"""Command-line interface for chromamark."""

from __future__ import annotations

import json
import sys
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from . import context
from .colors import format_color, is_valid_color, parse_color
from .config import MarkupConfig, discover_config
from .exceptions import ChromamarkError
from .logger import setup_logger
from .pipeline import MarkdownPipeline
from .render import coalesce_runs, describe_style, to_ansi, to_component_json

app = typer.Typer(
    name="chromamark",
    help="Inline markup to styled text runs - bold, links, colors and gradients",
    add_completion=False,
)


class OutputFormat(str, Enum):
    """Output formats for the parse command."""

    TEXT = "text"
    ANSI = "ansi"
    JSON = "json"


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbosity level: 0=silent (default), 1=show matches, 2=show scans, 3=debug",
            min=0,
            max=3,
        ),
    ] = 0,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config file (default: chromamark.yaml if present)",
        ),
    ] = None,
) -> None:
    """Global options for chromamark commands."""
    setup_logger(verbose)
    context.set_config_path(config)


def _load_config() -> MarkupConfig:
    try:
        config = discover_config(context.get_config_path())
    except (FileNotFoundError, ChromamarkError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e
    return config if config is not None else MarkupConfig()


@app.command("parse")
def parse_command(
    text: Annotated[str, typer.Argument(help="Text to parse, or '-' to read stdin")],
    *,
    format: Annotated[  # noqa: A002 - 'format' is appropriate name for CLI option
        OutputFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = OutputFormat.TEXT,
    disable: Annotated[
        list[str] | None,
        typer.Option("--disable", "-d", help="Feature to disable (repeatable)"),
    ] = None,
    no_markup: Annotated[
        bool, typer.Option("--no-markup", help="Disable all formatting")
    ] = False,
    coalesce: Annotated[
        bool, typer.Option("--coalesce", help="Merge adjacent runs with identical styles")
    ] = False,
) -> None:
    """Parse marked-up text and print the styled runs."""
    if text == "-":
        text = sys.stdin.read().rstrip("\n")

    pipeline = MarkdownPipeline(_load_config())
    try:
        for name in disable or []:
            pipeline.set_feature_enabled(name, False)
    except ChromamarkError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e
    if no_markup:
        pipeline.set_global_enabled(False)

    runs = pipeline.parse(text)
    if coalesce:
        runs = coalesce_runs(runs)

    if format == OutputFormat.ANSI:
        typer.echo(to_ansi(runs))
    elif format == OutputFormat.JSON:
        typer.echo(json.dumps(to_component_json(runs), indent=2))
    else:
        for run in runs:
            typer.echo(f"{run.text!r}\t{describe_style(run.style)}")


@app.command()
def features() -> None:
    """List features in pipeline order with their delimiters."""
    config = _load_config()
    typer.echo(f"formatting: {'enabled' if config.enabled else 'disabled'}")
    for name, settings in config.features.items():
        state = "enabled" if settings.enabled else "disabled"
        typer.echo(f"{name.value:<18} {settings.prefix:<4} {settings.suffix:<4} {state}")


@app.command()
def color(
    token: Annotated[str, typer.Argument(help="Color token, e.g. '#ff8800' or 'gold'")],
) -> None:
    """Validate a color token and print its hex value."""
    palette = _load_config().palette_colors
    value = parse_color(token, palette) if is_valid_color(token, palette) else None
    if value is None:
        typer.echo(f"Error: invalid color token '{token}'", err=True)
        raise typer.Exit(1)
    typer.echo(format_color(value))


def main() -> None:
    """Entry point for the chromamark console script."""
    app()
