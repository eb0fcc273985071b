"""
CLI Main Application - Typer app entry point.

This module provides the command-line harness that loads the KissKH plugin
the way a host application would and exercises its capabilities.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.traceback import install as install_rich_traceback

from kisskh import __version__
from kisskh.cli.commands import browse, stream
from kisskh.cli.context import CLIState
from kisskh.core import ConfigManager
from kisskh.core.exceptions import KissKHError
from kisskh.ui import get_console, handle_error


# Create main Typer application
app = typer.Typer(
    name="kisskh",
    help="🎬 Browse and stream dramas from KissKH",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _version_callback(value: bool) -> None:
    if value:
        get_console().print(f"[bold blue]kisskh[/bold blue] version [green]{__version__}[/green]")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version information and exit",
        callback=_version_callback,
        is_eager=True,
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Settings JSON file",
        dir_okay=False,
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug mode with detailed logging",
        is_flag=True,
    ),
) -> None:
    """
    🎬 KissKH source plugin harness.

    Loads the plugin from settings and calls its home, search, track and
    stream capabilities.
    """
    try:
        settings = ConfigManager(config_file).settings
    except KissKHError as e:
        _setup_logging("DEBUG" if debug else "WARNING")
        handle_error(e, "While loading settings", show_traceback=debug)
        raise typer.Exit(1)

    _setup_logging("DEBUG" if debug else settings.logging.level)
    install_rich_traceback(show_locals=debug)

    ctx.obj = CLIState(settings=settings, debug=debug)


def _setup_logging(level_name: str) -> None:
    """
    Set up application logging.

    Args:
        level_name: Name of the root logging level
    """
    level = getattr(logging, level_name.upper(), logging.WARNING)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )

    # Reduce noise from third-party libraries
    if level > logging.DEBUG:
        logging.getLogger("aiohttp").setLevel(logging.WARNING)
        logging.getLogger("asyncio").setLevel(logging.WARNING)


# Register commands
app.command(name="home")(browse.home)
app.command(name="search")(browse.search)
app.command(name="quick-search")(browse.quick_search)
app.command(name="track")(browse.track)
app.command(name="resolve")(stream.resolve)


def cli_main() -> None:
    """
    Main CLI entry point for the kisskh command.
    """
    try:
        app()
    except KeyboardInterrupt:
        get_console().print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        handle_error(e, "Unexpected error in CLI")
        sys.exit(1)


# Export main components
__all__ = ["app", "cli_main"]
