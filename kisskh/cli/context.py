"""
CLI Context - Per-invocation state shared by commands.

The state is created by the main callback and stored on the Typer context;
there is no module-level singleton.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Coroutine

import typer

from kisskh.core.config_schemas import AppSettings
from kisskh.plugins.kisskh import KissKHPlugin
from kisskh.ui import get_console, handle_error


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CLIState:
    """Settings and flags resolved by the main callback."""

    settings: AppSettings
    debug: bool = False


def get_state(ctx: typer.Context) -> CLIState:
    """Get the CLI state stored by the main callback."""
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise RuntimeError("CLI state not initialized")
    return state


def create_plugin(state: CLIState, **overrides) -> KissKHPlugin:
    """
    Build a plugin from the loaded settings.

    Args:
        state: CLI state holding the settings
        **overrides: Configuration values that take precedence over the file

    Raises:
        ConfigurationError: If the resulting configuration is invalid
    """
    config = dict(state.settings.source.config)
    config.update(overrides)
    return KissKHPlugin(config)


def run_async(state: CLIState, coro: Coroutine[Any, Any, None], context: str) -> None:
    """
    Run a command coroutine, rendering any failure as an error panel.

    Raises:
        typer.Exit: With status 1 on error, 130 on interrupt
    """
    try:
        asyncio.run(coro)
    except KeyboardInterrupt:
        get_console().print("\n[yellow]Cancelled by user[/yellow]")
        raise typer.Exit(130)
    except Exception as e:
        logger.debug(f"{context}: {e}")
        handle_error(e, context, show_traceback=state.debug)
        raise typer.Exit(1)


__all__ = ["CLIState", "get_state", "create_plugin", "run_async"]
