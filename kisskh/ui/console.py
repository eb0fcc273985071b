"""
Console - Shared Rich console for the CLI harness.

Commands, tables and error panels all print through the same console so the
harness theme applies everywhere.
"""

from typing import Optional

from rich.console import Console

from kisskh.ui.themes import get_theme


_console: Optional[Console] = None


def setup_console(force_terminal: Optional[bool] = None, width: Optional[int] = None) -> Console:
    """
    Replace the shared console.

    Args:
        force_terminal: Override terminal detection (None keeps auto-detection)
        width: Fixed output width, mainly for tests and piping

    Returns:
        The new shared console
    """
    global _console

    options = {"theme": get_theme(), "force_terminal": force_terminal}
    if width is not None:
        options["width"] = width

    _console = Console(**options)
    return _console


def get_console() -> Console:
    """Return the shared console, creating it on first use."""
    if _console is None:
        return setup_console()
    return _console


__all__ = ["get_console", "setup_console"]
