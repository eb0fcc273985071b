"""
Error Handler - Error panels with context and suggestions.

This module renders plugin errors for the CLI harness, the same way a host
would surface them as playback or browsing failures.
"""

import traceback
from typing import List, Optional

from rich.markup import escape
from rich.panel import Panel

from kisskh.core.exceptions import (
    ConfigurationError,
    KeyUnavailable,
    KissKHError,
    ManifestUnavailable,
    NetworkError,
    NoPlayableSource,
    ResolutionError,
    SearchError,
)
from kisskh.ui.console import get_console
from kisskh.ui.themes import get_palette


class ErrorHandler:
    """Handles error display with consistent formatting and helpful context."""

    def __init__(self):
        self.console = get_console()
        self.palette = get_palette()

    def handle_error(
        self,
        error: Exception,
        context: Optional[str] = None,
        show_traceback: bool = False
    ) -> None:
        """
        Handle and display an error with appropriate formatting.

        Args:
            error: Exception to handle
            context: Additional context about where the error occurred
            show_traceback: Whether to show details and the full traceback
        """
        if isinstance(error, ResolutionError):
            lines = [f"[dim]Step:[/dim] [cyan]{error.step}[/cyan]"]
            if error.episode_id:
                lines.append(f"[dim]Episode:[/dim] [cyan]{error.episode_id}[/cyan]")
            self._render(error.message, "▶️  Playback Error", lines, self._resolution_suggestions(error),
                         context, error.details if show_traceback else None)
        elif isinstance(error, ConfigurationError):
            lines = []
            if error.config_path:
                lines.append(f"[dim]Configuration file:[/dim] [cyan]{error.config_path}[/cyan]")
            self._render(error.message, "⚙️  Configuration Error", lines, [
                "Check configuration file syntax and format",
                "Remove unknown or misspelled keys",
                "Run without [cyan]--config[/cyan] to use defaults",
            ], context, error.details if show_traceback else None)
        elif isinstance(error, SearchError):
            lines = []
            if error.query:
                lines.append(f"[dim]Query:[/dim] [cyan]{error.query}[/cyan]")
            if error.source:
                lines.append(f"[dim]Source:[/dim] [cyan]{error.source}[/cyan]")
            self._render(error.message, "🔍 Search Error", lines, [
                "Try different search terms",
                "Check your internet connection",
                "Verify the configured base URL is reachable",
            ], context, error.details if show_traceback else None)
        elif isinstance(error, NetworkError):
            lines = []
            if error.url:
                lines.append(f"[dim]URL:[/dim] [blue]{error.url}[/blue]")
            if error.status_code:
                lines.append(f"[dim]Status Code:[/dim] {error.status_code}")
            self._render(error.message, "🌐 Network Error", lines, [
                "Check your internet connection",
                "Try again in a few moments",
            ], context, error.details if show_traceback else None)
        elif isinstance(error, KissKHError):
            self._render(error.message, "❌ Error", [], [], context,
                         error.details if show_traceback else None)
        else:
            self._render(
                f"{error.__class__.__name__}: {error}",
                "💥 Unexpected Error",
                [],
                ["Run again with [cyan]--debug[/cyan] for details", "Report this issue if it persists"],
                context,
                traceback.format_exc() if show_traceback else None
            )

    def _resolution_suggestions(self, error: ResolutionError) -> List[str]:
        if isinstance(error, KeyUnavailable):
            return [
                "The key endpoint may have changed; check [cyan]key_base_url[/cyan] and [cyan]app_version[/cyan]",
                "Verify the episode id comes from a recent catalog listing",
            ]
        if isinstance(error, NoPlayableSource):
            return [
                "The episode may not be released yet",
                "Try again later; media endpoints are rate limited upstream",
            ]
        if isinstance(error, ManifestUnavailable):
            return [
                "Run without [cyan]--strict[/cyan] to fall back to the manifest URL",
            ]
        return []

    def _render(
        self,
        message: str,
        title: str,
        lines: List[str],
        suggestions: List[str],
        context: Optional[str],
        details: Optional[object]
    ) -> None:
        content_parts = [f"[{self.palette.error}]{escape(message)}[/{self.palette.error}]"]

        if lines:
            content_parts.append("")
            content_parts.extend(lines)

        if context:
            content_parts.append(f"\n[dim]Context:[/dim] {context}")

        if suggestions:
            content_parts.append(f"\n[{self.palette.info}]💡 Suggestions:[/{self.palette.info}]")
            for suggestion in suggestions:
                content_parts.append(f"• {suggestion}")

        if details:
            content_parts.append(f"\n[dim]Details:[/dim]\n{escape(str(details))}")

        panel = Panel(
            "\n".join(content_parts),
            title=title,
            border_style=self.palette.error,
            padding=(1, 2)
        )

        self.console.print(panel)

    def display_warning(self, message: str, title: str = "⚠️  Warning") -> None:
        """Display a warning message."""
        panel = Panel(
            f"[{self.palette.warning}]{escape(message)}[/{self.palette.warning}]",
            title=title,
            border_style=self.palette.warning,
            padding=(1, 2)
        )
        self.console.print(panel)


def handle_error(error: Exception, context: Optional[str] = None, show_traceback: bool = False) -> None:
    """Convenience function for error handling."""
    ErrorHandler().handle_error(error, context, show_traceback)


def display_warning(message: str, title: str = "⚠️  Warning") -> None:
    """Convenience function for displaying warnings."""
    ErrorHandler().display_warning(message, title)


__all__ = ["ErrorHandler", "handle_error", "display_warning"]
