"""
UI Components - Rich tables for catalog entries and playable sources.
"""

from typing import List

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from kisskh.core.models import PlayableSource, QuickSearchItem, Shelf, Track
from kisskh.ui.themes import get_palette


class UIComponents:
    """Factory for styled Rich renderables."""

    def __init__(self):
        self.palette = get_palette()

    def _table(self, title: str) -> Table:
        return Table(
            title=title,
            show_header=True,
            header_style=f"bold {self.palette.secondary}",
            border_style=self.palette.border_primary,
            expand=True
        )

    def create_shelf_table(self, shelf: Shelf) -> Table:
        """
        Create a table listing the entries of a shelf.

        Args:
            shelf: Shelf to display

        Returns:
            Formatted table with one row per entry
        """
        table = self._table(f"📺 {shelf.title}")

        table.add_column("#", style="dim", width=4)
        table.add_column("ID", style=self.palette.accent, width=10)
        table.add_column("Title", style=self.palette.primary, min_width=30)
        table.add_column("Thumbnail", style=self.palette.text_muted, overflow="fold")

        for i, track in enumerate(shelf.items, 1):
            table.add_row(str(i), track.id, track.title, track.thumbnail or "-")

        return table

    def create_quick_search_table(self, items: List[QuickSearchItem]) -> Table:
        return self.create_shelf_table(
            Shelf(title="Quick Search", items=[item.track for item in items])
        )

    def create_track_panel(self, track: Track) -> Panel:
        """Create a panel with a drama's details and its episodes."""
        content_parts = [
            f"[bold {self.palette.primary}]{escape(track.title)}[/bold {self.palette.primary}]",
            f"[dim]ID:[/dim] {track.id}",
        ]
        if track.thumbnail:
            content_parts.append(f"[dim]Thumbnail:[/dim] {track.thumbnail}")
        if track.description:
            content_parts.append(f"\n{escape(track.description)}")
        if track.episodes:
            content_parts.append(f"\n[dim]Episodes ({len(track.episodes)}):[/dim]")
            for episode in track.episodes:
                number = "?" if episode.number is None else f"{episode.number:g}"
                content_parts.append(f"• Episode {number}  [{self.palette.accent}]{episode.id}[/{self.palette.accent}]")

        return Panel(
            "\n".join(content_parts),
            title="ℹ️  Drama",
            border_style=self.palette.border_primary,
            padding=(1, 2)
        )

    def create_sources_table(self, sources: List[PlayableSource]) -> Table:
        """
        Create a table listing resolved playable sources.

        Args:
            sources: Sources in resolver order

        Returns:
            Formatted table with quality, type, bandwidth and URL
        """
        table = self._table("▶️  Playable Sources")

        table.add_column("#", style="dim", width=4)
        table.add_column("Quality", style=self.palette.accent, width=18)
        table.add_column("Type", style=self.palette.text_secondary, width=8)
        table.add_column("Bandwidth", style=self.palette.text_secondary, width=12)
        table.add_column("URL", style=self.palette.primary, overflow="fold")

        for i, source in enumerate(sources, 1):
            bandwidth = f"{source.bandwidth / 1000:.0f} kbps" if source.bandwidth else "-"
            table.add_row(str(i), source.label, source.source_type.value, bandwidth, source.url)

        return table


__all__ = ["UIComponents"]
