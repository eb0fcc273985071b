"""
Theme - Colour palette and Rich theme used by the CLI harness.
"""

from dataclasses import dataclass

from rich.theme import Theme


@dataclass(frozen=True)
class ColorPalette:
    """Named colours referenced by tables and panels."""

    primary: str
    secondary: str
    accent: str

    success: str
    warning: str
    error: str
    info: str

    text_secondary: str
    text_muted: str

    border_primary: str
    border_secondary: str


DEFAULT_PALETTE = ColorPalette(
    primary="bright_magenta",
    secondary="bright_cyan",
    accent="yellow",
    success="bright_green",
    warning="bright_yellow",
    error="bright_red",
    info="cyan",
    text_secondary="grey85",
    text_muted="grey50",
    border_primary="magenta",
    border_secondary="grey35",
)


def get_palette() -> ColorPalette:
    """Get the harness palette."""
    return DEFAULT_PALETTE


def get_theme() -> Theme:
    """Expose the palette as Rich style names."""
    palette = get_palette()
    styles = {
        name: getattr(palette, name)
        for name in ("primary", "secondary", "accent", "success", "warning", "error", "info")
    }
    styles["muted"] = palette.text_muted
    return Theme(styles)


__all__ = ["ColorPalette", "DEFAULT_PALETTE", "get_palette", "get_theme"]
