"""
KissKH - Source plugin for browsing and streaming dramas from KissKH.

Implements the host capability interfaces (home feed, search, quick search,
track loading and stream resolution) on top of the KissKH JSON API, with a
Typer/Rich command-line harness for manual use.
"""

__version__ = "1.0.0"
__author__ = "KissKH Source Team"

# Package metadata
__title__ = "kisskh"
__description__ = "KissKH source plugin with HLS-aware stream resolution"
__license__ = "MIT"

# Version info tuple for programmatic access
VERSION_INFO = tuple(map(int, __version__.split(".")))

# Export main components for easy importing
from kisskh.core.models import PlayableSource, StreamableMedia, Track
from kisskh.plugins.kisskh import KissKHPlugin, StreamResolver

__all__ = [
    "__version__",
    "__author__",
    "PlayableSource",
    "StreamableMedia",
    "Track",
    "KissKHPlugin",
    "StreamResolver",
]
