"""
KissKH Plugin - Drama source plugin for kisskh

This plugin provides catalog browsing, search and stream resolution for the
KissKH JSON API, including expansion of HLS master playlists.
"""

from .plugin import KissKHPlugin, plugin_metadata
from .config import KissKHConfig, get_default_config, validate_config
from .manifest import is_manifest_url, parse_manifest, resolve_variant_url
from .resolver import StreamResolver

__all__ = [
    "KissKHPlugin",
    "plugin_metadata",
    "KissKHConfig",
    "get_default_config",
    "validate_config",
    "StreamResolver",
    "is_manifest_url",
    "parse_manifest",
    "resolve_variant_url",
]
