"""
Plugin Layer - Source plugin interface and implementations.

This module contains the capability interface the host application calls and
the KissKH source implementation.
"""

from kisskh.plugins.base import BasePlugin, PluginMetadata

__all__ = [
    "BasePlugin",
    "PluginMetadata",
]
