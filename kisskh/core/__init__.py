"""
Core Layer - Shared models, configuration, transport and exceptions.

This module contains the data models exchanged with the host, the settings
loader, the HTTP transport and the exception hierarchy used by the plugin.
"""

from kisskh.core.config_manager import ConfigManager
from kisskh.core.config_schemas import AppSettings, LoggingSettings, SourceConfig
from kisskh.core.exceptions import (
    ConfigurationError,
    KeyUnavailable,
    KissKHError,
    ManifestUnavailable,
    NetworkError,
    NoPlayableSource,
    PluginError,
    ResolutionError,
    SearchError,
)
from kisskh.core.http import HttpClient
from kisskh.core.models import (
    EpisodeRef,
    ManifestVariant,
    PlayableSource,
    Quality,
    QuickSearchItem,
    Shelf,
    SourceType,
    StreamableMedia,
    Tab,
    Track,
)

__all__ = [
    # Data Models
    "EpisodeRef",
    "ManifestVariant",
    "PlayableSource",
    "Quality",
    "QuickSearchItem",
    "Shelf",
    "SourceType",
    "StreamableMedia",
    "Tab",
    "Track",
    # Configuration Management
    "ConfigManager",
    "AppSettings",
    "LoggingSettings",
    "SourceConfig",
    # Transport
    "HttpClient",
    # Exceptions
    "KissKHError",
    "ConfigurationError",
    "NetworkError",
    "PluginError",
    "SearchError",
    "ResolutionError",
    "KeyUnavailable",
    "NoPlayableSource",
    "ManifestUnavailable",
]
