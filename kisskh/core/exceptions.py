"""
Core Exceptions - Custom exception classes for the KissKH source plugin.

This module defines the exception hierarchy used across the plugin, from
transport failures up to the terminal errors of the stream-resolution pipeline.
"""

from typing import Any, Optional


class KissKHError(Exception):
    """Root of every error raised by the plugin and its harness."""

    def __init__(self, message: str, details: Optional[Any] = None):
        """
        Args:
            message: Text shown to the user
            details: Raw context (response body, failure list) kept for --debug
        """
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return self.message


class ConfigurationError(KissKHError):
    """Raised when settings or plugin configuration cannot be used."""

    def __init__(self, message: str, config_path: Optional[str] = None, details: Optional[Any] = None):
        """
        Args:
            message: What is wrong with the configuration
            config_path: Settings file the values came from, if any
            details: Validator output
        """
        super().__init__(message, details)
        self.config_path = config_path


class PluginError(KissKHError):
    """Raised by a source plugin; carries the plugin name."""

    def __init__(self, message: str, plugin_name: Optional[str] = None, details: Optional[Any] = None):
        super().__init__(message, details)
        self.plugin_name = plugin_name


class NetworkError(KissKHError):
    """Raised by HttpClient for transport failures, HTTP errors and undecodable bodies."""

    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None, details: Optional[Any] = None):
        """
        Args:
            message: Failure summary including the URL
            url: Requested URL
            status_code: Response status when the server answered
            details: Response body or transport error text
        """
        super().__init__(message, details)
        self.url = url
        self.status_code = status_code


class SearchError(KissKHError):
    """Raised when catalog or search requests fail."""

    def __init__(self, message: str, query: Optional[str] = None, source: Optional[str] = None, details: Optional[Any] = None):
        super().__init__(message, details)
        self.query = query
        self.source = source


class ResolutionError(PluginError):
    """
    Raised when an episode cannot be resolved to playable sources.

    The message always names the failing step and the underlying cause so
    the host can show it as a playback failure.
    """

    step = "resolve"

    def __init__(self, message: str, episode_id: Optional[str] = None, plugin_name: Optional[str] = None, details: Optional[Any] = None):
        """
        Initialize resolution error.

        Args:
            message: Error description
            episode_id: Episode that failed to resolve
            plugin_name: Name of the resolving plugin
            details: Additional error context
        """
        super().__init__(message, plugin_name, details)
        self.episode_id = episode_id


class KeyUnavailable(ResolutionError):
    """Raised when no access key can be obtained for an episode."""

    step = "key"


class NoPlayableSource(ResolutionError):
    """Raised when every media endpoint candidate failed to yield a locator."""

    step = "endpoint"


class ManifestUnavailable(ResolutionError):
    """Raised when a manifest cannot be fetched or is empty."""

    step = "manifest"


__all__ = [
    "KissKHError",
    "ConfigurationError",
    "PluginError",
    "NetworkError",
    "SearchError",
    "ResolutionError",
    "KeyUnavailable",
    "NoPlayableSource",
    "ManifestUnavailable",
]
