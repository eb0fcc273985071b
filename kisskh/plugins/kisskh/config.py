"""
KissKH Plugin Configuration

This module handles configuration validation and defaults for the KissKH plugin.
The validated configuration is immutable and is handed to the plugin, API
client and resolver at construction time.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from kisskh.core.exceptions import ConfigurationError
from kisskh.core.http import DEFAULT_USER_AGENT


logger = logging.getLogger(__name__)


DEFAULT_BASE_URL = "https://kisskh.ovh"
DEFAULT_APP_VERSION = "2.8.10"
DEFAULT_MEDIA_SUFFIXES = (".png", ".mp4", ".m3u8", "")


class KissKHConfig(BaseModel):
    """Configuration model for KissKH plugin."""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(default=DEFAULT_BASE_URL, description="Base URL of the KissKH API")
    key_base_url: Optional[str] = Field(
        default=None,
        description="Base URL of the access-key endpoint (defaults to base_url)"
    )
    app_version: str = Field(default=DEFAULT_APP_VERSION, description="Client version sent to the key endpoint")
    timeout: int = Field(default=30, description="Request timeout in seconds")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="User agent string for requests")
    page_size: int = Field(default=40, ge=1, le=100, description="Catalog entries per page")

    # Playback behaviour
    send_playback_headers: bool = Field(
        default=False,
        description="Attach Referer/Origin headers to resolved sources"
    )
    strict_manifest: bool = Field(
        default=False,
        description="Raise instead of falling back when a manifest cannot be used"
    )
    media_suffixes: Tuple[str, ...] = Field(
        default=DEFAULT_MEDIA_SUFFIXES,
        description="Episode endpoint suffixes, tried in order"
    )

    @field_validator('base_url', 'key_base_url')
    @classmethod
    def strip_trailing_slash(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip().rstrip('/')
        if not v.startswith(('http://', 'https://')):
            raise ValueError("URL must start with http:// or https://")
        return v

    @field_validator('timeout')
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        if v < 5:
            raise ValueError("Timeout must be at least 5 seconds")
        return v

    @field_validator('media_suffixes')
    @classmethod
    def validate_media_suffixes(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        if not v:
            raise ValueError("At least one media suffix is required")
        return v

    @property
    def key_url_base(self) -> str:
        """Base URL used for access-key requests."""
        return self.key_base_url or self.base_url

    @property
    def playback_headers(self) -> Dict[str, str]:
        """Headers attached to every resolved source."""
        if not self.send_playback_headers:
            return {}
        return {
            "Referer": f"{self.base_url}/",
            "Origin": self.base_url,
        }


def get_default_config() -> Dict[str, Any]:
    """Get default configuration for KissKH plugin."""
    return KissKHConfig().model_dump()


def merge_with_defaults(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Merge provided config with defaults.

    Args:
        config: User configuration dictionary

    Returns:
        Merged configuration dictionary
    """
    merged = get_default_config()
    if config:
        merged.update(config)
    return merged


def validate_config(config: Optional[Dict[str, Any]] = None) -> KissKHConfig:
    """
    Validate and create KissKHConfig from dictionary.

    Args:
        config: Configuration dictionary, merged over the defaults

    Returns:
        Validated KissKHConfig instance

    Raises:
        ConfigurationError: If configuration is invalid
    """
    try:
        return KissKHConfig(**merge_with_defaults(config))
    except ValueError as e:
        logger.error(f"Invalid KissKH configuration: {e}")
        raise ConfigurationError(f"Invalid KissKH configuration: {e}", details=str(e))


__all__ = [
    "KissKHConfig",
    "DEFAULT_BASE_URL",
    "DEFAULT_APP_VERSION",
    "DEFAULT_MEDIA_SUFFIXES",
    "get_default_config",
    "merge_with_defaults",
    "validate_config",
]
