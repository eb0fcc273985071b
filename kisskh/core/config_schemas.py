"""
Settings Schemas - Pydantic models for the harness settings file.

The file carries logging preferences and the raw source configuration; the
source section is validated by the plugin itself into KissKHConfig.
"""

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field, field_validator


class LoggingSettings(BaseModel):
    """Root logger settings."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Root logging level when --debug is not given"
    )

    @field_validator('level', mode='before')
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept level names in any case."""
        if isinstance(v, str):
            return v.upper()
        return v


class SourceConfig(BaseModel):
    """Source section: a display name and the plugin's own settings."""

    name: Optional[str] = Field(
        default=None,
        description="Label shown for the source"
    )
    config: Dict[str, Any] = Field(
        default_factory=dict,
        description="Values merged over the plugin defaults"
    )

    @field_validator('config')
    @classmethod
    def check_timeout(cls, v: Dict[str, Any]) -> Dict[str, Any]:
        """Reject obviously broken timeouts before the plugin sees them."""
        timeout = v.get('timeout')
        if timeout is not None and (isinstance(timeout, bool) or not isinstance(timeout, int) or timeout < 1):
            raise ValueError("source timeout must be a positive integer")
        return v


class AppSettings(BaseModel):
    """Top-level settings file model."""

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    source: SourceConfig = Field(default_factory=SourceConfig)


__all__ = [
    "LoggingSettings",
    "SourceConfig",
    "AppSettings",
]
