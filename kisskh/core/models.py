"""
Core Data Models - Pydantic models for type safety and validation.

This module defines the data structures exchanged with the host application:
catalog entries, shelves and tabs, and the playable sources produced by the
stream resolver. All models use Pydantic for validation and serialization.
"""

import re
from enum import Enum
from typing import Dict, List, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator


class Quality(str, Enum):
    """Video quality options for playable sources."""

    LOW = "480p"
    MEDIUM = "720p"
    HIGH = "1080p"
    ULTRA = "1440p"
    FOUR_K = "2160p"

    @classmethod
    def from_resolution(cls, width: int, height: int) -> "Quality":
        """Convert resolution dimensions to Quality enum."""
        if height <= 480:
            return cls.LOW
        elif height <= 720:
            return cls.MEDIUM
        elif height <= 1080:
            return cls.HIGH
        elif height <= 1440:
            return cls.ULTRA
        else:
            return cls.FOUR_K

    @property
    def height(self) -> int:
        """Get the height in pixels for this quality."""
        return int(self.value.replace('p', ''))

    def __str__(self) -> str:
        return self.value


class SourceType(str, Enum):
    """Kind of resource a playable source points at."""

    DIRECT = "direct"
    HLS = "hls"


_RESOLUTION_PATTERN = re.compile(r'^(\d+)x(\d+)$')


def is_absolute_url(url: str) -> bool:
    """Check that a locator has both a scheme and a host."""
    parsed = urlparse(url.strip())
    return bool(parsed.scheme and parsed.netloc)


class Tab(BaseModel):
    """A selectable tab offered by the home or search feed."""

    id: str = Field(..., min_length=1, description="Tab identifier")
    title: str = Field(..., description="Tab display title")


class EpisodeRef(BaseModel):
    """An episode listed in a drama's details."""

    id: str = Field(..., min_length=1, description="Opaque episode identifier")
    number: Optional[float] = Field(None, description="Episode number as listed upstream")


class Track(BaseModel):
    """
    Represents a catalog entry from the remote listing.

    Field names mirror the upstream JSON (`id`, `title`, `thumbnail`) so the
    host can map them without translation.
    """

    id: str = Field(..., min_length=1, description="Drama identifier")
    title: str = Field(..., min_length=1, description="Drama title")
    thumbnail: Optional[str] = Field(None, description="Thumbnail image URL")
    description: Optional[str] = Field(None, description="Drama description")
    episodes: List[EpisodeRef] = Field(default_factory=list, description="Known episodes")

    @field_validator('title')
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Ensure title is properly formatted."""
        return v.strip()

    def __str__(self) -> str:
        return self.title

    def __repr__(self) -> str:
        return f"Track(id='{self.id}', title='{self.title}')"


class Shelf(BaseModel):
    """A titled row of catalog entries."""

    title: str = Field(..., description="Shelf title")
    items: List[Track] = Field(default_factory=list, description="Entries on the shelf")

    def __len__(self) -> int:
        return len(self.items)


class QuickSearchItem(BaseModel):
    """A quick-search suggestion wrapping a catalog entry."""

    track: Track
    searched: bool = Field(False, description="Whether the item came from search history")


class ManifestVariant(BaseModel):
    """One bitrate/resolution option parsed out of an adaptive manifest."""

    bandwidth: int = Field(0, ge=0, description="Peak bandwidth in bits per second")
    resolution: str = Field("", description="Resolution as WxH, empty when absent")
    url: str = Field(..., min_length=1, description="Absolute variant URL")


class PlayableSource(BaseModel):
    """
    A locator the host can play, with any headers playback requires.

    Sources produced from a manifest carry the variant's bandwidth and
    resolution; direct sources leave them at their defaults.
    """

    url: str = Field(..., description="Absolute HTTP locator")
    headers: Dict[str, str] = Field(default_factory=dict, description="Headers to send on playback")
    source_type: SourceType = Field(SourceType.DIRECT, description="Direct file or HLS playlist")
    bandwidth: int = Field(0, ge=0, description="Variant bandwidth in bits per second")
    resolution: str = Field("", description="Variant resolution as WxH")

    @field_validator('url')
    @classmethod
    def validate_absolute_url(cls, v: str) -> str:
        """Reject locators without scheme and host."""
        v = v.strip()
        if not is_absolute_url(v):
            raise ValueError(f"Source URL must be absolute: {v!r}")
        return v

    @property
    def quality(self) -> Optional[Quality]:
        """Quality derived from the resolution, if one is known."""
        match = _RESOLUTION_PATTERN.match(self.resolution)
        if not match:
            return None
        return Quality.from_resolution(int(match.group(1)), int(match.group(2)))

    @property
    def label(self) -> str:
        """Short human-readable description of the source."""
        if self.quality:
            return f"{self.quality} ({self.resolution})"
        if self.source_type == SourceType.HLS:
            return "Auto (HLS)"
        return "Direct"

    def __str__(self) -> str:
        return f"{self.label}: {self.url}"


class StreamableMedia(BaseModel):
    """Resolved media for a streamable: alternative sources, never empty."""

    sources: List[PlayableSource] = Field(..., min_length=1, description="Alternative sources")
    merged: bool = Field(False, description="Whether sources should be merged into one stream")


# Type aliases for better code readability
ShelfList = List[Shelf]
SourceList = List[PlayableSource]

# Export all models and types
__all__ = [
    "is_absolute_url",
    "Quality",
    "SourceType",
    "Tab",
    "EpisodeRef",
    "Track",
    "Shelf",
    "QuickSearchItem",
    "ManifestVariant",
    "PlayableSource",
    "StreamableMedia",
    "ShelfList",
    "SourceList",
]
