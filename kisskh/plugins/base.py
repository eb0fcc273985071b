"""
Base Plugin Interface - Abstract base class for video source plugins.

This module defines the capability interfaces a source plugin exposes to the
host application: home feed, search, quick search, track loading and
streamable-media resolution.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from pydantic import BaseModel, Field

from kisskh.core.http import HttpClient
from kisskh.core.models import QuickSearchItem, Shelf, StreamableMedia, Tab, Track


logger = logging.getLogger(__name__)


class PluginMetadata(BaseModel):
    """Descriptive information the host shows for a source."""

    name: str = Field(..., description="Source name shown by the host")
    version: str = Field(default="1.0.0", description="Source plugin version")
    author: str = Field(default="Unknown", description="Maintainer")
    description: str = Field(default="", description="One-line summary")
    website: Optional[str] = Field(None, description="Site the content comes from")
    requires_auth: bool = Field(default=False, description="Whether the site needs a login")


class BasePlugin(ABC):
    """
    Abstract base class for video source plugins.

    Subclasses own an HttpClient and implement the capability methods. Plugins
    hold no state between calls apart from the HTTP session, which is released
    by cleanup() or by leaving an ``async with`` block.
    """

    def __init__(self, http: HttpClient):
        """
        Initialize the plugin.

        Args:
            http: HTTP transport used for all outbound requests
        """
        self.http = http
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @property
    @abstractmethod
    def metadata(self) -> PluginMetadata:
        """Metadata shown by the host."""
        pass

    @property
    @abstractmethod
    def base_url(self) -> str:
        """Get the base URL for the video source."""
        pass

    @abstractmethod
    async def get_home_tabs(self) -> List[Tab]:
        """Get the tabs offered on the home feed."""
        pass

    @abstractmethod
    async def get_home_feed(self, tab: Optional[Tab] = None, page: int = 1) -> List[Shelf]:
        """
        Get home feed shelves.

        Args:
            tab: Selected home tab, if any
            page: Catalog page number (1-based)

        Returns:
            List of shelves to display
        """
        pass

    @abstractmethod
    async def search_tabs(self, query: str) -> List[Tab]:
        """Get the tabs offered for a search query."""
        pass

    @abstractmethod
    async def search_feed(self, query: str, tab: Optional[Tab] = None) -> List[Shelf]:
        """
        Search the catalog.

        Args:
            query: Search query string
            tab: Selected search tab, if any

        Returns:
            List of result shelves, empty for a blank query

        Raises:
            SearchError: If the search request fails
        """
        pass

    @abstractmethod
    async def quick_search(self, query: str) -> List[QuickSearchItem]:
        """Return quick-search suggestions for a partial query."""
        pass

    async def delete_quick_search(self, item: QuickSearchItem) -> None:
        """Forget a quick-search item. Plugins without history do nothing."""
        return None

    @abstractmethod
    async def load_track(self, track: Track) -> Track:
        """Return the track enriched with its full details."""
        pass

    async def get_shelves(self, track: Track) -> List[Shelf]:
        """Related content for a track. None by default."""
        return []

    @abstractmethod
    async def load_streamable_media(self, streamable_id: str, is_download: bool = False) -> StreamableMedia:
        """
        Resolve a streamable to playable sources.

        Args:
            streamable_id: Opaque episode identifier
            is_download: Whether the host intends to download rather than play

        Returns:
            Media with at least one playable source

        Raises:
            ResolutionError: If the streamable cannot be resolved
        """
        pass

    async def validate_connection(self) -> bool:
        """
        Check that the source answers at its base URL.

        Returns:
            True when the request succeeds
        """
        try:
            await self.http.get_text(self.base_url)
            return True
        except Exception as e:
            self.logger.error(f"{self.metadata.name} is unreachable: {e}")
            return False

    async def cleanup(self) -> None:
        """Release the HTTP session."""
        try:
            await self.http.close()
        except Exception as e:
            self.logger.debug(f"Ignoring error while closing session: {e}")

    async def __aenter__(self) -> "BasePlugin":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.cleanup()

    def __str__(self) -> str:
        return f"{self.metadata.name} v{self.metadata.version}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.metadata.name}')"


__all__ = ["BasePlugin", "PluginMetadata"]
