"""
KissKH Plugin - Main plugin implementation for kisskh

This module implements the plugin class the host application talks to:
home feed, search, quick search, track loading and stream resolution.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from kisskh.core.exceptions import NetworkError, SearchError
from kisskh.core.http import HttpClient
from kisskh.core.models import QuickSearchItem, Shelf, StreamableMedia, Tab, Track
from kisskh.plugins.base import BasePlugin, PluginMetadata

from .api import KissKHAPI
from .config import KissKHConfig, validate_config
from .parser import KissKHParser
from .resolver import StreamResolver


logger = logging.getLogger(__name__)


plugin_metadata = PluginMetadata(
    name="KissKH",
    version="1.0.0",
    author="KissKH Source Team",
    description="Asian drama source with catalog browsing, search and HLS-aware stream resolution",
    website="https://kisskh.ovh",
    requires_auth=False
)

HOME_TABS = [
    Tab(id="popular", title="Popular"),
    Tab(id="latest", title="Latest"),
]

SEARCH_TABS = [
    Tab(id="all", title="All"),
    Tab(id="drama", title="Drama"),
    Tab(id="movie", title="Movie"),
]


class KissKHPlugin(BasePlugin):
    """
    KissKH plugin for browsing and streaming dramas.

    The plugin is stateless apart from its HTTP session: configuration is
    validated once at construction and shared read-only with the API client
    and the stream resolver.
    """

    def __init__(
        self,
        config: Optional[Union[KissKHConfig, Dict[str, Any]]] = None,
        http: Optional[HttpClient] = None
    ):
        """
        Initialize KissKH plugin.

        Args:
            config: Validated configuration or a dictionary merged over defaults
            http: HTTP transport (created from the configuration when omitted)

        Raises:
            ConfigurationError: If a configuration dictionary is invalid
        """
        if not isinstance(config, KissKHConfig):
            config = validate_config(config)
        self.plugin_config = config

        super().__init__(http or HttpClient(timeout=config.timeout, user_agent=config.user_agent))

        self.api = KissKHAPI(self.http, config)
        self.parser = KissKHParser()
        self.resolver = StreamResolver(self.api, config, self.parser)

        logger.debug("KissKH plugin initialized")

    @property
    def metadata(self) -> PluginMetadata:
        """Get plugin metadata."""
        return plugin_metadata

    @property
    def base_url(self) -> str:
        """Get base URL for KissKH."""
        return self.plugin_config.base_url

    # Home feed

    async def get_home_tabs(self) -> List[Tab]:
        return list(HOME_TABS)

    async def get_home_feed(self, tab: Optional[Tab] = None, page: int = 1) -> List[Shelf]:
        """
        Get the popular catalog as a single shelf.

        A tab whose id is numeric selects that catalog page.

        Raises:
            SearchError: If the catalog request fails
        """
        if tab is not None and tab.id.isdigit():
            page = int(tab.id)
        page = max(page, 1)

        try:
            data = await self.api.list_catalog(page)
        except NetworkError as e:
            raise SearchError(f"Failed to load catalog page {page}: {e}", source=self.metadata.name, details=e.details)

        tracks = self.parser.parse_catalog_page(data)
        logger.info(f"Loaded {len(tracks)} catalog entries from page {page}")
        return [Shelf(title="Popular Dramas", items=tracks)]

    # Search

    async def search_tabs(self, query: str) -> List[Tab]:
        return list(SEARCH_TABS)

    async def search_feed(self, query: str, tab: Optional[Tab] = None) -> List[Shelf]:
        """
        Search dramas by title.

        Returns:
            A single "Search Results" shelf, or no shelves for a blank query

        Raises:
            SearchError: If the search request fails
        """
        tracks = await self._search_tracks(query)
        if tracks is None:
            return []
        return [Shelf(title="Search Results", items=tracks)]

    async def quick_search(self, query: str) -> List[QuickSearchItem]:
        tracks = await self._search_tracks(query)
        if not tracks:
            return []
        return [QuickSearchItem(track=track, searched=False) for track in tracks]

    async def _search_tracks(self, query: str) -> Optional[List[Track]]:
        if not query or not query.strip():
            return None

        clean_query = query.strip()
        logger.debug(f"Searching KissKH with query: '{clean_query}'")

        try:
            data = await self.api.search(clean_query)
        except NetworkError as e:
            raise SearchError(
                f"Search failed for query '{clean_query}': {e}",
                query=clean_query,
                source=self.metadata.name,
                details=e.details
            )

        tracks = self.parser.parse_search_results(data)
        logger.info(f"Found {len(tracks)} results for query: '{clean_query}'")
        return tracks

    # Tracks

    async def load_track(self, track: Track) -> Track:
        """
        Load drama details into a track.

        A failed or unusable details response leaves the track unchanged.
        """
        try:
            data = await self.api.get_drama(track.id)
        except NetworkError as e:
            logger.warning(f"Could not load details for drama {track.id}: {e}")
            return track

        return self.parser.parse_track_details(data, track)

    # Streaming

    async def load_streamable_media(self, streamable_id: str, is_download: bool = False) -> StreamableMedia:
        sources = await self.resolver.resolve(streamable_id)
        return StreamableMedia(sources=sources, merged=False)

    async def validate_connection(self) -> bool:
        """
        Validate connection by fetching the first catalog page.

        Returns:
            True if connection is successful, False otherwise
        """
        try:
            await self.api.list_catalog(1)
            logger.info("KissKH connection validation successful")
            return True
        except Exception as e:
            logger.error(f"KissKH connection validation failed: {e}")
            return False

    def __repr__(self) -> str:
        return f"KissKHPlugin(base_url='{self.base_url}')"


__all__ = ["KissKHPlugin", "plugin_metadata", "HOME_TABS", "SEARCH_TABS"]
