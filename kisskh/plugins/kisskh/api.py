"""
KissKH API Client

This module builds every outbound KissKH URL and performs the requests.
Responses are returned raw (decoded JSON or text); interpretation is left to
the parser and the stream resolver.
"""

import logging
from typing import Any, List
from urllib.parse import quote

from kisskh.core.http import HttpClient

from .config import KissKHConfig


logger = logging.getLogger(__name__)


class KissKHAPI:
    """Client for the KissKH JSON API."""

    def __init__(self, http: HttpClient, config: KissKHConfig):
        """
        Initialize KissKH API client.

        Args:
            http: HTTP transport
            config: Validated plugin configuration
        """
        self.http = http
        self.config = config
        self.base_url = config.base_url

    # URL builders

    def catalog_url(self, page: int = 1) -> str:
        return (
            f"{self.base_url}/api/DramaList/List?page={page}"
            f"&type=0&sub=0&country=0&status=0&order=1&pageSize={self.config.page_size}"
        )

    def search_url(self, query: str) -> str:
        return f"{self.base_url}/api/DramaList/Search?q={quote(query, safe='')}&type=0"

    def drama_url(self, drama_id: str) -> str:
        return f"{self.base_url}/api/DramaList/Drama/{drama_id}?isq=false"

    def key_url(self, episode_id: str) -> str:
        # The endpoint expects the version glued onto the path with '&'.
        return f"{self.config.key_url_base}/api/key/{episode_id}&version={self.config.app_version}"

    def episode_candidate_urls(self, episode_id: str, key: str) -> List[str]:
        """
        Build the media endpoint candidates in priority order.

        Args:
            episode_id: Episode identifier
            key: Access key obtained for this episode

        Returns:
            One URL per configured suffix, in the configured order
        """
        return [
            f"{self.base_url}/api/DramaList/Episode/{episode_id}{suffix}"
            f"?err=false&ts=&time=&kkey={quote(key, safe='')}"
            for suffix in self.config.media_suffixes
        ]

    # Requests

    async def list_catalog(self, page: int = 1) -> Any:
        """Fetch one catalog page (JSON object with a ``data`` array)."""
        url = self.catalog_url(page)
        data = await self.http.get_json(url)
        logger.debug(f"Fetched catalog page {page}")
        return data

    async def search(self, query: str) -> Any:
        """Search dramas by title (JSON array)."""
        url = self.search_url(query)
        data = await self.http.get_json(url)
        logger.debug(f"Search '{query}' returned {len(data) if isinstance(data, list) else 0} items")
        return data

    async def get_drama(self, drama_id: str) -> Any:
        """Fetch drama details."""
        return await self.http.get_json(self.drama_url(drama_id))

    async def fetch_key(self, episode_id: str) -> str:
        """Fetch the raw access-key response body for an episode."""
        return await self.http.get_text(self.key_url(episode_id))

    async def fetch_episode(self, url: str) -> Any:
        """Fetch one media endpoint candidate."""
        return await self.http.get_json(url)

    async def fetch_manifest(self, url: str) -> str:
        """Fetch a manifest body as text."""
        return await self.http.get_text(url)


__all__ = ["KissKHAPI"]
