"""
HTTP Transport - Thin aiohttp wrapper used by source plugins.

Every call is a single request/response round trip. Failures are raised as
NetworkError so callers can decide whether to fall back or abort; there is no
retry loop here.
"""

import asyncio
import json
import logging
from typing import Any, Dict, Optional

import aiohttp

from kisskh.core.exceptions import NetworkError


logger = logging.getLogger(__name__)


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/138.0.0.0 Safari/537.36"
)


class HttpClient:
    """Lazily-created aiohttp session with JSON and text helpers."""

    def __init__(self, timeout: int = 30, user_agent: str = DEFAULT_USER_AGENT, headers: Optional[Dict[str, str]] = None):
        """
        Initialize the client.

        Args:
            timeout: Total request timeout in seconds
            user_agent: User-Agent header sent with every request
            headers: Extra default headers
        """
        self.timeout = timeout
        self.user_agent = user_agent
        self.default_headers = {
            'User-Agent': user_agent,
            'Accept': 'application/json, text/plain, */*',
            'Accept-Language': 'en-US,en;q=0.5',
        }
        if headers:
            self.default_headers.update(headers)
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create HTTP session. Must be accessed inside a running loop."""
        if self._session is None or self._session.closed:
            connector = aiohttp.TCPConnector(
                limit=10,
                limit_per_host=5,
                ttl_dns_cache=300,
                use_dns_cache=True
            )

            self._session = aiohttp.ClientSession(
                connector=connector,
                timeout=aiohttp.ClientTimeout(total=self.timeout),
                headers=self.default_headers
            )

        return self._session

    async def get_text(self, url: str, headers: Optional[Dict[str, str]] = None) -> str:
        """
        GET a URL and return the body as text.

        Raises:
            NetworkError: On transport failure or HTTP status >= 400
        """
        logger.debug(f"GET {url}")

        try:
            async with self.session.get(url, headers=headers) as response:
                if response.status >= 400:
                    error_text = await response.text(encoding='utf-8', errors='replace')
                    raise NetworkError(
                        f"HTTP {response.status} error for {url}",
                        url=url,
                        status_code=response.status,
                        details=error_text
                    )

                return await response.text(encoding='utf-8', errors='replace')

        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise NetworkError(f"Request to {url} failed: {e}", url=url, details=str(e))

    async def get_json(self, url: str, headers: Optional[Dict[str, str]] = None) -> Any:
        """
        GET a URL and decode the body as JSON regardless of its content type.

        Raises:
            NetworkError: On transport failure, HTTP error, empty or invalid JSON body
        """
        text = await self.get_text(url, headers=headers)

        if not text or not text.strip():
            raise NetworkError(f"Empty response body from {url}", url=url)

        try:
            return json.loads(text)
        except ValueError as e:
            raise NetworkError(f"Invalid JSON from {url}: {e}", url=url, details=text[:200])

    async def close(self) -> None:
        """Close the underlying session if one was opened."""
        if self._session and not self._session.closed:
            await self._session.close()
            logger.debug("HTTP session closed")
        self._session = None

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()


__all__ = ["HttpClient", "DEFAULT_USER_AGENT"]
