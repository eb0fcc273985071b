"""Shared fixtures for the KissKH test suite."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Tuple
from unittest.mock import AsyncMock, MagicMock

import pytest

from kisskh.core.exceptions import NetworkError
from kisskh.core.http import HttpClient
from kisskh.plugins.kisskh.api import KissKHAPI
from kisskh.plugins.kisskh.config import KissKHConfig
from kisskh.plugins.kisskh.resolver import StreamResolver

BASE_URL = "https://kisskh.test"


def http_error(url: str, status: int = 500) -> NetworkError:
    """Build the error HttpClient raises for a failed request."""
    return NetworkError(f"HTTP {status} error for {url}", url=url, status_code=status)


def route(responses: Dict[str, Any], calls: List[str]) -> Callable[..., Any]:
    """
    Build a side effect answering requests by URL substring.

    The first key contained in the requested URL wins. Exception values are
    raised, anything else is returned. Unmatched URLs fail with HTTP 404.
    Every requested URL is appended to ``calls``.
    """

    async def _respond(url: str, headers: Any = None) -> Any:
        calls.append(url)
        for fragment, value in responses.items():
            if fragment in url:
                if isinstance(value, Exception):
                    raise value
                return value
        raise http_error(url, 404)

    return _respond


@pytest.fixture
def config() -> KissKHConfig:
    return KissKHConfig(base_url=BASE_URL)


@pytest.fixture
def http() -> MagicMock:
    client = MagicMock(spec=HttpClient)
    client.get_text = AsyncMock()
    client.get_json = AsyncMock()
    client.close = AsyncMock()
    return client


@pytest.fixture
def api(http: MagicMock, config: KissKHConfig) -> KissKHAPI:
    return KissKHAPI(http, config)


@pytest.fixture
def resolver(api: KissKHAPI, config: KissKHConfig) -> StreamResolver:
    return StreamResolver(api, config)


def raw_response(body: bytes, status: int = 200) -> MagicMock:
    """
    Build an aiohttp-style response context whose ``text()`` decodes bytes.

    Decoding follows ``ClientResponse.text``: strict errors unless the
    caller asks otherwise.
    """
    response = MagicMock()
    response.status = status

    async def _text(encoding: str = "utf-8", errors: str = "strict") -> str:
        return body.decode(encoding, errors)

    response.text = _text
    context = MagicMock()
    context.__aenter__ = AsyncMock(return_value=response)
    context.__aexit__ = AsyncMock(return_value=False)
    return context


def routed_session(responses: Dict[str, Tuple[bytes, int]], calls: List[str]) -> MagicMock:
    """Session double answering GETs by URL substring with raw bodies."""

    def _get(url: str, headers: Any = None) -> MagicMock:
        calls.append(url)
        for fragment, (body, status) in responses.items():
            if fragment in url:
                return raw_response(body, status)
        return raw_response(b"not found", 404)

    session = MagicMock()
    session.closed = False
    session.close = AsyncMock()
    session.get = MagicMock(side_effect=_get)
    return session
