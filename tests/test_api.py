"""Tests for KissKH API URL building and request dispatch."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from kisskh.plugins.kisskh.api import KissKHAPI
from kisskh.plugins.kisskh.config import KissKHConfig
from tests.conftest import BASE_URL


class TestUrlBuilders:
    def test_catalog_url(self, api: KissKHAPI) -> None:
        assert api.catalog_url(3) == (
            f"{BASE_URL}/api/DramaList/List?page=3"
            "&type=0&sub=0&country=0&status=0&order=1&pageSize=40"
        )

    def test_catalog_url_page_size(self, http: MagicMock) -> None:
        api = KissKHAPI(http, KissKHConfig(base_url=BASE_URL, page_size=20))

        assert api.catalog_url(1).endswith("&pageSize=20")

    def test_search_url_quotes_query(self, api: KissKHAPI) -> None:
        assert api.search_url("love & war/2") == (
            f"{BASE_URL}/api/DramaList/Search?q=love%20%26%20war%2F2&type=0"
        )

    def test_drama_url(self, api: KissKHAPI) -> None:
        assert api.drama_url("8001") == f"{BASE_URL}/api/DramaList/Drama/8001?isq=false"

    def test_key_url(self, api: KissKHAPI) -> None:
        assert api.key_url("170001") == f"{BASE_URL}/api/key/170001&version=2.8.10"

    def test_key_url_custom_version(self, http: MagicMock) -> None:
        api = KissKHAPI(http, KissKHConfig(base_url=BASE_URL, app_version="3.0.0"))

        assert api.key_url("1").endswith("&version=3.0.0")

    def test_episode_candidates_follow_configured_suffixes(self, http: MagicMock) -> None:
        api = KissKHAPI(http, KissKHConfig(base_url=BASE_URL, media_suffixes=(".mp4", "")))

        urls = api.episode_candidate_urls("7", "abc")

        assert urls == [
            f"{BASE_URL}/api/DramaList/Episode/7.mp4?err=false&ts=&time=&kkey=abc",
            f"{BASE_URL}/api/DramaList/Episode/7?err=false&ts=&time=&kkey=abc",
        ]


class TestRequests:
    @pytest.mark.asyncio
    async def test_list_catalog_uses_json(self, api: KissKHAPI, http: MagicMock) -> None:
        http.get_json.return_value = {"data": []}

        data = await api.list_catalog(2)

        assert data == {"data": []}
        http.get_json.assert_awaited_once_with(api.catalog_url(2))

    @pytest.mark.asyncio
    async def test_fetch_key_uses_text(self, api: KissKHAPI, http: MagicMock) -> None:
        http.get_text.return_value = '{"key": "x"}'

        body = await api.fetch_key("9")

        assert body == '{"key": "x"}'
        http.get_text.assert_awaited_once_with(api.key_url("9"))
        http.get_json.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_fetch_manifest_uses_text(self, api: KissKHAPI, http: MagicMock) -> None:
        http.get_text.return_value = "#EXTM3U"

        assert await api.fetch_manifest("https://cdn.test/master.m3u8") == "#EXTM3U"
