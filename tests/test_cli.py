"""Tests for the Typer command-line harness (plugin mocked)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from typer.testing import CliRunner

from kisskh import __version__
from kisskh.cli import context as context_module
from kisskh.cli.commands import browse, stream
from kisskh.cli.context import CLIState, create_plugin
from kisskh.cli.main import app
from kisskh.core.config_schemas import AppSettings, SourceConfig
from kisskh.core.exceptions import KeyUnavailable
from kisskh.core.models import PlayableSource, Shelf, SourceType, StreamableMedia, Track

runner = CliRunner()


def _fake_plugin(**methods: Any) -> MagicMock:
    plugin = MagicMock()
    plugin.__aenter__ = AsyncMock(return_value=plugin)
    plugin.__aexit__ = AsyncMock(return_value=False)
    for name, value in methods.items():
        setattr(plugin, name, value)
    return plugin


@pytest.fixture
def patch_plugin(monkeypatch: pytest.MonkeyPatch):
    """Replace plugin construction in the command modules."""
    created = {}

    def _install(plugin: MagicMock) -> dict:
        def _factory(state: CLIState, **overrides: Any) -> MagicMock:
            created["state"] = state
            created["overrides"] = overrides
            return plugin

        monkeypatch.setattr(browse, "create_plugin", _factory)
        monkeypatch.setattr(stream, "create_plugin", _factory)
        return created

    return _install


# ---------------------------------------------------------------------------
# Global options
# ---------------------------------------------------------------------------


class TestGlobalOptions:
    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_invalid_settings_file(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.json"
        path.write_text("{broken", encoding="utf-8")

        result = runner.invoke(app, ["--config", str(path), "home"])

        assert result.exit_code == 1
        assert "Configuration Error" in result.output

    def test_settings_passed_to_plugin(self, tmp_path: Path, patch_plugin) -> None:
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"source": {"config": {"page_size": 5}}}), encoding="utf-8")
        created = patch_plugin(_fake_plugin(get_home_feed=AsyncMock(return_value=[])))

        result = runner.invoke(app, ["--config", str(path), "home"])

        assert result.exit_code == 0
        assert created["state"].settings.source.config == {"page_size": 5}


# ---------------------------------------------------------------------------
# Browse commands
# ---------------------------------------------------------------------------


class TestBrowseCommands:
    def test_home(self, patch_plugin) -> None:
        plugin = _fake_plugin(get_home_feed=AsyncMock(return_value=[
            Shelf(title="Popular Dramas", items=[Track(id="8001", title="Moving")]),
        ]))
        patch_plugin(plugin)

        result = runner.invoke(app, ["home", "--page", "2"])

        assert result.exit_code == 0
        assert "Moving" in result.output
        plugin.get_home_feed.assert_awaited_once_with(page=2)
        plugin.__aexit__.assert_awaited_once()

    def test_search_without_results(self, patch_plugin) -> None:
        patch_plugin(_fake_plugin(search_feed=AsyncMock(return_value=[Shelf(title="Search Results")])))

        result = runner.invoke(app, ["search", "nothing"])

        assert result.exit_code == 0
        assert "No Results Found" in result.output

    def test_quick_search(self, patch_plugin) -> None:
        plugin = _fake_plugin(quick_search=AsyncMock(return_value=[]))
        patch_plugin(plugin)

        result = runner.invoke(app, ["quick-search", "mov"])

        assert result.exit_code == 0
        plugin.quick_search.assert_awaited_once_with("mov")

    def test_track(self, patch_plugin) -> None:
        plugin = _fake_plugin(load_track=AsyncMock(
            return_value=Track(id="8001", title="Queen of Tears", description="Chaebol drama.")
        ))
        patch_plugin(plugin)

        result = runner.invoke(app, ["track", "8001"])

        assert result.exit_code == 0
        assert "Queen of Tears" in result.output
        assert plugin.load_track.await_args.args[0].id == "8001"


# ---------------------------------------------------------------------------
# Resolve command
# ---------------------------------------------------------------------------


class TestResolveCommand:
    def test_prints_sources(self, patch_plugin) -> None:
        media = StreamableMedia(sources=[
            PlayableSource(url="https://c.test/a.m3u8", source_type=SourceType.HLS, resolution="1280x720"),
        ])
        plugin = _fake_plugin(load_streamable_media=AsyncMock(return_value=media))
        created = patch_plugin(plugin)

        result = runner.invoke(app, ["resolve", "170001"])

        assert result.exit_code == 0
        assert "Playable Sources" in result.output
        assert "720p" in result.output
        assert created["overrides"] == {}
        plugin.load_streamable_media.assert_awaited_once_with("170001")

    def test_flags_become_overrides(self, patch_plugin) -> None:
        media = StreamableMedia(sources=[
            PlayableSource(url="https://c.test/a.mp4", headers={"Origin": "https://k.test"}),
        ])
        created = patch_plugin(_fake_plugin(load_streamable_media=AsyncMock(return_value=media)))

        result = runner.invoke(app, ["resolve", "170001", "--strict", "--headers"])

        assert result.exit_code == 0
        assert created["overrides"] == {"strict_manifest": True, "send_playback_headers": True}
        assert "Origin" in result.output

    def test_no_headers_flag(self, patch_plugin) -> None:
        media = StreamableMedia(sources=[PlayableSource(url="https://c.test/a.mp4")])
        created = patch_plugin(_fake_plugin(load_streamable_media=AsyncMock(return_value=media)))

        runner.invoke(app, ["resolve", "170001", "--no-headers"])

        assert created["overrides"] == {"send_playback_headers": False}

    def test_resolution_failure_exit_code(self, patch_plugin) -> None:
        error = KeyUnavailable("Key request failed for episode 170001: HTTP 503", episode_id="170001")
        patch_plugin(_fake_plugin(load_streamable_media=AsyncMock(side_effect=error)))

        result = runner.invoke(app, ["resolve", "170001"])

        assert result.exit_code == 1
        assert "Playback Error" in result.output


# ---------------------------------------------------------------------------
# Plugin construction
# ---------------------------------------------------------------------------


class TestCreatePlugin:
    def test_overrides_win_over_settings(self) -> None:
        settings = AppSettings(source=SourceConfig(config={"strict_manifest": False, "page_size": 7}))

        plugin = create_plugin(CLIState(settings=settings), strict_manifest=True)

        assert plugin.plugin_config.strict_manifest is True
        assert plugin.plugin_config.page_size == 7

    def test_settings_not_mutated(self) -> None:
        settings = AppSettings(source=SourceConfig(config={"page_size": 7}))

        create_plugin(CLIState(settings=settings), page_size=9)

        assert settings.source.config == {"page_size": 7}

    def test_get_state_requires_callback(self) -> None:
        ctx = MagicMock()
        ctx.obj = None

        with pytest.raises(RuntimeError):
            context_module.get_state(ctx)
