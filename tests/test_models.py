"""Tests for core data models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from kisskh.core.models import (
    PlayableSource,
    Quality,
    Shelf,
    SourceType,
    StreamableMedia,
    Track,
    is_absolute_url,
)


class TestPlayableSource:
    def test_requires_absolute_url(self) -> None:
        with pytest.raises(ValidationError):
            PlayableSource(url="/media/ep.mp4")

    def test_requires_host(self) -> None:
        with pytest.raises(ValidationError):
            PlayableSource(url="https:///ep.mp4")

    @pytest.mark.parametrize("url", ["urn:variant", "file:///x"])
    def test_rejects_hostless_scheme(self, url: str) -> None:
        assert not is_absolute_url(url)
        with pytest.raises(ValidationError):
            PlayableSource(url=url)

    def test_defaults(self) -> None:
        source = PlayableSource(url="https://cdn.test/ep.mp4")

        assert source.headers == {}
        assert source.source_type == SourceType.DIRECT
        assert source.bandwidth == 0
        assert source.resolution == ""
        assert source.quality is None

    def test_quality_from_resolution(self) -> None:
        source = PlayableSource(url="https://cdn.test/720p.m3u8", source_type=SourceType.HLS, resolution="1280x720")

        assert source.quality == Quality.MEDIUM
        assert source.label == "720p (1280x720)"

    def test_labels_without_resolution(self) -> None:
        assert PlayableSource(url="https://cdn.test/m.m3u8", source_type=SourceType.HLS).label == "Auto (HLS)"
        assert PlayableSource(url="https://cdn.test/ep.mp4").label == "Direct"

    def test_malformed_resolution_has_no_quality(self) -> None:
        assert PlayableSource(url="https://cdn.test/x", resolution="hd").quality is None

    def test_str(self) -> None:
        assert str(PlayableSource(url="https://cdn.test/ep.mp4")) == "Direct: https://cdn.test/ep.mp4"


class TestStreamableMedia:
    def test_rejects_empty_sources(self) -> None:
        with pytest.raises(ValidationError):
            StreamableMedia(sources=[])

    def test_not_merged_by_default(self) -> None:
        media = StreamableMedia(sources=[PlayableSource(url="https://cdn.test/ep.mp4")])

        assert media.merged is False


class TestQuality:
    def test_from_resolution(self) -> None:
        assert Quality.from_resolution(854, 480) == Quality.LOW
        assert Quality.from_resolution(1920, 1080) == Quality.HIGH
        assert Quality.from_resolution(3840, 2160) == Quality.FOUR_K

    def test_height(self) -> None:
        assert Quality.ULTRA.height == 1440


class TestTrackAndShelf:
    def test_title_stripped(self) -> None:
        assert Track(id="1", title="  Moving  ").title == "Moving"

    def test_track_requires_id(self) -> None:
        with pytest.raises(ValidationError):
            Track(id="", title="Moving")

    def test_shelf_len(self) -> None:
        shelf = Shelf(title="Popular Dramas", items=[Track(id="1", title="A"), Track(id="2", title="B")])

        assert len(shelf) == 2
