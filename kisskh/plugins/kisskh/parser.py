"""
KissKH Data Parser

This module maps KissKH API responses onto the plugin's models.
"""

import logging
from typing import Any, Dict, List, Optional

from kisskh.core.models import EpisodeRef, Track


logger = logging.getLogger(__name__)


# Keys that may carry the video locator in an episode response, by priority.
VIDEO_LOCATOR_KEYS = ("Video", "videoUrl", "url")


def _as_text(value: Any) -> Optional[str]:
    """Render a JSON scalar as a stripped string, or None when absent/blank."""
    if value is None or isinstance(value, (dict, list)):
        return None
    text = str(value).strip()
    return text or None


class KissKHParser:
    """Parser for KissKH API responses."""

    def parse_track(self, item: Any) -> Optional[Track]:
        """
        Parse one listing item.

        Returns:
            Track, or None when the item lacks an id or title
        """
        if not isinstance(item, dict):
            return None

        drama_id = _as_text(item.get("id"))
        title = _as_text(item.get("title"))
        if not drama_id or not title:
            return None

        return Track(
            id=drama_id,
            title=title,
            thumbnail=_as_text(item.get("thumbnail")),
        )

    def parse_tracks(self, items: Any) -> List[Track]:
        """Parse a list of listing items, skipping unusable entries."""
        if not isinstance(items, list):
            logger.warning(f"Expected list of items, got {type(items).__name__}")
            return []

        tracks = []
        for item in items:
            track = self.parse_track(item)
            if track is None:
                logger.debug(f"Skipping listing item without id/title: {item!r}")
                continue
            tracks.append(track)

        return tracks

    def parse_catalog_page(self, data: Any) -> List[Track]:
        """Parse a catalog page; entries live under ``data``."""
        if not isinstance(data, dict):
            logger.warning("Unexpected catalog response format")
            return []
        return self.parse_tracks(data.get("data") or [])

    def parse_search_results(self, data: Any) -> List[Track]:
        """Parse search results; the response is a bare array."""
        return self.parse_tracks(data)

    def parse_track_details(self, data: Any, track: Track) -> Track:
        """
        Merge drama details into an existing track.

        Args:
            data: Drama details response
            track: Track being loaded

        Returns:
            Updated copy of the track; the original when data is unusable
        """
        if not isinstance(data, dict):
            return track

        update: Dict[str, Any] = {}

        title = _as_text(data.get("title"))
        if title:
            update["title"] = title

        thumbnail = _as_text(data.get("thumbnail"))
        if thumbnail:
            update["thumbnail"] = thumbnail

        description = _as_text(data.get("description"))
        if description:
            update["description"] = description

        episodes = self.parse_episodes(data.get("episodes"))
        if episodes:
            update["episodes"] = episodes

        return track.model_copy(update=update)

    def parse_episodes(self, items: Any) -> List[EpisodeRef]:
        """Parse the episode list of a drama, ordered by episode number."""
        if not isinstance(items, list):
            return []

        episodes = []
        for item in items:
            if not isinstance(item, dict):
                continue

            episode_id = _as_text(item.get("id"))
            if not episode_id:
                continue

            number = item.get("number")
            try:
                number = float(number) if number is not None else None
            except (TypeError, ValueError):
                number = None

            episodes.append(EpisodeRef(id=episode_id, number=number))

        episodes.sort(key=lambda e: (e.number is None, e.number or 0))
        return episodes

    def extract_video_locator(self, data: Any) -> Optional[str]:
        """
        Find the video locator in an episode response.

        Returns:
            The first non-blank value among VIDEO_LOCATOR_KEYS, or None
        """
        if not isinstance(data, dict):
            return None

        for key in VIDEO_LOCATOR_KEYS:
            locator = _as_text(data.get(key))
            if locator:
                return locator

        return None


__all__ = ["KissKHParser", "VIDEO_LOCATOR_KEYS"]
