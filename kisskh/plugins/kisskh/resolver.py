"""
KissKH Stream Resolver

Turns an episode id into playable sources:

1. obtain a single-use access key for the episode,
2. probe the episode media endpoints in order until one yields a locator,
3. return the locator directly, or expand it when it is an HLS manifest.

Failures before a locator is found are terminal. Failures while fetching or
parsing a manifest degrade to returning the manifest URL itself.
"""

import json
import logging
from typing import List
from urllib.parse import urljoin

from kisskh.core.exceptions import (
    KeyUnavailable,
    ManifestUnavailable,
    NetworkError,
    NoPlayableSource,
)
from kisskh.core.models import PlayableSource, SourceType, is_absolute_url

from .api import KissKHAPI
from .config import KissKHConfig
from .manifest import is_manifest_url, parse_manifest
from .parser import KissKHParser


logger = logging.getLogger(__name__)


PLUGIN_NAME = "kisskh"


class StreamResolver:
    """Resolves KissKH episode ids to playable sources."""

    def __init__(self, api: KissKHAPI, config: KissKHConfig, parser: KissKHParser = None):
        """
        Initialize the resolver.

        Args:
            api: API client used for key, episode and manifest requests
            config: Immutable plugin configuration
            parser: Response parser (a default one is created when omitted)
        """
        self.api = api
        self.config = config
        self.parser = parser or KissKHParser()

    async def resolve(self, episode_id: str) -> List[PlayableSource]:
        """
        Resolve an episode to an ordered, non-empty list of sources.

        Raises:
            KeyUnavailable: If no access key could be obtained
            NoPlayableSource: If no endpoint candidate returned a locator
            ManifestUnavailable: Only with strict_manifest enabled
        """
        if not episode_id or not str(episode_id).strip():
            raise NoPlayableSource(
                "Cannot resolve an empty episode id",
                episode_id=episode_id,
                plugin_name=PLUGIN_NAME
            )
        episode_id = str(episode_id).strip()

        key = await self._acquire_key(episode_id)
        locator = await self._probe_endpoints(episode_id, key)

        if not is_manifest_url(locator):
            logger.info(f"Episode {episode_id} resolved to direct source")
            return [self._source(locator, SourceType.DIRECT)]

        return await self._expand_manifest(episode_id, locator)

    async def _acquire_key(self, episode_id: str) -> str:
        try:
            body = await self.api.fetch_key(episode_id)
        except NetworkError as e:
            raise KeyUnavailable(
                f"Key request failed for episode {episode_id}: {e}",
                episode_id=episode_id,
                plugin_name=PLUGIN_NAME,
                details=e.details
            ) from e

        if not body or not body.strip():
            raise KeyUnavailable(
                f"Key request for episode {episode_id} returned an empty body",
                episode_id=episode_id,
                plugin_name=PLUGIN_NAME
            )

        try:
            payload = json.loads(body)
        except ValueError as e:
            raise KeyUnavailable(
                f"Key response for episode {episode_id} is not valid JSON: {e}",
                episode_id=episode_id,
                plugin_name=PLUGIN_NAME,
                details=body[:200]
            ) from e

        key = payload.get("key") if isinstance(payload, dict) else None
        if key is None or not str(key).strip():
            raise KeyUnavailable(
                f"Key response for episode {episode_id} has no 'key' field",
                episode_id=episode_id,
                plugin_name=PLUGIN_NAME,
                details=body[:200]
            )

        logger.debug(f"Acquired access key for episode {episode_id}")
        return str(key).strip()

    async def _probe_endpoints(self, episode_id: str, key: str) -> str:
        candidates = self.api.episode_candidate_urls(episode_id, key)
        failures = []

        for index, url in enumerate(candidates, start=1):
            try:
                data = await self.api.fetch_episode(url)
            except NetworkError as e:
                logger.debug(f"Candidate {index}/{len(candidates)} failed: {e}")
                failures.append(str(e))
                continue

            locator = self.parser.extract_video_locator(data)
            if locator:
                locator = urljoin(f"{self.config.base_url}/", locator)
                if is_absolute_url(locator):
                    logger.debug(f"Candidate {index}/{len(candidates)} returned a locator")
                    return locator

                logger.debug(f"Candidate {index}/{len(candidates)} returned an unusable locator: {locator}")
                failures.append(f"locator without host from {url}: {locator}")
                continue

            logger.debug(f"Candidate {index}/{len(candidates)} has no video field: {url}")
            failures.append(f"no video field in response from {url}")

        raise NoPlayableSource(
            f"No playable source for episode {episode_id}: "
            f"all {len(candidates)} media endpoints failed",
            episode_id=episode_id,
            plugin_name=PLUGIN_NAME,
            details=failures
        )

    async def _expand_manifest(self, episode_id: str, manifest_url: str) -> List[PlayableSource]:
        fallback = [self._source(manifest_url, SourceType.HLS)]

        try:
            try:
                content = await self.api.fetch_manifest(manifest_url)
            except NetworkError as e:
                raise ManifestUnavailable(
                    f"Manifest fetch failed for episode {episode_id}: {e}",
                    episode_id=episode_id,
                    plugin_name=PLUGIN_NAME,
                    details=e.details
                ) from e

            if not content or not content.strip():
                raise ManifestUnavailable(
                    f"Manifest for episode {episode_id} is empty",
                    episode_id=episode_id,
                    plugin_name=PLUGIN_NAME
                )

            variants = parse_manifest(content, manifest_url)

        except ManifestUnavailable:
            if self.config.strict_manifest:
                raise
            logger.warning(f"Manifest unavailable for episode {episode_id}, using manifest URL")
            return fallback
        except Exception as e:
            if self.config.strict_manifest:
                raise ManifestUnavailable(
                    f"Manifest for episode {episode_id} could not be parsed: {e}",
                    episode_id=episode_id,
                    plugin_name=PLUGIN_NAME
                ) from e
            logger.warning(f"Manifest parsing failed for episode {episode_id}: {e}")
            return fallback

        sources = []
        for variant in variants:
            if not is_absolute_url(variant.url):
                logger.debug(f"Skipping variant without host: {variant.url}")
                continue
            sources.append(self._source(
                variant.url,
                SourceType.HLS,
                bandwidth=variant.bandwidth,
                resolution=variant.resolution
            ))

        if not sources:
            logger.info(f"Manifest for episode {episode_id} lists no usable variants, using manifest URL")
            return fallback

        logger.info(f"Episode {episode_id} resolved to {len(sources)} HLS variants")
        return sources

    def _source(self, url: str, source_type: SourceType, **kwargs) -> PlayableSource:
        return PlayableSource(
            url=url,
            headers=self.config.playback_headers,
            source_type=source_type,
            **kwargs
        )


__all__ = ["StreamResolver"]
