"""
HLS Manifest Handling

Classification of video locators and parsing of extended-M3U master
playlists into variant sources.
"""

import logging
import re
from typing import List
from urllib.parse import urljoin, urlparse

from kisskh.core.models import ManifestVariant


logger = logging.getLogger(__name__)


STREAM_INF_TAG = "#EXT-X-STREAM-INF"
TAG_PREFIX = "#"

# Substrings that mark a locator as an adaptive manifest.
MANIFEST_MARKERS = (".m3u8", ".m3u", "master.m3u8", "playlist.m3u8", "hls")

_BANDWIDTH_PATTERN = re.compile(r'BANDWIDTH=(\d+)')
_RESOLUTION_PATTERN = re.compile(r'RESOLUTION=(\d+x\d+)')
_SCHEME_PATTERN = re.compile(r'^[A-Za-z][A-Za-z0-9+.\-]*://')


def is_manifest_url(url: str) -> bool:
    """
    Check whether a locator points at an HLS manifest.

    This is a substring heuristic over the lower-cased URL, not a content-type
    probe: a direct file whose path contains "hls" is classified as a manifest.
    """
    if not url:
        return False

    url_lower = url.lower()
    return any(marker in url_lower for marker in MANIFEST_MARKERS)


def resolve_variant_url(variant: str, manifest_url: str) -> str:
    """
    Resolve a variant line against the manifest locator.

    Args:
        variant: URL line from the manifest
        manifest_url: Absolute locator the manifest was fetched from

    Returns:
        Absolute variant URL. Lines with a scheme are returned unchanged, lines
        starting with '/' replace the manifest's path, and relative lines are
        resolved against the manifest locator cut at the last '/' of its path.
    """
    if _SCHEME_PATTERN.match(variant):
        return variant

    parsed = urlparse(manifest_url)

    if variant.startswith("//"):
        return f"{parsed.scheme}:{variant}"

    origin = f"{parsed.scheme}://{parsed.netloc}"
    if variant.startswith("/"):
        return origin + variant

    directory = parsed.path.rsplit("/", 1)[0] if "/" in parsed.path else ""
    return urljoin(origin + directory, variant)


def parse_manifest(content: str, manifest_url: str) -> List[ManifestVariant]:
    """
    Parse a master playlist into variants.

    Every non-empty, non-tag line yields one variant carrying the bandwidth
    and resolution of the stream-info tag seen since the previous variant.
    Missing attributes default to 0 and "".

    Args:
        content: Manifest body
        manifest_url: Locator the manifest was fetched from

    Returns:
        Variants in manifest order; empty when the body has no URL lines
    """
    variants: List[ManifestVariant] = []
    bandwidth = 0
    resolution = ""

    for raw_line in content.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        if line.startswith(STREAM_INF_TAG):
            bandwidth_match = _BANDWIDTH_PATTERN.search(line)
            resolution_match = _RESOLUTION_PATTERN.search(line)
            bandwidth = int(bandwidth_match.group(1)) if bandwidth_match else 0
            resolution = resolution_match.group(1) if resolution_match else ""
            continue

        if line.startswith(TAG_PREFIX):
            continue

        variants.append(ManifestVariant(
            bandwidth=bandwidth,
            resolution=resolution,
            url=resolve_variant_url(line, manifest_url),
        ))
        bandwidth = 0
        resolution = ""

    logger.debug(f"Parsed {len(variants)} variants from {manifest_url}")
    return variants


__all__ = [
    "STREAM_INF_TAG",
    "MANIFEST_MARKERS",
    "is_manifest_url",
    "resolve_variant_url",
    "parse_manifest",
]
