"""Candidate discovery from the gyms sitemap."""

import logging
import re
from typing import Iterable, List, Optional

import httpx

from gym_audit.constants import GYM_URL_PATTERN, NON_GYM_SLUGS
from gym_audit.fetcher import PageFetcher
from gym_audit.text_utils import decode_entities, slug_from_gym_url, unique

logger = logging.getLogger(__name__)

_LOC_PATTERN = re.compile(r'<loc>(.*?)</loc>', re.DOTALL)


class DiscoveryError(Exception):
    """Raised when the sitemap cannot be fetched; fatal for the run."""
    def __init__(self, url: str, status: Optional[int] = None, reason: Optional[str] = None):
        self.url = url
        self.status = status
        self.reason = reason or f"HTTP {status}"
        super().__init__(f"Failed to fetch sitemap {url}: {self.reason}")


def parse_locs(xml_text: str) -> List[str]:
    """Extract every <loc> value, entity-decoded, in document order."""
    return [decode_entities(m.strip()) for m in _LOC_PATTERN.findall(xml_text)]


def filter_candidates(locs: Iterable[str]) -> List[str]:
    """Keep unique /gyms/{slug} URLs whose slug is not a known non-club page."""
    gym_urls = unique(u for u in locs if GYM_URL_PATTERN.match(u))
    return [u for u in gym_urls if slug_from_gym_url(u) not in NON_GYM_SLUGS]


async def discover_candidates(fetcher: PageFetcher, sitemap_url: str) -> List[str]:
    """Fetch the sitemap and return the ordered candidate gym URLs.

    Raises:
        DiscoveryError: If the sitemap request fails or responds with an error status
    """
    logger.info(f"Fetching sitemap: {sitemap_url}")
    try:
        response = await fetcher.fetch(sitemap_url)
    except httpx.HTTPError as e:
        raise DiscoveryError(sitemap_url, reason=str(e) or type(e).__name__) from e
    if response.status >= 400:
        raise DiscoveryError(sitemap_url, response.status)

    locs = parse_locs(response.html)
    candidates = filter_candidates(locs)
    logger.info(f"Extracted {len(locs)} URLs from sitemap, {len(candidates)} candidates")
    return candidates
