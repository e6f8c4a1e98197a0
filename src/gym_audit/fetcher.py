"""HTTP fetching for the sitemap and gym pages."""

import logging
from typing import Optional

import httpx

from gym_audit.constants import DEFAULT_REQUEST_TIMEOUT_SECONDS, DEFAULT_USER_AGENT
from gym_audit.models import FetchedPage

logger = logging.getLogger(__name__)


class PageFetcher:
    """Fetches pages over one shared httpx.AsyncClient.

    Use as an async context manager so the client is closed after the run:

        async with PageFetcher() as fetcher:
            page = await fetcher.fetch(url)

    No retries: a transport error propagates to the caller and an error
    status is returned as-is for the caller to judge.
    """

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the fetcher.

        Args:
            user_agent: Identifying User-Agent header sent with every request
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests pass httpx.MockTransport)
        """
        self.user_agent = user_agent
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "PageFetcher":
        self._client = httpx.AsyncClient(
            headers={"User-Agent": self.user_agent},
            timeout=self.timeout,
            follow_redirects=True,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def fetch(self, url: str) -> FetchedPage:
        """GET a URL and return its status, body and final URL."""
        if self._client is None:
            raise RuntimeError("PageFetcher must be used inside 'async with'")

        response = await self._client.get(url)
        logger.debug(f"GET {url} -> {response.status_code}")
        return FetchedPage(
            url=url,
            status=response.status_code,
            html=response.text,
            final_url=str(response.url),
        )
