"""
Naver Open API search integration.

Free tier: 25,000 calls/day per application

Blog and image verticals, both queried with the pop-up store suffix.
Errors are raised to the caller; the search aggregator decides how a
failed vertical degrades.
"""

from typing import Any, Optional

import httpx
import structlog

from ..config.settings import DEFAULT_HTTP_TIMEOUT
from .common import POPUP_QUERY_SUFFIX, ProviderNotConfiguredError, popup_query

logger = structlog.get_logger()

NAVER_BASE = "https://openapi.naver.com/v1/search"
RESULT_COUNT = 20


class NaverSearchClient:
    """Client for Naver blog and image search."""

    def __init__(
        self,
        client_id: Optional[str],
        client_secret: Optional[str],
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        suffix: str = POPUP_QUERY_SUFFIX,
    ):
        self.client_id = client_id
        self.client_secret = client_secret
        self.timeout = timeout
        self.transport = transport
        self.suffix = suffix

    async def search_blogs(self, query: str) -> list[dict[str, Any]]:
        """Search blog posts, newest first."""
        return await self._search(
            "blog",
            {"query": popup_query(query, self.suffix), "display": RESULT_COUNT, "sort": "date"},
        )

    async def search_images(self, query: str) -> list[dict[str, Any]]:
        """Search large images, newest first."""
        return await self._search(
            "image",
            {
                "query": popup_query(query, self.suffix),
                "display": RESULT_COUNT,
                "sort": "date",
                "filter": "large",
            },
        )

    async def _search(self, vertical: str, params: dict[str, Any]) -> list[dict[str, Any]]:
        if not (self.client_id and self.client_secret):
            raise ProviderNotConfiguredError("naver")

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.get(
                f"{NAVER_BASE}/{vertical}",
                params=params,
                headers={
                    "X-Naver-Client-Id": self.client_id,
                    "X-Naver-Client-Secret": self.client_secret,
                },
            )
            response.raise_for_status()
            data = response.json()

        items = data.get("items", [])
        logger.debug("naver_search_done", vertical=vertical, count=len(items))
        return items
