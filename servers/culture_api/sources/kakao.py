"""
Kakao Daum search and Kakao Local integration.

Blog search plus keyword place search restricted to cultural
facilities (category group CT1).
"""

from typing import Any, Optional

import httpx
import structlog

from ..config.settings import DEFAULT_HTTP_TIMEOUT
from .common import POPUP_QUERY_SUFFIX, ProviderNotConfiguredError, popup_query

logger = structlog.get_logger()

KAKAO_BLOG_URL = "https://dapi.kakao.com/v2/search/blog"
KAKAO_PLACE_URL = "https://dapi.kakao.com/v2/local/search/keyword"
CULTURE_FACILITY_GROUP = "CT1"


class KakaoSearchClient:
    """Client for Kakao blog and place search."""

    def __init__(
        self,
        rest_api_key: Optional[str],
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        suffix: str = POPUP_QUERY_SUFFIX,
    ):
        self.rest_api_key = rest_api_key
        self.timeout = timeout
        self.transport = transport
        self.suffix = suffix

    async def search_blogs(self, query: str) -> list[dict[str, Any]]:
        """Search blog posts, most recent first."""
        return await self._search(
            KAKAO_BLOG_URL,
            {"query": popup_query(query, self.suffix), "size": 20, "sort": "recency"},
        )

    async def search_places(self, query: str) -> list[dict[str, Any]]:
        """Search cultural facilities by keyword."""
        return await self._search(
            KAKAO_PLACE_URL,
            {
                "query": popup_query(query, self.suffix),
                "size": 15,
                "category_group_code": CULTURE_FACILITY_GROUP,
            },
        )

    async def _search(self, url: str, params: dict[str, Any]) -> list[dict[str, Any]]:
        if not self.rest_api_key:
            raise ProviderNotConfiguredError("kakao")

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.get(
                url,
                params=params,
                headers={"Authorization": f"KakaoAK {self.rest_api_key}"},
            )
            response.raise_for_status()
            data = response.json()

        documents = data.get("documents", [])
        logger.debug("kakao_search_done", url=url, count=len(documents))
        return documents
