"""
Seoul open-data culture feed (culturalEventInfo).

Returns the first page of up to 100 events. Errors are raised; the
merger treats a failed feed as empty.
"""

from typing import Optional

import httpx
import structlog

from ..config.settings import DEFAULT_HTTP_TIMEOUT
from ..models import CultureEvent
from .common import ProviderNotConfiguredError

logger = structlog.get_logger()

SEOUL_BASE = "http://openapi.seoul.go.kr:8088"
SERVICE_NAME = "culturalEventInfo"
PAGE_START = 1
PAGE_END = 100


class SeoulCultureClient:
    """Client for the Seoul municipal culture event feed."""

    def __init__(
        self,
        api_key: Optional[str],
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.timeout = timeout
        self.transport = transport

    @property
    def url(self) -> str:
        return f"{SEOUL_BASE}/{self.api_key}/json/{SERVICE_NAME}/{PAGE_START}/{PAGE_END}"

    async def fetch_events(
        self,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        type: Optional[str] = None,
    ) -> list[CultureEvent]:
        """
        Fetch culture events from the feed.

        Args:
            start_date: Optional start date filter
            end_date: Optional end date filter
            type: Optional event type filter

        Returns:
            Parsed events, in feed order
        """
        if not self.api_key:
            raise ProviderNotConfiguredError("seoul")

        params = {
            key: value
            for key, value in (
                ("start_date", start_date),
                ("end_date", end_date),
                ("type", type),
            )
            if value
        }

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.get(self.url, params=params)
            response.raise_for_status()
            data = response.json()

        rows = data.get(SERVICE_NAME, {}).get("row", [])
        events = [CultureEvent.model_validate(row) for row in rows]
        logger.info("seoul_feed_fetched", count=len(events))
        return events
