"""Combine the Seoul culture feed with pop-up search results."""

from typing import Optional

import structlog

from .models import CultureEvent, CultureListing, SearchResultBundle
from .resilience import with_default
from .search import SearchAggregator
from .sources import SeoulCultureClient

logger = structlog.get_logger()

EXHIBITION_LABEL = "전시"
PERFORMANCE_LABEL = "공연"
POPUP_TYPE = "POPUP"


def split_by_type(events: list[CultureEvent]) -> tuple[list[CultureEvent], list[CultureEvent]]:
    """Split feed events into (exhibitions, performances) by category label."""
    exhibitions = [e for e in events if EXHIBITION_LABEL in e.category]
    performances = [e for e in events if PERFORMANCE_LABEL in e.category]
    return exhibitions, performances


class CultureEventMerger:
    """Build the tagged listing consumed by the gallery."""

    def __init__(self, seoul: SeoulCultureClient, search: SearchAggregator):
        self.seoul = seoul
        self.search = search

    async def search_all(
        self,
        type: Optional[str] = None,
        query: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> CultureListing:
        """
        Fetch the feed and, for pop-up searches, the provider bundle.

        Args:
            type: Event type code (PERFORMANCE, EXHIBITION, POPUP, ...)
            query: Free-text pop-up query, used only when type is POPUP
            start_date: Feed start date filter
            end_date: Feed end date filter

        Returns:
            Listing with exhibitions, performances and popup_stores
        """
        events = await with_default(
            self.seoul.fetch_events,
            [],
            start_date=start_date,
            end_date=end_date,
            type=type,
        )
        exhibitions, performances = split_by_type(events)

        popup_stores = SearchResultBundle()
        if type == POPUP_TYPE and query:
            popup_stores = await self.search.search(query)

        logger.info(
            "culture_listing_built",
            type=type,
            exhibitions=len(exhibitions),
            performances=len(performances),
            popups=popup_stores.total,
        )
        return CultureListing(
            exhibitions=exhibitions,
            performances=performances,
            popup_stores=popup_stores,
        )
