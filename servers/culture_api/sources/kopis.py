"""
KOPIS performance registry integration.

The registry serves XML listings per genre category. Categories are
tried in a fixed order and the first one with matching records wins,
so at most one category's results are ever returned.
"""

import xml.etree.ElementTree as ET
from functools import partial
from typing import Optional

import httpx
import structlog

from ..config.settings import DEFAULT_HTTP_TIMEOUT, ConfigurationError
from ..dates import compact_date
from ..filters import filter_performances
from ..models import DateWindow, ExhibitionCard, PerformanceRecord
from ..resilience import FallbackChain

logger = structlog.get_logger()

KOPIS_BASE = "http://kopis.or.kr/openApi/restful/pblprfr"
PAGE_ROWS = 100

# B000: 미술, AAAA: 연극, BBBA: 무용, CCCA: 음악, EEEA: 복합
DEFAULT_CATEGORIES = ("B000", "AAAA", "BBBA", "CCCA", "EEEA")

PLACEHOLDER_POSTER = "/static/placeholder.jpg"


class KopisResponseError(Exception):
    """Raised when a registry body is not a performance listing."""


class CategorySkipped(Exception):
    """Raised when a category yields nothing usable and the next should be tried."""

    def __init__(self, category: str, reason: str):
        super().__init__(f"category {category}: {reason}")
        self.category = category
        self.reason = reason


class NoPerformanceDataError(Exception):
    """Raised when every category was tried without finding records."""

    def __init__(self, categories: tuple[str, ...]):
        super().__init__("No data available from KOPIS API")
        self.categories = categories


def parse_performance_xml(body: str | bytes) -> list[PerformanceRecord]:
    """
    Parse a registry listing into records.

    An empty ``<dbs/>`` root is the registry's "no records" marker and
    parses to an empty list.

    Raises:
        KopisResponseError: If the body is malformed or not a listing
    """
    try:
        root = ET.fromstring(body)
    except ET.ParseError as e:
        raise KopisResponseError(f"malformed XML: {e}") from e

    if root.tag != "dbs":
        raise KopisResponseError(f"unexpected root element <{root.tag}>")

    records = []
    for db in root.findall("db"):
        fields = {child.tag: (child.text or "").strip() for child in db}
        records.append(PerformanceRecord.model_validate(fields))

    return records


def to_exhibition_card(record: PerformanceRecord) -> ExhibitionCard:
    """Project a registry record onto a gallery card."""
    return ExhibitionCard(
        id=record.id or f"{record.title}-{record.start_date}",
        title=record.title or "제목 없음",
        place=record.venue or "장소 미정",
        start_date=compact_date(record.start_date),
        end_date=compact_date(record.end_date),
        thumbnail=record.poster or PLACEHOLDER_POSTER,
        type="전시",
        description=f"{record.genre or '전시'} {record.status}".strip(),
        fee="무료",
        category=record.genre or "전시",
    )


class KopisClient:
    """Registry client with sequential category fallback."""

    def __init__(
        self,
        api_key: Optional[str],
        categories: tuple[str, ...] = DEFAULT_CATEGORIES,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            api_key: KOPIS service key
            categories: Category codes, in the order they are tried
            timeout: HTTP timeout in seconds
            transport: Optional httpx transport (tests pass a mock)
        """
        self.api_key = api_key
        self.categories = tuple(categories)
        self.timeout = timeout
        self.transport = transport

    async def fetch_performances(
        self,
        window: DateWindow,
        region: Optional[str] = None,
        status: Optional[str] = None,
    ) -> list[PerformanceRecord]:
        """
        Fetch records from the first category that has matching data.

        Args:
            window: Registry date window
            region: Area substring filter
            status: Performance state filter

        Returns:
            Non-empty list of filtered records from a single category

        Raises:
            ConfigurationError: If the API key is missing
            NoPerformanceDataError: If no category yields records
        """
        if not self.api_key:
            raise ConfigurationError("KOPIS_API_KEY")

        logger.info(
            "registry_fetch_started",
            start=window.start,
            end=window.end,
            region=region,
            status=status,
        )

        chain = FallbackChain(
            *(partial(self.fetch_category, category) for category in self.categories),
            fallback_on=(CategorySkipped,),
        )

        try:
            return await chain.execute(window, region=region, status=status)
        except CategorySkipped as e:
            logger.info("registry_no_data", categories=list(self.categories))
            raise NoPerformanceDataError(self.categories) from e

    async def fetch_category(
        self,
        category: str,
        window: DateWindow,
        region: Optional[str] = None,
        status: Optional[str] = None,
    ) -> list[PerformanceRecord]:
        """
        Fetch and filter one category's listing.

        Raises:
            CategorySkipped: On HTTP or parse failure, the empty marker,
                or when no record survives filtering
        """
        params = {
            "service": self.api_key,
            "stdate": window.start,
            "eddate": window.end,
            "rows": PAGE_ROWS,
            "cpage": 1,
            "shcate": category,
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.get(
                    KOPIS_BASE,
                    params=params,
                    headers={"Accept": "application/xml"},
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise CategorySkipped(category, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise CategorySkipped(category, f"transport error: {e}") from e

        try:
            records = parse_performance_xml(response.content)
        except KopisResponseError as e:
            raise CategorySkipped(category, str(e)) from e

        if not records:
            raise CategorySkipped(category, "no records")

        filtered = filter_performances(records, region=region, status=status)
        if not filtered:
            raise CategorySkipped(category, f"no records match ({len(records)} before filtering)")

        logger.info(
            "registry_category_found",
            category=category,
            count=len(filtered),
            unfiltered=len(records),
        )
        return filtered
