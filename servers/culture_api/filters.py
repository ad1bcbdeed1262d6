"""Region and status filtering for registry records."""

from typing import Iterable, Optional

from .models import PerformanceRecord


def matches(
    record: PerformanceRecord,
    region: Optional[str] = None,
    status: Optional[str] = None,
) -> bool:
    """Check one record against the region substring and status predicates."""
    region_match = not region or region in record.area
    status_match = not status or record.status == status
    return region_match and status_match


def filter_performances(
    records: Iterable[PerformanceRecord],
    region: Optional[str] = None,
    status: Optional[str] = None,
) -> list[PerformanceRecord]:
    """
    Filter registry records, keeping their original order.

    Args:
        records: Parsed registry records
        region: Literal substring the record's area must contain
        status: Exact performance state (공연예정 / 공연중 / 공연완료)

    Returns:
        Records matching every given predicate
    """
    return [r for r in records if matches(r, region, status)]
