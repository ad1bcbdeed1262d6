"""
Upstream source adapters.

Each adapter:
- Takes its credentials at construction
- Raises on upstream failure, leaving degradation to the caller
"""

from .common import ProviderNotConfiguredError, popup_query
from .kakao import KakaoSearchClient
from .kopis import (
    CategorySkipped,
    KopisClient,
    KopisResponseError,
    NoPerformanceDataError,
    parse_performance_xml,
    to_exhibition_card,
)
from .naver import NaverSearchClient
from .seoul import SeoulCultureClient

__all__ = [
    "CategorySkipped",
    "KakaoSearchClient",
    "KopisClient",
    "KopisResponseError",
    "NaverSearchClient",
    "NoPerformanceDataError",
    "ProviderNotConfiguredError",
    "SeoulCultureClient",
    "parse_performance_xml",
    "popup_query",
    "to_exhibition_card",
]
