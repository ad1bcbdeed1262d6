"""Server-rendered gallery page with one tab per event type."""

from typing import Any, Optional

import structlog
from fastapi import APIRouter, Query, Request
from fastapi.responses import HTMLResponse

from ..config.settings import ConfigurationError
from ..dates import resolve_date_window
from ..models import CULTURE_EVENT_TYPES, PERFORMANCE_STATUSES, REGIONS
from ..sources import NoPerformanceDataError, to_exhibition_card

logger = structlog.get_logger()

router = APIRouter()

SITE_NAME = "Curation Life"
REGISTRY_TAB = "registry"
TABS = [(REGISTRY_TAB, "공연·전시")] + [
    (code, CULTURE_EVENT_TYPES[code]) for code in ("EXHIBITION", "PERFORMANCE", "POPUP")
]
EMPTY_MESSAGES = {
    REGISTRY_TAB: "조건에 맞는 공연이 없습니다.",
    "EXHIBITION": "표시할 전시가 없습니다.",
    "PERFORMANCE": "표시할 공연이 없습니다.",
    "POPUP": "검색 결과가 없습니다.",
}


async def _registry_context(request: Request, filters: dict[str, Any]) -> dict[str, Any]:
    registry = request.app.state.services.registry
    window = resolve_date_window(filters["startDate"], filters["endDate"])
    try:
        records = await registry.fetch_performances(
            window, region=filters["region"], status=filters["status"]
        )
    except NoPerformanceDataError:
        return {"cards": [], "empty": True}
    except ConfigurationError:
        return {"cards": [], "error": "API key is not configured"}
    except Exception:
        logger.exception("gallery_registry_failed")
        return {"cards": [], "error": "데이터를 불러오는데 실패했습니다."}

    return {"cards": [to_exhibition_card(r) for r in records]}


async def _listing_context(request: Request, tab: str, query: Optional[str]) -> dict[str, Any]:
    listing = await request.app.state.services.merger.search_all(type=tab, query=query)

    if tab == "POPUP":
        return {"popups": listing.popup_stores, "empty": listing.popup_stores.total == 0}

    events = listing.exhibitions if tab == "EXHIBITION" else listing.performances
    return {"events": events, "empty": not events}


@router.get("/", response_class=HTMLResponse)
async def gallery(
    request: Request,
    tab: str = Query(default=REGISTRY_TAB),
    start_date: Optional[str] = Query(default=None, alias="startDate"),
    end_date: Optional[str] = Query(default=None, alias="endDate"),
    region: Optional[str] = Query(default=None),
    status: Optional[str] = Query(default=None),
    query: Optional[str] = Query(default=None),
):
    if tab not in dict(TABS):
        tab = REGISTRY_TAB

    filters = {
        "startDate": start_date,
        "endDate": end_date,
        "region": region,
        "status": status,
        "query": query,
    }

    if tab == REGISTRY_TAB:
        section = await _registry_context(request, filters)
    else:
        section = await _listing_context(request, tab, query)

    context = {
        "site_name": SITE_NAME,
        "tab": tab,
        "tabs": TABS,
        "filters": filters,
        "regions": REGIONS,
        "statuses": PERFORMANCE_STATUSES,
        "error": None,
        "empty": False,
        "empty_message": EMPTY_MESSAGES[tab],
        **section,
    }

    html = request.app.state.services.templates.render("gallery.html", context)
    return HTMLResponse(html)
