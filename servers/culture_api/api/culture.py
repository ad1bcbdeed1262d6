"""Merged culture listing endpoint (feed events plus pop-ups)."""

from typing import Optional

import structlog
from fastapi import APIRouter, Query, Request

logger = structlog.get_logger()

router = APIRouter()


@router.get("/api/culture")
async def culture_listing(
    request: Request,
    type: Optional[str] = Query(default=None),
    query: Optional[str] = Query(default=None),
    start_date: Optional[str] = Query(default=None),
    end_date: Optional[str] = Query(default=None),
):
    listing = await request.app.state.services.merger.search_all(
        type=type, query=query, start_date=start_date, end_date=end_date
    )
    return listing.model_dump(by_alias=True)
