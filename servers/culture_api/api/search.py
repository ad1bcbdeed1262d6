"""Pop-up store search endpoint."""

from typing import Optional

import structlog
from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse

logger = structlog.get_logger()

router = APIRouter()


@router.get("/api/search")
async def search_popups(request: Request, query: Optional[str] = Query(default=None)):
    if not query:
        return JSONResponse({"error": "Query parameter is required"}, status_code=400)

    try:
        bundle = await request.app.state.services.search.search(query)
    except Exception:
        logger.exception("search_failed", query=query)
        return JSONResponse({"error": "Internal server error"}, status_code=500)

    return bundle.model_dump(by_alias=True)
