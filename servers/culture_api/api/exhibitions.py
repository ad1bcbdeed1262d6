"""Registry exhibition listing endpoint."""

from typing import Optional

import structlog
from fastapi import APIRouter, Query, Request, Response
from fastapi.responses import JSONResponse

from ..config.settings import ConfigurationError
from ..dates import resolve_date_window
from ..sources import NoPerformanceDataError

logger = structlog.get_logger()

router = APIRouter()

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


@router.get("/api/exhibitions")
async def list_exhibitions(
    request: Request,
    start_date: Optional[str] = Query(default=None, alias="startDate"),
    end_date: Optional[str] = Query(default=None, alias="endDate"),
    region: Optional[str] = Query(default=None),
    status: Optional[str] = Query(default=None),
):
    registry = request.app.state.services.registry

    try:
        window = resolve_date_window(start_date, end_date)
        logger.info("exhibitions_requested", start=window.start, end=window.end)
        records = await registry.fetch_performances(window, region=region, status=status)
    except ConfigurationError as e:
        logger.error("exhibitions_not_configured", setting=e.setting)
        return JSONResponse(
            {"error": "API key is not configured"}, status_code=500, headers=CORS_HEADERS
        )
    except NoPerformanceDataError:
        return JSONResponse(
            {"error": "No data available from KOPIS API"}, status_code=404, headers=CORS_HEADERS
        )
    except Exception:
        logger.exception("exhibitions_failed")
        return JSONResponse(
            {"error": "Internal server error"}, status_code=500, headers=CORS_HEADERS
        )

    return JSONResponse(
        {
            "data": [r.model_dump(by_alias=True) for r in records],
            "filters": {
                "dateRange": {"start": window.start, "end": window.end},
                "appliedRegion": region,
                "appliedStatus": status,
            },
        },
        headers=CORS_HEADERS,
    )


@router.options("/api/exhibitions")
async def exhibitions_preflight() -> Response:
    return Response(status_code=204, headers=CORS_HEADERS)
