"""
api router

Groups every endpoint so app.py only has to include one router:
- /api/exhibitions: registry listing with category fallback
- /api/search: pop-up store search bundle
- /api/culture: feed events merged with pop-ups
- /: gallery page
"""

from fastapi import APIRouter

from .culture import router as culture_router
from .exhibitions import router as exhibitions_router
from .gallery import router as gallery_router
from .search import router as search_router

api_router = APIRouter()

api_router.include_router(exhibitions_router, tags=["exhibitions"])
api_router.include_router(search_router, tags=["search"])
api_router.include_router(culture_router, tags=["culture"])
api_router.include_router(gallery_router, tags=["gallery"])

__all__ = ["api_router"]
