"""FastAPI application factory."""

from typing import Optional

import httpx
import structlog
from fastapi import FastAPI

from . import __version__
from .api import api_router
from .config.settings import Settings, log_settings_problems
from .merger import CultureEventMerger
from .search import SearchAggregator
from .sources import KakaoSearchClient, KopisClient, NaverSearchClient, SeoulCultureClient
from .template_engine import TemplateEngine

logger = structlog.get_logger()


class Services:
    """Adapters wired from one Settings instance."""

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        templates: Optional[TemplateEngine] = None,
    ):
        timeout = settings.http_timeout
        self.settings = settings
        self.registry = KopisClient(
            settings.kopis_api_key, timeout=timeout, transport=transport
        )
        naver = NaverSearchClient(
            settings.naver_client_id,
            settings.naver_client_secret,
            timeout=timeout,
            transport=transport,
        )
        kakao = KakaoSearchClient(
            settings.kakao_rest_api_key, timeout=timeout, transport=transport
        )
        seoul = SeoulCultureClient(
            settings.seoul_api_key, timeout=timeout, transport=transport
        )
        self.search = SearchAggregator(naver, kakao)
        self.merger = CultureEventMerger(seoul, self.search)
        self.templates = templates or TemplateEngine()


def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Settings to use, loaded from the environment if omitted
        transport: Optional httpx transport shared by every adapter

    Returns:
        Configured FastAPI app
    """
    settings = settings or Settings.from_env()
    problems = log_settings_problems(settings)

    app = FastAPI(title="Curation Life Culture API", version=__version__)
    app.state.services = Services(settings, transport=transport)
    app.include_router(api_router)

    logger.info("app_created", version=__version__, settings_problems=len(problems))
    return app
