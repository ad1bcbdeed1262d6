"""
Runtime settings loaded from the environment.

Credentials are read once at startup and passed into each adapter.
Only the KOPIS key is required (and only by the exhibitions endpoint);
the other providers degrade to empty results when unconfigured.
"""

import os
from typing import Any, Mapping, Optional

import structlog
from pydantic import BaseModel, ConfigDict

log = structlog.get_logger(__name__)

DEFAULT_HTTP_TIMEOUT = 30.0


class ConfigurationError(Exception):
    """Raised when a required credential is missing."""

    def __init__(self, setting: str):
        super().__init__(f"{setting} is not configured")
        self.setting = setting


class Settings(BaseModel):
    """Credentials and tunables for the upstream adapters."""

    model_config = ConfigDict(frozen=True)

    kopis_api_key: Optional[str] = None
    seoul_api_key: Optional[str] = None
    naver_client_id: Optional[str] = None
    naver_client_secret: Optional[str] = None
    kakao_rest_api_key: Optional[str] = None
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    log_level: str = "INFO"
    # Raw HTTP_TIMEOUT value rejected by from_env; the default timeout is kept
    invalid_http_timeout: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Empty values count as unset. A non-numeric or non-positive
        HTTP_TIMEOUT is kept aside for validate_settings to report.
        """
        env = os.environ if environ is None else environ

        def _get(name: str) -> Optional[str]:
            value = env.get(name, "").strip()
            return value or None

        values: dict[str, Any] = {
            "kopis_api_key": _get("KOPIS_API_KEY"),
            "seoul_api_key": _get("SEOUL_API_KEY"),
            "naver_client_id": _get("NAVER_CLIENT_ID"),
            "naver_client_secret": _get("NAVER_CLIENT_SECRET"),
            "kakao_rest_api_key": _get("KAKAO_REST_API_KEY"),
        }

        timeout = _get("HTTP_TIMEOUT")
        if timeout:
            try:
                seconds = float(timeout)
            except ValueError:
                seconds = 0.0
            if seconds > 0:
                values["http_timeout"] = seconds
            else:
                values["invalid_http_timeout"] = timeout

        level = _get("LOG_LEVEL")
        if level:
            values["log_level"] = level.upper()

        return cls(**values)

    @property
    def naver_configured(self) -> bool:
        return bool(self.naver_client_id and self.naver_client_secret)

    @property
    def kakao_configured(self) -> bool:
        return bool(self.kakao_rest_api_key)


def validate_settings(settings: Settings) -> list[str]:
    """
    Validate settings and return list of problems.

    Returns:
        List of messages (empty if everything is configured)
    """
    problems: list[str] = []

    if not settings.kopis_api_key:
        problems.append("KOPIS_API_KEY is not configured; /api/exhibitions will fail")
    if not settings.seoul_api_key:
        problems.append("SEOUL_API_KEY is not configured; culture feed will be empty")
    if not settings.naver_configured:
        problems.append("NAVER_CLIENT_ID/NAVER_CLIENT_SECRET are not configured")
    if not settings.kakao_configured:
        problems.append("KAKAO_REST_API_KEY is not configured")
    if settings.invalid_http_timeout is not None:
        problems.append(f"Invalid HTTP_TIMEOUT: {settings.invalid_http_timeout} (must be > 0)")
    elif settings.http_timeout <= 0:
        problems.append(f"Invalid HTTP_TIMEOUT: {settings.http_timeout} (must be > 0)")

    return problems


def log_settings_problems(settings: Settings) -> list[str]:
    """Log each settings problem once, at startup."""
    problems = validate_settings(settings)
    for problem in problems:
        log.warning("settings_problem", problem=problem)
    return problems
