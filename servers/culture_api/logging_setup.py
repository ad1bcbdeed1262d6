"""structlog configuration for the server process."""

import logging

import structlog


def configure_logging(level: str = "INFO") -> str:
    """
    Set the minimum level for every structlog logger.

    Unknown level names fall back to INFO.

    Returns:
        The resolved standard level name (e.g. WARN -> WARNING)
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric),
        cache_logger_on_first_use=True,
    )
    return logging.getLevelName(numeric)
