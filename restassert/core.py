import logging
import sys
from functools import cache

import structlog
from werkzeug.local import LocalProxy

from restassert.settings import Settings

log = structlog.get_logger(__name__)


@cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = LocalProxy(get_settings)


def configure_logging(level: int = logging.INFO) -> None:
    """Route structlog events through the standard library logging."""
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def init_restassert() -> None:
    """Initialize restassert logging."""
    settings = get_settings()
    if settings.debug:
        configure_logging(level=logging.DEBUG)
    else:
        configure_logging(level=logging.INFO)
    log.debug(
        "Configured restassert",
        request_log_level=settings.request_log_level.value,
        response_log_level=settings.response_log_level.value,
    )
