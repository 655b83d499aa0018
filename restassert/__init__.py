import logging

from restassert.exc import (
    DeserializationError,
    ExtractionError,
    ParseError,
    RestAssertException,
)
from restassert.logic.http import ExtractableResponse, execute
from restassert.model import (
    ContentFormat,
    DeserializeAs,
    ExtractAs,
    RequestLogLevel,
    ResponseLogLevel,
)

# Silence noisy third-party loggers
for logger_name in ("httpx", "httpcore"):
    logging.getLogger(logger_name).setLevel(logging.WARNING)

__all__ = [
    "ContentFormat",
    "DeserializationError",
    "DeserializeAs",
    "ExtractAs",
    "ExtractableResponse",
    "ExtractionError",
    "ParseError",
    "RequestLogLevel",
    "ResponseLogLevel",
    "RestAssertException",
    "execute",
]
