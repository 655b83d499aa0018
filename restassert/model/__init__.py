from restassert.model.options import (
    ContentFormat,
    DeserializeAs,
    ExtractAs,
    RequestLogLevel,
    ResponseLogLevel,
)

__all__ = [
    "ContentFormat",
    "DeserializeAs",
    "ExtractAs",
    "RequestLogLevel",
    "ResponseLogLevel",
]
