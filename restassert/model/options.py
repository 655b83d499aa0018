"""Options selecting how a response is interpreted and logged."""

from enum import Enum


class ContentFormat(str, Enum):
    """Parsing backends available for a response body."""

    JSON = "json"
    XML = "xml"
    HTML = "html"


class ExtractAs(str, Enum):
    """How to pick the format when extracting values from a response body."""

    USE_CONTENT_TYPE = "content-type"
    JSON = "json"
    XML = "xml"
    HTML = "html"


class DeserializeAs(str, Enum):
    """How to pick the format when deserializing a response body."""

    USE_CONTENT_TYPE = "content-type"
    JSON = "json"
    XML = "xml"


class _LogLevel(str, Enum):
    """Ordered verbosity, each member includes the ones declared before it."""

    @property
    def rank(self) -> int:
        return list(type(self)).index(self)

    def __ge__(self, other):
        if isinstance(other, type(self)):
            return self.rank >= other.rank
        return NotImplemented

    def __gt__(self, other):
        if isinstance(other, type(self)):
            return self.rank > other.rank
        return NotImplemented

    def __le__(self, other):
        if isinstance(other, type(self)):
            return self.rank <= other.rank
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, type(self)):
            return self.rank < other.rank
        return NotImplemented


class RequestLogLevel(_LogLevel):
    NONE = "none"
    ENDPOINT = "endpoint"
    HEADERS = "headers"
    BODY = "body"
    ALL = "all"


class ResponseLogLevel(_LogLevel):
    NONE = "none"
    STATUS = "status"
    HEADERS = "headers"
    BODY = "body"
    ALL = "all"
