class RestAssertException(Exception):
    """Base exception class."""

    pass


class ParseError(RestAssertException):
    """The response body is not well-formed for its content format."""

    pass


class ExtractionError(RestAssertException):
    """A value could not be extracted from an HTTP response."""

    pass


class DeserializationError(RestAssertException):
    """A response body does not match the requested target type."""

    def __init__(self, message: str, target: object | None = None):
        self.target = target
        super().__init__(message)
