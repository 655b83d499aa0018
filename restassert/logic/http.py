"""HTTP responses from which values can be extracted."""

from __future__ import annotations

import warnings
from functools import cached_property
from typing import Any

import httpx
import structlog

from restassert.core import settings as global_settings
from restassert.exc import ExtractionError
from restassert.logic.deserialize import deserialize
from restassert.logic.extract import extract
from restassert.logic.log import log_request, log_response
from restassert.logic.mime import resolve_format
from restassert.model import DeserializeAs, ExtractAs
from restassert.settings import Settings

log = structlog.get_logger(__name__)


class ExtractableResponse:
    """Extract values from a completed ``httpx`` response.

    The body is read from the transport at most once and the decoded text
    is kept on this object, so values can be extracted repeatedly::

        response = execute(httpx.Request("GET", "https://api.example.com/users"))
        response.body("users[*].id")       # [1, 2, 3]
        response.body("users[0].name")     # 'Ann'
        response.header("X-Request-Id")
    """

    def __init__(self, response: httpx.Response) -> None:
        self._response = response

    @property
    def response(self) -> httpx.Response:
        """The underlying ``httpx`` response."""
        return self._response

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self._response.headers

    @property
    def content_type(self) -> str | None:
        """Declared media type without parameters, None if absent."""
        value = self.headers.get("content-type")
        if value is None:
            return None
        media_type = value.split(";", 1)[0].strip().lower()
        return media_type or None

    @cached_property
    def text(self) -> str:
        """Get response content as text."""
        self._response.read()
        return self._response.text

    def body(
        self,
        path: str,
        extract_as: ExtractAs = ExtractAs.USE_CONTENT_TYPE,
    ) -> Any:
        """Extract a value from the response body.

        Args:
            path: JMESPath expression for JSON, XPath for XML and HTML.
            extract_as: Format to parse the body as, defaults to the one
                declared by the Content-Type header.

        Returns:
            The matched value, or a list of values for multiple matches.

        Raises:
            ExtractionError: If the content type is unsupported or the path
                does not match anything.
            ParseError: If the body is not well-formed.
        """
        fmt = resolve_format(extract_as, self.content_type)
        return extract(self.text, fmt, path, content_type=self.content_type)

    def header(self, name: str) -> str:
        """Get the first value of a response header.

        Raises:
            ExtractionError: If the header is not present.
        """
        values = self.headers.get_list(name)
        if not values:
            raise ExtractionError(
                f"Header with name '{name}' could not be found in the response."
            )
        return values[0]

    def deserialize_to(
        self,
        target: Any,
        deserialize_as: DeserializeAs = DeserializeAs.USE_CONTENT_TYPE,
    ) -> Any:
        """Deserialize the response body into ``target``.

        ``target`` is anything pydantic can validate: a model class, a
        dataclass, ``dict``, ``list[int]``...
        """
        fmt = resolve_format(deserialize_as, self.content_type)
        return deserialize(self.text, target, fmt, content_type=self.content_type)

    def as_(
        self,
        target: Any,
        deserialize_as: DeserializeAs = DeserializeAs.USE_CONTENT_TYPE,
    ) -> Any:
        """Deprecated, will be removed in 2.0. Use :meth:`deserialize_to`."""
        warnings.warn(
            "as_() is deprecated, use deserialize_to() instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.deserialize_to(target, deserialize_as)

    def __repr__(self) -> str:
        return "<ExtractableResponse(%s,%s)>" % (self.status_code, self.content_type)


def execute(
    request: httpx.Request,
    client: httpx.Client | None = None,
    settings: Settings | None = None,
) -> ExtractableResponse:
    """Send a prepared request and wrap the response for extraction.

    When the request has no User-Agent, a copy carrying the configured one
    is sent; the request passed in is left unchanged.

    Args:
        request: The request to send.
        client: Client to send it with. A temporary client honoring the
            SSL settings is used when omitted.
        settings: Overrides the global settings.

    Raises:
        httpx.HTTPError: On transport failures.
    """
    settings = settings or global_settings
    if "user-agent" not in request.headers:
        headers = request.headers.copy()
        headers["User-Agent"] = settings.user_agent
        try:
            body = {"content": request.content}
        except httpx.RequestNotRead:
            body = {"stream": request.stream}
        request = httpx.Request(
            request.method,
            request.url,
            headers=headers,
            extensions=request.extensions,
            **body,
        )
    log_request(request, settings.request_log_level)

    own_client = client is None
    if client is None:
        client = httpx.Client(verify=settings.verify_ssl)
    try:
        response = client.send(request)
        response.read()
    finally:
        if own_client:
            client.close()

    log.debug(
        "Received response",
        url=str(request.url),
        status_code=response.status_code,
    )
    log_response(response, settings.response_log_level)
    return ExtractableResponse(response)
