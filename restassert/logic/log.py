"""Best-effort logging of HTTP requests and responses.

Unlike value extraction, logging never fails a test: bodies that cannot
be read or parsed are logged as a placeholder or as raw text.
"""

from __future__ import annotations

import json

import httpx
import structlog
from lxml import etree

from restassert.logic.mime import resolve_format
from restassert.model import (
    ContentFormat,
    ExtractAs,
    RequestLogLevel,
    ResponseLogLevel,
)

log = structlog.get_logger(__name__)

PLACEHOLDER = "Could not read request payload"


def format_body(text: str, content_type: str | None) -> str:
    """Render a message body for display according to its content type."""
    fmt = resolve_format(ExtractAs.USE_CONTENT_TYPE, content_type)
    if fmt == ContentFormat.JSON:
        try:
            payload = json.loads(text) if text else None
        except ValueError:
            payload = None
        if payload is None:
            payload = PLACEHOLDER
        return json.dumps(payload, indent=2, ensure_ascii=False)
    if fmt == ContentFormat.XML:
        parser = etree.XMLParser(
            encoding="utf-8",
            remove_blank_text=True,
            resolve_entities=False,
            no_network=True,
        )
        try:
            doc = etree.fromstring(text.encode("utf-8"), parser=parser)
        except etree.XMLSyntaxError:
            return text
        return etree.tostring(doc, pretty_print=True, encoding="unicode")
    return text


def _header_lines(headers: httpx.Headers) -> dict[str, str]:
    lines: dict[str, str] = {}
    for name in headers.keys():
        lines[name] = ", ".join(headers.get_list(name))
    return lines


def _request_text(request: httpx.Request) -> str | None:
    try:
        content = request.content
    except httpx.RequestNotRead:
        return None
    if not content:
        return None
    return content.decode("utf-8", "replace")


def log_request(request: httpx.Request, level: RequestLogLevel) -> None:
    """Log request details at the given verbosity.

    ``ENDPOINT`` logs the method and URL, ``HEADERS`` adds the headers,
    ``BODY`` adds the body instead and ``ALL`` logs everything.
    """
    if level < RequestLogLevel.ENDPOINT:
        return
    log.info("Request", method=request.method, url=str(request.url))

    content_type = request.headers.get("content-type")
    if level in (RequestLogLevel.HEADERS, RequestLogLevel.ALL):
        log.info(
            "Request headers",
            content_type=content_type,
            content_length=request.headers.get("content-length"),
            headers=_header_lines(request.headers),
        )
    if level in (RequestLogLevel.BODY, RequestLogLevel.ALL):
        text = _request_text(request)
        if text is None:
            return
        log.info("Request body", body=format_body(text, content_type))


def log_response(response: httpx.Response, level: ResponseLogLevel) -> None:
    """Log response details at the given verbosity.

    The response body must have been read already.
    """
    if level < ResponseLogLevel.STATUS:
        return
    log.info(
        "Response",
        status_code=response.status_code,
        reason=response.reason_phrase,
    )
    if level in (ResponseLogLevel.HEADERS, ResponseLogLevel.ALL):
        log.info("Response headers", headers=_header_lines(response.headers))
    if level in (ResponseLogLevel.BODY, ResponseLogLevel.ALL):
        if not response.content:
            return
        content_type = response.headers.get("content-type")
        log.info("Response body", body=format_body(response.text, content_type))
