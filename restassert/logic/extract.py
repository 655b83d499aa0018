"""Extract values from response bodies with path expressions."""

from __future__ import annotations

from typing import Any

import structlog

from restassert.exc import ExtractionError
from restassert.logic.parsers import get_parser
from restassert.model import ContentFormat

log = structlog.get_logger(__name__)


def normalize(values: list[Any], path: str) -> Any:
    """Unwrap a single match, keep several as a list, reject none.

    Args:
        values: All matches of the path expression, in document order.
        path: The expression, used in the error message.

    Returns:
        The only value if there is exactly one match, else the list.

    Raises:
        ExtractionError: If there are no matches.
    """
    if not values:
        raise ExtractionError(f"Path expression '{path}' did not yield any results.")
    if len(values) == 1:
        return values[0]
    return values


def extract(
    body: str,
    fmt: ContentFormat | None,
    path: str,
    content_type: str | None = None,
) -> Any:
    """Parse a response body and evaluate a path expression against it.

    Args:
        body: The decoded response body.
        fmt: The resolved content format, None if it could not be resolved.
        path: JMESPath expression for JSON, XPath for XML and HTML.
        content_type: Declared content type, reported when ``fmt`` is None.

    Returns:
        A single value, or a list of values for multiple matches.

    Raises:
        ExtractionError: If the format is unknown or nothing matches.
        ParseError: If the body is not well-formed for the format.

    Example:
        >>> extract('{"a": {"b": 1}}', ContentFormat.JSON, "a.b")
        1
        >>> extract("<ul><li>a</li><li>b</li></ul>", ContentFormat.HTML, "//li")
        ['a', 'b']
    """
    if fmt is None:
        raise ExtractionError(
            f"Unable to extract elements from response with "
            f"content-type '{content_type}'"
        )
    parser = get_parser(fmt)
    tree = parser.parse(body)
    values = parser.evaluate(tree, path)
    log.debug("Evaluated path", path=path, format=fmt.value, matches=len(values))
    return normalize(values, path)
