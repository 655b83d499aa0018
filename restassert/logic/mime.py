"""Content format resolution for response bodies."""

from __future__ import annotations

from restassert.model import ContentFormat, DeserializeAs, ExtractAs

HINTS: dict[str, ContentFormat] = {
    ExtractAs.JSON: ContentFormat.JSON,
    ExtractAs.XML: ContentFormat.XML,
    ExtractAs.HTML: ContentFormat.HTML,
    DeserializeAs.JSON: ContentFormat.JSON,
    DeserializeAs.XML: ContentFormat.XML,
}

# Checked in order, "application/xhtml+xml" is XML.
MARKERS: list[tuple[str, ContentFormat]] = [
    ("json", ContentFormat.JSON),
    ("xml", ContentFormat.XML),
    ("html", ContentFormat.HTML),
]


def resolve_format(
    hint: ExtractAs | DeserializeAs,
    content_type: str | None,
) -> ContentFormat | None:
    """Pick the parsing backend for a response body.

    An explicit hint wins over the declared content type. Without one, a
    missing or empty content type is treated as JSON, and otherwise the
    first marker contained in the content type decides.

    Args:
        hint: Explicit format, or ``USE_CONTENT_TYPE``.
        content_type: The declared content type of the response, if any.

    Returns:
        The format to parse the body as, or None if nothing matches.

    Example:
        >>> resolve_format(ExtractAs.USE_CONTENT_TYPE, "application/xml")
        <ContentFormat.XML: 'xml'>
        >>> resolve_format(ExtractAs.JSON, "text/plain")
        <ContentFormat.JSON: 'json'>
    """
    if hint in HINTS:
        return HINTS[hint]
    if not content_type:
        return ContentFormat.JSON
    content_type = content_type.lower()
    for marker, fmt in MARKERS:
        if marker in content_type:
            return fmt
    return None
