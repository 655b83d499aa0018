"""Typed deserialization of response bodies.

JSON bodies are decoded and validated against the target type with
pydantic. XML bodies are first converted into plain mappings:

    <user id="7"><name>Ann</name><tag>a</tag><tag>b</tag></user>

becomes ``{"user": {"@id": "7", "name": "Ann", "tag": ["a", "b"]}}``.
"""

from __future__ import annotations

from typing import Any

from lxml import etree
from pydantic import TypeAdapter, ValidationError

from restassert.exc import DeserializationError, ExtractionError
from restassert.logic.parsers import get_parser
from restassert.model import ContentFormat


def element_to_data(element: Any) -> Any:
    """Convert an XML element into nested dicts, lists and strings."""
    children = [child for child in element if isinstance(child.tag, str)]
    if not children and not element.attrib:
        return element.text
    data: dict[str, Any] = {f"@{k}": v for k, v in element.attrib.items()}
    for child in children:
        tag = etree.QName(child).localname
        value = element_to_data(child)
        if tag not in data:
            data[tag] = value
        elif isinstance(data[tag], list):
            data[tag].append(value)
        else:
            data[tag] = [data[tag], value]
    if not children and element.text and element.text.strip():
        data["#text"] = element.text
    return data


def deserialize(
    body: str,
    target: Any,
    fmt: ContentFormat | None,
    content_type: str | None = None,
) -> Any:
    """Deserialize a response body into an instance of ``target``.

    Args:
        body: The decoded response body.
        target: Any type pydantic can validate, e.g. a model or ``dict``.
        fmt: The resolved content format.
        content_type: Declared content type, reported on failure.

    Raises:
        ExtractionError: If the format cannot be deserialized.
        ParseError: If the body is not well-formed.
        DeserializationError: If the data does not fit the target type.
    """
    if fmt == ContentFormat.JSON:
        data = get_parser(fmt).parse(body)
    elif fmt == ContentFormat.XML:
        root = get_parser(fmt).parse(body)
        data = {etree.QName(root).localname: element_to_data(root)}
    else:
        raise ExtractionError(
            f"Unable to deserialize response with content-type '{content_type}'"
        )
    try:
        return TypeAdapter(target).validate_python(data)
    except ValidationError as exc:
        raise DeserializationError(
            f"Cannot deserialize response into {target!r}: {exc}", target
        ) from exc
