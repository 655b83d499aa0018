"""Parsing backends for JSON, XML and HTML response bodies.

Each backend turns the body text into a tree and evaluates a path
expression against it, returning every match in document order. Result
normalization is left to :mod:`restassert.logic.extract`.
"""

from __future__ import annotations

import json
from typing import Any, Protocol

import jmespath
from jmespath.exceptions import JMESPathError
from lxml import etree, html

from restassert.exc import ExtractionError, ParseError
from restassert.helpers.xpath import xpath_values
from restassert.model import ContentFormat

PROJECTIONS = {"projection", "value_projection", "filter_projection"}

# Nodes whose value is the value of their last child.
SPINE = {"subexpression", "pipe", "index_expression"}


def projection_depth(node: dict[str, Any]) -> int:
    """Count the projections nesting the result of a JMESPath AST.

    ``a.b`` is 0, ``data.users[*].id`` is 1, ``g[*].m[*].id`` is 2. A
    pipe stops the projections on its left, so ``a[*] | [0]`` is 0.
    """
    depth = 0
    while True:
        kind = node["type"]
        if kind in PROJECTIONS:
            depth += 1
            node = node["children"][1]
        elif kind in SPINE:
            node = node["children"][-1]
        else:
            return depth


class ResponseParser(Protocol):
    """Capability to parse a body and query it with a path expression."""

    format: ContentFormat

    def parse(self, text: str) -> Any: ...

    def evaluate(self, tree: Any, path: str) -> list[Any]: ...


class JsonParser:
    """Query JSON bodies with JMESPath expressions.

    A projection (``items[*].id``, ``data.items[].id``,
    ``items[?id > `1`].id``, ``*.id``, ``items[0:2]``) selects many nodes
    and each element of its result is a match. Chained projections
    (``groups[*].members[*].id``) yield their matches flat, in document
    order. Any other expression selects a single node. JMESPath does not
    tell absent keys from ``null`` values, so ``None`` is never a match.
    """

    format = ContentFormat.JSON

    def parse(self, text: str) -> Any:
        try:
            return json.loads(text)
        except ValueError as exc:
            raise ParseError(f"Invalid JSON response body: {exc}") from exc

    def evaluate(self, tree: Any, path: str) -> list[Any]:
        try:
            expression = jmespath.compile(path)
            result = expression.search(tree)
        except JMESPathError as exc:
            raise ExtractionError(
                f"Invalid JMESPath expression '{path}': {exc}"
            ) from exc
        depth = projection_depth(expression.parsed)
        if depth == 0:
            return [] if result is None else [result]
        values = list(result or [])
        for _ in range(depth - 1):
            values = [item for nested in values for item in nested or []]
        return values


class XmlParser:
    """Query XML bodies with XPath, rejecting malformed documents."""

    format = ContentFormat.XML

    def parse(self, text: str) -> Any:
        parser = etree.XMLParser(
            encoding="utf-8", resolve_entities=False, no_network=True
        )
        try:
            return etree.fromstring(text.encode("utf-8"), parser=parser)
        except etree.XMLSyntaxError as exc:
            raise ParseError(f"Invalid XML response body: {exc}") from exc

    def evaluate(self, tree: Any, path: str) -> list[Any]:
        try:
            return xpath_values(tree, path)
        except etree.XPathError as exc:
            raise ExtractionError(
                f"Invalid XPath expression '{path}': {exc}"
            ) from exc


class HtmlParser(XmlParser):
    """Query HTML bodies with XPath, repairing malformed markup.

    Fragments are wrapped into ``<html><body>``, and paths are evaluated
    from the ``<html>`` element: ``//li`` or ``body/ul/li`` match the items
    of ``<ul><li>a</li></ul>``, while ``li`` does not.
    """

    format = ContentFormat.HTML

    def parse(self, text: str) -> Any:
        parser = html.HTMLParser(encoding="utf-8")
        try:
            return html.document_fromstring(text.encode("utf-8"), parser=parser)
        except (etree.ParserError, etree.XMLSyntaxError) as exc:
            raise ParseError(f"Cannot parse HTML response body: {exc}") from exc


PARSERS: dict[ContentFormat, ResponseParser] = {
    ContentFormat.JSON: JsonParser(),
    ContentFormat.XML: XmlParser(),
    ContentFormat.HTML: HtmlParser(),
}


def get_parser(fmt: ContentFormat) -> ResponseParser:
    """Get the parsing backend for a content format."""
    return PARSERS[fmt]
