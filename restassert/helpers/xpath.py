"""XPath result helpers for HTML/XML documents.

This module converts raw lxml XPath results into plain Python values.
"""

from __future__ import annotations

from typing import Any

from lxml import etree


def xpath_values(tree: Any, path: str) -> list[Any]:
    """Evaluate an XPath expression and return its matches as values.

    Element matches are turned into their text content, string results
    (text nodes, attributes) into plain strings. Scalar results of XPath
    functions such as ``count()`` come back as a one-element list.

    Args:
        tree: The lxml element or document to query.
        path: XPath expression to evaluate.

    Returns:
        The matched values in document order.

    Raises:
        lxml.etree.XPathError: If the expression is invalid.

    Example:
        >>> xpath_values(doc, '//li')
        ['a', 'b']
        >>> xpath_values(doc, 'count(//li)')
        [2.0]
    """
    result = tree.xpath(path)
    if not isinstance(result, list):
        return [_plain(result)]
    return [_plain(item) for item in result]


def text_content(node: Any) -> str:
    """Concatenated text of an element and all of its descendants."""
    if isinstance(node, etree._Element):
        return "".join(node.itertext())
    return str(node)


def _plain(value: Any) -> Any:
    if isinstance(value, (bool, float)):
        return value
    if isinstance(value, (etree._Element, str)):
        return text_content(value)
    # Comments, processing instructions and other lxml proxies
    return str(value)
