"""
Locator factories - the public way to build locators

Usage:
    from xlocate import by_tag_and_attributes, from_html

    root = from_html(markup)
    inputs = by_tag_and_attributes("input", "name=email").find(root)
"""

from typing import Any, Mapping, Union

from xlocate.attributes import normalize_attributes
from xlocate.errors import LocatorError
from xlocate.types.locator import Locator
from xlocate.types.locator_kind import LocatorKind

Attributes = Union[Mapping[str, str], str]


def _require(name: str, value: Any) -> Any:
    if value is None:
        raise LocatorError(f"{name} must not be None")
    return value


def by_id_and_text(element_id: str, text: str, case_sensitive: bool = False) -> Locator:
    """Element with the given id whose text equals ``text`` (ASCII case ignored by default)"""
    return Locator(
        kind=LocatorKind.ID_AND_TEXT,
        element_id=_require("element_id", element_id),
        text=_require("text", text),
        case_sensitive=case_sensitive,
    )


def by_id_and_case_sensitive_text(element_id: str, text: str) -> Locator:
    return by_id_and_text(element_id, text, case_sensitive=True)


def by_tag_and_attributes(tag: str, attributes: Attributes) -> Locator:
    """
    Elements named ``tag`` carrying every required attribute value.

    Args:
        tag: Element name, e.g. ``"input"``
        attributes: Mapping of name to value, or ``"name=email,type=text"``
    """
    return Locator(
        kind=LocatorKind.TAG_AND_ATTRIBUTES,
        tag=_require("tag", tag),
        attributes=normalize_attributes(attributes),
    )


def by_tag_and_attributes_nth(tag: str, attributes: Attributes, n: int) -> Locator:
    """
    Like ``by_tag_and_attributes`` but finds nothing until at least ``n``
    elements match; then all of them are returned.
    """
    if n < 1:
        raise LocatorError(f"Minimum match count must be at least 1, got {n}")
    return Locator(
        kind=LocatorKind.TAG_AND_ATTRIBUTES,
        tag=_require("tag", tag),
        attributes=normalize_attributes(attributes),
        min_count=n,
    )


def by_current_node(node: Any) -> Locator:
    """Locator that always yields ``node``, whatever scope it is given"""
    return Locator(kind=LocatorKind.CURRENT_NODE, node=_require("node", node))


def by_tag_with_text(tag: str, text: str) -> Locator:
    return Locator(
        kind=LocatorKind.TAG_WITH_TEXT,
        tag=_require("tag", tag),
        text=_require("text", text),
    )


def by_tag_containing_text(tag: str, text: str) -> Locator:
    return Locator(
        kind=LocatorKind.TAG_CONTAINING_TEXT,
        tag=_require("tag", tag),
        text=_require("text", text),
    )


def by_tag_starting_with_text(tag: str, text: str) -> Locator:
    return Locator(
        kind=LocatorKind.TAG_STARTING_WITH_TEXT,
        tag=_require("tag", tag),
        text=_require("text", text),
    )


def by_id_containing_text(element_id: str, text: str) -> Locator:
    return Locator(
        kind=LocatorKind.ID_CONTAINING_TEXT,
        element_id=_require("element_id", element_id),
        text=_require("text", text),
    )


def by_query_containing_text(query: str, text: str) -> Locator:
    """
    Run ``query`` as-is, then keep the results whose rendered text
    contains ``text``. The containment check happens in Python, so it sees
    the full visible text rather than a single XPath text node.
    """
    return Locator(
        kind=LocatorKind.QUERY_CONTAINING_TEXT,
        query=_require("query", query),
        text=_require("text", text),
    )


by_xpath_containing_text = by_query_containing_text
