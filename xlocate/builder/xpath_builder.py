"""
XPath Builder - turns a Locator into a relative XPath 1.0 query

Every query starts with ``.//`` so it searches anywhere beneath the scope
it is executed against, never from the document root.

Case-insensitive equality folds only A-Z on both sides: the candidate side
through XPath ``translate()``, the literal side through ``ascii_lower``.
Non-ASCII letters compare exactly.
"""

import logging
from typing import Callable, Dict, Optional

from xlocate.config import config
from xlocate.errors import LocatorError
from xlocate.types.locator import Locator
from xlocate.types.locator_kind import LocatorKind

logger = logging.getLogger(__name__)

ASCII_UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ASCII_LOWERCASE = "abcdefghijklmnopqrstuvwxyz"

_ASCII_LOWER_TABLE = str.maketrans(ASCII_UPPERCASE, ASCII_LOWERCASE)


def ascii_lower(text: str) -> str:
    """Lowercase A-Z only, the same mapping ``translate()`` applies"""
    return text.translate(_ASCII_LOWER_TABLE)


def xpath_literal(value: str, escape: Optional[bool] = None) -> str:
    """
    Quote ``value`` as an XPath string literal.

    XPath 1.0 has no escape sequences, so a value holding both quote kinds
    is split into a ``concat()`` of single- and double-quoted parts.
    With ``escape=False`` the value is wrapped in single quotes as-is.

    Args:
        value: Raw literal text
        escape: Override ``config.escape_literals``

    Returns:
        Literal expression usable anywhere XPath expects a string
    """
    if escape is None:
        escape = config.escape_literals

    if not escape or "'" not in value:
        return f"'{value}'"
    if '"' not in value:
        return f'"{value}"'

    parts = []
    for i, chunk in enumerate(value.split("'")):
        if i:
            parts.append('"\'"')
        if chunk:
            parts.append(f"'{chunk}'")
    return "concat(" + ", ".join(parts) + ")"


def equals_ignoring_case(expression: str, text: str, escape: Optional[bool] = None) -> str:
    """Predicate fragment: ``expression`` equals ``text`` ignoring ASCII case"""
    return (
        f"translate({expression}, '{ASCII_UPPERCASE}', '{ASCII_LOWERCASE}')="
        f"{xpath_literal(ascii_lower(text), escape)}"
    )


def _tag_and_attributes(locator: Locator) -> str:
    query = f".//{locator.tag}"
    if locator.attributes:
        conditions = [
            f"@{name} = {xpath_literal(value)}"
            for name, value in locator.attributes
        ]
        query += "[" + " and ".join(conditions) + "]"
    return query


def _id_and_text(locator: Locator) -> str:
    if locator.case_sensitive:
        text_test = f"text()={xpath_literal(locator.text)}"
    else:
        text_test = equals_ignoring_case("text()", locator.text)
    return f".//*[@id={xpath_literal(locator.element_id)} and {text_test}]"


def _id_containing_text(locator: Locator) -> str:
    return (
        f".//*[@id={xpath_literal(locator.element_id)} and "
        f"contains(text(), {xpath_literal(locator.text)})]"
    )


def _tag_with_text(locator: Locator) -> str:
    return f".//{locator.tag}[{equals_ignoring_case('text()', locator.text)}]"


def _tag_containing_text(locator: Locator) -> str:
    return f".//{locator.tag}[contains(text(), {xpath_literal(locator.text)})]"


def _tag_starting_with_text(locator: Locator) -> str:
    return f".//{locator.tag}[starts-with(text(), {xpath_literal(locator.text)})]"


def _wrapped_query(locator: Locator) -> str:
    return locator.query


def _no_query(locator: Locator) -> str:
    raise LocatorError("A current-node locator has no structural query")


QUERY_BUILDERS: Dict[LocatorKind, Callable[[Locator], str]] = {
    LocatorKind.TAG_AND_ATTRIBUTES: _tag_and_attributes,
    LocatorKind.ID_AND_TEXT: _id_and_text,
    LocatorKind.ID_CONTAINING_TEXT: _id_containing_text,
    LocatorKind.TAG_WITH_TEXT: _tag_with_text,
    LocatorKind.TAG_CONTAINING_TEXT: _tag_containing_text,
    LocatorKind.TAG_STARTING_WITH_TEXT: _tag_starting_with_text,
    LocatorKind.QUERY_CONTAINING_TEXT: _wrapped_query,
    LocatorKind.CURRENT_NODE: _no_query,
}


def build_query(locator: Locator) -> str:
    """
    Build the XPath query for ``locator``.

    For QUERY_CONTAINING_TEXT this is the wrapped query; the text filter
    runs in memory afterwards.

    Raises:
        LocatorError: for CURRENT_NODE locators
    """
    query = QUERY_BUILDERS[locator.kind](locator)
    logger.debug(f"Built query for {locator}: {query}")
    return query
