"""
lxml adapter - search scopes and nodes backed by lxml.html

An ``LxmlNode`` is both a search scope and a node, so a node found by one
locator can be the scope of the next one.
"""

import logging
from typing import List, Optional

from lxml import etree, html

logger = logging.getLogger(__name__)


class LxmlNode:
    """Wraps an lxml element"""

    def __init__(self, element):
        self.element = element

    @property
    def tag(self) -> str:
        return self.element.tag

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.element.get(name, default)

    def execute_structural_query(self, query: str) -> List['LxmlNode']:
        """
        Evaluate ``query`` relative to this element.

        Non-element results (strings, numbers, attribute values, comments,
        processing instructions) are dropped. ``lxml.etree.XPathError``
        propagates for bad queries.
        """
        results = self.element.xpath(query)
        if not isinstance(results, list):
            logger.debug(f"Query {query!r} produced a {type(results).__name__}, not nodes")
            return []
        return [
            LxmlNode(r) for r in results
            if isinstance(r, etree._Element) and isinstance(r.tag, str)
        ]

    def rendered_text(self) -> Optional[str]:
        """Text content of the element with whitespace runs collapsed"""
        content = self.element.text_content()
        if content is None:
            return None
        return " ".join(content.split())

    def __eq__(self, other):
        if not isinstance(other, LxmlNode):
            return NotImplemented
        return self.element is other.element

    def __hash__(self):
        return id(self.element)

    def __repr__(self):
        return f"LxmlNode(<{self.element.tag}>)"


def from_html(markup: str) -> LxmlNode:
    """Parse an HTML document or fragment and return its root as a scope"""
    return LxmlNode(html.fromstring(markup))
