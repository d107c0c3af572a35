"""Concrete search scopes: parsed HTML via lxml, live pages via Playwright"""

from xlocate.adapters.lxml_node import LxmlNode, from_html
from xlocate.adapters.playwright_scope import PlaywrightNode, PlaywrightScope

__all__ = [
    'LxmlNode',
    'from_html',
    'PlaywrightNode',
    'PlaywrightScope',
]
