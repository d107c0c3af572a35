"""
Playwright adapter - run locators against a live page

Usage:
    from playwright.sync_api import sync_playwright
    from xlocate import by_id_and_text
    from xlocate.adapters import PlaywrightScope

    with sync_playwright() as p:
        browser = p.chromium.launch(headless=True)
        page = browser.new_page()
        page.goto("https://example.com")
        matches = by_id_and_text("msg", "hello").find(PlaywrightScope(page))
"""

import logging
from typing import List, Optional, Union

from playwright.sync_api import ElementHandle, Error, Page

logger = logging.getLogger(__name__)

XPATH_ENGINE_PREFIX = "xpath="
SAME_NODE_SCRIPT = "(a, b) => a === b"


class PlaywrightScope:
    """Search scope over a Playwright page or element handle"""

    def __init__(self, target: Union[Page, ElementHandle]):
        self.target = target

    def execute_structural_query(self, query: str) -> List['PlaywrightNode']:
        """Evaluate ``query`` with Playwright's XPath engine; Playwright errors propagate"""
        handles = self.target.query_selector_all(XPATH_ENGINE_PREFIX + query)
        logger.debug(f"xpath {query!r} matched {len(handles)} element(s)")
        return [PlaywrightNode(h) for h in handles]


class PlaywrightNode(PlaywrightScope):
    """
    An element handle; also a scope for queries beneath it.

    Every query returns fresh handles, so equality asks the page whether
    two handles point at the same DOM element. Nodes are not hashable.
    """

    __hash__ = None

    def __init__(self, handle: ElementHandle):
        super().__init__(handle)

    @property
    def handle(self) -> ElementHandle:
        return self.target

    def rendered_text(self) -> Optional[str]:
        """Visible text; ``textContent`` for SVG/MathML, which have no ``innerText``"""
        try:
            return self.target.inner_text()
        except Error as e:
            logger.debug(f"inner_text unavailable ({e}), using text_content")
            return self.target.text_content()

    def __eq__(self, other):
        if not isinstance(other, PlaywrightNode):
            return NotImplemented
        if self.target is other.target:
            return True
        return bool(self.target.evaluate(SAME_NODE_SCRIPT, other.target))

    def __repr__(self):
        return f"PlaywrightNode({self.target!r})"
