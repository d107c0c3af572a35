"""Locator Executor - runs locators against a search scope"""

import logging
from typing import Any, Iterable, List, Optional

from xlocate.builder.xpath_builder import build_query
from xlocate.config import config
from xlocate.types.locator import Locator
from xlocate.types.locator_kind import LocatorKind
from xlocate.types.scope import MatchResult, SearchScope

logger = logging.getLogger(__name__)


def execute(scope: SearchScope, query: str) -> MatchResult:
    """
    Run ``query`` through the scope's tree-search engine.

    A ``None`` answer becomes an empty list. Engine errors are not caught.
    """
    nodes = scope.execute_structural_query(query)
    if nodes is None:
        return []
    return list(nodes)


def filter_containing_text(nodes: Iterable[Any], text: str) -> MatchResult:
    """Keep nodes whose rendered text contains ``text``, in order"""
    matching = []
    for node in nodes:
        rendered = node.rendered_text()
        if rendered is not None and text in rendered:
            matching.append(node)
    return matching


def _find_tag_and_attributes(locator: Locator, scope: SearchScope) -> MatchResult:
    nodes = execute(scope, build_query(locator))
    if len(nodes) < locator.min_count:
        if config.log_under_threshold:
            logger.info(
                f"expecting at least {locator.min_count} matching elements, "
                f"found only {len(nodes)} this time around"
            )
        return []
    return nodes


def _find_query_containing_text(locator: Locator, scope: SearchScope) -> MatchResult:
    candidates = execute(scope, build_query(locator))
    matching = filter_containing_text(candidates, locator.text)
    logger.debug(
        f"{len(matching)} of {len(candidates)} candidates contain {locator.text!r}"
    )
    return matching


def find(locator: Locator, scope: SearchScope) -> MatchResult:
    """
    Find the nodes ``locator`` describes within ``scope``.

    Returns:
        Matching nodes in engine order; an empty list means not found
    """
    kind = locator.kind
    if kind == LocatorKind.CURRENT_NODE:
        return [locator.node]
    if kind == LocatorKind.QUERY_CONTAINING_TEXT:
        return _find_query_containing_text(locator, scope)
    if kind == LocatorKind.TAG_AND_ATTRIBUTES:
        return _find_tag_and_attributes(locator, scope)
    return execute(scope, build_query(locator))


def find_first(locator: Locator, scope: SearchScope) -> Optional[Any]:
    """First node ``locator`` finds within ``scope``, or None"""
    nodes = find(locator, scope)
    return nodes[0] if nodes else None
