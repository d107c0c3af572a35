"""Locator value types and collaborator protocols"""

from xlocate.types.locator_kind import LocatorKind
from xlocate.types.locator import Locator
from xlocate.types.scope import MatchResult, Node, SearchScope

__all__ = [
    'LocatorKind',
    'Locator',
    'MatchResult',
    'Node',
    'SearchScope',
]
