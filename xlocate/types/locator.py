"""Locator dataclass"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from xlocate.types.locator_kind import LocatorKind


@dataclass(frozen=True)
class Locator:
    """
    Immutable description of which nodes to find.

    One class covers every kind; ``kind`` says which payload fields are
    meaningful. Build instances with the ``by_*`` factories rather than
    calling the constructor directly.

    Attributes:
        kind: Which matching rule applies
        tag: Element name for tag-based kinds
        attributes: Required ``(name, value)`` pairs for TAG_AND_ATTRIBUTES
        element_id: Value of the ``id`` attribute for id-based kinds
        text: Text to compare against
        case_sensitive: Exact text comparison for ID_AND_TEXT
        min_count: Fewest TAG_AND_ATTRIBUTES matches that count as found
        query: Wrapped XPath for QUERY_CONTAINING_TEXT
        node: Pre-bound node for CURRENT_NODE
    """
    kind: LocatorKind
    tag: Optional[str] = None
    attributes: Tuple[Tuple[str, str], ...] = ()
    element_id: Optional[str] = None
    text: Optional[str] = None
    case_sensitive: bool = False
    min_count: int = 1
    query: Optional[str] = None
    node: Any = None

    @property
    def attribute_map(self) -> Dict[str, str]:
        return dict(self.attributes)

    def find(self, scope):
        """Find matching nodes in ``scope``; empty list when nothing matches"""
        from xlocate.executor.locator_executor import find
        return find(self, scope)

    def find_first(self, scope):
        """First matching node in ``scope`` or None"""
        from xlocate.executor.locator_executor import find_first
        return find_first(self, scope)

    def __str__(self) -> str:
        kind = self.kind
        if kind == LocatorKind.TAG_AND_ATTRIBUTES:
            attrs = ", ".join(f"{k}={v}" for k, v in self.attributes)
            desc = f"by tag and attributes: {self.tag}[{attrs}]"
            if self.min_count > 1:
                desc += f" (at least {self.min_count})"
            return desc
        if kind == LocatorKind.ID_AND_TEXT:
            mode = "case-sensitive" if self.case_sensitive else "ignoring case"
            return f"by id and text: #{self.element_id} == {self.text!r} ({mode})"
        if kind == LocatorKind.ID_CONTAINING_TEXT:
            return f"by id containing text: #{self.element_id} contains {self.text!r}"
        if kind == LocatorKind.TAG_WITH_TEXT:
            return f"by tag with text: {self.tag} == {self.text!r} (ignoring case)"
        if kind == LocatorKind.TAG_CONTAINING_TEXT:
            return f"by tag containing text: {self.tag} contains {self.text!r}"
        if kind == LocatorKind.TAG_STARTING_WITH_TEXT:
            return f"by tag starting with text: {self.tag} starts with {self.text!r}"
        if kind == LocatorKind.QUERY_CONTAINING_TEXT:
            return f"by query containing text: {self.query} contains {self.text!r}"
        return f"by current node: {self.node!r}"
