"""Collaborator protocols: search scopes and nodes"""

from typing import Any, List, Optional, Protocol, Sequence, runtime_checkable


@runtime_checkable
class Node(Protocol):
    """A tree element whose visible text can be read"""

    def rendered_text(self) -> Optional[str]:
        ...


@runtime_checkable
class SearchScope(Protocol):
    """Anything that can run an XPath query and yield nodes beneath it"""

    def execute_structural_query(self, query: str) -> Sequence[Any]:
        ...


MatchResult = List[Any]
