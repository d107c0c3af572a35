"""Locator kind enumeration"""

from enum import Enum


class LocatorKind(Enum):
    """Locator kinds"""
    TAG_AND_ATTRIBUTES = "tag_and_attributes"
    ID_AND_TEXT = "id_and_text"
    ID_CONTAINING_TEXT = "id_containing_text"
    TAG_WITH_TEXT = "tag_with_text"
    TAG_CONTAINING_TEXT = "tag_containing_text"
    TAG_STARTING_WITH_TEXT = "tag_starting_with_text"
    CURRENT_NODE = "current_node"
    QUERY_CONTAINING_TEXT = "query_containing_text"
