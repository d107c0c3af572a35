"""
xlocate - XPath locators for HTML document trees

Describe which elements to find (by tag and attributes, by id and text,
by tag and text, by filtering a query on rendered text, or by reusing a
node you already hold) and run the description against any search scope.
An empty list is the only "not found" answer.
"""

from xlocate.types import Locator, LocatorKind, MatchResult, Node, SearchScope
from xlocate.errors import LocatorError
from xlocate.attributes import convert_to_map
from xlocate.builder import build_query, equals_ignoring_case, xpath_literal
from xlocate.executor import execute, filter_containing_text, find, find_first
from xlocate.factories import (
    by_current_node,
    by_id_and_case_sensitive_text,
    by_id_and_text,
    by_id_containing_text,
    by_query_containing_text,
    by_tag_and_attributes,
    by_tag_and_attributes_nth,
    by_tag_containing_text,
    by_tag_starting_with_text,
    by_tag_with_text,
    by_xpath_containing_text,
)
from xlocate.adapters import LxmlNode, from_html

__all__ = [
    # Types
    'Locator',
    'LocatorKind',
    'MatchResult',
    'Node',
    'SearchScope',
    'LocatorError',

    # Factories
    'by_current_node',
    'by_id_and_case_sensitive_text',
    'by_id_and_text',
    'by_id_containing_text',
    'by_query_containing_text',
    'by_tag_and_attributes',
    'by_tag_and_attributes_nth',
    'by_tag_containing_text',
    'by_tag_starting_with_text',
    'by_tag_with_text',
    'by_xpath_containing_text',

    # Query building and execution
    'build_query',
    'equals_ignoring_case',
    'xpath_literal',
    'execute',
    'filter_containing_text',
    'find',
    'find_first',
    'convert_to_map',

    # Adapters
    'LxmlNode',
    'from_html',
]

__version__ = '1.0.0'
