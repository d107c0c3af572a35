"""XPath query construction for locators"""

from xlocate.builder.xpath_builder import (
    ASCII_LOWERCASE,
    ASCII_UPPERCASE,
    QUERY_BUILDERS,
    ascii_lower,
    build_query,
    equals_ignoring_case,
    xpath_literal,
)

__all__ = [
    'ASCII_LOWERCASE',
    'ASCII_UPPERCASE',
    'QUERY_BUILDERS',
    'ascii_lower',
    'build_query',
    'equals_ignoring_case',
    'xpath_literal',
]
