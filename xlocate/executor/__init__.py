"""Locator execution against search scopes"""

from xlocate.executor.locator_executor import (
    execute,
    filter_containing_text,
    find,
    find_first,
)

__all__ = [
    'execute',
    'filter_containing_text',
    'find',
    'find_first',
]
