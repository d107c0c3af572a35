"""Attribute string conversion ("name=email,type=text" -> mapping)"""

import logging
from typing import Dict, Mapping, Tuple, Union

from xlocate.errors import LocatorError

logger = logging.getLogger(__name__)


def convert_to_map(attribute_string: str) -> Dict[str, str]:
    """
    Parse a flat ``key=value,key=value`` string into an attribute mapping.

    Whitespace around names and values is stripped, empty segments are
    skipped and a repeated name keeps its last value. Values may contain
    ``=`` since only the first one in a segment separates name from value.

    Raises:
        LocatorError: a segment has no ``=`` or an empty name
    """
    if attribute_string is None:
        raise LocatorError("attribute string must not be None")

    attributes: Dict[str, str] = {}
    for segment in attribute_string.split(","):
        if not segment.strip():
            continue
        if "=" not in segment:
            raise LocatorError(f"Expected name=value, got '{segment.strip()}'")
        name, value = segment.split("=", 1)
        name = name.strip()
        if not name:
            raise LocatorError(f"Missing attribute name in '{segment.strip()}'")
        attributes[name] = value.strip()

    logger.debug(f"Parsed attribute string {attribute_string!r} -> {attributes}")
    return attributes


def normalize_attributes(
    attributes: Union[Mapping[str, str], str, None]
) -> Tuple[Tuple[str, str], ...]:
    """Turn a mapping or attribute string into ordered ``(name, value)`` pairs"""
    if attributes is None:
        return ()
    if isinstance(attributes, str):
        attributes = convert_to_map(attributes)
    pairs = []
    for name, value in attributes.items():
        if value is None:
            raise LocatorError(f"Attribute '{name}' has no required value")
        pairs.append((str(name), str(value)))
    return tuple(pairs)
