"""Tests for attribute string conversion."""

import pytest

from xlocate.attributes import convert_to_map, normalize_attributes
from xlocate.errors import LocatorError


def test_simple_pairs():
    assert convert_to_map("name=email,type=text") == {"name": "email", "type": "text"}


def test_whitespace_is_stripped():
    assert convert_to_map(" name = email , type= text ") == {"name": "email", "type": "text"}


def test_value_may_contain_equals():
    assert convert_to_map("href=/search?q=1") == {"href": "/search?q=1"}


def test_empty_segments_are_skipped():
    assert convert_to_map("class=item,,") == {"class": "item"}
    assert convert_to_map("") == {}


def test_last_duplicate_wins():
    assert convert_to_map("class=a,class=b") == {"class": "b"}


def test_empty_value_allowed():
    assert convert_to_map("value=") == {"value": ""}


@pytest.mark.parametrize("bad", ["name", "=email", "name=email,type"])
def test_malformed_segment_raises(bad):
    with pytest.raises(LocatorError):
        convert_to_map(bad)


def test_none_raises():
    with pytest.raises(LocatorError):
        convert_to_map(None)


def test_normalize_accepts_mapping_and_string():
    assert normalize_attributes({"name": "email"}) == (("name", "email"),)
    assert normalize_attributes("name=email") == (("name", "email"),)
    assert normalize_attributes(None) == ()


def test_normalize_rejects_missing_value():
    with pytest.raises(LocatorError):
        normalize_attributes({"name": None})
