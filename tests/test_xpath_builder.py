"""
Tests for XPath query construction.

Query building needs no document, so these compare exact strings.
"""

import pytest

from xlocate.builder.xpath_builder import (
    QUERY_BUILDERS,
    ascii_lower,
    build_query,
    equals_ignoring_case,
    xpath_literal,
)
from xlocate.config import config
from xlocate.errors import LocatorError
from xlocate.factories import (
    by_current_node,
    by_id_and_text,
    by_id_containing_text,
    by_query_containing_text,
    by_tag_and_attributes,
    by_tag_and_attributes_nth,
    by_tag_containing_text,
    by_tag_starting_with_text,
    by_tag_with_text,
)
from xlocate.types.locator_kind import LocatorKind

FOLD = "translate(text(), 'ABCDEFGHIJKLMNOPQRSTUVWXYZ', 'abcdefghijklmnopqrstuvwxyz')"


class TestXPathLiteral:
    """Quoting of literal values."""

    def test_plain_value_single_quoted(self):
        assert xpath_literal("email") == "'email'"

    def test_single_quote_switches_to_double_quotes(self):
        assert xpath_literal("Don't") == '"Don\'t"'

    def test_both_quotes_use_concat(self):
        assert xpath_literal('a\'b"c') == 'concat(\'a\', "\'", \'b"c\')'

    def test_leading_single_quote_with_double_quote(self):
        assert xpath_literal('\'a"') == 'concat("\'", \'a"\')'

    def test_escaping_disabled_wraps_raw(self):
        assert xpath_literal("Don't", escape=False) == "'Don't'"

    def test_config_controls_default(self, monkeypatch):
        monkeypatch.setattr(config, "escape_literals", False)
        assert xpath_literal("it's") == "'it's'"


class TestCaseFolding:
    """ASCII-only lowercase on both sides of the comparison."""

    def test_ascii_lower_only_touches_a_to_z(self):
        assert ascii_lower("HeLLo ÉCOLE") == "hello École"

    def test_equals_ignoring_case_lowers_literal(self):
        assert equals_ignoring_case("text()", "Hello") == f"{FOLD}='hello'"

    def test_equals_ignoring_case_quotes_literal(self):
        assert equals_ignoring_case("text()", "DON'T") == f'{FOLD}="don\'t"'


class TestBuildQuery:
    """Query shape for each locator kind."""

    def test_tag_without_attributes(self):
        assert build_query(by_tag_and_attributes("div", {})) == ".//div"

    def test_tag_and_attributes_conjunction(self):
        locator = by_tag_and_attributes("input", {"name": "email", "type": "text"})
        assert build_query(locator) == ".//input[@name = 'email' and @type = 'text']"

    def test_tag_and_attributes_from_string(self):
        locator = by_tag_and_attributes("button", "type=submit")
        assert build_query(locator) == ".//button[@type = 'submit']"

    def test_min_count_does_not_change_query(self):
        nth = by_tag_and_attributes_nth("li", "class=item", 3)
        plain = by_tag_and_attributes("li", "class=item")
        assert build_query(nth) == build_query(plain)

    def test_id_and_text_ignoring_case(self):
        query = build_query(by_id_and_text("msg", "Hello"))
        assert query == f".//*[@id='msg' and {FOLD}='hello']"

    def test_id_and_text_case_sensitive(self):
        query = build_query(by_id_and_text("msg", "Hello", case_sensitive=True))
        assert query == ".//*[@id='msg' and text()='Hello']"

    def test_id_containing_text(self):
        query = build_query(by_id_containing_text("status", "Error"))
        assert query == ".//*[@id='status' and contains(text(), 'Error')]"

    def test_tag_with_text(self):
        assert build_query(by_tag_with_text("a", "Log In")) == f".//a[{FOLD}='log in']"

    def test_tag_containing_text(self):
        query = build_query(by_tag_containing_text("p", "Warning"))
        assert query == ".//p[contains(text(), 'Warning')]"

    def test_tag_starting_with_text(self):
        query = build_query(by_tag_starting_with_text("span", "Total"))
        assert query == ".//span[starts-with(text(), 'Total')]"

    def test_query_containing_text_uses_wrapped_query(self):
        assert build_query(by_query_containing_text("//div[@class='x']", "Error")) == "//div[@class='x']"

    def test_current_node_has_no_query(self):
        with pytest.raises(LocatorError):
            build_query(by_current_node(object()))

    def test_every_kind_has_a_builder(self):
        assert set(QUERY_BUILDERS) == set(LocatorKind)

    def test_queries_are_relative(self):
        locators = [
            by_tag_and_attributes("input", "name=email"),
            by_id_and_text("msg", "Hi"),
            by_id_containing_text("msg", "Hi"),
            by_tag_with_text("a", "x"),
            by_tag_containing_text("a", "x"),
            by_tag_starting_with_text("a", "x"),
        ]
        for locator in locators:
            assert build_query(locator).startswith(".//")

    def test_attribute_value_with_quote_is_escaped(self):
        locator = by_tag_and_attributes("img", {"alt": "Bob's photo"})
        assert build_query(locator) == './/img[@alt = "Bob\'s photo"]'
