"""Example locators"""

from xlocate.factories import (
    by_id_and_text,
    by_id_containing_text,
    by_query_containing_text,
    by_tag_and_attributes,
    by_tag_and_attributes_nth,
    by_tag_containing_text,
    by_tag_starting_with_text,
    by_tag_with_text,
)

EXAMPLE_LOCATORS = {
    "email_input": by_tag_and_attributes("input", {"name": "email"}),
    "submit_button": by_tag_and_attributes("button", "type=submit,class=primary"),
    "three_list_items": by_tag_and_attributes_nth("li", "class=item", 3),
    "greeting_any_case": by_id_and_text("msg", "Hello"),
    "greeting_exact": by_id_and_text("msg", "Hello", case_sensitive=True),
    "status_with_error": by_id_containing_text("status", "Error"),
    "login_link": by_tag_with_text("a", "Log in"),
    "warning_paragraph": by_tag_containing_text("p", "Warning"),
    "total_label": by_tag_starting_with_text("span", "Total"),
    "error_divs": by_query_containing_text(".//div", "Error"),
    "quoted_title": by_tag_with_text("h1", "Don't panic"),
}
