"""Shared fixtures: small HTML documents parsed with lxml"""

import pytest

from xlocate.adapters.lxml_node import from_html


@pytest.fixture
def signup_page():
    """Form with two inputs and a greeting"""
    return from_html("""
        <html><body>
          <form id="signup">
            <input name="email" type="text"/>
            <input name="phone" type="text"/>
            <button type="submit" class="primary">Sign up</button>
          </form>
          <p id="msg">HELLO</p>
          <p id="status">Error: bad input</p>
          <a href="/login">Log In</a>
        </body></html>
    """)


@pytest.fixture
def item_list():
    """Two list items with class=item and one without"""
    return from_html("""
        <html><body>
          <ul>
            <li class="item">one</li>
            <li class="item">two</li>
            <li class="other">three</li>
          </ul>
        </body></html>
    """)


@pytest.fixture
def status_divs():
    return from_html("""
        <html><body>
          <div>OK</div>
          <div>Error: bad input</div>
          <div>Pending</div>
        </body></html>
    """)
