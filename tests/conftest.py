"""
Shared test fixtures and utilities for the viewbind test suite.
"""

import pytest

from viewbind import View

MANY_CONTACTS = """
<div class="contact" data-scope="contact">
  <span data-prop="full_name">John Doe</span>
  <a data-prop="email">john@example.com</a>
</div>
<div class="contact" data-scope="contact">
  <span data-prop="full_name">John Doe</span>
  <a data-prop="email">john@example.com</a>
</div>
<div class="contact" data-scope="contact">
  <span data-prop="full_name">John Doe</span>
  <a data-prop="email">john@example.com</a>
</div>
"""

SINGLE_CONTACT = """
<section class="contacts">
  <h1>Contacts</h1>
  <div class="contact" data-scope="contact">
    <span data-prop="full_name">John Doe</span>
    <a data-prop="email">john@example.com</a>
  </div>
  <footer>end</footer>
</section>
"""

UNSCOPED_PROP = """
<span class="foo" data-prop="foo"></span>
"""

NESTED_SCOPES = """
<div data-scope="post">
  <h2 data-prop="title">Title</h2>
  <ul>
    <li data-scope="comment">
      <p data-prop="body">Comment</p>
      <span data-prop="title">Comment title</span>
    </li>
  </ul>
  <p data-prop="body">Post body</p>
</div>
"""


class Contact:
    """Record exposing a single-key lookup, like an ORM row."""

    def __init__(self, full_name, email):
        self.full_name = full_name
        self.email = email

    def __getitem__(self, key):
        try:
            return getattr(self, key)
        except AttributeError:
            raise KeyError(key)


def texts(view, selector):
    """Text of every node in the view's document matching a CSS selector."""
    return [node.get_text() for node in view.node.select(selector)]


@pytest.fixture
def many_view():
    return View.from_string(MANY_CONTACTS)


@pytest.fixture
def single_view():
    return View.from_string(SINGLE_CONTACT)


@pytest.fixture
def unscoped_view():
    return View.from_string(UNSCOPED_PROP)


@pytest.fixture
def nested_view():
    return View.from_string(NESTED_SCOPES)
