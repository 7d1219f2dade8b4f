"""Shared fixtures."""

import pytest

from epub_gen import Book

from .helpers import make_xhtml
from .image_fixtures import TINY_PNG


@pytest.fixture
def book() -> Book:
    """A book with one image, one stylesheet, one document and a two-level TOC."""
    b = Book()
    b.set_title("Test Book")
    b.add_language("en")
    b.add_author("Jane Doe")
    b.add_image("images/cover.png", TINY_PNG)
    b.add_stylesheet("css/style.css", "body { margin: 0; }")
    b.add_xhtml("text/ch1.xhtml", make_xhtml("Chapter 1"))
    chapter = b.add_navpoint("Chapter 1", "text/ch1.xhtml", 1)
    chapter.add_navpoint("Section 1", "text/ch1.xhtml#s1", 1)
    return b
