"""Helpers shared by the OPF writers."""

from __future__ import annotations

import html
from collections.abc import Iterator
from typing import TYPE_CHECKING

from epub_gen.models.resources import spine_order

if TYPE_CHECKING:
    from epub_gen.core.book import Book
    from epub_gen.models.resources import Font, Image, Script, Stylesheet, XhtmlDocument

    Resource = Image | XhtmlDocument | Stylesheet | Script | Font

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'
OPF_NAMESPACE = "http://www.idpf.org/2007/opf"
DC_NAMESPACE = "http://purl.org/dc/elements/1.1/"


def text(value: str) -> str:
    """Escape element text."""
    return html.escape(value, quote=False)


def attr(value: str) -> str:
    """Escape an attribute value."""
    return html.escape(value, quote=True)


def iter_resources(book: Book) -> Iterator[Resource]:
    """Yield every packaged file in manifest order.

    Images, then XHTML, stylesheets, scripts and fonts, each in the order
    they were added.
    """
    yield from book.images
    yield from book.documents
    yield from book.stylesheets
    yield from book.scripts
    yield from book.fonts


def manifest_item(item_id: str, href: str, media_type: str, properties: str | None = None) -> str:
    """Render one ``<item>`` line of the manifest."""
    extra = f' properties="{attr(properties)}"' if properties else ""
    return (
        f'    <item id="{attr(item_id)}" href="{attr(href)}" '
        f'media-type="{media_type}"{extra} />'
    )


def spine_itemrefs(book: Book) -> list[str]:
    """Render the spine ``<itemref>`` lines in reading order."""
    return [f'    <itemref idref="{doc.id}" />' for doc in spine_order(book.documents)]
