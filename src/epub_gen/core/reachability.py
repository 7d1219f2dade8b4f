"""Find packaged files that nothing in the book points at."""

from __future__ import annotations

import posixpath
import re
import warnings
from typing import TYPE_CHECKING
from urllib.parse import unquote, urlsplit

from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning

if TYPE_CHECKING:
    from epub_gen.core.book import Book

warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)

CSS_URL_PATTERN = re.compile(r"""url\(\s*['"]?([^'")]+?)['"]?\s*\)""")
CSS_IMPORT_PATTERN = re.compile(r"""@import\s+['"]([^'"]+)['"]""")
REFERENCE_ATTRIBUTES = ("src", "href", "xlink:href", "poster", "data")


def resolve(base_path: str, ref: str) -> str | None:
    """Resolve ``ref`` relative to the book file ``base_path``.

    Returns None for external URLs and same-document fragments.
    """
    parts = urlsplit(ref.strip())
    if parts.scheme or parts.netloc or not parts.path:
        return None
    if parts.path.startswith("/"):
        return posixpath.normpath(unquote(parts.path).lstrip("/"))
    joined = posixpath.join(posixpath.dirname(base_path), unquote(parts.path))
    return posixpath.normpath(joined)


def xhtml_references(path: str, content: str) -> set[str]:
    """Book paths referenced from an XHTML document."""
    soup = BeautifulSoup(content, "lxml")
    refs: set[str] = set()
    for tag in soup.find_all(True):
        for name in REFERENCE_ATTRIBUTES:
            value = tag.get(name)
            if isinstance(value, str):
                target = resolve(path, value)
                if target:
                    refs.add(target)
    for style in soup.find_all("style"):
        refs |= css_references(path, style.get_text())
    return refs


def css_references(path: str, content: str) -> set[str]:
    """Book paths referenced from a stylesheet (``url()`` and ``@import``)."""
    refs: set[str] = set()
    for match in [*CSS_URL_PATTERN.finditer(content), *CSS_IMPORT_PATTERN.finditer(content)]:
        target = resolve(path, match.group(1))
        if target:
            refs.add(target)
    return refs


def find_unreferenced(book: Book) -> list[str]:
    """Return paths of images, stylesheets, scripts and fonts never referenced.

    References are collected from every XHTML document (all of them are in
    the spine), from the TOC targets, from the cover image and,
    transitively, from referenced stylesheets. A book with unreferenced
    files is technically invalid, but this check is never run implicitly.
    """
    referenced: set[str] = set()
    for doc in book.documents:
        referenced |= xhtml_references(doc.path, doc.contents)

    pending = list(book.navpoints)
    while pending:
        navpoint = pending.pop()
        target = resolve("", navpoint.href)
        if target:
            referenced.add(target)
        pending.extend(navpoint.children)

    for image in book.images:
        if image.id == book.cover_id:
            referenced.add(posixpath.normpath(image.path))

    styles = {posixpath.normpath(s.path): s for s in book.stylesheets}
    queue = [p for p in styles if p in referenced]
    seen: set[str] = set()
    while queue:
        style_path = queue.pop()
        if style_path in seen:
            continue
        seen.add(style_path)
        for target in css_references(style_path, styles[style_path].contents):
            referenced.add(target)
            if target in styles:
                queue.append(target)

    candidates = [*book.images, *book.stylesheets, *book.scripts, *book.fonts]
    return [r.path for r in candidates if posixpath.normpath(r.path) not in referenced]
