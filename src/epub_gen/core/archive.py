"""Zip packaging shared by the v2 and v3 writers."""

from __future__ import annotations

import io
import logging
import zipfile
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from epub_gen.core.book import Book

log = logging.getLogger(__name__)

MIMETYPE = "application/epub+zip"
CONTENT_DIR = "OPS"
CONTAINER_PATH = "META-INF/container.xml"
PACKAGE_MEDIA_TYPE = "application/oebps-package+xml"

# Deflate is the only compression EPUB allows.
COMPRESS_LEVEL = 9


def content_path(path: str) -> str:
    """Archive name for a book-relative path."""
    return f"{CONTENT_DIR}/{path}"


def container_xml(rootfiles: list[str]) -> str:
    """Render META-INF/container.xml pointing at the given package files."""
    lines = [
        '<?xml version="1.0" encoding="utf-8"?>',
        '<container version="1.0" xmlns="urn:oasis:names:tc:opendocument:xmlns:container">',
        "  <rootfiles>",
    ]
    for rootfile in rootfiles:
        lines.append(
            f'    <rootfile full-path="{rootfile}" media-type="{PACKAGE_MEDIA_TYPE}" />'
        )
    lines.append("  </rootfiles>")
    lines.append("</container>")
    return "\n".join(lines) + "\n"


def write_package(
    book: Book,
    fragments: list[tuple[str, str]],
    transform_xhtml=None,
) -> bytes:
    """Build the EPUB zip and return its bytes.

    Writes the stored ``mimetype`` entry first, then every resource under
    ``OPS/``, then the generated ``(archive name, text)`` fragments in the
    order given.

    Args:
        book: Book whose resources are packaged
        fragments: Generated package files (OPF, TOC, container)
        transform_xhtml: Optional callable applied to each XHTML document's
            text before it is written
    """
    buf = io.BytesIO()
    with zipfile.ZipFile(
        buf, "w", compression=zipfile.ZIP_DEFLATED, compresslevel=COMPRESS_LEVEL
    ) as zf:
        zf.writestr("mimetype", MIMETYPE, compress_type=zipfile.ZIP_STORED)

        for image in book.images:
            zf.writestr(content_path(image.path), image.contents)

        for doc in book.documents:
            text = doc.contents
            if transform_xhtml is not None:
                text = transform_xhtml(text)
            zf.writestr(content_path(doc.path), text.encode("utf-8"))

        for style in book.stylesheets:
            zf.writestr(content_path(style.path), style.contents.encode("utf-8"))

        for script in book.scripts:
            zf.writestr(content_path(script.path), script.contents.encode("utf-8"))

        for font in book.fonts:
            zf.writestr(content_path(font.path), font.contents)

        for name, text in fragments:
            log.debug("Adding %s", name)
            zf.writestr(name, text.encode("utf-8"))

    return buf.getvalue()
