"""EPUB 3 writer: book.opf, the XHTML nav document and the container file."""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from epub_gen.core.archive import CONTAINER_PATH, container_xml, content_path, write_package
from epub_gen.core.book import TIMESTAMP_FORMAT
from epub_gen.core.package import (
    DC_NAMESPACE,
    OPF_NAMESPACE,
    XML_DECLARATION,
    attr,
    iter_resources,
    manifest_item,
    spine_itemrefs,
    text,
)
from epub_gen.models.navigation import NavPoint, sorted_level

if TYPE_CHECKING:
    from epub_gen.core.book import Book

log = logging.getLogger(__name__)

# Rewrite EPUB 2 style XHTML doctypes when packaging v3 books.
FIX_V2_XHTML = True

NAV_FILE = "__toc.xhtml"
NAV_ID = "ncx"
COLLECTION_ID = "seriesinfo"

LEGACY_DOCTYPE = re.compile(r"^(<\?xml[^>]*>\s*<!DOCTYPE)\b[^>]*>", re.MULTILINE | re.DOTALL)


def fix_v2_xhtml(content: str) -> str:
    """Make EPUB 2 flavoured XHTML acceptable to EPUB 3.

    v2 wants the full XHTML 1.1 doctype, v3 wants a bare
    ``<!DOCTYPE html>``; only a doctype following the XML declaration is
    rewritten.
    """
    return LEGACY_DOCTYPE.sub(r"\1 html>", content, count=1)


def rendition_names() -> list[str]:
    """Package files in the book; only a single rendition is written."""
    return ["book.opf"]


def render_metadata(book: Book, now: datetime | None = None) -> list[str]:
    """Render the metadata block.

    Qualifiers become ``<meta refines>`` statements pointing at an id
    derived from the entry's position. A ``dcterms:modified`` statement is
    added from ``now`` (default: current UTC time) if the book has none.
    """
    lines = [f'  <metadata xmlns:dc="{DC_NAMESPACE}">']
    seen_modified = False
    for position, entry in enumerate(book.metadata, start=1):
        if entry.kind == "meta":
            # v2-only statements such as the cover pointer
            continue
        if entry.kind == "dc:identifier":
            lines.append(f'    <dc:identifier id="BookId">{text(entry.value or "")}</dc:identifier>')
            continue
        if entry.kind == "dcterms:modified":
            seen_modified = True
            lines.append(f'    <meta property="dcterms:modified">{text(entry.value or "")}</meta>')
            continue

        entry_id = f"id{position}"
        if entry.has_value:
            lines.append(f'    <{entry.kind} id="{entry_id}">{text(entry.value)}</{entry.kind}>')
        else:
            lines.append(f'    <{entry.kind} id="{entry_id}" />')
        for pair in entry.pairs:
            scheme = f' scheme="{attr(pair.scheme)}"' if pair.scheme else ""
            lines.append(
                f'    <meta refines="#{entry_id}" property="{pair.v3_name()}"{scheme}>'
                f"{text(pair.value)}</meta>"
            )

    if not seen_modified:
        now = now or datetime.now(timezone.utc)
        lines.append(
            f'    <meta property="dcterms:modified">{now.strftime(TIMESTAMP_FORMAT)}</meta>'
        )

    lines.extend(render_collection(book))
    lines.append("  </metadata>")
    return lines


def render_collection(book: Book) -> list[str]:
    """Render series/set membership; series and set never coexist."""
    if book.series_name is not None:
        name, collection_type = book.series_name, "series"
    elif book.set_name is not None:
        name, collection_type = book.set_name, "set"
    else:
        return []

    lines = [
        f'    <meta property="belongs-to-collection" id="{COLLECTION_ID}">{text(name)}</meta>',
        f'    <meta refines="#{COLLECTION_ID}" property="collection-type">{collection_type}</meta>',
    ]
    if book.entry_number:
        lines.append(
            f'    <meta refines="#{COLLECTION_ID}" property="group-position">'
            f"{book.entry_number}</meta>"
        )
    return lines


def render_manifest(book: Book) -> list[str]:
    lines = ["  <manifest>"]
    for resource in iter_resources(book):
        properties = None
        if book.cover_id is not None and resource.id == book.cover_id:
            properties = "cover-image"
        lines.append(manifest_item(resource.id, resource.path, resource.media_type, properties))
    lines.append(manifest_item(NAV_ID, NAV_FILE, "application/xhtml+xml", "nav"))
    lines.append("  </manifest>")
    return lines


def render_opf(book: Book, now: datetime | None = None) -> str:
    """Render book.opf."""
    lines = [
        XML_DECLARATION,
        f'<package xmlns="{OPF_NAMESPACE}" version="3.0" unique-identifier="BookId">',
        *render_metadata(book, now),
        *render_manifest(book),
        "  <spine>",
        *spine_itemrefs(book),
        "  </spine>",
        "</package>",
    ]
    return "\n".join(lines) + "\n"


def render_nav_list(navpoints: list[NavPoint], indent: str = "    ") -> list[str]:
    """Render one level of the TOC as a nested ``<ol>``."""
    lines = [f"{indent}<ol>"]
    for navpoint in sorted_level(navpoints):
        lines.append(f"{indent}  <li>")
        lines.append(f'{indent}    <a href="{attr(navpoint.href)}">{navpoint.label}</a>')
        if navpoint.children:
            lines.extend(render_nav_list(navpoint.children, indent + "    "))
        lines.append(f"{indent}  </li>")
    lines.append(f"{indent}</ol>")
    return lines


def render_nav(book: Book) -> str:
    """Render the XHTML navigation document."""
    lines = [
        XML_DECLARATION,
        "<!DOCTYPE html>",
        '<html xmlns="http://www.w3.org/1999/xhtml" xmlns:epub="http://www.idpf.org/2007/ops">',
        "<head>",
        f"<title>{text(book.title)}</title>",
        "</head>",
        "<body>",
        '  <nav epub:type="toc" id="toc">',
        "    <h1>Table of Contents</h1>",
    ]
    if book.navpoints:
        lines.extend(render_nav_list(book.navpoints))
    lines.extend(["  </nav>", "</body>", "</html>"])
    return "\n".join(lines) + "\n"


def serialize_v3(book: Book, fix_xhtml: bool | None = None) -> bytes:
    """Package ``book`` as an EPUB 3 file and return the bytes.

    Args:
        book: Book to package
        fix_xhtml: Rewrite v2 doctypes in XHTML documents; defaults to
            the module-wide :data:`FIX_V2_XHTML`
    """
    if fix_xhtml is None:
        fix_xhtml = FIX_V2_XHTML
    log.debug(
        "Serializing v3: %d documents, %d navpoints", len(book.documents), len(book.navpoints)
    )

    fragments = [(content_path(NAV_FILE), render_nav(book))]
    fragments.append(
        (CONTAINER_PATH, container_xml([content_path(name) for name in rendition_names()]))
    )
    fragments.extend((content_path(name), render_opf(book)) for name in rendition_names())
    return write_package(book, fragments, fix_v2_xhtml if fix_xhtml else None)
