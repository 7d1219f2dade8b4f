"""EPUB 2 writer: content.opf, toc.ncx and the container file."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from epub_gen.core.archive import CONTAINER_PATH, container_xml, content_path, write_package
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
from epub_gen.models.navigation import NavPoint, sorted_level, tree_depth

if TYPE_CHECKING:
    from epub_gen.core.book import Book
    from epub_gen.models.metadata import MetadataEntry

log = logging.getLogger(__name__)

PACKAGE_FILE = "content.opf"
NCX_FILE = "toc.ncx"
NCX_ID = "ncx"
NCX_MEDIA_TYPE = "application/x-dtbncx+xml"
NAVPOINT_BASE_ID = "navpointid"


def render_metadata_entry(entry: MetadataEntry) -> str:
    """Render one metadata statement with its qualifiers inline."""
    if entry.kind == "dcterms:modified":
        # OPF 2 has no dcterms; a modification date is an event-tagged dc:date
        return f'    <dc:date opf:event="modification">{text(entry.value or "")}</dc:date>'

    attrs = "".join(f' {p.v2_name()}="{attr(p.value)}"' for p in entry.pairs)
    if entry.has_value:
        return f"    <{entry.kind}{attrs}>{text(entry.value)}</{entry.kind}>"
    return f"    <{entry.kind}{attrs} />"


def render_metadata(book: Book) -> list[str]:
    lines = [f'  <metadata xmlns:dc="{DC_NAMESPACE}" xmlns:opf="{OPF_NAMESPACE}">']
    lines.extend(render_metadata_entry(entry) for entry in book.metadata)

    collection = book.series_name or book.set_name
    if collection:
        lines.append(f'    <meta name="calibre:series" content="{attr(collection)}" />')
        if book.entry_number:
            lines.append(f'    <meta name="calibre:series_index" content="{book.entry_number}" />')

    lines.append("  </metadata>")
    return lines


def render_manifest(book: Book) -> list[str]:
    lines = ["  <manifest>", manifest_item(NCX_ID, NCX_FILE, NCX_MEDIA_TYPE)]
    lines.extend(manifest_item(r.id, r.path, r.media_type) for r in iter_resources(book))
    lines.append("  </manifest>")
    return lines


def render_spine(book: Book) -> list[str]:
    return [f'  <spine toc="{NCX_ID}">', *spine_itemrefs(book), "  </spine>"]


def render_opf(book: Book) -> str:
    """Render content.opf."""
    lines = [
        XML_DECLARATION,
        f'<package xmlns="{OPF_NAMESPACE}" version="2.0" unique-identifier="BookId">',
        *render_metadata(book),
        *render_manifest(book),
        *render_spine(book),
        "</package>",
    ]
    return "\n".join(lines) + "\n"


def render_navpoints(
    navpoints: list[NavPoint],
    play_order: int = 1,
    base_id: str = NAVPOINT_BASE_ID,
    indent: str = "    ",
) -> tuple[list[str], int]:
    """Render one level of the navMap, depth first.

    Each level is sorted by ``order``. Every node takes the current play
    order and increments it once, so numbering is pre-order across the
    whole tree.

    Returns:
        Tuple of (rendered lines, next unused play order)
    """
    lines: list[str] = []
    for i, navpoint in enumerate(sorted_level(navpoints)):
        node_id = f"{base_id}_{i}"
        lines.append(f'{indent}<navPoint id="{node_id}" playOrder="{play_order}">')
        play_order += 1
        lines.append(f"{indent}  <navLabel>")
        lines.append(f"{indent}    <text>{navpoint.label}</text>")
        lines.append(f"{indent}  </navLabel>")
        lines.append(f'{indent}  <content src="{attr(navpoint.href)}" />')
        if navpoint.children:
            child_lines, play_order = render_navpoints(
                navpoint.children, play_order, node_id, indent + "  "
            )
            lines.extend(child_lines)
        lines.append(f"{indent}</navPoint>")
    return lines, play_order


def render_ncx(book: Book) -> str:
    """Render toc.ncx."""
    lines = [
        XML_DECLARATION,
        '<!DOCTYPE ncx PUBLIC "-//NISO//DTD ncx 2005-1//EN" '
        '"http://www.daisy.org/z3986/2005/ncx-2005-1.dtd">',
        '<ncx version="2005-1" xmlns="http://www.daisy.org/z3986/2005/ncx/">',
        "  <head>",
        f'    <meta name="dtb:uid" content="{attr(book.identifier)}" />',
        f'    <meta name="dtb:depth" content="{max(tree_depth(book.navpoints), 1)}" />',
        '    <meta name="dtb:totalPageCount" content="0" />',
        '    <meta name="dtb:maxPageNumber" content="0" />',
        "  </head>",
        "  <docTitle>",
        f"    <text>{text(book.title)}</text>",
        "  </docTitle>",
    ]
    if book.authors:
        lines.append("  <docAuthor>")
        lines.extend(f"    <text>{text(author)}</text>" for author in book.authors)
        lines.append("  </docAuthor>")

    lines.append("  <navMap>")
    navpoint_lines, _ = render_navpoints(book.navpoints)
    lines.extend(navpoint_lines)
    lines.append("  </navMap>")
    lines.append("</ncx>")
    return "\n".join(lines) + "\n"


def serialize_v2(book: Book) -> bytes:
    """Package ``book`` as an EPUB 2 file and return the bytes."""
    log.debug(
        "Serializing v2: %d documents, %d navpoints", len(book.documents), len(book.navpoints)
    )
    fragments = [
        (content_path(PACKAGE_FILE), render_opf(book)),
        (content_path(NCX_FILE), render_ncx(book)),
        (CONTAINER_PATH, container_xml([content_path(PACKAGE_FILE)])),
    ]
    return write_package(book, fragments)
