"""In-memory model of an EPUB book."""

import logging
import re
import uuid
from datetime import datetime, timezone
from pathlib import Path

from epub_gen.core import roles
from epub_gen.core.ids import IdAllocator
from epub_gen.core.images import sniff_image
from epub_gen.errors import (
    AlreadySetError,
    CollectionConflictError,
    FormatError,
    InvalidRoleError,
    TooManyArgumentsError,
    UnsupportedFormatError,
    UnsupportedVersionError,
)
from epub_gen.models.metadata import KeyPrefix, MetadataEntry, Qualifier
from epub_gen.models.navigation import NavPoint
from epub_gen.models.resources import (
    FONT_MEDIA_TYPES,
    Font,
    Image,
    Script,
    Stylesheet,
    XhtmlDocument,
)

log = logging.getLogger(__name__)

SUPPORTED_VERSIONS = (2, 3)
ENTRY_NUMBER_PATTERN = re.compile(r"^[0-9]+(\.[0-9]+)*$")
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

ROLE_PREFIX = KeyPrefix(v2="opf:", v3="")


class Book:
    """An EPUB book under construction.

    Files, metadata and TOC entries are only ever appended. The order in
    which files are added does not matter for validity; the spine is
    sorted by each document's explicit order, then by insertion order.

    A book is meant to be built and serialized by one owner; it is not safe
    to mutate it from several threads at once.
    """

    def __init__(self) -> None:
        self.version = 2
        self.identifier = f"urn:uuid:{uuid.uuid4()}"
        self.title = ""
        self.authors: list[str] = []
        self.artists: list[str] = []
        self.series_name: str | None = None
        self.set_name: str | None = None
        self.entry_number: str | None = None
        self.cover_id: str | None = None

        self.metadata: list[MetadataEntry] = [
            MetadataEntry(
                kind="dc:identifier",
                value=self.identifier,
                pairs=[Qualifier(key="id", value="BookId")],
            )
        ]
        self.images: list[Image] = []
        self.stylesheets: list[Stylesheet] = []
        self.scripts: list[Script] = []
        self.fonts: list[Font] = []
        self.documents: list[XhtmlDocument] = []
        self.navpoints: list[NavPoint] = []

        self._ids = IdAllocator()

    # -- Versioning ---------------------------------------------------------

    def set_version(self, version: int) -> None:
        """Set the EPUB version written by :meth:`serialize` and :meth:`write`."""
        if version not in SUPPORTED_VERSIONS:
            raise UnsupportedVersionError(version)
        self.version = int(version)

    @property
    def uuid(self) -> str:
        """The book UUID without its ``urn:uuid:`` prefix."""
        return self.identifier.removeprefix("urn:uuid:")

    def set_uuid(self, value: str) -> None:
        """Replace the generated UUID.

        Readers often key books by UUID, so reuse the same one across
        revisions of a book.
        """
        try:
            parsed = uuid.UUID(value.strip().removeprefix("urn:uuid:"))
        except ValueError as e:
            raise FormatError(f"Invalid UUID: {value!r}") from e

        self.identifier = f"urn:uuid:{parsed}"
        for entry in self.metadata:
            if entry.kind == "dc:identifier":
                entry.value = self.identifier

    # -- Resources ----------------------------------------------------------

    def add_image(self, path: str, contents: bytes) -> str:
        """Add an image and return its id.

        The media type comes from the bytes, not the file name, but some
        readers trust the extension, so keep the two consistent.
        """
        subtype = sniff_image(contents)
        image = Image(id=self._ids.next_id("img"), path=path, contents=contents, subtype=subtype)
        self.images.append(image)
        return image.id

    def add_image_file(self, source: str | Path, dest: str) -> str:
        """Add the image at ``source`` under the book path ``dest``."""
        return self.add_image(dest, Path(source).read_bytes())

    def add_stylesheet(self, path: str, contents: str) -> str:
        """Add a CSS stylesheet and return its id."""
        style = Stylesheet(id=self._ids.next_id("css"), path=path, contents=contents)
        self.stylesheets.append(style)
        return style.id

    def add_stylesheet_file(self, source: str | Path, dest: str) -> str:
        """Add the stylesheet at ``source`` under the book path ``dest``."""
        return self.add_stylesheet(dest, Path(source).read_text(encoding="utf-8"))

    def add_javascript(self, path: str, contents: str) -> str:
        """Add a JavaScript file and return its id."""
        script = Script(id=self._ids.next_id("js"), path=path, contents=contents)
        self.scripts.append(script)
        return script.id

    def add_javascript_file(self, source: str | Path, dest: str) -> str:
        """Add the script at ``source`` under the book path ``dest``."""
        return self.add_javascript(dest, Path(source).read_text(encoding="utf-8"))

    def add_font(self, path: str, contents: bytes) -> str:
        """Add a font and return its id.

        Raises:
            UnsupportedFormatError: If the path has no known font extension.
        """
        suffix = Path(path).suffix.lower()
        if suffix not in FONT_MEDIA_TYPES:
            supported = ", ".join(FONT_MEDIA_TYPES)
            raise UnsupportedFormatError(
                f"Unsupported font type: {path}. Supported types: {supported}"
            )

        font = Font(id=self._ids.next_id("font"), path=path, contents=contents)
        self.fonts.append(font)
        return font.id

    def add_font_file(self, source: str | Path, dest: str) -> str:
        """Add the font at ``source`` under the book path ``dest``."""
        return self.add_font(dest, Path(source).read_bytes())

    def add_xhtml(self, path: str, contents: str, *order: int) -> str:
        """Add an XHTML content document and return its id.

        Documents appear in the spine in the order they were added. An
        optional explicit ``order`` moves a document; documents without one
        get order 0, and documents sharing an order keep insertion order.

        Raises:
            TooManyArgumentsError: If more than one order is given.
        """
        if len(order) > 1:
            raise TooManyArgumentsError(f"Expected at most one order, got {len(order)}")

        doc = XhtmlDocument(
            id=self._ids.next_id("xhtml"),
            path=path,
            contents=contents,
            order=order[0] if order else 0,
            base_order=len(self.documents),
        )
        self.documents.append(doc)
        return doc.id

    def add_xhtml_file(self, source: str | Path, dest: str, *order: int) -> str:
        """Add the XHTML file at ``source`` under the book path ``dest``."""
        return self.add_xhtml(dest, Path(source).read_text(encoding="utf-8"), *order)

    # -- Metadata -----------------------------------------------------------

    def _add_dc_item(self, name: str, value: str) -> None:
        self.metadata.append(MetadataEntry(kind=f"dc:{name}", value=value))

    def set_title(self, title: str) -> None:
        """Set the book title."""
        self.title = title
        for entry in self.metadata:
            if entry.kind == "dc:title":
                entry.value = title
                return
        self._add_dc_item("title", title)

    def add_language(self, language: str) -> None:
        """Add an RFC 3066 language code, e.g. ``en`` or ``en-GB``."""
        self._add_dc_item("language", language)

    def add_publisher(self, publisher: str) -> None:
        self._add_dc_item("publisher", publisher)

    def add_description(self, description: str) -> None:
        self._add_dc_item("description", description)

    def add_subject(self, subject: str) -> None:
        self._add_dc_item("subject", subject)

    def add_rights(self, rights: str) -> None:
        self._add_dc_item("rights", rights)

    def add_date(self, date: str) -> None:
        """Add a publication date (``YYYY``, ``YYYY-MM`` or ``YYYY-MM-DD``)."""
        self._add_dc_item("date", date)

    def _add_agent(self, kind: str, name: str, role: str) -> None:
        if not roles.is_relator(role):
            raise InvalidRoleError(role)
        self.metadata.append(
            MetadataEntry(
                kind=kind,
                value=name,
                pairs=[
                    Qualifier(
                        key="role",
                        value=role,
                        prefix=ROLE_PREFIX,
                        scheme=roles.RELATOR_SCHEME,
                    )
                ],
            )
        )

    def add_creator(self, name: str, role: str) -> None:
        """Add a creator with a MARC relator role such as ``aut`` or ``ill``.

        Raises:
            InvalidRoleError: If ``role`` is not a known relator code. The
                metadata is left unchanged.
        """
        self._add_agent("dc:creator", name, role)

    def add_contributor(self, name: str, role: str) -> None:
        """Add a secondary contributor with a MARC relator role."""
        self._add_agent("dc:contributor", name, role)

    def add_author(self, author: str) -> None:
        """Add an author; authors are also listed in the v2 TOC."""
        self.add_creator(author, roles.AUTHOR)
        self.authors.append(author)

    def add_artist(self, artist: str) -> None:
        self.add_creator(artist, roles.ARTIST)
        self.artists.append(artist)

    def set_series(self, name: str) -> None:
        """Mark the book as part of a series.

        Raises:
            AlreadySetError: If the series was already set.
            FormatError: If the name is blank.
            CollectionConflictError: If the book already belongs to a set.
        """
        if not name.strip():
            raise FormatError("Series name must not be blank")
        if self.series_name is not None:
            raise AlreadySetError(f"Series already set to {self.series_name!r}")
        if self.set_name is not None:
            raise CollectionConflictError(
                f"Book already belongs to set {self.set_name!r}; series and set are exclusive"
            )
        self.series_name = name

    def set_set(self, name: str) -> None:
        """Mark the book as part of a set (an unordered collection)."""
        if not name.strip():
            raise FormatError("Set name must not be blank")
        if self.set_name is not None:
            raise AlreadySetError(f"Set already set to {self.set_name!r}")
        if self.series_name is not None:
            raise CollectionConflictError(
                f"Book already belongs to series {self.series_name!r}; series and set are exclusive"
            )
        self.set_name = name

    def set_entry_number(self, value: str) -> None:
        """Set the book's position in its series or set, e.g. ``2`` or ``1.5``."""
        value = value.strip()
        if not ENTRY_NUMBER_PATTERN.match(value):
            raise FormatError(f"Invalid entry number: {value!r}")
        self.entry_number = value

    def set_cover_image(self, image_id: str) -> None:
        """Mark an image as the cover.

        Readers show the cover on the bookshelf, not in the text; add an
        XHTML page showing it first in the spine if the book should open on
        it.
        """
        self.metadata.append(
            MetadataEntry(
                kind="meta",
                pairs=[
                    Qualifier(key="name", value="cover"),
                    Qualifier(key="content", value=image_id),
                ],
            )
        )
        self.cover_id = image_id

    def set_modified(self, when: datetime) -> None:
        """Record the last modification time (converted to UTC)."""
        if when.tzinfo is not None:
            when = when.astimezone(timezone.utc)
        self.metadata.append(
            MetadataEntry(kind="dcterms:modified", value=when.strftime(TIMESTAMP_FORMAT))
        )

    # -- Navigation ---------------------------------------------------------

    def add_navpoint(self, label: str, href: str, order: int) -> NavPoint:
        """Add a top-level TOC entry and return it.

        ``label`` is written as-is; many readers do not unescape HTML in
        TOC labels. TOC order and spine order are independent, and not
        every document needs an entry.
        """
        navpoint = NavPoint(label=label, href=href, order=order)
        self.navpoints.append(navpoint)
        return navpoint

    # -- Output -------------------------------------------------------------

    def serialize(self, version: int | None = None) -> bytes:
        """Return the packaged book as bytes.

        Args:
            version: EPUB version to write; defaults to :attr:`version`.
        """
        version = self.version if version is None else version
        log.info("Writing EPUB version %s", version)
        if version == 2:
            from epub_gen.core.opf_v2 import serialize_v2

            return serialize_v2(self)
        elif version == 3:
            from epub_gen.core.opf_v3 import serialize_v3

            return serialize_v3(self)
        raise UnsupportedVersionError(version)

    def write(self, path: str | Path, version: int | None = None) -> Path:
        """Serialize the book and write it to ``path``."""
        data = self.serialize(version)
        path = Path(path)
        path.write_bytes(data)
        return path
