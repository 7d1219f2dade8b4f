"""Build EPUB 2 and EPUB 3 books from XHTML, images and metadata."""

from epub_gen.core.book import Book
from epub_gen.core.opf_v2 import serialize_v2
from epub_gen.core.opf_v3 import serialize_v3
from epub_gen.errors import (
    AlreadySetError,
    CollectionConflictError,
    DecodeError,
    EpubError,
    FormatError,
    InvalidRoleError,
    TooManyArgumentsError,
    UnsupportedFormatError,
    UnsupportedVersionError,
)
from epub_gen.models.navigation import NavPoint

__version__ = "0.1.0"

__all__ = [
    "Book",
    "NavPoint",
    "serialize_v2",
    "serialize_v3",
    # Errors
    "EpubError",
    "DecodeError",
    "UnsupportedFormatError",
    "InvalidRoleError",
    "AlreadySetError",
    "CollectionConflictError",
    "FormatError",
    "TooManyArgumentsError",
    "UnsupportedVersionError",
]
