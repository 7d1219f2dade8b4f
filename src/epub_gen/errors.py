"""Errors raised while building or serializing a book."""


class EpubError(Exception):
    """Base class for epub-gen errors."""

    error_type = "EPUB_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"{self.error_type}: {message}")


class DecodeError(EpubError):
    """Image content could not be identified as a supported raster format."""

    error_type = "DECODE_ERROR"


class UnsupportedFormatError(EpubError):
    """Resource has a file format the book cannot carry."""

    error_type = "UNSUPPORTED_FORMAT"


class InvalidRoleError(EpubError):
    """Creator or contributor role is not a known MARC relator code."""

    error_type = "INVALID_ROLE"

    def __init__(self, role: str):
        self.role = role
        super().__init__(f"Unknown relator code: {role!r}")


class AlreadySetError(EpubError):
    """A set-once attribute was assigned a second time."""

    error_type = "ALREADY_SET"


class CollectionConflictError(AlreadySetError):
    """Book already belongs to a collection of the other type."""

    error_type = "COLLECTION_CONFLICT"


class FormatError(EpubError):
    """A value does not match its required textual format."""

    error_type = "FORMAT_ERROR"


class TooManyArgumentsError(EpubError):
    """More optional positional values were given than accepted."""

    error_type = "TOO_MANY_ARGUMENTS"


class UnsupportedVersionError(EpubError):
    """Requested EPUB version is neither 2 nor 3."""

    error_type = "UNSUPPORTED_VERSION"

    def __init__(self, version: object):
        self.version = version
        super().__init__(f"EPUB version {version} is unsupported")
