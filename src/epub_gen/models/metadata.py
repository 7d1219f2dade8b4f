"""Data models for package metadata statements."""

from pydantic import BaseModel, Field


class KeyPrefix(BaseModel):
    """How a qualifier key is prefixed under each package version.

    EPUB 2 writes qualifiers inline as (often ``opf:``-namespaced)
    attributes; EPUB 3 writes them as ``<meta refines=...>`` properties.
    """

    v2: str = ""
    v3: str = ""


class Qualifier(BaseModel):
    """A key/value attached to a metadata statement."""

    key: str
    value: str
    prefix: KeyPrefix = Field(default_factory=KeyPrefix)
    scheme: str | None = None  # Controlled vocabulary, e.g. marc:relators

    def v2_name(self) -> str:
        return f"{self.prefix.v2}{self.key}"

    def v3_name(self) -> str:
        return f"{self.prefix.v3}{self.key}"


class MetadataEntry(BaseModel):
    """One metadata statement (``dc:title``, ``dc:creator``, ``meta``...).

    An entry without a value renders as an empty element; one with a value
    renders it as text content.
    """

    kind: str
    value: str | None = None
    pairs: list[Qualifier] = Field(default_factory=list)

    @property
    def has_value(self) -> bool:
        return bool(self.value)
