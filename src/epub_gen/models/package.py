"""Data models describing an existing EPUB package (``epub-gen info``)."""

from pydantic import BaseModel, Field


class TOCEntry(BaseModel):
    """Single entry in a package's table of contents."""

    title: str
    href: str
    level: int = 0
    children: list["TOCEntry"] = Field(default_factory=list)


class DocumentSummary(BaseModel):
    """A content document as found in the package."""

    id: str
    title: str
    index: int
    file_name: str
    word_count: int = 0
    has_images: bool = False
    in_spine: bool = True


class PackageMetadata(BaseModel):
    """Package-level metadata."""

    title: str
    identifier: str | None = None
    creators: list[str] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)
    publisher: str | None = None


class PackageSummary(BaseModel):
    """Complete summary of an EPUB package."""

    metadata: PackageMetadata
    version: str | None = None
    toc: list[TOCEntry] = Field(default_factory=list)
    documents: list[DocumentSummary] = Field(default_factory=list)
    spine_order: list[str] = Field(default_factory=list)
    item_count: int = 0
