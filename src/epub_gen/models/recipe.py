"""Data models for book recipe files used by ``epub-gen build``."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class AgentSpec(BaseModel):
    """A creator or contributor with a MARC relator role."""

    name: str
    role: str = "aut"


class ResourceSpec(BaseModel):
    """A file on disk and where it goes in the book."""

    source: str  # Relative to the recipe file
    dest: str | None = None  # Book path; defaults to ``source``

    @property
    def book_path(self) -> str:
        return self.dest or self.source


class DocumentSpec(ResourceSpec):
    """An XHTML document, optionally with an explicit spine order."""

    order: int | None = None


class TocSpec(BaseModel):
    """A TOC entry and its children."""

    label: str
    href: str
    order: int = 0
    children: list["TocSpec"] = Field(default_factory=list)


class BookRecipe(BaseModel):
    """Everything needed to assemble a book from files on disk."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    version: Literal[2, 3] = 2
    uuid: str | None = None
    languages: list[str] = Field(default_factory=list)
    authors: list[str] = Field(default_factory=list)
    artists: list[str] = Field(default_factory=list)
    creators: list[AgentSpec] = Field(default_factory=list)
    contributors: list[AgentSpec] = Field(default_factory=list)
    publisher: str | None = None
    description: str | None = None
    subjects: list[str] = Field(default_factory=list)
    rights: str | None = None
    date: str | None = None
    series: str | None = None
    set_name: str | None = Field(default=None, alias="set")
    entry: str | None = None
    cover: str | None = None  # Book path of one of ``images``
    images: list[ResourceSpec] = Field(default_factory=list)
    stylesheets: list[ResourceSpec] = Field(default_factory=list)
    scripts: list[ResourceSpec] = Field(default_factory=list)
    fonts: list[ResourceSpec] = Field(default_factory=list)
    documents: list[DocumentSpec] = Field(default_factory=list)
    toc: list[TocSpec] = Field(default_factory=list)
