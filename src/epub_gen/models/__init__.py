"""Data models."""

from epub_gen.models.metadata import KeyPrefix, MetadataEntry, Qualifier
from epub_gen.models.navigation import NavPoint
from epub_gen.models.package import (
    DocumentSummary,
    PackageMetadata,
    PackageSummary,
    TOCEntry,
)
from epub_gen.models.recipe import (
    AgentSpec,
    BookRecipe,
    DocumentSpec,
    ResourceSpec,
    TocSpec,
)
from epub_gen.models.resources import (
    Font,
    Image,
    Script,
    Stylesheet,
    XhtmlDocument,
)

__all__ = [
    # Book content models
    "Image",
    "Stylesheet",
    "Script",
    "Font",
    "XhtmlDocument",
    "KeyPrefix",
    "Qualifier",
    "MetadataEntry",
    "NavPoint",
    # Recipe models
    "AgentSpec",
    "ResourceSpec",
    "DocumentSpec",
    "TocSpec",
    "BookRecipe",
    # Package summary models
    "TOCEntry",
    "DocumentSummary",
    "PackageMetadata",
    "PackageSummary",
]
