"""Read back an EPUB package using ebooklib."""

import warnings
from pathlib import Path

import ebooklib
from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning
from ebooklib import epub

from epub_gen.models.package import DocumentSummary, PackageMetadata, PackageSummary, TOCEntry

# Suppress XML parsing warnings - EPUB files often use XHTML
warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)


class EpubInspector:
    """Summarize the structure of an EPUB file."""

    def __init__(self, epub_path: Path):
        self.path = epub_path
        self.book = epub.read_epub(str(epub_path))

    def inspect(self) -> PackageSummary:
        """Read the package and return its summary."""
        spine = self._get_spine()
        return PackageSummary(
            metadata=self._get_metadata(),
            version=getattr(self.book, "version", None),
            toc=self._parse_toc_recursive(self.book.toc),
            documents=self._get_documents(set(spine)),
            spine_order=spine,
            item_count=len(list(self.book.get_items())),
        )

    def _first(self, name: str) -> str | None:
        values = self.book.get_metadata("DC", name)
        return values[0][0] if values else None

    def _get_metadata(self) -> PackageMetadata:
        """Extract package metadata."""
        creators = self.book.get_metadata("DC", "creator")
        languages = self.book.get_metadata("DC", "language")
        return PackageMetadata(
            title=self._first("title") or "Unknown Title",
            identifier=self._first("identifier"),
            creators=[c[0] for c in creators],
            languages=[lang[0] for lang in languages],
            publisher=self._first("publisher"),
        )

    def _parse_toc_recursive(self, toc_items: list, level: int = 0) -> list[TOCEntry]:
        """Recursively parse TOC structure."""
        entries = []
        for item in toc_items:
            if isinstance(item, tuple):
                # Section with children: (Section, [children])
                section, children = item
                entries.append(
                    TOCEntry(
                        title=section.title or "Untitled",
                        href=section.href or "",
                        level=level,
                        children=self._parse_toc_recursive(children, level + 1),
                    )
                )
            else:
                entries.append(
                    TOCEntry(title=item.title or "Untitled", href=item.href or "", level=level)
                )
        return entries

    def _get_spine(self) -> list[str]:
        """Get reading order (item ids) from the spine."""
        return [item[0] for item in self.book.spine]

    def _get_documents(self, spine_ids: set[str]) -> list[DocumentSummary]:
        """Summarize every XHTML document in the package."""
        documents = []
        for index, item in enumerate(self.book.get_items_of_type(ebooklib.ITEM_DOCUMENT)):
            content = item.get_content()
            documents.append(
                DocumentSummary(
                    id=item.get_id(),
                    title=self._extract_title(content) or item.get_name(),
                    index=index,
                    file_name=item.get_name(),
                    word_count=self._count_words(content),
                    has_images=b"<img" in content.lower(),
                    in_spine=item.get_id() in spine_ids,
                )
            )
        return documents

    def _extract_title(self, content: bytes) -> str | None:
        """Try to extract a title from the document's headings."""
        soup = BeautifulSoup(content, "lxml")
        for tag in ["h1", "h2", "title"]:
            element = soup.find(tag)
            if element:
                text = element.get_text(strip=True)
                if text:
                    return text
        return None

    def _count_words(self, content: bytes) -> int:
        soup = BeautifulSoup(content, "lxml")
        return len(soup.get_text(separator=" ", strip=True).split())
