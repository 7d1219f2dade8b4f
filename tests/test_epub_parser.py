"""Tests for reading packages back with ebooklib."""

import pytest

from epub_gen.core.epub_parser import EpubInspector


@pytest.fixture
def v2_path(book, tmp_path):
    return book.write(tmp_path / "book.epub", 2)


class TestEpubInspector:
    """Tests for EpubInspector."""

    def test_metadata(self, book, v2_path):
        meta = EpubInspector(v2_path).inspect().metadata
        assert meta.title == "Test Book"
        assert meta.creators == ["Jane Doe"]
        assert meta.languages == ["en"]
        assert meta.identifier == book.identifier

    def test_spine_and_documents(self, v2_path):
        summary = EpubInspector(v2_path).inspect()
        assert summary.spine_order == ["xhtml1"]
        assert [d.file_name for d in summary.documents] == ["text/ch1.xhtml"]
        doc = summary.documents[0]
        assert doc.title == "Chapter 1"
        assert doc.in_spine
        assert doc.word_count > 0

    def test_toc_from_ncx(self, v2_path):
        toc = EpubInspector(v2_path).inspect().toc
        assert [entry.title for entry in toc] == ["Chapter 1"]
        assert [child.title for child in toc[0].children] == ["Section 1"]
        assert toc[0].children[0].level == 1

    def test_spine_follows_document_order(self, book, tmp_path):
        book.add_xhtml("text/intro.xhtml", book.documents[0].contents, -1)
        path = book.write(tmp_path / "ordered.epub", 2)
        assert EpubInspector(path).inspect().spine_order == ["xhtml2", "xhtml1"]

    def test_v3_metadata(self, book, tmp_path):
        path = book.write(tmp_path / "book3.epub", 3)
        summary = EpubInspector(path).inspect()
        assert summary.metadata.title == "Test Book"
        assert summary.spine_order == ["xhtml1"]
