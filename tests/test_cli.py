"""Tests for the command line interface."""

import json
import zipfile

import pytest
from typer.testing import CliRunner

from epub_gen.cli import app
from epub_gen.commands.build import get_default_output_path

from .helpers import make_xhtml
from .image_fixtures import TINY_PNG

runner = CliRunner()


@pytest.fixture
def recipe_path(tmp_path):
    (tmp_path / "cover.png").write_bytes(TINY_PNG)
    (tmp_path / "ch1.xhtml").write_text(make_xhtml("One"), encoding="utf-8")
    (tmp_path / "extra.png").write_bytes(TINY_PNG)
    recipe = {
        "title": "CLI Book",
        "authors": ["Jane Doe"],
        "languages": ["en"],
        "cover": "images/cover.png",
        "images": [
            {"source": "cover.png", "dest": "images/cover.png"},
            {"source": "extra.png", "dest": "images/extra.png"},
        ],
        "documents": [{"source": "ch1.xhtml", "dest": "text/ch1.xhtml"}],
        "toc": [{"label": "One", "href": "text/ch1.xhtml"}],
    }
    path = tmp_path / "book.json"
    path.write_text(json.dumps(recipe), encoding="utf-8")
    return path


class TestBuildCommand:
    """Tests for ``epub-gen build``."""

    def test_build_default_output(self, recipe_path):
        result = runner.invoke(app, ["build", str(recipe_path)])
        assert result.exit_code == 0, result.output
        out = recipe_path.parent / "CLI_Book.epub"
        assert out.exists()
        with zipfile.ZipFile(out) as zf:
            assert "OPS/content.opf" in zf.namelist()

    def test_build_version_override(self, recipe_path, tmp_path):
        out = tmp_path / "v3.epub"
        result = runner.invoke(app, ["build", str(recipe_path), "-o", str(out), "--version", "3"])
        assert result.exit_code == 0, result.output
        with zipfile.ZipFile(out) as zf:
            assert "OPS/book.opf" in zf.namelist()

    def test_invalid_version(self, recipe_path):
        result = runner.invoke(app, ["build", str(recipe_path), "--version", "4"])
        assert result.exit_code == 1
        assert "Invalid version" in result.output

    def test_check_references(self, recipe_path):
        result = runner.invoke(app, ["build", str(recipe_path), "--check-references"])
        assert result.exit_code == 0, result.output
        assert "images/extra.png" in result.output
        assert "Unreferenced file: images/cover.png" not in result.output

    def test_bad_recipe(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text('{"version": 2}', encoding="utf-8")
        result = runner.invoke(app, ["build", str(path)])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_missing_recipe(self, tmp_path):
        result = runner.invoke(app, ["build", str(tmp_path / "nope.json")])
        assert result.exit_code != 0


class TestInfoCommand:
    """Tests for ``epub-gen info``."""

    def test_info(self, book, tmp_path):
        path = book.write(tmp_path / "book.epub")
        result = runner.invoke(app, ["info", str(path)])
        assert result.exit_code == 0, result.output
        assert "Test Book" in result.output
        assert "Jane Doe" in result.output
        assert "Chapter 1" in result.output

    def test_rejects_other_formats(self, tmp_path):
        path = tmp_path / "book.pdf"
        path.write_bytes(b"%PDF")
        result = runner.invoke(app, ["info", str(path)])
        assert result.exit_code == 1
        assert "Unsupported file format" in result.output


def test_default_output_path(tmp_path):
    recipe = tmp_path / "recipe.json"
    assert get_default_output_path(recipe, "My Book: Part 1") == tmp_path / "My_Book_Part_1.epub"
    assert get_default_output_path(recipe, "???") == tmp_path / "recipe.epub"
