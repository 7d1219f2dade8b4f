"""Tests for building books from recipe files."""

import json

import pytest
from pydantic import ValidationError

from epub_gen import AlreadySetError, FormatError, InvalidRoleError
from epub_gen.core.recipe_builder import build_from_recipe, load_recipe
from epub_gen.models.recipe import BookRecipe
from epub_gen.models.resources import spine_order

from .helpers import make_xhtml
from .image_fixtures import TINY_PNG


@pytest.fixture
def recipe_dir(tmp_path):
    """A directory holding the files a recipe refers to."""
    (tmp_path / "images").mkdir()
    (tmp_path / "images" / "cover.png").write_bytes(TINY_PNG)
    (tmp_path / "style.css").write_text("body {}", encoding="utf-8")
    (tmp_path / "ch1.xhtml").write_text(make_xhtml("One"), encoding="utf-8")
    (tmp_path / "ch2.xhtml").write_text(make_xhtml("Two"), encoding="utf-8")
    return tmp_path


def write_recipe(directory, data: dict):
    path = directory / "book.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


FULL_RECIPE = {
    "title": "Recipe Book",
    "version": 3,
    "uuid": "443ed275-966f-4099-8bee-5a6e1e474bb4",
    "languages": ["en"],
    "authors": ["Jane Doe"],
    "creators": [{"name": "Ann", "role": "ill"}],
    "contributors": [{"name": "Tom", "role": "trl"}],
    "publisher": "Pub",
    "subjects": ["Fiction"],
    "series": "Saga",
    "entry": "2",
    "cover": "images/cover.png",
    "images": [{"source": "images/cover.png"}],
    "stylesheets": [{"source": "style.css", "dest": "css/style.css"}],
    "documents": [
        {"source": "ch1.xhtml", "dest": "text/ch1.xhtml", "order": 2},
        {"source": "ch2.xhtml", "dest": "text/ch2.xhtml", "order": 1},
    ],
    "toc": [
        {
            "label": "One",
            "href": "text/ch1.xhtml",
            "order": 2,
            "children": [{"label": "Part", "href": "text/ch1.xhtml#p", "order": 1}],
        },
        {"label": "Two", "href": "text/ch2.xhtml", "order": 1},
    ],
}


class TestRecipeModel:
    """Tests for recipe validation."""

    def test_defaults(self):
        recipe = BookRecipe(title="T")
        assert recipe.version == 2
        assert recipe.documents == []
        assert recipe.set_name is None

    def test_set_alias(self):
        recipe = BookRecipe.model_validate({"title": "T", "set": "Box"})
        assert recipe.set_name == "Box"

    def test_invalid_version(self):
        with pytest.raises(ValidationError):
            BookRecipe.model_validate({"title": "T", "version": 4})

    def test_title_required(self):
        with pytest.raises(ValidationError):
            BookRecipe.model_validate({})

    def test_book_path_defaults_to_source(self):
        recipe = BookRecipe.model_validate(FULL_RECIPE)
        assert recipe.images[0].book_path == "images/cover.png"
        assert recipe.stylesheets[0].book_path == "css/style.css"


class TestBuildFromRecipe:
    """Tests for assembling a Book from a recipe."""

    def test_full_recipe(self, recipe_dir):
        book = build_from_recipe(load_recipe(write_recipe(recipe_dir, FULL_RECIPE)), recipe_dir)

        assert book.version == 3
        assert book.title == "Recipe Book"
        assert book.uuid == "443ed275-966f-4099-8bee-5a6e1e474bb4"
        assert book.authors == ["Jane Doe"]
        assert book.series_name == "Saga"
        assert book.entry_number == "2"
        assert book.cover_id == "img1"
        assert [d.path for d in spine_order(book.documents)] == [
            "text/ch2.xhtml",
            "text/ch1.xhtml",
        ]
        assert [n.label for n in book.navpoints] == ["One", "Two"]
        assert book.navpoints[0].children[0].href == "text/ch1.xhtml#p"

        kinds = [m.kind for m in book.metadata]
        assert kinds.count("dc:creator") == 2
        assert kinds.count("dc:contributor") == 1

    def test_documents_without_order(self, recipe_dir):
        recipe = BookRecipe.model_validate(
            {
                "title": "T",
                "documents": [{"source": "ch2.xhtml"}, {"source": "ch1.xhtml"}],
            }
        )
        book = build_from_recipe(recipe, recipe_dir)
        assert [d.path for d in spine_order(book.documents)] == ["ch2.xhtml", "ch1.xhtml"]
        assert all(d.order == 0 for d in book.documents)

    def test_unknown_cover(self, recipe_dir):
        recipe = BookRecipe.model_validate({"title": "T", "cover": "images/missing.png"})
        with pytest.raises(FormatError):
            build_from_recipe(recipe, recipe_dir)

    def test_invalid_role(self, recipe_dir):
        recipe = BookRecipe.model_validate(
            {"title": "T", "creators": [{"name": "X", "role": "xyz"}]}
        )
        with pytest.raises(InvalidRoleError):
            build_from_recipe(recipe, recipe_dir)

    def test_series_and_set(self, recipe_dir):
        recipe = BookRecipe.model_validate({"title": "T", "series": "A", "set": "B"})
        with pytest.raises(AlreadySetError):
            build_from_recipe(recipe, recipe_dir)

    def test_missing_source_file(self, recipe_dir):
        recipe = BookRecipe.model_validate(
            {"title": "T", "documents": [{"source": "missing.xhtml"}]}
        )
        with pytest.raises(OSError):
            build_from_recipe(recipe, recipe_dir)
