"""Assemble a Book from a recipe file."""

import logging
from pathlib import Path

from epub_gen.core.book import Book
from epub_gen.errors import FormatError
from epub_gen.models.navigation import NavPoint
from epub_gen.models.recipe import BookRecipe, TocSpec

log = logging.getLogger(__name__)


def load_recipe(path: Path) -> BookRecipe:
    """Read and validate a JSON recipe file."""
    return BookRecipe.model_validate_json(path.read_text(encoding="utf-8"))


def _add_toc(parent: Book | NavPoint, entries: list[TocSpec]) -> None:
    for entry in entries:
        navpoint = parent.add_navpoint(entry.label, entry.href, entry.order)
        _add_toc(navpoint, entry.children)


def build_from_recipe(recipe: BookRecipe, base_dir: Path) -> Book:
    """Create a Book from ``recipe``, reading files relative to ``base_dir``.

    Raises:
        FormatError: If ``cover`` names a path that is not among the images
        OSError: If a source file cannot be read
    """
    book = Book()
    book.set_version(recipe.version)
    if recipe.uuid:
        book.set_uuid(recipe.uuid)

    book.set_title(recipe.title)
    for language in recipe.languages:
        book.add_language(language)
    for author in recipe.authors:
        book.add_author(author)
    for artist in recipe.artists:
        book.add_artist(artist)
    for creator in recipe.creators:
        book.add_creator(creator.name, creator.role)
    for contributor in recipe.contributors:
        book.add_contributor(contributor.name, contributor.role)
    if recipe.publisher:
        book.add_publisher(recipe.publisher)
    if recipe.description:
        book.add_description(recipe.description)
    for subject in recipe.subjects:
        book.add_subject(subject)
    if recipe.rights:
        book.add_rights(recipe.rights)
    if recipe.date:
        book.add_date(recipe.date)

    if recipe.series:
        book.set_series(recipe.series)
    if recipe.set_name:
        book.set_set(recipe.set_name)
    if recipe.entry:
        book.set_entry_number(recipe.entry)

    image_ids: dict[str, str] = {}
    for spec in recipe.images:
        image_ids[spec.book_path] = book.add_image_file(base_dir / spec.source, spec.book_path)
    for spec in recipe.stylesheets:
        book.add_stylesheet_file(base_dir / spec.source, spec.book_path)
    for spec in recipe.scripts:
        book.add_javascript_file(base_dir / spec.source, spec.book_path)
    for spec in recipe.fonts:
        book.add_font_file(base_dir / spec.source, spec.book_path)
    for spec in recipe.documents:
        order = () if spec.order is None else (spec.order,)
        book.add_xhtml_file(base_dir / spec.source, spec.book_path, *order)

    if recipe.cover:
        if recipe.cover not in image_ids:
            raise FormatError(f"Cover {recipe.cover!r} is not one of the book's images")
        book.set_cover_image(image_ids[recipe.cover])

    _add_toc(book, recipe.toc)

    log.info(
        "Assembled %r: %d documents, %d images", recipe.title, len(book.documents), len(book.images)
    )
    return book
