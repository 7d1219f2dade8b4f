"""Build command implementation."""

import re
from pathlib import Path

from rich.console import Console
from rich.panel import Panel

from epub_gen.core.reachability import find_unreferenced
from epub_gen.core.recipe_builder import build_from_recipe, load_recipe


def get_default_output_path(recipe_path: Path, title: str) -> Path:
    """Get default output file based on the book title."""
    clean = re.sub(r"[^\w\s-]", "", title).strip()
    clean = re.sub(r"[-\s]+", "_", clean) or recipe_path.stem
    return recipe_path.parent / f"{clean}.epub"


def execute_build(
    recipe_path: Path,
    output_path: Path | None,
    version: int | None,
    check_references: bool,
    console: Console,
) -> Path:
    """Assemble the book described by ``recipe_path`` and write it."""
    recipe = load_recipe(recipe_path)
    book = build_from_recipe(recipe, recipe_path.parent)
    if version is not None:
        book.set_version(version)

    if check_references:
        unreferenced = find_unreferenced(book)
        for path in unreferenced:
            console.print(f"[yellow]Unreferenced file: {path}[/]")
        if not unreferenced:
            console.print("[dim]All files are referenced.[/]")

    output_path = output_path or get_default_output_path(recipe_path, recipe.title)
    book.write(output_path)

    console.print(
        Panel(
            f"[bold]{recipe.title}[/]\n\n"
            f"[dim]Version:[/] EPUB {book.version}\n"
            f"[dim]Documents:[/] {len(book.documents)}\n"
            f"[dim]Images:[/] {len(book.images)}\n"
            f"[dim]Output:[/] {output_path}",
            title="Book Written",
            border_style="green",
        )
    )
    return output_path
