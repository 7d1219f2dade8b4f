"""Main CLI application."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from epub_gen.commands.build import execute_build
from epub_gen.commands.info import execute_info

app = typer.Typer(
    name="epub-gen",
    help="Build EPUB 2 and EPUB 3 books from XHTML, images and metadata.",
    add_completion=False,
)

console = Console()


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging"),
    ] = False,
) -> None:
    """Build EPUB 2 and EPUB 3 books from XHTML, images and metadata."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


@app.command()
def build(
    recipe_path: Annotated[
        Path,
        typer.Argument(
            help="Path to the JSON book recipe",
            exists=True,
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Output file (default: {title}.epub next to the recipe)",
        ),
    ] = None,
    version: Annotated[
        Optional[int],
        typer.Option(
            "--version",
            help="EPUB version to write: 2 or 3 (default: from recipe)",
        ),
    ] = None,
    check_references: Annotated[
        bool,
        typer.Option(
            "--check-references",
            help="Warn about images, stylesheets, scripts and fonts nothing links to",
        ),
    ] = False,
) -> None:
    """Assemble a book from a recipe file and write the EPUB."""
    if version is not None and version not in (2, 3):
        console.print(f"[red]Invalid version: {version}. Use 2 or 3.[/]")
        raise typer.Exit(1)

    try:
        execute_build(
            recipe_path=recipe_path,
            output_path=output,
            version=version,
            check_references=check_references,
            console=console,
        )
    except Exception as e:
        console.print(f"[red]Error: {e}[/]")
        raise typer.Exit(1)


@app.command()
def info(
    epub_path: Annotated[
        Path,
        typer.Argument(
            help="Path to the EPUB file",
            exists=True,
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
) -> None:
    """Display book metadata, table of contents and documents."""
    if epub_path.suffix.lower() != ".epub":
        console.print(f"[red]Unsupported file format: {epub_path.suffix}[/]")
        console.print("[dim]Supported formats: .epub[/]")
        raise typer.Exit(1)

    try:
        execute_info(epub_path, console)
    except Exception as e:
        console.print(f"[red]Error reading file: {e}[/]")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
