"""Info command implementation."""

from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from epub_gen.core.epub_parser import EpubInspector
from epub_gen.models.package import PackageSummary, TOCEntry


def _flatten(entries: list[TOCEntry]) -> list[TOCEntry]:
    flat: list[TOCEntry] = []
    for entry in entries:
        flat.append(entry)
        flat.extend(_flatten(entry.children))
    return flat


def display_summary(summary: PackageSummary, console: Console) -> None:
    """Print package metadata, TOC and documents."""
    meta = summary.metadata
    info_lines = [
        f"[bold]{meta.title}[/]",
        "",
        f"[dim]Creator(s):[/] {', '.join(meta.creators) or 'Unknown'}",
        f"[dim]Identifier:[/] {meta.identifier or 'Unknown'}",
        f"[dim]Language:[/] {', '.join(meta.languages) or 'Unknown'}",
        f"[dim]Publisher:[/] {meta.publisher or 'Unknown'}",
        f"[dim]EPUB version:[/] {summary.version or 'Unknown'}",
        f"[dim]Manifest items:[/] {summary.item_count}",
    ]
    console.print()
    console.print(Panel("\n".join(info_lines), title="Book Information", border_style="green"))

    if summary.toc:
        console.print()
        table = Table(title="Table of Contents", show_header=True, header_style="bold cyan")
        table.add_column("Title", style="white")
        table.add_column("Target", style="dim")
        for entry in _flatten(summary.toc):
            table.add_row(f"{'  ' * entry.level}{entry.title}", entry.href)
        console.print(table)

    console.print()
    table = Table(title="Documents", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Title", style="white")
    table.add_column("File", style="dim")
    table.add_column("Words", justify="right", style="green")
    for doc in summary.documents:
        title = doc.title if doc.in_spine else f"{doc.title} [yellow](not in spine)[/]"
        table.add_row(str(doc.index + 1), title, doc.file_name, f"{doc.word_count:,}")
    console.print(table)
    console.print()


def execute_info(epub_path: Path, console: Console) -> PackageSummary:
    """Inspect ``epub_path`` and print its summary."""
    summary = EpubInspector(epub_path).inspect()
    display_summary(summary, console)
    return summary
