# ABOUTME: Rich rendering helpers shared by CLI commands.
# ABOUTME: Book tables and the sample-data advisory line.

from collections.abc import Iterable

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pocketlibrary.catalog.result import SearchOutcome
from pocketlibrary.catalog.types import Book


def book_table(books: Iterable[Book]) -> Table:
    table = Table()
    table.add_column("#", style="dim", width=3)
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("Genre")
    table.add_column("ISBN", style="dim")
    table.add_column("Status")

    for index, book in enumerate(books, start=1):
        table.add_row(
            str(index),
            escape(book.title),
            escape(book.author),
            escape(book.genre),
            book.isbn or "[dim]-[/dim]",
            "[red]borrowed[/red]" if book.is_borrowed else "[green]available[/green]",
        )
    return table


def print_outcome(console: Console, outcome: SearchOutcome) -> None:
    """Print search results with the advisory, if any, above them."""
    if outcome.advisory:
        console.print(f"[yellow]{escape(outcome.advisory)}[/yellow]")

    if not outcome.books:
        console.print("[yellow]No results found.[/yellow]")
        return

    console.print(book_table(outcome.books))
    count = len(outcome.books)
    console.print(f"\n[dim]{count} result(s) from {outcome.origin.value} catalog[/dim]")
