# ABOUTME: The `pocketlibrary recommend` command for genre-based suggestions.
# ABOUTME: Looks up viewed titles in the sample catalog and suggests available books.

import click
from rich.console import Console
from rich.markup import escape

from pocketlibrary.catalog.fallback import FallbackCatalog
from pocketlibrary.cli.render import book_table
from pocketlibrary.recommendations import recommend_books
from pocketlibrary.session import LibrarySession

console = Console()


@click.command("recommend")
@click.argument("titles", nargs=-1, required=True)
def recommend(titles: tuple[str, ...]) -> None:
    """Recommend sample books similar to the given TITLES."""
    catalog = FallbackCatalog(LibrarySession())

    viewed = []
    for title in titles:
        matches = catalog.search_books(title)
        if matches:
            viewed.append(matches[0])
        else:
            console.print(f"[dim]Skipping unknown title {escape(title)!r}[/dim]")

    picks = recommend_books(viewed, catalog.books)
    if not picks:
        console.print("[yellow]No recommendations yet.[/yellow]")
        return

    console.print(book_table(picks))
