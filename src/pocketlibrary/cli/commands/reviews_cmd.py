# ABOUTME: The `pocketlibrary reviews` command for reading and writing book reviews.
# ABOUTME: Optionally submits a validated review, then lists reviews newest first.

import asyncio

import click
from rich.console import Console
from rich.markup import escape

from pocketlibrary.catalog.types import Book, Review
from pocketlibrary.cli.runtime import open_facade
from pocketlibrary.reviews import ReviewValidationError, build_review

console = Console()


async def _reviews(
    query: str,
    name: str | None,
    rating: int,
    comment: str | None,
) -> tuple[Book | None, list[Review]]:
    async with open_facade(offline=True) as facade:
        outcome = await facade.search_books(query)
        if not outcome.books:
            return None, []
        book = outcome.books[0]
        if name is not None or comment is not None:
            review = build_review(book.id, name or "", rating, comment or "")
            await facade.add_review(review)
        return book, await facade.fetch_reviews(book.id)


@click.command("reviews")
@click.argument("query")
@click.option("--name", default=None, help="Your name, to submit a review.")
@click.option("--rating", type=click.IntRange(1, 5), default=5, show_default=True)
@click.option("--comment", default=None, help="Review text, to submit a review.")
def reviews(query: str, name: str | None, rating: int, comment: str | None) -> None:
    """Show reviews for the first sample book matching QUERY."""
    try:
        book, book_reviews = asyncio.run(_reviews(query, name, rating, comment))
    except ReviewValidationError as exc:
        console.print(f"[red]Invalid review: {escape(str(exc))}[/red]")
        raise SystemExit(1) from exc

    if book is None:
        console.print(f"[red]No book matches {escape(query)!r}.[/red]")
        raise SystemExit(1)

    console.print(f"[bold]{escape(book.title)}[/bold] by {escape(book.author)}")
    if not book_reviews:
        console.print("[yellow]No reviews yet.[/yellow]")
        return

    for review in book_reviews:
        stars = "★" * review.rating + "☆" * (5 - review.rating)
        console.print(
            f"\n{stars}  [bold]{escape(review.user_name)}[/bold] "
            f"[dim]{review.created_at:%Y-%m-%d}[/dim]"
        )
        console.print(escape(review.comment))
