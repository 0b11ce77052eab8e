# ABOUTME: The `pocketlibrary reserve` command for placing a hold on a book.
# ABOUTME: Reserves the first search match at the nearest branch within the radius.

import asyncio

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pocketlibrary.catalog.result import SearchOutcome
from pocketlibrary.catalog.types import Branch, Coordinate, Reservation
from pocketlibrary.cli.options import (
    endpoint_option,
    lat_option,
    lon_option,
    offline_option,
    radius_option,
)
from pocketlibrary.cli.runtime import open_facade
from pocketlibrary.config import CatalogConfig

console = Console()


async def _reserve(
    query: str,
    offline: bool,
    config: CatalogConfig,
    origin: Coordinate,
    radius_km: float,
) -> tuple[SearchOutcome, Branch | None, Reservation | None]:
    async with open_facade(offline=offline, config=config) as facade:
        outcome = await facade.search_books(query)
        if not outcome.books:
            return outcome, None, None
        nearby = await facade.nearby_branches(origin, radius_km)
        if not nearby:
            return outcome, None, None
        branch = min(nearby, key=lambda b: b.distance_km or 0.0)
        reservation = await facade.create_reservation(outcome.books[0], branch.id)
        return outcome, branch, reservation


@click.command("reserve")
@click.argument("query")
@offline_option
@endpoint_option
@lat_option
@lon_option
@radius_option
def reserve(
    query: str,
    offline: bool,
    endpoint: str,
    lat: float,
    lon: float,
    radius: float,
) -> None:
    """Reserve the best match for QUERY at the nearest branch."""
    outcome, branch, reservation = asyncio.run(
        _reserve(
            query,
            offline,
            CatalogConfig(search_endpoint=endpoint),
            Coordinate(latitude=lat, longitude=lon),
            radius,
        )
    )

    if outcome.advisory:
        console.print(f"[yellow]{escape(outcome.advisory)}[/yellow]")
    if not outcome.books:
        console.print(f"[red]No book matches {escape(query)!r}.[/red]")
        raise SystemExit(1)
    if branch is None or reservation is None:
        console.print(f"[red]No branch within {radius:g} km.[/red]")
        raise SystemExit(1)

    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=14)
    table.add_column("Value")
    table.add_row("Book", escape(reservation.book.title))
    table.add_row("Author", escape(reservation.book.author))
    table.add_row("Branch", branch.name)
    table.add_row("Distance", f"{branch.distance_km:.1f} km")
    table.add_row("Queue", f"#{reservation.queue_position}")
    table.add_row("Expires", f"{reservation.expires_at:%Y-%m-%d %H:%M} UTC")

    console.print(f"[green]'{escape(reservation.book.title)}' reserved successfully![/green]")
    console.print(table)
