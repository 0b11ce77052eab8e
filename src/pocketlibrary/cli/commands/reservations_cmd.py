# ABOUTME: The `pocketlibrary reservations` command for reviewing held books.
# ABOUTME: Seeds demo holds for the run, optionally cancels one, and lists the rest.

import asyncio

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pocketlibrary.catalog.sample_data import SAMPLE_BRANCHES
from pocketlibrary.catalog.types import Reservation
from pocketlibrary.cli.runtime import open_facade

console = Console()


async def _reservations(cancel: int | None) -> tuple[Reservation | None, list[Reservation]]:
    async with open_facade(offline=True) as facade:
        held = await facade.seed_sample_reservations()
        if cancel is None or cancel > len(held):
            return None, held
        target = held[cancel - 1]
        await facade.cancel_reservation(target.id)
        return target, await facade.reservations()


@click.command("reservations")
@click.option(
    "--cancel",
    type=click.IntRange(min=1),
    default=None,
    metavar="N",
    help="Cancel the Nth listed reservation.",
)
def reservations(cancel: int | None) -> None:
    """List demo reservations for this run."""
    cancelled, held = asyncio.run(_reservations(cancel))

    if cancel is not None:
        if cancelled is None:
            console.print(f"[red]No reservation #{cancel}.[/red]")
            raise SystemExit(1)
        console.print(f"[green]Cancelled '{escape(cancelled.book.title)}'.[/green]")

    if not held:
        console.print("No active reservations.")
        return

    branch_names = {branch.id: branch.name for branch in SAMPLE_BRANCHES}
    table = Table()
    table.add_column("#", style="dim", width=3)
    table.add_column("Title", style="bold")
    table.add_column("Branch")
    table.add_column("Queue", justify="right")
    table.add_column("Expires")
    for index, reservation in enumerate(held, start=1):
        table.add_row(
            str(index),
            escape(reservation.book.title),
            branch_names.get(reservation.branch_id, str(reservation.branch_id)),
            f"#{reservation.queue_position}",
            f"{reservation.expires_at:%Y-%m-%d %H:%M} UTC",
        )
    console.print(table)
