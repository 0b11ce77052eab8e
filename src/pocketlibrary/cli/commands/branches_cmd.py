# ABOUTME: The `pocketlibrary branches` command for finding nearby library branches.
# ABOUTME: Lists branches within a radius of a location, nearest first.

import asyncio

import click
from rich.console import Console
from rich.table import Table

from pocketlibrary.catalog.types import Branch, Coordinate
from pocketlibrary.cli.options import lat_option, lon_option, radius_option
from pocketlibrary.cli.runtime import open_facade

console = Console()


async def _nearby(origin: Coordinate, radius_km: float) -> list[Branch]:
    async with open_facade(offline=True) as facade:
        return await facade.nearby_branches(origin, radius_km)


@click.command("branches")
@lat_option
@lon_option
@radius_option
def branches(lat: float, lon: float, radius: float) -> None:
    """List library branches near a location."""
    nearby = asyncio.run(_nearby(Coordinate(latitude=lat, longitude=lon), radius))

    if not nearby:
        console.print(f"[yellow]No branches within {radius:g} km.[/yellow]")
        return

    table = Table()
    table.add_column("Branch", style="bold")
    table.add_column("Distance", justify="right")
    table.add_column("Copies", justify="right")
    table.add_column("Hours")
    table.add_column("Address", style="dim")

    for branch in sorted(nearby, key=lambda b: b.distance_km or 0.0):
        table.add_row(
            branch.name,
            f"{branch.distance_km:.1f} km",
            str(branch.available_copies),
            branch.hours,
            branch.address or "",
        )

    console.print(table)
    console.print(f"\n[dim]{len(nearby)} branch(es) within {radius:g} km[/dim]")
