# ABOUTME: The `pocketlibrary browse` command for browsing books by genre.
# ABOUTME: Searches by genre name and labels untagged books with the browsed genre.

import asyncio

import click
from rich.console import Console

from pocketlibrary.catalog.result import SearchOutcome
from pocketlibrary.cli.options import endpoint_option, offline_option
from pocketlibrary.cli.render import print_outcome
from pocketlibrary.cli.runtime import open_facade
from pocketlibrary.config import CatalogConfig

console = Console()


async def _browse(genre: str, term: str, offline: bool, config: CatalogConfig) -> SearchOutcome:
    async with open_facade(offline=offline, config=config) as facade:
        return await facade.browse_genre(genre, term)


@click.command("browse")
@click.argument("genre")
@click.option(
    "--filter",
    "term",
    default="",
    metavar="TEXT",
    help="Only show books whose title or author contains TEXT.",
)
@offline_option
@endpoint_option
def browse(genre: str, term: str, offline: bool, endpoint: str) -> None:
    """Browse books in a genre."""
    config = CatalogConfig(search_endpoint=endpoint)
    outcome = asyncio.run(_browse(genre, term, offline, config))
    print_outcome(console, outcome)
