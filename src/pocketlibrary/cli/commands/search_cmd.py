# ABOUTME: The `pocketlibrary search` command for free-text catalog search.
# ABOUTME: Queries Open Library and falls back to sample data with an advisory.

import asyncio

import click
from rich.console import Console

from pocketlibrary.catalog.result import SearchOutcome
from pocketlibrary.cli.options import endpoint_option, offline_option
from pocketlibrary.cli.render import print_outcome
from pocketlibrary.cli.runtime import open_facade
from pocketlibrary.config import DEFAULT_SEARCH_LIMIT, CatalogConfig

console = Console()


async def _search(query: str, offline: bool, config: CatalogConfig) -> SearchOutcome:
    async with open_facade(offline=offline, config=config) as facade:
        return await facade.search_books(query)


@click.command("search")
@click.argument("query", default="")
@offline_option
@endpoint_option
@click.option(
    "--limit",
    type=click.IntRange(1, 100),
    default=DEFAULT_SEARCH_LIMIT,
    show_default=True,
    help="Maximum number of remote results.",
)
def search(query: str, offline: bool, endpoint: str, limit: int) -> None:
    """Search the catalog by title, author, genre, or ISBN.

    With no QUERY, browses the whole sample catalog.
    """
    config = CatalogConfig(search_endpoint=endpoint, search_limit=limit)
    outcome = asyncio.run(_search(query, offline, config))
    print_outcome(console, outcome)
