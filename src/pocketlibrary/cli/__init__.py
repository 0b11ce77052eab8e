# ABOUTME: CLI package for PocketLibrary, built on Click.
# ABOUTME: Defines the root command group, logging setup, and registers subcommands.

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from pocketlibrary.cli.commands import (
    branches_cmd,
    browse_cmd,
    fines_cmd,
    recommend_cmd,
    reservations_cmd,
    reserve_cmd,
    reviews_cmd,
    search_cmd,
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@click.group()
@click.version_option(package_name="pocketlibrary")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """PocketLibrary - search the library catalog, reserve books, and track fines."""
    _configure_logging(verbose)


cli.add_command(search_cmd.search)
cli.add_command(browse_cmd.browse)
cli.add_command(branches_cmd.branches)
cli.add_command(reserve_cmd.reserve)
cli.add_command(reservations_cmd.reservations)
cli.add_command(reviews_cmd.reviews)
cli.add_command(recommend_cmd.recommend)
cli.add_command(fines_cmd.fines)
