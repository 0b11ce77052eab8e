# ABOUTME: The `pocketlibrary fines` command group for overdue fines.
# ABOUTME: Provides ls, add, and pay subcommands backed by the preferences file.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pocketlibrary.cli.options import prefs_option
from pocketlibrary.fines import FineHistoryStore, FineLedger

console = Console()


def _open_ledger(prefs_path: Path | None) -> FineLedger:
    return FineLedger(FineHistoryStore(prefs_path))


@click.group("fines")
def fines() -> None:
    """Track and pay overdue fines."""


@fines.command("ls")
@prefs_option
def fines_ls(prefs_path: Path | None) -> None:
    """List outstanding fines."""
    ledger = _open_ledger(prefs_path)

    if not ledger.has_fines:
        console.print("No outstanding fines.")
        return

    table = Table()
    table.add_column("Book", style="bold")
    table.add_column("Date")
    table.add_column("Amount", justify="right")
    for fine in ledger.fines:
        table.add_row(escape(fine.book_title), f"{fine.date:%Y-%m-%d}", f"${fine.amount:.2f}")

    console.print(table)
    console.print(f"\nTotal due: [bold]${ledger.total_amount:.2f}[/bold]")


@fines.command("add")
@click.argument("book_title")
@click.argument("amount", type=click.FloatRange(min=0.0))
@prefs_option
def fines_add(book_title: str, amount: float, prefs_path: Path | None) -> None:
    """Record a fine for BOOK_TITLE."""
    ledger = _open_ledger(prefs_path)
    fine = ledger.add_fine(book_title, amount)
    console.print(
        f"Added ${fine.amount:.2f} fine for [bold]{escape(fine.book_title)}[/bold]. "
        f"Total due: ${ledger.total_amount:.2f}"
    )


@fines.command("pay")
@prefs_option
def fines_pay(prefs_path: Path | None) -> None:
    """Pay all outstanding fines."""
    ledger = _open_ledger(prefs_path)

    if not ledger.has_fines:
        console.print("[yellow]Nothing to pay.[/yellow]")
        return

    paid = ledger.pay_all()
    console.print(f"[green]Paid ${paid:.2f}.[/green]")
