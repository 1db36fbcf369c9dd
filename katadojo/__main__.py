"""CLI for the katadojo kata collection.

Usage:
    python -m katadojo list                              # Show available katas
    python -m katadojo report                            # Sample expense report (plain text)
    python -m katadojo report --format html              # ... as HTML
    python -m katadojo report --format json --date 2024-03-15
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from katadojo.katas import list_katas
from katadojo.katas.expense_report import (
    FORMATTERS,
    Expense,
    ExpenseType,
    FixedClock,
    SystemClock,
    render_report,
)

app = typer.Typer(
    name="katadojo",
    help="TDD kata collection",
    no_args_is_help=True,
)
console = Console(stderr=True)

SAMPLE_EXPENSES = [
    Expense(ExpenseType.DINNER, 6000),
    Expense(ExpenseType.BREAKFAST, 800),
    Expense(ExpenseType.LUNCH, 3000),
    Expense(ExpenseType.CAR_RENTAL, 15000),
]


def _enable_verbose_logging() -> None:
    """Route katadojo log records through Rich on stderr."""
    logger = logging.getLogger("katadojo")
    logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=console, show_path=False))


@app.command("list")
def cmd_list() -> None:
    """Show available katas."""
    katas = list_katas()
    if not katas:
        console.print("[yellow]No katas found.[/yellow]")
        raise typer.Exit(1)

    table = Table(title="Available Katas", show_header=True, header_style="bold")
    table.add_column("Name", style="green", min_width=15, no_wrap=True)
    table.add_column("Description", min_width=30)
    table.add_column("Test modules", justify="right")

    for k in katas:
        table.add_row(k.name, k.description, str(len(k.test_modules)))

    console.print()
    console.print(table)
    console.print()


@app.command("report")
def cmd_report(
    fmt: str = typer.Option("plain", "--format", "-f", help="Output format: plain, html, json"),
    on: Optional[str] = typer.Option(None, "--date", "-d", help="Pin the header date (YYYY-MM-DD)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log render details to stderr"),
) -> None:
    """Print the sample expense report to stdout."""
    if verbose:
        _enable_verbose_logging()

    formatter_cls = FORMATTERS.get(fmt)
    if formatter_cls is None:
        console.print(f"[red]Invalid format: {fmt}[/red]. Choose: {', '.join(FORMATTERS)}")
        raise typer.Exit(1)

    if on:
        try:
            clock = FixedClock(date.fromisoformat(on))
        except ValueError:
            console.print(f"[red]Invalid date: {on}[/red]. Expected YYYY-MM-DD")
            raise typer.Exit(1)
    else:
        clock = SystemClock()

    render_report(formatter_cls(clock=clock), SAMPLE_EXPENSES)


if __name__ == "__main__":
    app()
