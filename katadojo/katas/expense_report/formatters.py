"""Report formatters: plain text, HTML and JSON.

Every formatter exposes the same three operations (see ReportFormatter);
only the textual shape differs. The driver in report.py concatenates
``header + rows + footer``.
"""

from __future__ import annotations

import html
import json
from typing import Optional, Protocol, runtime_checkable

from katadojo.katas.expense_report.clock import Clock, SystemClock
from katadojo.katas.expense_report.models import Expense
from katadojo.katas.expense_report.rules import DEFAULT_RULES, ExpenseRules

REQUIRED_OPERATIONS = ("generate_header", "generate_row", "generate_footer")


@runtime_checkable
class ReportFormatter(Protocol):
    """The three operations the driver needs from a formatter."""

    def generate_header(self) -> str: ...

    def generate_row(self, expense: Expense) -> str: ...

    def generate_footer(self, total_expenses: int | float, meal_expenses: int | float) -> str: ...


def fmt_amount(amount: int | float) -> str:
    """Render an amount, dropping the ``.0`` of integral floats."""
    if isinstance(amount, float) and amount.is_integer():
        return str(int(amount))
    return str(amount)


class _InjectedDependencies:
    """Holds the rules table and clock every formatter is built with."""

    def __init__(self, rules: Optional[ExpenseRules] = None, clock: Optional[Clock] = None):
        self.rules = DEFAULT_RULES if rules is None else rules
        self.clock = SystemClock() if clock is None else clock

    def _date(self) -> str:
        return self.clock.today().isoformat()


class PlainTextReportFormatter(_InjectedDependencies):
    """Tab-separated rows under a one-line title."""

    def generate_header(self) -> str:
        return f"Expense Report: {self._date()}\n"

    def generate_row(self, expense: Expense) -> str:
        name = self.rules.name_for(expense)
        marker = self.rules.marker_for(expense)
        return f"{name}\t{fmt_amount(expense.amount)}\t{marker}\n"

    def generate_footer(self, total_expenses: int | float, meal_expenses: int | float) -> str:
        return (
            f"Meal Expenses: {fmt_amount(meal_expenses)}\n"
            f"Total Expenses: {fmt_amount(total_expenses)}\n"
        )


class HtmlReportFormatter(_InjectedDependencies):
    """A minimal standalone HTML document with one table row per expense."""

    def generate_header(self) -> str:
        title = f"Expense Report: {self._date()}"
        return (
            "<!DOCTYPE html>\n"
            "<html>\n"
            "<head>\n"
            f"<title>{title}</title>\n"
            "</head>\n"
            "<body>\n"
            f"<h1>{title}</h1>\n"
            "<table>\n"
            "<thead>\n"
            '<tr><th scope="col">Type</th><th scope="col">Amount</th><th scope="col">Over Limit</th></tr>\n'
            "</thead>\n"
            "<tbody>\n"
        )

    def generate_row(self, expense: Expense) -> str:
        name = html.escape(self.rules.name_for(expense))
        marker = self.rules.marker_for(expense)
        return f"<tr><td>{name}</td><td>{fmt_amount(expense.amount)}</td><td>{marker}</td></tr>\n"

    def generate_footer(self, total_expenses: int | float, meal_expenses: int | float) -> str:
        return (
            "</tbody>\n"
            "</table>\n"
            f"<p>Meal Expenses: {fmt_amount(meal_expenses)}</p>\n"
            f"<p>Total Expenses: {fmt_amount(total_expenses)}</p>\n"
            "</body>\n"
            "</html>\n"
        )


class JsonReportFormatter(_InjectedDependencies):
    """A JSON object assembled piece by piece.

    Rows after the first are prefixed with ``",\\n"`` so that
    ``header + rows + footer`` parses; generate_header() resets the
    row counter, so one instance can render several reports in turn.
    """

    def __init__(self, rules: Optional[ExpenseRules] = None, clock: Optional[Clock] = None):
        super().__init__(rules, clock)
        self._rows_written = 0

    def generate_header(self) -> str:
        self._rows_written = 0
        return f'{{\n  "date": "{self._date()}",\n  "expenses": [\n'

    def generate_row(self, expense: Expense) -> str:
        name = json.dumps(self.rules.name_for(expense))
        marker = json.dumps(self.rules.marker_for(expense))
        separator = ",\n" if self._rows_written else ""
        self._rows_written += 1
        return (
            f'{separator}    {{"type": {name}, "amount": {fmt_amount(expense.amount)}, '
            f'"overLimit": {marker}}}'
        )

    def generate_footer(self, total_expenses: int | float, meal_expenses: int | float) -> str:
        return (
            "\n  ],\n"
            f'  "mealExpenses": {fmt_amount(meal_expenses)},\n'
            f'  "totalExpenses": {fmt_amount(total_expenses)}\n'
            "}"
        )


FORMATTERS: dict[str, type] = {
    "plain": PlainTextReportFormatter,
    "html": HtmlReportFormatter,
    "json": JsonReportFormatter,
}
