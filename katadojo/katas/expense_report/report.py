"""Expense report driver.

One linear pass over the expenses: accumulate totals, collect one row per
expense, then write ``header + rows + footer`` to the output stream.
"""

from __future__ import annotations

import logging
import sys
from typing import Iterable, Optional, TextIO

from katadojo.katas.expense_report.exceptions import InvalidFormatterError
from katadojo.katas.expense_report.formatters import REQUIRED_OPERATIONS, ReportFormatter
from katadojo.katas.expense_report.models import Expense, ReportTotals
from katadojo.katas.expense_report.rules import DEFAULT_RULES, ExpenseRules

logger = logging.getLogger(__name__)


def validate_formatter(formatter: object) -> ReportFormatter:
    """Return ``formatter`` unchanged if it implements every required operation.

    Raises:
        InvalidFormatterError: Listing the operations that are missing or
            not callable.
    """
    missing = tuple(
        op for op in REQUIRED_OPERATIONS
        if not callable(getattr(formatter, op, None))
    )
    if missing:
        raise InvalidFormatterError(formatter, missing)
    return formatter  # type: ignore[return-value]


def summarize(expenses: Iterable[Expense], rules: ExpenseRules = DEFAULT_RULES) -> ReportTotals:
    """Total and meal-only sums for ``expenses``."""
    totals = ReportTotals()
    for expense in expenses:
        totals = totals.add(expense.amount, rules.is_meal(expense))
    return totals


def render_report(
    formatter: ReportFormatter,
    expenses: Iterable[Expense],
    rules: ExpenseRules = DEFAULT_RULES,
    stream: Optional[TextIO] = None,
) -> str:
    """Render ``expenses`` with ``formatter`` and write the result to ``stream``.

    Args:
        formatter: Any object with generate_header/generate_row/generate_footer.
        expenses: Rendered in the order given.
        rules: Category table used for the meal subtotal.
        stream: Destination, ``sys.stdout`` when omitted.

    Returns:
        The full report text, exactly as written.

    Raises:
        InvalidFormatterError: Before anything is written, if the formatter
            lacks a required operation.
    """
    validate_formatter(formatter)

    totals = ReportTotals()
    parts = [formatter.generate_header()]
    for expense in expenses:
        totals = totals.add(expense.amount, rules.is_meal(expense))
        parts.append(formatter.generate_row(expense))
    parts.append(formatter.generate_footer(totals.total_expenses, totals.meal_expenses))

    output = "".join(parts)
    logger.debug(
        "Rendered %s with %d rows (total=%s, meals=%s)",
        type(formatter).__name__, len(parts) - 2,
        totals.total_expenses, totals.meal_expenses,
    )
    (stream or sys.stdout).write(output)
    return output
