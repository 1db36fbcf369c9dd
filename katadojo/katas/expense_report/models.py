"""Data models for the expense report kata.

ExpenseType, Expense and ReportTotals: the typed values that flow through
rules -> formatter -> driver.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ExpenseType(str, Enum):
    """Expense categories."""

    DINNER = "dinner"
    BREAKFAST = "breakfast"
    CAR_RENTAL = "car-rental"
    LUNCH = "lunch"


@dataclass(frozen=True)
class Expense:
    """A single expense: what it was for and how much it cost."""

    type: ExpenseType
    amount: int | float


@dataclass(frozen=True)
class ReportTotals:
    """Aggregate sums for one render pass."""

    total_expenses: int | float = 0
    meal_expenses: int | float = 0

    def add(self, amount: int | float, meal: bool) -> ReportTotals:
        """Return new totals with ``amount`` folded in."""
        return ReportTotals(
            total_expenses=self.total_expenses + amount,
            meal_expenses=self.meal_expenses + amount if meal else self.meal_expenses,
        )
