"""Category rules: display name, spending limit and meal classification.

The table is an explicit read-only value. Formatters and the driver are
handed an ExpenseRules instance (DEFAULT_RULES unless the caller supplies
another) instead of reaching for a global.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from katadojo.katas.expense_report.exceptions import UnknownExpenseTypeError
from katadojo.katas.expense_report.models import Expense, ExpenseType

OVER_LIMIT = "X"
WITHIN_LIMIT = " "


@dataclass(frozen=True)
class CategoryRule:
    """Static data for one expense type."""

    name: str
    limit: float
    meal_category: bool


def over_limit_marker(amount: int | float, limit: float) -> str:
    """``"X"`` when amount is strictly above limit, a single space otherwise."""
    return OVER_LIMIT if amount > limit else WITHIN_LIMIT


class ExpenseRules:
    """Read-only mapping of ExpenseType -> CategoryRule.

    Raises:
        ValueError: If the table does not cover every ExpenseType.
    """

    def __init__(self, rules: Mapping[ExpenseType, CategoryRule]):
        missing = [t.value for t in ExpenseType if t not in rules]
        if missing:
            raise ValueError(f"Category rules missing for: {', '.join(missing)}")
        self._rules: Mapping[ExpenseType, CategoryRule] = MappingProxyType(dict(rules))

    def lookup(self, expense_type: ExpenseType) -> CategoryRule:
        """Return the rule for ``expense_type``.

        Raises:
            UnknownExpenseTypeError: If the type is not in the table.
        """
        try:
            return self._rules[expense_type]
        except (KeyError, TypeError):
            raise UnknownExpenseTypeError(expense_type) from None

    def name_for(self, expense: Expense) -> str:
        return self.lookup(expense.type).name

    def marker_for(self, expense: Expense) -> str:
        return over_limit_marker(expense.amount, self.lookup(expense.type).limit)

    def is_meal(self, expense: Expense) -> bool:
        return self.lookup(expense.type).meal_category

    def __contains__(self, expense_type: object) -> bool:
        return expense_type in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"ExpenseRules({dict(self._rules)!r})"


DEFAULT_RULES = ExpenseRules({
    ExpenseType.DINNER: CategoryRule(name="Dinner", limit=5000, meal_category=True),
    ExpenseType.BREAKFAST: CategoryRule(name="Breakfast", limit=1000, meal_category=True),
    ExpenseType.CAR_RENTAL: CategoryRule(name="Car Rental", limit=math.inf, meal_category=False),
    ExpenseType.LUNCH: CategoryRule(name="Lunch", limit=2000, meal_category=True),
})
