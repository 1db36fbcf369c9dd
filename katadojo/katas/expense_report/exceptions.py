"""Typed errors for the expense report kata.

Callers catch by type and read the structured attributes rather than
parsing messages:

    KataError
    +-- InvalidFormatterError   (also a TypeError)
    +-- UnknownExpenseTypeError (also a LookupError)
"""

from __future__ import annotations


class KataError(Exception):
    """Base class for every error raised by katadojo."""

    code: str = "KATA_ERROR"


class InvalidFormatterError(KataError, TypeError):
    """The formatter handed to the driver is missing required operations.

    A caller error: raised before any output is produced and never retried.
    """

    code = "INVALID_FORMATTER"

    def __init__(self, formatter: object, missing: tuple[str, ...]):
        self.formatter = formatter
        self.missing = missing
        super().__init__(
            f"{type(formatter).__name__} is not a report formatter: "
            f"missing {', '.join(missing)}"
        )


class UnknownExpenseTypeError(KataError, LookupError):
    """An expense type has no rule in the category table.

    Only reachable through a programming defect (a table that does not
    cover the enumeration, or a value that is not an ExpenseType).
    """

    code = "UNKNOWN_EXPENSE_TYPE"

    def __init__(self, expense_type: object):
        self.expense_type = expense_type
        super().__init__(f"No category rule for expense type: {expense_type!r}")
