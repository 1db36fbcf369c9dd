"""Expense report kata: render expenses as plain text, HTML or JSON.

The most elaborate kata in the dojo. Expenses are checked against a
per-category spending limit, meals are subtotalled, and a pluggable
formatter decides the output shape.
"""

from katadojo.katas.expense_report.clock import Clock, FixedClock, SystemClock
from katadojo.katas.expense_report.exceptions import (
    InvalidFormatterError,
    KataError,
    UnknownExpenseTypeError,
)
from katadojo.katas.expense_report.formatters import (
    FORMATTERS,
    HtmlReportFormatter,
    JsonReportFormatter,
    PlainTextReportFormatter,
    ReportFormatter,
)
from katadojo.katas.expense_report.models import Expense, ExpenseType, ReportTotals
from katadojo.katas.expense_report.report import render_report, summarize, validate_formatter
from katadojo.katas.expense_report.rules import (
    DEFAULT_RULES,
    CategoryRule,
    ExpenseRules,
    over_limit_marker,
)

NAME = "expense_report"
DESCRIPTION = "Render an expense report as plain text, HTML or JSON with over-limit markers"

__all__ = [
    "CategoryRule",
    "Clock",
    "DEFAULT_RULES",
    "Expense",
    "ExpenseRules",
    "ExpenseType",
    "FORMATTERS",
    "FixedClock",
    "HtmlReportFormatter",
    "InvalidFormatterError",
    "JsonReportFormatter",
    "KataError",
    "PlainTextReportFormatter",
    "ReportFormatter",
    "ReportTotals",
    "SystemClock",
    "UnknownExpenseTypeError",
    "over_limit_marker",
    "render_report",
    "summarize",
    "validate_formatter",
]
