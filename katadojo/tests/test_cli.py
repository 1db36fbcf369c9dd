"""Tests for kata discovery and the katadojo CLI."""

import json
import logging

import pytest
from typer.testing import CliRunner

from katadojo.__main__ import app
from katadojo.katas import list_katas, load_kata

runner = CliRunner()

EXPECTED_KATAS = {
    "age_calculator",
    "expense_report",
    "fizz_buzz",
    "greeter",
    "rock_paper_scissors",
    "string_calculator",
}


# --- Discovery ---

def test_list_katas_finds_every_kata():
    assert {k.name for k in list_katas()} == EXPECTED_KATAS


def test_list_katas_sorted():
    names = [k.name for k in list_katas()]
    assert names == sorted(names)


def test_every_kata_has_description_and_tests():
    for kata in list_katas():
        assert kata.description
        assert kata.test_modules, f"{kata.name} has no test modules"


def test_load_kata():
    info = load_kata("expense_report")
    assert info is not None
    assert info.path.name == "expense_report"
    assert info.tests_dir == info.path / "tests"
    assert any(p.name == "test_expense_report.py" for p in info.test_modules)


@pytest.mark.parametrize("name", ["nope", "tests", "__pycache__"])
def test_load_kata_unknown(name):
    assert load_kata(name) is None


# --- list command ---

def test_cli_list():
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0
    assert "Available Katas" in result.output
    for name in EXPECTED_KATAS:
        assert name in result.output


# --- report command ---

def test_cli_report_plain_with_pinned_date():
    result = runner.invoke(app, ["report", "--date", "2024-03-15"])
    assert result.exit_code == 0
    assert result.stdout == (
        "Expense Report: 2024-03-15\n"
        "Dinner\t6000\tX\n"
        "Breakfast\t800\t \n"
        "Lunch\t3000\tX\n"
        "Car Rental\t15000\t \n"
        "Meal Expenses: 9800\n"
        "Total Expenses: 24800\n"
    )


def test_cli_report_json():
    result = runner.invoke(app, ["report", "-f", "json", "-d", "2024-03-15"])
    assert result.exit_code == 0
    doc = json.loads(result.stdout)
    assert doc["date"] == "2024-03-15"
    assert doc["mealExpenses"] == 9800
    assert doc["totalExpenses"] == 24800
    assert [e["overLimit"] for e in doc["expenses"]] == ["X", " ", "X", " "]


def test_cli_report_html():
    result = runner.invoke(app, ["report", "--format", "html", "--date", "2024-03-15"])
    assert result.exit_code == 0
    assert "<h1>Expense Report: 2024-03-15</h1>" in result.stdout
    assert "<p>Total Expenses: 24800</p>" in result.stdout


def test_cli_report_defaults_to_today():
    result = runner.invoke(app, ["report"])
    assert result.exit_code == 0
    assert result.stdout.startswith("Expense Report: ")


def test_cli_report_invalid_format():
    result = runner.invoke(app, ["report", "--format", "pdf"])
    assert result.exit_code == 1
    assert "Invalid format" in result.output


def test_cli_report_invalid_date():
    result = runner.invoke(app, ["report", "--date", "15/03/2024"])
    assert result.exit_code == 1
    assert "Invalid date" in result.output


def test_cli_report_verbose_logs_render():
    logger = logging.getLogger("katadojo")
    handlers_before = list(logger.handlers)
    level_before = logger.level
    try:
        result = runner.invoke(app, ["report", "-v", "-d", "2024-03-15"])
        assert result.exit_code == 0
        assert "Rendered" in result.output
    finally:
        logger.handlers[:] = handlers_before
        logger.setLevel(level_before)
