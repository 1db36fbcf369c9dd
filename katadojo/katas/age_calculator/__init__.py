"""Age calculator kata.

Task: completed years between a birth date and a target date.
"""

from katadojo.katas.age_calculator.age_calculator import age_in_years

NAME = "age_calculator"
DESCRIPTION = "Count completed years between two dates, leap days included"

__all__ = ["age_in_years"]
