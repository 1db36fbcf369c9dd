"""String calculator kata.

Task: StringCalculator().add("1,2,3") -> 6; the empty string adds up to 0.
"""

from katadojo.katas.string_calculator.string_calculator import StringCalculator

NAME = "string_calculator"
DESCRIPTION = "Sum a comma-separated string of numbers"

__all__ = ["StringCalculator"]
