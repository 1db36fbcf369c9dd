"""FizzBuzz kata, with the FizzWhiz twist for 3.

Task: FizzBuzz().go(n) -> "Fizz" / "Buzz" / "FizzBuzz" / str(n).
"""

from katadojo.katas.fizz_buzz.fizz_buzz import FizzBuzz

NAME = "fizz_buzz"
DESCRIPTION = "Classic FizzBuzz where 3 answers FizzWhiz"

__all__ = ["FizzBuzz"]
