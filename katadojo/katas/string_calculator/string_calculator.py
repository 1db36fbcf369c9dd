"""String calculator."""

from __future__ import annotations

DELIMITER = ","


class StringCalculator:
    """Adds up the numbers in a delimited string."""

    def add(self, numbers: str) -> int:
        """Sum the comma-separated integers in ``numbers``.

        Raises:
            ValueError: If a piece is not an integer.
        """
        if not numbers:
            return 0
        total = 0
        for piece in numbers.split(DELIMITER):
            try:
                total += int(piece)
            except ValueError:
                raise ValueError(f"Not a number: {piece!r} in {numbers!r}") from None
        return total
