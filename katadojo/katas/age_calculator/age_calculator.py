"""Age in completed years."""

from __future__ import annotations

from datetime import date


def has_had_birthday(birth_date: date, target_date: date) -> bool:
    """True once the target's month/day has reached the birth month/day.

    A 29 February birthday is only reached on 29 February.
    """
    return (target_date.month, target_date.day) >= (birth_date.month, birth_date.day)


def age_in_years(birth_date: date, target_date: date) -> int:
    """Completed years from ``birth_date`` to ``target_date``.

    Raises:
        ValueError: If the target date is before the birth date.
    """
    if target_date < birth_date:
        raise ValueError(
            f"Target date {target_date.isoformat()} is before birth date {birth_date.isoformat()}"
        )
    completed = target_date.year - birth_date.year
    if not has_had_birthday(birth_date, target_date):
        completed -= 1
    return completed
