"""Calendar dates held as plain year, month and day fields."""

from __future__ import annotations

import copy
import re

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def string_split(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on ``delimiter``; a trailing empty field is dropped."""
    parts = text.split(delimiter)
    if parts[-1] == "":
        parts.pop()
    return parts


def _to_int(text: str) -> int:
    """Parse the leading integer of ``text``, ignoring anything after it."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    return int(match.group())


def _is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def _days_in_month(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise ValueError(f"month out of range: {month}")
    days = _DAYS_IN_MONTH[month - 1]
    if month == 2 and _is_leap_year(year):
        days += 1
    return days


class DateCalculator:
    """A ``YYYY-MM-DD`` date supporting day arithmetic and comparison.

    Adding days normalises forward across month and year boundaries;
    fields are otherwise stored as given, so invalid dates can be held.
    """

    __hash__ = None  # mutable

    def __init__(self, date: str | None = None) -> None:
        if date is None:
            self.year, self.month, self.day = 1970, 1, 1
            return
        parts = string_split(date, "-")
        if len(parts) < 3:
            raise ValueError(f"invalid date: {date!r}")
        self.year = _to_int(parts[0])
        self.month = _to_int(parts[1])
        self.day = _to_int(parts[2])

    def set_date(self, date: str) -> bool:
        """Replace the date; return whether the new date is a valid one.

        A string that does not have exactly three fields leaves the date
        unchanged and returns False.
        """
        parts = string_split(date, "-")
        if len(parts) != 3:
            return False
        self.year = _to_int(parts[0])
        self.month = _to_int(parts[1])
        self.day = _to_int(parts[2])
        return self.is_valid_date()

    def is_valid_date(self) -> bool:
        if not 1 <= self.month <= 12:
            return False
        return 1 <= self.day <= _days_in_month(self.year, self.month)

    def add_days(self, days: int) -> None:
        self.day += days
        while True:
            days_this_month = _days_in_month(self.year, self.month)
            if self.day <= days_this_month:
                break
            self.day -= days_this_month
            self.month += 1
            if self.month > 12:
                self.month = 1
                self.year += 1

    def add_months(self, months: int) -> None:
        self.month += months
        if self.month > 12:
            extra_years = (self.month - 1) // 12
            self.year += extra_years
            self.month -= 12 * extra_years

    def add_years(self, years: int) -> None:
        self.year += years

    def _key(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    @staticmethod
    def _coerce(other: object) -> DateCalculator | None:
        if isinstance(other, DateCalculator):
            return other
        if isinstance(other, str):
            return DateCalculator(other)
        return None

    def __str__(self) -> str:
        month_pad = "0" if self.month < 10 else ""
        day_pad = "0" if self.day < 10 else ""
        return f"{self.year}-{month_pad}{self.month}-{day_pad}{self.day}"

    def __repr__(self) -> str:
        return f"DateCalculator({str(self)!r})"

    def __lt__(self, other: object) -> bool:
        other_date = self._coerce(other)
        if other_date is None:
            return NotImplemented
        return self._key() < other_date._key()

    def __gt__(self, other: object) -> bool:
        other_date = self._coerce(other)
        if other_date is None:
            return NotImplemented
        return self._key() > other_date._key()

    def __le__(self, other: object) -> bool:
        other_date = self._coerce(other)
        if other_date is None:
            return NotImplemented
        return not self._key() > other_date._key()

    def __ge__(self, other: object) -> bool:
        other_date = self._coerce(other)
        if other_date is None:
            return NotImplemented
        return not self._key() < other_date._key()

    def __eq__(self, other: object) -> bool:
        other_date = self._coerce(other)
        if other_date is None:
            return NotImplemented
        return self._key() == other_date._key()

    def __add__(self, other: int | DateCalculator) -> DateCalculator:
        """Add a number of days, or another date's day, month and year fields."""
        result = copy.copy(self)
        if isinstance(other, DateCalculator):
            result.add_days(other.day)
            result.add_months(other.month)
            result.add_years(other.year)
        elif isinstance(other, int):
            result.add_days(other)
        else:
            return NotImplemented
        return result

    def __sub__(self, other: int | DateCalculator) -> DateCalculator | int:
        """Subtract days, or return the number of days between two dates."""
        if isinstance(other, DateCalculator):
            start, end = copy.copy(self), copy.copy(other)
            if start > end:
                start, end = end, start
            days = 0
            while start < end:
                start.add_days(1)
                days += 1
            return days
        if isinstance(other, int):
            result = copy.copy(self)
            result.add_days(-other)
            return result
        return NotImplemented

    def __iadd__(self, days: int) -> DateCalculator:
        self.add_days(days)
        return self

    def __isub__(self, days: int) -> DateCalculator:
        self.add_days(-days)
        return self