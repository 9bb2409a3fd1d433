from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .errors import InvalidDateError

INVALID_MONTH = "INVALID_MONTH"


class Month(IntEnum):
    JAN = 1
    FEB = 2
    MAR = 3
    APR = 4
    MAY = 5
    JUN = 6
    JUL = 7
    AUG = 8
    SEP = 9
    OCT = 10
    NOV = 11
    DEC = 12


_MONTH_NAMES: dict[int, str] = {
    Month.JAN: "January",
    Month.FEB: "February",
    Month.MAR: "March",
    Month.APR: "April",
    Month.MAY: "May",
    Month.JUN: "June",
    Month.JUL: "July",
    Month.AUG: "August",
    Month.SEP: "September",
    Month.OCT: "October",
    Month.NOV: "November",
    Month.DEC: "December",
}

_LONG_MONTHS = frozenset(
    {Month.JAN, Month.MAR, Month.MAY, Month.JUL, Month.AUG, Month.OCT, Month.DEC}
)

_ORDINAL_SUFFIXES = {1: "st", 2: "nd", 3: "rd"}


def month_to_str(month: int) -> str:
    """
    Return the full English name of `month` (1-12), or INVALID_MONTH for any other value.
    Take the first three characters for the short name.
    """
    return _MONTH_NAMES.get(month, INVALID_MONTH)


def is_leap_year(year: int) -> bool:
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


@dataclass(frozen=True, order=True)
class Date:
    """
    A calendar day. Instances are validated on construction, so every Date
    that exists is a real day of the Gregorian calendar.
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        try:
            self.validate()
        except InvalidDateError as exc:
            raise InvalidDateError(f"invalid date: {exc}") from exc

    @classmethod
    def new(cls, year: int, month: int, day: int) -> "Date":
        return cls(year, month, day)

    def validate(self) -> None:
        """Raise InvalidDateError describing the first bound the date violates."""
        if not 1 <= self.day <= 31:
            raise InvalidDateError(f"expected day ({self.day}) to be between 1 and 31 (inclusive)")
        if not 1 <= self.month <= 12:
            raise InvalidDateError(f"expected month ({self.month}) to be between 1 and 12 (inclusive)")
        if self.year < 0:
            raise InvalidDateError(f"expected year ({self.year}) to be non-negative")

        if self.month == Month.FEB:
            if is_leap_year(self.year):
                if self.day > 29:
                    raise InvalidDateError(f"day ({self.day}) greater than 29 in leap year ({self.year})")
            elif self.day > 28:
                raise InvalidDateError(f"day ({self.day}) greater than 28 in non-leap year ({self.year})")
            return

        upper = 31 if self.month in _LONG_MONTHS else 30
        if self.day > upper:
            raise InvalidDateError(
                f"expected day ({self.day}) to be at most {upper} for month {month_to_str(self.month)}"
            )

    def to_dict(self) -> dict[str, int]:
        return {"day": self.day, "month": self.month, "year": self.year}

    def __str__(self) -> str:
        # suffix follows the last digit only, so 11 renders as "11st"
        suffix = _ORDINAL_SUFFIXES.get(self.day % 10, "th")
        return f"{self.day}{suffix} {month_to_str(self.month)}, {self.year}"
