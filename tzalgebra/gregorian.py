"""Proleptic Gregorian calendar on top of Julian Day Numbers.

Conversions use the integer-only Fliegel/Van Flandern algorithm with
floor division, so they are exact for negative years too.

Month and year arithmetic can produce days that do not exist (31 April,
29 February 2003). Those are handed to a *move strategy*, a plain callable
from `GregorianDate` to `GregorianDate`, that decides where such a date
lands:

    >>> from tzalgebra.gregorian import GregorianDate, Month, add_months
    >>> add_months(1, GregorianDate(2003, Month.JANUARY, 30))
    GregorianDate(year=2003, month=<Month.FEBRUARY: 2>, day=28)
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from tzalgebra.date import Date


class Month(Enum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12


@dataclass(frozen=True)
class GregorianDate:
    """A year/month/day reading of a date.

    The day is not checked against the month length; move strategies rely
    on being able to see the overflowing day.
    """

    year: int
    month: Month
    day: int


MoveStrategy: TypeAlias = Callable[[GregorianDate], GregorianDate]

_DAYS_IN_MONTH = {
    Month.JANUARY: 31,
    Month.FEBRUARY: 28,
    Month.MARCH: 31,
    Month.APRIL: 30,
    Month.MAY: 31,
    Month.JUNE: 30,
    Month.JULY: 31,
    Month.AUGUST: 31,
    Month.SEPTEMBER: 30,
    Month.OCTOBER: 31,
    Month.NOVEMBER: 30,
    Month.DECEMBER: 31,
}


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(month: Month, year: int) -> int:
    if month is Month.FEBRUARY and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def to_gregorian_date(date: Date) -> GregorianDate:
    a = date.jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - 146097 * b // 4
    d = (4 * c + 3) // 1461
    e = c - 1461 * d // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + m // 10
    return GregorianDate(year, Month(month), day)


def from_gregorian_date(gregorian: GregorianDate) -> Date:
    a = (14 - gregorian.month.value) // 12
    y = gregorian.year + 4800 - a
    m = gregorian.month.value + 12 * a - 3
    jdn = (
        gregorian.day
        + (153 * m + 2) // 5
        + 365 * y
        + y // 4
        - y // 100
        + y // 400
        - 32045
    )
    return Date(jdn=jdn)


def gregorian(year: int, month: int | Month, day: int) -> Date:
    """Shorthand for `from_gregorian_date` taking a plain month number."""
    if isinstance(month, int):
        if not 1 <= month <= 12:
            raise ValueError(
                f"month must be in range [1, 12], got {month}.\n"
                f"Example: gregorian(2019, 3, 31) for 31 March 2019"
            )
        month = Month(month)
    return from_gregorian_date(GregorianDate(year, month, day))


def year_of(date: Date) -> int:
    return to_gregorian_date(date).year


def month_of(date: Date) -> Month:
    return to_gregorian_date(date).month


def day_of(date: Date) -> int:
    return to_gregorian_date(date).day


def day_of_year(date: Date) -> int:
    """Return the 1-based ordinal of `date` within its year."""
    first = from_gregorian_date(GregorianDate(year_of(date), Month.JANUARY, 1))
    return date.jdn - first.jdn + 1


def stay_in_same_month(gregorian: GregorianDate) -> GregorianDate:
    """Clamp an overflowing day to the last day of its month."""
    length = days_in_month(gregorian.month, gregorian.year)
    if gregorian.day <= length:
        return gregorian
    return GregorianDate(gregorian.year, gregorian.month, length)


def roll_into_next_month(gregorian: GregorianDate) -> GregorianDate:
    """Carry the days past the end of the month into the following month."""
    length = days_in_month(gregorian.month, gregorian.year)
    if gregorian.day <= length:
        return gregorian
    following = _shift_month(1, gregorian)
    return GregorianDate(following.year, following.month, gregorian.day - length)


def _shift_month(count: int, gregorian: GregorianDate) -> GregorianDate:
    # months_without_years is Euclidean, so the zero-based index is never negative
    months_without_years = count % 12
    a_priori_years = count // 12
    index = gregorian.month.value - 1 + months_without_years
    year = gregorian.year + a_priori_years + index // 12
    return GregorianDate(year, Month(index % 12 + 1), gregorian.day)


def add_months(
    count: int,
    gregorian: GregorianDate,
    strategy: MoveStrategy = stay_in_same_month,
) -> GregorianDate:
    """Move `count` months (negative for the past), then apply `strategy`."""
    return strategy(_shift_month(count, gregorian))


def add_years(
    count: int,
    gregorian: GregorianDate,
    strategy: MoveStrategy = stay_in_same_month,
) -> GregorianDate:
    return strategy(GregorianDate(gregorian.year + count, gregorian.month, gregorian.day))


def first_of_month(date: Date) -> Date:
    reading = to_gregorian_date(date)
    return Date(jdn=date.jdn - reading.day + 1)
