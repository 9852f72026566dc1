"""Civil dates as Julian Day Numbers.

A `Date` is a plain day count with no notion of months or years; the
`tzalgebra.gregorian` module decodes it into a calendar reading. JDN 0 is
24 November 4713 BCE in the proleptic Gregorian calendar, a Monday.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from tzalgebra.lapse import Direction, Elapsed


class Weekday(Enum):
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7


@dataclass(frozen=True, order=True, kw_only=True)
class Date:
    jdn: int

    def __str__(self) -> str:
        return f"Date(JDN {self.jdn})"


@dataclass(frozen=True, order=True, kw_only=True)
class Duration:
    """A whole number of calendar days."""

    days: int

    def __add__(self, other: "Duration") -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(days=self.days + other.days)


def days(count: int) -> Duration:
    return Duration(days=count)


def weeks(count: int) -> Duration:
    return Duration(days=7 * count)


def from_jdn(jdn: int) -> Date:
    return Date(jdn=jdn)


def to_jdn(date: Date) -> int:
    return date.jdn


def into_future(duration: Duration, date: Date) -> Date:
    return Date(jdn=date.jdn + duration.days)


def into_past(duration: Duration, date: Date) -> Date:
    return Date(jdn=date.jdn - duration.days)


def elapsed(start: Date, end: Date) -> Elapsed[Duration]:
    delta = end.jdn - start.jdn
    if delta >= 0:
        return Elapsed(Duration(days=delta), Direction.INTO_FUTURE)
    return Elapsed(Duration(days=-delta), Direction.INTO_PAST)


def earliest(a: Date, b: Date) -> Date:
    return a if a <= b else b


def latest(a: Date, b: Date) -> Date:
    return a if a >= b else b


def to_weekday(date: Date) -> Weekday:
    return Weekday(date.jdn % 7 + 1)


def next(weekday: Weekday, date: Date) -> Date:  # noqa: A001
    """Return the first `weekday` strictly after `date`.

    Moves between 1 and 7 days; a date already on `weekday` moves a week.
    """
    gap = (weekday.value - to_weekday(date).value) % 7
    return Date(jdn=date.jdn + (gap or 7))


def last(weekday: Weekday, date: Date) -> Date:
    """Return the last `weekday` strictly before `date`."""
    gap = (to_weekday(date).value - weekday.value) % 7
    return Date(jdn=date.jdn - (gap or 7))


def collect(count: int, step: Callable[[Date], Date], date: Date) -> list[Date]:
    """Apply `step` repeatedly and return the `count` dates it produces.

    The starting date is not part of the result.

    Example:
        >>> from functools import partial
        >>> start = from_jdn(2458565)
        >>> collect(3, partial(into_future, weeks(1)), start)  # three weeks on
    """
    dates: list[Date] = []
    current = date
    for _ in range(count):
        current = step(current)
        dates.append(current)
    return dates
