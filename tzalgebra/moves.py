"""Calendar-aware time travel over dates.

A `Moves` value is an immutable sequence of primitive moves. Sequences
concatenate with `+` (or `and_then`) and are replayed strictly left to
right by `travel`. Order matters: adding days then months is not the same
as adding months then days.

Examples:
    >>> from tzalgebra.date import Weekday
    >>> from tzalgebra.gregorian import gregorian
    >>> from tzalgebra.moves import FIRST, LAST, days, in_month, months, travel
    >>>
    >>> # 28 Feb 2000 -> 2 Mar 2000 -> 2 Jun 2000
    >>> travel(days(3) + months(3), gregorian(2000, 2, 28))
    >>>
    >>> # First Monday of next month
    >>> first_monday = months(1) + in_month(FIRST, Weekday.MONDAY)
    >>>
    >>> # Last Friday of this month
    >>> payday = in_month(LAST, Weekday.FRIDAY)
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from functools import reduce
from typing import Literal, TypeAlias

from tzalgebra import date as dates
from tzalgebra.date import Date, Weekday
from tzalgebra.gregorian import (
    GregorianDate,
    MoveStrategy,
    add_months,
    add_years,
    days_in_month,
    first_of_month,
    from_gregorian_date,
    stay_in_same_month,
    to_gregorian_date,
)

Unit: TypeAlias = Literal["days", "weeks", "months", "years"]

_UNITS = ("days", "weeks", "months", "years")


@dataclass(frozen=True)
class Ordinal:
    """Which occurrence of a weekday within a month.

    `Ordinal(1)` is the first, `Ordinal(1, from_end=True)` the last.
    """

    nth: int
    from_end: bool = False

    def __post_init__(self) -> None:
        if self.nth < 1:
            raise ValueError(
                f"Ordinal nth must be >= 1, got {self.nth}.\n"
                f"Use from_end=True to count from the end of the month:\n"
                f"  Ordinal(1, from_end=True)  # last"
            )


FIRST = Ordinal(1)
SECOND = Ordinal(2)
THIRD = Ordinal(3)
FOURTH = Ordinal(4)
FIFTH = Ordinal(5)
LAST = Ordinal(1, from_end=True)
SECOND_TO_LAST = Ordinal(2, from_end=True)
THIRD_TO_LAST = Ordinal(3, from_end=True)


@dataclass(frozen=True)
class Shift:
    count: int
    unit: Unit
    strategy: MoveStrategy = stay_in_same_month

    def __post_init__(self) -> None:
        if self.unit not in _UNITS:
            raise ValueError(
                f"Invalid move unit: '{self.unit}'\n"
                f"Valid units: {', '.join(_UNITS)}\n"
                f"Example: into_future(3, 'months')"
            )


@dataclass(frozen=True)
class NextWeekday:
    weekday: Weekday


@dataclass(frozen=True)
class LastWeekday:
    weekday: Weekday


@dataclass(frozen=True)
class DayInMonth:
    day: int
    strategy: MoveStrategy = stay_in_same_month


@dataclass(frozen=True)
class InMonth:
    ordinal: Ordinal
    weekday: Weekday


@dataclass(frozen=True)
class OnlyWhen:
    predicate: Callable[[Date], bool]
    moves: "Moves"


Move: TypeAlias = Shift | NextWeekday | LastWeekday | DayInMonth | InMonth | OnlyWhen

_MOVE_TYPES = (Shift, NextWeekday, LastWeekday, DayInMonth, InMonth, OnlyWhen)


@dataclass(frozen=True)
class Moves:
    steps: tuple[Move, ...] = field(default=())

    def __post_init__(self) -> None:
        for step in self.steps:
            if not isinstance(step, _MOVE_TYPES):
                raise TypeError(
                    f"Moves can only hold move steps, got {type(step).__name__}: "
                    f"{step!r}\n"
                    f"Hint: build steps with days(), months(), next_weekday(), ..."
                )

    def and_then(self, other: "Moves") -> "Moves":
        return Moves(self.steps + other.steps)

    def __add__(self, other: "Moves") -> "Moves":
        if not isinstance(other, Moves):
            return NotImplemented
        return self.and_then(other)

    def __iter__(self) -> Iterator[Move]:
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)

    def travel(self, date: Date) -> Date:
        return travel(self, date)


STAY = Moves()


def into_future(
    count: int, unit: Unit, strategy: MoveStrategy = stay_in_same_month
) -> Moves:
    """Move `count` units forward.

    Args:
        count: How many units to move
        unit: "days", "weeks", "months" or "years"
        strategy: Resolves impossible dates after month or year moves
    """
    return Moves((Shift(count, unit, strategy),))


def into_past(
    count: int, unit: Unit, strategy: MoveStrategy = stay_in_same_month
) -> Moves:
    return into_future(-count, unit, strategy)


def days(count: int) -> Moves:
    return into_future(count, "days")


def weeks(count: int) -> Moves:
    return into_future(count, "weeks")


def months(count: int, strategy: MoveStrategy = stay_in_same_month) -> Moves:
    return into_future(count, "months", strategy)


def years(count: int, strategy: MoveStrategy = stay_in_same_month) -> Moves:
    return into_future(count, "years", strategy)


def next_weekday(weekday: Weekday) -> Moves:
    return Moves((NextWeekday(weekday),))


def last_weekday(weekday: Weekday) -> Moves:
    return Moves((LastWeekday(weekday),))


def to_day_in_month(day: int, strategy: MoveStrategy = stay_in_same_month) -> Moves:
    """Jump to day `day` of the current month.

    `day` is held to 1..31 first; days past the end of the month then go
    through `strategy`.
    """
    return Moves((DayInMonth(day, strategy),))


def in_month(ordinal: Ordinal, weekday: Weekday) -> Moves:
    """Jump to the `ordinal` occurrence of `weekday` in the current month.

    Counting from the start, an ordinal past the month's last occurrence
    runs into the next month (the fifth Monday of a month with four lands
    in the following one); counting from the end runs into the previous.
    """
    return Moves((InMonth(ordinal, weekday),))


def only_when(predicate: Callable[[Date], bool], moves: Moves) -> Moves:
    """Apply `moves` only to dates for which `predicate` holds."""
    return Moves((OnlyWhen(predicate, moves),))


def _shift(step: Shift, date: Date) -> Date:
    if step.unit == "days":
        return dates.into_future(dates.days(step.count), date)
    if step.unit == "weeks":
        return dates.into_future(dates.weeks(step.count), date)
    reading = to_gregorian_date(date)
    if step.unit == "months":
        moved = add_months(step.count, reading, step.strategy)
    else:
        moved = add_years(step.count, reading, step.strategy)
    return from_gregorian_date(moved)


def _day_in_month(step: DayInMonth, date: Date) -> Date:
    reading = to_gregorian_date(date)
    target = GregorianDate(reading.year, reading.month, min(max(1, step.day), 31))
    return from_gregorian_date(step.strategy(target))


def _in_month(step: InMonth, date: Date) -> Date:
    first = first_of_month(date)
    extra = dates.weeks(step.ordinal.nth - 1)
    if step.ordinal.from_end:
        reading = to_gregorian_date(first)
        length = days_in_month(reading.month, reading.year)
        following = dates.into_future(dates.days(length), first)
        return dates.into_past(extra, dates.last(step.weekday, following))
    # the day before the 1st, so a month starting on `weekday` counts its 1st
    eve = dates.into_past(dates.days(1), first)
    return dates.into_future(extra, dates.next(step.weekday, eve))


def _apply(date: Date, step: Move) -> Date:
    if isinstance(step, Shift):
        return _shift(step, date)
    if isinstance(step, NextWeekday):
        return dates.next(step.weekday, date)
    if isinstance(step, LastWeekday):
        return dates.last(step.weekday, date)
    if isinstance(step, DayInMonth):
        return _day_in_month(step, date)
    if isinstance(step, InMonth):
        return _in_month(step, date)
    if isinstance(step, OnlyWhen):
        return travel(step.moves, date) if step.predicate(date) else date
    raise TypeError(f"Unknown move step: {step!r}")


def travel(moves: Moves, date: Date) -> Date:
    """Replay `moves` against `date`, first step first."""
    return reduce(_apply, moves.steps, date)
