"""Composable predicates over dates.

Properties read a value off a `Date`; comparing a property with a value
builds a `Filter`. Filters combine with `&`, `|` and `~` and are what
`tzalgebra.moves.only_when` expects:

    >>> from tzalgebra.date import Weekday
    >>> from tzalgebra.properties import day, weekday, one_of
    >>> weekend = one_of(weekday, [Weekday.SATURDAY, Weekday.SUNDAY])
    >>> late_weekend = weekend & (day > 20)
"""

import operator as op
from abc import ABC, abstractmethod
from collections.abc import Callable, Hashable, Iterable
from typing import Any

from typing_extensions import override

from tzalgebra.date import Date, Weekday, to_weekday
from tzalgebra.gregorian import Month, day_of, is_leap_year, month_of, year_of
from tzalgebra.gregorian import day_of_year as ordinal_day


class Filter(ABC):

    @abstractmethod
    def apply(self, date: Date) -> bool:
        pass

    def __call__(self, date: Date) -> bool:
        return self.apply(date)

    def __or__(self, other: "Filter") -> "Filter":
        if not isinstance(other, Filter):
            raise TypeError(
                f"Cannot combine (|) a Filter with {type(other).__name__}.\n"
                f"Hint: wrap plain callables with when(...): "
                f"(day > 20) | when(my_predicate)"
            )
        return Or(self, other)

    def __and__(self, other: "Filter") -> "Filter":
        if not isinstance(other, Filter):
            raise TypeError(
                f"Cannot combine (&) a Filter with {type(other).__name__}.\n"
                f"Hint: wrap plain callables with when(...): "
                f"(day > 20) & when(my_predicate)"
            )
        return And(self, other)

    def __invert__(self) -> "Filter":
        return Not(self)


class Or(Filter):
    def __init__(self, *filters: Filter):
        super().__init__()
        self.filters: tuple[Filter, ...] = filters

    @override
    def apply(self, date: Date) -> bool:
        return any(f.apply(date) for f in self.filters)


class And(Filter):
    def __init__(self, *filters: Filter):
        super().__init__()
        self.filters: tuple[Filter, ...] = filters

    @override
    def apply(self, date: Date) -> bool:
        return all(f.apply(date) for f in self.filters)


class Not(Filter):
    def __init__(self, source: Filter):
        super().__init__()
        self.source: Filter = source

    @override
    def apply(self, date: Date) -> bool:
        return not self.source.apply(date)


class When(Filter):
    """Adapt a plain `Date -> bool` callable into a Filter."""

    def __init__(self, predicate: Callable[[Date], bool]):
        self.predicate: Callable[[Date], bool] = predicate

    @override
    def apply(self, date: Date) -> bool:
        return bool(self.predicate(date))


class Operator(Filter):
    def __init__(
        self,
        left: "Property | Any",
        right: "Property | Any",
        operator: Callable[[Any, Any], bool],
    ):
        self.left: "Property | Any" = left
        self.right: "Property | Any" = right
        self.operator: Callable[[Any, Any], bool] = operator

    @override
    def apply(self, date: Date) -> bool:
        left_val = self.left.apply(date) if isinstance(self.left, Property) else self.left
        right_val = (
            self.right.apply(date) if isinstance(self.right, Property) else self.right
        )
        return self.operator(left_val, right_val)


class Property:
    def apply(self, date: Date) -> Any:
        raise NotImplementedError

    def __ge__(self, other: "Property | Any") -> Operator:
        return Operator(self, other, op.ge)

    def __le__(self, other: "Property | Any") -> Operator:
        return Operator(self, other, op.le)

    def __gt__(self, other: "Property | Any") -> Operator:
        return Operator(self, other, op.gt)

    def __lt__(self, other: "Property | Any") -> Operator:
        return Operator(self, other, op.lt)

    @override
    def __eq__(  # pyright: ignore[reportIncompatibleMethodOverride]
        self, other: Any
    ) -> Operator:
        return Operator(self, other, op.eq)

    @override
    def __ne__(  # pyright: ignore[reportIncompatibleMethodOverride]
        self,
        other: Any,
    ) -> Operator:
        return Operator(self, other, op.ne)


class WeekdayOf(Property):
    @override
    def apply(self, date: Date) -> Weekday:
        return to_weekday(date)


class DayOf(Property):
    @override
    def apply(self, date: Date) -> int:
        return day_of(date)


class MonthOf(Property):
    @override
    def apply(self, date: Date) -> Month:
        return month_of(date)


class YearOf(Property):
    @override
    def apply(self, date: Date) -> int:
        return year_of(date)


class DayOfYear(Property):
    @override
    def apply(self, date: Date) -> int:
        return ordinal_day(date)


weekday: WeekdayOf = WeekdayOf()
day: DayOf = DayOf()
month: MonthOf = MonthOf()
year: YearOf = YearOf()
day_of_year: DayOfYear = DayOfYear()
in_leap_year: Filter = When(lambda d: is_leap_year(year_of(d)))


def one_of(property: Property, values: Iterable[Hashable]) -> Operator:
    return Operator(set(values), property, op.contains)


def when(predicate: Callable[[Date], bool]) -> Filter:
    return When(predicate)
