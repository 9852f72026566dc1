"""Elapsed physical time measured in milliseconds.

A `TimeLapse` knows nothing about calendar days: under daylight saving
24 hours and "one day" differ. Build lapses from the unit builders and
combine them with `+`:

    >>> from tzalgebra.lapse import hours, minutes, view
    >>> lapse = hours(1) + minutes(30)
    >>> view(lapse)
    LapseView(hours=1, minutes=30, seconds=0, milliseconds=0)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from tzalgebra.util import HOUR, MINUTE, SECOND

T = TypeVar("T")


class Direction(Enum):
    INTO_FUTURE = "into_future"
    INTO_PAST = "into_past"


@dataclass(frozen=True)
class Elapsed(Generic[T]):
    """Magnitude of a displacement plus the direction it points in."""

    magnitude: T
    direction: Direction


@dataclass(frozen=True, order=True, kw_only=True)
class TimeLapse:
    milliseconds: int

    def __add__(self, other: "TimeLapse") -> "TimeLapse":
        if not isinstance(other, TimeLapse):
            return NotImplemented
        return TimeLapse(milliseconds=self.milliseconds + other.milliseconds)

    def __str__(self) -> str:
        parts = view(self)
        return (
            f"TimeLapse({parts.hours}h{parts.minutes:02d}m"
            f"{parts.seconds:02d}.{parts.milliseconds:03d}s)"
        )


@dataclass(frozen=True)
class LapseView:
    hours: int
    minutes: int
    seconds: int
    milliseconds: int


ZERO = TimeLapse(milliseconds=0)


def hours(count: int) -> TimeLapse:
    return TimeLapse(milliseconds=count * HOUR)


def minutes(count: int) -> TimeLapse:
    return TimeLapse(milliseconds=count * MINUTE)


def seconds(count: int) -> TimeLapse:
    return TimeLapse(milliseconds=count * SECOND)


def milliseconds(count: int) -> TimeLapse:
    return TimeLapse(milliseconds=count)


def view(lapse: TimeLapse) -> LapseView:
    """Decompose a lapse into hours, minutes, seconds and milliseconds.

    Uses floor division with successive remainders, so for negative lapses
    the hours go negative and the lower units stay non-negative.
    """
    h, rest = divmod(lapse.milliseconds, HOUR)
    m, rest = divmod(rest, MINUTE)
    s, ms = divmod(rest, SECOND)
    return LapseView(hours=h, minutes=m, seconds=s, milliseconds=ms)


def to_milliseconds(lapse: TimeLapse) -> int:
    return lapse.milliseconds
