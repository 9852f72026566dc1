"""Time of day, stored as a millisecond offset from noon.

Noon is 0 and midnight is -12h. Centering on noon keeps the split of a
moment into day and time of day symmetric around the mapping point.

Times are built in two steps so a value without minutes cannot exist:

    >>> from tzalgebra.timeofday import pm, view
    >>> meeting = pm(1).minutes(30)
    >>> view(meeting)
    TimeView(hour=13, minute=30, second=0, millisecond=0)
"""

from dataclasses import dataclass
from enum import Enum

from tzalgebra.util import HALF_DAY, HOUR, MINUTE, SECOND


class Meridiem(Enum):
    AM = "am"
    PM = "pm"


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


@dataclass(frozen=True, order=True, kw_only=True)
class Time:
    from_noon: int

    def with_seconds(self, second: int) -> "Time":
        """Replace the seconds, keeping hour, minute and millisecond."""
        parts = view(self)
        return _build(parts.hour, parts.minute, _clamp(second, 0, 59), parts.millisecond)

    def with_milliseconds(self, millisecond: int) -> "Time":
        """Replace the sub-second part, keeping hour, minute and second."""
        parts = view(self)
        return _build(parts.hour, parts.minute, parts.second, _clamp(millisecond, 0, 999))

    def __str__(self) -> str:
        parts = view(self)
        return (
            f"{parts.hour:02d}:{parts.minute:02d}:{parts.second:02d}"
            f".{parts.millisecond:03d}"
        )


@dataclass(frozen=True, kw_only=True)
class Hour:
    """An hour of the day still waiting for its minutes."""

    hour24: int

    def minutes(self, minute: int) -> Time:
        return _build(self.hour24, _clamp(minute, 0, 59), 0, 0)


@dataclass(frozen=True)
class TimeView:
    hour: int
    minute: int
    second: int
    millisecond: int


def _build(hour: int, minute: int, second: int, millisecond: int) -> Time:
    since_midnight = hour * HOUR + minute * MINUTE + second * SECOND + millisecond
    return Time(from_noon=since_midnight - HALF_DAY)


NOON = Time(from_noon=0)
MIDNIGHT = Time(from_noon=-HALF_DAY)


def am(hour: int) -> Hour:
    """Morning hour on the 12-hour clock; 12 AM is midnight."""
    hour = _clamp(hour, 1, 12)
    return Hour(hour24=0 if hour == 12 else hour)


def pm(hour: int) -> Hour:
    """Afternoon hour on the 12-hour clock; 12 PM is noon."""
    hour = _clamp(hour, 1, 12)
    return Hour(hour24=12 if hour == 12 else hour + 12)


def h24(hour: int) -> Hour:
    return Hour(hour24=_clamp(hour, 0, 23))


def view(time: Time) -> TimeView:
    # shift to midnight-based so every remainder below is non-negative
    hour, rest = divmod(time.from_noon + HALF_DAY, HOUR)
    minute, rest = divmod(rest, MINUTE)
    second, millisecond = divmod(rest, SECOND)
    return TimeView(hour=hour, minute=minute, second=second, millisecond=millisecond)


def to_12_hours(hour24: int) -> tuple[int, Meridiem]:
    """Map a 24-hour value to its 12-hour display and meridiem.

    Both 0 and 12 display as 12.
    """
    meridiem = Meridiem.AM if hour24 % 24 < 12 else Meridiem.PM
    hour = hour24 % 12
    return (hour or 12), meridiem


def from_noon_milliseconds(value: int) -> Time:
    return Time(from_noon=value)


def to_noon_milliseconds(time: Time) -> int:
    return time.from_noon


def compare(a: Time, b: Time) -> int:
    return (a.from_noon > b.from_noon) - (a.from_noon < b.from_noon)
