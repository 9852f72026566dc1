"""Absolute points on the physical timeline.

A `Moment` counts milliseconds since 1970-01-01T00:00:00 in the
zero-offset frame. It carries no calendar information; use a
`tzalgebra.zone.TimeZone` to read it as a civil date and time.
"""

from dataclasses import dataclass

from tzalgebra.lapse import Direction, Elapsed, TimeLapse


@dataclass(frozen=True, order=True, kw_only=True)
class Moment:
    epoch_milliseconds: int

    def __str__(self) -> str:
        return f"Moment({self.epoch_milliseconds}ms)"


EPOCH = Moment(epoch_milliseconds=0)


def from_epoch_milliseconds(value: int) -> Moment:
    return Moment(epoch_milliseconds=value)


def to_epoch_milliseconds(moment: Moment) -> int:
    return moment.epoch_milliseconds


def into_future(lapse: TimeLapse, moment: Moment) -> Moment:
    """Move `moment` forward by `lapse`.

    A negative lapse is accepted and moves into the past instead.
    """
    return Moment(epoch_milliseconds=moment.epoch_milliseconds + lapse.milliseconds)


def into_past(lapse: TimeLapse, moment: Moment) -> Moment:
    return Moment(epoch_milliseconds=moment.epoch_milliseconds - lapse.milliseconds)


def elapsed(start: Moment, end: Moment) -> Elapsed[TimeLapse]:
    """Return the lapse between two moments and which way it points.

    Equal moments report a zero lapse into the future.
    """
    delta = end.epoch_milliseconds - start.epoch_milliseconds
    if delta >= 0:
        return Elapsed(TimeLapse(milliseconds=delta), Direction.INTO_FUTURE)
    return Elapsed(TimeLapse(milliseconds=-delta), Direction.INTO_PAST)


def earliest(a: Moment, b: Moment) -> Moment:
    return a if a <= b else b


def latest(a: Moment, b: Moment) -> Moment:
    return a if a >= b else b


def compare(a: Moment, b: Moment) -> int:
    """Return -1, 0 or 1 as `a` is before, equal to or after `b`."""
    return (a > b) - (a < b)
