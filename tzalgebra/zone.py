"""Time zones as piecewise bijections between Moments and civil readings.

A `TimeZone` holds a default `Mapping` plus any number of `Period`s. Each
period starts at a mapping and overrides the zone from that point onward,
until the chronologically next period starts. Within one period the
conversion is plain linear arithmetic; daylight-saving transitions are
handled entirely by choosing the right period.

Periods are assumed well formed: start moments and start date/times must
increase together. `TimeZone.validate()` checks this on request; the
conversions never do.

Example:
    >>> from tzalgebra.zone import fixed_offset, transition, to_date_and_time
    >>> from tzalgebra.moment import from_epoch_milliseconds
    >>> switch = from_epoch_milliseconds(1553994000000)  # 2019-03-31T01:00Z
    >>> brussels = fixed_offset(60).with_period(transition(switch, 120))
    >>> to_date_and_time(brussels, switch)  # 03:00 local on the 31st
"""

import logging
from dataclasses import dataclass, field

from tzalgebra import date as dates
from tzalgebra.date import Date
from tzalgebra.lapse import Direction, TimeLapse
from tzalgebra.moment import Moment, elapsed, into_future, into_past
from tzalgebra.timeofday import MIDNIGHT, NOON, Time
from tzalgebra.util import DAY, EPOCH_JDN, HALF_DAY, MINUTE

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class DateAndTime:
    """A civil reading: a date and a time of day with no zone attached.

    Ordered by date first, then time.
    """

    date: Date
    time: Time


@dataclass(frozen=True)
class Mapping:
    """Asserts that `moment` and `date_time` denote the same instant."""

    moment: Moment
    date_time: DateAndTime


@dataclass(frozen=True)
class Period:
    start: Mapping


@dataclass(frozen=True)
class TimeZone:
    default: Mapping
    periods: tuple[Period, ...] = field(default=())

    def with_period(self, *periods: Period) -> "TimeZone":
        """Return a copy of this zone with `periods` added."""
        return TimeZone(self.default, self.periods + tuple(periods))

    def validate(self) -> "TimeZone":
        """Check that periods advance in both moment and civil order.

        Returns the zone itself so the check can be chained.

        Raises:
            ValueError: If two periods are out of order or tie on a start.
        """
        ordered = sorted(self.periods, key=lambda p: p.start.moment)
        for before, after in zip(ordered, ordered[1:]):
            if before.start.moment == after.start.moment:
                raise ValueError(
                    f"TimeZone periods share a start moment.\n"
                    f"Got two periods starting at {after.start.moment}\n"
                    f"Hint: each period must start strictly after the previous one"
                )
            if before.start.date_time >= after.start.date_time:
                raise ValueError(
                    f"TimeZone periods are not in the same order on both sides.\n"
                    f"Period at {before.start.moment} reads {before.start.date_time}, "
                    f"period at {after.start.moment} reads {after.start.date_time}\n"
                    f"Hint: build periods with transition(moment, offset_minutes)"
                )
        return self


def _epoch_mapping(offset_ms: int) -> Mapping:
    # Midnight of 1970-01-01 local time happens `offset_ms` before Moment 0
    return Mapping(
        Moment(epoch_milliseconds=-offset_ms),
        DateAndTime(Date(jdn=EPOCH_JDN), MIDNIGHT),
    )


def fixed_offset(offset_minutes: int) -> TimeZone:
    """Return a zone with a constant offset from UTC and no periods.

    Args:
        offset_minutes: Minutes east of UTC (60 for CET, -300 for EST)

    Raises:
        ValueError: If the offset is not within a day of UTC
    """
    if not -24 * 60 < offset_minutes < 24 * 60:
        raise ValueError(
            f"offset_minutes must be strictly within ±1440, got {offset_minutes}.\n"
            f"Example: fixed_offset(60) for UTC+01:00, fixed_offset(-300) for UTC-05:00"
        )
    return TimeZone(_epoch_mapping(offset_minutes * MINUTE))


utc = fixed_offset(0)


def transition(moment: Moment, offset_minutes: int) -> Period:
    """Return a period switching to `offset_minutes` at `moment`."""
    reading = to_date_and_time(fixed_offset(offset_minutes), moment)
    return Period(Mapping(moment, reading))


def _mapping_for_moment(zone: TimeZone, moment: Moment) -> Mapping:
    candidates = [p.start for p in zone.periods if p.start.moment <= moment]
    if not candidates:
        return zone.default
    mapping = max(candidates, key=lambda m: m.moment)
    logger.debug("Moment %s falls in period starting %s", moment, mapping.moment)
    return mapping


def _mapping_for_date_time(zone: TimeZone, date_time: DateAndTime) -> Mapping:
    candidates = [p.start for p in zone.periods if p.start.date_time <= date_time]
    if not candidates:
        return zone.default
    mapping = max(candidates, key=lambda m: m.date_time)
    logger.debug(
        "Reading %s falls in period starting %s", date_time, mapping.date_time
    )
    return mapping


def to_date_and_time(zone: TimeZone, moment: Moment) -> DateAndTime:
    """Read `moment` as a civil date and time in `zone`.

    The lapse from the active mapping is split into whole days plus a
    remainder. The remainder is added to the mapping's own time of day, and
    an extra day is carried when that crosses a midnight.
    """
    mapping = _mapping_for_moment(zone, moment)
    span = elapsed(mapping.moment, moment)
    whole_days, rest = divmod(span.magnitude.milliseconds, DAY)
    start_jdn = mapping.date_time.date.jdn
    start_time = mapping.date_time.time.from_noon

    if span.direction is Direction.INTO_FUTURE:
        if rest >= HALF_DAY - start_time:
            jdn, from_noon = start_jdn + whole_days + 1, start_time + rest - DAY
        else:
            jdn, from_noon = start_jdn + whole_days, start_time + rest
    else:
        if rest > HALF_DAY + start_time:
            jdn, from_noon = start_jdn - whole_days - 1, start_time - rest + DAY
        else:
            jdn, from_noon = start_jdn - whole_days, start_time - rest

    return DateAndTime(Date(jdn=jdn), Time(from_noon=from_noon))


def to_moment(zone: TimeZone, date_time: DateAndTime) -> Moment:
    """Return the moment `date_time` denotes in `zone`.

    Civil readings skipped by a forward transition resolve through the
    period in force before it, landing after the switch moment.
    """
    mapping = _mapping_for_date_time(zone, date_time)
    delta = (date_time.date.jdn - mapping.date_time.date.jdn) * DAY + (
        date_time.time.from_noon - mapping.date_time.time.from_noon
    )
    if delta >= 0:
        return into_future(TimeLapse(milliseconds=delta), mapping.moment)
    return into_past(TimeLapse(milliseconds=-delta), mapping.moment)


def to_noon(zone: TimeZone, date: Date) -> Moment:
    return to_moment(zone, DateAndTime(date, NOON))


def to_date(zone: TimeZone, moment: Moment) -> Date:
    return to_date_and_time(zone, moment).date


def to_time(zone: TimeZone, moment: Moment) -> Time:
    return to_date_and_time(zone, moment).time


def offset_at(zone: TimeZone, moment: Moment) -> TimeLapse:
    """Return how far the civil reading of `moment` runs ahead of UTC."""
    local = to_moment(utc, to_date_and_time(zone, moment))
    return TimeLapse(milliseconds=local.epoch_milliseconds - moment.epoch_milliseconds)


def with_time(time: Time, date: Date) -> DateAndTime:
    return DateAndTime(date, time)


def shift_date(
    duration: dates.Duration, date_time: DateAndTime
) -> DateAndTime:
    """Move the date part by whole days, keeping the wall-clock time."""
    return DateAndTime(dates.into_future(duration, date_time.date), date_time.time)
