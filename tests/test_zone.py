"""Tests for the TimeZone conversion engine."""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from tzalgebra.date import Weekday, days, from_jdn, to_jdn, to_weekday
from tzalgebra.gregorian import gregorian
from tzalgebra.lapse import hours, minutes
from tzalgebra.moment import Moment, from_epoch_milliseconds, into_future, into_past
from tzalgebra.rules import central_european
from tzalgebra.timeofday import MIDNIGHT, NOON, h24
from tzalgebra.util import DAY, EPOCH_JDN, HOUR, MINUTE
from tzalgebra.zone import (
    DateAndTime,
    Mapping,
    Period,
    TimeZone,
    fixed_offset,
    offset_at,
    shift_date,
    to_date,
    to_date_and_time,
    to_moment,
    to_noon,
    to_time,
    transition,
    utc,
    with_time,
)


def at(*fields: int) -> Moment:
    """Moment for a UTC wall-clock reading."""
    stamp = datetime(*fields, tzinfo=timezone.utc)
    return from_epoch_milliseconds(int(stamp.timestamp()) * 1000)


def reading(year: int, month: int, day: int, hour: int, minute: int) -> DateAndTime:
    return DateAndTime(gregorian(year, month, day), h24(hour).minutes(minute))


SWITCH = at(2019, 3, 31, 1)
BRUSSELS_2019 = fixed_offset(60).with_period(transition(SWITCH, 120))


def test_epoch_fixed_point():
    civil = to_date_and_time(utc, from_epoch_milliseconds(0))
    assert to_jdn(civil.date) == 2440588
    assert civil.time == MIDNIGHT
    assert to_weekday(civil.date) is Weekday.THURSDAY


def test_one_millisecond_before_epoch_is_previous_day():
    civil = to_date_and_time(utc, from_epoch_milliseconds(-1))
    assert civil.date == from_jdn(EPOCH_JDN - 1)
    assert civil.time == h24(23).minutes(59).with_seconds(59).with_milliseconds(999)


def test_fixed_offset_reads_shifted_wall_clock():
    eastern = fixed_offset(-300)
    assert to_date_and_time(eastern, from_epoch_milliseconds(0)) == reading(
        1969, 12, 31, 19, 0
    )
    india = fixed_offset(330)
    assert to_date_and_time(india, at(2019, 6, 1, 20, 0)) == reading(2019, 6, 2, 1, 30)


def test_fixed_offset_rejects_offsets_beyond_a_day():
    with pytest.raises(ValueError, match="offset_minutes must be strictly within"):
        fixed_offset(24 * 60)
    with pytest.raises(ValueError, match="offset_minutes must be strictly within"):
        fixed_offset(-24 * 60)


def test_zone_without_periods_is_constant_offset():
    zone = fixed_offset(60)
    for moment in (at(1900, 1, 1), at(2019, 3, 31, 1), at(2300, 7, 14, 23, 59)):
        assert offset_at(zone, moment) == hours(1)


def test_minute_before_switch_reads_standard_time():
    before = into_past(minutes(1), SWITCH)
    assert to_date_and_time(BRUSSELS_2019, before) == reading(2019, 3, 31, 1, 59)


def test_minute_after_switch_reads_summer_time():
    after = into_future(minutes(1), SWITCH)
    assert to_date_and_time(BRUSSELS_2019, after) == reading(2019, 3, 31, 3, 1)


def test_period_is_active_at_its_start_moment():
    assert to_date_and_time(BRUSSELS_2019, SWITCH) == reading(2019, 3, 31, 3, 0)


def test_period_is_active_at_its_start_reading():
    assert to_moment(BRUSSELS_2019, reading(2019, 3, 31, 3, 0)) == SWITCH


def test_readings_on_both_sides_of_switch_convert_back():
    assert to_moment(BRUSSELS_2019, reading(2019, 3, 31, 1, 0)) == into_past(
        hours(1), SWITCH
    )
    assert to_moment(BRUSSELS_2019, reading(2019, 3, 31, 4, 0)) == into_future(
        hours(1), SWITCH
    )


def test_skipped_reading_resolves_through_earlier_period():
    """Test that 02:30 on the switch day lands half an hour after the switch."""
    assert to_moment(BRUSSELS_2019, reading(2019, 3, 31, 2, 30)) == into_future(
        minutes(30), SWITCH
    )


def test_moment_round_trip_around_switch():
    start = into_past(hours(30), SWITCH)
    for step in range(0, 60 * 60, 7):
        moment = into_future(minutes(step), start)
        assert to_moment(BRUSSELS_2019, to_date_and_time(BRUSSELS_2019, moment)) == moment


def test_moment_round_trip_far_from_mapping():
    zones = [utc, fixed_offset(60), fixed_offset(-570), BRUSSELS_2019]
    samples = [from_epoch_milliseconds(v) for v in range(-(10**14), 10**14, 77_777_777_777)]
    samples += [from_epoch_milliseconds(v) for v in (-1, 0, 1, DAY - 1, -DAY + 1)]
    for zone in zones:
        for moment in samples:
            assert to_moment(zone, to_date_and_time(zone, moment)) == moment


def test_readings_never_leave_the_day():
    """Test that every converted time of day stays in [00:00, 24:00)."""
    zone = fixed_offset(45)
    for step in range(0, 2 * DAY, 15 * MINUTE):
        for sign in (1, -1):
            civil = to_date_and_time(zone, from_epoch_milliseconds(sign * step))
            assert MIDNIGHT <= civil.time
            assert civil.time.from_noon < 12 * HOUR


def test_midnight_exactly_starts_next_day():
    zone = fixed_offset(60)
    assert to_date_and_time(zone, at(2019, 1, 1, 23, 0)) == DateAndTime(
        gregorian(2019, 1, 2), MIDNIGHT
    )
    assert to_date_and_time(BRUSSELS_2019, into_future(hours(21), SWITCH)) == (
        DateAndTime(gregorian(2019, 4, 1), MIDNIGHT)
    )


def test_to_noon():
    assert to_noon(utc, from_jdn(EPOCH_JDN)) == from_epoch_milliseconds(12 * HOUR)
    assert to_noon(BRUSSELS_2019, gregorian(2019, 4, 1)) == at(2019, 4, 1, 10)


def test_projection_helpers():
    moment = at(2019, 4, 1, 10)
    assert to_date(BRUSSELS_2019, moment) == gregorian(2019, 4, 1)
    assert to_time(BRUSSELS_2019, moment) == NOON
    assert with_time(NOON, gregorian(2019, 4, 1)) == DateAndTime(
        gregorian(2019, 4, 1), NOON
    )
    assert shift_date(days(2), reading(2019, 3, 30, 13, 0)) == reading(
        2019, 4, 1, 13, 0
    )


def test_offset_at():
    assert offset_at(BRUSSELS_2019, into_past(minutes(1), SWITCH)) == hours(1)
    assert offset_at(BRUSSELS_2019, SWITCH) == hours(2)


def test_date_and_time_order_is_date_then_time():
    assert reading(2019, 3, 30, 23, 0) < reading(2019, 3, 31, 1, 0)
    assert reading(2019, 3, 31, 1, 0) < reading(2019, 3, 31, 2, 0)


def test_unordered_periods_are_accepted():
    """Test that period selection does not depend on storage order."""
    later = transition(at(2019, 10, 27, 1), 60)
    first = transition(SWITCH, 120)
    zone = TimeZone(fixed_offset(60).default, (later, first))
    assert to_date_and_time(zone, at(2019, 6, 1, 10)) == reading(2019, 6, 1, 12, 0)
    assert to_date_and_time(zone, at(2019, 11, 1, 10)) == reading(2019, 11, 1, 11, 0)
    assert zone.validate() is zone


def test_validate_rejects_shared_start():
    zone = fixed_offset(60).with_period(transition(SWITCH, 120), transition(SWITCH, 180))
    with pytest.raises(ValueError, match="share a start moment"):
        zone.validate()


def test_validate_rejects_inconsistent_order():
    inconsistent = Period(Mapping(into_future(hours(5), SWITCH), reading(2019, 3, 1, 0, 0)))
    zone = BRUSSELS_2019.with_period(inconsistent)
    with pytest.raises(ValueError, match="not in the same order"):
        zone.validate()


def test_matches_zoneinfo_for_brussels():
    zone = central_european(2018, 2020)
    brussels = ZoneInfo("Europe/Brussels")
    moment = at(2018, 1, 1)
    end = at(2021, 1, 1)
    step = 3 * HOUR + 17 * MINUTE
    while moment < end:
        local = datetime.fromtimestamp(moment.epoch_milliseconds // 1000, tz=brussels)
        expected = reading(local.year, local.month, local.day, local.hour, local.minute)
        assert to_date_and_time(zone, moment) == expected
        moment = from_epoch_milliseconds(moment.epoch_milliseconds + step)


def test_round_trip_outside_repeated_hour():
    """Test round trips for every reading that is not repeated at fall-back."""
    zone = central_european(2018, 2020)
    fall_backs = [at(2018, 10, 28, 1), at(2019, 10, 27, 1), at(2020, 10, 25, 1)]
    moment = at(2018, 1, 1)
    end = at(2021, 1, 1)
    while moment < end:
        repeated = any(into_past(hours(1), t) <= moment < t for t in fall_backs)
        if not repeated:
            assert to_moment(zone, to_date_and_time(zone, moment)) == moment
        moment = from_epoch_milliseconds(moment.epoch_milliseconds + 47 * MINUTE)


def test_repeated_reading_resolves_to_later_period():
    zone = central_european(2019, 2019)
    assert to_date_and_time(zone, at(2019, 10, 27, 0, 30)) == reading(
        2019, 10, 27, 2, 30
    )
    assert to_date_and_time(zone, at(2019, 10, 27, 1, 30)) == reading(
        2019, 10, 27, 2, 30
    )
    assert to_moment(zone, reading(2019, 10, 27, 2, 30)) == at(2019, 10, 27, 1, 30)
