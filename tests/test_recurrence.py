"""Tests for civil-domain recurrences."""

from datetime import datetime, timezone
from itertools import islice

import pytest

from tzalgebra.date import Weekday
from tzalgebra.gregorian import gregorian
from tzalgebra.lapse import hours
from tzalgebra.moment import Moment, from_epoch_milliseconds, into_future
from tzalgebra.moves import FIRST, STAY, in_month, months, weeks
from tzalgebra.recurrence import Recurrence, recurring
from tzalgebra.rules import central_european
from tzalgebra.timeofday import h24, pm
from tzalgebra.zone import DateAndTime, fixed_offset, to_date_and_time, to_moment


def at(*fields: int) -> Moment:
    stamp = datetime(*fields, tzinfo=timezone.utc)
    return from_epoch_milliseconds(int(stamp.timestamp()) * 1000)


BRUSSELS = central_european(2018, 2020)
MEETING_START = DateAndTime(gregorian(2019, 3, 22), pm(1).minutes(0))


def test_weekly_meeting_keeps_wall_clock_across_dst():
    """Test that a 13:00 meeting stays at 13:00 after the March switch."""
    meeting = Recurrence(BRUSSELS, MEETING_START, weeks(1))
    readings = [to_date_and_time(BRUSSELS, m) for m in meeting.take(3)]
    assert readings == [
        DateAndTime(gregorian(2019, 3, 29), h24(13).minutes(0)),
        DateAndTime(gregorian(2019, 4, 5), h24(13).minutes(0)),
        DateAndTime(gregorian(2019, 4, 12), h24(13).minutes(0)),
    ]


def test_weekly_meeting_moments():
    meeting = recurring(BRUSSELS, MEETING_START, weeks(1))
    assert meeting.take(3) == [
        at(2019, 3, 29, 12),
        at(2019, 4, 5, 11),
        at(2019, 4, 12, 11),
    ]


def test_adding_hours_drifts_across_dst():
    """Test that 7 x 24 hours does not preserve the wall-clock hour."""
    start = to_moment(BRUSSELS, MEETING_START)
    naive = into_future(hours(14 * 24), start)
    assert to_date_and_time(BRUSSELS, naive) == DateAndTime(
        gregorian(2019, 4, 5), h24(14).minutes(0)
    )


def test_date_times_are_unbounded():
    meeting = Recurrence(fixed_offset(0), MEETING_START, weeks(1))
    fiftieth = list(islice(meeting.date_times(), 50))[-1]
    assert fiftieth == DateAndTime(gregorian(2020, 3, 6), h24(13).minutes(0))


def test_monthly_clamping_carries_forward():
    start = DateAndTime(gregorian(2019, 1, 31), h24(9).minutes(0))
    dates = [dt.date for dt in islice(Recurrence(BRUSSELS, start, months(1)).date_times(), 3)]
    assert dates == [gregorian(2019, 2, 28), gregorian(2019, 3, 28), gregorian(2019, 4, 28)]


def test_first_monday_of_each_month():
    start = DateAndTime(gregorian(2019, 1, 7), h24(9).minutes(30))
    series = Recurrence(BRUSSELS, start, months(1) + in_month(FIRST, Weekday.MONDAY))
    dates = [dt.date for dt in islice(series.date_times(), 3)]
    assert dates == [gregorian(2019, 2, 4), gregorian(2019, 3, 4), gregorian(2019, 4, 1)]


def test_empty_step_is_rejected():
    with pytest.raises(ValueError, match="Recurrence step must move the date"):
        Recurrence(BRUSSELS, MEETING_START, STAY)
