"""Tests for the injected clock capability."""

import time

from tzalgebra.clock import Clock, FixedClock, SystemClock
from tzalgebra.gregorian import gregorian
from tzalgebra.moment import from_epoch_milliseconds
from tzalgebra.zone import fixed_offset, utc


def test_fixed_clock_returns_its_values():
    moment = from_epoch_milliseconds(1553994000000)
    clock = FixedClock(moment)
    assert clock.now() == moment
    assert clock.local_zone() == utc
    assert clock.today() == gregorian(2019, 3, 31)


def test_today_uses_local_zone():
    # 2019-03-31T23:30Z is already April 1st east of UTC
    moment = from_epoch_milliseconds(1554075000000)
    assert FixedClock(moment).today() == gregorian(2019, 3, 31)
    assert FixedClock(moment, fixed_offset(60)).today() == gregorian(2019, 4, 1)


def test_system_clock_reads_host_time():
    clock: Clock = SystemClock()
    before = time.time_ns() // 1_000_000
    now = clock.now().epoch_milliseconds
    after = time.time_ns() // 1_000_000
    assert before <= now <= after


def test_system_clock_zone_has_no_periods():
    zone = SystemClock().local_zone()
    assert zone.periods == ()
    assert zone == fixed_offset(time.localtime().tm_gmtoff // 60)
