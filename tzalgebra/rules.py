"""Daylight-saving zones built from explicit annual rules.

Zone data is supplied as rules rather than read from a time-zone
database: "switch to summer time on the last Sunday of March at 02:00".
The transition days are expanded with python-dateutil's rrule, then turned
into `Period`s of a `TimeZone`.

Example:
    >>> from tzalgebra.date import Weekday
    >>> from tzalgebra.timeofday import h24
    >>> begins = AnnualRule(month=3, weekday=Weekday.SUNDAY, week=-1, at=h24(2).minutes(0))
    >>> ends = AnnualRule(month=10, weekday=Weekday.SUNDAY, week=-1, at=h24(3).minutes(0))
    >>> brussels = seasonal_zone(60, 120, begins, ends, first_year=2018, last_year=2020)
"""

import logging
from dataclasses import dataclass
from datetime import datetime

from dateutil.rrule import FR, MO, SA, SU, TH, TU, WE, YEARLY, rrule, weekday

from tzalgebra.date import Date, Weekday
from tzalgebra.gregorian import gregorian
from tzalgebra.timeofday import Time, h24
from tzalgebra.zone import (
    DateAndTime,
    Period,
    TimeZone,
    fixed_offset,
    to_moment,
    transition,
)

logger = logging.getLogger(__name__)

# Mapping from weekdays to dateutil weekday constants
_DAY_MAP: dict[Weekday, weekday] = {
    Weekday.MONDAY: MO,
    Weekday.TUESDAY: TU,
    Weekday.WEDNESDAY: WE,
    Weekday.THURSDAY: TH,
    Weekday.FRIDAY: FR,
    Weekday.SATURDAY: SA,
    Weekday.SUNDAY: SU,
}

# Fifth occurrences do not exist every year; read them as the outermost one
_OCCURRENCE = {5: -1, -5: 1}


@dataclass(frozen=True, kw_only=True)
class AnnualRule:
    """A transition that happens once a year.

    Attributes:
        month: Month of the transition (1-12)
        weekday: Day of the week it happens on
        week: Which occurrence in the month (1=first, 2=second, -1=last).
            5 means the last occurrence and -5 the first, so a rule for
            the fifth Sunday still fires in months with only four
        at: Wall-clock time, read in the offset in force before the switch
    """

    month: int
    weekday: Weekday
    week: int
    at: Time

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(
                f"AnnualRule month must be in range [1, 12], got {self.month}.\n"
                f"Example: AnnualRule(month=3, weekday=Weekday.SUNDAY, week=-1, ...)"
            )
        if self.week == 0 or not -5 <= self.week <= 5:
            raise ValueError(
                f"AnnualRule week must be 1..5 or -1..-5, got {self.week}.\n"
                f"Use 1 for the first occurrence, -1 for the last"
            )

    def days(self, first_year: int, last_year: int) -> list[Date]:
        """Return the transition day of every year in the range, inclusive."""
        rule = rrule(
            YEARLY,
            dtstart=datetime(first_year, 1, 1),
            until=datetime(last_year, 12, 31),
            bymonth=self.month,
            byweekday=_DAY_MAP[self.weekday](_OCCURRENCE.get(self.week, self.week)),
        )
        return [gregorian(day.year, day.month, day.day) for day in rule]


def seasonal_zone(
    standard_minutes: int,
    daylight_minutes: int,
    begins: AnnualRule,
    ends: AnnualRule,
    *,
    first_year: int,
    last_year: int,
) -> TimeZone:
    """Build a zone alternating between standard and daylight offsets.

    The zone's default mapping uses the offset in force on 1 January of
    `first_year`: the daylight offset when daylight time spans the new
    year (the year's first "ends" comes before its first "begins"), the
    standard offset otherwise.

    Args:
        standard_minutes: Standard offset east of UTC, in minutes
        daylight_minutes: Daylight-saving offset east of UTC, in minutes
        begins: When daylight saving starts each year
        ends: When daylight saving ends each year
        first_year: First year with transitions (>= 1)
        last_year: Last year with transitions (>= first_year, <= 9999)
    """
    if not 1 <= first_year <= last_year <= 9999:
        raise ValueError(
            f"Year range must satisfy 1 <= first_year <= last_year <= 9999.\n"
            f"Got first_year={first_year}, last_year={last_year}\n"
            f"Example: seasonal_zone(..., first_year=1996, last_year=2037)"
        )

    standard = fixed_offset(standard_minutes)
    daylight = fixed_offset(daylight_minutes)

    begin_days = begins.days(first_year, last_year)
    end_days = ends.days(first_year, last_year)

    periods: list[Period] = []
    for day in begin_days:
        switch = to_moment(standard, DateAndTime(day, begins.at))
        periods.append(transition(switch, daylight_minutes))
    for day in end_days:
        switch = to_moment(daylight, DateAndTime(day, ends.at))
        periods.append(transition(switch, standard_minutes))

    periods.sort(key=lambda p: p.start.moment)
    logger.debug(
        "Built %d transitions for %d..%d (standard %+d min, daylight %+d min)",
        len(periods),
        first_year,
        last_year,
        standard_minutes,
        daylight_minutes,
    )
    spans_new_year = bool(begin_days and end_days) and (
        end_days[0].jdn < begin_days[0].jdn
    )
    initial = daylight if spans_new_year else standard
    return TimeZone(initial.default, tuple(periods))


def central_european(first_year: int = 1996, last_year: int = 2037) -> TimeZone:
    """CET/CEST: last Sunday of March to last Sunday of October at 01:00 UTC."""
    return seasonal_zone(
        60,
        120,
        AnnualRule(month=3, weekday=Weekday.SUNDAY, week=-1, at=h24(2).minutes(0)),
        AnnualRule(month=10, weekday=Weekday.SUNDAY, week=-1, at=h24(3).minutes(0)),
        first_year=first_year,
        last_year=last_year,
    )


def us_eastern(first_year: int = 2007, last_year: int = 2037) -> TimeZone:
    """EST/EDT: second Sunday of March to first Sunday of November at 02:00."""
    return seasonal_zone(
        -300,
        -240,
        AnnualRule(month=3, weekday=Weekday.SUNDAY, week=2, at=h24(2).minutes(0)),
        AnnualRule(month=11, weekday=Weekday.SUNDAY, week=1, at=h24(2).minutes(0)),
        first_year=first_year,
        last_year=last_year,
    )
