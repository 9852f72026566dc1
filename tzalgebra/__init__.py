from .clock import Clock, FixedClock, SystemClock
from .date import Date, Duration, Weekday, from_jdn, to_jdn, to_weekday
from .gregorian import (
    GregorianDate,
    Month,
    from_gregorian_date,
    is_leap_year,
    roll_into_next_month,
    stay_in_same_month,
    to_gregorian_date,
)
from .lapse import Direction, Elapsed, TimeLapse, hours, milliseconds, minutes, seconds
from .moment import Moment, from_epoch_milliseconds, to_epoch_milliseconds
from .moves import (
    FIFTH,
    FIRST,
    FOURTH,
    LAST,
    SECOND,
    SECOND_TO_LAST,
    THIRD,
    THIRD_TO_LAST,
    Moves,
    Ordinal,
    in_month,
    into_future,
    into_past,
    last_weekday,
    next_weekday,
    only_when,
    to_day_in_month,
    travel,
)
from .properties import (
    Filter,
    Property,
    day,
    day_of_year,
    month,
    one_of,
    weekday,
    when,
    year,
)
from .recurrence import Recurrence, recurring
from .rules import AnnualRule, central_european, seasonal_zone, us_eastern
from .timeofday import MIDNIGHT, NOON, Meridiem, Time, am, h24, pm, to_12_hours
from .zone import (
    DateAndTime,
    Mapping,
    Period,
    TimeZone,
    fixed_offset,
    to_date_and_time,
    to_moment,
    to_noon,
    transition,
    utc,
)

__all__ = [
    "Moment",
    "TimeLapse",
    "Direction",
    "Elapsed",
    "Date",
    "Duration",
    "Weekday",
    "Time",
    "Meridiem",
    "DateAndTime",
    "Mapping",
    "Period",
    "TimeZone",
    "GregorianDate",
    "Month",
    "Moves",
    "Ordinal",
    "Filter",
    "Property",
    "Recurrence",
    "AnnualRule",
    "Clock",
    "SystemClock",
    "FixedClock",
    "from_epoch_milliseconds",
    "to_epoch_milliseconds",
    "hours",
    "minutes",
    "seconds",
    "milliseconds",
    "from_jdn",
    "to_jdn",
    "to_weekday",
    "am",
    "pm",
    "h24",
    "to_12_hours",
    "NOON",
    "MIDNIGHT",
    "utc",
    "fixed_offset",
    "transition",
    "to_date_and_time",
    "to_moment",
    "to_noon",
    "to_gregorian_date",
    "from_gregorian_date",
    "is_leap_year",
    "stay_in_same_month",
    "roll_into_next_month",
    "into_future",
    "into_past",
    "next_weekday",
    "last_weekday",
    "to_day_in_month",
    "in_month",
    "only_when",
    "travel",
    "FIRST",
    "SECOND",
    "THIRD",
    "FOURTH",
    "FIFTH",
    "LAST",
    "SECOND_TO_LAST",
    "THIRD_TO_LAST",
    "weekday",
    "day",
    "month",
    "year",
    "day_of_year",
    "one_of",
    "when",
    "recurring",
    "seasonal_zone",
    "central_european",
    "us_eastern",
]
