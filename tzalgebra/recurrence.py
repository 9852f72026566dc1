"""Recurring events replayed in the civil domain.

A weekly meeting at 13:00 should stay at 13:00 on the wall clock across a
daylight-saving switch. Adding 7 × 24 hours to a Moment does not do that;
moving the *date* by a week and converting back through the zone does.

Example:
    >>> from itertools import islice
    >>> from tzalgebra.gregorian import gregorian
    >>> from tzalgebra.moves import weeks
    >>> from tzalgebra.rules import central_european
    >>> from tzalgebra.timeofday import pm
    >>> from tzalgebra.zone import DateAndTime
    >>>
    >>> start = DateAndTime(gregorian(2019, 3, 22), pm(1).minutes(0))
    >>> meeting = Recurrence(central_european(), start, weeks(1))
    >>> next_three = meeting.take(3)  # Moments of 29 Mar, 5 Apr, 12 Apr
"""

from collections.abc import Iterator
from itertools import islice

from tzalgebra.moment import Moment
from tzalgebra.moves import Moves, travel
from tzalgebra.zone import DateAndTime, TimeZone, to_moment


class Recurrence:
    """Occurrences of `step` replayed from a civil starting point.

    Each occurrence applies `step` to the previous occurrence's date, so
    clamping by a move strategy carries forward (31 Jan + 1 month lands on
    28 Feb, and the next month on 28 Mar). The start itself is not an
    occurrence.
    """

    def __init__(self, zone: TimeZone, start: DateAndTime, step: Moves):
        if not step.steps:
            raise ValueError(
                "Recurrence step must move the date, got an empty Moves.\n"
                "Example: Recurrence(zone, start, weeks(1))"
            )
        self.zone: TimeZone = zone
        self.start: DateAndTime = start
        self.step: Moves = step

    def date_times(self) -> Iterator[DateAndTime]:
        """Yield civil occurrences without end."""
        current = self.start.date
        while True:
            current = travel(self.step, current)
            yield DateAndTime(current, self.start.time)

    def __iter__(self) -> Iterator[Moment]:
        return (to_moment(self.zone, dt) for dt in self.date_times())

    def take(self, count: int) -> list[Moment]:
        return list(islice(self, count))


def recurring(zone: TimeZone, start: DateAndTime, step: Moves) -> Recurrence:
    """Create a recurrence of `step` starting after `start` in `zone`.

    Supports unbounded iteration; use `itertools.islice` or `take`.

    Examples:
        >>> from tzalgebra.date import Weekday
        >>> from tzalgebra.moves import FIRST, in_month, months, weeks
        >>>
        >>> # Every other week
        >>> biweekly = recurring(zone, start, weeks(2))
        >>>
        >>> # First Monday of each month
        >>> first_monday = recurring(
        ...     zone, start, months(1) + in_month(FIRST, Weekday.MONDAY)
        ... )
    """
    return Recurrence(zone, start, step)
