"""Access to "now" as an explicit capability.

Nothing in tzalgebra reads the host clock on its own. Code that needs the
current moment takes a `Clock`; tests pass a `FixedClock`.
"""

import logging
from abc import ABC, abstractmethod
from time import localtime, time_ns

from typing_extensions import override

from tzalgebra.date import Date
from tzalgebra.moment import Moment
from tzalgebra.zone import TimeZone, fixed_offset, to_date, utc

logger = logging.getLogger(__name__)


class Clock(ABC):

    @abstractmethod
    def now(self) -> Moment:
        pass

    @abstractmethod
    def local_zone(self) -> TimeZone:
        """Zone the host uses for civil time, as of now."""
        pass

    def today(self) -> Date:
        return to_date(self.local_zone(), self.now())


class SystemClock(Clock):
    """Reads the host's clock and its current UTC offset.

    The host zone is reported as a fixed offset; its daylight-saving
    rules are not available.
    """

    @override
    def now(self) -> Moment:
        return Moment(epoch_milliseconds=time_ns() // 1_000_000)

    @override
    def local_zone(self) -> TimeZone:
        offset_minutes = localtime().tm_gmtoff // 60
        logger.debug("Host UTC offset is %d minutes", offset_minutes)
        return fixed_offset(offset_minutes)


class FixedClock(Clock):
    def __init__(self, moment: Moment, zone: TimeZone = utc):
        self.moment: Moment = moment
        self.zone: TimeZone = zone

    @override
    def now(self) -> Moment:
        return self.moment

    @override
    def local_zone(self) -> TimeZone:
        return self.zone
