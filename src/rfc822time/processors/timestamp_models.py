"""Timestamp Data Model

Immutable value types produced by the RFC 822 parsing pipeline.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import Optional

from dateutil.tz import tzoffset, tzutc

from .instant_converter import day_of_week

_EPOCH = datetime(1970, 1, 1, tzinfo=tzutc())

WEEKDAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


class RejectionReason(Enum):
    """Why a stamp was not turned into a ParsedTimestamp."""
    NO_MATCH = "no_match"                              # Shape does not fit the grammar
    INVALID_CALENDAR_VALUE = "invalid_calendar_value"  # Shape fits, values do not


@dataclass(frozen=True)
class RawFields:
    """Grammar groups exactly as matched."""
    day_of_week: Optional[str]  # "Mon," or None
    day: str
    month: str
    year: str
    hour: str
    minute: str
    second: Optional[str]       # ":05" or None
    time_zone: str


@dataclass(frozen=True)
class Tokens:
    """Textual fields of a stamp, kept independent of their decoded values."""
    day_of_week: str  # Mon..Sun, or "" when absent
    day: str          # 1 or 2 digits
    month: str        # Jan..Dec
    year: str         # 2 to 4 digits
    hour: str
    minute: str
    second: str       # "" when absent
    time_zone: str    # EST, GMT, Z, ... or a differential such as -0500


@dataclass(frozen=True)
class CivilDateTime:
    """Decoded date and time as written, in the stamp's own time zone.

    These values are never adjusted by the time zone differential.
    """
    day: int = 1
    month: int = 1
    year: int = 1970
    hour: int = 0
    minute: int = 0
    second: int = 0
    time_zone_differential: int = 0  # minutes; EST = -300, +1230 = 750

    @property
    def implied_day_of_week(self) -> str:
        """Three-letter weekday name of the civil date."""
        return WEEKDAY_NAMES[day_of_week(self.year, self.month, self.day)]


@dataclass(frozen=True, order=True)
class ParsedTimestamp:
    """A successfully parsed RFC 822 stamp.

    Equality, hashing and ordering consider only ``instant``: two stamps
    written differently but naming the same moment compare equal.
    """
    stamp: str = field(compare=False)
    instant: int  # seconds since 1970-01-01T00:00:00Z
    tokens: Tokens = field(compare=False, repr=False)
    date_time: CivilDateTime = field(compare=False)

    @property
    def time_zone_differential(self) -> int:
        return self.date_time.time_zone_differential

    @property
    def utc_datetime(self) -> datetime:
        """The instant as an aware UTC datetime.

        Raises:
            OverflowError: If the instant lies outside the datetime range
        """
        return _EPOCH + timedelta(seconds=self.instant)

    @property
    def local_datetime(self) -> datetime:
        """The instant expressed in the stamp's own fixed offset."""
        zone = tzoffset(self.tokens.time_zone, self.time_zone_differential * 60)
        return self.utc_datetime.astimezone(zone)

    @property
    def day_of_week_consistent(self) -> bool:
        """False only when a day-of-week is given and disagrees with the date."""
        if not self.tokens.day_of_week:
            return True
        return self.tokens.day_of_week == self.date_time.implied_day_of_week
