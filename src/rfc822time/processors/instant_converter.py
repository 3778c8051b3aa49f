"""Civil-to-Instant Converter

Closed-form conversion of a proleptic Gregorian date and time of day to
seconds since the Unix epoch, after Howard Hinnant's days_from_civil
(http://howardhinnant.github.io/date_algorithms.html).
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .timestamp_models import CivilDateTime

SECONDS_PER_MINUTE = 60
DAYS_PER_ERA = 146097           # days in 400 Gregorian years
EPOCH_DAY_OFFSET = 719468       # days from 0000-03-01 to 1970-01-01


def days_from_civil(year: int, month: int, day: int) -> int:
    """Count days since 1970-01-01; negative before the epoch.

    Preconditions: month in [1, 12] and day valid for that month.
    """
    # Treat January and February as months 13 and 14 of the previous year
    y = year - 1 if month <= 2 else year
    era = y // 400                                                  # floors for negative years
    yoe = y - era * 400                                             # [0, 399]
    doy = (153 * (month + (-3 if month > 2 else 9)) + 2) // 5 + day - 1  # [0, 365]
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy                   # [0, 146096]
    return era * DAYS_PER_ERA + doe - EPOCH_DAY_OFFSET


def seconds_from_civil(year: int, month: int, day: int,
                       hour: int, minute: int, second: int) -> int:
    """Seconds since the epoch, reading the civil time as if it were UTC."""
    days = days_from_civil(year, month, day)
    return ((days * 24 + hour) * 60 + minute) * 60 + second


def to_instant(date_time: "CivilDateTime") -> int:
    """Compute the UTC instant of a validated CivilDateTime.

    A positive differential means local time is ahead of UTC, so it is
    subtracted from the local time read as UTC.

    Args:
        date_time: Validated CivilDateTime

    Returns:
        Seconds since 1970-01-01T00:00:00Z
    """
    local_seconds = seconds_from_civil(
        date_time.year, date_time.month, date_time.day,
        date_time.hour, date_time.minute, date_time.second,
    )
    return local_seconds - date_time.time_zone_differential * SECONDS_PER_MINUTE


def day_of_week(year: int, month: int, day: int) -> int:
    """Weekday of a civil date, 0 = Sunday through 6 = Saturday."""
    # 1970-01-01 was a Thursday
    return (days_from_civil(year, month, day) + 4) % 7
