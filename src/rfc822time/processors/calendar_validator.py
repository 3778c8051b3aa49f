"""Calendar Validator

Range checks for decoded date and time fields in the proleptic Gregorian
calendar.
"""

from .timestamp_models import CivilDateTime

# Months with 30 days, plus February
SHORT_MONTHS = frozenset({2, 4, 6, 9, 11})


def is_leap_year(year: int) -> bool:
    """Divisible by 4, and either not by 100 or also by 400."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_february(year: int) -> int:
    return 29 if is_leap_year(year) else 28


def is_valid_date(day: int, month: int, year: int) -> bool:
    """Check that day/month/year names a date that exists.

    Args:
        day: Day of month
        month: Month of year, 1 to 12 (0 never passes)
        year: Absolute year

    Returns:
        True if the date exists in the calendar
    """
    if not 1 <= month <= 12 or not 1 <= day <= 31:
        return False

    # Up to the 28th (29th in a leap year) exists in every month
    if day <= days_in_february(year):
        return True

    if day == 31:
        return month not in SHORT_MONTHS

    # 29th or 30th
    return month != 2


def is_valid_time(hour: int, minute: int, second: int) -> bool:
    return 0 <= hour <= 23 and 0 <= minute <= 59 and 0 <= second <= 59


def is_valid_date_time(date_time: CivilDateTime) -> bool:
    return (
        is_valid_date(date_time.day, date_time.month, date_time.year)
        and is_valid_time(date_time.hour, date_time.minute, date_time.second)
    )
