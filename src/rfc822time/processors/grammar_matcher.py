"""Grammar Matcher for RFC 822 Date and Time Stamps

Recognizes the shape of an RFC 822 section 5 date-time, extended to accept
four-digit years as RSS 2.0 feeds use them:

    date-time = [ day "," ] date time
    date      = 1*2DIGIT month 2*4DIGIT
    time      = 2DIGIT ":" 2DIGIT [":" 2DIGIT] zone

Only the shape of each field is checked here. Whether "99" is a sensible day
is decided later by the calendar validator.
"""

import re
from typing import Optional

from .timestamp_models import RawFields

DAYS_OF_WEEK = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

MONTH_NAMES = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
               "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

NAMED_TIME_ZONES = ("UT", "GMT",
                    "EST", "EDT", "CST", "CDT", "MST", "MDT", "PST", "PDT",
                    "Z", "A", "M", "N", "Y")

RFC822_DATE_TIME_RE = re.compile(
    r"""
    (?P<day_of_week>(?:{days}),)?      # optional day of week, comma kept
    \s*
    (?P<day>\d{{1,2}})
    \s+
    (?P<month>{months})
    \s+
    (?P<year>\d{{2,4}})
    \s+
    (?P<hour>\d{{2}}):(?P<minute>\d{{2}})
    (?P<second>:\d{{2}})?              # optional seconds, colon kept
    \s+
    (?P<time_zone>
        (?:{zones})                    # named zone
      | [+-]\d{{4}}                    # local differential HHMM
    )
    """.format(
        days="|".join(DAYS_OF_WEEK),
        months="|".join(MONTH_NAMES),
        zones="|".join(NAMED_TIME_ZONES),
    ),
    re.VERBOSE | re.ASCII,
)


def match_fields(stamp: str) -> Optional[RawFields]:
    """Match a whole stamp against the date-time grammar.

    The match is anchored at both ends; nothing may precede or follow the
    stamp, not even a trailing newline.

    Args:
        stamp: Candidate date-time text

    Returns:
        The matched groups, or None if the stamp does not fit the grammar
    """
    m = RFC822_DATE_TIME_RE.fullmatch(stamp)
    if not m:
        return None

    return RawFields(
        day_of_week=m.group("day_of_week"),
        day=m.group("day"),
        month=m.group("month"),
        year=m.group("year"),
        hour=m.group("hour"),
        minute=m.group("minute"),
        second=m.group("second"),
        time_zone=m.group("time_zone"),
    )
