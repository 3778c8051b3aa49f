"""Token Decoder for RFC 822 Date and Time Stamps

Turns the textual fields recognized by the grammar matcher into numbers:
calendar fields, time of day and a signed time zone differential in minutes.
"""

from types import MappingProxyType

from ..core.error_handler import TokenDecodingError
from .grammar_matcher import MONTH_NAMES
from .timestamp_models import CivilDateTime, RawFields, Tokens

MONTHS = MappingProxyType({name: number for number, name in enumerate(MONTH_NAMES, 1)})

# Hours relative to Universal Time. Only A, M, N and Y of the military zones are accepted.
TIME_ZONE_HOURS = MappingProxyType({
    "UT": 0, "GMT": 0, "Z": 0,
    "EST": -5, "EDT": -4,
    "CST": -6, "CDT": -5,
    "MST": -7, "MDT": -6,
    "PST": -8, "PDT": -7,
    "A": -1, "M": -12, "N": 1, "Y": 12,
})

TWO_DIGIT_YEAR_BASE = 2000


def extract_tokens(raw: RawFields) -> Tokens:
    """Strip grammar separators from the matched groups."""
    return Tokens(
        day_of_week=raw.day_of_week[:-1] if raw.day_of_week else "",
        day=raw.day,
        month=raw.month,
        year=raw.year,
        hour=raw.hour,
        minute=raw.minute,
        second=raw.second[1:] if raw.second else "",
        time_zone=raw.time_zone,
    )


def decode_month(token: str) -> int:
    """Map Jan..Dec to 1..12.

    Raises:
        TokenDecodingError: If the token is not a month abbreviation
    """
    try:
        return MONTHS[token]
    except KeyError:
        raise TokenDecodingError(f"Unknown month token: {token!r}") from None


def decode_year(token: str) -> int:
    year = int(token)
    if year < 100:
        year += TWO_DIGIT_YEAR_BASE  # assume 21st century
    return year


def decode_second(token: str) -> int:
    return int(token) if token else 0


def decode_differential(token: str) -> int:
    """Convert a (+/-)HHMM local differential to signed minutes.

    The sign applies to the whole field: -0530 is -330 minutes.
    """
    digits = token[1:]
    if len(token) != 5 or token[0] not in "+-" or not (digits.isascii() and digits.isdigit()):
        raise TokenDecodingError(f"Malformed local differential: {token!r}")

    value = int(digits)
    minutes = (value // 100) * 60 + value % 100
    return -minutes if token[0] == "-" else minutes


def decode_time_zone(token: str) -> int:
    """Convert a zone token to its differential from UT in minutes.

    Raises:
        TokenDecodingError: If the token is neither a known zone nor a differential
    """
    if token[:1] in ("+", "-"):
        return decode_differential(token)

    try:
        return TIME_ZONE_HOURS[token] * 60
    except KeyError:
        raise TokenDecodingError(f"Unknown time zone token: {token!r}") from None


def decode_tokens(tokens: Tokens) -> CivilDateTime:
    """Decode every token into the numeric civil date and time.

    Values are not range checked; see calendar_validator.
    """
    return CivilDateTime(
        day=int(tokens.day),
        month=decode_month(tokens.month),
        year=decode_year(tokens.year),
        hour=int(tokens.hour),
        minute=int(tokens.minute),
        second=decode_second(tokens.second),
        time_zone_differential=decode_time_zone(tokens.time_zone),
    )
