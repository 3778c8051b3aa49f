"""Timestamp Processing Pipeline

Grammar matching, token decoding, calendar validation and instant
conversion for RFC 822 date-time stamps.
"""

from .timestamp_models import CivilDateTime, ParsedTimestamp, RejectionReason, Tokens
from .timestamp_parser import TimestampParser, parse

__all__ = [
    "CivilDateTime",
    "ParsedTimestamp",
    "RejectionReason",
    "Tokens",
    "TimestampParser",
    "parse"
]
