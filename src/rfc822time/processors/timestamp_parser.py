"""RFC 822 Timestamp Parser

Runs the grammar matcher, token decoder, calendar validator and instant
converter in turn and assembles a ParsedTimestamp. Any failure along the way
yields None; callers are not told which stage rejected the stamp.
"""

from typing import Optional

from ..core.logging_manager import LoggingManager
from .calendar_validator import is_valid_date_time
from .grammar_matcher import match_fields
from .instant_converter import to_instant
from .timestamp_models import ParsedTimestamp, RejectionReason
from .token_decoder import decode_tokens, extract_tokens


class TimestampParser:
    """Parser for RFC 822 date-time stamps.

    Holds no state besides its logger, so one instance may be shared
    between threads.
    """

    def __init__(self):
        self.logger = LoggingManager.get_logger(__name__)

    def parse(self, stamp: str) -> Optional[ParsedTimestamp]:
        """Parse an RFC 822 date-time stamp.

        Args:
            stamp: Candidate stamp such as "Mon, 23 Nov 2020 09:34:03 -0500"

        Returns:
            The parsed timestamp, or None if the stamp is not compliant

        Raises:
            TypeError: If stamp is not a string
        """
        if not isinstance(stamp, str):
            raise TypeError(f"stamp must be str, not {type(stamp).__name__}")

        raw = match_fields(stamp)
        if raw is None:
            return self._reject(stamp, RejectionReason.NO_MATCH)

        tokens = extract_tokens(raw)
        date_time = decode_tokens(tokens)

        if not is_valid_date_time(date_time):
            return self._reject(stamp, RejectionReason.INVALID_CALENDAR_VALUE)

        return ParsedTimestamp(
            stamp=stamp,
            instant=to_instant(date_time),
            tokens=tokens,
            date_time=date_time,
        )

    def _reject(self, stamp: str, reason: RejectionReason) -> None:
        self.logger.debug("Rejected %r: %s", stamp, reason.value)
        return None


_parser = TimestampParser()


def parse(stamp: str) -> Optional[ParsedTimestamp]:
    """Parse an RFC 822 date-time stamp with the shared parser.

    Returns None for any stamp that does not fit the grammar or names a date
    or time that does not exist.
    """
    return _parser.parse(stamp)
