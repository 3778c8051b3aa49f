"""rfc822time - RFC 822 Date and Time Parser

Parses RFC 822 section 5 date-time stamps (four-digit years allowed, as in
RSS 2.0 feeds) into comparable, fully validated timestamps.
"""

__version__ = "0.1.0"
__description__ = "RFC 822 date and time parser"

from .processors import CivilDateTime, ParsedTimestamp, Tokens, parse

__all__ = ["CivilDateTime", "ParsedTimestamp", "Tokens", "parse"]
