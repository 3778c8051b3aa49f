"""Command line front end for rfc822time.

    rfc822time parse "Mon, 23 Nov 2020 09:34:03 -0500" "07 Oct 2014 10:10:05 PST"
    rfc822time sort feed_dates.txt
"""

import argparse
import sys
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from . import __version__
from .core.config_manager import AppConfig, ConfigManager
from .core.error_handler import ErrorHandler, InputError, Rfc822TimeError
from .core.logging_manager import LoggingManager
from .processors import ParsedTimestamp, parse

logger = LoggingManager.get_logger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rfc822time",
        description="Parse and order RFC 822 date-time stamps"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", type=Path, help="Configuration directory")
    parser.add_argument("--log-level", choices=LOG_LEVELS, type=str.upper)

    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="Decode one or more stamps")
    parse_cmd.add_argument("stamps", nargs="+", metavar="STAMP")
    parse_cmd.add_argument("--tokens", action="store_true", help="Also print the raw tokens")

    sort_cmd = subparsers.add_parser("sort", help="Print stamps in chronological order")
    sort_cmd.add_argument("file", nargs="?", default="-", help="One stamp per line; - for stdin")
    sort_cmd.add_argument("--strict", action="store_true",
                          help="Fail on the first non-compliant line instead of skipping it")

    return parser


def describe(timestamp: ParsedTimestamp, show_tokens: bool = False) -> List[str]:
    """Human-readable lines describing a parsed stamp."""
    dt = timestamp.date_time
    lines = [
        f"stamp:    {timestamp.stamp}",
        f"instant:  {timestamp.instant}",
    ]

    try:
        lines.append(f"utc:      {timestamp.utc_datetime.isoformat()}")
    except (OverflowError, ValueError):
        lines.append("utc:      outside the datetime range")

    lines.append(
        f"civil:    year={dt.year} month={dt.month} day={dt.day} "
        f"hour={dt.hour} minute={dt.minute} second={dt.second} "
        f"differential={dt.time_zone_differential:+d}min"
    )

    if not timestamp.day_of_week_consistent:
        lines.append(f"warning:  {timestamp.tokens.day_of_week} does not match the date "
                     f"({dt.implied_day_of_week})")

    if show_tokens:
        tokens = timestamp.tokens
        lines.append(
            f"tokens:   day_of_week={tokens.day_of_week!r} day={tokens.day!r} "
            f"month={tokens.month!r} year={tokens.year!r} hour={tokens.hour!r} "
            f"minute={tokens.minute!r} second={tokens.second!r} time_zone={tokens.time_zone!r}"
        )

    return lines


def run_parse(stamps: Iterable[str], config: AppConfig, out: TextIO) -> int:
    """Describe each stamp; exit status 1 if any was not compliant."""
    status = 0
    for stamp in stamps:
        timestamp = parse(stamp)
        if timestamp is None:
            print(f"{stamp!r}: not RFC 822 compliant", file=out)
            status = 1
            continue

        for line in describe(timestamp, config.cli.show_tokens):
            print(line, file=out)
        print(file=out)

    return status


def read_stamps(source: str) -> List[str]:
    """Read one stamp per line from a file, or stdin for "-".

    Raises:
        InputError: If the file cannot be read
    """
    try:
        if source == "-":
            lines = sys.stdin.readlines()
        else:
            with open(source, "r", encoding="utf-8") as f:
                lines = f.readlines()
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Cannot read stamps from {source}: {e}") from e

    return [line.rstrip("\r\n") for line in lines]


def run_sort(lines: Iterable[str], config: AppConfig, out: TextIO) -> int:
    """Print compliant stamps, unaltered, in ascending instant order.

    Stamps naming the same instant keep their input order.
    """
    parsed = []
    for line_number, line in enumerate(lines, 1):
        if not line.strip():  # ignored in strict mode too
            continue

        timestamp = parse(line)
        if timestamp is None:
            if not config.cli.skip_invalid:
                logger.error(f"Line {line_number} is not RFC 822 compliant: {line!r}")
                return 1
            logger.warning(f"Skipping line {line_number}, not RFC 822 compliant: {line!r}")
            continue

        parsed.append(timestamp)

    for timestamp in sorted(parsed):
        print(timestamp.stamp, file=out)

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the rfc822time command."""
    args = build_arg_parser().parse_args(argv)
    error_handler = ErrorHandler()

    try:
        config_manager = ConfigManager(config_path=args.config)
        config = config_manager.load_config()

        updates = {}
        if args.log_level:
            updates["logging"] = {"level": args.log_level}
        elif config.debug_mode:
            updates["logging"] = {"level": "DEBUG"}
        if getattr(args, "tokens", False):
            updates["cli"] = {"show_tokens": True}
        if getattr(args, "strict", False):
            updates.setdefault("cli", {})["skip_invalid"] = False
        if updates:
            config = config_manager.update_config(updates)

        LoggingManager().configure(config.logging)
        error_handler.install()

        if args.command == "parse":
            return run_parse(args.stamps, config, sys.stdout)
        return run_sort(read_stamps(args.file), config, sys.stdout)

    except Rfc822TimeError as e:
        return error_handler.handle_error(e, context=f"rfc822time {args.command}")


if __name__ == "__main__":
    sys.exit(main())
