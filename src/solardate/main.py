#!/usr/bin/env python3

# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from solardate.config import (
    ConfigurationError,
    OutputFormat,
    configure_logging,
    get_display_config,
)
from solardate.domain import SolarDate, SolarDateParseError, utc_now

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from solardate.domain import Clock

log = logging.getLogger(__name__)


def _add_format_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=[fmt.value for fmt in OutputFormat],
        default=None,
        help="Output format (defaults to SOLARDATE_OUTPUT_FORMAT or chinese)",
    )


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Convert solar calendar dates")
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse = subparsers.add_parser("parse", help="Parse a Chinese date such as 二〇二一年十月十五日")
    parse.add_argument("text", type=str, help="Date text in <year>年<month>月<day>日 form")
    _add_format_option(parse)

    numeric = subparsers.add_parser("numeric", help="Parse a yyyy-mm-dd date")
    numeric.add_argument("text", type=str, help="Date text in yyyy-mm-dd form")
    _add_format_option(numeric)

    ymd = subparsers.add_parser("ymd", help="Build a date from year, month and day numbers")
    ymd.add_argument("year", type=int)
    ymd.add_argument("month", type=int)
    ymd.add_argument("day", type=int)
    _add_format_option(ymd)

    today = subparsers.add_parser("today", help="Show the current UTC date")
    _add_format_option(today)

    return parser.parse_args(list(argv))


def _resolve_date(args: argparse.Namespace, *, clock: Clock) -> SolarDate:
    if args.command == "parse":
        return SolarDate.parse(args.text)
    if args.command == "numeric":
        return SolarDate.from_numeric_string(args.text)
    if args.command == "ymd":
        return SolarDate.from_ymd(args.year, args.month, args.day)
    if args.command == "today":
        return SolarDate.now(clock=clock)
    raise ValueError(f"Unsupported command: {args.command}")


def render(value: SolarDate, output_format: OutputFormat) -> str:
    if output_format is OutputFormat.NUMERIC:
        return value.to_numeric_string()
    return value.to_chinese_string()


def main(argv: Sequence[str] | None = None, *, clock: Clock = utc_now) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        config = get_display_config()
    except ConfigurationError:
        configure_logging()
        log.exception("Invalid configuration")
        sys.exit(1)
    configure_logging(config)

    parsed_args = _parse_args(args_list)
    output_format = (
        OutputFormat(parsed_args.output_format)
        if parsed_args.output_format is not None
        else config.output_format
    )

    try:
        value = _resolve_date(parsed_args, clock=clock)
    except SolarDateParseError as exc:
        log.error("Could not read date (%s): %s", exc.kind, exc)  # noqa: TRY400
        sys.exit(2)

    log.debug("Resolved %s to %s", parsed_args.command, value.to_numeric_string())
    print(render(value, output_format))


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
