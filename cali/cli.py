#!/usr/bin/env python3
"""
cali CLI entry point
Logs daily nutrition totals and prints colorized summaries.
"""
import argparse
import logging
import re
import sys
from datetime import date
from typing import List, Optional

from dateutil.parser import isoparse

from cali import __version__
from cali.app_logging import configure_logging
from cali.config import resolve_data_file
from cali.display import (
    make_console, print_error, print_history, print_logged, print_reset, print_summary,
)
from cali.domains.tracker import parse_amount, parse_metric
from cali.errors import CaliError, InvalidDateError
from cali.models import Metric
from cali.storage.datafile import DataFile
from cali.summary import all_entries, totals_for

logger = logging.getLogger(__name__)

COMMANDS = ("log", "summary", "history", "reset")

# ---------------- Helper functions -----------------

def parse_date(value: Optional[str]) -> date:
    """ISO-8601 date from the command line; today when not given."""
    if value is None:
        return date.today()
    try:
        return isoparse(value.strip()).date()
    except (ValueError, OverflowError):
        raise InvalidDateError(f"Invalid date '{value}' (expected YYYY-MM-DD)") from None


def _is_number(tok: str) -> bool:
    try:
        float(tok)
    except ValueError:
        return False
    return True


def expand_shorthand(argv: List[str]) -> List[str]:
    """Rewrite `cali 150` as `cali log calories 150`."""
    i = 0
    while i < len(argv):
        tok = argv[i]
        if tok == "--data-file":
            i += 2
        elif tok.startswith("--data-file=") or tok in ("--verbose", "--no-color") or re.fullmatch(r"-v+", tok):
            i += 1
        else:
            break
    if i < len(argv) and argv[i] not in COMMANDS and _is_number(argv[i]):
        return argv[:i] + ["log", "calories"] + argv[i:]
    return argv


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cali",
        description="Track daily calories, water, protein, carbs and fat.",
        epilog="A bare number logs calories for today, e.g. 'cali 250'.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--data-file", metavar="PATH",
                        help="JSON data file (default: $CALI_DATA_FILE or ~/.cali/cali_data.json)")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Show more log output (repeat for debug)")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")

    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    log_p = sub.add_parser("log", help="Log nutrition data")
    log_p.add_argument("metric", help="One of: " + ", ".join(m.cli_name for m in Metric))
    log_p.add_argument("amount", help="Amount to add (calories, fl oz of water, or grams)")
    log_p.add_argument("--date", help="Date to log for (YYYY-MM-DD), defaults to today")
    log_p.set_defaults(handler=cmd_log)

    summary_p = sub.add_parser("summary", help="Show nutrition summary")
    summary_p.add_argument("--date", help="Date to show (YYYY-MM-DD), defaults to today")
    summary_p.set_defaults(handler=cmd_summary)

    history_p = sub.add_parser("history", help="Show all recorded nutrition data")
    history_p.set_defaults(handler=cmd_history)

    reset_p = sub.add_parser("reset", help="Reset a day's nutrition data")
    reset_p.add_argument("--date", help="Date to reset (YYYY-MM-DD), defaults to today")
    reset_p.set_defaults(handler=cmd_reset)

    return parser

# ---------------- Commands -----------------

def cmd_log(args, data_file: DataFile, console) -> int:
    metric = parse_metric(args.metric)
    amount = parse_amount(args.amount)
    day = parse_date(args.date)
    store = data_file.load()
    entry = store.add_metric(day, metric, amount)
    data_file.save(store)
    print_logged(console, metric, amount, entry)
    return 0


def cmd_summary(args, data_file: DataFile, console) -> int:
    day = parse_date(args.date)
    store = data_file.load()
    print_summary(console, totals_for(store, day), found=day in store)
    return 0


def cmd_history(args, data_file: DataFile, console) -> int:
    store = data_file.load()
    print_history(console, all_entries(store))
    return 0


def cmd_reset(args, data_file: DataFile, console) -> int:
    day = parse_date(args.date)
    store = data_file.load()
    existed = day in store
    entry = store.reset(day)
    data_file.save(store)
    print_reset(console, entry, existed)
    return 0

# ---------------- Main -----------------

def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(expand_shorthand(list(argv)))
    configure_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 0

    console = make_console(no_color=args.no_color)
    err_console = make_console(stderr=True, no_color=args.no_color)
    data_file = DataFile(resolve_data_file(args.data_file))
    logger.debug("Using data file %s", data_file.path)
    try:
        return args.handler(args, data_file, console)
    except CaliError as e:
        logger.debug("%s failed", args.command, exc_info=True)
        print_error(err_console, str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
