#!/usr/bin/env python3
"""
Name: calendar
Description: print a calendar for a given month or year
Author: Steve Hollasch, https://github.com/hollasch/calendar
License:
"""

import sys
import re
import argparse
from datetime import date
from typing import NamedTuple, Optional

from calmath import (
    GREGORIAN_YEAR,
    MONTH_NAMES,
    WeekStart,
    first_valid_day,
)
from calrender import render_month, render_year

PROGRAM = 'calendar'
VERSION = '1.2.0'

EX_SUCCESS = 0
EX_FAILURE = 1

HELP = f"""
calendar:  Print a calendar for a given month or year
usage   :  calendar [-h|/?|--help] [-v|--version] [--startSun] [month] [year]

`calendar` prints the calendar for a given month, or for the whole year if
no month is given. The month may be a number from 1 to 12 or a (possibly
abbreviated) English month name. Any other number is taken as the year.

If no year is supplied, the current year is used, unless the month has
already passed this year, in which case next year's month is printed.

Options:
    -h, /?, --help    Print this help and exit
    -v, --version     Print the version and exit
    --startSun        Start weeks on Sunday instead of Monday

Dates before 15 October {GREGORIAN_YEAR} are not supported.
"""


class CalendarError(Exception):
    """A command-line argument that cannot be turned into a calendar."""


class CalendarRequest(NamedTuple):
    month: Optional[int]
    year: Optional[int]
    week_start: WeekStart = WeekStart.MONDAY


def usage(exit_code):
    """Prints the help text and version, then exits."""
    print(HELP)
    print(f"{PROGRAM} {VERSION}")
    sys.exit(exit_code)

def classify_token(token: str):
    """
    Decides whether a positional argument names a month or a year.
    Returns ('month', index) with a zero-based index, or ('year', value).
    """
    if token[:1].isalpha():
        # Abbreviations match the latest month first, so "ma" is May.
        prefix = token.lower()
        for month in range(11, -1, -1):
            if MONTH_NAMES[month].lower().startswith(prefix):
                return 'month', month
        raise CalendarError(f"Unknown month name ({token})")

    if not re.fullmatch(r'-?[0-9]+', token):
        raise CalendarError(f"Unrecognized argument ({token})")
    value = int(token)

    if value < 0:
        raise CalendarError(f"Negative number unexpected ({value})")
    if 1 <= value <= 12:
        return 'month', value - 1
    return 'year', value

def parse_dates(tokens):
    """Returns the (month, year) named by the positional arguments; either may be None."""
    month = year = None
    for token in tokens:
        kind, value = classify_token(token)
        if kind == 'month':
            month = value
        else:
            year = value
    return month, year

def resolve_request(month, year, week_start=WeekStart.MONDAY, today=None):
    """
    Fills in a missing year from the clock. A month that has already
    passed this year refers to next year's month.
    """
    if year is None:
        now = (today or date.today)()
        year = now.year
        if month is not None and month < now.month - 1:
            year += 1
    return CalendarRequest(month, year, week_start)

def validate_request(request: CalendarRequest):
    """Rejects dates that predate the Gregorian calendar."""
    if request.year < GREGORIAN_YEAR:
        raise CalendarError(
            f"Years before {GREGORIAN_YEAR} predate the Gregorian calendar ({request.year})")
    if request.month is not None and first_valid_day(request.year, request.month) is None:
        raise CalendarError(
            f"{MONTH_NAMES[request.month]} {request.year} predates the Gregorian calendar")

def render_request(request: CalendarRequest) -> list:
    if request.month is None:
        return render_year(request.year, request.week_start)
    return render_month(request.year, request.month, request.week_start,
                        first_valid_day(request.year, request.month))

def main(argv=None):
    """Parses arguments and prints the requested calendar."""
    parser = argparse.ArgumentParser(prog=PROGRAM, add_help=False,
                                     usage="%(prog)s [-h] [-v] [--startSun] [month] [year]")
    parser.add_argument('-h', '--help', action='store_true')
    parser.add_argument('-v', '--version', action='store_true')
    parser.add_argument('--startSun', dest='start_sunday', action='store_true')
    parser.add_argument('dates', nargs='*')

    try:
        args = parser.parse_intermixed_args(argv)
    except SystemExit:
        # argparse has already reported the problem.
        sys.exit(EX_FAILURE)

    if args.help or '/?' in args.dates:
        usage(EX_SUCCESS)
    if args.version:
        print(f"{PROGRAM} {VERSION}")
        sys.exit(EX_SUCCESS)

    week_start = WeekStart.SUNDAY if args.start_sunday else WeekStart.MONDAY

    try:
        month, year = parse_dates(args.dates)
        request = resolve_request(month, year, week_start)
        validate_request(request)
    except CalendarError as e:
        print(f"{PROGRAM}: {e}", file=sys.stderr)
        sys.exit(EX_FAILURE)

    try:
        print("\n".join(line.rstrip() for line in render_request(request)))
    except (BrokenPipeError, KeyboardInterrupt):
        sys.stderr.close()
        sys.exit(EX_FAILURE)

    sys.exit(EX_SUCCESS)

if __name__ == '__main__':
    main()
