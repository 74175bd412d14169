"""
Name: calmath
Description: Gregorian date arithmetic for the calendar tool
Author: Steve Hollasch, https://github.com/hollasch/calendar
License:

Pure functions only. Weekdays are numbered 0=Sunday .. 6=Saturday and
months 0=January .. 11=December.
"""

from enum import Enum
from typing import NamedTuple, Optional

# --- Constants ---

MONTH_NAMES = (
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December',
)
MONTH_ABBREVIATIONS = tuple(name[:3] for name in MONTH_NAMES)

MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Days preceding the first of each month, indexed [leap][month].
DAYS_BEFORE_MONTH = (
    (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334),
    (0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335),
)

# The Gregorian calendar took effect on 15 October 1582.
GREGORIAN_YEAR = 1582
GREGORIAN_MONTH = 9
GREGORIAN_DAY = 15


class WeekStart(Enum):
    """First day of the week; the value is the matching day-name header."""
    MONDAY = "Mo Tu We Th Fr Sa Su"
    SUNDAY = "Su Mo Tu We Th Fr Sa"


class MonthDescriptor(NamedTuple):
    year: int
    month: int
    num_days: int
    first_weekday: int


# --- Core Date Calculation Functions ---

def is_leap_year(year: int) -> bool:
    """Leap if divisible by four and not by 100, unless also divisible by 400."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)

def jan1_weekday(year: int) -> int:
    """
    Returns the day of the week of January 1st of the given year.

    The weekday of January 1st repeats every 400 years. Each full century
    of the cycle shifts it by five days, and the years left over shift it
    by one day per year plus one per leap day. The sum is taken with
    Monday as day zero (1 January of year 1 was a Monday) and then moved
    to the Sunday origin.
    """
    dow = 0
    yearfrac = (year - 1) % 400

    while yearfrac >= 100:
        dow += 5
        yearfrac -= 100

    dow += yearfrac + yearfrac // 4

    return (dow + 1) % 7

def month_length(year: int, month: int) -> int:
    """Returns the number of days in the month."""
    if month == 1 and is_leap_year(year):
        return 29
    return MONTH_DAYS[month]

def month_first_weekday(year: int, month: int) -> int:
    """Returns the day of the week of the first day of the month."""
    leap = int(is_leap_year(year))
    return (jan1_weekday(year) + DAYS_BEFORE_MONTH[leap][month]) % 7

def month_descriptor(year: int, month: int) -> MonthDescriptor:
    return MonthDescriptor(year, month, month_length(year, month),
                           month_first_weekday(year, month))

def week_aligned_start_day(week_start: WeekStart, first_weekday: int) -> int:
    """
    Returns the day number shown in the first column of the first week row.

    The value is zero or negative when the month does not begin on the
    first day of the week; those leading cells render blank.
    """
    if week_start is WeekStart.SUNDAY:
        return 1 - first_weekday
    return 1 - (first_weekday + 6) % 7

def weekday_header(week_start: WeekStart) -> str:
    return week_start.value

def first_valid_day(year: int, month: int) -> Optional[int]:
    """
    Returns the first day of the month that exists in the Gregorian
    calendar, or None if the whole month predates it.
    """
    if (year, month) < (GREGORIAN_YEAR, GREGORIAN_MONTH):
        return None
    if (year, month) == (GREGORIAN_YEAR, GREGORIAN_MONTH):
        return GREGORIAN_DAY
    return 1
