"""
Name: calrender
Description: lay out month and year calendars as lines of text
Author: Steve Hollasch, https://github.com/hollasch/calendar
License:
"""

from calmath import (
    MONTH_ABBREVIATIONS,
    MONTH_NAMES,
    WeekStart,
    first_valid_day,
    month_descriptor,
    week_aligned_start_day,
    weekday_header,
)

# --- Layout Constants ---
NAME_WIDTH = 4          # "Jan " prefix in the year view
ROW_WIDTH = 20          # seven 2-character slots and six separators
COLUMN_GAP = " " * 4
HEADER_GAP = " " * 8
BLANK_SLOT = "  "

# Months shown side by side in each band of the year view.
BANDS = tuple((left, left + 4, left + 8) for left in range(4))


def format_week(start: int, num_days: int, lower_bound_day: int = 1) -> str:
    """
    Formats the seven days beginning at `start` as one week row.
    Days outside 1..num_days, or before lower_bound_day, are left blank.
    """
    slots = []
    for day in range(start, start + 7):
        if day < lower_bound_day or day < 1 or day > num_days:
            slots.append(BLANK_SLOT)
        else:
            slots.append(f"{day:2d}")
    return " ".join(slots)

def render_month(year: int, month: int, week_start: WeekStart = WeekStart.MONDAY,
                 lower_bound_day: int = 1) -> list:
    """Returns the title, the day-name header and the week rows of one month."""
    info = month_descriptor(year, month)
    lines = [f"{MONTH_NAMES[month]} {year}", weekday_header(week_start)]

    day = week_aligned_start_day(week_start, info.first_weekday)
    while day <= info.num_days:
        lines.append(format_week(day, info.num_days, lower_bound_day))
        day += 7

    return lines


class MonthColumn:
    """Tracks the progress of one month down its column of a year band."""
    def __init__(self, year, month, week_start):
        info = month_descriptor(year, month)
        self.num_days = info.num_days
        self.lower_bound = first_valid_day(year, month)
        self.prefix = MONTH_ABBREVIATIONS[month] + " "
        self.day = week_aligned_start_day(week_start, info.first_weekday)

        if self.lower_bound is None:
            # Predates the Gregorian calendar: nothing to show.
            self.day = self.num_days + 1
        else:
            # Skip whole weeks that fall before the first valid day.
            while self.day + 6 < self.lower_bound:
                self.day += 7

    @property
    def present(self):
        return self.lower_bound is not None

    @property
    def finished(self):
        return self.day > self.num_days

    def header(self, week_start):
        return weekday_header(week_start) if self.present else " " * ROW_WIDTH

    def next_row(self):
        """Returns this column's next row and advances it by one week."""
        if self.finished:
            return " " * (NAME_WIDTH + ROW_WIDTH)

        row = self.prefix + format_week(self.day, self.num_days, self.lower_bound)
        self.prefix = " " * NAME_WIDTH
        self.day += 7
        return row


def render_year(year: int, week_start: WeekStart = WeekStart.MONDAY) -> list:
    """
    Returns the calendar for a whole year as four bands of three months.

    Band N shows months N, N+4 and N+8 (January, May and September first),
    each column advancing a week per line on its own, until the longest
    month of the band runs out.
    """
    width = 3 * (NAME_WIDTH + ROW_WIDTH) + 2 * len(COLUMN_GAP)
    lines = [f"--- {year} ---".center(width).rstrip()]

    for band in BANDS:
        columns = [MonthColumn(year, month, week_start) for month in band]
        if not any(column.present for column in columns):
            continue

        lines.append("")
        lines.append(" " * NAME_WIDTH
                     + HEADER_GAP.join(column.header(week_start) for column in columns))

        while not all(column.finished for column in columns):
            lines.append(COLUMN_GAP.join(column.next_row() for column in columns))

    return lines
