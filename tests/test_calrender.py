import pytest

from calmath import WeekStart, month_length
from calrender import format_week, render_month, render_year

COLUMN_STRIDE = 28  # 24-character column plus the 4-space gap


def day_numbers(rows):
    return [int(cell) for row in rows for cell in row.split()]

def column(line, index):
    """Returns one 24-character month column of a year-view line."""
    start = index * COLUMN_STRIDE
    return line[start:start + 24]

def bands(lines):
    """Splits the year view into bands: lists of lines after each blank line."""
    result = []
    for line in lines[1:]:
        if line == "":
            result.append([])
        else:
            result[-1].append(line)
    return result


def test_format_week_blanks_out_of_range_days():
    assert format_week(-3, 31) == "             1  2  3"
    assert format_week(29, 31) == "29 30 31            "
    assert format_week(11, 31, lower_bound_day=15) == "            15 16 17"

def test_render_december_2023():
    lines = render_month(2023, 11, WeekStart.MONDAY)
    assert lines[0] == "December 2023"
    assert lines[1] == "Mo Tu We Th Fr Sa Su"
    assert lines[2] == "             1  2  3"
    assert lines[-1] == "25 26 27 28 29 30 31"
    assert len(lines) == 7

def test_render_december_2023_starting_sunday():
    lines = render_month(2023, 11, WeekStart.SUNDAY)
    assert lines[1] == "Su Mo Tu We Th Fr Sa"
    assert lines[2] == "                1  2"
    assert lines[-1] == "31                  "

def test_week_rows_are_fixed_width():
    for row in render_month(2024, 1)[2:]:
        assert len(row) == 20

@pytest.mark.parametrize("week_start", list(WeekStart))
@pytest.mark.parametrize("year", [1583, 1900, 2000, 2023, 2024, 2100])
def test_every_day_rendered_once_in_order(year, week_start):
    for month in range(12):
        days = day_numbers(render_month(year, month, week_start)[2:])
        assert days == list(range(1, month_length(year, month) + 1))

def test_february_starting_on_week_start_fills_four_rows():
    # February 2021 began on a Monday and had 28 days.
    lines = render_month(2021, 1, WeekStart.MONDAY)
    assert lines[2:] == [
        " 1  2  3  4  5  6  7",
        " 8  9 10 11 12 13 14",
        "15 16 17 18 19 20 21",
        "22 23 24 25 26 27 28",
    ]

def test_october_1582_blanks_skipped_days():
    lines = render_month(1582, 9, WeekStart.MONDAY, lower_bound_day=15)
    days = day_numbers(lines[2:])
    assert days == list(range(15, 32))
    assert lines[0] == "October 1582"

def test_render_year_title():
    lines = render_year(2023)
    assert lines[0].strip() == "--- 2023 ---"

def test_render_year_bands_group_months_by_column():
    year_bands = bands(render_year(2023))
    assert len(year_bands) == 4

    expected = [("Jan", "May", "Sep"), ("Feb", "Jun", "Oct"),
                ("Mar", "Jul", "Nov"), ("Apr", "Aug", "Dec")]
    for band, names in zip(year_bands, expected):
        first_row = band[1]
        for index, name in enumerate(names):
            assert column(first_row, index).startswith(name + " ")
        # The name only appears on the first row of each column.
        for row in band[2:]:
            for index in range(3):
                assert column(row, index)[:4] == "    "

def test_render_year_headers_line_up_with_day_columns():
    header = bands(render_year(2023, WeekStart.SUNDAY))[0][0]
    for index in range(3):
        assert column(header, index)[4:] == "Su Mo Tu We Th Fr Sa"

def test_render_year_columns_advance_independently():
    band = bands(render_year(2023))[0]
    rows = band[1:]
    # January 2023 began on a Sunday and needs six weeks; May and
    # September need five.
    assert len(rows) == 6
    assert column(rows[0], 0)[4:] == "                   1"
    assert column(rows[0], 1)[4:] == " 1  2  3  4  5  6  7"
    assert column(rows[0], 2)[4:] == "             1  2  3"
    assert column(rows[-1], 0)[4:].split() == ["30", "31"]
    assert column(rows[-1], 1).strip() == ""
    assert column(rows[-1], 2).strip() == ""

@pytest.mark.parametrize("year", [2023, 2024])
def test_render_year_shows_every_day(year):
    for band_index, band in enumerate(bands(render_year(year))):
        for index in range(3):
            month = band_index + 4 * index
            cells = [column(row, index)[4:] for row in band[1:]]
            assert day_numbers(cells) == list(range(1, month_length(year, month) + 1))

def test_render_year_1582_starts_at_gregorian_adoption():
    lines = render_year(1582)
    text = "\n".join(lines)
    for name in ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep"):
        assert name not in text

    year_bands = bands(lines)
    # The January, May, September band is dropped entirely.
    assert len(year_bands) == 3

    october_rows = [column(row, 2) for row in year_bands[0][1:]]
    assert october_rows[0].startswith("Oct ")
    assert day_numbers(cell[4:] for cell in october_rows)[:2] == [15, 16]
    assert day_numbers(cell[4:] for cell in october_rows) == list(range(15, 32))

    assert column(year_bands[1][1], 2).startswith("Nov ")
    assert column(year_bands[2][1], 2).startswith("Dec ")
