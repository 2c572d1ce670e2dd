"""
Walks a date range and lays the days out on three-week pages.

Each page is a grid of 21 cells, three rows of Monday-to-Sunday. The
first day lands in the column of its weekday, so a range starting on a
Wednesday leaves cells 1 and 2 of the first page empty. Whenever the
cell counter would pass 21 a new page starts at cell 1.
"""

import calendar
import datetime
from typing import Iterator, List, Optional

from .models import DayCell, Page
from .sidecar import SidecarStore

DAYS_PER_WEEK = 7
WEEKS_PER_PAGE = 3
CELLS_PER_PAGE = DAYS_PER_WEEK * WEEKS_PER_PAGE

SATURDAY_SHADE = "saturdayshade"
SUNDAY_SHADE = "sundayshade"


def date_range(start: datetime.date, end: datetime.date) -> Iterator[datetime.date]:
    """Yields every day from start to end, both included."""
    day = start
    while day <= end:
        yield day
        day += datetime.timedelta(days=1)


def weekday_offset(day: datetime.date) -> int:
    """Column of the day within a week, Monday = 0."""
    return day.weekday()


def date_label(day: datetime.date) -> str:
    """Day number, emphasised together with the month name on the 1st."""
    if day.day == 1:
        return rf"\textbf{{1 {calendar.month_abbr[day.month]}}}"
    return str(day.day)


def shade_for(day: datetime.date, is_holiday: bool = False) -> Optional[str]:
    # Holidays look like Sundays, whatever day they fall on
    if is_holiday or day.weekday() == calendar.SUNDAY:
        return SUNDAY_SHADE
    if day.weekday() == calendar.SATURDAY:
        return SATURDAY_SHADE
    return None


def page_heading(first: datetime.date, last: datetime.date) -> str:
    """
    Names the months a page covers.

    e.g. "January 2024", "January -- February 2024",
    "December 2024 -- January 2025"
    """
    first_month = calendar.month_name[first.month]
    last_month = calendar.month_name[last.month]
    if (first.year, first.month) == (last.year, last.month):
        return f"{first_month} {first.year}"
    if first.year == last.year:
        return f"{first_month} -- {last_month} {last.year}"
    return f"{first_month} {first.year} -- {last_month} {last.year}"


def make_cell(cell: int, day: datetime.date, sidecars: Optional[SidecarStore] = None) -> DayCell:
    holiday = sidecars.holiday(day) if sidecars else None
    appointment = sidecars.appointment(day) if sidecars else None
    return DayCell(
        cell=cell,
        day=day,
        label=date_label(day),
        shade=shade_for(day, is_holiday=holiday is not None),
        holiday=holiday,
        appointment=appointment,
    )


def iter_pages(start: datetime.date, end: datetime.date, sidecars: Optional[SidecarStore] = None) -> Iterator[Page]:
    """
    Yields the pages for start..end in order.

    Sidecar files are only read for the page being built, so the caller
    can write each page out before the next one is looked up.
    """
    if end < start:
        raise ValueError(f"End date {end} is before start date {start}")

    cell = weekday_offset(start)
    number = 1
    days: List[DayCell] = []

    for day in date_range(start, end):
        cell += 1
        if cell > CELLS_PER_PAGE:
            yield Page(number=number, heading=page_heading(days[0].day, days[-1].day), days=days)
            number += 1
            days = []
            cell = 1
        days.append(make_cell(cell, day, sidecars))

    yield Page(number=number, heading=page_heading(days[0].day, days[-1].day), days=days)


def count_pages(start: datetime.date, end: datetime.date) -> int:
    """Number of grids needed for start..end, without touching sidecar files."""
    cells = weekday_offset(start) + (end - start).days + 1
    return -(-cells // CELLS_PER_PAGE)
