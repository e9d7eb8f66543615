from __future__ import annotations

import calendar as _calendar
import logging
from datetime import date

from escrow_core.errors import EmptyMonthError
from escrow_core.models import INSPECTION_LABEL, CalendarGrid, Cell, LabelPlacement

logger = logging.getLogger(__name__)

GRID_ROWS = 5
GRID_COLUMNS = 7
GRID_SIZE = GRID_ROWS * GRID_COLUMNS

WEEKDAY_LABELS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
MONTH_NAMES = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]


def month_name(month):
    return MONTH_NAMES[month - 1]


def first_weekday(year, month):
    # date.weekday() is Monday-based; the grid starts on Sunday.
    return (date(year, month, 1).weekday() + 1) % 7


def days_in_month(year, month):
    return _calendar.monthrange(year, month)[1]


def build_month_grid(bucket, conserve_days=False) -> CalendarGrid:
    """Lay one month bucket out on the 5x7 grid.

    Day numbers run from the weekday of the 1st up to and including the cell
    at ``first_weekday + days_in_month``, so one extra cell past the month end
    is numbered when the grid has room for it. ``conserve_days`` stops the
    numbering at the last day of the month instead.
    """
    if not bucket:
        raise EmptyMonthError()

    year = bucket[0].day.year
    month = bucket[0].day.month
    offset = first_weekday(year, month)
    total_days = days_in_month(year, month)
    last_index = offset + total_days - 1 if conserve_days else offset + total_days

    cells = []
    day_count = 1
    for index in range(GRID_SIZE):
        if index < offset or index > last_index:
            cells.append(Cell())
            continue
        events = tuple(item for item in bucket if item.day.day == day_count)
        cells.append(Cell(day_of_month=day_count, events=events))
        day_count += 1

    grid = CalendarGrid(
        year=year,
        month=month,
        month_name=month_name(month),
        first_weekday=offset,
        days_in_month=total_days,
        cells=tuple(cells),
    )
    if grid.stray_days:
        logger.debug("%s %s grid numbers cells past the month end: %s", grid.month_name, year, grid.stray_days)
    if grid.hidden_days:
        logger.info("%s %s does not fit in %s cells; hidden days: %s", grid.month_name, year, GRID_SIZE, grid.hidden_days)
    return grid


def cell_labels(cell):
    regular = []
    pinned = []
    for item in cell.events:
        if item.label == INSPECTION_LABEL:
            pinned.append(LabelPlacement(item.label, highlighted=True, pinned_bottom=True))
        else:
            regular.append(LabelPlacement(item.label))
    return regular + pinned


def grid_to_payload(grid):
    weeks = []
    for week in grid.weeks():
        row = []
        for cell in week:
            row.append(
                {
                    "day": cell.day_of_month,
                    "labels": [
                        {
                            "label": placement.label,
                            "highlighted": placement.highlighted,
                            "pinned_bottom": placement.pinned_bottom,
                        }
                        for placement in cell_labels(cell)
                    ],
                }
            )
        weeks.append(row)
    return {
        "year": grid.year,
        "month": grid.month,
        "month_name": grid.month_name,
        "first_weekday": grid.first_weekday,
        "days_in_month": grid.days_in_month,
        "weekday_labels": list(WEEKDAY_LABELS),
        "weeks": weeks,
        "stray_days": grid.stray_days,
        "hidden_days": grid.hidden_days,
    }
