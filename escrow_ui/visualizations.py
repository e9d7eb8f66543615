from __future__ import annotations

import html

import pandas as pd

from escrow_core.grid import WEEKDAY_LABELS, cell_labels


def _label_html(placement):
    classes = ["escrow-label"]
    if placement.highlighted:
        classes.append("marked")
    return f"<p class='{' '.join(classes)}'>{html.escape(placement.label)}</p>"


def build_cell_html(cell):
    if cell.is_blank:
        return "<div class='escrow-cell'></div>"
    regular = []
    pinned = []
    for placement in cell_labels(cell):
        (pinned if placement.pinned_bottom else regular).append(_label_html(placement))
    pinned_html = f"<div class='escrow-pinned'>{''.join(pinned)}</div>" if pinned else ""
    return (
        "<div class='escrow-cell'>"
        f"<p class='escrow-day'>{cell.day_of_month}</p>"
        f"{''.join(regular)}"
        f"{pinned_html}"
        "</div>"
    )


def build_month_calendar_html(view):
    weekday_cells = "".join([f"<p>{label}</p>" for label in WEEKDAY_LABELS])
    cells = "".join([build_cell_html(cell) for cell in view.grid.cells])
    return (
        f"<h1 class='escrow-title'>{html.escape(view.title)}</h1>"
        "<div class='escrow-calendar'>"
        f"<p class='escrow-month'>{html.escape(view.heading)}</p>"
        f"<div class='escrow-weekdays'>{weekday_cells}</div>"
        f"<div class='escrow-grid'>{cells}</div>"
        "</div>"
    )


def build_listing_frame(view):
    rows = []
    for bucket_index, bucket in enumerate(view.partition.buckets()):
        for item in bucket:
            rows.append(
                {
                    "Month": "First" if bucket_index == 0 else "Second",
                    "Name": item.label,
                    "Date": item.day,
                }
            )
    return pd.DataFrame(rows, columns=["Month", "Name", "Date"])
