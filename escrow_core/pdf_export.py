"""PDF export of a rendered escrow calendar."""

from __future__ import annotations

import io
import logging

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from escrow_core.grid import GRID_COLUMNS, GRID_ROWS, WEEKDAY_LABELS, cell_labels
from escrow_core.view import CalendarView

logger = logging.getLogger(__name__)

COLORS = {
    "text_dark": (0.07, 0.07, 0.07),
    "label": (0.118, 0.227, 0.541),
    "marker": (0.961, 0.62, 0.043),
    "cell_border": (0.86, 0.15, 0.15),
    "grid_border": (0, 0, 0),
}

PAGE_LAYOUT = {
    "margin": 15 * mm,
    "top": 30 * mm,
    "title_gap": 14 * mm,
    "heading_gap": 10 * mm,
    "weekday_row": 7 * mm,
    # Cell proportions of the on-screen grid (600 x 750).
    "grid_aspect": 750 / 600,
}


def _fit_label(pdf, text, font, size, max_width):
    if pdf.stringWidth(text, font, size) <= max_width:
        return text
    while text and pdf.stringWidth(text + "…", font, size) > max_width:
        text = text[:-1]
    return text + "…"


def _draw_cell(pdf, cell, x, y_top, cell_width, cell_height):
    pdf.setStrokeColorRGB(*COLORS["cell_border"])
    pdf.setLineWidth(0.5)
    pdf.rect(x, y_top - cell_height, cell_width, cell_height, fill=False, stroke=True)
    if cell.is_blank:
        return

    pdf.setFillColorRGB(*COLORS["text_dark"])
    pdf.setFont("Helvetica-Bold", 9)
    pdf.drawCentredString(x + cell_width / 2, y_top - 4 * mm, str(cell.day_of_month))

    line_height = 4 * mm
    inner_width = cell_width - 2 * mm
    cursor = y_top - 4 * mm - line_height
    pinned = []
    for placement in cell_labels(cell):
        if placement.pinned_bottom:
            pinned.append(placement)
            continue
        pdf.setFillColorRGB(*COLORS["label"])
        pdf.setFont("Helvetica", 7)
        pdf.drawCentredString(x + cell_width / 2, cursor, _fit_label(pdf, placement.label, "Helvetica", 7, inner_width))
        cursor -= line_height

    bottom = y_top - cell_height + 1 * mm
    for placement in reversed(pinned):
        if placement.highlighted:
            pdf.setFillColorRGB(*COLORS["marker"])
            pdf.rect(x + 0.5 * mm, bottom, cell_width - 1 * mm, line_height - 0.5 * mm, fill=True, stroke=False)
        pdf.setFillColorRGB(*COLORS["label"])
        pdf.setFont("Helvetica", 7)
        pdf.drawCentredString(
            x + cell_width / 2,
            bottom + 1 * mm,
            _fit_label(pdf, placement.label, "Helvetica", 7, inner_width),
        )
        bottom += line_height


def render_calendar_pdf(view: CalendarView) -> bytes:
    buffer = io.BytesIO()
    width, height = A4
    pdf = canvas.Canvas(buffer, pagesize=A4)
    pdf.setTitle(view.title)
    pdf.setSubject(view.heading)

    y = height - PAGE_LAYOUT["top"]
    pdf.setFillColorRGB(*COLORS["text_dark"])
    pdf.setFont("Helvetica", 20)
    pdf.drawCentredString(width / 2, y, view.title)

    y -= PAGE_LAYOUT["title_gap"]
    pdf.setFont("Helvetica-Bold", 16)
    pdf.drawCentredString(width / 2, y, view.heading)

    grid_width = width - 2 * PAGE_LAYOUT["margin"]
    cell_width = grid_width / GRID_COLUMNS
    available = y - PAGE_LAYOUT["heading_gap"] - PAGE_LAYOUT["weekday_row"] - PAGE_LAYOUT["margin"]
    grid_height = min(grid_width * PAGE_LAYOUT["grid_aspect"], available)
    cell_height = grid_height / GRID_ROWS

    y -= PAGE_LAYOUT["heading_gap"]
    pdf.setFont("Helvetica-Bold", 10)
    for column, label in enumerate(WEEKDAY_LABELS):
        pdf.drawCentredString(PAGE_LAYOUT["margin"] + cell_width * column + cell_width / 2, y, label)

    y -= PAGE_LAYOUT["weekday_row"] / 2
    for row, week in enumerate(view.grid.weeks()):
        row_top = y - row * cell_height
        for column, cell in enumerate(week):
            _draw_cell(pdf, cell, PAGE_LAYOUT["margin"] + column * cell_width, row_top, cell_width, cell_height)

    pdf.setStrokeColorRGB(*COLORS["grid_border"])
    pdf.setLineWidth(1)
    pdf.rect(PAGE_LAYOUT["margin"], y - grid_height, grid_width, grid_height, fill=False, stroke=True)

    pdf.showPage()
    pdf.save()
    payload = buffer.getvalue()
    logger.info("Rendered calendar PDF for %s (%s bytes)", view.heading, len(payload))
    return payload
