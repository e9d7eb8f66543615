from datetime import date

from escrow_core.fields import build_form
from escrow_core.models import Range, Single
from escrow_core.view import build_calendar_view
from escrow_ui.visualizations import build_cell_html, build_listing_frame, build_month_calendar_html


def _view():
    form = build_form(
        "12 <Oak> Lane",
        {
            "acceptance": Single(date(2024, 3, 10)),
            "inspection": Range(date(2024, 3, 10), date(2024, 3, 15)),
            "loan_appraisal": Range(date(2024, 3, 20), date(2024, 4, 2)),
        },
    )
    return build_calendar_view(form)


def test_month_html_has_title_heading_and_all_cells():
    markup = build_month_calendar_html(_view())
    assert "12 &lt;Oak&gt; Lane - Escrow Calendar" in markup
    assert "March 2024" in markup
    assert markup.count("class='escrow-cell'") == 35
    assert "<p>Sun</p>" in markup and "<p>Sat</p>" in markup
    assert "Loan &amp; Appraisal" in markup


def test_inspection_collision_is_pinned_after_other_labels():
    view = _view()
    cell = next(cell for cell in view.grid.cells if cell.day_of_month == 10)
    markup = build_cell_html(cell)
    assert markup.index("Acceptance") < markup.index("escrow-pinned") < markup.index("Inspection")
    assert "escrow-label marked" in markup


def test_blank_cell_html():
    view = _view()
    assert build_cell_html(view.grid.cells[0]) == "<div class='escrow-cell'></div>"


def test_listing_frame():
    frame = build_listing_frame(_view())
    assert list(frame.columns) == ["Month", "Name", "Date"]
    assert len(frame) == 5
    assert frame.iloc[-1].to_dict() == {"Month": "Second", "Name": "Loan & Appraisal", "Date": date(2024, 4, 2)}
