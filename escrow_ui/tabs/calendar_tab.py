import logging

import streamlit as st

from escrow_core.errors import CalendarError
from escrow_core.pdf_export import render_calendar_pdf
from escrow_core.view import build_calendar_view
from escrow_ui.state import form_state
from escrow_ui.tabs.form_tab import NOTICE_KEY
from escrow_ui.visualizations import build_listing_frame, build_month_calendar_html

logger = logging.getLogger(__name__)


@st.cache_data(ttl=300, show_spinner=False)
def export_pdf_cached(view):
    return render_calendar_pdf(view)


def _back_to_edit(notice=None):
    if notice:
        st.session_state[NOTICE_KEY] = notice
    form_state.show_calendar(False)
    st.rerun()


def render_calendar_tab(ctx):
    try:
        view = build_calendar_view(
            form_state.snapshot(),
            conserve_days=ctx.conserve_days,
            reject_extra_months=ctx.reject_extra_months,
        )
    except CalendarError as exc:
        logger.info("Leaving calendar mode: %s", exc)
        _back_to_edit(f"Calendar unavailable: {exc}")
        return

    cols = st.columns([1, 1, 6])
    with cols[0]:
        if st.button("Edit", key="calendar.edit"):
            _back_to_edit()
    with cols[1]:
        st.download_button(
            "Download PDF",
            data=export_pdf_cached(view),
            file_name=ctx.pdf_filename,
            mime="application/pdf",
            key="calendar.download",
        )

    if view.second_month_name:
        st.info(f"Some dates fall in {view.second_month_name}; only {view.grid.month_name} is laid out.")
    if view.grid.hidden_days:
        hidden = ", ".join(str(day) for day in view.grid.hidden_days)
        st.warning(f"{view.grid.month_name} does not fit in five weeks; day(s) {hidden} are not shown.")

    with st.expander("Dates", expanded=False):
        st.json(view.listing())
        st.dataframe(build_listing_frame(view), hide_index=True)

    st.markdown(build_month_calendar_html(view), unsafe_allow_html=True)
