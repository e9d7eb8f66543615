import streamlit as st

from escrow_ui.constants import MODE_CALENDAR
from escrow_ui.state import form_state
from escrow_ui.tabs.calendar_tab import render_calendar_tab
from escrow_ui.tabs.form_tab import render_form_tab


def render_router(ctx):
    if form_state.get_mode() == MODE_CALENDAR:
        return _render_calendar(ctx)
    return _render_form(ctx)


@st.fragment
def _render_form(ctx):
    render_form_tab(ctx)


@st.fragment
def _render_calendar(ctx):
    render_calendar_tab(ctx)
