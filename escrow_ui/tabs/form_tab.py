import logging
from datetime import date

import streamlit as st

from escrow_core.errors import CalendarError
from escrow_core.fields import ADDRESS_LABEL, FIXED_FIELDS
from escrow_core.view import build_calendar_view
from escrow_ui.constants import DATE_FORMAT
from escrow_ui.state import form_state

logger = logging.getLogger(__name__)

NOTICE_KEY = "form.notice"


def _range_bounds(picked):
    if isinstance(picked, date):
        return picked, None
    picked = list(picked or [])
    start = picked[0] if len(picked) > 0 else None
    end = picked[1] if len(picked) > 1 else None
    return start, end


def _render_fixed_fields(state):
    for key, label, kind in FIXED_FIELDS:
        value = state["fields"][key]
        if kind == "single":
            widget_key = f"form.field.{key}"
            picked = st.date_input(
                label,
                value=form_state.widget_default(widget_key, value.day),
                format=DATE_FORMAT,
                key=widget_key,
            )
            if picked != value.day:
                form_state.set_field(key, picked)
            continue

        widget_key = f"form.range.{key}"
        current = tuple(bound for bound in (value.start, value.end) if bound is not None)
        picked = st.date_input(
            label,
            value=form_state.widget_default(widget_key, current),
            format=DATE_FORMAT,
            key=widget_key,
            help="Select a date range",
        )
        start, end = _range_bounds(picked)
        if (start, end) != (value.start, value.end):
            form_state.set_field_range(key, start, end)


def _render_custom_fields(state):
    for idx, item in enumerate(state["custom_fields"]):
        name_key = f"form.custom.name.{idx}"
        value_key = f"form.custom.value.{idx}"
        cols = st.columns(2)
        with cols[0]:
            name = st.text_input(
                "Name",
                value=form_state.widget_default(name_key, item.get("name", "")),
                key=name_key,
            )
        with cols[1]:
            picked = st.date_input(
                "Date",
                value=form_state.widget_default(value_key, item.get("value")),
                format=DATE_FORMAT,
                key=value_key,
            )
        if name != item.get("name", ""):
            form_state.set_custom_field(idx, "name", name)
        if picked != item.get("value"):
            form_state.set_custom_field(idx, "value", picked)


def render_form_tab(ctx):
    notice = st.session_state.pop(NOTICE_KEY, None)
    if notice:
        st.warning(notice)

    state = form_state.get_form_state()
    address = st.text_input(
        ADDRESS_LABEL,
        value=form_state.widget_default("form.address", state["address"]),
        key="form.address",
    )
    if address != state["address"]:
        form_state.set_address(address)

    _render_fixed_fields(state)
    _render_custom_fields(state)

    if st.button("Add Custom Field", key="form.custom.add"):
        form_state.add_custom_field()
        st.rerun()

    if st.button("Generate Calendar", key="form.generate", type="primary"):
        try:
            build_calendar_view(
                form_state.snapshot(),
                conserve_days=ctx.conserve_days,
                reject_extra_months=ctx.reject_extra_months,
            )
        except CalendarError as exc:
            logger.info("Calendar not generated: %s", exc)
            st.warning(str(exc))
            return
        form_state.show_calendar(True)
        st.rerun()
