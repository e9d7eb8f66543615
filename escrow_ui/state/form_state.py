import logging

import streamlit as st

from escrow_core.fields import FIXED_FIELD_KINDS, FIXED_FIELDS, build_form, empty_value
from escrow_core.models import Range, Single
from escrow_ui.constants import MODE_CALENDAR, MODE_EDIT

logger = logging.getLogger(__name__)

PREFIX = "slice"
FORM_SLICE = "form"
CUSTOM_FIELD_ATTRS = {"name", "value"}
WIDGET_DEFAULTS_KEY = "form.widget_defaults"


def _key(slice_name):
    return f"{PREFIX}.{slice_name}"


def initial_state():
    return {
        "address": "",
        "fields": {key: empty_value(kind) for key, _, kind in FIXED_FIELDS},
        "custom_fields": [],
        "mode": MODE_EDIT,
    }


def get_form_state():
    key = _key(FORM_SLICE)
    if key not in st.session_state:
        st.session_state[key] = initial_state()
    return st.session_state[key]


def _replace(**changes):
    # Each update stores a fresh dict so derived views never see a mutated snapshot.
    state = dict(get_form_state())
    state.update(changes)
    st.session_state[_key(FORM_SLICE)] = state
    return state


def reset_form_state():
    key = _key(FORM_SLICE)
    if key in st.session_state:
        del st.session_state[key]


def set_address(value):
    return _replace(address=str(value or ""))


def set_field(field, value):
    if FIXED_FIELD_KINDS.get(field) != "single":
        raise KeyError(f"{field!r} is not a single-date field")
    fields = dict(get_form_state()["fields"])
    fields[field] = Single(value)
    return _replace(fields=fields)


def set_field_range(field, start_date, end_date):
    if FIXED_FIELD_KINDS.get(field) != "range":
        raise KeyError(f"{field!r} is not a date-range field")
    fields = dict(get_form_state()["fields"])
    fields[field] = Range(start_date, end_date)
    return _replace(fields=fields)


def add_custom_field():
    custom = list(get_form_state()["custom_fields"])
    custom.append({"name": "", "value": None})
    logger.debug("Added custom field #%s", len(custom))
    return _replace(custom_fields=custom)


def set_custom_field(index, attr, value):
    if attr not in CUSTOM_FIELD_ATTRS:
        raise KeyError(f"Unknown custom field attribute {attr!r}")
    custom = []
    for idx, item in enumerate(get_form_state()["custom_fields"]):
        if idx == index:
            item = {**item, attr: value}
        custom.append(item)
    return _replace(custom_fields=custom)


def widget_default(widget_key, current):
    # Widgets keep one default per edit session; a changing default would reset them.
    defaults = st.session_state.setdefault(WIDGET_DEFAULTS_KEY, {})
    return defaults.setdefault(widget_key, current)


def get_mode():
    return get_form_state().get("mode", MODE_EDIT)


def show_calendar(visible=True):
    st.session_state.pop(WIDGET_DEFAULTS_KEY, None)
    return _replace(mode=MODE_CALENDAR if visible else MODE_EDIT)


def snapshot():
    state = get_form_state()
    custom = [(item.get("name", ""), item.get("value")) for item in state["custom_fields"]]
    return build_form(state["address"], state["fields"], custom)
