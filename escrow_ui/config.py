import os

import streamlit as st

from escrow_ui.constants import APP_TITLE, DEFAULT_PDF_FILENAME, ENV_FALLBACK_KEYS, TRUTHY_VALUES
from escrow_ui.context import EscrowContext


def get_secret(path, default=None):
    env_key = ENV_FALLBACK_KEYS.get(tuple(path))
    if env_key:
        env_value = os.getenv(env_key)
        if env_value:
            return env_value
    current = st.secrets
    for key in path:
        try:
            if key not in current:
                return default
            current = current[key]
        except Exception:
            # Missing secrets.toml raises on first access.
            return default
    return current


def get_flag(path, default=False):
    value = get_secret(path, None)
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in TRUTHY_VALUES


def build_context():
    return EscrowContext(
        app_title=str(get_secret(("app", "title"), APP_TITLE)),
        pdf_filename=str(get_secret(("app", "pdf_filename"), DEFAULT_PDF_FILENAME)),
        conserve_days=get_flag(("calendar", "conserve_days")),
        reject_extra_months=get_flag(("calendar", "reject_extra_months")),
    )
