import streamlit as st

from escrow_ui.config import build_context
from escrow_ui.header import render_global_footer, render_global_header
from escrow_ui.logging_config import configure_logging
from escrow_ui.router import render_router
from escrow_ui.theme import inject_theme


configure_logging()
context = build_context()

st.set_page_config(page_title=context.app_title, layout="wide")
inject_theme()

render_global_header(context)
render_router(context)
render_global_footer(context)
