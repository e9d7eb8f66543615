import html

import streamlit as st


def render_global_header(ctx):
    st.markdown(f"<header class='escrow-title'>{html.escape(ctx.app_title)}</header>", unsafe_allow_html=True)


def render_global_footer(ctx):
    st.caption(ctx.app_title)
