import streamlit as st

from escrow_ui.constants import CELL_BORDER_COLOR, LABEL_COLOR, MARKER_COLOR

CALENDAR_CSS = f"""
<style>
.escrow-title {{
    text-align: center;
    font-size: 30px;
    margin-bottom: 8px;
}}
.escrow-calendar {{
    display: flex;
    flex-direction: column;
    align-items: center;
    padding: 24px 0;
}}
.escrow-month {{
    font-size: 24px;
    font-weight: 700;
    padding-bottom: 8px;
}}
.escrow-weekdays,
.escrow-grid {{
    display: grid;
    grid-template-columns: repeat(7, 1fr);
    width: 600px;
}}
.escrow-weekdays {{
    text-align: center;
    font-weight: 700;
}}
.escrow-grid {{
    grid-template-rows: repeat(5, 1fr);
    height: 750px;
    border: 1px solid #000;
}}
.escrow-cell {{
    position: relative;
    display: flex;
    flex-direction: column;
    border: 1px solid {CELL_BORDER_COLOR};
    text-align: center;
}}
.escrow-day {{
    font-weight: 700;
    font-size: 14px;
    margin: 0;
}}
.escrow-label {{
    color: {LABEL_COLOR};
    font-weight: 500;
    margin: 0;
}}
.escrow-pinned {{
    margin-top: auto;
}}
.escrow-label.marked {{
    background: {MARKER_COLOR};
}}
</style>
"""


def inject_theme():
    st.markdown(CALENDAR_CSS, unsafe_allow_html=True)
