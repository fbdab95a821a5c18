import streamlit as st

from config import APP_TITLE
from ui.dashboard import render_dashboard
from ui.user_guide import render_user_guide

st.set_page_config(page_title=APP_TITLE, layout="wide")
st.title(APP_TITLE)

portfolio_tab, guide_tab = st.tabs(["Portfolio", "User Guide"])
with portfolio_tab:
    render_dashboard()
with guide_tab:
    render_user_guide()
