import streamlit as st

from config import DATA_FILE, EXPORT_FILE
from data.portfolio import HoldingStore
from services.holdings import load_portfolio


def init_session_state() -> None:
    """Initialise default values in ``st.session_state`` on first run."""

    for key, default in {
        "add_symbol": "",
        "add_qty": "",
        "add_price": "",
        "upd_symbol": "",
        "upd_price": "",
        "rm_symbol": "",
        "export_path": str(EXPORT_FILE),
        "show_info": True,
    }.items():
        st.session_state.setdefault(key, default)

    if "store" not in st.session_state:
        store = HoldingStore(DATA_FILE)
        ok, msg = load_portfolio(store)
        st.session_state.store = store
        if not ok:
            st.session_state.feedback = ("error", msg)
