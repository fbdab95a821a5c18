import streamlit as st

from config import DATA_FILE, EXPORT_FILE
from services.holdings import export_portfolio, load_portfolio, save_portfolio


def show_file_section() -> None:
    """Display save/load buttons and the CSV export controls."""

    def submit_save() -> None:
        ok, msg = save_portfolio(st.session_state.store)
        st.session_state.feedback = ("success" if ok else "error", msg)

    def submit_load() -> None:
        ok, msg = load_portfolio(st.session_state.store)
        st.session_state.feedback = ("success" if ok else "error", msg)

    def submit_export() -> None:
        ok, msg = export_portfolio(
            st.session_state.store, st.session_state.export_path
        )
        st.session_state.feedback = ("success" if ok else "error", msg)

    st.subheader("Files")
    st.caption(f"Data file: `{DATA_FILE}`")
    col_save, col_load = st.columns(2)
    col_save.button("Save", key="save_portfolio", on_click=submit_save)
    col_load.button(
        "Load",
        key="load_portfolio",
        on_click=submit_load,
        help="Replaces the table with the saved file. Unsaved changes are lost.",
    )

    with st.form("export_form"):
        st.text_input(
            "Export to", key="export_path", placeholder=str(EXPORT_FILE)
        )
        st.form_submit_button("Export CSV", on_click=submit_export)

    st.download_button(
        "Download CSV",
        st.session_state.store.to_csv().encode("utf-8"),
        EXPORT_FILE.name,
        "text/csv",
    )
