from datetime import datetime
import pandas as pd
import streamlit as st

from config import (
    CSV_COLUMNS,
    DISPLAY_COLUMNS,
    COL_QTY,
    COL_BUY,
    COL_CURRENT,
    COL_VALUE,
    COL_INVESTED,
    COL_PNL,
)
from portfolio import holdings_frame
from services.logging import clear_error_log
from services.session import init_session_state
from ui.files import show_file_section
from ui.forms import show_add_form, show_remove_form, show_update_form
from ui.onboarding import show_onboarding

COLUMN_HELP = {
    COL_QTY: "Number of shares held",
    COL_BUY: "Price paid per share",
    COL_CURRENT: "Latest price entered for the holding",
    COL_VALUE: "Current price x quantity",
    COL_INVESTED: "Buy price x quantity",
    COL_PNL: "Profit or loss",
}


def build_portfolio_table(holdings: list) -> pd.DataFrame:
    """Return ``holdings`` with the column labels used on screen."""

    return holdings_frame(holdings).rename(columns=DISPLAY_COLUMNS)


def build_column_config() -> dict:
    """Return number-column settings for every numeric column on screen."""

    return {
        DISPLAY_COLUMNS[col]: st.column_config.NumberColumn(
            DISPLAY_COLUMNS[col], help=help_text
        )
        for col, help_text in COLUMN_HELP.items()
    }


def render_dashboard() -> None:
    """Render the main portfolio tab."""

    init_session_state()

    show_onboarding()

    feedback = st.session_state.pop("feedback", None)
    if feedback:
        kind, text = feedback
        getattr(st, kind)(text)

    port_table = build_portfolio_table(st.session_state.store.list())

    st.subheader("Current Portfolio")
    if port_table.empty:
        st.info(
            "Your portfolio is empty. Use the Add Stock form below to add your first position."
        )
    else:
        st.caption(f"Last updated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")

        def color_pnl(val: float) -> str:
            if pd.isna(val):
                return ""
            color = "green" if val > 0 else "red" if val < 0 else ""
            return f"color: {color}"

        pnl_label = DISPLAY_COLUMNS[COL_PNL]
        numeric_display = [DISPLAY_COLUMNS[c] for c in CSV_COLUMNS[1:]]
        styled = (
            port_table.style.format("{:.4f}", subset=numeric_display)
            .set_properties(subset=numeric_display, **{"text-align": "right"})
            .map(color_pnl, subset=[pnl_label])
        )

        st.dataframe(
            styled,
            use_container_width=True,
            column_config=build_column_config(),
            hide_index=True,
        )

    show_add_form()
    if not port_table.empty:
        show_update_form()
        show_remove_form()

    show_file_section()

    if st.session_state.get("error_log"):
        st.subheader("Error Log")
        for line in st.session_state.error_log:
            st.text(line)
        st.button("Clear Log", key="clear_error_log", on_click=clear_error_log)
