import streamlit as st

from services.holdings import add_holding, remove_holding, update_price


def show_add_form() -> None:
    """Render and process the add-stock form inside an expander."""

    def submit_add() -> None:
        ok, msg = add_holding(
            st.session_state.store,
            st.session_state.add_symbol,
            st.session_state.add_qty,
            st.session_state.add_price,
        )
        st.session_state.feedback = ("success" if ok else "error", msg)

    with st.expander("Add Stock", expanded=True):
        with st.form("add_form", clear_on_submit=True):
            st.text_input("Symbol", key="add_symbol", placeholder="e.g. AAPL")
            st.text_input("Quantity", key="add_qty", placeholder="10")
            st.text_input("Buy Price", key="add_price", placeholder="100.00")
            st.form_submit_button("Add Stock", on_click=submit_add)


def show_update_form() -> None:
    """Render and process the update-price form inside an expander."""

    def submit_update() -> None:
        ok, msg = update_price(
            st.session_state.store,
            st.session_state.upd_symbol,
            st.session_state.upd_price,
        )
        if msg:
            st.session_state.feedback = ("success" if ok else "error", msg)
        if ok:
            st.session_state.pop("upd_symbol", None)

    with st.expander("Update Price"):
        symbol = st.text_input(
            "Stock symbol", key="upd_symbol", placeholder="e.g. AAPL"
        ).strip()
        if not symbol:
            st.caption("Enter the symbol of the holding to reprice.")
            return

        holding = st.session_state.store.find_by_symbol(symbol)
        if holding is None:
            st.warning("Stock not found.")
            return

        st.caption(f"Current price of {holding.symbol}: {holding.current_price:.4f}")
        with st.form("update_form", clear_on_submit=True):
            st.text_input(
                "New price",
                key="upd_price",
                placeholder=f"{holding.current_price:.4f}",
            )
            st.form_submit_button("Update Price", on_click=submit_update)


def show_remove_form() -> None:
    """Render and process the remove-stock form inside an expander."""

    def submit_remove() -> None:
        ok, msg = remove_holding(st.session_state.store, st.session_state.rm_symbol)
        if msg:
            st.session_state.feedback = ("success" if ok else "error", msg)

    with st.expander("Remove Stock"):
        with st.form("remove_form", clear_on_submit=True):
            st.text_input(
                "Stock symbol to remove", key="rm_symbol", placeholder="e.g. AAPL"
            )
            st.form_submit_button("Remove Stock", on_click=submit_remove)
