import streamlit as st

from config import DATA_FILE


def show_onboarding() -> None:
    """Display a simple onboarding message for first-time users."""

    if st.session_state.get("show_info") and not st.session_state.get(
        "dismissed_onboarding"
    ):
        def dismiss() -> None:
            st.session_state.dismissed_onboarding = True

        st.info(
            f"Use the controls below to manage your holdings. Changes stay in memory "
            f"until you press **Save**, which writes `{DATA_FILE}`."
        )
        st.button("Dismiss", key="dismiss_onboard", on_click=dismiss)
