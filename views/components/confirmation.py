"""
Confirmation prompt component.
"""

import streamlit as st
from typing import Callable


def render_confirmation(
    message: str,
    on_confirm: Callable[[], None],
    on_cancel: Callable[[], None],
    key: str = "confirm",
):
    """
    Render a confirm/cancel prompt for a pending action.

    Args:
        message: Question shown to the user
        on_confirm: Callback when the user confirms
        on_cancel: Callback when the user backs out
        key: Widget key prefix
    """
    st.warning(message)
    col_yes, col_no = st.columns(2)

    with col_yes:
        if st.button("Confirm", key=f"{key}_yes", type="primary", use_container_width=True):
            on_confirm()
            st.rerun()

    with col_no:
        if st.button("Cancel", key=f"{key}_no", use_container_width=True):
            on_cancel()
            st.rerun()
