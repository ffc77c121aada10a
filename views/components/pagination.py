"""
Pagination component.
"""

import streamlit as st
from typing import Callable, Optional


def format_page_info(page: int, total_pages: int, total: Optional[int] = None) -> str:
    """Label shown between the page buttons."""
    info = f"Page {page} of {total_pages}"
    if total is not None:
        info += f" ({total} problems)"
    return info


def render_pagination(
    page: int,
    total_pages: int,
    total: Optional[int],
    on_change: Callable[[int], bool],
):
    """
    Render previous/next buttons around the page label.

    Args:
        page: Current page (1-based)
        total_pages: Number of pages for the current filter
        total: Number of matching problems, if the service reported it
        on_change: Callback with the page delta
    """
    col_prev, col_info, col_next = st.columns([1, 3, 1])

    with col_prev:
        if st.button("Previous", key="prev_page", disabled=page <= 1, use_container_width=True):
            on_change(-1)
            st.rerun()

    with col_info:
        st.caption(format_page_info(page, total_pages, total))

    with col_next:
        if st.button("Next", key="next_page", disabled=page >= total_pages, use_container_width=True):
            on_change(1)
            st.rerun()
