"""
Dashboard tiles component.
"""

import streamlit as st
from typing import Any, Callable


def render_dashboard(
    tiles: list[Any],
    on_select: Callable[[Any], None],
):
    """
    Render the five count tiles; each one selects its filter.

    Args:
        tiles: FilterTile objects (need .filter, .label, .count, .active)
        on_select: Callback with the filter of the clicked tile
    """
    columns = st.columns(len(tiles))

    for col, tile in zip(columns, tiles):
        with col:
            with st.container(border=True):
                st.metric(tile.label, "-" if tile.count is None else tile.count)
                if st.button(
                    "Showing" if tile.active else "Show",
                    key=f"tile_{tile.filter.value}",
                    type="primary" if tile.active else "secondary",
                    use_container_width=True,
                ):
                    on_select(tile.filter)
                    st.rerun()
