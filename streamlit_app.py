"""
Albook - Review Tracker

Spaced-repetition tracker for practice problems, backed by the
exercise service.
"""

import streamlit as st

from config import get_settings, setup_logging

settings = get_settings()

# Page configuration (must be first Streamlit command)
st.set_page_config(
    page_title=settings.page_title,
    page_icon="📘",
    layout="wide"
)

setup_logging(settings.log_level)

from views.tracker_view import TrackerView

view = TrackerView()
view.render()
