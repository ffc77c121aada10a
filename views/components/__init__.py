"""
Reusable UI components.
"""

from views.components.confirmation import render_confirmation
from views.components.dashboard import render_dashboard
from views.components.exercise_card import (
    EMPTY_STATE_MESSAGE,
    render_exercise_card,
    render_exercise_card_html,
    render_exercise_list,
)
from views.components.exercise_form import render_exercise_form
from views.components.pagination import format_page_info, render_pagination

__all__ = [
    # Dashboard
    "render_dashboard",
    # Exercises
    "EMPTY_STATE_MESSAGE",
    "render_exercise_card",
    "render_exercise_card_html",
    "render_exercise_list",
    "render_exercise_form",
    # Paging & prompts
    "format_page_info",
    "render_pagination",
    "render_confirmation",
]
