"""
Exercise card components.

The card body is plain HTML; every text field from the service is escaped
before it is interpolated. Edit, Open Link and the review control are
separate widgets so that following a link or reviewing never opens the form.
"""

import html
from datetime import datetime
from typing import Callable

import streamlit as st

from models.exercise import Exercise, review_availability

EMPTY_STATE_MESSAGE = "No problems found for this filter."

TAG_BADGE_STYLE = "background:var(--secondary-background-color);"


def esc(value) -> str:
    """HTML-escape a possibly empty value."""
    if not value:
        return ""
    return html.escape(str(value), quote=True)


def render_exercise_card_html(exercise: Exercise) -> str:
    """Build the HTML for the informational part of a card."""
    tags_html = ""
    if exercise.tags:
        tags_html = f'<span class="badge" style="{TAG_BADGE_STYLE}">{esc(exercise.tags)}</span>'

    return (
        '<div class="exercise-info">'
        f"<h3>{esc(exercise.title)}</h3>"
        '<div class="exercise-meta">'
        f'<span class="badge">{esc(exercise.source)} {esc(exercise.source_id)}</span> '
        f"{tags_html} "
        f"<span>Reviews: {int(exercise.review_count)}</span>"
        "</div>"
        "</div>"
    )


def render_exercise_card(
    exercise: Exercise,
    now: datetime,
    on_edit: Callable[[Exercise], None],
    on_review: Callable[[int], None],
):
    """
    Render one exercise card.

    Args:
        exercise: The exercise to show
        now: Current time, for the review gate
        on_edit: Callback to open the exercise in the form
        on_review: Callback to ask for a review of the exercise ID
    """
    availability = review_availability(exercise.review_stage, exercise.next_review_date, now)

    with st.container(border=True):
        col_info, col_edit, col_link, col_review = st.columns([5, 1, 1.2, 1.8])

        with col_info:
            st.markdown(render_exercise_card_html(exercise), unsafe_allow_html=True)

        with col_edit:
            if st.button("Edit", key=f"edit_{exercise.id}", use_container_width=True):
                on_edit(exercise)
                st.rerun()

        with col_link:
            if exercise.link:
                st.link_button("Open Link", exercise.link, use_container_width=True)

        with col_review:
            if st.button(
                availability.label,
                key=f"review_{exercise.id}",
                disabled=not availability.enabled,
                type="primary" if availability.enabled else "secondary",
                use_container_width=True,
            ):
                on_review(exercise.id)
                st.rerun()


def render_exercise_list(
    exercises: list[Exercise],
    now: datetime,
    on_edit: Callable[[Exercise], None],
    on_review: Callable[[int], None],
):
    """Render all cards, or the empty-state placeholder."""
    if not exercises:
        st.info(EMPTY_STATE_MESSAGE)
        return

    for exercise in exercises:
        render_exercise_card(exercise, now, on_edit, on_review)
