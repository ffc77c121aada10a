"""
Add/Edit problem form component.
"""

import streamlit as st
from typing import Any, Callable

from models.exercise import ExerciseInput


def render_exercise_form(
    modal: Any,
    on_submit: Callable[[ExerciseInput], bool],
    on_cancel: Callable[[], None],
    on_delete: Callable[[], bool],
):
    """
    Render the add/edit form panel.

    Args:
        modal: ModalState (needs .title, .exercise_id, .values, .error, .show_delete)
        on_submit: Callback with the entered values
        on_cancel: Callback to close the form
        on_delete: Callback to ask for deletion of the open exercise
    """
    values = modal.values
    key = f"form_{modal.exercise_id or 'new'}"

    with st.container(border=True):
        st.markdown(f"### {modal.title}")

        if modal.error:
            st.error(modal.error)

        with st.form(key=key):
            title = st.text_input("Title", value=values.title)
            link = st.text_input("Link", value=values.link)
            tags = st.text_input("Tags", value=values.tags, placeholder="dp, graph")

            col_source, col_source_id, col_date = st.columns(3)
            with col_source:
                source = st.text_input("Source", value=values.source, placeholder="LeetCode")
            with col_source_id:
                source_id = st.text_input("Source ID", value=values.source_id)
            with col_date:
                resolve_date = st.date_input("Resolve Date", value=values.resolve_date)

            answer = st.text_area("Answer", value=values.answer, height=160)

            col_save, col_cancel, col_delete = st.columns(3)
            with col_save:
                save_clicked = st.form_submit_button("Save", type="primary", use_container_width=True)
            with col_cancel:
                cancel_clicked = st.form_submit_button("Cancel", use_container_width=True)
            with col_delete:
                delete_clicked = False
                if modal.show_delete:
                    delete_clicked = st.form_submit_button("Delete", use_container_width=True)

        if save_clicked:
            on_submit(ExerciseInput(
                title=title,
                link=link,
                tags=tags,
                source=source,
                source_id=source_id,
                resolve_date=resolve_date,
                answer=answer,
            ))
            st.rerun()
        elif cancel_clicked:
            on_cancel()
            st.rerun()
        elif delete_clicked:
            on_delete()
            st.rerun()
