"""
Tracker View - UI for the review dashboard and problem list.

This view handles all rendering for the tracker page. Widget events are
turned into commands and handed to ExerciseController.dispatch.
"""

import logging
from typing import Optional

import streamlit as st

from controllers.commands import (
    CancelAction,
    ChangePage,
    CloseModal,
    ConfirmAction,
    DismissAlert,
    OpenModal,
    OpenModalById,
    Refresh,
    RequestDelete,
    RequestReview,
    SetFilter,
    SetSearch,
    SubmitForm,
)
from controllers.exercise_controller import ExerciseController
from views.components.confirmation import render_confirmation
from views.components.dashboard import render_dashboard
from views.components.exercise_card import render_exercise_list
from views.components.exercise_form import render_exercise_form
from views.components.pagination import render_pagination

logger = logging.getLogger(__name__)


class TrackerView:
    """View for the review tracker page."""

    def __init__(self, controller: Optional[ExerciseController] = None):
        self.controller = controller or ExerciseController()

    def render(self):
        """Main render method."""
        self.controller.ensure_loaded()
        self._open_linked_exercise()

        col_title, col_refresh, col_add = st.columns([6, 1, 1])
        with col_title:
            st.title("Review Tracker")
        with col_refresh:
            if st.button("Refresh", use_container_width=True):
                self.controller.dispatch(Refresh())
                st.rerun()
        with col_add:
            if st.button("Add", type="primary", use_container_width=True):
                self.controller.dispatch(OpenModal())
                st.rerun()

        self._render_alert()

        render_dashboard(
            tiles=self.controller.get_filter_tiles(),
            on_select=lambda f: self.controller.dispatch(SetFilter(f)),
        )

        st.markdown("---")

        self._render_modal()
        self._render_search()
        self._render_review_confirmation()

        state = self.controller.state
        render_exercise_list(
            exercises=state.exercises,
            now=self.controller.now(),
            on_edit=lambda ex: self.controller.dispatch(OpenModal(ex)),
            on_review=lambda exercise_id: self.controller.dispatch(RequestReview(exercise_id)),
        )

        render_pagination(
            page=state.page,
            total_pages=state.total_pages,
            total=state.total,
            on_change=lambda delta: self.controller.dispatch(ChangePage(delta)),
        )

    def _open_linked_exercise(self):
        """Open the form for ?exercise=<id>, once."""
        raw_id = st.query_params.get("exercise")
        if not raw_id:
            return
        del st.query_params["exercise"]

        try:
            exercise_id = int(raw_id)
        except ValueError:
            logger.warning(f"Ignoring invalid exercise link: {raw_id!r}")
            return

        self.controller.dispatch(OpenModalById(exercise_id))

    def _render_alert(self):
        alert = self.controller.state.alert
        if not alert:
            return
        st.error(alert)
        if st.button("Dismiss", key="dismiss_alert"):
            self.controller.dispatch(DismissAlert())
            st.rerun()

    def _render_search(self):
        current = self.controller.state.search
        search = st.text_input(
            "Search",
            value=current,
            key="search_input",
            placeholder="Search title, source ID, tags or answer...",
            label_visibility="collapsed",
        )
        if search != current:
            self.controller.dispatch(SetSearch(search))
            st.rerun()

    def _render_modal(self):
        modal = self.controller.state.modal
        if modal is None:
            return

        render_exercise_form(
            modal=modal,
            on_submit=lambda form: self.controller.dispatch(SubmitForm(form)),
            on_cancel=lambda: self.controller.dispatch(CloseModal()),
            on_delete=lambda: self.controller.dispatch(RequestDelete()),
        )

        confirmation = self.controller.state.confirmation
        if confirmation and confirmation.action == "delete":
            render_confirmation(
                confirmation.message,
                on_confirm=lambda: self.controller.dispatch(ConfirmAction()),
                on_cancel=lambda: self.controller.dispatch(CancelAction()),
                key="confirm_delete",
            )

    def _render_review_confirmation(self):
        confirmation = self.controller.state.confirmation
        if not confirmation or confirmation.action != "review":
            return

        render_confirmation(
            f"{confirmation.message} (#{confirmation.exercise_id})",
            on_confirm=lambda: self.controller.dispatch(ConfirmAction()),
            on_cancel=lambda: self.controller.dispatch(CancelAction()),
            key="confirm_review",
        )
