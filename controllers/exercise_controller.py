"""
Exercise Controller - manages the review tracker page state and flow.

This controller handles:
- Loading dashboard counts and the filtered exercise list
- Filter, search and pagination state
- The add/edit form (create vs update is chosen by the exercise ID)
- Delete and review actions, each behind a confirmation step

Failure policy:
- Reads log and keep the last good data on screen
- Form writes keep the form open with the user's input
- A failed review raises a visible alert

State lives under one key of the Streamlit session state. Tests pass a
plain dict instead.
"""

import logging
from collections.abc import MutableMapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Optional

import streamlit as st

from controllers.commands import (
    CancelAction,
    ChangePage,
    CloseModal,
    Command,
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
from models.exercise import (
    DashboardCounts,
    Exercise,
    ExerciseFilter,
    ExerciseInput,
    parse_filter,
    today_utc,
)
from services.exercise_api import ActionResult, ExerciseAPI

logger = logging.getLogger(__name__)


# Tile labels, in dashboard order
FILTER_LABELS = {
    ExerciseFilter.PENDING: "Pending Review",
    ExerciseFilter.TOTAL: "Total Problems",
    ExerciseFilter.POOL: "Exercise Pool",
    ExerciseFilter.REVIEWED_TODAY: "Reviewed Today",
    ExerciseFilter.SOLVED_TODAY: "Solved Today",
}

DELETE_CONFIRM_MESSAGE = "Are you sure you want to delete this problem? This cannot be undone."
REVIEW_CONFIRM_MESSAGE = "Confirm you have reviewed this problem?"


@dataclass
class ModalState:
    """The add/edit form."""
    exercise_id: Optional[int]
    values: ExerciseInput
    error: Optional[str] = None

    @classmethod
    def for_create(cls) -> "ModalState":
        return cls(exercise_id=None, values=ExerciseInput(resolve_date=today_utc()))

    @classmethod
    def for_edit(cls, exercise: Exercise) -> "ModalState":
        return cls(exercise_id=exercise.id, values=exercise.to_input())

    @property
    def is_edit(self) -> bool:
        return bool(self.exercise_id) and self.exercise_id > 0

    @property
    def title(self) -> str:
        return "Edit Problem" if self.is_edit else "Add Problem"

    @property
    def show_delete(self) -> bool:
        return self.is_edit


@dataclass
class PendingConfirmation:
    """An action waiting for the user to confirm it."""
    action: str  # "delete" or "review"
    exercise_id: int
    message: str


@dataclass
class FilterTile:
    """One dashboard tile, which doubles as a filter button."""
    filter: ExerciseFilter
    label: str
    count: Optional[int]
    active: bool


@dataclass
class UIState:
    """Per-session tracker state."""
    filter: ExerciseFilter = ExerciseFilter.PENDING
    search: str = ""
    page: int = 1
    total_pages: int = 1
    counts: Optional[DashboardCounts] = None
    exercises: list[Exercise] = field(default_factory=list)
    total: Optional[int] = None
    modal: Optional[ModalState] = None
    confirmation: Optional[PendingConfirmation] = None
    alert: Optional[str] = None
    loaded: bool = False
    # Latest issued request per read; older responses are dropped
    dashboard_seq: int = 0
    list_seq: int = 0

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


class ExerciseController:
    """Controller for the review tracker page."""

    STATE_KEY = "tracker"

    def __init__(
        self,
        api: Optional[ExerciseAPI] = None,
        store: Optional[MutableMapping] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.api = api or ExerciseAPI()
        self._store = store if store is not None else st.session_state
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._handlers: dict[type, Callable[[Any], Any]] = {
            Refresh: lambda cmd: self.refresh(),
            SetFilter: lambda cmd: self.set_filter(cmd.filter),
            SetSearch: lambda cmd: self.set_search(cmd.text),
            ChangePage: lambda cmd: self.change_page(cmd.delta),
            OpenModal: lambda cmd: self.open_modal(cmd.exercise),
            OpenModalById: lambda cmd: self.open_modal_by_id(cmd.exercise_id),
            CloseModal: lambda cmd: self.close_modal(),
            SubmitForm: lambda cmd: self.submit(cmd.form),
            RequestDelete: lambda cmd: self.request_delete(),
            RequestReview: lambda cmd: self.request_review(cmd.exercise_id),
            ConfirmAction: lambda cmd: self.confirm(),
            CancelAction: lambda cmd: self.cancel(),
            DismissAlert: lambda cmd: self.dismiss_alert(),
        }
        self._init_session_state()

    def _init_session_state(self):
        """Initialize session state if not already set."""
        if self.STATE_KEY not in self._store:
            self._store[self.STATE_KEY] = UIState()

    @property
    def state(self) -> UIState:
        return self._store[self.STATE_KEY]

    def now(self) -> datetime:
        return self._clock()

    def dispatch(self, command: Command):
        """Apply one UI command. Returns whatever the handler returns."""
        handler = self._handlers.get(type(command))
        if handler is None:
            raise TypeError(f"Unknown command: {command!r}")
        return handler(command)

    # ==========================================
    # Loading
    # ==========================================

    def refresh(self):
        """Reload counts and the current page."""
        self.load_dashboard()
        self.load_exercises()

    def ensure_loaded(self) -> None:
        """First load of the session."""
        if not self.state.loaded:
            self.state.loaded = True
            self.refresh()

    def load_dashboard(self) -> bool:
        """
        Fetch dashboard counts.

        On failure the previous counts stay on screen.
        """
        self.state.dashboard_seq += 1
        seq = self.state.dashboard_seq

        result = self.api.get_dashboard()

        if seq != self.state.dashboard_seq:
            logger.debug(f"Dropping stale dashboard response #{seq}")
            return False
        if not result.success:
            logger.error(f"Failed to load dashboard: {result.error}")
            return False

        self.state.counts = result.counts
        return True

    def load_exercises(self) -> bool:
        """
        Fetch the current page of exercises for the active filter and search.

        On failure the previous list stays on screen. If the page fell past
        the end (e.g. after a delete) it is pulled back to the last page.
        """
        state = self.state
        state.list_seq += 1
        seq = state.list_seq

        result = self.api.list_exercises(state.filter, state.page, state.search)

        if seq != state.list_seq:
            logger.debug(f"Dropping stale exercise list response #{seq}")
            return False
        if not result.success:
            logger.error(f"Failed to load exercises: {result.error}")
            return False

        state.total_pages = max(result.total_pages, 1)
        if state.page > state.total_pages:
            state.page = state.total_pages
            return self.load_exercises()

        state.exercises = result.exercises
        state.total = result.total
        return True

    # ==========================================
    # Filter, Search, Pagination
    # ==========================================

    def set_filter(self, value) -> None:
        """Switch to another dashboard filter and go back to page 1."""
        self.state.filter = parse_filter(value)
        self.state.page = 1
        self.load_exercises()

    def set_search(self, text: str) -> None:
        """Apply a new search term and go back to page 1."""
        self.state.search = text
        self.state.page = 1
        self.load_exercises()

    def change_page(self, delta: int) -> bool:
        """
        Move by delta pages.

        Out-of-range moves are refused: no state change, no request.
        """
        new_page = self.state.page + delta
        if not 1 <= new_page <= self.state.total_pages:
            return False
        self.state.page = new_page
        self.load_exercises()
        return True

    def get_filter_tiles(self) -> list[FilterTile]:
        """Dashboard tiles with their counts and the active marker."""
        counts = self.state.counts
        return [
            FilterTile(
                filter=exercise_filter,
                label=label,
                count=counts.count_for(exercise_filter) if counts else None,
                active=exercise_filter == self.state.filter,
            )
            for exercise_filter, label in FILTER_LABELS.items()
        ]

    # ==========================================
    # Form (Create / Edit)
    # ==========================================

    def open_modal(self, exercise: Optional[Exercise] = None) -> None:
        """Open the form in edit mode for an exercise, or create mode without one."""
        if exercise is not None:
            self.state.modal = ModalState.for_edit(exercise)
        else:
            self.state.modal = ModalState.for_create()
        self.state.confirmation = None

    def open_modal_by_id(self, exercise_id: int) -> bool:
        """Fetch an exercise and open it for editing."""
        result = self.api.get_exercise(exercise_id)
        if not result.success:
            logger.error(f"Failed to load exercise {exercise_id}: {result.error}")
            self.state.alert = f"Could not load problem #{exercise_id}: {result.error}"
            return False
        self.open_modal(result.exercise)
        return True

    def close_modal(self) -> None:
        self.state.modal = None
        if self.state.confirmation and self.state.confirmation.action == "delete":
            self.state.confirmation = None

    def submit(self, form: ExerciseInput) -> bool:
        """
        Save the form: PUT for an existing exercise, POST for a new one.

        On failure the form stays open with the submitted values.
        """
        modal = self.state.modal
        if modal is None:
            logger.warning("Form submitted with no form open")
            return False

        modal.values = form
        modal.error = None

        if modal.is_edit:
            result = self.api.update_exercise(modal.exercise_id, form)
        else:
            result = self.api.create_exercise(form)

        if not result.success:
            logger.error(f"Failed to save exercise: {result.error}")
            modal.error = f"Could not save: {result.error}"
            return False

        self._after_write()
        return True

    # ==========================================
    # Delete / Review (confirmed actions)
    # ==========================================

    def request_delete(self) -> bool:
        """Ask for confirmation before deleting the exercise in the form."""
        modal = self.state.modal
        if modal is None or not modal.is_edit:
            return False
        self.state.confirmation = PendingConfirmation(
            action="delete",
            exercise_id=modal.exercise_id,
            message=DELETE_CONFIRM_MESSAGE,
        )
        return True

    def request_review(self, exercise_id: int) -> None:
        """Ask for confirmation before marking an exercise reviewed."""
        self.state.confirmation = PendingConfirmation(
            action="review",
            exercise_id=exercise_id,
            message=REVIEW_CONFIRM_MESSAGE,
        )

    def confirm(self) -> Optional[ActionResult]:
        """Carry out the pending action."""
        pending = self.state.confirmation
        if pending is None:
            return None
        self.state.confirmation = None

        if pending.action == "delete":
            return self._delete(pending.exercise_id)
        if pending.action == "review":
            return self._review(pending.exercise_id)
        raise ValueError(f"Unknown confirmation action: {pending.action}")

    def cancel(self) -> None:
        """Drop the pending action without sending anything."""
        self.state.confirmation = None

    def dismiss_alert(self) -> None:
        self.state.alert = None

    def _delete(self, exercise_id: int) -> ActionResult:
        result = self.api.delete_exercise(exercise_id)
        if not result.success:
            logger.error(f"Failed to delete exercise {exercise_id}: {result.error}")
            if self.state.modal is not None:
                self.state.modal.error = f"Could not delete: {result.error}"
            return result

        self._after_write()
        return result

    def _review(self, exercise_id: int) -> ActionResult:
        result = self.api.review_exercise(exercise_id)
        if not result.success:
            logger.error(f"Failed to review exercise {exercise_id}: {result.error}")
            self.state.alert = f"Error reviewing: {result.error}"
            return result

        self.refresh()
        return result

    def _after_write(self) -> None:
        """Close the form and reload so the counts match the change."""
        self.state.modal = None
        self.refresh()
