"""
Commands emitted by the tracker UI.

Each widget callback turns a user action into one of these and hands it to
ExerciseController.dispatch, so the controller can be driven without a
running Streamlit host.
"""

from dataclasses import dataclass
from typing import Optional, Union

from models.exercise import Exercise, ExerciseFilter, ExerciseInput


@dataclass(frozen=True)
class Refresh:
    """Reload dashboard counts and the current list page."""


@dataclass(frozen=True)
class SetFilter:
    filter: Union[ExerciseFilter, str]


@dataclass(frozen=True)
class SetSearch:
    text: str


@dataclass(frozen=True)
class ChangePage:
    delta: int


@dataclass(frozen=True)
class OpenModal:
    """Open the form; with an exercise it opens in edit mode."""
    exercise: Optional[Exercise] = None


@dataclass(frozen=True)
class OpenModalById:
    exercise_id: int


@dataclass(frozen=True)
class CloseModal:
    pass


@dataclass(frozen=True)
class SubmitForm:
    form: ExerciseInput


@dataclass(frozen=True)
class RequestDelete:
    """Ask to delete the exercise currently open in the form."""


@dataclass(frozen=True)
class RequestReview:
    exercise_id: int


@dataclass(frozen=True)
class ConfirmAction:
    pass


@dataclass(frozen=True)
class CancelAction:
    pass


@dataclass(frozen=True)
class DismissAlert:
    pass


Command = Union[
    Refresh,
    SetFilter,
    SetSearch,
    ChangePage,
    OpenModal,
    OpenModalById,
    CloseModal,
    SubmitForm,
    RequestDelete,
    RequestReview,
    ConfirmAction,
    CancelAction,
    DismissAlert,
]
