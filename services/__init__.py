"""
Services layer - exercise service client, no Streamlit dependencies.
"""

from services.exercise_api import (
    ExerciseAPI,
    ActionResult,
    DashboardResult,
    ExerciseListResult,
    ExerciseResult,
)

__all__ = [
    "ExerciseAPI",
    "ActionResult",
    "DashboardResult",
    "ExerciseListResult",
    "ExerciseResult",
]
