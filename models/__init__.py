"""
Models layer - payloads exchanged with the exercise service.
"""

from models.exercise import (
    MASTERED_STAGE,
    DashboardCounts,
    Exercise,
    ExerciseFilter,
    ExerciseInput,
    ExercisePage,
    ReviewAvailability,
    format_instant,
    parse_filter,
    review_availability,
    today_utc,
)

__all__ = [
    "MASTERED_STAGE",
    "DashboardCounts",
    "Exercise",
    "ExerciseFilter",
    "ExerciseInput",
    "ExercisePage",
    "ReviewAvailability",
    "format_instant",
    "parse_filter",
    "review_availability",
    "today_utc",
]
