"""
Controllers layer - orchestration and session state management.
"""

from controllers.exercise_controller import ExerciseController, UIState

__all__ = ["ExerciseController", "UIState"]
