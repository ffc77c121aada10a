"""
Exercise service client for the review tracker.

Talks to the exercise REST API over JSON.

Endpoints used:
- GET /api/dashboard - Aggregate tile counts
- GET /api/exercises - Filtered, searchable, paginated list
- GET /api/exercises/{id} - Single exercise
- POST /api/exercises - Create
- PUT /api/exercises/{id} - Update
- DELETE /api/exercises/{id} - Delete
- POST /api/exercises/{id}/review - Mark reviewed (server reschedules)

Every method returns a result object instead of raising; any non-2xx
status counts as a failure.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

import httpx

from config.settings import Settings, get_settings
from models.exercise import (
    DashboardCounts,
    Exercise,
    ExerciseFilter,
    ExerciseInput,
    ExercisePage,
)

logger = logging.getLogger(__name__)


@dataclass
class DashboardResult:
    """Result of a dashboard counts lookup."""
    success: bool
    counts: Optional[DashboardCounts] = None
    error: Optional[str] = None


@dataclass
class ExerciseListResult:
    """Result of a list lookup."""
    success: bool
    exercises: list[Exercise] = field(default_factory=list)
    total_pages: int = 1
    total: Optional[int] = None
    error: Optional[str] = None


@dataclass
class ExerciseResult:
    """Result of a single exercise lookup."""
    success: bool
    exercise: Optional[Exercise] = None
    error: Optional[str] = None


@dataclass
class ActionResult:
    """Result of a write (create, update, delete, review)."""
    success: bool
    exercise_id: Optional[int] = None
    error: Optional[str] = None


class ExerciseAPI:
    """Client for the exercise service."""

    JSON_HEADERS = {
        "Accept": "application/json",
        "Content-Type": "application/json",
    }

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self._transport = transport

    def _client(self) -> httpx.Client:
        return httpx.Client(
            base_url=self.settings.api_root,
            timeout=self.settings.request_timeout,
            transport=self._transport,
        )

    def _send(
        self,
        method: str,
        path: str,
        **kwargs,
    ) -> tuple[Optional[httpx.Response], Optional[str]]:
        """
        Send one request.

        Returns (response, None) on a 2xx answer, (None, error) otherwise.
        """
        try:
            with self._client() as client:
                response = client.request(method, path, **kwargs)
                response.raise_for_status()
            return response, None

        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(f"{method} {path} failed: {status} - {e.response.text.strip()}")
            return None, f"Exercise service error (HTTP {status})"
        except httpx.ConnectError:
            error = "Could not connect to the exercise service."
            logger.error(f"{method} {path}: {error}")
            return None, error
        except httpx.TimeoutException:
            error = "Exercise service request timed out."
            logger.error(f"{method} {path}: {error}")
            return None, error
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} error: {e}")
            return None, str(e)

    # ==========================================
    # Reads
    # ==========================================

    def get_dashboard(self) -> DashboardResult:
        """Fetch the aggregate counts for the dashboard tiles."""
        response, error = self._send("GET", "/api/dashboard")
        if response is None:
            return DashboardResult(success=False, error=error)

        try:
            counts = DashboardCounts.model_validate(response.json())
        except ValueError as e:
            logger.error(f"Malformed dashboard response: {e}")
            return DashboardResult(success=False, error="Malformed dashboard response")

        return DashboardResult(success=True, counts=counts)

    def list_exercises(
        self,
        exercise_filter: ExerciseFilter,
        page: int = 1,
        search: str = "",
    ) -> ExerciseListResult:
        """
        Fetch one page of exercises.

        Args:
            exercise_filter: Which dashboard tile the list belongs to
            page: 1-based page number
            search: Free-text search (URL-encoded on the wire)

        Returns:
            ExerciseListResult with the records and total page count
        """
        params = {
            "filter": exercise_filter.value,
            "page": page,
            "search": search,
        }
        response, error = self._send("GET", "/api/exercises", params=params)
        if response is None:
            return ExerciseListResult(success=False, error=error)

        try:
            page_data = ExercisePage.model_validate(response.json())
        except ValueError as e:
            logger.error(f"Malformed exercise list response: {e}")
            return ExerciseListResult(success=False, error="Malformed exercise list response")

        return ExerciseListResult(
            success=True,
            exercises=page_data.data,
            total_pages=page_data.total_pages,
            total=page_data.total,
        )

    def get_exercise(self, exercise_id: int) -> ExerciseResult:
        """Fetch a single exercise by ID."""
        response, error = self._send("GET", f"/api/exercises/{exercise_id}")
        if response is None:
            return ExerciseResult(success=False, error=error)

        try:
            exercise = Exercise.model_validate(response.json())
        except ValueError as e:
            logger.error(f"Malformed exercise {exercise_id}: {e}")
            return ExerciseResult(success=False, error="Malformed exercise response")

        return ExerciseResult(success=True, exercise=exercise)

    # ==========================================
    # Writes
    # ==========================================

    def create_exercise(self, data: ExerciseInput) -> ActionResult:
        """Create an exercise. The service assigns the ID."""
        response, error = self._send(
            "POST",
            "/api/exercises",
            headers=self.JSON_HEADERS,
            json=data.to_payload(),
        )
        if response is None:
            return ActionResult(success=False, error=error)

        exercise_id = None
        try:
            exercise_id = response.json().get("id")
        except (ValueError, AttributeError):
            logger.warning("Create response carried no exercise ID")

        logger.info(f"Created exercise {exercise_id}")
        return ActionResult(success=True, exercise_id=exercise_id)

    def update_exercise(self, exercise_id: int, data: ExerciseInput) -> ActionResult:
        """Update the descriptive fields of an exercise."""
        response, error = self._send(
            "PUT",
            f"/api/exercises/{exercise_id}",
            headers=self.JSON_HEADERS,
            json=data.to_payload(),
        )
        if response is None:
            return ActionResult(success=False, exercise_id=exercise_id, error=error)

        logger.info(f"Updated exercise {exercise_id}")
        return ActionResult(success=True, exercise_id=exercise_id)

    def delete_exercise(self, exercise_id: int) -> ActionResult:
        """Delete an exercise."""
        response, error = self._send("DELETE", f"/api/exercises/{exercise_id}")
        if response is None:
            return ActionResult(success=False, exercise_id=exercise_id, error=error)

        logger.info(f"Deleted exercise {exercise_id}")
        return ActionResult(success=True, exercise_id=exercise_id)

    def review_exercise(self, exercise_id: int) -> ActionResult:
        """Mark an exercise as reviewed; the service moves it to its next stage."""
        response, error = self._send("POST", f"/api/exercises/{exercise_id}/review")
        if response is None:
            return ActionResult(success=False, exercise_id=exercise_id, error=error)

        logger.info(f"Reviewed exercise {exercise_id}")
        return ActionResult(success=True, exercise_id=exercise_id)
