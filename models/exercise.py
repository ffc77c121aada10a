"""
Exercise Models - Pydantic models for the exercise service payloads.

These models define the JSON exchanged with the exercise service:
- Exercise: a practice problem as the service returns it (read-only here)
- DashboardCounts: aggregate tile counts
- ExercisePage: one page of the filtered list
- ExerciseInput: the body sent on create/update

The review gate (review_availability) also lives here because it is a pure
function of the record and the current time.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


# Stage at which a problem leaves the review cycle and joins the pool
MASTERED_STAGE = 3

# Go marshals time.Time with nanoseconds; keep at most microseconds
_FRACTION_RE = re.compile(r"(\.\d{6})\d+")


class ExerciseFilter(str, Enum):
    """Filters offered by the five dashboard tiles."""
    PENDING = "pending"
    TOTAL = "total"
    POOL = "pool"
    REVIEWED_TODAY = "reviewed_today"
    SOLVED_TODAY = "solved_today"


def parse_filter(value: "str | ExerciseFilter") -> ExerciseFilter:
    """
    Convert a raw filter value into an ExerciseFilter.

    Raises ValueError for anything outside the fixed set of tiles.
    """
    if isinstance(value, ExerciseFilter):
        return value
    return ExerciseFilter(value)


def _normalize_timestamp(value):
    if isinstance(value, str):
        return _FRACTION_RE.sub(r"\1", value)
    return value


def _ensure_aware(value: Optional[datetime]) -> Optional[datetime]:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Exercise(BaseModel):
    """A practice problem as returned by the exercise service."""
    id: int
    title: str = ""
    link: Optional[str] = None
    tags: Optional[str] = None
    source: str = ""
    source_id: str = ""
    resolve_date: datetime
    answer: str = ""
    review_count: int = 0
    review_stage: int = 0
    next_review_date: datetime
    created_at: Optional[datetime] = None
    last_reviewed_at: Optional[datetime] = None

    @field_validator(
        "resolve_date", "next_review_date", "created_at", "last_reviewed_at",
        mode="before",
    )
    @classmethod
    def _trim_fraction(cls, value):
        return _normalize_timestamp(value)

    @field_validator(
        "resolve_date", "next_review_date", "created_at", "last_reviewed_at",
    )
    @classmethod
    def _assume_utc(cls, value):
        return _ensure_aware(value)

    def is_mastered(self) -> bool:
        """Check if the problem has reached the pool."""
        return self.review_stage >= MASTERED_STAGE

    def to_input(self) -> "ExerciseInput":
        """Form values for editing this record (resolve date kept as a date)."""
        return ExerciseInput(
            title=self.title,
            link=self.link or "",
            tags=self.tags or "",
            source=self.source,
            source_id=self.source_id,
            resolve_date=self.resolve_date.astimezone(timezone.utc).date(),
            answer=self.answer,
        )


class DashboardCounts(BaseModel):
    """Aggregate counts shown on the dashboard tiles."""
    pending_count: int = Field(default=0, ge=0)
    total_count: int = Field(default=0, ge=0)
    pool_count: int = Field(default=0, ge=0)
    reviewed_today_count: int = Field(default=0, ge=0)
    solved_today_count: int = Field(default=0, ge=0)

    def count_for(self, exercise_filter: ExerciseFilter) -> int:
        """Get the tile count that belongs to a filter."""
        return getattr(self, f"{exercise_filter.value}_count")


class ExercisePage(BaseModel):
    """One page of exercises plus paging metadata."""
    data: list[Exercise] = Field(default_factory=list)
    total_pages: int = 1
    total: Optional[int] = None
    page: Optional[int] = None

    @field_validator("data", mode="before")
    @classmethod
    def _null_is_empty(cls, value):
        # The Go server encodes an empty slice as null
        return value or []

    @field_validator("total_pages")
    @classmethod
    def _at_least_one_page(cls, value: int) -> int:
        return max(value, 1)


class ExerciseInput(BaseModel):
    """
    Body sent when creating or updating an exercise.

    The form edits resolve_date as a date; on the wire it becomes a full
    ISO-8601 instant at midnight UTC.
    """
    title: str = ""
    link: str = ""
    tags: str = ""
    source: str = ""
    source_id: str = ""
    resolve_date: date
    answer: str = ""

    def to_payload(self) -> dict:
        """Serialize to the JSON body the service expects."""
        payload = self.model_dump(exclude={"resolve_date"})
        payload["resolve_date"] = format_instant(self.resolve_date)
        return payload


def format_instant(day: date) -> str:
    """Midnight UTC of ``day`` as an ISO-8601 instant, e.g. 2024-01-15T00:00:00Z."""
    midnight = datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
    return midnight.isoformat().replace("+00:00", "Z")


def today_utc() -> date:
    """Default resolve date for new problems."""
    return datetime.now(timezone.utc).date()


@dataclass(frozen=True)
class ReviewAvailability:
    """How the review control of a card should be shown."""
    label: str
    enabled: bool


def review_availability(
    review_stage: int,
    next_review_date: datetime,
    now: datetime,
) -> ReviewAvailability:
    """
    Decide the state of the review control.

    - Mastered problems (stage >= 3) are cleared, whatever the date.
    - Otherwise a problem is due once next_review_date has passed.
    - Otherwise the control waits, labelled with the local due date
      (YYYY-MM-DD, so the year is never ambiguous).
    """
    if review_stage >= MASTERED_STAGE:
        return ReviewAvailability(label="Cleared", enabled=False)

    next_review_date = _ensure_aware(next_review_date)
    now = _ensure_aware(now)

    if next_review_date <= now:
        return ReviewAvailability(label="Mark Reviewed", enabled=True)

    local_day = next_review_date.astimezone().date().isoformat()
    return ReviewAvailability(label=f"Wait until {local_day}", enabled=False)
