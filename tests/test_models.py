"""Tests for exercise payload models and the review gate."""

from datetime import date, datetime, timedelta, timezone

import pytest

from models.exercise import (
    DashboardCounts,
    Exercise,
    ExerciseFilter,
    ExerciseInput,
    ExercisePage,
    format_instant,
    parse_filter,
    review_availability,
)
from tests.helpers import FIXED_NOW, sample_exercise


# ---------------------------------------------------------------------------
# review_availability
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("stage", [3, 4, 10])
@pytest.mark.parametrize("offset_days", [-30, 0, 30])
def test_mastered_is_always_cleared(stage, offset_days):
    due = FIXED_NOW + timedelta(days=offset_days)
    result = review_availability(stage, due, FIXED_NOW)
    assert result.label == "Cleared"
    assert result.enabled is False


@pytest.mark.parametrize("stage", [0, 1, 2])
def test_due_problem_can_be_reviewed(stage):
    result = review_availability(stage, FIXED_NOW - timedelta(hours=1), FIXED_NOW)
    assert result.label == "Mark Reviewed"
    assert result.enabled is True


def test_due_exactly_now_can_be_reviewed():
    result = review_availability(1, FIXED_NOW, FIXED_NOW)
    assert result.enabled is True


def test_future_problem_waits_with_local_date():
    due = FIXED_NOW + timedelta(days=7)
    result = review_availability(2, due, FIXED_NOW)
    assert result.enabled is False
    assert result.label == f"Wait until {due.astimezone().date().isoformat()}"


def test_wait_label_shows_four_digit_year():
    due = datetime(2099, 1, 1, 12, 0, tzinfo=timezone.utc)
    result = review_availability(0, due, FIXED_NOW)
    assert "2099" in result.label
    assert "/99" not in result.label


def test_naive_dates_are_treated_as_utc():
    naive_due = datetime(2024, 6, 1, 11, 0)
    result = review_availability(0, naive_due, FIXED_NOW)
    assert result.enabled is True


# ---------------------------------------------------------------------------
# Filters
# ---------------------------------------------------------------------------

def test_parse_filter_accepts_all_tiles():
    for value in ["pending", "total", "pool", "reviewed_today", "solved_today"]:
        assert parse_filter(value).value == value


def test_parse_filter_passes_enum_through():
    assert parse_filter(ExerciseFilter.POOL) is ExerciseFilter.POOL


def test_parse_filter_rejects_unknown_value():
    with pytest.raises(ValueError):
        parse_filter("archived")


# ---------------------------------------------------------------------------
# Payload parsing
# ---------------------------------------------------------------------------

def test_exercise_parses_service_json():
    ex = Exercise.model_validate(sample_exercise(review_stage=2, review_count=4))
    assert ex.id == 1
    assert ex.review_stage == 2
    assert ex.resolve_date == datetime(2024, 1, 15, tzinfo=timezone.utc)
    assert ex.last_reviewed_at.year == 1


def test_exercise_accepts_nanosecond_timestamps():
    ex = Exercise.model_validate(
        sample_exercise(next_review_date="2024-03-02T10:11:12.123456789+08:00")
    )
    assert ex.next_review_date.microsecond == 123456
    assert ex.next_review_date.utcoffset() == timedelta(hours=8)


def test_exercise_with_empty_link_and_tags():
    ex = Exercise.model_validate(sample_exercise(link="", tags=None))
    values = ex.to_input()
    assert values.link == ""
    assert values.tags == ""


def test_to_input_truncates_resolve_date_to_utc_day():
    ex = Exercise.model_validate(sample_exercise(resolve_date="2024-01-15T23:30:00-02:00"))
    # 23:30 at UTC-2 is already the 16th in UTC
    assert ex.to_input().resolve_date == date(2024, 1, 16)


def test_mastered_flag():
    assert Exercise.model_validate(sample_exercise(review_stage=3)).is_mastered()
    assert not Exercise.model_validate(sample_exercise(review_stage=2)).is_mastered()


def test_page_with_null_data_is_empty():
    page = ExercisePage.model_validate({"data": None, "total": 0, "page": 1, "total_pages": 1})
    assert page.data == []


def test_page_never_reports_zero_pages():
    page = ExercisePage.model_validate({"data": [], "total_pages": 0})
    assert page.total_pages == 1


def test_dashboard_counts_default_missing_tiles_to_zero():
    counts = DashboardCounts.model_validate(
        {"pending_count": 5, "total_count": 9, "pool_count": 1}
    )
    assert counts.reviewed_today_count == 0
    assert counts.solved_today_count == 0
    assert counts.count_for(ExerciseFilter.PENDING) == 5
    assert counts.count_for(ExerciseFilter.SOLVED_TODAY) == 0


def test_dashboard_counts_reject_negative():
    with pytest.raises(ValueError):
        DashboardCounts.model_validate({"pending_count": -1})


# ---------------------------------------------------------------------------
# Write payload
# ---------------------------------------------------------------------------

def test_format_instant_is_midnight_utc():
    assert format_instant(date(2024, 1, 15)) == "2024-01-15T00:00:00Z"


def test_input_payload_shape():
    payload = ExerciseInput(
        title="Two Sum",
        link="https://leetcode.com/problems/two-sum/",
        tags="hash",
        source="LeetCode",
        source_id="1",
        resolve_date=date(2024, 2, 29),
        answer="hash map of complements",
    ).to_payload()

    assert payload == {
        "title": "Two Sum",
        "link": "https://leetcode.com/problems/two-sum/",
        "tags": "hash",
        "source": "LeetCode",
        "source_id": "1",
        "resolve_date": "2024-02-29T00:00:00Z",
        "answer": "hash map of complements",
    }
