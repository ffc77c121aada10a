"""Test helpers: sample payloads and an in-memory exercise service."""

import json
import re
from datetime import datetime, timezone

import httpx

FIXED_NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)

_ITEM_PATH = re.compile(r"^/api/exercises/(\d+)$")
_REVIEW_PATH = re.compile(r"^/api/exercises/(\d+)/review$")


def sample_exercise(**overrides) -> dict:
    """Exercise JSON as the service returns it."""
    data = {
        "id": 1,
        "source": "LeetCode",
        "source_id": "322",
        "title": "Coin Change",
        "link": "https://leetcode.com/problems/coin-change/",
        "tags": "dp",
        "resolve_date": "2024-01-15T00:00:00Z",
        "next_review_date": "2024-01-16T00:00:00Z",
        "review_stage": 0,
        "review_count": 0,
        "answer": "bottom-up dp over amounts",
        "created_at": "2024-01-15T08:30:00Z",
        "last_reviewed_at": "0001-01-01T00:00:00Z",
    }
    data.update(overrides)
    return data


def page_of(exercises: list[dict], total_pages: int = 1, page: int = 1) -> dict:
    return {
        "data": exercises,
        "total": len(exercises),
        "page": page,
        "total_pages": total_pages,
    }


class FakeExerciseService:
    """In-memory stand-in for the exercise REST API, served through MockTransport."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.failures: set[tuple[str, str]] = set()
        self.dashboard = {
            "pending_count": 5,
            "total_count": 12,
            "pool_count": 3,
            "reviewed_today_count": 2,
            "solved_today_count": 1,
        }
        self.list_response = page_of([sample_exercise()])
        self.exercises = {1: sample_exercise()}
        self.next_id = 100

    def fail_on(self, method: str, path: str):
        self.failures.add((method, path))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        method, path = request.method, request.url.path

        if (method, path) in self.failures:
            return httpx.Response(500, text="internal error")

        if method == "GET" and path == "/api/dashboard":
            return httpx.Response(200, json=self.dashboard)
        if method == "GET" and path == "/api/exercises":
            return httpx.Response(200, json=self.list_response)
        if method == "POST" and path == "/api/exercises":
            self.next_id += 1
            return httpx.Response(201, json={"id": self.next_id})

        review = _REVIEW_PATH.match(path)
        if method == "POST" and review:
            return httpx.Response(200, json={"status": "reviewed"})

        item = _ITEM_PATH.match(path)
        if item:
            exercise_id = int(item.group(1))
            if method == "GET":
                if exercise_id not in self.exercises:
                    return httpx.Response(404, text="sql: no rows in result set")
                return httpx.Response(200, json=self.exercises[exercise_id])
            if method == "PUT":
                return httpx.Response(200, json={"status": "updated"})
            if method == "DELETE":
                return httpx.Response(200, json={"status": "deleted"})

        return httpx.Response(404, text="404 page not found")

    # Helpers for assertions

    def calls(self) -> list[tuple[str, str]]:
        return [(r.method, r.url.path) for r in self.requests]

    def last(self, method: str, path: str) -> httpx.Request:
        for request in reversed(self.requests):
            if request.method == method and request.url.path == path:
                return request
        raise AssertionError(f"No {method} {path} request was sent")

    def body(self, request: httpx.Request) -> dict:
        return json.loads(request.content)

