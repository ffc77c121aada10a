"""Shared test fixtures."""

import httpx
import pytest

from config.settings import Settings
from controllers.exercise_controller import ExerciseController
from services.exercise_api import ExerciseAPI
from tests.helpers import FIXED_NOW, FakeExerciseService


@pytest.fixture
def settings():
    return Settings(api_base_url="http://tracker.test/", request_timeout=None)


@pytest.fixture
def service():
    return FakeExerciseService()


@pytest.fixture
def api(settings, service):
    return ExerciseAPI(settings=settings, transport=httpx.MockTransport(service.handler))


@pytest.fixture
def store():
    """Plain dict standing in for st.session_state."""
    return {}


@pytest.fixture
def controller(api, store):
    return ExerciseController(api=api, store=store, clock=lambda: FIXED_NOW)
