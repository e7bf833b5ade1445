from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from newsdesk.api import create_app
from newsdesk.config import ConfigModel
from newsdesk.db import Storage
from newsdesk.models import ArticleCreate


class FakeClock:
    """Deterministic clock that moves forward one second per reading."""

    def __init__(self, start=None, step=timedelta(seconds=1)):
        self.current = start or datetime(2024, 1, 1, 8, 0, tzinfo=timezone.utc)
        self.step = step
        self.readings = []

    def __call__(self):
        value = self.current
        self.readings.append(value)
        self.current = self.current + self.step
        return value


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def storage(clock):
    return Storage(clock)


@pytest.fixture
def make_article():
    """Build ArticleCreate payloads with sensible defaults."""
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        fields = {
            "title": f"Story {counter['n']}",
            "slug": f"story-{counter['n']}",
            "excerpt": "A short summary.",
            "content": "Body text for the story.",
            "category": "politics",
            "author": "Staff Writer",
            "tags": [],
            "status": "published",
            "read_time": 3,
        }
        fields.update(overrides)
        return ArticleCreate(**fields)

    return _make


@pytest.fixture
def config():
    return ConfigModel(seed={"sample_articles": False, "admin_password_env": None})


@pytest.fixture
def api(storage, config):
    return TestClient(create_app(storage, config))
