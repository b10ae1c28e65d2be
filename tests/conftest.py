"""Shared fixtures."""

import os
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("LOG_LEVEL", "DEBUG")

from user_registry_api.app.core.cache import InMemoryObjectCache
from user_registry_api.app.core.config import Settings
from user_registry_api.app.main import create_app


@pytest.fixture
def cache():
    return InMemoryObjectCache()


@pytest.fixture
def app(cache):
    return create_app(settings=Settings(log_level="DEBUG"), user_cache=cache)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def _years_ago(years: int) -> str:
    now = datetime.now(timezone.utc)
    return now.replace(year=now.year - years, month=1, day=1).strftime("%Y-%m-%dT00:00:00")


@pytest.fixture
def ann_payload():
    return {
        "firstName": "Ann",
        "email": "ann@example.com",
        "dateOfBirth": _years_ago(30),
    }


@pytest.fixture
def years_ago():
    return _years_ago
