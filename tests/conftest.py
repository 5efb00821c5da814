"""Shared fixtures for the record search tests."""

from datetime import UTC, datetime

import pytest

from src.config.settings import settings
from src.observability.langfuse_client import LangfuseTracer
from src.search.pipeline import SearchPipeline

FIXED_NOW = datetime(2026, 10, 18, 9, 30, 0, 123456, tzinfo=UTC)


@pytest.fixture(autouse=True)
def no_tracing(monkeypatch):
    """Keep Langfuse disabled regardless of the developer's environment."""
    monkeypatch.setattr(settings, "LANGFUSE_PUBLIC_KEY", "")
    monkeypatch.setattr(settings, "LANGFUSE_SECRET_KEY", "")


@pytest.fixture
def records():
    return [
        {
            "id": 1,
            "title": "Red Car",
            "description": "Compact hatchback",
            "tags": ["red", "vehicle"],
            "price": 12000,
            "status": "available",
            "location": {"city": "Lisbon"},
        },
        {
            "id": 2,
            "title": "Blue Car",
            "description": "Family estate",
            "tags": ["blue", "vehicle"],
            "price": 18500,
            "status": "sold",
            "location": {"city": "Porto"},
        },
        {
            "id": 3,
            "title": "Cat Tree",
            "description": "Scratching post",
            "tags": ["cats", "dogs"],
            "price": 45,
            "status": 1,
            "location": {"city": "Lisbon"},
        },
        {
            "id": 4,
            "title": "Dog Bed",
            "description": "Washable cushion",
            "tags": ["furniture"],
            "price": 60,
            "status": "1",
            "location": None,
        },
        {
            "id": 5,
            "title": "Bicycle",
            "description": "City bike with red paint",
            "tags": ["vehicle"],
            "price": 240,
            "status": "available",
        },
    ]


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def pipeline(fixed_clock):
    return SearchPipeline(clock=fixed_clock, tracer=LangfuseTracer())
