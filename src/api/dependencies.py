"""FastAPI dependencies shared by the routes."""

from fastapi import Request

from src.search.pipeline import SearchPipeline
from src.storage.record_store import RecordStore


def get_store(request: Request) -> RecordStore:
    """Record store loaded during application startup."""
    return request.app.state.store


def get_pipeline(request: Request) -> SearchPipeline:
    return request.app.state.pipeline
