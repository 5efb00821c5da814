"""API request/response schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.search.values import to_text


class SearchRequest(BaseModel):
    """Body of ``POST /search``; unset fields fall back to the search defaults."""

    model_config = ConfigDict(populate_by_name=True)

    query: str | None = None
    filters: dict[str, Any] | None = None
    sort_by: str | None = Field(default=None, alias="sortBy")
    order: str | None = None
    limit: int | None = Field(default=None, ge=0)

    @field_validator("query", mode="before")
    @classmethod
    def coerce_query(cls, value: Any) -> str | None:
        if not value:
            return None
        if isinstance(value, str):
            return value
        return to_text(value)


class SearchResponse(BaseModel):
    count: int
    items: list[dict[str, Any]]


class ErrorResponse(BaseModel):
    error: str = "SEARCH_ERROR"
    message: str
