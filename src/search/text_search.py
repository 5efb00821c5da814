"""Substring search across a fixed set of record fields."""

from collections.abc import Sequence
from typing import Any

from src.search.values import text_or_empty

DEFAULT_SEARCH_FIELDS: tuple[str, ...] = ("title", "description", "tags")


def field_text(value: Any) -> str:
    """Searchable text of a field; list values are joined with single spaces."""
    if isinstance(value, list):
        return " ".join(text_or_empty(item) for item in value)
    return text_or_empty(value)


def text_search(
    records: Sequence[dict[str, Any]],
    query: str | None,
    fields: Sequence[str] = DEFAULT_SEARCH_FIELDS,
) -> list[dict[str, Any]]:
    """Keep records where any of ``fields`` contains ``query``, ignoring case.

    An empty or absent query keeps every record.
    """
    if not query:
        return list(records)

    needle = query.lower()
    return [
        record
        for record in records
        if any(needle in field_text(record.get(name)).lower() for name in fields)
    ]
