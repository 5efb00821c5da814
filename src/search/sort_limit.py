"""Stable ordering by a single field, followed by truncation."""

from collections.abc import Sequence
from functools import cmp_to_key
from typing import Any

from src.search.values import MISSING, compare_values


def sort_records(
    records: Sequence[dict[str, Any]],
    sort_by: str,
    order: str = "asc",
) -> list[dict[str, Any]]:
    """Sort by the top-level field ``sort_by``; ``"desc"`` reverses, else ascending.

    Ties (including missing or incomparable values) keep their incoming order.
    """
    sign = -1 if order == "desc" else 1

    def _compare(left: dict[str, Any], right: dict[str, Any]) -> int:
        return sign * compare_values(left.get(sort_by, MISSING), right.get(sort_by, MISSING))

    return sorted(records, key=cmp_to_key(_compare))


def limit_records(
    records: Sequence[dict[str, Any]],
    limit: int,
) -> tuple[int, list[dict[str, Any]]]:
    """Return ``(total, first limit records)``."""
    return len(records), list(records[:limit])
