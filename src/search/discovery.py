"""Discovery annotator: give every result a ``foundAt`` timestamp."""

from collections.abc import Sequence
from datetime import UTC, datetime, timedelta
from typing import Any

FOUND_AT_FIELD = "foundAt"


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC with millisecond precision, e.g. ``2026-10-18T09:30:00.000Z``."""
    moment = moment.astimezone(UTC)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def annotate_discovery(records: Sequence[dict[str, Any]], now: datetime) -> list[dict[str, Any]]:
    """Return shallow copies of ``records`` with ``foundAt`` set.

    Records that already carry a non-null ``foundAt`` keep it. The others get
    ``now`` plus one millisecond per position, so synthesized timestamps
    increase strictly in result order.
    """
    base = now.replace(microsecond=now.microsecond // 1000 * 1000)
    annotated: list[dict[str, Any]] = []
    for index, record in enumerate(records):
        found_at = record.get(FOUND_AT_FIELD)
        if found_at is None:
            found_at = format_timestamp(base + timedelta(milliseconds=index))
        annotated.append({**record, FOUND_AT_FIELD: found_at})
    return annotated
