"""Filter engine: keep records that satisfy every field constraint."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from src.search.constraints import Constraint
from src.search.values import resolve_path

logger = logging.getLogger(__name__)

Record = dict[str, Any]


def matches_all(record: Record, constraints: Mapping[str, Constraint]) -> bool:
    """True when the record passes every constraint (logical AND)."""
    return all(
        constraint.matches(resolve_path(record, path))
        for path, constraint in constraints.items()
    )


def apply_filters(
    records: Sequence[Record],
    constraints: Mapping[str, Constraint],
) -> list[Record]:
    """Return the records satisfying all constraints, in their incoming order.

    The returned list references the same record objects; an empty constraint
    mapping returns a copy of the input list.
    """
    if not constraints:
        return list(records)

    matched = [record for record in records if matches_all(record, constraints)]
    logger.debug("Filters %s kept %d of %d records", list(constraints), len(matched), len(records))
    return matched
