"""Field constraints parsed from the ``filters`` mapping of a search request."""

import operator
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from src.search.errors import SearchError
from src.search.values import MISSING, same_value, text_or_empty, to_text

# Only the first key present (in this order) is honoured on a constraint object.
RELATIONAL_KEYS = ("like", "gt", "gte", "lt", "lte")

_COMPARISONS = {
    "gt": operator.gt,
    "gte": operator.ge,
    "lt": operator.lt,
    "lte": operator.le,
}


@dataclass(frozen=True)
class Equals:
    """Case-insensitive equality of string forms."""

    value: Any

    def matches(self, field_value: Any) -> bool:
        if field_value is MISSING:
            return False
        return to_text(field_value).lower() == to_text(self.value).lower()


@dataclass(frozen=True)
class OneOf:
    """Membership in a list of allowed values, without coercion."""

    values: tuple[Any, ...]

    def matches(self, field_value: Any) -> bool:
        if field_value is MISSING:
            return False
        return any(same_value(field_value, allowed) for allowed in self.values)


@dataclass(frozen=True)
class Matches:
    """Case-insensitive regular-expression search (``like``)."""

    pattern: re.Pattern[str]

    def matches(self, field_value: Any) -> bool:
        return self.pattern.search(text_or_empty(field_value)) is not None


@dataclass(frozen=True)
class Compare:
    """Relational comparison of the raw field value against a bound."""

    op: str
    value: Any

    def matches(self, field_value: Any) -> bool:
        if field_value is MISSING or field_value is None or self.value is None:
            return False
        try:
            return bool(_COMPARISONS[self.op](field_value, self.value))
        except TypeError:
            return False


Constraint = Equals | OneOf | Matches | Compare


def parse_constraint(raw: Any, path: str = "") -> Constraint:
    """Turn a wire constraint into its :data:`Constraint` variant.

    Raises:
        SearchError: if a ``like`` pattern is not a valid regular expression.
    """
    if isinstance(raw, Mapping):
        for key in RELATIONAL_KEYS:
            if key not in raw:
                continue
            if key == "like":
                try:
                    return Matches(re.compile(to_text(raw[key]), re.IGNORECASE))
                except re.error as e:
                    raise SearchError(f"Invalid like pattern for '{path}': {e}") from e
            return Compare(key, raw[key])
        return Equals(raw)

    if isinstance(raw, list | tuple):
        return OneOf(tuple(raw))

    return Equals(raw)


def parse_filters(filters: Mapping[str, Any] | None) -> dict[str, Constraint]:
    """Parse every ``path -> constraint`` entry, keeping request order."""
    if not filters:
        return {}
    return {path: parse_constraint(raw, path) for path, raw in filters.items()}
