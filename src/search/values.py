"""Value helpers shared by the search stages: path lookup, string forms, ordering."""

import json
import math
from collections.abc import Mapping
from typing import Any


class _Missing:
    """Marker for a field path that does not resolve on a record."""

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def resolve_path(record: Any, path: str) -> Any:
    """Resolve a dot-delimited path such as ``"owner.address.city"``.

    Mapping keys are looked up by name and list elements by numeric index.
    Returns ``MISSING`` as soon as a step cannot be taken; never raises.
    """
    current = record
    for key in path.split("."):
        if isinstance(current, Mapping):
            if key not in current:
                return MISSING
            current = current[key]
        elif isinstance(current, list) and key.isdigit() and int(key) < len(current):
            current = current[int(key)]
        else:
            return MISSING
    return current


def to_text(value: Any) -> str:
    """String form of a JSON value, as used by equality and pattern tests."""
    if value is MISSING:
        return ""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, list):
        return ",".join("" if item is None else to_text(item) for item in value)
    if isinstance(value, Mapping):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"), default=str)
    return str(value)


def text_or_empty(value: Any) -> str:
    """Like :func:`to_text` but null and missing values become ``""``."""
    if value is None or value is MISSING:
        return ""
    return to_text(value)


def same_value(left: Any, right: Any) -> bool:
    """Equality without coercion: ``1 != "1"`` and ``True != 1``."""
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left is right
    if isinstance(left, str) != isinstance(right, str):
        return False
    return bool(left == right)


def compare_values(left: Any, right: Any) -> int:
    """Three-way comparison; null, missing and incomparable pairs compare equal."""
    if left is None or right is None or left is MISSING or right is MISSING:
        return 0
    try:
        if left > right:
            return 1
        if left < right:
            return -1
    except TypeError:
        return 0
    return 0
