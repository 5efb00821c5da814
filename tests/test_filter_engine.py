"""Tests for the filter engine."""

import pytest

from src.search.constraints import parse_filters
from src.search.filter_engine import apply_filters


def _ids(records):
    return [r["id"] for r in records]


def test_empty_filters_return_input(records):
    result = apply_filters(records, {})
    assert result == records
    assert all(a is b for a, b in zip(result, records, strict=True))


@pytest.mark.parametrize(
    "filters",
    [
        {"location.city": "lisbon", "price": {"lt": 1000}},
        {"tags": {"like": "vehicle"}, "status": "AVAILABLE"},
        {"price": {"gte": 60}, "title": {"like": "car"}, "id": [1, 2, 3]},
    ],
)
def test_filters_are_anded(records, filters):
    """Pipeline output equals the intersection of each constraint on its own."""
    combined = _ids(apply_filters(records, parse_filters(filters)))

    expected = set(_ids(records))
    for path, raw in filters.items():
        expected &= set(_ids(apply_filters(records, parse_filters({path: raw}))))

    assert combined == [i for i in _ids(records) if i in expected]


def test_scalar_equality_ignores_case(records):
    result = apply_filters(records, parse_filters({"title": "red car"}))
    assert _ids(result) == [1]


def test_array_membership_does_not_coerce(records):
    result = apply_filters(records, parse_filters({"status": [1, 2]}))
    assert _ids(result) == [3]


def test_like_takes_precedence_over_comparisons(records):
    """gt would exclude everything; only the like test is applied."""
    result = apply_filters(records, parse_filters({"price": {"like": "^1", "gt": 10**9}}))
    assert _ids(result) == [1, 2]


def test_relational_comparisons(records):
    assert _ids(apply_filters(records, parse_filters({"price": {"gt": 240}}))) == [1, 2]
    assert _ids(apply_filters(records, parse_filters({"price": {"gte": 240}}))) == [1, 2, 5]
    assert _ids(apply_filters(records, parse_filters({"price": {"lt": 60}}))) == [3]
    assert _ids(apply_filters(records, parse_filters({"price": {"lte": 60}}))) == [3, 4]


def test_nested_path_with_null_parent(records):
    result = apply_filters(records, parse_filters({"location.city": "Lisbon"}))
    assert _ids(result) == [1, 3]


def test_unknown_field_fails_without_error(records):
    assert apply_filters(records, parse_filters({"colour": "red"})) == []
    assert apply_filters(records, parse_filters({"colour": {"gt": 1}})) == []


def test_records_are_not_copied(records):
    result = apply_filters(records, parse_filters({"id": [2]}))
    assert result[0] is records[1]
