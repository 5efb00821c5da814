"""Tests for the sort & limit stage."""

from src.search.sort_limit import limit_records, sort_records


def test_sort_ascending_and_descending(records):
    assert [r["title"] for r in sort_records(records, "title")] == [
        "Bicycle",
        "Blue Car",
        "Cat Tree",
        "Dog Bed",
        "Red Car",
    ]
    assert [r["price"] for r in sort_records(records, "price", "desc")] == [
        18500,
        12000,
        240,
        60,
        45,
    ]


def test_ties_keep_incoming_order():
    records = [{"k": 1, "n": "a"}, {"k": 0, "n": "b"}, {"k": 1, "n": "c"}, {"k": 0, "n": "d"}]
    assert [r["n"] for r in sort_records(records, "k")] == ["b", "d", "a", "c"]
    assert [r["n"] for r in sort_records(records, "k", "desc")] == ["a", "c", "b", "d"]


def test_sorting_sorted_sequence_is_identity(records):
    once = sort_records(records, "price", "desc")
    twice = sort_records(once, "price", "desc")
    assert all(a is b for a, b in zip(once, twice, strict=True))


def test_missing_and_incomparable_values_compare_equal():
    records = [{"v": "a"}, {"v": 1}, {}, {"v": None}]
    assert sort_records(records, "v") == records


def test_unknown_order_sorts_ascending():
    records = [{"v": 2}, {"v": 1}]
    assert sort_records(records, "v", "sideways") == [{"v": 1}, {"v": 2}]


def test_sort_key_is_not_a_path():
    """Dotted names address top-level keys, never nested fields."""
    nested = [{"loc": {"city": "Porto"}}, {"loc": {"city": "Lisbon"}}]
    assert sort_records(nested, "loc.city") == nested


def test_sort_on_dotted_top_level_key():
    records = [{"id": 1, "a.b": 2}, {"id": 2, "a.b": 1}]
    assert [r["id"] for r in sort_records(records, "a.b")] == [2, 1]
    assert [r["id"] for r in sort_records(records, "a.b", "desc")] == [1, 2]


def test_limit_reports_full_count(records):
    count, items = limit_records(records, 2)
    assert count == 5
    assert items == records[:2]


def test_zero_limit_returns_no_items(records):
    assert limit_records(records, 0) == (5, [])
    assert limit_records(records, 50) == (5, records)
