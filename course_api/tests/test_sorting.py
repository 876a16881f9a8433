"""Tests for composite sort orders."""

from datetime import datetime, timedelta, timezone

from src.repositories.sorting import SortDirection, SortOrder, apply_sort


def _titles(courses):
    return [c.title for c in courses]


def test_direction_parse():
    """Only 'desc' means descending."""
    assert SortDirection.parse("desc") is SortDirection.DESC
    assert SortDirection.parse(" DESC ") is SortDirection.DESC
    assert SortDirection.parse("asc") is SortDirection.ASC
    assert SortDirection.parse("sideways") is SortDirection.ASC
    assert SortDirection.parse(None) is SortDirection.ASC


def test_no_orders_keeps_current_order(courses):
    """Without sort keys the list order is untouched."""
    assert apply_sort(list(courses), []) == courses
    assert apply_sort(list(courses), None) == courses


def test_unknown_field_is_skipped(courses):
    """Unrecognized fields add no ordering but later keys still apply."""
    orders = [SortOrder("popularity", SortDirection.DESC), SortOrder("title")]
    result = apply_sort(list(courses), orders)
    assert _titles(result) == sorted(c.title for c in courses)


def test_only_unknown_fields_keep_order(courses):
    """A sort made entirely of unknown fields behaves like no sort."""
    assert apply_sort(list(courses), [SortOrder("nope")]) == courses


def test_numeric_fields_sort_numerically(course_factory):
    """Ages and prices compare as numbers, not text."""
    items = [
        course_factory("a", price="100", min_age=10),
        course_factory("b", price="9.5", min_age=9),
        course_factory("c", price="20", min_age=12),
    ]
    assert _titles(apply_sort(list(items), [SortOrder("price")])) == ["b", "c", "a"]
    assert _titles(apply_sort(list(items), [SortOrder("minAge", SortDirection.DESC)])) == ["c", "a", "b"]
    assert _titles(apply_sort(list(items), [SortOrder("min_age")])) == ["b", "a", "c"]


def test_type_and_kind_are_the_same_key(course_factory):
    """The wire name 'type' sorts by the course kind."""
    items = [course_factory("x", kind="ONE_TIME"), course_factory("y", kind="CLUB")]
    assert _titles(apply_sort(list(items), [SortOrder("type")])) == ["y", "x"]
    assert _titles(apply_sort(list(items), [SortOrder("kind")])) == ["y", "x"]


def test_session_dates_sort_chronologically_across_offsets(course_factory):
    """Timestamps compare by instant, whatever their offset."""
    utc = timezone.utc
    plus_two = timezone(timedelta(hours=2))
    items = [
        course_factory("later", next_session_date=datetime(2025, 3, 1, 12, 0, tzinfo=utc)),
        # 11:00 UTC
        course_factory("earlier", next_session_date=datetime(2025, 3, 1, 13, 0, tzinfo=plus_two)),
    ]
    assert _titles(apply_sort(list(items), [SortOrder("nextSessionDate")])) == ["earlier", "later"]


def test_missing_session_dates_sort_last_ascending(course_factory):
    """Courses without a next session come after dated ones, first when descending."""
    utc = timezone.utc
    items = [
        course_factory("undated", next_session_date=None),
        course_factory("dated", next_session_date=datetime(2025, 3, 1, tzinfo=utc)),
    ]
    assert _titles(apply_sort(list(items), [SortOrder("next_session_date")])) == ["dated", "undated"]
    desc = [SortOrder("next_session_date", SortDirection.DESC)]
    assert _titles(apply_sort(list(items), desc)) == ["undated", "dated"]


def test_three_key_mixed_direction_sort(course_factory):
    """Each key only breaks ties left by the keys before it."""
    items = [
        course_factory("b", category="Art", price="10"),
        course_factory("a", category="Art", price="10"),
        course_factory("c", category="Art", price="20"),
        course_factory("d", category="Science", price="5"),
    ]
    orders = [
        SortOrder("category", SortDirection.DESC),
        SortOrder("price", SortDirection.DESC),
        SortOrder("title", SortDirection.ASC),
    ]
    assert _titles(apply_sort(list(items), orders)) == ["d", "c", "a", "b"]
