import pendulum
import pytest

from timekeep_merge.service.errors import (
    EmptyResultError,
    IncompleteRangeError,
    InvertedRangeError,
)
from timekeep_merge.service.range_filter import filter_by_range, get_range_boundaries
from timekeep_merge.time import datetime_to_millis


def entry(name, start, end=None):
    return {"name": name, "start_time": start, "end_time": end}


RANGE_START = pendulum.datetime(2024, 5, 1, tz="local")
RANGE_END = pendulum.datetime(2024, 5, 3, 23, 59, 59, 999000, tz="local")


def test_no_dates_passes_entries_through():
    entries = [entry("a", RANGE_START)]
    assert filter_by_range(entries) == entries
    assert filter_by_range(entries, "", "") == entries


def test_no_dates_on_empty_list_is_not_an_error():
    assert filter_by_range([]) == []


def test_only_start_date_is_incomplete():
    with pytest.raises(IncompleteRangeError):
        filter_by_range([entry("a", RANGE_START)], "2024-05-01", None)


def test_only_end_date_is_incomplete():
    with pytest.raises(IncompleteRangeError):
        filter_by_range([entry("a", RANGE_START)], "", "2024-05-03")


def test_inverted_range_is_rejected():
    with pytest.raises(InvertedRangeError):
        filter_by_range([entry("a", RANGE_START)], "2024-05-10", "2024-05-01")


def test_same_day_range_is_valid():
    kept = filter_by_range([entry("a", RANGE_START.add(hours=12))], "2024-05-01", "2024-05-01")
    assert len(kept) == 1


def test_range_boundaries_are_inclusive():
    entries = [
        entry("before", RANGE_START.subtract(microseconds=1000)),
        entry("first", RANGE_START),
        entry("last", RANGE_END),
        entry("after", RANGE_END.add(microseconds=1000)),
    ]

    kept = filter_by_range(entries, "2024-05-01", "2024-05-03")

    assert [e["name"] for e in kept] == ["first", "last"]


def test_only_start_time_is_tested():
    long_entry = entry("overnight", RANGE_END.subtract(hours=1), RANGE_END.add(hours=5))
    early_entry = entry("early", RANGE_START.subtract(hours=1), RANGE_START.add(hours=1))

    kept = filter_by_range([long_entry, early_entry], "2024-05-01", "2024-05-03")

    assert [e["name"] for e in kept] == ["overnight"]


def test_everything_outside_range_is_empty_result():
    with pytest.raises(EmptyResultError):
        filter_by_range(
            [entry("old", pendulum.datetime(2023, 1, 1, tz="local"))],
            "2024-05-01",
            "2024-05-03",
        )


def test_range_boundaries_resolve_to_local_day():
    start_millis, end_millis = get_range_boundaries("2024-05-01", "2024-05-03")

    assert start_millis == datetime_to_millis(RANGE_START)
    assert end_millis == datetime_to_millis(RANGE_END)


def test_filter_returns_new_list():
    entries = [entry("a", RANGE_START)]
    kept = filter_by_range(entries, "2024-05-01", "2024-05-03")
    assert kept is not entries
