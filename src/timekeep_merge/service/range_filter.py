# SPDX-License-Identifier: MIT

from typing import Optional

from timekeep_merge.model.flat_entry import FlatEntry
from timekeep_merge.service.errors import (
    EmptyResultError,
    IncompleteRangeError,
    InvertedRangeError,
)
from timekeep_merge.time import (
    datetime_from_local_date_str,
    datetime_to_millis,
    end_of_local_day_from_date_str,
)


def get_range_boundaries(start_date: str, end_date: str) -> tuple[int, int]:
    """
    Resolve a pair of YYYY-MM-DD dates to an inclusive range of epoch
    milliseconds, from local midnight of start_date to 23:59:59.999 of end_date.

    Raises:
        InvertedRangeError: If the start resolves after the end
    """
    start_millis = datetime_to_millis(datetime_from_local_date_str(start_date))
    end_millis = datetime_to_millis(end_of_local_day_from_date_str(end_date))
    if start_millis > end_millis:
        raise InvertedRangeError()
    return start_millis, end_millis


def filter_by_range(
    entries: list[FlatEntry],
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
) -> list[FlatEntry]:
    """
    Keep the entries whose start time falls on or between two calendar days.

    Only the start time is tested, an entry that ends after the range is kept.
    Empty strings count as missing dates.

    Raises:
        IncompleteRangeError: If exactly one of the dates is given
        InvertedRangeError: If start_date is after end_date
        EmptyResultError: If no entry is inside the range
    """
    if not start_date and not end_date:
        return list(entries)
    if not start_date or not end_date:
        raise IncompleteRangeError()

    start_millis, end_millis = get_range_boundaries(start_date, end_date)

    filtered_entries = [
        entry
        for entry in entries
        if start_millis <= datetime_to_millis(entry["start_time"]) <= end_millis
    ]
    if len(filtered_entries) == 0:
        raise EmptyResultError()
    return filtered_entries
