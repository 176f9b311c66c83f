# SPDX-License-Identifier: MIT

from typing import Optional

from timekeep_merge.model.flat_entry import FlatEntry, MergedTimekeep
from timekeep_merge.model.source_record import SourceRecord
from timekeep_merge.service.errors import EmptyResultError
from timekeep_merge.service.flatten import flatten_entries
from timekeep_merge.service.range_filter import filter_by_range
from timekeep_merge.time import datetime_to_millis


def sort_flat_entries(entries: list[FlatEntry]) -> list[FlatEntry]:
    # sorted() is stable, entries starting together keep their order
    return sorted(entries, key=lambda entry: datetime_to_millis(entry["start_time"]))


def merge_flat_entries(per_record_entries: list[list[FlatEntry]]) -> list[FlatEntry]:
    all_entries: list[FlatEntry] = []
    for record_entries in per_record_entries:
        all_entries.extend(record_entries)
    return sort_flat_entries(all_entries)


def build_merged_timekeep(
    records: list[SourceRecord],
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
) -> MergedTimekeep:
    """
    Merge the entries of several timekeeps into one flat, chronological timekeep.

    The date range is applied once, after every record has been flattened.

    Raises:
        IncompleteRangeError: If only one of the dates is given
        InvertedRangeError: If start_date is after end_date
        EmptyResultError: If nothing is left to merge
    """
    all_entries: list[FlatEntry] = []
    for record in records:
        # flatten_entries drops the trailing ".md" from the path
        all_entries.extend(
            flatten_entries(record["timekeep"]["entries"], record["source_path"])
        )

    filtered_entries = filter_by_range(all_entries, start_date, end_date)
    if len(filtered_entries) == 0:
        raise EmptyResultError()

    return MergedTimekeep(entries=merge_flat_entries([filtered_entries]))
