# SPDX-License-Identifier: MIT

from typing import Optional

from timekeep_merge.model.record_id import RecordId
from timekeep_merge.model.selection import SelectionState
from timekeep_merge.model.source_record import SourceRecord


def filter_records(records: list[SourceRecord], query: str) -> list[SourceRecord]:
    """Case insensitive search of the records by document path."""
    query_lower = query.lower().strip()
    if len(query_lower) < 1:
        return list(records)
    return [
        record for record in records if query_lower in record["source_path"].lower()
    ]


def create_selection_state(records: list[SourceRecord]) -> SelectionState:
    return SelectionState(
        records=list(records),
        query="",
        filtered_ids=[record["id"] for record in records],
        selected_ids=[],
        start_date=None,
        end_date=None,
    )


def set_query(state: SelectionState, query: str) -> SelectionState:
    filtered = filter_records(state["records"], query)
    return SelectionState(
        records=state["records"],
        query=query,
        filtered_ids=[record["id"] for record in filtered],
        selected_ids=list(state["selected_ids"]),
        start_date=state["start_date"],
        end_date=state["end_date"],
    )


def toggle_record(
    state: SelectionState, record_id: RecordId, checked: bool
) -> SelectionState:
    selected_ids = [id for id in state["selected_ids"] if id != record_id]
    if checked:
        selected_ids.append(record_id)
    return SelectionState(
        records=state["records"],
        query=state["query"],
        filtered_ids=list(state["filtered_ids"]),
        selected_ids=selected_ids,
        start_date=state["start_date"],
        end_date=state["end_date"],
    )


def select_all(state: SelectionState, checked: bool) -> SelectionState:
    """Select exactly the records matching the query, or clear the selection."""
    return SelectionState(
        records=state["records"],
        query=state["query"],
        filtered_ids=list(state["filtered_ids"]),
        selected_ids=list(state["filtered_ids"]) if checked else [],
        start_date=state["start_date"],
        end_date=state["end_date"],
    )


def set_date_range(
    state: SelectionState, start_date: Optional[str], end_date: Optional[str]
) -> SelectionState:
    return SelectionState(
        records=state["records"],
        query=state["query"],
        filtered_ids=list(state["filtered_ids"]),
        selected_ids=list(state["selected_ids"]),
        start_date=start_date,
        end_date=end_date,
    )


def get_filtered_records(state: SelectionState) -> list[SourceRecord]:
    filtered_ids = set(state["filtered_ids"])
    return [record for record in state["records"] if record["id"] in filtered_ids]


def get_selected_records(state: SelectionState) -> list[SourceRecord]:
    selected_ids = set(state["selected_ids"])
    return [record for record in state["records"] if record["id"] in selected_ids]
