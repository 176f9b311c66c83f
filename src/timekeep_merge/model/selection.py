# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from timekeep_merge.model.record_id import RecordId
from timekeep_merge.model.source_record import SourceRecord


class SelectionState(TypedDict):
    records: list[SourceRecord]
    query: str
    filtered_ids: list[RecordId]
    selected_ids: list[RecordId]
    start_date: Optional[str]  # YYYY-MM-DD
    end_date: Optional[str]  # YYYY-MM-DD
