# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from timekeep_merge.model.record_id import RecordId
from timekeep_merge.model.time_entry import Timekeep


class SourceRecord(TypedDict):
    id: RecordId  # Only used to track selection
    timekeep: Timekeep
    source_path: str  # Vault relative, e.g. "Notes/Project.md"
    ordinal: int  # Index of the block within its document


class DocumentScanResult(TypedDict):
    path: str
    records: list[SourceRecord]
    error: Optional[str]
