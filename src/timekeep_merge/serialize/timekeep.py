# SPDX-License-Identifier: MIT

import json
from typing import Any, Mapping, Sequence

from timekeep_merge.model.flat_entry import MergedTimekeep
from timekeep_merge.model.time_entry import Timekeep
from timekeep_merge.time import datetime_to_iso_str_optional


def __strip_entry(entry: Mapping[str, Any]) -> dict[str, Any]:
    sub_entries: Sequence[Mapping[str, Any]] | None = entry.get("sub_entries")
    stripped_entry: dict[str, Any] = {
        "name": entry["name"],
        "startTime": datetime_to_iso_str_optional(entry["start_time"]),
        "endTime": datetime_to_iso_str_optional(entry["end_time"]),
        "subEntries": (
            [__strip_entry(sub_entry) for sub_entry in sub_entries]
            if sub_entries is not None
            else None
        ),
    }
    if "collapsed" in entry:
        stripped_entry["collapsed"] = entry["collapsed"]
    return stripped_entry


def strip_timekeep_runtime_data(
    timekeep: Timekeep | MergedTimekeep,
) -> dict[str, Any]:
    """
    Convert a timekeep to the JSON shape stored in documents.

    Derived fields such as entry_type are dropped and instants become ISO strings.
    """
    return {"entries": [__strip_entry(entry) for entry in timekeep["entries"]]}


def timekeep_to_json(timekeep: Timekeep | MergedTimekeep) -> str:
    return json.dumps(strip_timekeep_runtime_data(timekeep), separators=(",", ":"))


def timekeep_to_codeblock(timekeep: Timekeep | MergedTimekeep) -> str:
    return f"\n```timekeep\n{timekeep_to_json(timekeep)}\n```\n"
