# SPDX-License-Identifier: MIT

import json
import logging
import re
from typing import Any, Optional

import pendulum

from timekeep_merge.model.entry_type import EntryType
from timekeep_merge.model.time_entry import TimeEntry, Timekeep
from timekeep_merge.time import datetime_from_str

logger = logging.getLogger(__name__)

_OPENING_FENCE_P = re.compile(r"^\s*```timekeep\s*$")
_CLOSING_FENCE_P = re.compile(r"^\s*```\s*$")


class TimekeepParseError(ValueError):
    """Raised when a code block does not hold a valid timekeep."""

    pass


def __parse_instant(value: Any) -> Optional[pendulum.DateTime]:
    if not isinstance(value, str):
        return None
    try:
        return datetime_from_str(value)
    except ValueError:
        return None


def __convert_entry(raw_entry: Any) -> TimeEntry:
    if not isinstance(raw_entry, dict):
        raise TimekeepParseError("Time entry must be an object")

    name = raw_entry.get("name")
    if not isinstance(name, str):
        raise TimekeepParseError("Time entry name must be a string")

    raw_sub_entries = raw_entry.get("subEntries")
    sub_entries: Optional[list[TimeEntry]] = None
    if raw_sub_entries is not None:
        if not isinstance(raw_sub_entries, list):
            raise TimekeepParseError(f"subEntries of '{name}' must be a list")
        sub_entries = [__convert_entry(sub_entry) for sub_entry in raw_sub_entries]

    start_time = __parse_instant(raw_entry.get("startTime"))

    entry = TimeEntry(
        name=name,
        entry_type=EntryType.LEAF if start_time is not None else EntryType.GROUP,
        start_time=start_time,
        end_time=__parse_instant(raw_entry.get("endTime")),
        sub_entries=sub_entries,
    )
    if isinstance(raw_entry.get("collapsed"), bool):
        entry["collapsed"] = raw_entry["collapsed"]
    return entry


def load_timekeep(json_text: str) -> Timekeep:
    """
    Parse the JSON body of a timekeep code block.

    Raises:
        TimekeepParseError: If the text is not JSON or not shaped like a timekeep
    """
    try:
        data = json.loads(json_text)
    except json.JSONDecodeError as e:
        raise TimekeepParseError(f"Invalid JSON: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("entries"), list):
        raise TimekeepParseError("Timekeep must be an object with an entries list")

    return Timekeep(entries=[__convert_entry(entry) for entry in data["entries"]])


def extract_timekeep_codeblocks(text: str) -> list[Timekeep]:
    """
    Find and parse every ```timekeep fenced block in a markdown document.

    Blocks that fail to parse and a final block with no closing fence are skipped.
    """
    timekeeps: list[Timekeep] = []
    block_lines: Optional[list[str]] = None

    for line in text.splitlines():
        if block_lines is None:
            if _OPENING_FENCE_P.match(line):
                block_lines = []
            continue

        if _CLOSING_FENCE_P.match(line):
            try:
                timekeeps.append(load_timekeep("\n".join(block_lines)))
            except TimekeepParseError as e:
                logger.debug("Skipping invalid timekeep block: %s", e)
            block_lines = None
        else:
            block_lines.append(line)

    return timekeeps
