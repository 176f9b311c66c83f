# SPDX-License-Identifier: MIT

from typing import Optional

from timekeep_merge.model.entry_type import EntryType
from timekeep_merge.model.flat_entry import FlatEntry
from timekeep_merge.model.time_entry import TimeEntry


def strip_markdown_extension(path: str) -> str:
    if path.endswith(".md"):
        return path[: -len(".md")]
    return path


def is_leaf(entry: TimeEntry) -> bool:
    return entry["entry_type"] == EntryType.LEAF and entry["start_time"] is not None


def qualified_name(source_path: str, name_chain: list[str]) -> str:
    return f"[[{strip_markdown_extension(source_path)}]] - {' / '.join(name_chain)}"


def flatten_entries(
    entries: list[TimeEntry],
    source_path: str,
    parent_name_chain: Optional[list[str]] = None,
) -> list[FlatEntry]:
    """
    Flatten a tree of time entries into a list of leaf entries.

    Each leaf is renamed to "[[source_path]] - parent / ... / name". Being a
    leaf and having sub entries are checked separately: a leaf that also has
    sub entries is emitted itself and its sub entries are flattened too.

    Args:
        entries: Top level entries of a timekeep
        source_path: Document path, a trailing ".md" is dropped
        parent_name_chain: Names of the ancestor groups

    Returns:
        Flat entries in tree order (not sorted)
    """
    if parent_name_chain is None:
        parent_name_chain = []

    flat_entries: list[FlatEntry] = []
    for entry in entries:
        if is_leaf(entry):
            flat_entries.append(
                FlatEntry(
                    name=qualified_name(
                        source_path, [*parent_name_chain, entry["name"]]
                    ),
                    start_time=entry["start_time"],  # type: ignore[typeddict-item]
                    end_time=entry["end_time"],
                )
            )

        sub_entries = entry["sub_entries"]
        if sub_entries:
            flat_entries.extend(
                flatten_entries(
                    sub_entries, source_path, [*parent_name_chain, entry["name"]]
                )
            )

    return flat_entries
