import pendulum

from timekeep_merge.model.entry_type import EntryType
from timekeep_merge.service.flatten import flatten_entries, strip_markdown_extension


def leaf(name, start, end=None, sub_entries=None):
    return {
        "name": name,
        "entry_type": EntryType.LEAF,
        "start_time": start,
        "end_time": end,
        "sub_entries": sub_entries,
    }


def group(name, sub_entries):
    return {
        "name": name,
        "entry_type": EntryType.GROUP,
        "start_time": None,
        "end_time": None,
        "sub_entries": sub_entries,
    }


def at(seconds):
    return pendulum.from_timestamp(seconds)


def test_flatten_keeps_one_entry_per_leaf_in_order():
    entries = [leaf("Block 1", at(30)), leaf("Block 2", at(10)), leaf("Block 3", at(20))]
    flat = flatten_entries(entries, "Notes/Project")

    assert [entry["name"] for entry in flat] == [
        "[[Notes/Project]] - Block 1",
        "[[Notes/Project]] - Block 2",
        "[[Notes/Project]] - Block 3",
    ]
    assert [entry["start_time"] for entry in flat] == [at(30), at(10), at(20)]


def test_flatten_qualifies_names_with_group_chain():
    entries = [group("Phase 1", [leaf("Task", at(5))])]
    flat = flatten_entries(entries, "Notes/Project")

    assert len(flat) == 1
    assert flat[0]["name"] == "[[Notes/Project]] - Phase 1 / Task"


def test_flatten_nested_groups():
    entries = [group("A", [group("B", [leaf("C", at(1)), leaf("D", at(2))])])]
    flat = flatten_entries(entries, "Doc")

    assert [entry["name"] for entry in flat] == ["[[Doc]] - A / B / C", "[[Doc]] - A / B / D"]


def test_flatten_strips_markdown_extension():
    entries = [group("Phase 1", [leaf("Task", at(5))])]

    with_extension = flatten_entries(entries, "Notes/Project.md")
    without_extension = flatten_entries(entries, "Notes/Project")

    assert with_extension == without_extension


def test_strip_markdown_extension_only_removes_trailing_md():
    assert strip_markdown_extension("Notes/Project.md") == "Notes/Project"
    assert strip_markdown_extension("Notes.md/Project") == "Notes.md/Project"
    assert strip_markdown_extension("Notes/Project.txt") == "Notes/Project.txt"


def test_flatten_copies_times_and_drops_children():
    end = at(200)
    flat = flatten_entries([leaf("Write", at(100), end)], "A")

    assert flat[0] == {"name": "[[A]] - Write", "start_time": at(100), "end_time": end}
    assert "sub_entries" not in flat[0]


def test_flatten_keeps_running_entries():
    flat = flatten_entries([leaf("Running", at(100))], "A")
    assert flat[0]["end_time"] is None


def test_leaf_with_sub_entries_is_emitted_and_recursed():
    entries = [leaf("Parent", at(1), at(9), [leaf("Child 1", at(2)), leaf("Child 2", at(3))])]
    flat = flatten_entries(entries, "Doc")

    assert [entry["name"] for entry in flat] == [
        "[[Doc]] - Parent",
        "[[Doc]] - Parent / Child 1",
        "[[Doc]] - Parent / Child 2",
    ]


def test_empty_group_contributes_nothing():
    entries = [group("Empty", []), group("Missing", None), leaf("Task", at(1))]
    flat = flatten_entries(entries, "Doc")

    assert [entry["name"] for entry in flat] == ["[[Doc]] - Task"]


def test_flatten_does_not_mutate_input():
    entries = [group("Phase", [leaf("Task", at(1))])]
    flatten_entries(entries, "Doc")

    assert entries[0]["name"] == "Phase"
    assert entries[0]["sub_entries"][0]["name"] == "Task"


def test_flat_entries_keep_only_name_and_times():
    entry = leaf("Task", at(1))
    entry["collapsed"] = True

    (flat,) = flatten_entries([entry], "Doc")

    assert set(flat) == {"name", "start_time", "end_time"}
