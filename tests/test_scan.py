import json

import pytest

from timekeep_merge.repository.vault import VaultRepository
from timekeep_merge.service.scan import collect_records, scan_document, scan_vault


def timekeep_block(*names):
    entries = [
        {"name": name, "startTime": "2024-05-01T09:00:00.000Z", "endTime": None, "subEntries": None}
        for name in names
    ]
    return "```timekeep\n" + json.dumps({"entries": entries}) + "\n```\n"


@pytest.fixture
def vault(tmp_path):
    root = tmp_path / "vault"
    (root / "Projects").mkdir(parents=True)
    (root / ".obsidian").mkdir()
    (root / "Projects" / "Alpha.md").write_text(
        "# Alpha\n" + timekeep_block("one") + "\ntext\n" + timekeep_block("two"),
        encoding="utf-8",
    )
    (root / "Beta.md").write_text(timekeep_block("three"), encoding="utf-8")
    (root / "Plain.md").write_text("# No timekeeps here\n", encoding="utf-8")
    (root / "notes.txt").write_text(timekeep_block("ignored"), encoding="utf-8")
    (root / ".obsidian" / "Hidden.md").write_text(timekeep_block("hidden"), encoding="utf-8")
    return root


def test_get_markdown_files_skips_hidden_and_other_files(vault):
    repository = VaultRepository(vault)
    assert repository.get_markdown_files() == ["Beta.md", "Plain.md", "Projects/Alpha.md"]


def test_get_markdown_files_requires_existing_vault(tmp_path):
    with pytest.raises(NotADirectoryError):
        VaultRepository(tmp_path / "missing").get_markdown_files()


def test_scan_document_numbers_records_within_document(vault):
    result = scan_document(VaultRepository(vault), "Projects/Alpha.md")

    assert result["error"] is None
    assert [record["ordinal"] for record in result["records"]] == [0, 1]
    assert all(record["source_path"] == "Projects/Alpha.md" for record in result["records"])
    assert len({record["id"] for record in result["records"]}) == 2


def test_scan_vault_keeps_document_order(vault):
    results = scan_vault(VaultRepository(vault), batch_size=2)

    assert [result["path"] for result in results] == ["Beta.md", "Plain.md", "Projects/Alpha.md"]

    records = collect_records(results)
    names = [record["timekeep"]["entries"][0]["name"] for record in records]
    assert names == ["three", "one", "two"]


def test_unreadable_document_does_not_stop_scan(vault):
    (vault / "Broken.md").write_bytes(b"\xff\xfe\xfa not utf-8")

    results = scan_vault(VaultRepository(vault), batch_size=1)

    broken = next(result for result in results if result["path"] == "Broken.md")
    assert broken["records"] == []
    assert broken["error"] is not None
    assert len(collect_records(results)) == 3


class FailingVaultRepository(VaultRepository):
    def read_document(self, path):
        if path == "Beta.md":
            raise OSError("disk on fire")
        return super().read_document(path)


def test_read_failure_is_captured_per_document(vault, caplog):
    results = scan_vault(FailingVaultRepository(vault))

    beta = next(result for result in results if result["path"] == "Beta.md")
    assert beta["error"] == "disk on fire"
    assert "Beta.md" in caplog.text
    assert len(collect_records(results)) == 2


def test_scan_vault_rejects_empty_batches(vault):
    with pytest.raises(ValueError):
        scan_vault(VaultRepository(vault), batch_size=0)


def test_append_to_document(vault):
    repository = VaultRepository(vault)
    repository.append_to_document("Plain.md", "\nappended\n")

    assert (vault / "Plain.md").read_text(encoding="utf-8").endswith("\nappended\n")

    with pytest.raises(FileNotFoundError):
        repository.append_to_document("Missing.md", "x")
