# SPDX-License-Identifier: MIT

from pathlib import Path


class VaultRepository:
    """Read access to the markdown documents of a vault directory."""

    def __init__(self, vault_path: Path) -> None:
        self.vault_path = vault_path

    def get_markdown_files(self) -> list[str]:
        """
        List every markdown document below the vault.

        Hidden directories such as .obsidian or .git are skipped.

        Returns:
            Sorted vault relative POSIX paths, e.g. "Notes/Project.md"
        """
        if not self.vault_path.is_dir():
            raise NotADirectoryError(f"Vault not found: {self.vault_path}")

        markdown_files: list[str] = []
        for file_path in self.vault_path.rglob("*.md"):
            relative_path = file_path.relative_to(self.vault_path)
            if any(part.startswith(".") for part in relative_path.parts[:-1]):
                continue
            if not file_path.is_file():
                continue
            markdown_files.append(relative_path.as_posix())
        return sorted(markdown_files)

    def resolve(self, path: str) -> Path:
        return self.vault_path / path

    def read_document(self, path: str) -> str:
        return self.resolve(path).read_text(encoding="utf-8")

    def append_to_document(self, path: str, text: str) -> None:
        file_path = self.resolve(path)
        if not file_path.is_file():
            raise FileNotFoundError(f"Document not found: {path}")
        with file_path.open("a", encoding="utf-8") as document:
            document.write(text)
