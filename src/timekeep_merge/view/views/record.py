# SPDX-License-Identifier: MIT

from pathlib import PurePosixPath

from rich import box
from rich.console import Console
from rich.table import Table

from timekeep_merge.model.source_record import DocumentScanResult, SourceRecord
from timekeep_merge.view.views.header import header


def record_title(record: SourceRecord) -> str:
    basename = PurePosixPath(record["source_path"]).stem
    return f"{basename}: Timekeep {record['ordinal'] + 1}"


def records_view(
    vault: str,
    records: list[SourceRecord],
    query: str = "",
    no_wrap: bool = False,
) -> None:
    header(vault, "records" if not query else f"records matching '{query}'")

    records_table = Table(box=box.SIMPLE)
    records_table.add_column("#")
    records_table.add_column("timekeep", no_wrap=no_wrap)
    records_table.add_column("path", style="bright_black", no_wrap=no_wrap)

    for position, record in enumerate(records, start=1):
        records_table.add_row(
            str(position), record_title(record), record["source_path"]
        )

    console = Console()
    console.print(records_table)


def scan_failures_view(scan_results: list[DocumentScanResult]) -> None:
    failures = [result for result in scan_results if result["error"] is not None]
    if not failures:
        return

    console = Console()
    console.print(f"[yellow]{len(failures)} document(s) could not be read[/yellow]")
    for failure in failures:
        console.print(
            f"  [bright_black]{failure['path']}: {failure['error']}[/bright_black]"
        )
