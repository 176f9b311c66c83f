# SPDX-License-Identifier: MIT

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table

from timekeep_merge.model.flat_entry import MergedTimekeep
from timekeep_merge.time import (
    datetime_to_display_local_datetime_str,
    datetime_to_display_local_datetime_str_optional,
    duration_to_str,
    entry_duration,
)
from timekeep_merge.view.views.header import header


def merged_timekeep_view(vault: str, merged: MergedTimekeep) -> None:
    header(vault, "merged timekeep")

    merged_table = Table(box=box.SIMPLE, show_footer=True)
    merged_table.add_column("block", footer="total")
    merged_table.add_column("start")
    merged_table.add_column("end")

    total = pendulum.duration()
    rows = []
    for entry in merged["entries"]:
        duration = entry_duration(entry["start_time"], entry["end_time"])
        total = total + duration
        rows.append(
            (
                entry["name"],
                datetime_to_display_local_datetime_str(entry["start_time"]),
                datetime_to_display_local_datetime_str_optional(entry["end_time"])
                or "[green]running[/green]",
                duration_to_str(duration),
            )
        )

    merged_table.add_column("duration", footer=duration_to_str(total))
    for row in rows:
        merged_table.add_row(*row)

    console = Console()
    console.print(merged_table)
