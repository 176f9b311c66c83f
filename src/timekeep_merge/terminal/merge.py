# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from timekeep_merge.export.pdf import export_pdf
from timekeep_merge.model.selection import SelectionState
from timekeep_merge.repository.configuration import CONFIGURATION_REPO
from timekeep_merge.serialize.timekeep import timekeep_to_codeblock
from timekeep_merge.service.errors import MergeError
from timekeep_merge.service.merge import build_merged_timekeep
from timekeep_merge.service.selection import (
    create_selection_state,
    get_filtered_records,
    get_selected_records,
    select_all,
    set_date_range,
    set_query,
    toggle_record,
)
from timekeep_merge.terminal.parse import parse_date, parse_id_list
from timekeep_merge.terminal.records import get_vault_repository, load_records
from timekeep_merge.view.views.merged import merged_timekeep_view


def __select_positions(state: SelectionState, positions: list[int]) -> SelectionState:
    filtered_records = get_filtered_records(state)
    for position in positions:
        if position < 1 or position > len(filtered_records):
            raise typer.BadParameter(
                f"No record at position {position} (found {len(filtered_records)})"
            )
        state = toggle_record(state, filtered_records[position - 1]["id"], True)
    return state


def merge(
    ids: Annotated[
        Optional[str],
        typer.Argument(help="Record positions from 'records', e.g. 1,3-5"),
    ] = None,
    select_all_records: Annotated[
        bool,
        typer.Option("--all", "-a", help="Select every record matching --search"),
    ] = False,
    search: Annotated[
        Optional[str],
        typer.Option(
            "--search",
            "-q",
            help="Only consider records whose path contains this text",
        ),
    ] = None,
    start: Annotated[
        Optional[str],
        typer.Option(
            "--start", "-s", callback=parse_date, help="valid input: YYYY-MM-DD"
        ),
    ] = None,
    end: Annotated[
        Optional[str],
        typer.Option(
            "--end", "-e", callback=parse_date, help="valid input: YYYY-MM-DD"
        ),
    ] = None,
    insert: Annotated[
        Optional[str],
        typer.Option(
            "--insert",
            "-i",
            help="Append the merged timekeep to this vault document",
        ),
    ] = None,
    pdf: Annotated[
        Optional[Path],
        typer.Option("--pdf", help="Export the merged timekeep to this PDF file"),
    ] = None,
    preview: Annotated[
        bool,
        typer.Option("--preview", "-p", help="Show the merged entries as a table"),
    ] = False,
) -> None:
    """Merge the selected timekeep records into a single flat timekeep."""
    if ids is None and not select_all_records:
        raise typer.BadParameter("Pass record positions or --all")

    repository = get_vault_repository()
    state = create_selection_state(load_records(repository))
    if search is not None:
        state = set_query(state, search)
    if select_all_records:
        state = select_all(state, True)
    if ids is not None:
        state = __select_positions(state, parse_id_list(ids))
    state = set_date_range(state, start, end)

    try:
        merged = build_merged_timekeep(
            get_selected_records(state), state["start_date"], state["end_date"]
        )
    except MergeError as e:
        Console(stderr=True).print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    if preview:
        merged_timekeep_view(str(repository.vault_path), merged)

    console = Console()
    if pdf is not None:
        export_pdf(merged, pdf, CONFIGURATION_REPO.get_config())
        console.print(f"Exported {len(merged['entries'])} entries to {pdf}")
    elif insert is not None:
        try:
            repository.append_to_document(insert, timekeep_to_codeblock(merged))
        except FileNotFoundError as e:
            Console(stderr=True).print(f"[red]{e}[/red]")
            raise typer.Exit(code=1)
        console.print(f"Inserted {len(merged['entries'])} entries into {insert}")
    else:
        # Plain print keeps the code block free of rich markup and wrapping
        typer.echo(timekeep_to_codeblock(merged), nl=False)
