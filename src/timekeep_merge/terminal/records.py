# SPDX-License-Identifier: MIT

import logging
from typing import Annotated, Optional

import typer
from rich.console import Console

from timekeep_merge import state as app_state
from timekeep_merge.configuration import resolve_vault_path
from timekeep_merge.model.source_record import SourceRecord
from timekeep_merge.repository.configuration import CONFIGURATION_REPO
from timekeep_merge.repository.vault import VaultRepository
from timekeep_merge.service.scan import collect_records, scan_vault
from timekeep_merge.service.selection import (
    create_selection_state,
    get_filtered_records,
    set_query,
)
from timekeep_merge.view.views.record import records_view, scan_failures_view

logger = logging.getLogger(__name__)


def get_vault_repository() -> VaultRepository:
    vault_path = app_state.get_vault_override()
    if vault_path is None:
        vault_path = resolve_vault_path(CONFIGURATION_REPO.get_config())
    return VaultRepository(vault_path)


def load_records(repository: VaultRepository) -> list[SourceRecord]:
    """Scan the vault, exiting with a notice if the scan fails as a whole."""
    config = CONFIGURATION_REPO.get_config()
    try:
        scan_results = scan_vault(repository, config["scan_batch_size"])
    except Exception:
        logger.exception("Scanning %s failed", repository.vault_path)
        Console(stderr=True).print("[red]Failed to load timekeep entries.[/red]")
        raise typer.Exit(code=1)

    scan_failures_view(scan_results)
    return collect_records(scan_results)


def records(
    search: Annotated[
        Optional[str],
        typer.Option(
            "--search",
            "-q",
            help="Only show records whose path contains this text",
        ),
    ] = None,
) -> None:
    """List the timekeep records found in the vault."""
    repository = get_vault_repository()
    state = create_selection_state(load_records(repository))
    if search is not None:
        state = set_query(state, search)

    records_view(
        str(repository.vault_path), get_filtered_records(state), state["query"]
    )
