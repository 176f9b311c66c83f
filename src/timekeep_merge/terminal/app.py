# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer

from timekeep_merge import state as app_state
from timekeep_merge.terminal import configuration
from timekeep_merge.terminal.custom_typer import AliasedTyperGroup
from timekeep_merge.terminal.merge import merge
from timekeep_merge.terminal.records import records
from timekeep_merge.view import state as view_state

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="timekeep-merge - Merge timekeep records from a markdown vault",
    no_args_is_help=True,
)
app.add_typer(configuration.app, name="config, c")
app.command(name="records, r")(records)
app.command(name="merge, m")(merge)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in views",
        ),
    ] = False,
    vault: Annotated[
        Optional[Path],
        typer.Option(
            "--vault",
            help="Vault directory to scan instead of the configured one",
        ),
    ] = None,
) -> None:
    """
    timekeep-merge - Merge timekeep records from a markdown vault

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if vault is not None:
        app_state.set_vault_override(vault)


def run() -> None:
    app()
