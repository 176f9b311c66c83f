# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from timekeep_merge import configuration
from timekeep_merge.repository.configuration import CONFIGURATION_REPO
from timekeep_merge.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def validate_log_level(log_level: Optional[str]) -> Optional[str]:
    if log_level is None:
        return None
    if log_level.upper() not in LOG_LEVELS:
        raise typer.BadParameter(f"Log level must be one of {', '.join(LOG_LEVELS)}")
    return log_level.upper()


def validate_positive(value: Optional[int]) -> Optional[int]:
    if value is None:
        return None
    if value < 1:
        raise typer.BadParameter("Value must be at least 1")
    return value


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("vault_path", str(configuration.resolve_vault_path(config)))
    table.add_row("scan_batch_size", str(config["scan_batch_size"]))
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("log_level", config["log_level"])
    table.add_row("pdf_title", config["pdf_title"])
    table.add_row("pdf_rows_per_page", str(config["pdf_rows_per_page"]))
    table.add_row("pdf_date_format", config["pdf_date_format"])

    console.print(table)
    console.print()
    console.print(f"Config file: {configuration.APP_CONFIG_PATH}")


@app.command("set, s")
def set(
    vault_path: Annotated[
        Optional[str],
        typer.Option("--vault-path", help="Vault directory to scan for timekeeps"),
    ] = None,
    remove_vault_path: Annotated[
        bool,
        typer.Option(
            "--remove-vault-path",
            help="Reset vault path to None (use current directory)",
        ),
    ] = False,
    scan_batch_size: Annotated[
        Optional[int],
        typer.Option(
            "--scan-batch-size",
            callback=validate_positive,
            help="Number of documents read at the same time",
        ),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--no-show-header", help="Show the view header"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", callback=validate_log_level),
    ] = None,
    pdf_title: Annotated[Optional[str], typer.Option("--pdf-title")] = None,
    pdf_rows_per_page: Annotated[
        Optional[int],
        typer.Option("--pdf-rows-per-page", callback=validate_positive),
    ] = None,
    pdf_date_format: Annotated[
        Optional[str],
        typer.Option(
            "--pdf-date-format",
            help="pendulum format, e.g. YYYY-MM-DD HH:mm",
        ),
    ] = None,
) -> None:
    """Update configuration settings."""
    CONFIGURATION_REPO.update_config(
        vault_path=vault_path,
        remove_vault_path=remove_vault_path,
        scan_batch_size=scan_batch_size,
        show_header=show_header,
        log_level=log_level,
        pdf_title=pdf_title,
        pdf_rows_per_page=pdf_rows_per_page,
        pdf_date_format=pdf_date_format,
    )
    view()
