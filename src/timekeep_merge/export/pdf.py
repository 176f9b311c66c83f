# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Optional

import matplotlib

matplotlib.use("Agg")

import pendulum  # noqa: E402
from matplotlib import pyplot as plt  # noqa: E402
from matplotlib.backends.backend_pdf import PdfPages  # noqa: E402

from timekeep_merge.configuration import Configuration  # noqa: E402
from timekeep_merge.model.flat_entry import FlatEntry, MergedTimekeep  # noqa: E402
from timekeep_merge.time import (  # noqa: E402
    datetime_to_display_local_datetime_str,
    datetime_to_display_local_datetime_str_optional,
    duration_to_str,
    entry_duration,
    now_utc,
)

logger = logging.getLogger(__name__)

# A4 portrait, in inches
PAGE_SIZE = (8.27, 11.69)
COLUMNS = ["Block", "Start", "End", "Duration"]
COLUMN_WIDTHS = [0.52, 0.18, 0.18, 0.12]


def get_total_duration(entries: list[FlatEntry]) -> pendulum.Duration:
    total = pendulum.duration()
    for entry in entries:
        total = total + entry_duration(entry["start_time"], entry["end_time"])
    return total


def get_table_rows(entries: list[FlatEntry], date_format: str) -> list[list[str]]:
    return [
        [
            entry["name"],
            datetime_to_display_local_datetime_str(entry["start_time"], date_format),
            datetime_to_display_local_datetime_str_optional(
                entry["end_time"], date_format
            )
            or "running",
            duration_to_str(entry_duration(entry["start_time"], entry["end_time"])),
        ]
        for entry in entries
    ]


def __render_page(
    pdf: PdfPages,
    title: Optional[str],
    rows: list[list[str]],
    footer: Optional[str],
) -> None:
    fig = plt.figure(figsize=PAGE_SIZE)
    try:
        ax = fig.add_axes((0.06, 0.06, 0.88, 0.84))
        ax.axis("off")
        if title is not None:
            fig.text(0.06, 0.95, title, fontsize=16, fontweight="bold")
            fig.text(
                0.06,
                0.925,
                f"Generated {datetime_to_display_local_datetime_str(now_utc())}",
                fontsize=9,
                color="#555555",
            )
        if rows:
            table = ax.table(
                cellText=rows,
                colLabels=COLUMNS,
                colWidths=COLUMN_WIDTHS,
                cellLoc="left",
                loc="upper left",
            )
            table.auto_set_font_size(False)
            table.set_fontsize(8)
            for (row, _column), cell in table.get_celld().items():
                if row == 0:
                    cell.set_text_props(fontweight="bold")
                    cell.set_facecolor("#eeeeee")
        if footer is not None:
            fig.text(0.06, 0.03, footer, fontsize=10, fontweight="bold")
        pdf.savefig(fig)
    finally:
        plt.close(fig)


def export_pdf(merged: MergedTimekeep, path: Path, settings: Configuration) -> Path:
    """
    Write the merged entries to a PDF as a paginated table.

    The first page carries the title, the last page the total duration.
    """
    date_format = settings["pdf_date_format"]
    rows_per_page = max(1, settings["pdf_rows_per_page"])
    rows = get_table_rows(merged["entries"], date_format)
    total = duration_to_str(get_total_duration(merged["entries"]))

    pages = [rows[i : i + rows_per_page] for i in range(0, len(rows), rows_per_page)]
    if not pages:
        pages = [[]]

    path.parent.mkdir(parents=True, exist_ok=True)
    with PdfPages(path) as pdf:
        for page_number, page_rows in enumerate(pages):
            is_first = page_number == 0
            is_last = page_number == len(pages) - 1
            __render_page(
                pdf,
                settings["pdf_title"] if is_first else None,
                page_rows,
                f"Total: {total}" if is_last else None,
            )
        pdf_info = pdf.infodict()
        pdf_info["Title"] = settings["pdf_title"]

    logger.info("Exported %d entries to %s", len(rows), path)
    return path
