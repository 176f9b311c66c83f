# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer


def parse_date(date_param: Optional[str]) -> Optional[str]:
    """
    Validate a YYYY-MM-DD date option, returning it unchanged.

    The empty string is treated like a missing date.
    """
    if date_param is None or date_param == "":
        return None
    if not re.match(r"^\d{4}-\d{2}-\d{2}$", date_param):
        raise typer.BadParameter(
            f"Date must be in YYYY-MM-DD format, got '{date_param}'"
        )
    try:
        pendulum.from_format(date_param, "YYYY-MM-DD")
    except ValueError:
        raise typer.BadParameter(f"Invalid date: '{date_param}'")
    return date_param


def parse_id_list(id_param: str) -> list[int]:
    """
    Parse a single position, comma-separated list of positions, or ranges.

    Args:
        id_param: A single position (e.g., "1"), comma-separated list (e.g., "1,2,3"),
                  range (e.g., "1-5"), or mixed (e.g., "1,3-5,8")

    Returns:
        List of integer positions (sorted and deduplicated)

    Raises:
        typer.BadParameter: If any position is not a valid integer or a range is
            malformed
    """
    id_strings = [s.strip() for s in id_param.split(",")]

    ids: list[int] = []
    for id_str in id_strings:
        if not id_str:
            continue

        if "-" in id_str:
            range_parts = id_str.split("-")
            if len(range_parts) != 2:
                raise typer.BadParameter(
                    f"Invalid range format: '{id_str}' (expected format: 'start-end')"
                )

            try:
                start = int(range_parts[0].strip())
                end = int(range_parts[1].strip())
            except ValueError:
                raise typer.BadParameter(
                    f"Invalid range: '{id_str}' contains non-integer values"
                )

            if start > end:
                raise typer.BadParameter(
                    f"Invalid range: '{id_str}' (start must be <= end)"
                )

            ids.extend(range(start, end + 1))
        else:
            try:
                ids.append(int(id_str))
            except ValueError:
                raise typer.BadParameter(
                    f"Invalid ID: '{id_str}' is not a valid integer"
                )

    if len(ids) == 0:
        raise typer.BadParameter("No valid IDs provided")

    return sorted(set(ids))
