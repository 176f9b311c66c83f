# SPDX-License-Identifier: MIT

from typing import Optional, cast

import pendulum


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("UTC").format("YYYY-MM-DD[T]HH:mm:ss.SSS[Z]")


def datetime_to_iso_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_iso_str(datetime)


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    parsed = pendulum.parse(datetime)
    if not isinstance(parsed, pendulum.DateTime):
        raise ValueError(f"Not a date and time: '{datetime}'")
    return parsed


def datetime_from_str_optional(datetime: Optional[str]) -> Optional[pendulum.DateTime]:
    if datetime is None:
        return None
    return datetime_from_str(datetime)


def datetime_to_millis(datetime: pendulum.DateTime) -> int:
    """Milliseconds since the epoch, truncated like a JavaScript Date value."""
    return datetime.int_timestamp * 1000 + datetime.microsecond // 1000


def datetime_from_local_date_str(date_str: str) -> pendulum.DateTime:
    """Parse a local date string in 'YYYY-MM-DD' format to midnight local time."""
    return cast(
        pendulum.DateTime, pendulum.from_format(date_str, "YYYY-MM-DD", tz="local")
    )


def end_of_local_day_from_date_str(date_str: str) -> pendulum.DateTime:
    """Parse a local 'YYYY-MM-DD' date string to the last instant of that day."""
    return datetime_from_local_date_str(date_str).end_of("day")


def datetime_to_display_local_datetime_str(
    datetime: pendulum.DateTime, fmt: str = "YYYY-MM-DD HH:mm"
) -> str:
    return datetime.in_tz("local").format(fmt)


def datetime_to_display_local_datetime_str_optional(
    datetime: Optional[pendulum.DateTime], fmt: str = "YYYY-MM-DD HH:mm"
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_display_local_datetime_str(datetime, fmt)


def entry_duration(
    start: pendulum.DateTime, end: Optional[pendulum.DateTime]
) -> pendulum.Duration:
    """Duration of an entry, counting a running entry up to now."""
    if end is None:
        end = now_utc()
    return end - start


def duration_to_str(duration: pendulum.Duration) -> str:
    total_minutes = int(duration.total_seconds()) // 60
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours}:{minutes:02d}"
