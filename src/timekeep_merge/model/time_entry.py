# SPDX-License-Identifier: MIT

from typing import NotRequired, Optional, TypedDict

import pendulum


class TimeEntry(TypedDict):
    name: str
    entry_type: str  # "leaf" when start_time is a valid instant, else "group"
    start_time: Optional[pendulum.DateTime]
    end_time: Optional[pendulum.DateTime]  # None while the entry is running
    sub_entries: Optional[list["TimeEntry"]]
    collapsed: NotRequired[bool]


class Timekeep(TypedDict):
    entries: list[TimeEntry]
