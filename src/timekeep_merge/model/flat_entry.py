# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum


class FlatEntry(TypedDict):
    name: str  # "[[path]] - group / sub group / entry"
    start_time: pendulum.DateTime
    end_time: Optional[pendulum.DateTime]


class MergedTimekeep(TypedDict):
    entries: list[FlatEntry]
