# SPDX-License-Identifier: MIT


class EntryType:
    LEAF = "leaf"
    GROUP = "group"
