# SPDX-License-Identifier: MIT


class MergeError(Exception):
    """Base for the user-correctable outcomes of building a merged timekeep."""

    message = "Unable to merge timekeep entries."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class IncompleteRangeError(MergeError):
    """Raised when only one of start and end date is supplied."""

    message = "Please select both a start and end date."


class InvertedRangeError(MergeError):
    """Raised when the start date resolves later than the end date."""

    message = "Start date cannot be after end date."


class EmptyResultError(MergeError):
    """Raised when a valid request yields no time entries."""

    message = "No time entries found in the selected files or date range."
