"""
Errors that abort a whole dataset run.

Rows that are merely excluded (unlisted target type, canonical name that does
not nest under the row's own name) are not errors and never raise.
"""

from __future__ import annotations

from typing import Optional


class FatalParseError(ValueError):
    """
    Raised when the dataset cannot be parsed safely; no partial output exists.
    """

    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class EmptyDatasetError(FatalParseError):
    """
    Raised when a dataset yields no entities after filtering.
    """


class MalformedDatasetError(FatalParseError):
    """
    Raised when the dataset does not start with the expected header.
    """


class DatasetEncodingError(FatalParseError):
    """
    Raised when the dataset bytes are not valid UTF-8.
    """
