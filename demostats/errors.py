"""Error codes and the exception raised for demography data failures."""

from __future__ import annotations

import enum


class ErrorCode(enum.IntEnum):
    """Outcome codes for loading and analysing demography data."""

    OK = 0
    FILE_OPEN_ERROR = 1
    MEMORY_ALLOCATION_ERROR = 2
    INVALID_DATA_ERROR = 3
    EMPTY_LIST_ERROR = 4
    COLUMN_OUT_OF_RANGE_ERROR = 5


class DemographyError(Exception):
    """Raised when an operation on demography data fails."""

    def __init__(self, code, message):
        super().__init__(message)
        self.code = ErrorCode(code)
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code.name}, {self.message!r})"