"""The state of an analysis session: loaded records and computed statistics."""

from __future__ import annotations

from dataclasses import dataclass, field

from .csv_reader import read_demography_data
from .errors import DemographyError, ErrorCode
from .records import DemographyRecord
from .statistics import Series, Summary, calculate_statistics

_LOAD_MESSAGES = {
    ErrorCode.FILE_OPEN_ERROR: "Error opening file.",
    ErrorCode.MEMORY_ALLOCATION_ERROR: "Memory allocation error.",
}
_LOAD_DEFAULT_MESSAGE = "Error reading data from file."

_STATS_MESSAGES = {
    ErrorCode.EMPTY_LIST_ERROR: "No data found for the specified region.",
    ErrorCode.COLUMN_OUT_OF_RANGE_ERROR: "Column number is out of range.",
    ErrorCode.INVALID_DATA_ERROR: "Invalid input data.",
}
_STATS_DEFAULT_MESSAGE = "Error calculating statistics."


@dataclass
class Context:
    """Records loaded from a file, the last computed series and its summary.

    Failed operations raise DemographyError and also leave their code and
    message in ``error_code`` and ``error_message``.
    """

    records: list[DemographyRecord] = field(default_factory=list)
    error_code: ErrorCode = ErrorCode.OK
    error_message: str = ""
    total_rows: int = 0
    error_rows: int = 0
    valid_rows: int = 0
    summary: Summary = field(default_factory=Summary)
    series: Series = field(default_factory=Series)

    def _succeed(self) -> None:
        self.error_code = ErrorCode.OK
        self.error_message = ""

    def _fail(self, code: ErrorCode, message: str) -> DemographyError:
        self.error_code = ErrorCode(code)
        self.error_message = message
        return DemographyError(code, message)

    def load_data(self, filename):
        """Replace the records with those read from ``filename``.

        Rows that parse are kept even when the last data line is bad; in that
        case the error is raised after the records and counts are stored.
        """
        if filename is None:
            raise self._fail(ErrorCode.INVALID_DATA_ERROR, "Invalid input data.")

        self.records = []
        self.total_rows = self.error_rows = self.valid_rows = 0
        try:
            result = read_demography_data(filename)
        except DemographyError as exc:
            raise self._fail(
                exc.code, _LOAD_MESSAGES.get(exc.code, _LOAD_DEFAULT_MESSAGE)
            ) from exc

        self.records = result.records
        self.total_rows = result.total_rows
        self.error_rows = result.error_rows
        self.valid_rows = result.valid_rows
        if result.status != ErrorCode.OK:
            raise self._fail(
                result.status, _LOAD_MESSAGES.get(result.status, _LOAD_DEFAULT_MESSAGE)
            )
        self._succeed()

    def calculate_stats(self, region, column):
        """Compute the series and summary of ``column`` for ``region``.

        The previous series is discarded first; the summary keeps its old
        values when the calculation fails.
        """
        if region is None:
            raise self._fail(ErrorCode.INVALID_DATA_ERROR, "Invalid input data.")

        self.series = Series()
        try:
            series, summary = calculate_statistics(self.records, region, column)
        except DemographyError as exc:
            raise self._fail(
                exc.code, _STATS_MESSAGES.get(exc.code, _STATS_DEFAULT_MESSAGE)
            ) from exc

        self.series = series
        self.summary = summary
        self._succeed()
        return summary

    def clear(self):
        """Drop all records and results, returning to a fresh state."""
        self.records = []
        self.total_rows = self.error_rows = self.valid_rows = 0
        self.summary = Summary()
        self.series = Series()
        self._succeed()