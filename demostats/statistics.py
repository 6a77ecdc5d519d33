"""Extracting a region's series from records and summarising it."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from .errors import DemographyError, ErrorCode
from .records import DemographyRecord

FIRST_COLUMN = 1
LAST_COLUMN = 7


class Column(enum.IntEnum):
    """Numbers of the columns of a demography data file, counted from one."""

    YEAR = 1
    REGION = 2
    NATURAL_POPULATION_GROWTH = 3
    BIRTH_RATE = 4
    DEATH_RATE = 5
    GENERAL_DEMOGRAPHIC_WEIGHT = 6
    URBANIZATION = 7


_COLUMN_FIELDS = {
    Column.NATURAL_POPULATION_GROWTH: "natural_population_growth",
    Column.BIRTH_RATE: "birth_rate",
    Column.DEATH_RATE: "death_rate",
    Column.GENERAL_DEMOGRAPHIC_WEIGHT: "general_demographic_weight",
    Column.URBANIZATION: "urbanization",
}


@dataclass
class Series:
    """Values of one column for one region, paired with their years."""

    years: list[int] = field(default_factory=list)
    values: list[float] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.values)

    def append(self, year: int, value: float) -> None:
        self.years.append(year)
        self.values.append(value)


@dataclass
class Summary:
    """Minimum, maximum and median of a series."""

    min: float = 0.0
    max: float = 0.0
    median: float = 0.0


def _empty(what: str) -> DemographyError:
    return DemographyError(ErrorCode.EMPTY_LIST_ERROR, f"no values to {what}")


def min_max(values):
    """Return the smallest and largest of ``values`` as a pair."""
    values = list(values)
    if not values:
        raise _empty("compare")
    return min(values), max(values)


def median(values):
    """Return the median of ``values``; an even count averages the middle two."""
    ordered = sorted(values)
    if not ordered:
        raise _empty("take the median of")
    middle = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return (ordered[middle - 1] + ordered[middle]) / 2.0
    return ordered[middle]


def extract_value(record, column):
    """Return the numeric value of ``column`` in ``record``.

    The region column and numbers outside the table have no numeric value.
    """
    if column == Column.YEAR:
        return float(record.year)
    try:
        name = _COLUMN_FIELDS[Column(column)]
    except (ValueError, KeyError):
        raise DemographyError(
            ErrorCode.COLUMN_OUT_OF_RANGE_ERROR, f"column {column} has no numeric value"
        ) from None
    return getattr(record, name)


def extract_series(records: Iterable[DemographyRecord], region: str, column: int) -> Series:
    """Collect ``column`` from the valid records of ``region``, in record order."""
    if region is None or not FIRST_COLUMN <= column <= LAST_COLUMN:
        raise DemographyError(ErrorCode.INVALID_DATA_ERROR, f"invalid column {column}")
    series = Series()
    for record in records:
        if record.valid and record.region == region:
            series.append(record.year, extract_value(record, column))
    return series


def _summarise(values: Sequence[float]) -> Summary:
    low, high = min_max(values)
    return Summary(min=low, max=high, median=median(values))


def calculate_statistics(records, region, column):
    """Return the series of ``column`` for ``region`` and its summary."""
    series = extract_series(records, region, column)
    return series, _summarise(series.values)