"""The demography record held for each row of a data file."""

from __future__ import annotations

from dataclasses import dataclass

MAX_REGION_LENGTH = 128


@dataclass(frozen=True)
class DemographyRecord:
    """One year of demography figures for a region."""

    year: int
    region: str
    natural_population_growth: float
    birth_rate: float
    death_rate: float
    general_demographic_weight: float
    urbanization: float
    valid: bool = True

    def __post_init__(self) -> None:
        limit = MAX_REGION_LENGTH - 1
        if len(self.region) > limit:
            object.__setattr__(self, "region", self.region[:limit])