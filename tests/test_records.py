import dataclasses

import pytest

from demostats.records import MAX_REGION_LENGTH, DemographyRecord


def _record(region="Moscow", **overrides):
    values = dict(
        year=2005,
        region=region,
        natural_population_growth=-5.2,
        birth_rate=10.2,
        death_rate=15.4,
        general_demographic_weight=52.1,
        urbanization=99.0,
    )
    values.update(overrides)
    return DemographyRecord(**values)


def test_fields_are_stored():
    record = _record()
    assert record.year == 2005
    assert record.region == "Moscow"
    assert record.natural_population_growth == -5.2
    assert record.birth_rate == 10.2
    assert record.death_rate == 15.4
    assert record.general_demographic_weight == 52.1
    assert record.urbanization == 99.0


def test_records_are_valid_by_default():
    assert _record().valid is True
    assert _record(valid=False).valid is False


def test_record_is_immutable():
    record = _record()
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.year = 2006
    assert record.year == 2005
    changed = dataclasses.replace(record, year=2006)
    assert changed.year == 2006
    assert record.year == 2005


def test_long_region_is_truncated():
    record = _record(region="x" * (MAX_REGION_LENGTH * 2))
    assert record.region == "x" * (MAX_REGION_LENGTH - 1)


def test_region_at_limit_is_kept():
    region = "y" * (MAX_REGION_LENGTH - 1)
    assert _record(region=region).region == region


def test_equal_records_compare_equal():
    assert _record() == _record()
    assert _record() != _record(year=2006)