from __future__ import annotations

import logging

import pytest

from farmghg.farm.contract import HardinessZone, TreeSpecies
from farmghg.interpolation import find_bracket_row
from farmghg.reference import shelterbelt
from farmghg.reference.shelterbelt import (
    CUT_YEAR,
    ShelterbeltColumn,
    get_cluster_data,
    get_interpolated_value,
    load_shelterbelt_data,
    load_shelterbelt_table,
)

ECODISTRICT = 745  # cluster C2


def _value(age, mortality, *, low=0.0, high=15.0, year=2020, column=ShelterbeltColumn.TEC_MG_C_KM):
    return get_interpolated_value(
        TreeSpecies.CARAGANA,
        HardinessZone.ZONE_3A,
        ECODISTRICT,
        mortality,
        low,
        high,
        age,
        column,
        year,
    )


def _table_value(age, mortality, *, year=2020, column="tec_mg_c_km"):
    frame = load_shelterbelt_table().partition(year)
    row = find_bracket_row(
        frame,
        {"species": "caragana", "cluster_id": "C2", "age": age},
        "percent_mortality",
        mortality,
    )
    assert row is not None
    return float(row[column])


def test_cluster_lookup():
    cluster = get_cluster_data(ECODISTRICT)
    assert cluster is not None
    assert cluster.cluster_id == "C2"
    assert get_cluster_data(1) is None


def test_endpoints_are_exact():
    assert _value(25, 0.0) == _table_value(25, 0.0)
    assert _value(25, 15.0) == _table_value(25, 15.0)


def test_value_decreases_with_mortality():
    low = _value(25, 0.0)
    mid = _value(25, 7.5)
    high = _value(25, 15.0)
    assert low > mid > high
    assert mid == pytest.approx((low + high) / 2)


def test_age_is_clamped_to_sixty():
    assert _value(85, 10.0) == _value(60, 10.0)
    assert _value(61, 10.0, column=ShelterbeltColumn.DOM_MG_C_KM_YR) == _value(
        60, 10.0, column=ShelterbeltColumn.DOM_MG_C_KM_YR
    )


def test_year_partition_boundary():
    assert _value(30, 0.0, year=CUT_YEAR) == _table_value(30, 0.0, year=CUT_YEAR)
    assert _value(30, 0.0, year=CUT_YEAR - 1) == _table_value(30, 0.0, year=CUT_YEAR - 1)
    assert _value(30, 0.0, year=CUT_YEAR) != _value(30, 0.0, year=CUT_YEAR - 1)
    assert {row.epoch for row in load_shelterbelt_data(CUT_YEAR)} == {"future"}
    assert {row.epoch for row in load_shelterbelt_data(CUT_YEAR - 1)} == {"past"}


def test_every_column_is_available():
    for column in ShelterbeltColumn:
        assert _value(40, 20.0, low=15.0, high=30.0, column=column) > 0.0


def test_missing_bracket_returns_zero_and_logs(caplog):
    with caplog.at_level(logging.ERROR, logger=shelterbelt.__name__):
        value = _value(20, 10.0, low=0.0, high=12.0)
    assert value == 0.0
    assert "no rows" in caplog.text


def test_unknown_ecodistrict_returns_zero_and_logs(caplog):
    with caplog.at_level(logging.ERROR, logger=shelterbelt.__name__):
        value = get_interpolated_value(
            TreeSpecies.GREEN_ASH,
            HardinessZone.ZONE_2B,
            999999,
            10.0,
            0.0,
            15.0,
            20,
            ShelterbeltColumn.BIOM_MG_C_KM,
            2020,
        )
    assert value == 0.0
    assert "999999" in caplog.text


def test_every_row_has_an_age_within_range():
    ages = {row.age for row in load_shelterbelt_data(2010)}
    assert min(ages) == 1
    assert max(ages) == shelterbelt.MAX_AGE
