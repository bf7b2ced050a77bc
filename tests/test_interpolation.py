from __future__ import annotations

import pandas as pd
import pytest
from hypothesis import given, strategies as st

from farmghg.core.errors import FarmGHGValueError
from farmghg.interpolation import (
    EpochPartitionedTable,
    find_bracket_row,
    interpolate_between_rows,
    interpolate_linear,
)


def _frame() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "species": ["ash", "ash", "ash", "pine"],
            "age": [10, 10, 10, 10],
            "mortality": [0.0, 15.0, 30.0, 0.0],
            "value": [100.0, 80.0, 50.0, 70.0],
        }
    )


def test_find_bracket_row_uses_tolerance():
    row = find_bracket_row(_frame(), {"species": "ash", "age": 10}, "mortality", 15.0 + 1e-12)
    assert row is not None
    assert row["value"] == pytest.approx(80.0)


def test_find_bracket_row_missing_returns_none():
    assert find_bracket_row(_frame(), {"species": "pine", "age": 10}, "mortality", 15.0) is None
    assert find_bracket_row(_frame(), {"species": "ash", "age": 20}, "mortality", 0.0) is None


def test_find_bracket_row_duplicate_raises():
    frame = pd.concat([_frame(), _frame().iloc[[0]]], ignore_index=True)
    with pytest.raises(FarmGHGValueError):
        find_bracket_row(frame, {"species": "ash", "age": 10}, "mortality", 0.0)


def test_interpolate_linear_midpoint():
    assert interpolate_linear(7.5, 0.0, 15.0, 100.0, 80.0) == pytest.approx(90.0)


def test_interpolate_linear_degenerate_bracket():
    assert interpolate_linear(5.0, 5.0, 5.0, 3.0, 3.0) == 3.0
    with pytest.raises(FarmGHGValueError):
        interpolate_linear(5.0, 5.0, 5.0, 3.0, 4.0)


@given(
    low=st.floats(min_value=0, max_value=50, allow_nan=False),
    width=st.floats(min_value=0.5, max_value=50, allow_nan=False),
    y_low=st.floats(min_value=-1e6, max_value=1e6, allow_nan=False),
    y_high=st.floats(min_value=-1e6, max_value=1e6, allow_nan=False),
    t=st.floats(min_value=0, max_value=1),
)
def test_interpolate_linear_stays_within_bracket(low, width, y_low, y_high, t):
    high = low + width
    x = low + t * width
    value = interpolate_linear(x, low, high, y_low, y_high)
    assert min(y_low, y_high) - 1e-6 <= value <= max(y_low, y_high) + 1e-6
    assert interpolate_linear(low, low, high, y_low, y_high) == y_low
    assert interpolate_linear(high, low, high, y_low, y_high) == y_high


def test_interpolate_between_rows_missing_bound():
    keys = {"species": "pine", "age": 10}
    value = interpolate_between_rows(
        _frame(), keys, bracket_column="mortality", low=0, high=15, query=5, value_column="value"
    )
    assert value is None


def test_epoch_partition_boundary():
    frame = pd.DataFrame({"epoch": ["past", "future"], "value": [1.0, 2.0]})
    table = EpochPartitionedTable.from_frame(frame, cut_year=2016)
    assert table.partition(2016)["value"].tolist() == [2.0]
    assert table.partition(2015)["value"].tolist() == [1.0]
    assert "epoch" not in table.past.columns


def test_epoch_partition_rejects_unknown_labels():
    frame = pd.DataFrame({"epoch": ["past", "later"], "value": [1.0, 2.0]})
    with pytest.raises(FarmGHGValueError):
        EpochPartitionedTable.from_frame(frame, cut_year=2016)
