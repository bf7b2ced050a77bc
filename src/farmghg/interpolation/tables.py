"""Lookups keyed by categorical columns plus one continuous bracket column."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import numpy as np
import pandas as pd

from farmghg.core.errors import FarmGHGValueError

BRACKET_TOLERANCE = 1e-9


@dataclass(frozen=True)
class EpochPartitionedTable:
    """Two disjoint row sets separated by ``cut_year``.

    Queries for ``year >= cut_year`` read ``future``; earlier years read ``past``. The boundary is a
    hard switch, never blended.
    """

    past: pd.DataFrame
    future: pd.DataFrame
    cut_year: int

    @classmethod
    def from_frame(
        cls,
        frame: pd.DataFrame,
        *,
        cut_year: int,
        epoch_column: str = "epoch",
        past_label: str = "past",
        future_label: str = "future",
    ) -> EpochPartitionedTable:
        labels = set(frame[epoch_column].unique())
        unknown = labels - {past_label, future_label}
        if unknown:
            raise FarmGHGValueError(f"Unknown epoch labels in table: {sorted(unknown)}")
        past = frame[frame[epoch_column] == past_label].drop(columns=epoch_column)
        future = frame[frame[epoch_column] == future_label].drop(columns=epoch_column)
        return cls(
            past=past.reset_index(drop=True),
            future=future.reset_index(drop=True),
            cut_year=cut_year,
        )

    def partition(self, year: int) -> pd.DataFrame:
        return self.future if year >= self.cut_year else self.past


def _plain(value: Any) -> Any:
    return getattr(value, "value", value)


def find_bracket_row(
    frame: pd.DataFrame,
    keys: Mapping[str, Any],
    column: str,
    value: float,
    *,
    atol: float = BRACKET_TOLERANCE,
) -> pd.Series | None:
    """
    Return the unique row matching ``keys`` exactly and ``column`` within ``atol`` of ``value``.

    Returns
    -------
    pandas.Series | None
        The matching row, or ``None`` when the table has no such row.

    Raises
    ------
    FarmGHGValueError
        If several rows match (the table is expected to hold one row per key combination).
    """

    mask = np.isclose(frame[column].to_numpy(dtype=float), float(value), rtol=0.0, atol=atol)
    for key, expected in keys.items():
        mask &= (frame[key] == _plain(expected)).to_numpy()
    matches = frame[mask]
    if matches.empty:
        return None
    if len(matches) > 1:
        raise FarmGHGValueError(
            f"{len(matches)} rows match {dict(keys)} at {column}={value}; expected one."
        )
    return matches.iloc[0]


def interpolate_linear(x: float, x_low: float, x_high: float, y_low: float, y_high: float) -> float:
    """Linear interpolation that returns the bracket values exactly at the bracket ends."""

    if x_high == x_low:
        if y_low != y_high:
            raise FarmGHGValueError(
                f"Degenerate bracket [{x_low}, {x_high}] with differing values {y_low}/{y_high}."
            )
        return float(y_low)
    if x == x_high:
        return float(y_high)
    ratio = (y_low - y_high) / (x_high - x_low)
    return float(y_low - (x - x_low) * ratio)


def interpolate_between_rows(
    frame: pd.DataFrame,
    keys: Mapping[str, Any],
    *,
    bracket_column: str,
    low: float,
    high: float,
    query: float,
    value_column: str,
) -> float | None:
    """Interpolate ``value_column`` between the rows found at ``low`` and ``high``.

    Returns ``None`` when either bracket row is missing so callers decide how to degrade.
    """

    low_row = find_bracket_row(frame, keys, bracket_column, low)
    high_row = find_bracket_row(frame, keys, bracket_column, high)
    if low_row is None or high_row is None:
        return None
    return interpolate_linear(
        query, low, high, float(low_row[value_column]), float(high_row[value_column])
    )


__all__ = [
    "BRACKET_TOLERANCE",
    "EpochPartitionedTable",
    "find_bracket_row",
    "interpolate_between_rows",
    "interpolate_linear",
]
