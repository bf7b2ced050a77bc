"""Monthly barn (indoor) temperatures by province."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache

from farmghg.farm.contract.enums import Province

from ._tables import read_table

_MONTH_COLUMNS = (
    "jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec"
)


@dataclass(frozen=True)
class IndoorTemperatureData:
    province: Province
    monthly_temperatures: tuple[float, ...]


@lru_cache(maxsize=1)
def load_indoor_temperatures() -> Mapping[Province, IndoorTemperatureData]:
    rows = read_table("indoor_temperature.csv").to_dict("records")
    return {
        Province(row["province"]): IndoorTemperatureData(
            province=Province(row["province"]),
            monthly_temperatures=tuple(float(row[column]) for column in _MONTH_COLUMNS),
        )
        for row in rows
    }


def get_indoor_temperature(province: Province) -> IndoorTemperatureData | None:
    return load_indoor_temperatures().get(province)


__all__ = ["IndoorTemperatureData", "load_indoor_temperatures", "get_indoor_temperature"]
