"""Fuel and herbicide energy estimates for field operations."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache

from farmghg.farm.contract.enums import CropType, Province, SoilFunctionalCategory, TillageType

from ._tables import read_table


@dataclass(frozen=True)
class FuelEnergyEstimate:
    """Energy used per hectare (GJ ha^-1) for one region/soil/tillage/crop-class combination."""

    region: str
    soil_functional_category: SoilFunctionalCategory
    tillage_type: TillageType
    crop_class: str
    fuel_estimate: float
    herbicide_estimate: float


FuelKey = tuple[str, SoilFunctionalCategory, TillageType, str]


@lru_cache(maxsize=1)
def load_fuel_energy_estimates() -> Mapping[FuelKey, FuelEnergyEstimate]:
    rows = read_table("fuel_energy_estimates.csv").to_dict("records")
    index: dict[FuelKey, FuelEnergyEstimate] = {}
    for row in rows:
        entry = FuelEnergyEstimate(
            region=str(row["region"]),
            soil_functional_category=SoilFunctionalCategory(row["soil_functional_category"]),
            tillage_type=TillageType(row["tillage_type"]),
            crop_class=str(row["crop_class"]),
            fuel_estimate=float(row["fuel_estimate"]),
            herbicide_estimate=float(row["herbicide_estimate"]),
        )
        key = (entry.region, entry.soil_functional_category, entry.tillage_type, entry.crop_class)
        index[key] = entry
    return index


def get_fuel_energy_estimate(
    province: Province,
    soil_category: SoilFunctionalCategory,
    tillage_type: TillageType,
    crop_type: CropType,
) -> FuelEnergyEstimate | None:
    key = (province.region, soil_category, tillage_type, crop_type.crop_class)
    return load_fuel_energy_estimates().get(key)


__all__ = ["FuelEnergyEstimate", "load_fuel_energy_estimates", "get_fuel_energy_estimate"]
