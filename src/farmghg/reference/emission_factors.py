"""Livestock manure emission conversion factors.

Methane conversion factors depend on the farm's climate class, and the leaching fraction on the
ratio of annual precipitation to evapotranspiration, so climate normals must be resolved
before these factors can be pushed onto management periods.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache

from farmghg.farm.contract.enums import ComponentCategory, ManureStateType

from ._tables import read_table

EMISSION_FACTOR_LEACHING = 0.011
_LEACHING_MIN = 0.05
_LEACHING_MAX = 0.3

_TABLE_CATEGORY = {
    ComponentCategory.BEEF_PRODUCTION: "cattle",
    ComponentCategory.DAIRY: "cattle",
    ComponentCategory.SWINE: "swine",
    ComponentCategory.POULTRY: "poultry",
    ComponentCategory.SHEEP: "other",
    ComponentCategory.OTHER_LIVESTOCK: "other",
}


@dataclass(frozen=True)
class EmissionConversionRow:
    manure_state: ManureStateType
    category: str
    mcf_by_climate: Mapping[str, float]
    n2o_direct_emission_factor: float
    volatilization_fraction: float
    emission_factor_volatilization: float


@dataclass(frozen=True)
class LivestockEmissionConversionFactors:
    """Factors pushed onto :class:`farmghg.farm.contract.ManureDetails`."""

    methane_conversion_factor: float
    n2o_direct_emission_factor: float
    volatilization_fraction: float
    emission_factor_volatilization: float
    emission_factor_leaching: float
    leaching_fraction: float


@lru_cache(maxsize=1)
def load_emission_conversion_rows() -> Mapping[tuple[ManureStateType, str], EmissionConversionRow]:
    rows = read_table("emission_conversion_factors.csv").to_dict("records")
    index: dict[tuple[ManureStateType, str], EmissionConversionRow] = {}
    for row in rows:
        entry = EmissionConversionRow(
            manure_state=ManureStateType(row["manure_state"]),
            category=str(row["category"]),
            mcf_by_climate={
                "cool": float(row["mcf_cool"]),
                "temperate": float(row["mcf_temperate"]),
                "warm": float(row["mcf_warm"]),
            },
            n2o_direct_emission_factor=float(row["n2o_direct_emission_factor"]),
            volatilization_fraction=float(row["volatilization_fraction"]),
            emission_factor_volatilization=float(row["emission_factor_volatilization"]),
        )
        index[(entry.manure_state, entry.category)] = entry
    return index


def climate_class(mean_annual_temperature: float) -> str:
    if mean_annual_temperature < 10.0:
        return "cool"
    if mean_annual_temperature < 15.0:
        return "temperate"
    return "warm"


def calculate_leaching_fraction(
    total_annual_precipitation: float, total_annual_evapotranspiration: float
) -> float:
    """Fraction of N lost by leaching, clamped to [0.05, 0.3]."""

    if total_annual_evapotranspiration <= 0:
        return _LEACHING_MAX if total_annual_precipitation > 0 else _LEACHING_MIN
    ratio = total_annual_precipitation / total_annual_evapotranspiration
    fraction = 0.3247 * ratio - 0.0247
    return min(_LEACHING_MAX, max(_LEACHING_MIN, fraction))


def get_emission_factors(
    *,
    manure_state: ManureStateType,
    component_category: ComponentCategory,
    mean_annual_precipitation: float,
    mean_annual_temperature: float,
    mean_annual_evapotranspiration: float,
) -> LivestockEmissionConversionFactors | None:
    """Return the climate-adjusted factors, or ``None`` for a category/state with no row."""

    table_category = _TABLE_CATEGORY.get(component_category)
    if table_category is None:
        return None
    row = load_emission_conversion_rows().get((manure_state, table_category))
    if row is None:
        return None
    return LivestockEmissionConversionFactors(
        methane_conversion_factor=row.mcf_by_climate[climate_class(mean_annual_temperature)],
        n2o_direct_emission_factor=row.n2o_direct_emission_factor,
        volatilization_fraction=row.volatilization_fraction,
        emission_factor_volatilization=row.emission_factor_volatilization,
        emission_factor_leaching=EMISSION_FACTOR_LEACHING,
        leaching_fraction=calculate_leaching_fraction(
            mean_annual_precipitation, mean_annual_evapotranspiration
        ),
    )


__all__ = [
    "EMISSION_FACTOR_LEACHING",
    "EmissionConversionRow",
    "LivestockEmissionConversionFactors",
    "calculate_leaching_fraction",
    "climate_class",
    "get_emission_factors",
    "load_emission_conversion_rows",
]
