"""Default-data tables bundled with farmghg."""

from .bedding import (
    BeddingMaterialComposition,
    get_bedding_composition,
    load_bedding_composition_data,
)
from .emission_factors import (
    LivestockEmissionConversionFactors,
    calculate_leaching_fraction,
    climate_class,
    get_emission_factors,
)
from .fuel_energy import FuelEnergyEstimate, get_fuel_energy_estimate, load_fuel_energy_estimates
from .indoor_temperature import IndoorTemperatureData, get_indoor_temperature
from .manure_composition import (
    ManureCompositionData,
    get_manure_composition,
    load_manure_composition_data,
)
from .methane_capacity import get_methane_producing_capacity
from .milk_production import get_average_milk_production, load_milk_production_data
from .mineralization import MineralizationFractions, get_mineralization_fractions
from .shelterbelt import (
    CUT_YEAR,
    MAX_AGE,
    ShelterbeltClusterData,
    ShelterbeltColumn,
    ShelterbeltDomProviderData,
    get_cluster_data,
    get_interpolated_value,
    load_shelterbelt_data,
)

__all__ = [
    "BeddingMaterialComposition",
    "CUT_YEAR",
    "FuelEnergyEstimate",
    "IndoorTemperatureData",
    "LivestockEmissionConversionFactors",
    "MAX_AGE",
    "ManureCompositionData",
    "MineralizationFractions",
    "ShelterbeltClusterData",
    "ShelterbeltColumn",
    "ShelterbeltDomProviderData",
    "calculate_leaching_fraction",
    "climate_class",
    "get_average_milk_production",
    "get_bedding_composition",
    "get_cluster_data",
    "get_emission_factors",
    "get_fuel_energy_estimate",
    "get_indoor_temperature",
    "get_interpolated_value",
    "get_manure_composition",
    "get_methane_producing_capacity",
    "get_mineralization_fractions",
    "load_bedding_composition_data",
    "load_fuel_energy_estimates",
    "load_manure_composition_data",
    "load_milk_production_data",
    "load_shelterbelt_data",
]
