from __future__ import annotations

import pytest

from farmghg.core.errors import MissingReferenceDataError
from farmghg.farm.contract import (
    AnimalType,
    BeddingMaterialType,
    ComponentCategory,
    CropType,
    ManureStateType,
    Province,
    SoilFunctionalCategory,
    TillageType,
)
from farmghg.reference import (
    calculate_leaching_fraction,
    climate_class,
    get_average_milk_production,
    get_bedding_composition,
    get_emission_factors,
    get_fuel_energy_estimate,
    get_indoor_temperature,
    get_manure_composition,
    get_methane_producing_capacity,
    get_mineralization_fractions,
    load_manure_composition_data,
)


def test_manure_composition_uses_livestock_category():
    row = get_manure_composition(AnimalType.DAIRY_LACTATING_COW, ManureStateType.LIQUID_SLURRY)
    assert row is not None
    assert row.animal_type is AnimalType.DAIRY_CATTLE
    assert row.nitrogen_fraction == pytest.approx(0.0036)
    assert get_manure_composition(AnimalType.NOT_SELECTED, ManureStateType.PASTURE) is None


def test_manure_composition_table_covers_every_category_and_state():
    keys = {(row.animal_type, row.manure_state) for row in load_manure_composition_data()}
    for category in ComponentCategory:
        if not category.is_animal:
            continue
        for state in ManureStateType:
            assert (category.animal_type, state) in keys


def test_mineralization_fractions_by_storage_class():
    liquid = get_mineralization_fractions(ManureStateType.LIQUID_SLURRY, AnimalType.DAIRY_DRY_COW)
    solid = get_mineralization_fractions(ManureStateType.COMPOSTED, AnimalType.DAIRY_DRY_COW)
    assert liquid is not None and solid is not None
    assert liquid.fraction_mineralized == pytest.approx(0.1)
    assert solid.fraction_mineralized == pytest.approx(0.46)


def test_methane_capacity_falls_back_to_category():
    assert get_methane_producing_capacity(AnimalType.DAIRY_LACTATING_COW) == pytest.approx(0.24)
    assert get_methane_producing_capacity(AnimalType.NOT_SELECTED) is None


def test_milk_production_lookup():
    assert get_average_milk_production(Province.SASKATCHEWAN, 2024) > 0


def test_milk_production_missing_year_is_fatal():
    with pytest.raises(MissingReferenceDataError, match="SK"):
        get_average_milk_production(Province.SASKATCHEWAN, 1999)


def test_bedding_composition_none_has_no_row():
    straw = get_bedding_composition(BeddingMaterialType.STRAW, AnimalType.BEEF_FINISHER)
    assert straw is not None
    assert straw.total_carbon_kilograms_dry_matter == pytest.approx(0.4741)
    assert get_bedding_composition(BeddingMaterialType.NONE, AnimalType.BEEF) is None


def test_fuel_energy_keyed_by_region_and_crop_class():
    estimate = get_fuel_energy_estimate(
        Province.SASKATCHEWAN,
        SoilFunctionalCategory.DARK_BROWN,
        TillageType.NO_TILL,
        CropType.ALFALFA,
    )
    assert estimate is not None
    assert estimate.crop_class == "perennial"
    assert estimate.fuel_estimate == pytest.approx(0.819)


def test_indoor_temperature_has_twelve_months():
    data = get_indoor_temperature(Province.SASKATCHEWAN)
    assert data is not None
    assert len(data.monthly_temperatures) == 12
    assert data.monthly_temperatures[0] == pytest.approx(9.0)


@pytest.mark.parametrize(
    ("temperature", "expected"), [(2.0, "cool"), (12.0, "temperate"), (16.0, "warm")]
)
def test_climate_class(temperature, expected):
    assert climate_class(temperature) == expected


def test_leaching_fraction_is_clamped():
    assert calculate_leaching_fraction(100.0, 1000.0) == pytest.approx(0.05)
    assert calculate_leaching_fraction(1000.0, 100.0) == pytest.approx(0.3)
    assert calculate_leaching_fraction(500.0, 1000.0) == pytest.approx(0.3247 * 0.5 - 0.0247)


def test_emission_factors_follow_climate():
    cool = get_emission_factors(
        manure_state=ManureStateType.LIQUID_SLURRY,
        component_category=ComponentCategory.DAIRY,
        mean_annual_precipitation=400.0,
        mean_annual_temperature=3.0,
        mean_annual_evapotranspiration=600.0,
    )
    warm = get_emission_factors(
        manure_state=ManureStateType.LIQUID_SLURRY,
        component_category=ComponentCategory.DAIRY,
        mean_annual_precipitation=400.0,
        mean_annual_temperature=18.0,
        mean_annual_evapotranspiration=600.0,
    )
    assert cool is not None and warm is not None
    assert cool.methane_conversion_factor == pytest.approx(0.10)
    assert warm.methane_conversion_factor == pytest.approx(0.26)
    assert get_emission_factors(
        manure_state=ManureStateType.PASTURE,
        component_category=ComponentCategory.LAND_MANAGEMENT,
        mean_annual_precipitation=400.0,
        mean_annual_temperature=3.0,
        mean_annual_evapotranspiration=600.0,
    ) is None
