from __future__ import annotations

from datetime import date

import pytest

from farmghg.core.errors import MissingReferenceDataError
from farmghg.farm.contract import (
    AnimalComponent,
    AnimalGroup,
    BeddingMaterialType,
    ComponentCategory,
    CropViewItem,
    FieldSystemDetailsStageState,
    HousingDetails,
    ManureDetails,
    Province,
)
from farmghg.farm.io import load_farm
from farmghg.initialization import InitializationService
from farmghg.reference import get_average_milk_production
from tests.factories import make_dairy_component, make_farm, make_field, make_period


def _period_snapshot(farm):
    return [
        period.model_dump(mode="json")
        for component in farm.animal_components
        for group in component.groups
        for period in group.management_periods
    ]


def _item_snapshot(farm):
    return [
        item.model_dump(mode="json")
        for component in farm.field_system_components
        for item in component.crop_view_items
    ]


def test_reinitialize_is_idempotent(demo_farm_path):
    farm = load_farm(demo_farm_path)
    service = InitializationService()
    service.reinitialize_farms([farm])
    first = _period_snapshot(farm)
    first_items = _item_snapshot(farm)
    service.reinitialize_farms([farm])
    assert _period_snapshot(farm) == first
    assert _item_snapshot(farm) == first_items


def test_manure_composition_uses_group_type_and_state():
    farm = make_farm(animals=[make_dairy_component()])
    InitializationService().initialize_manure_composition_data(farm)
    details = farm.animal_components[0].groups[0].management_periods[0].manure_details
    assert details.fraction_of_nitrogen_in_manure == pytest.approx(0.0036)
    assert details.fraction_of_carbon_in_manure == pytest.approx(0.035)
    assert farm.default_manure_composition_data


def test_milk_production_for_lactating_cows_only():
    dry = AnimalGroup(
        name="Dry",
        group_type="dairy_dry_cow",
        management_periods=[make_period(animal_type="dairy_dry_cow")],
    )
    component = make_dairy_component(make_period(start=date(2024, 3, 1), end=date(2024, 3, 31)))
    component.groups.append(dry)
    farm = make_farm(animals=[component])

    InitializationService().initialize_milk_production(farm)

    lactating, dry_group = component.groups
    assert lactating.management_periods[0].milk_production == pytest.approx(
        get_average_milk_production(Province.SASKATCHEWAN, 2024)
    )
    assert dry_group.management_periods[0].milk_production == 0.0


def test_milk_production_missing_row_raises():
    period = make_period(start=date(1999, 1, 1), end=date(1999, 1, 31))
    farm = make_farm(animals=[make_dairy_component(period)])
    with pytest.raises(MissingReferenceDataError):
        InitializationService().initialize_milk_production(farm)


def test_milk_production_without_soil_data_raises():
    farm = make_farm(animals=[make_dairy_component()])
    farm.geographic_data = None
    with pytest.raises(MissingReferenceDataError, match="no soil data"):
        InitializationService().initialize_milk_production(farm)


def test_emission_factors_and_mineralization_are_pushed():
    farm = make_farm(animals=[make_dairy_component()])
    service = InitializationService()
    service.initialize_default_emission_factors(farm)
    service.initialize_manure_mineralization_fractions(farm)
    service.initialize_methane_producing_capacity(farm)
    details = farm.animal_components[0].groups[0].management_periods[0].manure_details
    # mean annual temperature of 5 degrees C is a cool climate
    assert details.methane_conversion_factor == pytest.approx(0.10)
    assert details.volatilization_fraction == pytest.approx(0.40)
    assert 0.05 <= details.leaching_fraction <= 0.3
    assert details.fraction_of_organic_nitrogen_mineralized == pytest.approx(0.1)
    assert details.methane_producing_capacity_of_manure == pytest.approx(0.24)


def test_period_without_defaults_keeps_prior_values():
    details = ManureDetails(state_type="solid_storage", methane_conversion_factor=0.5)
    component = AnimalComponent(
        component_category=ComponentCategory.SWINE,
        groups=[
            AnimalGroup(
                group_type="swine_sows",
                management_periods=[make_period(animal_type="swine_sows", manure_details=details)],
            )
        ],
    )
    farm = make_farm(animals=[component])
    farm.climate_data = None
    InitializationService().initialize_default_emission_factors(farm)
    assert details.methane_conversion_factor == 0.5


def test_fuel_energy_covers_stage_states_and_fields():
    item = CropViewItem(year=2024, crop_type="wheat", tillage_type="reduced")
    detail = CropViewItem(year=2025, crop_type="summer_fallow", tillage_type="intensive")
    farm = make_farm(fields=[make_field(item)])
    farm.stage_states.append(FieldSystemDetailsStageState(detail_view_items=[detail]))

    InitializationService().initialize_fuel_energy(farm)

    assert item.fuel_energy == pytest.approx(2.080)
    assert item.herbicide_energy == pytest.approx(0.260)
    assert detail.fuel_energy > 0


def test_bedding_material_reinitialization():
    period = make_period(
        housing_details=HousingDetails(
            housing_type="free_stall_barn", bedding_material_type=BeddingMaterialType.SAWDUST
        )
    )
    farm = make_farm(animals=[make_dairy_component(period)])
    InitializationService().reinitialize_bedding_material(farm)
    housing = period.housing_details
    assert housing.total_carbon_kilograms_dry_matter_for_bedding == pytest.approx(0.5)
    assert farm.default_bedding_composition_data


def test_barn_temperature_initialized_once():
    farm = make_farm()
    service = InitializationService()
    service.check_initialization(farm)
    barn = farm.climate_data.barn_temperature_data
    assert barn is not None and barn.is_initialized
    assert barn.province is Province.SASKATCHEWAN
    assert barn.monthly_temperatures[6] == pytest.approx(21.0)

    barn.monthly_temperatures[0] = -99.0
    service.check_initialization(farm)
    assert farm.climate_data.barn_temperature_data.monthly_temperatures[0] == -99.0


def test_none_farm_is_a_no_op():
    service = InitializationService()
    service.check_initialization(None)
    service.initialize_manure_composition_data(None)
    service.initialize_milk_production(None)
    service.initialize_fuel_energy(None)
    service.reinitialize_bedding_material(None)
    service.initialize_barn_temperature(None)
