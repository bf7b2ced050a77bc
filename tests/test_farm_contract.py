from __future__ import annotations

from datetime import date
from uuid import uuid4

import pytest
from pydantic import ValidationError

from farmghg.farm.contract import (
    AnimalComponent,
    AnimalGroup,
    AnimalType,
    ClimateData,
    ComponentCategory,
    CropType,
    CropViewItem,
    Farm,
    FieldSystemComponent,
    GeographicData,
    ManureDetails,
    ManureStateType,
    SoilData,
)
from tests.factories import make_dairy_component, make_farm, make_field, make_period


def test_animal_type_categories():
    assert AnimalType.DAIRY_LACTATING_COW.category is ComponentCategory.DAIRY
    assert AnimalType.CHICKEN_LAYERS.category is ComponentCategory.POULTRY
    assert AnimalType.GOATS.base_type is AnimalType.OTHER_LIVESTOCK
    assert AnimalType.NOT_SELECTED.category is None
    with pytest.raises(ValueError):
        ComponentCategory.LAND_MANAGEMENT.animal_type


def test_enum_helpers():
    assert ManureStateType.LIQUID_SLURRY.storage_class == "liquid"
    assert ManureStateType.PASTURE.storage_class == "solid"
    assert CropType.ALFALFA.crop_class == "perennial"
    assert CropType.SUMMER_FALLOW.crop_class == "fallow"


def test_management_period_months():
    period = make_period(start=date(2024, 1, 20), end=date(2024, 3, 5))
    assert list(period.months()) == [(2024, 1, 12), (2024, 2, 29), (2024, 3, 5)]
    assert period.days == 12 + 29 + 5


def test_period_end_before_start_rejected():
    with pytest.raises(ValidationError):
        make_period(start=date(2024, 2, 1), end=date(2024, 1, 1))


def test_overlapping_periods_rejected():
    with pytest.raises(ValidationError, match="overlap"):
        AnimalGroup(
            group_type="beef_finisher",
            management_periods=[
                make_period(start=date(2024, 1, 1), end=date(2024, 2, 1)),
                make_period(start=date(2024, 2, 1), end=date(2024, 3, 1)),
            ],
        )


def test_period_outside_group_lifetime_rejected():
    with pytest.raises(ValidationError, match="outlives"):
        AnimalGroup(
            group_type="beef_finisher",
            start=date(2024, 1, 1),
            end=date(2024, 1, 15),
            management_periods=[make_period(start=date(2024, 1, 1), end=date(2024, 1, 31))],
        )


def test_fractions_validated():
    with pytest.raises(ValidationError):
        ManureDetails(fraction_of_organic_nitrogen_mineralized=1.5)


def test_climate_requires_twelve_months():
    with pytest.raises(ValidationError):
        ClimateData(monthly_precipitation=[1.0] * 11)
    climate = ClimateData(monthly_temperature=[12.0] * 12, monthly_precipitation=[10.0] * 12)
    assert climate.mean_annual_temperature == pytest.approx(12.0)
    assert climate.total_annual_precipitation == pytest.approx(120.0)


def test_component_categories_validated():
    with pytest.raises(ValidationError):
        AnimalComponent(component_category=ComponentCategory.LAND_MANAGEMENT)
    with pytest.raises(ValidationError):
        FieldSystemComponent(component_category=ComponentCategory.DAIRY)


def test_farm_components_resolve_by_category():
    farm = Farm.model_validate(
        {
            "polygon_id": 5,
            "components": [
                {"component_category": "land_management", "crop_view_items": [{"year": 2024}]},
                {"component_category": "swine", "groups": []},
            ],
        }
    )
    assert len(farm.field_system_components) == 1
    assert [c.component_category for c in farm.animal_components] == [ComponentCategory.SWINE]


def test_view_items_are_linked_to_their_field():
    field = make_field(CropViewItem(year=2022), CropViewItem(year=2024), CropViewItem(year=2023))
    assert all(item.field_system_component_guid == field.guid for item in field.crop_view_items)
    assert field.get_single_year_view_item().year == 2024
    assert FieldSystemComponent().get_single_year_view_item() is None


def test_preferred_soil_data_uses_field_override():
    field = make_field()
    farm = make_farm(fields=[field])
    override = SoilData(province="MB", soil_functional_category="black")
    farm.geographic_data = GeographicData(
        default_soil_data=farm.default_soil_data, soil_data_for_components={field.guid: override}
    )
    assert farm.get_preferred_soil_data(field.crop_view_items[0]) is override
    assert farm.get_preferred_soil_data(CropViewItem(year=2024)).province.value == "SK"


def test_mark_modified_clears_flag():
    farm = make_farm(animals=[make_dairy_component()])
    farm.results_calculated = True
    farm.mark_modified()
    assert not farm.results_calculated
    assert farm.dairy_components == farm.components_for_category(ComponentCategory.DAIRY)


def test_negative_polygon_rejected():
    with pytest.raises(ValidationError):
        Farm(polygon_id=-1, guid=uuid4())
