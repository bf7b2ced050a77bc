"""Builders for small farms used across the test suite."""

from __future__ import annotations

from datetime import date
from uuid import UUID

from farmghg.farm.contract import (
    AnimalComponent,
    AnimalGroup,
    ClimateData,
    ComponentCategory,
    CropViewItem,
    Farm,
    FieldSystemComponent,
    GeographicData,
    HousingDetails,
    ManagementPeriod,
    ManureDetails,
    SoilData,
)


def make_period(**overrides) -> ManagementPeriod:
    values = dict(
        name="Period",
        start=date(2024, 1, 1),
        end=date(2024, 1, 31),
        animal_type="dairy_lactating_cow",
        number_of_animals=10,
        dry_matter_intake=20.0,
        nitrogen_excretion_rate=0.4,
        volatile_solids=5.0,
        housing_details=HousingDetails(housing_type="free_stall_barn"),
        manure_details=ManureDetails(state_type="liquid_slurry"),
    )
    values.update(overrides)
    return ManagementPeriod(**values)


def make_farm(
    *,
    polygon_id: int = 851003,
    province: str = "SK",
    fields: list[FieldSystemComponent] | None = None,
    animals: list[AnimalComponent] | None = None,
) -> Farm:
    return Farm(
        name="Test Farm",
        polygon_id=polygon_id,
        geographic_data=GeographicData(
            default_soil_data=SoilData(province=province, soil_functional_category="black")
        ),
        climate_data=ClimateData(
            monthly_precipitation=[30.0] * 12,
            monthly_temperature=[5.0] * 12,
            monthly_evapotranspiration=[40.0] * 12,
        ),
        components=[*(fields or []), *(animals or [])],
    )


def make_dairy_component(
    *periods: ManagementPeriod, group_guid: UUID | None = None
) -> AnimalComponent:
    group_kwargs = {"guid": group_guid} if group_guid is not None else {}
    group = AnimalGroup(
        name="Lactating",
        group_type="dairy_lactating_cow",
        management_periods=list(periods) or [make_period()],
        **group_kwargs,
    )
    return AnimalComponent(
        name="Dairy", component_category=ComponentCategory.DAIRY, groups=[group]
    )


def make_field(*items: CropViewItem) -> FieldSystemComponent:
    return FieldSystemComponent(
        name="Field", crop_view_items=list(items) or [CropViewItem(year=2024)]
    )
