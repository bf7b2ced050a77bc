"""Pydantic models describing the farm aggregate consumed by the results pipeline."""

from __future__ import annotations

import calendar
from collections.abc import Iterator
from datetime import date
from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, ValidationInfo, field_validator, model_validator

from .enums import (
    AnimalType,
    BeddingMaterialType,
    ComponentCategory,
    CropType,
    HardinessZone,
    HousingType,
    ManureLocationSourceType,
    ManureStateType,
    Province,
    SoilFunctionalCategory,
    TillageType,
)


def _check_fraction(value: float) -> float:
    if not 0.0 <= value <= 1.0:
        raise ValueError("fractions must lie in [0, 1]")
    return value


class SoilData(BaseModel):
    """Soil and location attributes of a polygon (or of a single field override)."""

    province: Province
    soil_functional_category: SoilFunctionalCategory = SoilFunctionalCategory.BLACK
    ecodistrict_id: int = 0
    hardiness_zone: HardinessZone = HardinessZone.ZONE_3A


class GeographicData(BaseModel):
    """Farm-level soil data plus optional per-field overrides keyed by component guid."""

    default_soil_data: SoilData
    soil_data_for_components: dict[UUID, SoilData] = Field(default_factory=dict)


class BarnTemperatureData(BaseModel):
    province: Province | None = None
    monthly_temperatures: list[float] = Field(default_factory=lambda: [0.0] * 12)
    is_initialized: bool = False


class ClimateData(BaseModel):
    """Monthly climate normals (12 values each) for the farm polygon.

    Attributes
    ----------
    monthly_precipitation:
        Precipitation per month (mm).
    monthly_temperature:
        Mean air temperature per month (degrees C).
    monthly_evapotranspiration:
        Potential evapotranspiration per month (mm).
    barn_temperature_data:
        Indoor temperatures pushed by the initialization service; ``None`` until initialized.
    """

    monthly_precipitation: list[float] = Field(default_factory=lambda: [0.0] * 12)
    monthly_temperature: list[float] = Field(default_factory=lambda: [0.0] * 12)
    monthly_evapotranspiration: list[float] = Field(default_factory=lambda: [0.0] * 12)
    barn_temperature_data: BarnTemperatureData | None = None

    @field_validator("monthly_precipitation", "monthly_temperature", "monthly_evapotranspiration")
    @classmethod
    def _twelve_months(cls, value: list[float]) -> list[float]:
        if len(value) != 12:
            raise ValueError("monthly climate series must have 12 values")
        return value

    @property
    def total_annual_precipitation(self) -> float:
        return float(sum(self.monthly_precipitation))

    @property
    def mean_annual_temperature(self) -> float:
        return float(sum(self.monthly_temperature)) / 12.0

    @property
    def total_annual_evapotranspiration(self) -> float:
        return float(sum(self.monthly_evapotranspiration))


class Defaults(BaseModel):
    """Farm-level constants used by the default calculators."""

    carbon_fraction_of_dry_matter: float = 0.45
    diesel_emission_factor: float = 70.0  # kg CO2 / GJ
    herbicide_emission_factor: float = 5.8  # kg CO2 / GJ
    manure_spreading_emission_factor: float = 0.0248  # kg CO2 / kg N spread
    enteric_methane_conversion_factor: float = 0.065  # Ym
    fraction_of_excreted_nitrogen_as_tan: float = 0.6
    synthetic_n2o_emission_factor: float = 0.01
    synthetic_volatilization_fraction: float = 0.11
    emission_factor_volatilization: float = 0.01
    emission_factor_leaching: float = 0.011
    leaching_fraction: float = 0.1

    @field_validator(
        "carbon_fraction_of_dry_matter",
        "enteric_methane_conversion_factor",
        "fraction_of_excreted_nitrogen_as_tan",
        "synthetic_n2o_emission_factor",
        "synthetic_volatilization_fraction",
        "emission_factor_volatilization",
        "emission_factor_leaching",
        "leaching_fraction",
    )
    @classmethod
    def _fractions(cls, value: float) -> float:
        return _check_fraction(value)


class ManureDetails(BaseModel):
    """Manure handling state of a management period.

    Every numeric slot is written by :class:`farmghg.initialization.InitializationService`; users
    only choose ``state_type``.
    """

    state_type: ManureStateType = ManureStateType.SOLID_STORAGE
    fraction_of_carbon_in_manure: float = 0.0
    fraction_of_nitrogen_in_manure: float = 0.0
    fraction_of_phosphorus_in_manure: float = 0.0
    fraction_of_organic_nitrogen_immobilized: float = 0.0
    fraction_of_organic_nitrogen_nitrified: float = 0.0
    fraction_of_organic_nitrogen_mineralized: float = 0.0
    methane_conversion_factor: float = 0.0
    n2o_direct_emission_factor: float = 0.0
    volatilization_fraction: float = 0.0
    emission_factor_volatilization: float = 0.0
    emission_factor_leaching: float = 0.0
    leaching_fraction: float = 0.0
    methane_producing_capacity_of_manure: float = 0.0

    @field_validator(
        "fraction_of_carbon_in_manure",
        "fraction_of_nitrogen_in_manure",
        "fraction_of_phosphorus_in_manure",
        "fraction_of_organic_nitrogen_immobilized",
        "fraction_of_organic_nitrogen_nitrified",
        "fraction_of_organic_nitrogen_mineralized",
        "methane_conversion_factor",
        "volatilization_fraction",
        "leaching_fraction",
    )
    @classmethod
    def _fractions(cls, value: float) -> float:
        return _check_fraction(value)


class HousingDetails(BaseModel):
    housing_type: HousingType = HousingType.HOUSED_IN_BARN
    bedding_material_type: BeddingMaterialType = BeddingMaterialType.NONE
    user_defined_bedding_rate: float = 0.0  # kg DM / head / day
    total_carbon_kilograms_dry_matter_for_bedding: float = 0.0
    total_nitrogen_kilograms_dry_matter_for_bedding: float = 0.0
    total_phosphorus_kilograms_dry_matter_for_bedding: float = 0.0
    moisture_content_of_bedding_material: float = 0.0

    @field_validator("user_defined_bedding_rate")
    @classmethod
    def _rate_non_negative(cls, value: float) -> float:
        if value < 0:
            raise ValueError("HousingDetails.user_defined_bedding_rate must be non-negative")
        return value


class ManagementPeriod(BaseModel):
    """Population, housing and manure handling for one animal group over ``[start, end]``.

    Attributes
    ----------
    start / end:
        Inclusive date window.
    animal_type:
        Concrete animal type; drives most default-table lookups.
    number_of_animals:
        Head count for the whole window.
    dry_matter_intake / nitrogen_excretion_rate / volatile_solids:
        Per-head daily rates (kg) consumed by the animal calculators.
    milk_production:
        kg/head/day, pushed from the milk production table for lactating dairy cows.
    """

    guid: UUID = Field(default_factory=uuid4)
    name: str = "Management period"
    start: date
    end: date
    animal_type: AnimalType
    number_of_animals: int = 0
    housing_details: HousingDetails = Field(default_factory=HousingDetails)
    manure_details: ManureDetails = Field(default_factory=ManureDetails)
    milk_production: float = 0.0
    dry_matter_intake: float = 0.0
    nitrogen_excretion_rate: float = 0.0
    volatile_solids: float = 0.0

    @field_validator(
        "number_of_animals", "dry_matter_intake", "nitrogen_excretion_rate", "volatile_solids"
    )
    @classmethod
    def _non_negative(cls, value: float) -> float:
        if value < 0:
            raise ValueError("ManagementPeriod rates and populations must be non-negative")
        return value

    @field_validator("end")
    @classmethod
    def _end_not_before_start(cls, value: date, info: ValidationInfo) -> date:
        start = info.data.get("start")
        if start is not None and value < start:
            raise ValueError("ManagementPeriod.end must be >= start")
        return value

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1

    def months(self) -> Iterator[tuple[int, int, int]]:
        """Yield ``(year, month, days_in_window)`` for each calendar month the period touches."""

        year, month = self.start.year, self.start.month
        while (year, month) <= (self.end.year, self.end.month):
            last_day = calendar.monthrange(year, month)[1]
            first = max(self.start, date(year, month, 1))
            last = min(self.end, date(year, month, last_day))
            yield year, month, (last - first).days + 1
            month += 1
            if month > 12:
                year, month = year + 1, 1


class AnimalGroup(BaseModel):
    guid: UUID = Field(default_factory=uuid4)
    name: str = "Group"
    group_type: AnimalType
    start: date | None = None
    end: date | None = None
    management_periods: list[ManagementPeriod] = Field(default_factory=list)

    @model_validator(mode="after")
    def _periods_within_lifetime(self) -> AnimalGroup:
        ordered = sorted(self.management_periods, key=lambda period: period.start)
        for previous, current in zip(ordered, ordered[1:]):
            if current.start <= previous.end:
                raise ValueError(
                    f"Management periods '{previous.name}' and '{current.name}' overlap in group "
                    f"'{self.name}'"
                )
        for period in ordered:
            if self.start is not None and period.start < self.start:
                raise ValueError(f"Management period '{period.name}' starts before its group")
            if self.end is not None and period.end > self.end:
                raise ValueError(f"Management period '{period.name}' outlives its group")
        return self


class ManureApplicationViewItem(BaseModel, frozen=True):
    """One land application of manure on a field."""

    date_of_application: date
    manure_location_source_type: ManureLocationSourceType = ManureLocationSourceType.LIVESTOCK
    animal_type: AnimalType = AnimalType.NOT_SELECTED
    amount_of_nitrogen_applied_per_hectare: float = 0.0

    @field_validator("amount_of_nitrogen_applied_per_hectare")
    @classmethod
    def _rate_non_negative(cls, value: float) -> float:
        if value < 0:
            raise ValueError("Manure application rates must be non-negative")
        return value


class GrazingViewItem(BaseModel, frozen=True):
    """Reference from a field-year to the animal group that grazed it."""

    animal_component_guid: UUID
    animal_group_guid: UUID
    start: date | None = None
    end: date | None = None


class CropViewItem(BaseModel):
    """Per-field, per-year agronomic state plus pipeline write-back slots."""

    guid: UUID = Field(default_factory=uuid4)
    field_system_component_guid: UUID | None = None
    year: int
    crop_type: CropType = CropType.BARLEY
    tillage_type: TillageType = TillageType.REDUCED
    area: float = 1.0  # ha
    yield_per_hectare: float = 0.0  # kg / ha
    nitrogen_fertilizer_rate: float = 0.0  # kg N / ha
    fuel_energy: float = 0.0  # GJ / ha
    herbicide_energy: float = 0.0  # GJ / ha
    total_carbon_inputs: float = 0.0  # kg C / ha
    price_per_tonne: float = 0.0
    cost_per_hectare: float = 0.0
    manure_application_view_items: list[ManureApplicationViewItem] = Field(default_factory=list)
    grazing_view_items: list[GrazingViewItem] = Field(default_factory=list)
    total_carbon_uptake_by_grazing_animals: float = 0.0

    @field_validator(
        "area",
        "yield_per_hectare",
        "nitrogen_fertilizer_rate",
        "fuel_energy",
        "herbicide_energy",
        "price_per_tonne",
        "cost_per_hectare",
    )
    @classmethod
    def _non_negative(cls, value: float) -> float:
        if value < 0:
            raise ValueError("CropViewItem numerical fields must be non-negative")
        return value


class FieldSystemComponent(BaseModel):
    guid: UUID = Field(default_factory=uuid4)
    name: str = "Field"
    component_category: ComponentCategory = ComponentCategory.LAND_MANAGEMENT
    crop_view_items: list[CropViewItem] = Field(default_factory=list)

    @field_validator("component_category")
    @classmethod
    def _land_management_only(cls, value: ComponentCategory) -> ComponentCategory:
        if value is not ComponentCategory.LAND_MANAGEMENT:
            raise ValueError("FieldSystemComponent must use the land_management category")
        return value

    @model_validator(mode="after")
    def _link_view_items(self) -> FieldSystemComponent:
        for item in self.crop_view_items:
            if item.field_system_component_guid is None:
                item.field_system_component_guid = self.guid
        return self

    def get_single_year_view_item(self) -> CropViewItem | None:
        """Return the view item describing the field's current (latest) year."""

        if not self.crop_view_items:
            return None
        return max(self.crop_view_items, key=lambda item: item.year)


class AnimalComponent(BaseModel):
    guid: UUID = Field(default_factory=uuid4)
    name: str = "Animals"
    component_category: ComponentCategory
    component_type: str | None = None
    groups: list[AnimalGroup] = Field(default_factory=list)

    @field_validator("component_category")
    @classmethod
    def _animal_only(cls, value: ComponentCategory) -> ComponentCategory:
        if not value.is_animal:
            raise ValueError("AnimalComponent requires a livestock category")
        return value


class FieldSystemDetailsStageState(BaseModel):
    """Working copy of a field's multi-year details screen."""

    detail_view_items: list[CropViewItem] = Field(default_factory=list)


Component = FieldSystemComponent | AnimalComponent


class Farm(BaseModel):
    """Root aggregate. Cache identity is the instance itself, never its field values.

    Attributes
    ----------
    polygon_id:
        Geographic identifier; ``0`` marks a farm that cannot be evaluated.
    components:
        Field and livestock components (six livestock categories).
    results_calculated:
        Set by the results pipeline after a run; cleared by :meth:`mark_modified`.
    default_manure_composition_data / default_bedding_composition_data:
        Snapshots of the default tables the farm was last initialized from.
    """

    guid: UUID = Field(default_factory=uuid4)
    name: str = "Farm"
    polygon_id: int = 0
    components: list[Component] = Field(default_factory=list)
    defaults: Defaults = Field(default_factory=Defaults)
    climate_data: ClimateData | None = None
    geographic_data: GeographicData | None = None
    stage_states: list[FieldSystemDetailsStageState] = Field(default_factory=list)
    results_calculated: bool = False
    default_manure_composition_data: list[Any] = Field(default_factory=list, exclude=True)
    default_bedding_composition_data: list[Any] = Field(default_factory=list, exclude=True)

    @field_validator("polygon_id")
    @classmethod
    def _polygon_non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("Farm.polygon_id must be non-negative")
        return value

    @property
    def field_system_components(self) -> list[FieldSystemComponent]:
        return [c for c in self.components if isinstance(c, FieldSystemComponent)]

    @property
    def animal_components(self) -> list[AnimalComponent]:
        return [c for c in self.components if isinstance(c, AnimalComponent)]

    @property
    def dairy_components(self) -> list[AnimalComponent]:
        return self.components_for_category(ComponentCategory.DAIRY)

    @property
    def default_soil_data(self) -> SoilData | None:
        if self.geographic_data is None:
            return None
        return self.geographic_data.default_soil_data

    def components_for_category(self, category: ComponentCategory) -> list[AnimalComponent]:
        return [c for c in self.animal_components if c.component_category is category]

    def get_crop_detail_view_items(self) -> list[CropViewItem]:
        return [item for state in self.stage_states for item in state.detail_view_items]

    def get_preferred_soil_data(self, view_item: CropViewItem) -> SoilData | None:
        """Field-specific soil data when the view item's field has an override, else the default."""

        if self.geographic_data is None:
            return None
        overrides = self.geographic_data.soil_data_for_components
        if view_item.field_system_component_guid in overrides:
            return overrides[view_item.field_system_component_guid]
        return self.geographic_data.default_soil_data

    def mark_modified(self) -> None:
        self.results_calculated = False


__all__ = [
    "AnimalComponent",
    "AnimalGroup",
    "BarnTemperatureData",
    "ClimateData",
    "Component",
    "CropViewItem",
    "Defaults",
    "Farm",
    "FieldSystemComponent",
    "FieldSystemDetailsStageState",
    "GeographicData",
    "GrazingViewItem",
    "HousingDetails",
    "ManagementPeriod",
    "ManureApplicationViewItem",
    "ManureDetails",
    "SoilData",
]
