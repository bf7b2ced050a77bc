"""Push default-table values onto a farm's management periods and crop view items."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from farmghg.core.errors import MissingReferenceDataError
from farmghg.farm.contract import (
    AnimalComponent,
    AnimalGroup,
    AnimalType,
    BarnTemperatureData,
    CropViewItem,
    Farm,
    ManagementPeriod,
)
from farmghg.reference import (
    BeddingMaterialComposition,
    ManureCompositionData,
    MineralizationFractions,
    get_average_milk_production,
    get_bedding_composition,
    get_emission_factors,
    get_fuel_energy_estimate,
    get_indoor_temperature,
    get_manure_composition,
    get_methane_producing_capacity,
    get_mineralization_fractions,
    load_bedding_composition_data,
    load_manure_composition_data,
)

logger = logging.getLogger(__name__)


def _iter_periods(
    farm: Farm,
) -> Iterator[tuple[AnimalComponent, AnimalGroup, ManagementPeriod]]:
    for component in farm.animal_components:
        for group in component.groups:
            for period in group.management_periods:
                yield component, group, period


class InitializationService:
    """Idempotent default-value injection.

    Every ``initialize_*`` method overwrites its target fields from the current default tables and
    leaves them untouched when the farm, the entity or the looked-up row is missing. Milk
    production is the exception: a missing row raises
    :class:`farmghg.core.errors.MissingReferenceDataError`.
    """

    def check_initialization(self, farm: Farm | None) -> None:
        """Initialize barn temperatures once soil and climate data are present."""

        if farm is None or farm.default_soil_data is None or farm.climate_data is None:
            return
        barn = farm.climate_data.barn_temperature_data
        if barn is None or not barn.is_initialized:
            self.initialize_barn_temperature(farm)

    def reinitialize_farms(self, farms: Iterable[Farm]) -> None:
        for farm in farms:
            self.initialize_manure_composition_data(farm)
            self.initialize_milk_production(farm)
            self.initialize_methane_producing_capacity(farm)
            self.initialize_default_emission_factors(farm)
            self.initialize_manure_mineralization_fractions(farm)
            self.initialize_fuel_energy(farm)
            self.initialize_barn_temperature(farm)
            logger.debug("Reinitialized farm %s", farm.name)

    def initialize_manure_composition_data(self, farm: Farm | None) -> None:
        if farm is None:
            return
        farm.default_manure_composition_data = list(load_manure_composition_data())
        for _, group, period in _iter_periods(farm):
            defaults = get_manure_composition(group.group_type, period.manure_details.state_type)
            if defaults is None:
                logger.debug(
                    "No manure composition for %s/%s",
                    group.group_type.value,
                    period.manure_details.state_type.value,
                )
            self.initialize_manure_composition_for_period(period, defaults)

    def initialize_manure_composition_for_period(
        self, period: ManagementPeriod | None, data: ManureCompositionData | None
    ) -> None:
        if period is None or data is None:
            return
        details = period.manure_details
        details.fraction_of_phosphorus_in_manure = data.phosphorus_fraction
        details.fraction_of_carbon_in_manure = data.carbon_fraction
        details.fraction_of_nitrogen_in_manure = data.nitrogen_fraction

    def initialize_milk_production(self, farm: Farm | None) -> None:
        """Set milk production of lactating dairy cows from the province/year table.

        Raises
        ------
        MissingReferenceDataError
            When the farm has no soil data or the table has no row for its province and a
            period's start year.
        """

        if farm is None:
            return
        soil = farm.default_soil_data
        for component in farm.dairy_components:
            for group in component.groups:
                if group.group_type is not AnimalType.DAIRY_LACTATING_COW:
                    continue
                if soil is None:
                    raise MissingReferenceDataError(
                        f"Farm {farm.name} has lactating cows but no soil data for milk production"
                    )
                for period in group.management_periods:
                    period.milk_production = get_average_milk_production(
                        soil.province, period.start.year
                    )

    def initialize_methane_producing_capacity(self, farm: Farm | None) -> None:
        if farm is None:
            return
        for _, _, period in _iter_periods(farm):
            capacity = get_methane_producing_capacity(period.animal_type)
            if capacity is not None:
                period.manure_details.methane_producing_capacity_of_manure = capacity

    def initialize_default_emission_factors(self, farm: Farm | None) -> None:
        if farm is None:
            return
        for component, _, period in _iter_periods(farm):
            self.initialize_default_emission_factors_for_period(farm, component, period)

    def initialize_default_emission_factors_for_period(
        self,
        farm: Farm | None,
        component: AnimalComponent | None,
        period: ManagementPeriod | None,
    ) -> None:
        if farm is None or component is None or period is None or farm.climate_data is None:
            return
        climate = farm.climate_data
        factors = get_emission_factors(
            manure_state=period.manure_details.state_type,
            component_category=component.component_category,
            mean_annual_precipitation=climate.total_annual_precipitation,
            mean_annual_temperature=climate.mean_annual_temperature,
            mean_annual_evapotranspiration=climate.total_annual_evapotranspiration,
        )
        if factors is None:
            logger.debug(
                "No emission factors for %s/%s",
                component.component_category.value,
                period.manure_details.state_type.value,
            )
            return
        details = period.manure_details
        details.methane_conversion_factor = factors.methane_conversion_factor
        details.n2o_direct_emission_factor = factors.n2o_direct_emission_factor
        details.volatilization_fraction = factors.volatilization_fraction
        details.emission_factor_volatilization = factors.emission_factor_volatilization
        details.emission_factor_leaching = factors.emission_factor_leaching
        details.leaching_fraction = factors.leaching_fraction

    def initialize_manure_mineralization_fractions(self, farm: Farm | None) -> None:
        if farm is None:
            return
        for _, _, period in _iter_periods(farm):
            fractions = get_mineralization_fractions(
                period.manure_details.state_type, period.animal_type
            )
            self.initialize_manure_mineralization_fractions_for_period(period, fractions)

    def initialize_manure_mineralization_fractions_for_period(
        self, period: ManagementPeriod | None, fractions: MineralizationFractions | None
    ) -> None:
        if period is None or fractions is None:
            return
        details = period.manure_details
        details.fraction_of_organic_nitrogen_immobilized = fractions.fraction_immobilized
        details.fraction_of_organic_nitrogen_nitrified = fractions.fraction_nitrified
        details.fraction_of_organic_nitrogen_mineralized = fractions.fraction_mineralized

    def initialize_fuel_energy(self, farm: Farm | None) -> None:
        """Refresh fuel and herbicide energy of every stage-state and field crop view item."""

        if farm is None:
            return
        for item in farm.get_crop_detail_view_items():
            self.initialize_fuel_energy_for_view_item(farm, item)
        for component in farm.field_system_components:
            for item in component.crop_view_items:
                self.initialize_fuel_energy_for_view_item(farm, item)

    def initialize_fuel_energy_for_view_item(self, farm: Farm | None, item: CropViewItem) -> None:
        if farm is None:
            return
        soil = farm.get_preferred_soil_data(item)
        if soil is None:
            return
        estimate = get_fuel_energy_estimate(
            soil.province, soil.soil_functional_category, item.tillage_type, item.crop_type
        )
        if estimate is None:
            logger.debug(
                "No fuel energy estimate for %s/%s/%s",
                soil.province.value,
                item.tillage_type.value,
                item.crop_type.value,
            )
            return
        item.fuel_energy = estimate.fuel_estimate
        item.herbicide_energy = estimate.herbicide_estimate

    def reinitialize_bedding_material(self, farm: Farm | None) -> None:
        if farm is None:
            return
        farm.default_bedding_composition_data = list(load_bedding_composition_data())
        for _, _, period in _iter_periods(farm):
            composition = get_bedding_composition(
                period.housing_details.bedding_material_type, period.animal_type
            )
            self.initialize_bedding_material(period, composition)

    def initialize_bedding_material(
        self, period: ManagementPeriod | None, data: BeddingMaterialComposition | None
    ) -> None:
        if period is None or data is None:
            return
        housing = period.housing_details
        housing.total_carbon_kilograms_dry_matter_for_bedding = (
            data.total_carbon_kilograms_dry_matter
        )
        housing.total_nitrogen_kilograms_dry_matter_for_bedding = (
            data.total_nitrogen_kilograms_dry_matter
        )
        housing.total_phosphorus_kilograms_dry_matter_for_bedding = (
            data.total_phosphorus_kilograms_dry_matter
        )
        housing.moisture_content_of_bedding_material = data.moisture_content

    def initialize_barn_temperature(self, farm: Farm | None) -> None:
        if farm is None or farm.climate_data is None or farm.default_soil_data is None:
            return
        province = farm.default_soil_data.province
        indoor = get_indoor_temperature(province)
        if indoor is None:
            logger.debug("No indoor temperatures for province %s", province.value)
            return
        farm.climate_data.barn_temperature_data = BarnTemperatureData(
            province=province,
            monthly_temperatures=list(indoor.monthly_temperatures),
            is_initialized=True,
        )


__all__ = ["InitializationService"]
