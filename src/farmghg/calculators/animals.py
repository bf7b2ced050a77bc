"""Default monthly livestock emission calculator.

One :class:`LivestockResultsCalculator` per livestock category. Each management period is split
into calendar months and every monthly record is derived from the period's initialized
:class:`~farmghg.farm.contract.ManureDetails`, its housing and the farm :class:`Defaults`.
"""

from __future__ import annotations

from collections.abc import Sequence

from farmghg.farm.contract import (
    AnimalComponent,
    AnimalGroup,
    ComponentCategory,
    Defaults,
    Farm,
    ManagementPeriod,
)
from farmghg.results.models import (
    N2O_N_TO_N2O,
    AnimalComponentEmissionResults,
    AnimalGroupEmissionResults,
    GroupEmissionsByMonth,
)

GROSS_ENERGY_OF_FEED = 18.45  # MJ / kg DM
ENERGY_CONTENT_OF_METHANE = 55.65  # MJ / kg CH4
METHANE_DENSITY = 0.67  # kg / m^3


def calculate_month(
    period: ManagementPeriod,
    year: int,
    month: int,
    days: int,
    defaults: Defaults,
) -> GroupEmissionsByMonth:
    """Return the emissions of ``period`` for the ``days`` it spends in ``year``/``month``."""

    record = GroupEmissionsByMonth(
        year=year, month=month, days_in_month=days, management_period=period
    )
    head_days = period.number_of_animals * days
    manure = period.manure_details
    housing = period.housing_details
    pasture = housing.housing_type.is_pasture

    excreted = period.nitrogen_excretion_rate * head_days
    tan = excreted * defaults.fraction_of_excreted_nitrogen_as_tan
    organic = excreted - tan
    record.nitrogen_excreted = excreted
    record.tan_excreted = tan
    record.organic_nitrogen_excreted = organic

    mineralized = organic * manure.fraction_of_organic_nitrogen_mineralized
    immobilized = tan * manure.fraction_of_organic_nitrogen_immobilized
    tan_stored = tan + mineralized - immobilized
    organic_stored = organic - mineralized + immobilized

    direct_n = excreted * manure.n2o_direct_emission_factor
    volatilized = tan_stored * manure.volatilization_fraction
    leached = excreted * manure.leaching_fraction
    record.tan_available_for_land_application = max(0.0, tan_stored - volatilized)
    record.organic_nitrogen_available_for_land_application = max(
        0.0, organic_stored - leached - direct_n
    )
    record.total_available_manure_nitrogen = (
        record.tan_available_for_land_application
        + record.organic_nitrogen_available_for_land_application
    )

    record.manure_direct_n2o = direct_n * N2O_N_TO_N2O
    record.manure_indirect_n2o = (
        volatilized * manure.emission_factor_volatilization
        + leached * manure.emission_factor_leaching
    ) * N2O_N_TO_N2O

    if manure.fraction_of_nitrogen_in_manure > 0:
        manure_mass = excreted / manure.fraction_of_nitrogen_in_manure
        record.total_amount_of_carbon_in_stored_manure = (
            manure_mass * manure.fraction_of_carbon_in_manure
        )
    if not pasture:
        bedding = housing.user_defined_bedding_rate * head_days
        record.total_amount_of_carbon_in_stored_manure += (
            bedding * housing.total_carbon_kilograms_dry_matter_for_bedding
        )

    intake = period.dry_matter_intake * head_days
    record.enteric_methane = (
        intake * GROSS_ENERGY_OF_FEED * defaults.enteric_methane_conversion_factor
    ) / ENERGY_CONTENT_OF_METHANE
    record.manure_methane = (
        period.volatile_solids
        * head_days
        * manure.methane_producing_capacity_of_manure
        * METHANE_DENSITY
        * manure.methane_conversion_factor
    )

    if pasture:
        record.carbon_uptake_by_grazing_animals = intake * defaults.carbon_fraction_of_dry_matter
    else:
        record.co2_from_manure_spreading = (
            record.total_available_manure_nitrogen * defaults.manure_spreading_emission_factor
        )
    return record


class LivestockResultsCalculator:
    """Monthly calculator for the components of one livestock category."""

    def __init__(self, category: ComponentCategory) -> None:
        if not category.is_animal:
            raise ValueError(f"{category.value} is not a livestock category")
        self.category = category

    def calculate_group(self, group: AnimalGroup, defaults: Defaults) -> AnimalGroupEmissionResults:
        months = [
            calculate_month(period, year, month, days, defaults)
            for period in sorted(group.management_periods, key=lambda p: p.start)
            for year, month, days in period.months()
        ]
        return AnimalGroupEmissionResults(animal_group=group, group_emissions_by_month=months)

    def calculate_results_for_animal_components(
        self, components: Sequence[AnimalComponent], farm: Farm
    ) -> list[AnimalComponentEmissionResults]:
        results = []
        for component in components:
            if component.component_category is not self.category:
                continue
            results.append(
                AnimalComponentEmissionResults(
                    component=component,
                    group_results=[
                        self.calculate_group(group, farm.defaults) for group in component.groups
                    ],
                )
            )
        return results


__all__ = [
    "ENERGY_CONTENT_OF_METHANE",
    "GROSS_ENERGY_OF_FEED",
    "LivestockResultsCalculator",
    "METHANE_DENSITY",
    "calculate_month",
]
