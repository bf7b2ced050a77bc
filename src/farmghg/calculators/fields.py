"""Default field calculator: cropping energy, fertilizer and manure N2O, per field-year results."""

from __future__ import annotations

from uuid import UUID

from farmghg.farm.contract import CropViewItem, Defaults, Farm
from farmghg.results.models import (
    N2O_N_TO_N2O,
    CropEnergyResults,
    FarmEmissionResults,
    FieldComponentEmissionResults,
    FinalFieldResult,
    N2OEmissionResults,
)


def nitrogen_n2o(
    source: str, item: CropViewItem, nitrogen_applied: float, defaults: Defaults
) -> N2OEmissionResults:
    """Tier-1 direct and indirect N2O (kg N2O) for ``nitrogen_applied`` kg N."""

    direct = nitrogen_applied * defaults.synthetic_n2o_emission_factor
    indirect = (
        nitrogen_applied
        * defaults.synthetic_volatilization_fraction
        * defaults.emission_factor_volatilization
        + nitrogen_applied * defaults.leaching_fraction * defaults.emission_factor_leaching
    )
    return N2OEmissionResults(
        source=source,
        crop_view_item=item,
        nitrogen_applied=nitrogen_applied,
        direct_n2o=direct * N2O_N_TO_N2O,
        indirect_n2o=indirect * N2O_N_TO_N2O,
    )


def _require_farm(results: FarmEmissionResults) -> Farm:
    if results.farm is None:
        raise ValueError("Field N2O requires results bound to a farm")
    return results.farm


class DefaultFieldResultsCalculator:
    def calculate_field_results(self, farm: Farm) -> list[FieldComponentEmissionResults]:
        defaults = farm.defaults
        results = []
        for component in farm.field_system_components:
            energy = [
                CropEnergyResults(
                    crop_view_item=item,
                    fuel_co2=item.fuel_energy * item.area * defaults.diesel_emission_factor,
                    herbicide_co2=(
                        item.herbicide_energy * item.area * defaults.herbicide_emission_factor
                    ),
                )
                for item in component.crop_view_items
            ]
            results.append(
                FieldComponentEmissionResults(component=component, crop_energy_results=energy)
            )
        return results

    def calculate_mineral_n2o(self, results: FarmEmissionResults) -> list[N2OEmissionResults]:
        farm = _require_farm(results)
        return [
            nitrogen_n2o("mineral", energy.crop_view_item, _mineral_nitrogen(energy), farm.defaults)
            for field_results in results.field_component_emission_results
            for energy in field_results.crop_energy_results
        ]

    def calculate_manure_n2o(self, results: FarmEmissionResults) -> list[N2OEmissionResults]:
        farm = _require_farm(results)
        emissions = []
        for field_results in results.field_component_emission_results:
            for energy in field_results.crop_energy_results:
                item = energy.crop_view_item
                applied = sum(
                    application.amount_of_nitrogen_applied_per_hectare * item.area
                    for application in item.manure_application_view_items
                )
                if applied > 0:
                    emissions.append(nitrogen_n2o("manure", item, applied, farm.defaults))
        return emissions

    def calculate_final_results(self, results: FarmEmissionResults) -> list[FinalFieldResult]:
        n2o_by_item: dict[UUID, tuple[float, float]] = {}
        for n2o in (*results.mineral_n2o_emission_results, *results.manure_n2o_emission_results):
            direct, indirect = n2o_by_item.get(n2o.crop_view_item.guid, (0.0, 0.0))
            n2o_by_item[n2o.crop_view_item.guid] = (
                direct + n2o.direct_n2o,
                indirect + n2o.indirect_n2o,
            )

        final = []
        for field_results in results.field_component_emission_results:
            for energy in field_results.crop_energy_results:
                item = energy.crop_view_item
                direct, indirect = n2o_by_item.get(item.guid, (0.0, 0.0))
                final.append(
                    FinalFieldResult(
                        field_component=field_results.component,
                        crop_view_item=item,
                        direct_n2o=direct,
                        indirect_n2o=indirect,
                        cropping_energy_co2=energy.total_cropping_energy_emissions,
                        carbon_uptake_by_grazing_animals=(
                            item.total_carbon_uptake_by_grazing_animals
                        ),
                    )
                )
        return final


def _mineral_nitrogen(energy: CropEnergyResults) -> float:
    item = energy.crop_view_item
    return item.nitrogen_fertilizer_rate * item.area


__all__ = ["DefaultFieldResultsCalculator", "nitrogen_n2o"]
