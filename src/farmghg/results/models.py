"""Result records produced by the farm results pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID

from farmghg.core.errors import ManureTankLookupError
from farmghg.farm.contract import (
    ANIMAL_COMPONENT_CATEGORIES,
    AnimalComponent,
    AnimalGroup,
    AnimalType,
    ComponentCategory,
    CropViewItem,
    Farm,
    FieldSystemComponent,
    ManagementPeriod,
)

CH4_TO_CO2E = 25.0
N2O_TO_CO2E = 298.0
N2O_N_TO_N2O = 44.0 / 28.0


@dataclass(slots=True)
class GroupEmissionsByMonth:
    """Monthly nitrogen, carbon and emission totals for one management period.

    Nitrogen and carbon quantities are kg for the whole group over the days of ``month`` that fall
    inside the management period; emissions are kg of the named gas.
    """

    year: int
    month: int
    days_in_month: int
    management_period: ManagementPeriod
    nitrogen_excreted: float = 0.0
    tan_excreted: float = 0.0
    organic_nitrogen_excreted: float = 0.0
    organic_nitrogen_available_for_land_application: float = 0.0
    tan_available_for_land_application: float = 0.0
    total_available_manure_nitrogen: float = 0.0
    total_amount_of_carbon_in_stored_manure: float = 0.0
    enteric_methane: float = 0.0
    manure_methane: float = 0.0
    manure_direct_n2o: float = 0.0
    manure_indirect_n2o: float = 0.0
    carbon_uptake_by_grazing_animals: float = 0.0
    co2_from_manure_spreading: float = 0.0

    @property
    def is_pasture(self) -> bool:
        return self.management_period.housing_details.housing_type.is_pasture


@dataclass(slots=True)
class AnimalGroupEmissionResults:
    animal_group: AnimalGroup
    group_emissions_by_month: list[GroupEmissionsByMonth] = field(default_factory=list)

    @property
    def guid(self) -> UUID:
        return self.animal_group.guid

    def total_carbon_uptake_by_animals(self) -> float:
        return sum(m.carbon_uptake_by_grazing_animals for m in self.group_emissions_by_month)


@dataclass(slots=True)
class AnimalComponentEmissionResults:
    component: AnimalComponent
    group_results: list[AnimalGroupEmissionResults] = field(default_factory=list)

    @property
    def guid(self) -> UUID:
        return self.component.guid

    @property
    def component_category(self) -> ComponentCategory:
        return self.component.component_category

    def months(self) -> list[GroupEmissionsByMonth]:
        return [m for group in self.group_results for m in group.group_emissions_by_month]

    def get_group_results(self, group_guid: UUID) -> AnimalGroupEmissionResults | None:
        return next((g for g in self.group_results if g.guid == group_guid), None)

    def total_enteric_methane(self) -> float:
        return sum(m.enteric_methane for m in self.months())

    def total_manure_methane(self) -> float:
        return sum(m.manure_methane for m in self.months())

    def total_manure_direct_n2o(self) -> float:
        return sum(m.manure_direct_n2o for m in self.months())

    def total_manure_indirect_n2o(self) -> float:
        return sum(m.manure_indirect_n2o for m in self.months())

    def total_co2_from_manure_spreading(self) -> float:
        return sum(m.co2_from_manure_spreading for m in self.months())


@dataclass(slots=True)
class CropEnergyResults:
    """Energy CO2 (kg) of one field-year."""

    crop_view_item: CropViewItem
    fuel_co2: float = 0.0
    herbicide_co2: float = 0.0

    @property
    def total_cropping_energy_emissions(self) -> float:
        return self.fuel_co2 + self.herbicide_co2


@dataclass(slots=True)
class FieldComponentEmissionResults:
    component: FieldSystemComponent
    crop_energy_results: list[CropEnergyResults] = field(default_factory=list)

    @property
    def guid(self) -> UUID:
        return self.component.guid

    def total_cropping_energy_emissions(self) -> float:
        return sum(r.total_cropping_energy_emissions for r in self.crop_energy_results)


@dataclass(slots=True)
class N2OEmissionResults:
    """Direct and indirect N2O (kg N2O) from one nitrogen source on one field-year."""

    source: str
    crop_view_item: CropViewItem
    nitrogen_applied: float = 0.0
    direct_n2o: float = 0.0
    indirect_n2o: float = 0.0

    @property
    def total_n2o(self) -> float:
        return self.direct_n2o + self.indirect_n2o


@dataclass(slots=True)
class FinalFieldResult:
    field_component: FieldSystemComponent
    crop_view_item: CropViewItem
    direct_n2o: float = 0.0
    indirect_n2o: float = 0.0
    cropping_energy_co2: float = 0.0
    carbon_uptake_by_grazing_animals: float = 0.0

    @property
    def year(self) -> int:
        return self.crop_view_item.year


@dataclass(slots=True)
class ManureTank:
    """Nitrogen and carbon available for land application from one livestock category.

    ``nitrogen_sum_of_all_manure_applications_made`` is a debit ledger; the available totals are
    only reduced when the pipeline derives
    ``total_available_manure_nitrogen_after_all_land_applications`` from it.
    """

    component_category: ComponentCategory
    total_organic_nitrogen_available_for_land_application: float = 0.0
    total_tan_available_for_land_application: float = 0.0
    total_amount_of_carbon_in_stored_manure: float = 0.0
    total_available_manure_nitrogen: float = 0.0
    total_available_manure_nitrogen_before_land_applications: float = 0.0
    total_available_manure_nitrogen_after_all_land_applications: float = 0.0
    nitrogen_sum_of_all_manure_applications_made: float = 0.0

    @property
    def animal_type(self) -> AnimalType:
        return self.component_category.animal_type

    def reset(self) -> None:
        self.total_organic_nitrogen_available_for_land_application = 0.0
        self.total_tan_available_for_land_application = 0.0
        self.total_amount_of_carbon_in_stored_manure = 0.0
        self.total_available_manure_nitrogen = 0.0
        self.total_available_manure_nitrogen_before_land_applications = 0.0
        self.total_available_manure_nitrogen_after_all_land_applications = 0.0
        self.nitrogen_sum_of_all_manure_applications_made = 0.0

    @property
    def is_over_applied(self) -> bool:
        return (
            self.nitrogen_sum_of_all_manure_applications_made
            > self.total_available_manure_nitrogen_before_land_applications
        )


def _default_tanks() -> list[ManureTank]:
    return [ManureTank(component_category=category) for category in ANIMAL_COMPONENT_CATEGORIES]


@dataclass(slots=True)
class FarmEnergyResults:
    total_co2_from_manure_spreading: float = 0.0
    total_cropping_energy_emissions: float = 0.0

    @property
    def total_energy_co2(self) -> float:
        return self.total_co2_from_manure_spreading + self.total_cropping_energy_emissions


@dataclass(slots=True)
class EconomicsResult:
    field_name: str
    crop_view_item: CropViewItem
    revenue: float = 0.0
    cost: float = 0.0

    @property
    def profit(self) -> float:
        return self.revenue - self.cost


@dataclass(slots=True)
class FarmEmissionResults:
    """Everything computed for one farm in one pipeline run."""

    farm: Farm | None = None
    field_component_emission_results: list[FieldComponentEmissionResults] = field(
        default_factory=list
    )
    animal_component_emission_results: list[AnimalComponentEmissionResults] = field(
        default_factory=list
    )
    mineral_n2o_emission_results: list[N2OEmissionResults] = field(default_factory=list)
    manure_n2o_emission_results: list[N2OEmissionResults] = field(default_factory=list)
    final_field_results: list[FinalFieldResult] = field(default_factory=list)
    manure_tanks: list[ManureTank] = field(default_factory=_default_tanks)
    farm_energy_results: FarmEnergyResults = field(default_factory=FarmEnergyResults)
    economics_results: list[EconomicsResult] = field(default_factory=list)
    economics_profit: float = 0.0
    uncertainty: float = 0.0

    @property
    def is_empty(self) -> bool:
        return not (self.field_component_emission_results or self.animal_component_emission_results)

    def get_manure_tank_by_animal_type(self, animal_type: AnimalType) -> ManureTank:
        """
        Return the tank collecting manure of ``animal_type``'s livestock category.

        Raises
        ------
        ManureTankLookupError
            If the animal type belongs to no livestock category.
        """

        category = animal_type.category
        for tank in self.manure_tanks:
            if category is not None and tank.component_category is category:
                return tank
        raise ManureTankLookupError(f"No manure tank for animal type '{animal_type.value}'")

    def animal_results_for_category(
        self, category: ComponentCategory
    ) -> list[AnimalComponentEmissionResults]:
        return [
            r for r in self.animal_component_emission_results if r.component_category is category
        ]

    def total_enteric_methane(self) -> float:
        return sum(r.total_enteric_methane() for r in self.animal_component_emission_results)

    def total_manure_methane(self) -> float:
        return sum(r.total_manure_methane() for r in self.animal_component_emission_results)

    def total_manure_direct_n2o(self) -> float:
        return sum(r.total_manure_direct_n2o() for r in self.animal_component_emission_results)

    def total_manure_indirect_n2o(self) -> float:
        return sum(r.total_manure_indirect_n2o() for r in self.animal_component_emission_results)

    def total_field_direct_n2o(self) -> float:
        return sum(r.direct_n2o for r in self.final_field_results)

    def total_field_indirect_n2o(self) -> float:
        return sum(r.indirect_n2o for r in self.final_field_results)

    def total_co2e(self) -> float:
        methane = self.total_enteric_methane() + self.total_manure_methane()
        n2o = (
            self.total_manure_direct_n2o()
            + self.total_manure_indirect_n2o()
            + self.total_field_direct_n2o()
            + self.total_field_indirect_n2o()
        )
        return methane * CH4_TO_CO2E + n2o * N2O_TO_CO2E + self.farm_energy_results.total_energy_co2

    def summary_metrics(self) -> dict[str, float]:
        return {
            "enteric_ch4_kg": self.total_enteric_methane(),
            "manure_ch4_kg": self.total_manure_methane(),
            "manure_direct_n2o_kg": self.total_manure_direct_n2o(),
            "manure_indirect_n2o_kg": self.total_manure_indirect_n2o(),
            "field_direct_n2o_kg": self.total_field_direct_n2o(),
            "field_indirect_n2o_kg": self.total_field_indirect_n2o(),
            "energy_co2_kg": self.farm_energy_results.total_energy_co2,
            "total_co2e_kg": self.total_co2e(),
            "profit": self.economics_profit,
            "uncertainty_percent": self.uncertainty,
        }

    def __str__(self) -> str:
        name = self.farm.name if self.farm is not None else "<no farm>"
        lines = [f"Farm emission results for '{name}'"]
        for key, value in self.summary_metrics().items():
            lines.append(f"  {key}: {value:.3f}")
        for tank in self.manure_tanks:
            if tank.total_available_manure_nitrogen_before_land_applications <= 0:
                continue
            lines.append(
                f"  tank[{tank.component_category.value}]: "
                f"before={tank.total_available_manure_nitrogen_before_land_applications:.3f} "
                f"applied={tank.nitrogen_sum_of_all_manure_applications_made:.3f} "
                f"after={tank.total_available_manure_nitrogen_after_all_land_applications:.3f}"
            )
        return "\n".join(lines)


__all__ = [
    "AnimalComponentEmissionResults",
    "AnimalGroupEmissionResults",
    "CH4_TO_CO2E",
    "CropEnergyResults",
    "EconomicsResult",
    "FarmEmissionResults",
    "FarmEnergyResults",
    "FieldComponentEmissionResults",
    "FinalFieldResult",
    "GroupEmissionsByMonth",
    "ManureTank",
    "N2OEmissionResults",
    "N2O_N_TO_N2O",
    "N2O_TO_CO2E",
]
