"""Farm results pipeline: field, animal, N2O, grazing, tanks, energy and economics stages."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Iterator, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from pathlib import Path
from uuid import uuid4

from farmghg.calculators import (
    AnimalResultsCalculator,
    DefaultEconomicsCalculator,
    DefaultFieldResultsCalculator,
    EconomicsCalculator,
    ExpressionOfUncertainty,
    FieldResultsCalculator,
    LivestockResultsCalculator,
)
from farmghg.farm.contract import ANIMAL_COMPONENT_CATEGORIES, ComponentCategory, Farm
from farmghg.reference import load_bedding_composition_data, load_manure_composition_data
from farmghg.settings import PipelineSettings
from farmghg.telemetry import PipelineRunLogger

from .events import EventAggregator, FarmResultsCalculatedEvent
from .manure_tanks import (
    derive_available_after_applications,
    initialize_all_manure_tanks,
    set_starting_state_of_manure_tank,
    update_manure_tanks_from_user_defined_manure_applications,
)
from .models import (
    AnimalComponentEmissionResults,
    FarmEmissionResults,
    FarmEnergyResults,
    ManureTank,
)

logger = logging.getLogger(__name__)


@contextmanager
def _stage(run: PipelineRunLogger | None, name: str) -> Iterator[None]:
    start = time.perf_counter()
    try:
        yield
    finally:
        if run is not None:
            run.record_stage(name, time.perf_counter() - start)


class FarmResultsService:
    """
    Compute :class:`FarmEmissionResults` for farms and cache them per farm instance.

    Parameters
    ----------
    field_calculator:
        Field energy, N2O and per field-year results. Defaults to
        :class:`~farmghg.calculators.DefaultFieldResultsCalculator`.
    animal_calculators:
        Calculator per livestock category; categories left out use
        :class:`~farmghg.calculators.LivestockResultsCalculator`.
    economics_calculator:
        Crop revenue/cost calculator.
    events:
        Aggregator receiving a :class:`FarmResultsCalculatedEvent` after each computed run.
    settings:
        Cache, parallelism, telemetry and logging options.
    """

    def __init__(
        self,
        field_calculator: FieldResultsCalculator | None = None,
        animal_calculators: Mapping[ComponentCategory, AnimalResultsCalculator] | None = None,
        economics_calculator: EconomicsCalculator | None = None,
        events: EventAggregator | None = None,
        settings: PipelineSettings | None = None,
    ) -> None:
        self.field_calculator = field_calculator or DefaultFieldResultsCalculator()
        calculators = dict(animal_calculators or {})
        for category in ANIMAL_COMPONENT_CATEGORIES:
            calculators.setdefault(category, LivestockResultsCalculator(category))
        self.animal_calculators: dict[ComponentCategory, AnimalResultsCalculator] = calculators
        self.economics_calculator = economics_calculator or DefaultEconomicsCalculator()
        self.events = events or EventAggregator()
        self.settings = settings or PipelineSettings()
        self.uncertainty = ExpressionOfUncertainty()
        self._cache: dict[int, tuple[Farm, FarmEmissionResults]] = {}
        self._cache_lock = threading.Lock()

    def calculate_farm_emission_results(self, farm: Farm) -> FarmEmissionResults:
        if farm.polygon_id == 0:
            logger.warning("Farm %s has no polygon id; returning empty results", farm.name)
            return FarmEmissionResults(farm=farm)

        log_path = self.settings.telemetry_log
        cached = self._cached_results(farm)
        if cached is not None:
            logger.info("Returning cached results for farm %s", farm.name)
            if log_path is not None:
                with self._run_logger(farm, log_path) as run:
                    run.finalize(metrics=cached.summary_metrics(), cached=True)
            return cached

        logger.info("Calculating results for farm %s", farm.name)
        if log_path is not None:
            with self._run_logger(farm, log_path) as run:
                results = self._compute(farm, run)
                run.finalize(metrics=results.summary_metrics())
        else:
            results = self._compute(farm, None)

        if self.settings.cache_results:
            with self._cache_lock:
                self._cache[id(farm)] = (farm, results)
        farm.results_calculated = True
        self.events.publish(FarmResultsCalculatedEvent(farm_emission_results=results))
        if self.settings.log_summary:
            logger.info("%s", results)
        return results

    def calculate_farm_emission_results_for_farms(
        self, farms: Sequence[Farm]
    ) -> list[FarmEmissionResults]:
        max_workers = self.settings.max_workers
        if max_workers is None or max_workers <= 1 or len(farms) <= 1:
            return [self.calculate_farm_emission_results(farm) for farm in farms]
        unique = list({id(farm): farm for farm in farms}.values())
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            computed = dict(
                zip(
                    (id(farm) for farm in unique),
                    executor.map(self.calculate_farm_emission_results, unique),
                )
            )
        return [computed[id(farm)] for farm in farms]

    def calculate_carbon_lost_by_grazing_animals(self, results: FarmEmissionResults) -> None:
        """Write each field-year's grazing carbon uptake from the groups that grazed it.

        Grazing records pointing at components or groups absent from ``results`` add nothing.
        """

        if results.farm is None:
            return
        by_component = {r.guid: r for r in results.animal_component_emission_results}
        for component in results.farm.field_system_components:
            for item in component.crop_view_items:
                total = 0.0
                for grazing in item.grazing_view_items:
                    component_results = by_component.get(grazing.animal_component_guid)
                    if component_results is None:
                        continue
                    group_results = component_results.get_group_results(grazing.animal_group_guid)
                    if group_results is None:
                        continue
                    total += group_results.total_carbon_uptake_by_animals()
                item.total_carbon_uptake_by_grazing_animals = total

    def update_storage_tanks(self, results: FarmEmissionResults) -> None:
        self.initialize_all_manure_tanks(results)
        self.update_manure_tanks_from_user_defined_manure_applications(results)
        derive_available_after_applications(results)

    def initialize_all_manure_tanks(self, results: FarmEmissionResults) -> None:
        initialize_all_manure_tanks(results)

    def set_starting_state_of_manure_tank(
        self, tank: ManureTank, component_results: Sequence[AnimalComponentEmissionResults]
    ) -> None:
        set_starting_state_of_manure_tank(tank, component_results)

    def update_manure_tanks_from_user_defined_manure_applications(
        self, results: FarmEmissionResults
    ) -> None:
        update_manure_tanks_from_user_defined_manure_applications(results)

    def invalidate(self, farm: Farm) -> None:
        farm.mark_modified()
        with self._cache_lock:
            self._cache.pop(id(farm), None)

    def clear_cache(self) -> None:
        with self._cache_lock:
            self._cache.clear()

    def create_farm(self, name: str = "Farm", polygon_id: int = 0) -> Farm:
        return Farm(
            name=name,
            polygon_id=polygon_id,
            default_manure_composition_data=list(load_manure_composition_data()),
            default_bedding_composition_data=list(load_bedding_composition_data()),
        )

    def replicate_farm(self, farm: Farm) -> Farm:
        """Deep copy ``farm`` under a new guid; the copy has no calculated results."""

        replica = farm.model_copy(deep=True)
        replica.guid = uuid4()
        replica.results_calculated = False
        return replica

    def replicate_farms(self, farms: Sequence[Farm]) -> list[Farm]:
        return [self.replicate_farm(farm) for farm in farms]

    def _cached_results(self, farm: Farm) -> FarmEmissionResults | None:
        if not farm.results_calculated:
            with self._cache_lock:
                self._cache.pop(id(farm), None)
            return None
        with self._cache_lock:
            entry = self._cache.get(id(farm))
        if entry is None or entry[0] is not farm:
            return None
        return entry[1]

    def _run_logger(self, farm: Farm, log_path: Path) -> PipelineRunLogger:
        return PipelineRunLogger(log_path=log_path, farm=farm.name, polygon_id=farm.polygon_id)

    def _compute(self, farm: Farm, run: PipelineRunLogger | None) -> FarmEmissionResults:
        results = FarmEmissionResults(farm=farm)

        with _stage(run, "field_results"):
            results.field_component_emission_results = (
                self.field_calculator.calculate_field_results(farm)
            )
        with _stage(run, "animal_results"):
            for category in ANIMAL_COMPONENT_CATEGORIES:
                calculator = self.animal_calculators[category]
                results.animal_component_emission_results.extend(
                    calculator.calculate_results_for_animal_components(
                        farm.components_for_category(category), farm
                    )
                )
        with _stage(run, "n2o"):
            results.mineral_n2o_emission_results = self.field_calculator.calculate_mineral_n2o(
                results
            )
            results.manure_n2o_emission_results = self.field_calculator.calculate_manure_n2o(
                results
            )
        with _stage(run, "grazing"):
            self.calculate_carbon_lost_by_grazing_animals(results)
        with _stage(run, "final_field_results"):
            results.final_field_results = self.field_calculator.calculate_final_results(results)
        with _stage(run, "manure_tanks"):
            self.update_storage_tanks(results)
        with _stage(run, "energy"):
            results.farm_energy_results = FarmEnergyResults(
                total_co2_from_manure_spreading=sum(
                    r.total_co2_from_manure_spreading()
                    for r in results.animal_component_emission_results
                ),
                total_cropping_energy_emissions=sum(
                    r.total_cropping_energy_emissions()
                    for r in results.field_component_emission_results
                ),
            )
        with _stage(run, "economics"):
            results.economics_results = self.economics_calculator.calculate_crop_results(farm)
            results.economics_profit = self.economics_calculator.get_total_profit(
                results.economics_results
            )
        results.uncertainty = self.uncertainty.calculate_for_results(results)
        return results


__all__ = ["FarmResultsService"]
