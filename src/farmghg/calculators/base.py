"""Interfaces of the calculators the results pipeline delegates to."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from farmghg.farm.contract import AnimalComponent, Farm
from farmghg.results.models import (
    AnimalComponentEmissionResults,
    EconomicsResult,
    FarmEmissionResults,
    FieldComponentEmissionResults,
    FinalFieldResult,
    N2OEmissionResults,
)


class FieldResultsCalculator(Protocol):
    """Field-side calculations, run before and after the animal stage."""

    def calculate_field_results(self, farm: Farm) -> list[FieldComponentEmissionResults]:
        """Return energy results for every field component."""

    def calculate_mineral_n2o(self, results: FarmEmissionResults) -> list[N2OEmissionResults]:
        """Return N2O from synthetic fertilizer given the field and animal results so far."""

    def calculate_manure_n2o(self, results: FarmEmissionResults) -> list[N2OEmissionResults]:
        """Return N2O from land-applied manure given the field and animal results so far."""

    def calculate_final_results(self, results: FarmEmissionResults) -> list[FinalFieldResult]:
        """Return per-field, per-year results once grazing uptake has been written back."""


class AnimalResultsCalculator(Protocol):
    """Monthly emissions of the animal components of one livestock category."""

    def calculate_results_for_animal_components(
        self, components: Sequence[AnimalComponent], farm: Farm
    ) -> list[AnimalComponentEmissionResults]:
        """Return one result per component."""


class EconomicsCalculator(Protocol):
    def calculate_crop_results(self, farm: Farm) -> list[EconomicsResult]:
        """Return revenue and cost per field-year."""

    def get_total_profit(self, items: Sequence[EconomicsResult]) -> float:
        """Return the summed profit of ``items``."""


__all__ = ["AnimalResultsCalculator", "EconomicsCalculator", "FieldResultsCalculator"]
