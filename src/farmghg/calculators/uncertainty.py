"""Combined uncertainty of the net farm emission estimate."""

from __future__ import annotations

import math
from collections.abc import Iterable

from farmghg.results.models import CH4_TO_CO2E, N2O_TO_CO2E, FarmEmissionResults

ENTERIC_METHANE_UNCERTAINTY = 20.0
MANURE_METHANE_UNCERTAINTY = 20.0
MANURE_DIRECT_N2O_UNCERTAINTY = 40.0
MANURE_INDIRECT_N2O_UNCERTAINTY = 60.0
ENERGY_CO2_UNCERTAINTY = 40.0


class ExpressionOfUncertainty:
    """Propagate per-source percentage uncertainties to the farm total."""

    def calculate_uncertainty_associated_with_net_farm_emission_estimate(
        self, estimates: Iterable[tuple[float, float]]
    ) -> float:
        """
        Return ``sqrt(sum((e * u) ** 2)) / sqrt(sum(e ** 2))``.

        Parameters
        ----------
        estimates:
            ``(emission, uncertainty_percent)`` pairs, emissions in a common unit.

        Returns
        -------
        float
            Combined uncertainty (percent); ``0.0`` when every emission is zero.
        """

        numerator = 0.0
        denominator = 0.0
        for emission, uncertainty in estimates:
            numerator += (emission * uncertainty) ** 2
            denominator += emission**2
        if denominator == 0.0:
            return 0.0
        return math.sqrt(numerator) / math.sqrt(denominator)

    def calculate_for_results(self, results: FarmEmissionResults) -> float:
        pairs = [
            (results.total_enteric_methane() * CH4_TO_CO2E, ENTERIC_METHANE_UNCERTAINTY),
            (results.total_manure_methane() * CH4_TO_CO2E, MANURE_METHANE_UNCERTAINTY),
            (results.total_manure_direct_n2o() * N2O_TO_CO2E, MANURE_DIRECT_N2O_UNCERTAINTY),
            (results.total_manure_indirect_n2o() * N2O_TO_CO2E, MANURE_INDIRECT_N2O_UNCERTAINTY),
            (results.farm_energy_results.total_energy_co2, ENERGY_CO2_UNCERTAINTY),
        ]
        return self.calculate_uncertainty_associated_with_net_farm_emission_estimate(pairs)


__all__ = [
    "ENERGY_CO2_UNCERTAINTY",
    "ENTERIC_METHANE_UNCERTAINTY",
    "ExpressionOfUncertainty",
    "MANURE_DIRECT_N2O_UNCERTAINTY",
    "MANURE_INDIRECT_N2O_UNCERTAINTY",
    "MANURE_METHANE_UNCERTAINTY",
]
