"""Default calculators used by the farm results pipeline."""

from .animals import LivestockResultsCalculator, calculate_month
from .base import AnimalResultsCalculator, EconomicsCalculator, FieldResultsCalculator
from .economics import DefaultEconomicsCalculator
from .fields import DefaultFieldResultsCalculator, nitrogen_n2o
from .uncertainty import ExpressionOfUncertainty

__all__ = [
    "AnimalResultsCalculator",
    "DefaultEconomicsCalculator",
    "DefaultFieldResultsCalculator",
    "EconomicsCalculator",
    "ExpressionOfUncertainty",
    "FieldResultsCalculator",
    "LivestockResultsCalculator",
    "calculate_month",
    "nitrogen_n2o",
]
