"""farmghg: whole-farm greenhouse gas results pipeline."""

from farmghg.farm.contract import Farm
from farmghg.farm.io import load_farm
from farmghg.initialization import InitializationService
from farmghg.results import EventAggregator, FarmEmissionResults, FarmResultsCalculatedEvent
from farmghg.results.pipeline import FarmResultsService
from farmghg.settings import PipelineSettings, load_settings

__version__ = "0.1.0"

__all__ = [
    "EventAggregator",
    "Farm",
    "FarmEmissionResults",
    "FarmResultsCalculatedEvent",
    "FarmResultsService",
    "InitializationService",
    "PipelineSettings",
    "__version__",
    "load_farm",
    "load_settings",
]
