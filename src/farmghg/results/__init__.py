"""Result records, manure tank accounting and result notifications.

The orchestrating :class:`~farmghg.results.pipeline.FarmResultsService` lives in
``farmghg.results.pipeline`` and is re-exported from :mod:`farmghg`.
"""

from .events import EventAggregator, FarmResultsCalculatedEvent
from .manure_tanks import (
    derive_available_after_applications,
    initialize_all_manure_tanks,
    set_starting_state_of_manure_tank,
    update_manure_tanks_from_user_defined_manure_applications,
)
from .models import (
    AnimalComponentEmissionResults,
    AnimalGroupEmissionResults,
    CropEnergyResults,
    EconomicsResult,
    FarmEmissionResults,
    FarmEnergyResults,
    FieldComponentEmissionResults,
    FinalFieldResult,
    GroupEmissionsByMonth,
    ManureTank,
    N2OEmissionResults,
)

__all__ = [
    "AnimalComponentEmissionResults",
    "AnimalGroupEmissionResults",
    "CropEnergyResults",
    "EconomicsResult",
    "EventAggregator",
    "FarmEmissionResults",
    "FarmEnergyResults",
    "FarmResultsCalculatedEvent",
    "FieldComponentEmissionResults",
    "FinalFieldResult",
    "GroupEmissionsByMonth",
    "ManureTank",
    "N2OEmissionResults",
    "derive_available_after_applications",
    "initialize_all_manure_tanks",
    "set_starting_state_of_manure_tank",
    "update_manure_tanks_from_user_defined_manure_applications",
]
