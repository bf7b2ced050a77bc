"""Manure tank accounting: reset from animal results, then debit user-defined applications."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from farmghg.farm.contract import ANIMAL_COMPONENT_CATEGORIES, AnimalType, ManureLocationSourceType

from .models import AnimalComponentEmissionResults, FarmEmissionResults, ManureTank

logger = logging.getLogger(__name__)


def set_starting_state_of_manure_tank(
    tank: ManureTank, component_results: Iterable[AnimalComponentEmissionResults]
) -> None:
    """Reset ``tank`` to the manure collected by ``component_results``.

    Months spent on pasture are skipped; that manure is deposited on the field and never stored.
    """

    tank.reset()
    for component in component_results:
        for month in component.months():
            if month.is_pasture:
                continue
            tank.total_organic_nitrogen_available_for_land_application += (
                month.organic_nitrogen_available_for_land_application
            )
            tank.total_tan_available_for_land_application += (
                month.tan_available_for_land_application
            )
            tank.total_amount_of_carbon_in_stored_manure += (
                month.total_amount_of_carbon_in_stored_manure
            )
            tank.total_available_manure_nitrogen += month.total_available_manure_nitrogen

    baseline = tank.total_available_manure_nitrogen
    tank.total_available_manure_nitrogen_before_land_applications = baseline
    tank.total_available_manure_nitrogen_after_all_land_applications = baseline


def initialize_all_manure_tanks(results: FarmEmissionResults) -> None:
    for category in ANIMAL_COMPONENT_CATEGORIES:
        tank = results.get_manure_tank_by_animal_type(category.animal_type)
        set_starting_state_of_manure_tank(tank, results.animal_results_for_category(category))


def update_manure_tanks_from_user_defined_manure_applications(results: FarmEmissionResults) -> None:
    """Add every owned-livestock application on each field's current year to its tank ledger.

    Imported manure and applications without an animal type are skipped.
    """

    if results.farm is None:
        return
    for component in results.farm.field_system_components:
        item = component.get_single_year_view_item()
        if item is None:
            continue
        for application in item.manure_application_view_items:
            if application.manure_location_source_type is ManureLocationSourceType.IMPORTED:
                continue
            if application.animal_type is AnimalType.NOT_SELECTED:
                continue
            tank = results.get_manure_tank_by_animal_type(application.animal_type)
            applied = application.amount_of_nitrogen_applied_per_hectare * item.area
            tank.nitrogen_sum_of_all_manure_applications_made += applied


def derive_available_after_applications(results: FarmEmissionResults) -> None:
    for tank in results.manure_tanks:
        before = tank.total_available_manure_nitrogen_before_land_applications
        applied = tank.nitrogen_sum_of_all_manure_applications_made
        if tank.is_over_applied:
            logger.warning(
                "Manure tank %s: %.3f kg N applied exceeds %.3f kg N available",
                tank.component_category.value,
                applied,
                before,
            )
        remaining = max(0.0, before - applied)
        tank.total_available_manure_nitrogen_after_all_land_applications = remaining


__all__ = [
    "derive_available_after_applications",
    "initialize_all_manure_tanks",
    "set_starting_state_of_manure_tank",
    "update_manure_tanks_from_user_defined_manure_applications",
]
