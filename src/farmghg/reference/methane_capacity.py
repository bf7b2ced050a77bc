"""Default methane producing capacity (Bo, m^3 CH4 kg^-1 VS) by animal type."""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache

from farmghg.farm.contract.enums import AnimalType

from ._tables import read_table


@lru_cache(maxsize=1)
def load_methane_producing_capacities() -> Mapping[AnimalType, float]:
    rows = read_table("methane_producing_capacity.csv").to_dict("records")
    return {
        AnimalType(row["animal_type"]): float(row["methane_producing_capacity"]) for row in rows
    }


def get_methane_producing_capacity(animal_type: AnimalType) -> float | None:
    """Return Bo for ``animal_type``, falling back to its livestock category's generic value."""

    capacities = load_methane_producing_capacities()
    if animal_type in capacities:
        return capacities[animal_type]
    return capacities.get(animal_type.base_type)


__all__ = ["load_methane_producing_capacities", "get_methane_producing_capacity"]
