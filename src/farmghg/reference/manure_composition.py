"""Default manure composition by animal type and manure handling state."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from functools import lru_cache

from farmghg.farm.contract.enums import AnimalType, ManureStateType

from ._tables import read_table


@dataclass(frozen=True)
class ManureCompositionData:
    """Mass fractions of N, C and P in manure (kg kg^-1 wet weight) and moisture (%)."""

    animal_type: AnimalType
    manure_state: ManureStateType
    nitrogen_fraction: float
    carbon_fraction: float
    phosphorus_fraction: float
    moisture_content: float


@lru_cache(maxsize=1)
def load_manure_composition_data() -> Sequence[ManureCompositionData]:
    """Load and cache the manure composition rows."""

    rows = read_table("manure_composition.csv").to_dict("records")
    return tuple(
        ManureCompositionData(
            animal_type=AnimalType(row["animal_type"]),
            manure_state=ManureStateType(row["manure_state"]),
            nitrogen_fraction=float(row["nitrogen_fraction"]),
            carbon_fraction=float(row["carbon_fraction"]),
            phosphorus_fraction=float(row["phosphorus_fraction"]),
            moisture_content=float(row["moisture_content"]),
        )
        for row in rows
    )


@lru_cache(maxsize=1)
def _composition_index() -> Mapping[tuple[AnimalType, ManureStateType], ManureCompositionData]:
    return {(row.animal_type, row.manure_state): row for row in load_manure_composition_data()}


def get_manure_composition(
    animal_type: AnimalType, manure_state: ManureStateType
) -> ManureCompositionData | None:
    """Return the composition for the animal's livestock category, or ``None`` when uncovered."""

    return _composition_index().get((animal_type.base_type, manure_state))


__all__ = ["ManureCompositionData", "load_manure_composition_data", "get_manure_composition"]
