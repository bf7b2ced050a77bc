"""Fractions of manure organic N immobilized, nitrified and mineralized during storage."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache

from farmghg.farm.contract.enums import AnimalType, ManureStateType

from ._tables import read_table


@dataclass(frozen=True)
class MineralizationFractions:
    animal_type: AnimalType
    storage_class: str
    fraction_immobilized: float
    fraction_nitrified: float
    fraction_mineralized: float


@lru_cache(maxsize=1)
def load_mineralization_fractions() -> Mapping[tuple[AnimalType, str], MineralizationFractions]:
    rows = read_table("mineralization_fractions.csv").to_dict("records")
    index: dict[tuple[AnimalType, str], MineralizationFractions] = {}
    for row in rows:
        entry = MineralizationFractions(
            animal_type=AnimalType(row["animal_type"]),
            storage_class=str(row["storage_class"]),
            fraction_immobilized=float(row["fraction_immobilized"]),
            fraction_nitrified=float(row["fraction_nitrified"]),
            fraction_mineralized=float(row["fraction_mineralized"]),
        )
        index[(entry.animal_type, entry.storage_class)] = entry
    return index


def get_mineralization_fractions(
    manure_state: ManureStateType, animal_type: AnimalType
) -> MineralizationFractions | None:
    return load_mineralization_fractions().get((animal_type.base_type, manure_state.storage_class))


__all__ = [
    "MineralizationFractions",
    "load_mineralization_fractions",
    "get_mineralization_fractions",
]
