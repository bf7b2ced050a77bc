"""Default bedding material composition by bedding type and livestock category."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from functools import lru_cache

from farmghg.farm.contract.enums import AnimalType, BeddingMaterialType

from ._tables import read_table


@dataclass(frozen=True)
class BeddingMaterialComposition:
    bedding_material_type: BeddingMaterialType
    animal_type: AnimalType
    total_carbon_kilograms_dry_matter: float
    total_nitrogen_kilograms_dry_matter: float
    total_phosphorus_kilograms_dry_matter: float
    moisture_content: float


@lru_cache(maxsize=1)
def load_bedding_composition_data() -> Sequence[BeddingMaterialComposition]:
    rows = read_table("bedding_composition.csv").to_dict("records")
    return tuple(
        BeddingMaterialComposition(
            bedding_material_type=BeddingMaterialType(row["bedding_material_type"]),
            animal_type=AnimalType(row["animal_type"]),
            total_carbon_kilograms_dry_matter=float(row["total_carbon_kg_dm"]),
            total_nitrogen_kilograms_dry_matter=float(row["total_nitrogen_kg_dm"]),
            total_phosphorus_kilograms_dry_matter=float(row["total_phosphorus_kg_dm"]),
            moisture_content=float(row["moisture_content"]),
        )
        for row in rows
    )


@lru_cache(maxsize=1)
def _bedding_index() -> Mapping[tuple[BeddingMaterialType, AnimalType], BeddingMaterialComposition]:
    return {
        (row.bedding_material_type, row.animal_type): row for row in load_bedding_composition_data()
    }


def get_bedding_composition(
    bedding_material_type: BeddingMaterialType, animal_type: AnimalType
) -> BeddingMaterialComposition | None:
    return _bedding_index().get((bedding_material_type, animal_type.base_type))


__all__ = [
    "BeddingMaterialComposition",
    "load_bedding_composition_data",
    "get_bedding_composition",
]
