"""Farm contract models (Pydantic schemas, validators, enums)."""

from .enums import (
    ANIMAL_COMPONENT_CATEGORIES,
    AnimalType,
    BeddingMaterialType,
    ComponentCategory,
    CropType,
    HardinessZone,
    HousingType,
    ManureLocationSourceType,
    ManureStateType,
    Province,
    SoilFunctionalCategory,
    TillageType,
    TreeSpecies,
)
from .models import (
    AnimalComponent,
    AnimalGroup,
    BarnTemperatureData,
    ClimateData,
    Component,
    CropViewItem,
    Defaults,
    Farm,
    FieldSystemComponent,
    FieldSystemDetailsStageState,
    GeographicData,
    GrazingViewItem,
    HousingDetails,
    ManagementPeriod,
    ManureApplicationViewItem,
    ManureDetails,
    SoilData,
)

__all__ = [
    "ANIMAL_COMPONENT_CATEGORIES",
    "AnimalComponent",
    "AnimalGroup",
    "AnimalType",
    "BarnTemperatureData",
    "BeddingMaterialType",
    "ClimateData",
    "Component",
    "ComponentCategory",
    "CropType",
    "CropViewItem",
    "Defaults",
    "Farm",
    "FieldSystemComponent",
    "FieldSystemDetailsStageState",
    "GeographicData",
    "GrazingViewItem",
    "HardinessZone",
    "HousingDetails",
    "HousingType",
    "ManagementPeriod",
    "ManureApplicationViewItem",
    "ManureDetails",
    "ManureLocationSourceType",
    "ManureStateType",
    "Province",
    "SoilData",
    "SoilFunctionalCategory",
    "TillageType",
    "TreeSpecies",
]
