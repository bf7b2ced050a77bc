"""Categorical vocabularies shared by the farm model and the default-data tables."""

from __future__ import annotations

from enum import Enum


class ComponentCategory(str, Enum):
    LAND_MANAGEMENT = "land_management"
    BEEF_PRODUCTION = "beef_production"
    DAIRY = "dairy"
    SWINE = "swine"
    SHEEP = "sheep"
    POULTRY = "poultry"
    OTHER_LIVESTOCK = "other_livestock"

    @property
    def is_animal(self) -> bool:
        return self is not ComponentCategory.LAND_MANAGEMENT

    @property
    def animal_type(self) -> AnimalType:
        """Generic animal type whose manure tank collects this category's manure."""

        try:
            return _CATEGORY_BASE_TYPE[self]
        except KeyError as exc:
            raise ValueError(f"{self.value} is not an animal category") from exc


ANIMAL_COMPONENT_CATEGORIES: tuple[ComponentCategory, ...] = (
    ComponentCategory.BEEF_PRODUCTION,
    ComponentCategory.DAIRY,
    ComponentCategory.SWINE,
    ComponentCategory.SHEEP,
    ComponentCategory.POULTRY,
    ComponentCategory.OTHER_LIVESTOCK,
)


class AnimalType(str, Enum):
    NOT_SELECTED = "not_selected"

    BEEF = "beef"
    BEEF_COW_LACTATING = "beef_cow_lactating"
    BEEF_COW_DRY = "beef_cow_dry"
    BEEF_BULLS = "beef_bulls"
    BEEF_CALF = "beef_calf"
    BEEF_BACKGROUNDER = "beef_backgrounder"
    BEEF_FINISHER = "beef_finisher"

    DAIRY_CATTLE = "dairy_cattle"
    DAIRY_LACTATING_COW = "dairy_lactating_cow"
    DAIRY_DRY_COW = "dairy_dry_cow"
    DAIRY_HEIFERS = "dairy_heifers"
    DAIRY_CALVES = "dairy_calves"
    DAIRY_BULLS = "dairy_bulls"

    SWINE = "swine"
    SWINE_SOWS = "swine_sows"
    SWINE_BOARS = "swine_boars"
    SWINE_PIGLETS = "swine_piglets"
    SWINE_GROWER = "swine_grower"
    SWINE_FINISHER = "swine_finisher"

    SHEEP = "sheep"
    SHEEP_EWES = "sheep_ewes"
    SHEEP_RAMS = "sheep_rams"
    SHEEP_LAMBS = "sheep_lambs"

    POULTRY = "poultry"
    CHICKEN_BROILERS = "chicken_broilers"
    CHICKEN_LAYERS = "chicken_layers"
    TURKEYS = "turkeys"

    OTHER_LIVESTOCK = "other_livestock"
    HORSES = "horses"
    MULES = "mules"
    GOATS = "goats"
    BISON = "bison"
    LLAMAS = "llamas"
    DEER = "deer"

    @property
    def category(self) -> ComponentCategory | None:
        """Livestock category the type belongs to, ``None`` for ``NOT_SELECTED``."""

        return _TYPE_CATEGORY.get(self)

    @property
    def base_type(self) -> AnimalType:
        category = self.category
        if category is None:
            return self
        return category.animal_type


_CATEGORY_BASE_TYPE: dict[ComponentCategory, AnimalType] = {
    ComponentCategory.BEEF_PRODUCTION: AnimalType.BEEF,
    ComponentCategory.DAIRY: AnimalType.DAIRY_CATTLE,
    ComponentCategory.SWINE: AnimalType.SWINE,
    ComponentCategory.SHEEP: AnimalType.SHEEP,
    ComponentCategory.POULTRY: AnimalType.POULTRY,
    ComponentCategory.OTHER_LIVESTOCK: AnimalType.OTHER_LIVESTOCK,
}

_PREFIX_CATEGORY: tuple[tuple[str, ComponentCategory], ...] = (
    ("beef", ComponentCategory.BEEF_PRODUCTION),
    ("dairy", ComponentCategory.DAIRY),
    ("swine", ComponentCategory.SWINE),
    ("sheep", ComponentCategory.SHEEP),
    ("poultry", ComponentCategory.POULTRY),
    ("chicken", ComponentCategory.POULTRY),
    ("turkeys", ComponentCategory.POULTRY),
)

_TYPE_CATEGORY: dict[AnimalType, ComponentCategory] = {}
for _member in AnimalType:
    if _member is AnimalType.NOT_SELECTED:
        continue
    _TYPE_CATEGORY[_member] = next(
        (cat for prefix, cat in _PREFIX_CATEGORY if _member.value.startswith(prefix)),
        ComponentCategory.OTHER_LIVESTOCK,
    )


class HousingType(str, Enum):
    PASTURE = "pasture"
    CONFINED_NO_BARN = "confined_no_barn"
    HOUSED_IN_BARN = "housed_in_barn"
    FREE_STALL_BARN = "free_stall_barn"
    TIE_STALL_BARN = "tie_stall_barn"

    @property
    def is_pasture(self) -> bool:
        return self is HousingType.PASTURE


class ManureStateType(str, Enum):
    PASTURE = "pasture"
    DEEP_BEDDING = "deep_bedding"
    SOLID_STORAGE = "solid_storage"
    COMPOSTED = "composted"
    LIQUID_SLURRY = "liquid_slurry"
    DAILY_SPREAD = "daily_spread"

    @property
    def is_liquid(self) -> bool:
        return self is ManureStateType.LIQUID_SLURRY

    @property
    def storage_class(self) -> str:
        """``"liquid"`` or ``"solid"``; pasture and daily spread count as solid handling."""

        return "liquid" if self.is_liquid else "solid"


class BeddingMaterialType(str, Enum):
    NONE = "none"
    STRAW = "straw"
    WOOD_CHIP = "wood_chip"
    SAWDUST = "sawdust"
    SAND = "sand"


class Province(str, Enum):
    ALBERTA = "AB"
    BRITISH_COLUMBIA = "BC"
    MANITOBA = "MB"
    NEW_BRUNSWICK = "NB"
    NEWFOUNDLAND = "NL"
    NOVA_SCOTIA = "NS"
    ONTARIO = "ON"
    PRINCE_EDWARD_ISLAND = "PE"
    QUEBEC = "QC"
    SASKATCHEWAN = "SK"

    @property
    def region(self) -> str:
        """Coarse region used by the fuel-energy table (``prairie``/``west``/``east``)."""

        if self in (Province.ALBERTA, Province.SASKATCHEWAN, Province.MANITOBA):
            return "prairie"
        if self is Province.BRITISH_COLUMBIA:
            return "west"
        return "east"


class SoilFunctionalCategory(str, Enum):
    BROWN = "brown"
    DARK_BROWN = "dark_brown"
    BLACK = "black"
    EASTERN_CANADA = "eastern_canada"


class TillageType(str, Enum):
    INTENSIVE = "intensive"
    REDUCED = "reduced"
    NO_TILL = "no_till"


class CropType(str, Enum):
    BARLEY = "barley"
    WHEAT = "wheat"
    OATS = "oats"
    CANOLA = "canola"
    CORN = "corn"
    SOYBEANS = "soybeans"
    PEAS = "peas"
    LENTILS = "lentils"
    TAME_GRASS = "tame_grass"
    ALFALFA = "alfalfa"
    RANGELAND = "rangeland"
    SUMMER_FALLOW = "summer_fallow"

    @property
    def is_perennial(self) -> bool:
        return self in (CropType.TAME_GRASS, CropType.ALFALFA, CropType.RANGELAND)

    @property
    def is_fallow(self) -> bool:
        return self is CropType.SUMMER_FALLOW

    @property
    def crop_class(self) -> str:
        if self.is_fallow:
            return "fallow"
        if self.is_perennial:
            return "perennial"
        return "annual"


class ManureLocationSourceType(str, Enum):
    LIVESTOCK = "livestock"
    IMPORTED = "imported"


class TreeSpecies(str, Enum):
    CARAGANA = "caragana"
    GREEN_ASH = "green_ash"
    HYBRID_POPLAR = "hybrid_poplar"
    MANITOBA_MAPLE = "manitoba_maple"
    SCOTS_PINE = "scots_pine"
    WHITE_SPRUCE = "white_spruce"


class HardinessZone(str, Enum):
    ZONE_2A = "2a"
    ZONE_2B = "2b"
    ZONE_3A = "3a"
    ZONE_3B = "3b"
    ZONE_4A = "4a"
    ZONE_4B = "4b"
    ZONE_5A = "5a"
    ZONE_5B = "5b"


__all__ = [
    "ANIMAL_COMPONENT_CATEGORIES",
    "AnimalType",
    "BeddingMaterialType",
    "ComponentCategory",
    "CropType",
    "HardinessZone",
    "HousingType",
    "ManureLocationSourceType",
    "ManureStateType",
    "Province",
    "SoilFunctionalCategory",
    "TillageType",
    "TreeSpecies",
]
