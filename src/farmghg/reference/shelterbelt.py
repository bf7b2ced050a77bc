"""Shelterbelt carbon stocks per kilometre of tree row.

Rows are keyed by species, ecodistrict cluster, percent mortality and age, and split into a "past"
and a "future" growth regime at :data:`CUT_YEAR`. Values for intermediate mortality are
interpolated between two tabulated mortality levels.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

from farmghg.farm.contract.enums import HardinessZone, Province, TreeSpecies
from farmghg.interpolation import EpochPartitionedTable, interpolate_between_rows

from ._tables import read_table

logger = logging.getLogger(__name__)

CUT_YEAR = 2016
MAX_AGE = 60


class ShelterbeltColumn(str, Enum):
    """Carbon metrics available in the shelterbelt table (Mg C per km, optionally per year)."""

    DOM_MG_C_KM = "dom_mg_c_km"
    DOM_MG_C_KM_YR = "dom_mg_c_km_yr"
    BIOM_MG_C_KM = "biom_mg_c_km"
    BIOM_MG_C_KM_YR = "biom_mg_c_km_yr"
    TEC_MG_C_KM = "tec_mg_c_km"
    TEC_MG_C_KM_YR = "tec_mg_c_km_yr"


@dataclass(frozen=True)
class ShelterbeltClusterData:
    ecodistrict_id: int
    cluster_id: str
    province: Province


@dataclass(frozen=True)
class ShelterbeltDomProviderData:
    """One tabulated shelterbelt row."""

    epoch: str
    species: TreeSpecies
    cluster_id: str
    percent_mortality: float
    age: int
    tec_mg_c_km_yr: float
    tec_mg_c_km: float
    biom_mg_c_km_yr: float
    biom_mg_c_km: float
    dom_mg_c_km_yr: float
    dom_mg_c_km: float


@lru_cache(maxsize=1)
def load_cluster_lookup() -> Mapping[int, ShelterbeltClusterData]:
    rows = read_table("shelterbelt_ecodistrict_clusters.csv").to_dict("records")
    return {
        int(row["ecodistrict_id"]): ShelterbeltClusterData(
            ecodistrict_id=int(row["ecodistrict_id"]),
            cluster_id=str(row["cluster_id"]),
            province=Province(row["province"]),
        )
        for row in rows
    }


def get_cluster_data(ecodistrict_id: int) -> ShelterbeltClusterData | None:
    return load_cluster_lookup().get(int(ecodistrict_id))


@lru_cache(maxsize=1)
def load_shelterbelt_table() -> EpochPartitionedTable:
    """Return the cached shelterbelt carbon table split at :data:`CUT_YEAR`."""

    return EpochPartitionedTable.from_frame(read_table("shelterbelt_carbon.csv"), cut_year=CUT_YEAR)


def load_shelterbelt_data(year: int) -> Sequence[ShelterbeltDomProviderData]:
    """Return the rows of the regime in force for ``year``."""

    table = load_shelterbelt_table()
    epoch = "future" if year >= table.cut_year else "past"
    return tuple(
        ShelterbeltDomProviderData(
            epoch=epoch,
            species=TreeSpecies(row["species"]),
            cluster_id=str(row["cluster_id"]),
            percent_mortality=float(row["percent_mortality"]),
            age=int(row["age"]),
            tec_mg_c_km_yr=float(row["tec_mg_c_km_yr"]),
            tec_mg_c_km=float(row["tec_mg_c_km"]),
            biom_mg_c_km_yr=float(row["biom_mg_c_km_yr"]),
            biom_mg_c_km=float(row["biom_mg_c_km"]),
            dom_mg_c_km_yr=float(row["dom_mg_c_km_yr"]),
            dom_mg_c_km=float(row["dom_mg_c_km"]),
        )
        for row in table.partition(year).to_dict("records")
    )


def get_interpolated_value(
    species: TreeSpecies,
    hardiness_zone: HardinessZone,
    ecodistrict_id: int,
    percent_mortality: float,
    mortality_low: float,
    mortality_high: float,
    age: int,
    column: ShelterbeltColumn,
    year: int,
) -> float:
    """
    Interpolate a shelterbelt carbon metric for an intermediate mortality level.

    Parameters
    ----------
    species, ecodistrict_id:
        Select the tree species and (through the cluster lookup) the regional dataset.
        ``hardiness_zone`` does not partition the current tables.
    percent_mortality:
        Observed mortality; expected to lie within ``[mortality_low, mortality_high]``.
    mortality_low, mortality_high:
        Tabulated mortality levels bracketing ``percent_mortality``.
    age:
        Shelterbelt age in years; ages above :data:`MAX_AGE` are treated as :data:`MAX_AGE`.
    column:
        Metric to interpolate.
    year:
        Selects the past (``year < CUT_YEAR``) or future regime.

    Returns
    -------
    float
        The interpolated value, or ``0.0`` when the table has no coverage for the request.
    """

    clamped_age = min(int(age), MAX_AGE)
    cluster = get_cluster_data(ecodistrict_id)
    if cluster is None:
        logger.error(
            "No shelterbelt cluster for ecodistrict %s (species=%s); returning 0.",
            ecodistrict_id,
            TreeSpecies(species).value,
        )
        return 0.0

    frame = load_shelterbelt_table().partition(year)
    keys = {"species": species, "cluster_id": cluster.cluster_id, "age": clamped_age}
    value = interpolate_between_rows(
        frame,
        keys,
        bracket_column="percent_mortality",
        low=mortality_low,
        high=mortality_high,
        query=percent_mortality,
        value_column=ShelterbeltColumn(column).value,
    )
    if value is None:
        logger.error(
            "Shelterbelt table has no rows for species=%s cluster=%s age=%s at mortality %s/%s "
            "(year %s, zone %s); returning 0.",
            TreeSpecies(species).value,
            cluster.cluster_id,
            clamped_age,
            mortality_low,
            mortality_high,
            year,
            HardinessZone(hardiness_zone).value,
        )
        return 0.0
    return value


__all__ = [
    "CUT_YEAR",
    "MAX_AGE",
    "ShelterbeltClusterData",
    "ShelterbeltColumn",
    "ShelterbeltDomProviderData",
    "get_cluster_data",
    "get_interpolated_value",
    "load_cluster_lookup",
    "load_shelterbelt_data",
    "load_shelterbelt_table",
]
