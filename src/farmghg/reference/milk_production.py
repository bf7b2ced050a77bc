"""Average milk production of lactating dairy cows by province and year."""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache

from farmghg.core.errors import MissingReferenceDataError
from farmghg.farm.contract.enums import Province

from ._tables import read_table


@lru_cache(maxsize=1)
def load_milk_production_data() -> Mapping[tuple[Province, int], float]:
    """Return a cached mapping of ``(province, year)`` to kg milk / head / day."""

    rows = read_table("milk_production.csv").to_dict("records")
    return {
        (Province(row["province"]), int(row["year"])): float(row["average_milk_production"])
        for row in rows
    }


def get_average_milk_production(province: Province, year: int) -> float:
    """
    Return the average milk production for ``province`` in ``year``.

    Raises
    ------
    MissingReferenceDataError
        The table must cover every province/year a farm can express; a gap is fatal because the
        dairy formulas have no safe fallback.
    """

    data = load_milk_production_data()
    try:
        return data[(province, int(year))]
    except KeyError as exc:
        years = sorted(y for p, y in data if p is province)
        coverage = f"{years[0]}-{years[-1]}" if years else "none"
        raise MissingReferenceDataError(
            f"No milk production data for province {province.value} in {year} "
            f"(coverage {coverage})."
        ) from exc


__all__ = ["load_milk_production_data", "get_average_milk_production"]
